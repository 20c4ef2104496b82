from setuptools import setup, find_packages

setup(
    name="trim_graph",
    version="0.1.0",
    packages=find_packages(exclude=["Tests"]),
    install_requires=[
        "tqdm",
        "psutil"
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'trim_graph=trim_graph.cli:main',
        ],
    },
    author="",
    author_email="",
    description="Remove the segments, links and jumps of a GFA file that are not used by its paths and walks",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    python_requires=">=3.9",
)
