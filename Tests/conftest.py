import pytest


EXAMPLE_GFA = '\n'.join([
    'H\tVN:Z:1.2',
    'S\tS1\tACGT',
    'S\tS2\tTA',
    'S\tS3\tGGC',
    'L\tS1\t+\tS2\t+\t0M',
    'J\tS2\t+\tS3\t+\t*',
    'P\tP1\tS1+,S2+\t*',
]) + '\n'


@pytest.fixture
def write_gfa(tmp_path):
    def _write(content, name='graph.gfa'):
        path = tmp_path / name
        path.write_text(content)
        return str(path)
    return _write
