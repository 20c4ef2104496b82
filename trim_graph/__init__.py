from .coverage import CoverageSet, collect_coverage
from .records import MalformedRecordError, parse_line, read_gfa_line_by_line
from .trim import trim_gfa
from .utils import read_keep_list, node_complement, edge_complement, canonical_edge

__version__ = "0.1.0"

__all__ = [
    'CoverageSet',
    'MalformedRecordError',
    'collect_coverage',
    'parse_line',
    'read_gfa_line_by_line',
    'read_keep_list',
    'trim_gfa',
    'node_complement',
    'edge_complement',
    'canonical_edge'
]
