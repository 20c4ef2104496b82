import sys
import time
from typing import Iterable, Optional

from tqdm import tqdm

from .records import Jump, Link, Path, Walk, read_gfa_line_by_line
from .utils import canonical_edge, log_action


class CoverageSet:
    """
    Segments and edges used by the retained paths and walks of a graph.
    Edges are stored as canonical biedges, separately for links and jumps.
    """
    def __init__(self,
                 segments: Iterable[str] = (),
                 links: Iterable[tuple[str, str]] = (),
                 jumps: Iterable[tuple[str, str]] = ()
                 ):
        self.segments = frozenset(segments)
        self.links = frozenset(canonical_edge(e) for e in links)
        self.jumps = frozenset(canonical_edge(e) for e in jumps)

    def __eq__(self, other):
        if not isinstance(other, CoverageSet):
            return NotImplemented
        return (self.segments, self.links, self.jumps) == (other.segments, other.links, other.jumps)

    def __repr__(self):
        return (f'CoverageSet(segments={len(self.segments)}, '
                f'links={len(self.links)}, jumps={len(self.jumps)})')

    def covers_segment(self, segment_id: str) -> bool:
        return segment_id in self.segments

    def covers_link(self, edge: tuple[str, str]) -> bool:
        return canonical_edge(edge) in self.links

    def covers_jump(self, edge: tuple[str, str]) -> bool:
        return canonical_edge(edge) in self.jumps

    @classmethod
    def from_records(cls, records: Iterable, keep_list: Optional[set[str]] = None):
        """
        Computes coverage from an iterable of parsed records, in any order.
        :param records: records as returned by parse_line
        :param keep_list: if given, only paths with these names contribute; walks always contribute
        """
        segments = set()
        traversed_edges = set()
        link_edges = set()
        jump_edges = set()

        for record in records:
            if isinstance(record, Link):
                link_edges.add(canonical_edge(record.edge))
            elif isinstance(record, Jump):
                jump_edges.add(canonical_edge(record.edge))
            elif isinstance(record, (Path, Walk)):
                if not contributes_coverage(record, keep_list):
                    continue
                walk = record.steps
                segments.update(node[:-1] for node in walk)
                for u, v in zip(walk[:-1], walk[1:]):
                    traversed_edges.add(canonical_edge((u, v)))

        # An edge is covered only if the graph declares it
        return cls(segments, traversed_edges & link_edges, traversed_edges & jump_edges)


def contributes_coverage(record, keep_list: Optional[set[str]]) -> bool:
    if keep_list is None or isinstance(record, Walk):
        return True
    return record.name in keep_list

def collect_coverage(gfa_file: str,
                     keep_list: Optional[set[str]] = None,
                     compressed: bool = False,
                     verbose: bool = True,
                     log_path: str = None
                     ) -> CoverageSet:
    """
    First pass over a .gfa file: computes which segments, links and jumps are traversed.
    :param gfa_file: path to the .gfa file
    :param keep_list: names of the paths to keep; None keeps all paths
    :param compressed: set to True in order to read a gzipped .gfa file
    :param verbose: print progress to stderr
    :param log_path: if given, append the time and memory used by this pass
    """
    start_time = time.time()
    if verbose:
        print("Computing coverage", file=sys.stderr)

    records = read_gfa_line_by_line(gfa_file, compressed=compressed)
    coverage = CoverageSet.from_records(tqdm(records, unit=' lines', disable=not verbose), keep_list)

    if verbose:
        print("Num of covered segments:", len(coverage.segments), file=sys.stderr)
        print("Num of covered links:", len(coverage.links), file=sys.stderr)
        print("Num of covered jumps:", len(coverage.jumps), file=sys.stderr)
    if log_path:
        log_action(log_path, start_time, f"Computing coverage: {gfa_file}")

    return coverage
