import os
import sys
import tempfile
import time
from collections import Counter
from typing import Iterable, Optional, TextIO

from tqdm import tqdm

from .coverage import CoverageSet, collect_coverage
from .records import Jump, Link, Path, Segment, Walk, read_gfa_line_by_line
from .utils import log_action


def is_retained(record,
                coverage: CoverageSet,
                keep_list: Optional[set[str]] = None,
                ignore_segments: bool = False,
                ignore_links: bool = False,
                ignore_jumps: bool = False
                ) -> bool:
    """
    Decides whether a record is written to the trimmed graph.
    Headers, walks and unrecognized lines are always kept.
    """
    if isinstance(record, Segment):
        return ignore_segments or coverage.covers_segment(record.segment_id)
    elif isinstance(record, Link):
        return ignore_links or coverage.covers_link(record.edge)
    elif isinstance(record, Jump):
        return ignore_jumps or coverage.covers_jump(record.edge)
    elif isinstance(record, Path):
        return keep_list is None or record.name in keep_list
    return True

def filter_records(records: Iterable,
                   coverage: CoverageSet,
                   keep_list: Optional[set[str]] = None,
                   counts: Counter = None,
                   **ignore_flags
                   ):
    """
    Yields the records to keep, in their original order.
    :param counts: if given, updated with the number of records read and kept of each type
    """
    warned_walks = False
    for record in records:
        kind = type(record).__name__
        if isinstance(record, Walk) and keep_list is not None and not warned_walks:
            print("Warning: --paths_to_keep does not apply to walks; all W lines are kept",
                  file=sys.stderr)
            warned_walks = True

        retained = is_retained(record, coverage, keep_list, **ignore_flags)
        if counts is not None:
            counts[kind, 'read'] += 1
            counts[kind, 'kept'] += retained
        if retained:
            yield record

def write_records(records: Iterable, file: TextIO) -> None:
    for record in records:
        line = record.line
        file.write(line if line.endswith('\n') else line + '\n')

def trim_gfa(gfa_file: str,
             output: Optional[str] = None,
             keep_list: Optional[set[str]] = None,
             compressed: bool = False,
             ignore_segments: bool = False,
             ignore_links: bool = False,
             ignore_jumps: bool = False,
             verbose: bool = True,
             log_path: str = None
             ) -> Counter:
    """
    Writes a copy of a .gfa file containing only the segments, links and jumps used by its paths and walks.
    :param gfa_file: path to the input .gfa file
    :param output: path of the trimmed .gfa file; standard output if None
    :param keep_list: names of the paths to keep; other P lines are removed and contribute no coverage
    :param compressed: set to True in order to read a gzipped .gfa file
    :param ignore_segments: keep every S line
    :param ignore_links: keep every L line
    :param ignore_jumps: keep every J line
    :param verbose: print progress to stderr
    :param log_path: if given, append the time and memory used by each pass
    :return: counts of records read and kept, keyed by (record type, 'read' | 'kept')
    """
    if keep_list is not None and not keep_list:
        print("Warning: the list of paths to keep is empty; all paths will be removed", file=sys.stderr)

    coverage = collect_coverage(gfa_file, keep_list, compressed=compressed, verbose=verbose, log_path=log_path)

    start_time = time.time()
    if verbose:
        print("Writing trimmed graph", file=sys.stderr)

    counts = Counter()
    records = read_gfa_line_by_line(gfa_file, compressed=compressed)
    retained = filter_records(tqdm(records, unit=' lines', disable=not verbose),
                              coverage,
                              keep_list,
                              counts,
                              ignore_segments=ignore_segments,
                              ignore_links=ignore_links,
                              ignore_jumps=ignore_jumps)

    if output is None:
        write_records(retained, sys.stdout)
        sys.stdout.flush()
    else:
        # The output may be the input itself; it is replaced only once pass 2 is complete
        fd, tmp_path = tempfile.mkstemp(prefix='.trim_graph.', dir=os.path.dirname(os.path.abspath(output)))
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as file:
                write_records(retained, file)
            umask = os.umask(0)
            os.umask(umask)
            os.chmod(tmp_path, 0o666 & ~umask)
            os.replace(tmp_path, output)
        except BaseException:
            os.remove(tmp_path)
            raise

    if verbose:
        for kind in ('Segment', 'Link', 'Jump', 'Path', 'Walk'):
            print(f"Num of {kind.lower()}s kept: {counts[kind, 'kept']} of {counts[kind, 'read']}",
                  file=sys.stderr)
    if log_path:
        log_action(log_path, start_time, f"Writing trimmed graph: {gfa_file}")

    return counts
