import gzip
import os
import time
from datetime import datetime

import psutil


def node_complement(s: str) -> str:
    return s[:-1] + _flip(s[-1])

def edge_complement(e: tuple[str, str]) -> tuple[str, str]:
    return node_complement(e[1]), node_complement(e[0])

def canonical_edge(e: tuple[str, str]) -> tuple[str, str]:
    """
    Returns the representative of a biedge: an edge and its complement map to the same tuple.
    :param e: a pair of oriented segments, e.g. ('S1+', 'S2-')
    """
    return min(e, edge_complement(e))

def _flip(s):
    if s == '+':
        return '-'
    elif s == '-':
        return '+'
    else:
        raise ValueError(f'Invalid orientation: {s}')

def open_gfa(filename: str, compressed: bool = False):
    # Binary, so that decoding errors can be reported per line
    if not os.path.exists(filename):
        raise FileNotFoundError(filename)
    if compressed:
        return gzip.open(filename, 'rb')
    return open(filename, 'rb')

def read_keep_list(filename: str) -> set[str]:
    """
    Reads a newline-delimited list of path names.
    :param filename: plain text file with one path name per line
    :return: the set of names, used verbatim
    """
    if not os.path.exists(filename):
        raise FileNotFoundError(filename)

    with open(filename, 'r', encoding='utf-8') as file:
        return {line for line in file.read().splitlines() if line}

def log_action(log_path: str, start_time: float, action: str):
    # Get timestamp
    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")

    # Measure memory in MB
    memory_mb = psutil.Process().memory_info().rss / 1024 / 1024
    elapsed = time.time() - start_time

    log_entry = f"{timestamp},{elapsed:.2f} s,{memory_mb:.2f} MB,{action}\n"

    # Append to the end of the log file
    with open(log_path, "a") as log_file:
        log_file.write(log_entry)
