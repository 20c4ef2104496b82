import re
from typing import NamedTuple, Union

from .utils import open_gfa

ORIENTATIONS = ('+', '-')

# Walk steps: an orientation symbol followed by a segment name without '<' or '>'
WALK_STEP_PATTERN = re.compile(r'([><])([!-;=?-~]+)')
PATH_STEP_DELIMITERS = re.compile(r'[,;]')


class MalformedRecordError(ValueError):
    def __init__(self, message: str, line_number: int = None, line: str = None):
        self.line_number = line_number
        self.line = line
        location = f'line {line_number}: ' if line_number is not None else ''
        super().__init__(f'{location}{message}' + (f'\n  {line}' if line is not None else ''))


class Header(NamedTuple):
    line: str


class Passthrough(NamedTuple):
    line: str


class Segment(NamedTuple):
    line: str
    segment_id: str


class Link(NamedTuple):
    line: str
    edge: tuple[str, str]


class Jump(NamedTuple):
    line: str
    edge: tuple[str, str]


class Path(NamedTuple):
    line: str
    name: str
    steps: list[str]


class Walk(NamedTuple):
    line: str
    name: str
    steps: list[str]


Record = Union[Header, Passthrough, Segment, Link, Jump, Path, Walk]


def parse_path_steps(traversal: str) -> list[str]:
    """
    Parses the segment names field of a P line, e.g. '1+,2-;3+', into oriented segments.
    Both ',' and ';' separate steps.
    """
    steps = []
    for token in PATH_STEP_DELIMITERS.split(traversal):
        token = token.strip()
        if len(token) < 2 or token[-1] not in ORIENTATIONS:
            raise ValueError(f'Invalid path step: {token!r}')
        steps.append(token)
    return steps

def parse_walk_steps(walk: str) -> list[str]:
    """
    Parses the walk field of a W line, e.g. '>1<2>3', into oriented segments ['1+', '2-', '3+'].
    """
    steps = []
    end = 0
    for match in WALK_STEP_PATTERN.finditer(walk):
        if match.start() != end:
            break
        symbol, segment_id = match.groups()
        steps.append(segment_id + ('+' if symbol == '>' else '-'))
        end = match.end()
    if end != len(walk) or not steps:
        raise ValueError(f'Invalid walk: {walk!r}')
    return steps

def _parse_edge(parts: list[str]) -> tuple[str, str]:
    if len(parts) < 5:
        raise ValueError(f'Expected at least 5 fields, found {len(parts)}')
    from_id, from_orient, to_id, to_orient = parts[1:5]
    if not from_id or not to_id:
        raise ValueError('Empty segment name')
    for orient in (from_orient, to_orient):
        if orient not in ORIENTATIONS:
            raise ValueError(f'Invalid orientation: {orient!r}')
    return from_id + from_orient, to_id + to_orient

def parse_line(line: str, line_number: int = None) -> Record:
    """
    Classifies one line of a .gfa file by its record type.
    :param line: the raw line, with or without its trailing newline
    :param line_number: 1-based position of the line, reported in errors
    :return: a Header, Segment, Link, Jump, Path or Walk record; any other line is a Passthrough
    """
    parts = line.rstrip('\r\n').split('\t')
    record_type = parts[0]
    try:
        if record_type == 'H':
            return Header(line)
        elif record_type == 'S':
            if len(parts) < 2 or not parts[1]:
                raise ValueError('Missing segment name')
            return Segment(line, parts[1])
        elif record_type == 'L':
            return Link(line, _parse_edge(parts))
        elif record_type == 'J':
            return Jump(line, _parse_edge(parts))
        elif record_type == 'P':
            if len(parts) < 3:
                raise ValueError(f'Expected at least 3 fields, found {len(parts)}')
            return Path(line, parts[1], parse_path_steps(parts[2]))
        elif record_type == 'W':
            if len(parts) < 7:
                raise ValueError(f'Expected at least 7 fields, found {len(parts)}')
            name = '#'.join(parts[1:4])
            return Walk(line, name, parse_walk_steps(parts[6]))
    except ValueError as e:
        raise MalformedRecordError(f'Malformed {record_type} record: {e}', line_number, line.rstrip('\r\n')) from e
    return Passthrough(line)

def read_gfa_line_by_line(filename: str, compressed: bool = False):
    """
    Yields the records of a .gfa file one at a time, in file order.
    """
    with open_gfa(filename, compressed=compressed) as file:
        for line_number, raw_line in enumerate(file, start=1):
            try:
                line = raw_line.decode('utf-8')
            except UnicodeDecodeError as e:
                raise MalformedRecordError(f'Invalid UTF-8 at byte {e.start}: {e.reason}', line_number) from e
            yield parse_line(line, line_number)
