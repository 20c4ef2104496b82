import pytest

from trim_graph.records import (
    Header, Jump, Link, MalformedRecordError, Passthrough, Path, Segment, Walk,
    parse_line, parse_path_steps, parse_walk_steps, read_gfa_line_by_line
)


def test_parse_header_and_unknown_lines():
    assert parse_line('H\tVN:Z:1.0\n') == Header('H\tVN:Z:1.0\n')
    assert parse_line('C\ta\t+\tb\t-\t10\t*\n') == Passthrough('C\ta\t+\tb\t-\t10\t*\n')
    assert parse_line('# comment\n') == Passthrough('# comment\n')
    assert parse_line('\n') == Passthrough('\n')

def test_parse_segment():
    record = parse_line('S\t12\tACGT\tLN:i:4\n')
    assert isinstance(record, Segment)
    assert record.segment_id == '12'

def test_parse_link_and_jump():
    link = parse_line('L\t1\t+\t2\t-\t0M\n')
    jump = parse_line('J\t2\t-\t3\t+\t100\n')
    assert isinstance(link, Link) and link.edge == ('1+', '2-')
    assert isinstance(jump, Jump) and jump.edge == ('2-', '3+')

def test_parse_path():
    record = parse_line('P\tp1\t1+,2-,3+\t*\n')
    assert isinstance(record, Path)
    assert record.name == 'p1'
    assert record.steps == ['1+', '2-', '3+']

def test_parse_path_steps_with_jump_separator_and_spaces():
    assert parse_path_steps('1+, 2-; 3+') == ['1+', '2-', '3+']

def test_parse_walk():
    record = parse_line('W\tNA12878\t1\tchr1\t0\t11\t>1<2>3\n')
    assert isinstance(record, Walk)
    assert record.name == 'NA12878#1#chr1'
    assert record.steps == ['1+', '2-', '3+']

def test_parse_walk_steps_named_segments():
    assert parse_walk_steps('>s1<utg_2') == ['s1+', 'utg_2-']

@pytest.mark.parametrize('line', [
    'S\n',
    'L\t1\t+\t2\n',
    'L\t1\tx\t2\t+\t0M\n',
    'J\t1\t+\t2\t?\t*\n',
    'P\tp1\n',
    'P\tp1\t1+,2\t*\n',
    'P\tp1\t1+,,2+\t*\n',
    'W\ts\t1\tchr1\t0\t11\n',
    'W\ts\t1\tchr1\t0\t11\t1>2\n',
    'W\ts\t1\tchr1\t0\t11\t>1 >2\n',
])
def test_malformed_records(line):
    with pytest.raises(MalformedRecordError):
        parse_line(line)

def test_malformed_record_reports_line_number(write_gfa):
    gfa_file = write_gfa('H\tVN:Z:1.0\nS\t1\tA\nL\t1\t+\t1\t*\t0M\n')
    with pytest.raises(MalformedRecordError) as excinfo:
        list(read_gfa_line_by_line(gfa_file))
    assert excinfo.value.line_number == 3
    assert 'line 3' in str(excinfo.value)

def test_read_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        list(read_gfa_line_by_line(str(tmp_path / 'missing.gfa')))

def test_invalid_utf8_reports_line_number(tmp_path):
    path = tmp_path / 'bad.gfa'
    path.write_bytes(b'H\tVN:Z:1.0\nS\t1\t\xff\xfe\n')
    with pytest.raises(MalformedRecordError) as excinfo:
        list(read_gfa_line_by_line(str(path)))
    assert excinfo.value.line_number == 2
