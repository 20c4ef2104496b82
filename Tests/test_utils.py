import pytest

from trim_graph.utils import (
    canonical_edge, edge_complement, node_complement, read_keep_list
)


def test_node_complement():
    assert node_complement('S1+') == 'S1-'
    assert node_complement('S1-') == 'S1+'
    with pytest.raises(ValueError):
        node_complement('S1')

def test_edge_complement():
    assert edge_complement(('1+', '2+')) == ('2-', '1-')

def test_canonical_edge_unifies_complements():
    edge = ('A+', 'B+')
    assert canonical_edge(edge) == canonical_edge(edge_complement(edge))
    assert canonical_edge(('A+', 'B+')) != canonical_edge(('A+', 'B-'))

def test_read_keep_list(tmp_path):
    path = tmp_path / 'keep.txt'
    path.write_text('pathA\npathB\r\n\n')
    assert read_keep_list(str(path)) == {'pathA', 'pathB'}

def test_read_empty_keep_list(tmp_path):
    path = tmp_path / 'keep.txt'
    path.write_text('')
    assert read_keep_list(str(path)) == set()

def test_read_missing_keep_list(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_keep_list(str(tmp_path / 'missing.txt'))
