import pytest

from graphorder.edge_list import EdgeListError, parse_edges, read_edges


def test_parse_simple_lines():
    assert parse_edges("0 1\n1 2\n") == [(0, 1, 1.0), (1, 2, 1.0)]


def test_parse_skips_comments_and_blank_lines():
    text = "# header\n\n0\t1\r\n# note\n2,3\n"
    assert parse_edges(text) == [(0, 1, 1.0), (2, 3, 1.0)]


def test_parse_mixed_separators():
    assert parse_edges("5 ,\t 7") == [(5, 7, 1.0)]


def test_parse_empty_text():
    assert parse_edges("") == []
    assert parse_edges("# only a comment\n") == []


def test_invalid_id_raises():
    with pytest.raises(EdgeListError, match="Invalid vertex ID"):
        parse_edges("a b\n")


def test_invalid_id_reports_line():
    with pytest.raises(EdgeListError, match="line 1"):
        parse_edges("0 1\nx 2\n")


def test_third_column_is_not_an_edge():
    with pytest.raises(EdgeListError, match="Invalid vertex ID"):
        parse_edges("1 2 3\n")


def test_too_large_id_raises():
    with pytest.raises(EdgeListError, match="Too large vertex ID"):
        parse_edges("4294967296 1\n")


def test_largest_id_accepted():
    assert parse_edges("4294967295 0") == [(4294967295, 0, 1.0)]


def test_read_edges_from_file(tmp_path):
    path = tmp_path / "g.txt"
    path.write_text("0 1\n1 0\n", encoding="utf-8")
    assert read_edges(path) == [(0, 1, 1.0), (1, 0, 1.0)]


def test_read_missing_file(tmp_path):
    with pytest.raises(EdgeListError):
        read_edges(tmp_path / "missing.txt")