"""
Tests for edge list ingestion.
"""
import pytest

from src.ingestion import clean_edge_rows, read_edge_list


def test_clean_edge_rows_strips_and_filters():
    rows = [("a", "b"), (" b", "c "), ("", "d"), ("d", None), ("e",), ("f", "g", "extra")]

    assert clean_edge_rows(rows) == [("a", "b"), ("b", "c"), ("f", "g")]


def test_clean_edge_rows_keeps_duplicates_and_self_loops():
    rows = [("a", "b"), ("a", "b"), ("c", "c")]
    assert clean_edge_rows(rows) == rows


def test_read_edge_list(edge_csv):
    edges = read_edge_list(edge_csv)

    assert edges == [("alice", "bob"), ("bob", "carol"), ("carol", "alice")]


def test_read_edge_list_ignores_header_names(tmp_path):
    path = tmp_path / "followers.csv"
    path.write_text("follower,followee,weight\n1,2,0.5\n2,3,0.1\n")

    assert read_edge_list(path) == [("1", "2"), ("2", "3")]


def test_read_edge_list_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_edge_list(tmp_path / "missing.csv")


def test_read_edge_list_needs_two_columns(tmp_path):
    path = tmp_path / "single.csv"
    path.write_text("source\nalice\nbob\n")

    with pytest.raises(ValueError):
        read_edge_list(path)


def test_read_edge_list_empty_file(tmp_path):
    path = tmp_path / "empty.csv"
    path.write_text("")

    assert read_edge_list(path) == []


def test_read_edge_list_header_only(tmp_path):
    path = tmp_path / "header.csv"
    path.write_text("source,target\n")

    assert read_edge_list(path) == []


def test_read_edge_list_replaces_invalid_utf8(tmp_path):
    path = tmp_path / "latin1.csv"
    path.write_bytes(b"source,target\nJos\xe9,Ana\nAna,Bob\n")

    edges = read_edge_list(path)

    assert len(edges) == 2
    assert edges[0][0].startswith("Jos") and edges[0][1] == "Ana"
    assert edges[1] == ("Ana", "Bob")
