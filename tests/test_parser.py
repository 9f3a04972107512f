"""Tests for reading the DOT subset into a Graph."""

import pytest

from dotrank import (
    CapacityExceeded,
    IdentifierTooLong,
    MalformedEdge,
    MalformedHeader,
    SourceUnavailable,
    parse_dot,
    parse_dot_file,
)


def test_parse_cycle(cycle_graph):
    assert cycle_graph.name == "G"
    assert cycle_graph.node_count == 3
    assert cycle_graph.edge_count == 3
    assert cycle_graph.has_edge("C", "A")


def test_compact_and_spaced_forms():
    graph = parse_dot("digraph G {\nA->B;\nB -> C ;\nC ->D;\nD-> A ;\n}")
    assert graph.edge_count == 4
    assert graph.has_edge("D", "A")


def test_duplicate_edge_lines():
    graph = parse_dot("digraph G {\nA -> B ;\nA -> B;\n}")
    assert graph.node_count == 2
    assert graph.edge_count == 1


def test_missing_graph_identifier():
    with pytest.raises(MalformedHeader):
        parse_dot("digraph {\nA->B;\n}")


@pytest.mark.parametrize("header", ["graph G {", "digraph 1G {", "digraph G", "digraph G-1 {", "A -> B ;"])
def test_bad_headers(header):
    with pytest.raises(MalformedHeader):
        parse_dot(header + "\nA -> B ;\n}")


def test_header_variants():
    assert parse_dot("   digraph Net_2{\n}").name == "Net_2"
    assert parse_dot("\n\ndigraph H {\n").node_count == 0


def test_empty_input():
    with pytest.raises(MalformedHeader):
        parse_dot("\n   \n")


def test_missing_semicolon():
    with pytest.raises(MalformedEdge) as excinfo:
        parse_dot("digraph G {\nA->B\n}")
    assert excinfo.value.line == "A->B"
    assert excinfo.value.lineno == 2
    assert "A->B" in str(excinfo.value)


@pytest.mark.parametrize(
    "line",
    ["A  ->  B ;", "A -> ;", "1A -> B ;", "A -> B_! ;", "A -> B -> C ;", "A B ;", "A -> B ; C -> D ;"],
)
def test_bad_edge_lines(line):
    with pytest.raises(MalformedEdge) as excinfo:
        parse_dot(f"digraph G {{\n{line}\n}}")
    assert excinfo.value.line == line


def test_first_error_aborts():
    text = "digraph G {\nA -> B ;\noops\nC -> D ;\n}"
    with pytest.raises(MalformedEdge):
        parse_dot(text)


def test_comments_blank_lines_and_trailing_content():
    text = "digraph G {\n# a comment\n\n   A -> B ;   \n}\nthis is ignored\n"
    graph = parse_dot(text)
    assert graph.edge_count == 1


def test_missing_closing_brace_tolerated():
    graph = parse_dot("digraph G {\nA -> B ;\nB -> C ;")
    assert graph.edge_count == 2


def test_long_identifier_rejected():
    long_id = "N" * 256
    with pytest.raises(IdentifierTooLong):
        parse_dot(f"digraph G {{\nA -> {long_id} ;\n}}")


def test_capacity_boundary():
    lines = ["digraph G {"] + [f"n{i} -> n{i + 1} ;" for i in range(5)] + ["}"]
    assert parse_dot(lines, capacity=6).node_count == 6
    with pytest.raises(CapacityExceeded):
        parse_dot(lines, capacity=5)


def test_parse_dot_file(tmp_path):
    path = tmp_path / "web.dot"
    path.write_text("digraph Web {\r\n  A -> B ;\r\n  B->A;\r\n}\r\n", encoding="utf-8")
    graph = parse_dot_file(path)
    assert graph.name == "Web"
    assert graph.edge_count == 2


def test_parse_dot_file_reports_raw_line(tmp_path):
    path = tmp_path / "bad.dot"
    path.write_text("digraph G {\n  A -> B\n}\n", encoding="utf-8")
    with pytest.raises(MalformedEdge) as excinfo:
        parse_dot_file(path)
    assert excinfo.value.line == "  A -> B"


def test_string_and_file_split_lines_alike(tmp_path):
    text = "digraph G {\nA -> B ;\x0cC -> D ;\n}\n"
    path = tmp_path / "ff.dot"
    path.write_text(text, encoding="utf-8")
    with pytest.raises(MalformedEdge) as from_file:
        parse_dot_file(path)
    with pytest.raises(MalformedEdge) as from_string:
        parse_dot(text)
    assert from_string.value.line == from_file.value.line == "A -> B ;\x0cC -> D ;"


def test_string_with_crlf_line_endings():
    graph = parse_dot("digraph G {\r\nA -> B ;\r\nB->C;\r\n}\r\n")
    assert graph.edge_count == 2


def test_missing_file(tmp_path):
    with pytest.raises(SourceUnavailable) as excinfo:
        parse_dot_file(tmp_path / "nope.dot")
    assert "nope.dot" in str(excinfo.value)


def test_undecodable_file(tmp_path):
    path = tmp_path / "binary.dot"
    path.write_bytes(b"digraph G {\n\xff\xfe -> B ;\n}\n")
    with pytest.raises(SourceUnavailable):
        parse_dot_file(path)
