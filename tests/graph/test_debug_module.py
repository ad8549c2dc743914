"""Tests for :mod:`matgraph.graph.debug`."""

from __future__ import annotations

import io

from matgraph.graph import Graph, format_debug


def test_format_debug_lists_vertices_rows_and_count() -> None:
    lines = format_debug([5, 6], [0, 2, 2, 0], 2)

    assert lines == [
        "Vertices: [5, 6]",
        "Matrix:",
        "[0, 2]",
        "[2, 0]",
        "Vertex count: 2",
    ]


def test_format_debug_tolerates_bad_vertex_count() -> None:
    # three rows claimed, only enough entries for one and a bit
    lines = format_debug([1, 2, 3], [0, 1, 1, 0], 3)

    assert lines[2] == "[0, 1, 1]"
    assert lines[3] == "Matrix Row 1: [Error: Index out of bounds]"
    assert lines[4] == "Something with vertex_count is messed up"
    assert lines[5] == "Matrix Row 2: [Error: Index out of bounds]"
    assert lines[-1] == "Vertex count: 3"


def test_graph_debug_prints_to_stdout(capsys) -> None:
    graph = Graph.from_edges(["x", "y"], [(0, 1, 4)])

    graph.debug()

    out = capsys.readouterr().out
    assert out.splitlines() == [
        "Vertices: ['x', 'y']",
        "Matrix:",
        "[0, 4]",
        "[4, 0]",
        "Vertex count: 2",
    ]


def test_graph_debug_to_file() -> None:
    buffer = io.StringIO()

    Graph.empty().debug(file=buffer)

    assert buffer.getvalue() == "Vertices: []\nMatrix:\nVertex count: 0\n"
