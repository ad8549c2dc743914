"""Tests for GraphBLAS conversion of :class:`matgraph.graph.Graph`."""

from __future__ import annotations

import graphblas as gb
import numpy as np
import pytest

from matgraph.graph import Graph, InvalidEdgeCost, MatrixDimensionMismatch


def test_to_graphblas_holds_only_edges() -> None:
    graph = Graph.from_edges(range(3), [(0, 1, 4), (1, 2, 9)])

    matrix = graph.to_graphblas()

    assert matrix.nrows == 3 and matrix.ncols == 3
    assert matrix.nvals == 4
    rows, cols, vals = matrix.to_coo()
    assert sorted(zip(rows.tolist(), cols.tolist(), vals.tolist())) == [
        (0, 1, 4),
        (1, 0, 4),
        (1, 2, 9),
        (2, 1, 9),
    ]


def test_from_graphblas_fills_missing_with_zero() -> None:
    matrix = gb.Matrix.from_coo(
        np.array([0, 2]),
        np.array([2, 0]),
        np.array([6, 6], dtype=np.uint64),
        nrows=3,
        ncols=3,
    )

    graph = Graph.from_graphblas(matrix, ["a", "b", "c"])

    assert graph.vertices == ["a", "b", "c"]
    assert graph.neighbors(0) == [2]
    assert graph.neighbors(1) == []
    assert graph.get_edge_value(2, 0) == 6


def test_graphblas_round_trip_preserves_matrix() -> None:
    graph = Graph.from_edges(range(4), [(0, 3, 2), (1, 1, 5), (2, 3, 8)])

    again = Graph.from_graphblas(graph.to_graphblas(), graph.vertices)

    assert again.adjacency_matrix.tolist() == graph.adjacency_matrix.tolist()


def test_from_graphblas_rejects_wrong_shape() -> None:
    matrix = gb.Matrix(gb.dtypes.UINT64, nrows=2, ncols=2)

    with pytest.raises(MatrixDimensionMismatch) as excinfo:
        Graph.from_graphblas(matrix, [1, 2, 3])
    assert excinfo.value.matrix_len == 4
    assert excinfo.value.expected_len == 9


def test_from_graphblas_rejects_negative_weights() -> None:
    matrix = gb.Matrix.from_coo([0], [1], [-3], nrows=2, ncols=2)

    with pytest.raises(InvalidEdgeCost):
        Graph.from_graphblas(matrix, [1, 2])


def test_from_graphblas_accepts_empty_fp64_matrix() -> None:
    matrix = gb.Matrix(gb.dtypes.FP64, nrows=2, ncols=2)

    graph = Graph.from_graphblas(matrix, [1, 2])

    assert graph.adjacency_matrix.tolist() == [0, 0, 0, 0]


def test_from_graphblas_accepts_whole_fp64_weights() -> None:
    matrix = gb.Matrix.from_coo([0, 1], [1, 0], [2.0, 2.0], nrows=2, ncols=2)

    graph = Graph.from_graphblas(matrix, [1, 2])

    assert graph.get_edge_value(0, 1) == 2
    assert graph.dtype == np.uint64


def test_from_graphblas_rejects_fractional_fp64_weights() -> None:
    matrix = gb.Matrix.from_coo([0], [1], [0.25], nrows=2, ncols=2)

    with pytest.raises(InvalidEdgeCost) as excinfo:
        Graph.from_graphblas(matrix, [1, 2])
    assert excinfo.value.cost == 0.25
