from __future__ import annotations

"""Exceptions raised by :class:`matgraph.graph.Graph`."""


class GraphError(Exception):
    """Base class for graph errors."""


class MatrixDimensionMismatch(GraphError, ValueError):
    """The adjacency matrix length is not the square of the vertex count."""

    def __init__(self, matrix_len: int, vertex_count: int, expected_len: int) -> None:
        self.matrix_len = matrix_len
        self.vertex_count = vertex_count
        self.expected_len = expected_len
        super().__init__(
            f"Adjacency matrix length {matrix_len} does not match vertices count "
            f"{vertex_count} (expected adjacency matrix length to be {expected_len})"
        )


class VertexIndexError(GraphError, IndexError):
    """A vertex index outside ``[0, vertex_count)`` was passed."""

    def __init__(self, index: int, vertex_count: int) -> None:
        self.index = index
        self.vertex_count = vertex_count
        super().__init__(f"vertex index {index} out of range [0, {vertex_count})")


class InvalidEdgeCost(GraphError, ValueError):
    """An edge cost is negative or does not fit the matrix dtype."""

    def __init__(self, cost: object, dtype: object) -> None:
        self.cost = cost
        self.dtype = dtype
        super().__init__(f"edge cost {cost!r} is not representable as {dtype}")


__all__ = [
    "GraphError",
    "MatrixDimensionMismatch",
    "VertexIndexError",
    "InvalidEdgeCost",
]
