"""
matgraph.graph
==============

Dense adjacency-matrix graph.

Public API:

- Graph                   : undirected weighted graph over dense integer vertex ids.
- GraphError              : base class of every error raised by Graph.
- MatrixDimensionMismatch : adjacency matrix length is not vertex_count ** 2.
- VertexIndexError        : vertex index outside [0, vertex_count).
- InvalidEdgeCost         : negative cost, or a cost too large for the matrix dtype.
- format_debug            : text dump of vertices and matrix rows.

All other modules in this package are considered internal implementation details.
"""

from __future__ import annotations

from .core import Graph, VertexIndex, EdgeCost
from .debug import format_debug
from .errors import (
    GraphError,
    MatrixDimensionMismatch,
    VertexIndexError,
    InvalidEdgeCost,
)

__all__ = [
    "Graph",
    "VertexIndex",
    "EdgeCost",
    "GraphError",
    "MatrixDimensionMismatch",
    "VertexIndexError",
    "InvalidEdgeCost",
    "format_debug",
]
