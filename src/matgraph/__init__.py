try:
    from ._version import version as __version__  # populated by setuptools-scm
except ModuleNotFoundError:
    __version__ = "0.0.0"

from .graph import (
    Graph,
    GraphError,
    MatrixDimensionMismatch,
    VertexIndexError,
    InvalidEdgeCost,
)

__all__ = [
    "__version__",
    "Graph",
    "GraphError",
    "MatrixDimensionMismatch",
    "VertexIndexError",
    "InvalidEdgeCost",
]
