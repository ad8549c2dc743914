from __future__ import annotations

import operator
from typing import Any, Generic, Iterable, Iterator, List, Optional, Sequence, TextIO, Tuple, TypeVar

import numpy as np
import graphblas as gb
from graphblas import Matrix

from ..config import get_settings
from ..log import getLogger
from .debug import format_debug
from .errors import InvalidEdgeCost, MatrixDimensionMismatch, VertexIndexError

logger = getLogger(__name__)

V = TypeVar("V")

VertexIndex = int
EdgeCost = int


def _resolve_dtype(dtype: Any) -> np.dtype:
    if dtype is None:
        return get_settings().graph.numpy_dtype()
    resolved = np.dtype(dtype)
    if resolved.kind != "u":
        raise TypeError(f"Edge cost dtype must be an unsigned integer type, got {resolved!r}")
    return resolved


def _cost_value(value: Any, dtype: np.dtype) -> int:
    """Coerce one cost to an int that ``dtype`` can hold; whole floats are accepted."""
    if isinstance(value, (float, np.floating)):
        if not float(value).is_integer():
            raise InvalidEdgeCost(value, dtype)
        value = int(value)
    try:
        c = operator.index(value)
    except TypeError:
        raise InvalidEdgeCost(value, dtype) from None
    if c < 0 or c > np.iinfo(dtype).max:
        raise InvalidEdgeCost(value, dtype)
    return c


def _to_costs(raw: np.ndarray, dtype: np.dtype) -> np.ndarray:
    """Convert ``raw`` to ``dtype``, rejecting values an unsigned matrix cannot hold."""
    if raw.size == 0:
        return np.zeros(0, dtype=dtype)

    if raw.dtype.kind in "uib":
        lo = int(raw.min())
        hi = int(raw.max())
        if lo < 0:
            raise InvalidEdgeCost(lo, dtype)
        if hi > np.iinfo(dtype).max:
            raise InvalidEdgeCost(hi, dtype)
        return raw.astype(dtype)

    if raw.dtype.kind == "f":
        # 2**bits is exact in float64, unlike iinfo.max
        limit = 2.0 ** np.iinfo(dtype).bits
        with np.errstate(invalid="ignore"):
            bad = ~np.isfinite(raw) | (raw != np.floor(raw)) | (raw < 0) | (raw >= limit)
        if bad.any():
            raise InvalidEdgeCost(raw.flat[int(np.flatnonzero(bad)[0])].item(), dtype)
        return raw.astype(dtype)

    # object arrays (ints beyond 64 bits, mixed python values, ...)
    return np.array([_cost_value(value, dtype) for value in raw.flat], dtype=dtype)


class Graph(Generic[V]):
    """
    Undirected weighted graph backed by a dense numpy adjacency matrix.

    Structure:
      - Vertices are 0..vertex_count-1; position in ``vertices`` is the id.
      - Adjacency: ndarray of shape (vertex_count, vertex_count), unsigned dtype.
          * 0   = no edge
          * > 0 = edge with that cost
      - Every edge write touches (x, y) and (y, x), so the matrix stays
        symmetric as long as the initial matrix was.

    Vertex ids are dense: removing vertex x shifts every higher id down by one.

    All index arguments are checked; an index outside [0, vertex_count)
    raises VertexIndexError. get_vertex_value is the one exception and
    returns None instead.
    """

    __slots__ = (
        "_vertices",
        "_matrix",        # ndarray (n, n)
        "_log_mutations",
    )

    # ------------------------------------------------------------------ #
    # Construction
    # ------------------------------------------------------------------ #
    def __init__(
        self,
        adjacency_matrix: Sequence[int] | np.ndarray,
        vertices: Iterable[V],
        *,
        dtype: Any = None,
    ) -> None:
        """
        adjacency_matrix: flat row-major edge costs of length len(vertices)**2
                          (an (n, n) array is accepted as well).
        vertices:         vertex values, in id order.
        dtype:            unsigned numpy dtype for costs; defaults to
                          settings.graph.edge_dtype.
        """
        resolved = _resolve_dtype(dtype)
        self._vertices: List[V] = list(vertices)

        vertex_count = len(self._vertices)
        expected_len = vertex_count * vertex_count
        if not isinstance(adjacency_matrix, (np.ndarray, Sequence)):
            # iterators and generators would become a 0-d object array
            adjacency_matrix = list(adjacency_matrix)
        raw = np.asarray(adjacency_matrix)

        if raw.size != expected_len:
            logger.warning(
                "Rejected adjacency matrix of length %d for %d vertices", raw.size, vertex_count
            )
            raise MatrixDimensionMismatch(
                matrix_len=int(raw.size),
                vertex_count=vertex_count,
                expected_len=expected_len,
            )

        self._matrix: np.ndarray = _to_costs(raw.ravel(), resolved).reshape(vertex_count, vertex_count)
        self._log_mutations = get_settings().graph.log_mutations

    @classmethod
    def empty(cls, *, dtype: Any = None) -> Graph[Any]:
        """Return a graph without vertices."""
        return cls([], [], dtype=dtype)

    @classmethod
    def from_edges(
        cls,
        vertices: Iterable[V],
        edges: Iterable[Tuple[int, int, int]],
        *,
        dtype: Any = None,
    ) -> Graph[V]:
        """
        Build a Graph from (x, y, cost) triples.

        Triples are applied in order through add_edge, so a later triple for
        the same pair overwrites an earlier one.
        """
        values = list(vertices)
        resolved = _resolve_dtype(dtype)
        graph = cls(np.zeros(len(values) ** 2, dtype=resolved), values, dtype=resolved)
        for x, y, cost in edges:
            graph.add_edge(x, y, cost)
        return graph

    @classmethod
    def from_graphblas(cls, matrix: Matrix, vertices: Iterable[V], *, dtype: Any = None) -> Graph[V]:
        """
        Build a Graph from a square GraphBLAS matrix.

        Entries missing from the sparse matrix become 0 (no edge).
        """
        values = list(vertices)
        n = len(values)
        if matrix.nrows != n or matrix.ncols != n:
            raise MatrixDimensionMismatch(
                matrix_len=int(matrix.nrows * matrix.ncols),
                vertex_count=n,
                expected_len=n * n,
            )

        rows, cols, vals = matrix.to_coo()
        dense = np.zeros((n, n), dtype=np.asarray(vals).dtype)
        dense[rows, cols] = vals
        return cls(dense, values, dtype=dtype)

    def to_graphblas(self) -> Matrix:
        """Return the positive entries of the adjacency matrix as a GraphBLAS Matrix."""
        n = self.vertex_count
        rows, cols = np.nonzero(self._matrix)
        return gb.Matrix.from_coo(
            rows,
            cols,
            self._matrix[rows, cols],
            nrows=n,
            ncols=n,
            dtype=self._matrix.dtype,
        )

    # ------------------------------------------------------------------ #
    # Internal checks
    # ------------------------------------------------------------------ #
    def _index(self, x: int) -> int:
        i = operator.index(x)
        if not 0 <= i < len(self._vertices):
            raise VertexIndexError(i, len(self._vertices))
        return i

    def _cost(self, cost: int) -> int:
        return _cost_value(cost, self._matrix.dtype)

    # ------------------------------------------------------------------ #
    # Structural accessors
    # ------------------------------------------------------------------ #
    @property
    def vertex_count(self) -> int:
        return len(self._vertices)

    def __len__(self) -> int:
        return len(self._vertices)

    @property
    def vertices(self) -> List[V]:
        """Copy of the vertex values in id order."""
        return list(self._vertices)

    @property
    def dtype(self) -> np.dtype:
        return self._matrix.dtype

    @property
    def adjacency_matrix(self) -> np.ndarray:
        """Read-only flat (row-major) copy of the adjacency matrix."""
        flat = self._matrix.ravel().copy()
        flat.flags.writeable = False
        return flat

    @property
    def edge_count(self) -> int:
        """
        Number of undirected edges; a self-loop counts once.

        Only the upper triangle (x <= y) is counted. If the matrix passed at
        construction was asymmetric, entries below the diagonal are ignored.
        """
        return int(np.count_nonzero(np.triu(self._matrix)))

    def edges(self) -> Iterator[Tuple[VertexIndex, VertexIndex, EdgeCost]]:
        """
        Yield (x, y, cost) for every edge with x <= y, in row-major order.

        Reads the upper triangle only, so an asymmetric matrix accepted at
        construction has its below-diagonal entries left out.
        """
        rows, cols = np.nonzero(np.triu(self._matrix))
        for x, y in zip(rows.tolist(), cols.tolist()):
            yield x, y, int(self._matrix[x, y])

    def is_symmetric(self) -> bool:
        return bool(np.array_equal(self._matrix, self._matrix.T))

    # ------------------------------------------------------------------ #
    # Basic operations
    # ------------------------------------------------------------------ #
    def adjacent(self, x: VertexIndex, y: VertexIndex) -> bool:
        """True when an edge (cost > 0) connects x and y."""
        return bool(self._matrix[self._index(x), self._index(y)] > 0)

    def neighbors(self, x: VertexIndex) -> List[VertexIndex]:
        """Vertices adjacent to x, in ascending order."""
        return np.flatnonzero(self._matrix[self._index(x)]).tolist()

    def add_vertex(self, value: V) -> VertexIndex:
        """
        Append a vertex without edges and return its index.

        The matrix is reallocated as (n+1, n+1) zeros with the old matrix
        copied into the top-left block, so existing entries keep their
        (row, col) coordinates.
        """
        old_len = self.vertex_count
        new_len = old_len + 1

        new_matrix = np.zeros((new_len, new_len), dtype=self._matrix.dtype)
        new_matrix[:old_len, :old_len] = self._matrix

        self._matrix = new_matrix
        self._vertices.append(value)

        if self._log_mutations:
            logger.debug("Added vertex %d (vertex_count=%d)", old_len, new_len)
        return old_len

    def remove_vertex(self, x: VertexIndex) -> V:
        """
        Remove vertex x together with its row and column and return its value.

        Every vertex above x moves down one index.
        """
        x = self._index(x)
        old_len = self.vertex_count
        new_len = old_len - 1

        new_matrix = np.zeros((new_len, new_len), dtype=self._matrix.dtype)
        surviving = np.arange(old_len) != x
        # left of the removed column, then right of it
        new_matrix[:, :x] = self._matrix[surviving, :x]
        new_matrix[:, x:] = self._matrix[surviving, x + 1:]

        self._matrix = new_matrix
        value = self._vertices.pop(x)

        if self._log_mutations:
            logger.debug("Removed vertex %d (vertex_count=%d)", x, new_len)
        return value

    def add_edge(self, x: VertexIndex, y: VertexIndex, cost: EdgeCost) -> None:
        """
        Set the cost of edge (x, y) in both directions.

        A cost of 0 is the same as no edge.
        """
        x, y = self._index(x), self._index(y)
        c = self._cost(cost)
        self._matrix[x, y] = c
        self._matrix[y, x] = c

        if self._log_mutations:
            logger.debug("Set edge (%d, %d) cost=%d", x, y, c)

    def remove_edge(self, x: VertexIndex, y: VertexIndex) -> None:
        x, y = self._index(x), self._index(y)
        self._matrix[x, y] = 0
        self._matrix[y, x] = 0

        if self._log_mutations:
            logger.debug("Removed edge (%d, %d)", x, y)

    # ------------------------------------------------------------------ #
    # Value-associated operations
    # ------------------------------------------------------------------ #
    def get_vertex_value(self, x: VertexIndex) -> Optional[V]:
        """Value of vertex x, or None when x is not a valid index."""
        i = operator.index(x)
        if 0 <= i < len(self._vertices):
            return self._vertices[i]
        return None

    def set_vertex_value(self, x: VertexIndex, value: V) -> None:
        self._vertices[self._index(x)] = value

    def get_edge_value(self, x: VertexIndex, y: VertexIndex) -> EdgeCost:
        """Cost of edge (x, y); 0 when there is no edge."""
        return int(self._matrix[self._index(x), self._index(y)])

    def set_edge_value(self, x: VertexIndex, y: VertexIndex, cost: EdgeCost) -> None:
        """Overwrite the cost of (x, y). Both directions are written."""
        self.add_edge(x, y, cost)

    # ------------------------------------------------------------------ #
    # Introspection
    # ------------------------------------------------------------------ #
    def debug(self, file: Optional[TextIO] = None) -> None:
        """Print vertices, matrix rows and the vertex count (stdout by default)."""
        for line in format_debug(self._vertices, self._matrix.ravel(), self.vertex_count):
            print(line, file=file)

    def __repr__(self) -> str:
        return (
            f"Graph(vertex_count={self.vertex_count}, "
            f"edge_count={self.edge_count}, "
            f"dtype={self._matrix.dtype.name})"
        )
