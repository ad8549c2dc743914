from __future__ import annotations

"""Human-readable dump of a graph's vertices and adjacency matrix."""

from typing import Any, List, Sequence


def format_debug(vertices: Sequence[Any], flat_matrix: Sequence[int], vertex_count: int) -> List[str]:
    """
    Render vertices and matrix rows as text lines.

    A row that does not fit inside ``flat_matrix`` (because ``vertex_count``
    disagrees with the matrix length) becomes an error line instead of
    raising.
    """
    flat = [int(c) for c in flat_matrix]
    lines = [f"Vertices: {list(vertices)!r}", "Matrix:"]

    for i in range(vertex_count):
        start = i * vertex_count
        end = start + vertex_count
        if end <= len(flat):
            lines.append(repr(flat[start:end]))
        else:
            lines.append(f"Matrix Row {i}: [Error: Index out of bounds]")
            lines.append("Something with vertex_count is messed up")

    lines.append(f"Vertex count: {vertex_count}")
    return lines


__all__ = ["format_debug"]
