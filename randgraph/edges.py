"""Pure transformations on edge lists."""

from __future__ import annotations

from bisect import bisect_left
from typing import List, Tuple

from .rng import RngLike, resolve_rng

Vertex = int
Edge = Tuple[Vertex, Vertex]
EdgeList = List[Edge]


def shuffle_edges(edges: EdgeList, base: int = 0, *, rng: RngLike = None) -> None:
    """Hide the construction order of ``edges``.

    The list is permuted uniformly, each edge has its endpoints swapped with
    probability 1/2, and ``base`` is added to every endpoint. The list is
    modified in place.

    Args:
        edges: Edge list to rewrite.
        base: Offset added to every endpoint.
        rng: Random source, integer seed or ``None`` for the default.

    Examples:
        ```python
        >>> e = [(0, 1), (1, 2)]
        >>> shuffle_edges(e, 1, rng=7)
        >>> sorted(tuple(sorted(x)) for x in e)
        [(1, 2), (2, 3)]
        ```
    """
    src = resolve_rng(rng)
    src.shuffle(edges)
    for i, (u, v) in enumerate(edges):
        if src.next_int(0, 1):
            u, v = v, u
        edges[i] = (u + base, v + base)


def relabel_edges(edges: EdgeList, base: int = 0) -> None:
    """Compress node identifiers to ``base .. base+k-1`` keeping their order.

    Args:
        edges: Edge list to rewrite in place.
        base: Label assigned to the smallest identifier.

    Examples:
        ```python
        >>> e = [(10, 4), (4, 7)]
        >>> relabel_edges(e)
        >>> e
        [(2, 0), (0, 1)]
        ```
    """
    labels = sorted({x for e in edges for x in e})
    for i, (u, v) in enumerate(edges):
        edges[i] = (bisect_left(labels, u) + base, bisect_left(labels, v) + base)


__all__ = ["Vertex", "Edge", "EdgeList", "shuffle_edges", "relabel_edges"]
