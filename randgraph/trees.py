"""Random tree generators.

``uniform_tree`` samples uniformly from all labeled trees by decoding a random
Prüfer sequence. ``custom_tree`` grows a tree over a random node order and lets
the caller bias where each new node attaches:

- ``ATTACH_ANY``: any earlier node (random recursive tree);
- ``ATTACH_RECENT``: one of the ``dis`` most recent nodes (long, path-like);
- ``ATTACH_EARLIEST``: one of the first ``dis`` nodes (shallow, star-like).
"""

from __future__ import annotations

import heapq
from typing import List, Optional, Sequence

from .edges import EdgeList, shuffle_edges
from .exceptions import ConfigError, InputError
from .logger import Logger, NoopLogger
from .rng import RngLike, resolve_rng

ATTACH_ANY = 0
ATTACH_RECENT = 1
ATTACH_EARLIEST = 2


def prufer_to_edges(sequence: Sequence[int], size: int) -> EdgeList:
    """Decode a Prüfer sequence into the edges of its labeled tree.

    Args:
        sequence: ``size - 2`` labels in ``[0, size)``.
        size: Number of nodes (``>= 2``).

    Returns:
        ``size - 1`` edges ``(leaf, neighbor)`` in decoding order, labels
        ``0 .. size-1``.

    Raises:
        InputError: If the length or any label is out of range.

    Examples:
        ```python
        >>> prufer_to_edges([3, 3, 3, 4], 6)
        [(0, 3), (1, 3), (2, 3), (3, 4), (4, 5)]
        ```
    """
    if size < 2:
        raise InputError("Prüfer decoding needs at least 2 nodes.")
    if len(sequence) != size - 2:
        raise InputError(f"expected a sequence of length {size - 2}, got {len(sequence)}")
    cnt = [0] * size
    for x in sequence:
        if not (0 <= x < size):
            raise InputError(f"label {x} outside [0, {size})")
        cnt[x] += 1

    leaves: List[int] = [i for i in range(size) if cnt[i] == 0]
    heapq.heapify(leaves)
    edges: EdgeList = []
    for x in sequence:
        edges.append((heapq.heappop(leaves), x))
        cnt[x] -= 1
        if cnt[x] == 0:
            heapq.heappush(leaves, x)
    a = heapq.heappop(leaves)
    b = heapq.heappop(leaves)
    edges.append((a, b))
    return edges


def uniform_tree(
    size: int,
    base: int = 0,
    *,
    rng: RngLike = None,
    logger: Optional[Logger] = None,
) -> EdgeList:
    """Return a uniformly random labeled tree on ``base .. base+size-1``.

    Args:
        size: Number of nodes (``>= 1``).
        base: Smallest node label.
        rng: Random source, integer seed or ``None`` for the default.
        logger: Optional structured logger.

    Returns:
        ``size - 1`` shuffled edges; empty for a single node.

    Raises:
        ConfigError: If ``size`` is not positive.
    """
    log = logger or NoopLogger()
    if size <= 0:
        raise ConfigError("uniform_tree: size must be greater than 0")
    log.debug("uniform_tree", size=size, base=base)
    if size == 1:
        return []

    src = resolve_rng(rng)
    seq = [src.next_int(0, size - 1) for _ in range(size - 2)]
    edges = prufer_to_edges(seq, size)
    shuffle_edges(edges, base, rng=src)
    log.info("uniform_tree", size=size, edges=len(edges))
    return edges


def custom_tree(
    size: int,
    tree_type: int = ATTACH_ANY,
    dis: int = 1,
    base: int = 0,
    *,
    rng: RngLike = None,
    logger: Optional[Logger] = None,
) -> EdgeList:
    """Return a random tree whose shape is biased by ``tree_type``.

    Nodes are visited in a random order; the ``i``-th visited node attaches to
    the node at a position ``p < i`` drawn by:

    - ``ATTACH_RECENT`` (1): ``p`` uniform in ``[max(0, i - dis), i - 1]``;
    - ``ATTACH_EARLIEST`` (2): ``p`` uniform in ``[0, min(dis - 1, i - 1)]``;
    - anything else: ``p`` uniform in ``[0, i - 1]``.

    Args:
        size: Number of nodes (``>= 1``).
        tree_type: Attachment rule, see above.
        dis: Window width for types 1 and 2 (``>= 1``).
        base: Smallest node label.
        rng: Random source, integer seed or ``None`` for the default.
        logger: Optional structured logger.

    Returns:
        ``size - 1`` shuffled edges; empty for a single node.

    Raises:
        ConfigError: If ``size`` is not positive, or ``dis`` is not positive
            for types 1 and 2.
    """
    log = logger or NoopLogger()
    if size <= 0:
        raise ConfigError("custom_tree: size must be greater than 0")
    if tree_type in (ATTACH_RECENT, ATTACH_EARLIEST) and dis <= 0:
        raise ConfigError("custom_tree: dis must be greater than 0 when type is 1 or 2")
    log.debug("custom_tree", size=size, tree_type=tree_type, dis=dis, base=base)
    if size == 1:
        return []

    src = resolve_rng(rng)
    idx = list(range(size))
    src.shuffle(idx)
    edges: EdgeList = []
    for i in range(1, size):
        if tree_type == ATTACH_RECENT:
            p = src.next_int(max(0, i - dis), i - 1)
        elif tree_type == ATTACH_EARLIEST:
            p = src.next_int(0, min(dis - 1, i - 1))
        else:
            p = src.next_int(0, i - 1)
        edges.append((idx[p], idx[i]))
    shuffle_edges(edges, base, rng=src)
    log.info("custom_tree", size=size, tree_type=tree_type, edges=len(edges))
    return edges


__all__ = [
    "ATTACH_ANY",
    "ATTACH_RECENT",
    "ATTACH_EARLIEST",
    "prufer_to_edges",
    "uniform_tree",
    "custom_tree",
]
