"""Random bipartite graph generator."""

from __future__ import annotations

from collections import abc
from dataclasses import dataclass
from typing import Dict, Iterable, List, MutableMapping, MutableSequence, Optional, Set, Union

from .edges import Edge, EdgeList, Vertex, shuffle_edges
from .exceptions import ConfigError, ConstraintError, InputError
from .logger import Logger, NoopLogger
from .rng import RandomSource, RngLike, resolve_rng

BLACK = 0
WHITE = 1
UNSET = -1

DEFAULT_ENUMERATION_LIMIT = 10_000_000

ColorBuffer = Union[MutableMapping[int, int], MutableSequence[int]]


@dataclass(frozen=True)
class BipartiteConfig:
    """Configuration knobs for :func:`bipartite_graph`.

    Attributes:
        enumeration_limit: Largest number of absent black-white pairs for
            which all candidates are listed and shuffled. Above it, new edges
            are found by rejection sampling, which needs memory proportional
            to the number of edges added rather than to the candidate count.
    """

    enumeration_limit: int = DEFAULT_ENUMERATION_LIMIT

    def __post_init__(self) -> None:
        """Validate the configuration."""
        if self.enumeration_limit < 0:
            raise ConfigError("enumeration_limit must be non-negative.")


def _read_colors(colors: ColorBuffer, base: int, size: int) -> Dict[Vertex, int]:
    """Return the pre-set 0/1 colors of nodes ``base .. base+size-1``."""
    fixed: Dict[Vertex, int] = {}
    if isinstance(colors, abc.Mapping):
        for v in range(base, base + size):
            c = colors.get(v, UNSET)
            if c in (BLACK, WHITE):
                fixed[v] = c
        return fixed
    if len(colors) < base + size:
        raise InputError(
            f"colors buffer has {len(colors)} entries, nodes go up to {base + size - 1}"
        )
    for v in range(base, base + size):
        if colors[v] in (BLACK, WHITE):
            fixed[v] = colors[v]
    return fixed


def _propagate(
    start: Vertex,
    color: Dict[Vertex, int],
    adj: Dict[Vertex, List[Vertex]],
    seen: Set[Vertex],
) -> None:
    """Two-color the component of ``start`` from ``color[start]``.

    Uses an explicit stack so deep components do not hit the recursion limit.

    Raises:
        ConstraintError: If an edge joins two nodes of the same color.
    """
    seen.add(start)
    stack = [start]
    while stack:
        u = stack.pop()
        for v in adj.get(u, ()):
            c = color.get(v)
            if c is None:
                color[v] = 1 - color[u]
            elif c == color[u]:
                raise ConstraintError(f"edge ({u}, {v}) joins two nodes of color {c}")
            if v not in seen:
                seen.add(v)
                stack.append(v)


def _enumerate_new_edges(
    black: List[Vertex],
    white: List[Vertex],
    present: Set[Edge],
    count: int,
    src: RandomSource,
) -> EdgeList:
    """Sample ``count`` absent pairs exactly by listing and shuffling them all."""
    candidates: EdgeList = []
    for b in black:
        for w in white:
            if _normalize(b, w) not in present:
                candidates.append((b, w))
    src.shuffle(candidates)
    return candidates[:count]


def _rejection_new_edges(
    black: List[Vertex],
    white: List[Vertex],
    present: Set[Edge],
    count: int,
    src: RandomSource,
) -> EdgeList:
    """Sample ``count`` absent pairs by drawing random pairs until enough are new."""
    taken: Set[Edge] = set()
    out: EdgeList = []
    while len(out) < count:
        b = black[src.next_int(0, len(black) - 1)]
        w = white[src.next_int(0, len(white) - 1)]
        key = _normalize(b, w)
        if key in present or key in taken:
            continue
        taken.add(key)
        out.append((b, w))
    return out


def _normalize(u: Vertex, v: Vertex) -> Edge:
    return (u, v) if u <= v else (v, u)


def bipartite_graph(
    size: int,
    edge_num: int,
    colors: Optional[ColorBuffer] = None,
    base: int = 0,
    base_edges: Iterable[Edge] = (),
    prob: float = 0.5,
    *,
    config: Optional[BipartiteConfig] = None,
    rng: RngLike = None,
    logger: Optional[Logger] = None,
) -> EdgeList:
    """Return a random simple bipartite graph on ``base .. base+size-1``.

    The graph contains every edge of ``base_edges`` plus up to ``edge_num``
    new black-white edges chosen uniformly among the absent ones. Colors
    already set to 0 or 1 in ``colors`` are respected; every other node of the
    range gets a color, either forced by ``base_edges`` or drawn as black with
    probability ``prob``. The final coloring is written back to ``colors``.

    Args:
        size: Number of nodes (``>= 1``).
        edge_num: Number of edges to add. Clamped to the number of black-white
            pairs not already joined.
        colors: Mapping or list indexed by absolute node id; values other than
            0 and 1 mean "unset". ``None`` uses a private buffer.
        base: Smallest node label.
        base_edges: Distinct edges that must be kept, in absolute labels.
        prob: Probability that a free component root is colored black.
        config: Strategy settings, see :class:`BipartiteConfig`.
        rng: Random source, integer seed or ``None`` for the default.
        logger: Optional structured logger.

    Returns:
        The shuffled edge list (new edges and ``base_edges``).

    Raises:
        ConfigError: If ``size``, ``edge_num`` or ``prob`` is out of range.
        InputError: If an endpoint of ``base_edges`` is outside the node range,
            an edge is given twice (in either orientation), or the color list
            is too short.
        ConstraintError: If ``base_edges`` and ``colors`` admit no 2-coloring.
    """
    cfg = config or BipartiteConfig()
    log = logger or NoopLogger()
    if size <= 0:
        raise ConfigError("bipartite_graph: size must be greater than 0")
    if edge_num < 0:
        raise ConfigError("bipartite_graph: edge_num must be non-negative")
    if not (0.0 <= prob <= 1.0):
        raise ConfigError("bipartite_graph: prob must be in [0, 1]")
    log.debug("bipartite_graph", size=size, edge_num=edge_num, base=base, prob=prob)

    lo, hi = base, base + size
    given: EdgeList = []
    present: Set[Edge] = set()
    adj: Dict[Vertex, List[Vertex]] = {}
    for u, v in base_edges:
        if not (lo <= u < hi and lo <= v < hi):
            raise InputError(f"edge ({u}, {v}) has an endpoint outside [{lo}, {hi})")
        key = _normalize(u, v)
        if key in present:
            raise InputError(f"edge ({u}, {v}) appears more than once in base_edges")
        present.add(key)
        given.append((u, v))
        adj.setdefault(u, []).append(v)
        adj.setdefault(v, []).append(u)

    buffer: ColorBuffer = colors if colors is not None else {}
    color = _read_colors(buffer, base, size)
    seen: Set[Vertex] = set()
    for v in range(lo, hi):
        if v in color and v not in seen:
            _propagate(v, color, adj, seen)

    src = resolve_rng(rng)
    for v in range(lo, hi):
        if v not in color:
            color[v] = BLACK if src.next_real(0.0, 1.0) < prob else WHITE
            _propagate(v, color, adj, seen)

    black: List[Vertex] = []
    white: List[Vertex] = []
    for v in range(lo, hi):
        buffer[v] = color[v]
        (black if color[v] == BLACK else white).append(v)

    absent = len(black) * len(white) - len(present)
    add = min(edge_num, absent)

    if add == 0:
        new_edges: EdgeList = []
        strategy = "none"
    elif absent <= cfg.enumeration_limit:
        new_edges = _enumerate_new_edges(black, white, present, add, src)
        strategy = "enumerate"
    else:
        if 2 * add > absent:
            # Expected draws grow like absent * log(absent / (absent - add)).
            log.warning("bipartite_dense_rejection", absent=absent, added=add)
        new_edges = _rejection_new_edges(black, white, present, add, src)
        strategy = "rejection"

    edges = new_edges + given
    shuffle_edges(edges, 0, rng=src)
    log.info(
        "bipartite_graph",
        size=size,
        black=len(black),
        white=len(white),
        requested=edge_num,
        added=len(new_edges),
        clamped=add < edge_num,
        strategy=strategy,
    )
    return edges


__all__ = [
    "BLACK",
    "WHITE",
    "UNSET",
    "DEFAULT_ENUMERATION_LIMIT",
    "BipartiteConfig",
    "ColorBuffer",
    "bipartite_graph",
]
