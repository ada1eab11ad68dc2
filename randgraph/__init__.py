"""Public package exports for :mod:`randgraph`."""

from __future__ import annotations

from .bipartite import (
    BLACK,
    DEFAULT_ENUMERATION_LIMIT,
    UNSET,
    WHITE,
    BipartiteConfig,
    bipartite_graph,
)
from .edges import Edge, EdgeList, relabel_edges, shuffle_edges
from .exceptions import (
    AlgorithmError,
    ConfigError,
    ConstraintError,
    InputError,
    RandGraphError,
)
from .logger import Logger, NoopLogger, StdLogger
from .pool import PoolEntry, WeightPool
from .rng import PyRandom, RandomSource, get_default, seed, set_default

try:  # pragma: no cover
    from .rng_numpy import NumpyRandom
except ModuleNotFoundError:  # pragma: no cover
    NumpyRandom = None  # type: ignore[misc, assignment]
from .trees import (
    ATTACH_ANY,
    ATTACH_EARLIEST,
    ATTACH_RECENT,
    custom_tree,
    prufer_to_edges,
    uniform_tree,
)

__version__ = "0.1.0"

__all__ = [
    "Edge",
    "EdgeList",
    "shuffle_edges",
    "relabel_edges",
    "uniform_tree",
    "custom_tree",
    "prufer_to_edges",
    "ATTACH_ANY",
    "ATTACH_RECENT",
    "ATTACH_EARLIEST",
    "bipartite_graph",
    "BipartiteConfig",
    "DEFAULT_ENUMERATION_LIMIT",
    "BLACK",
    "WHITE",
    "UNSET",
    "WeightPool",
    "PoolEntry",
    "RandomSource",
    "PyRandom",
    "NumpyRandom",
    "get_default",
    "set_default",
    "seed",
    "Logger",
    "NoopLogger",
    "StdLogger",
    "RandGraphError",
    "InputError",
    "ConfigError",
    "ConstraintError",
    "AlgorithmError",
]
