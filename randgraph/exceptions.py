"""Custom exception types used across :mod:`randgraph`."""

from __future__ import annotations


class RandGraphError(Exception):
    """Base class for all package-specific errors."""


class InputError(RandGraphError, ValueError):
    """Raised for invalid user input such as out-of-range edge endpoints."""


class ConfigError(RandGraphError, ValueError):
    """Raised for invalid generator parameters."""


class ConstraintError(InputError):
    """Raised when supplied edges and colors cannot form a bipartite graph."""


class AlgorithmError(RandGraphError, RuntimeError):
    """Raised when internal invariants are violated at runtime."""


__all__ = [
    "RandGraphError",
    "InputError",
    "ConfigError",
    "ConstraintError",
    "AlgorithmError",
]
