"""Uniform random sources consumed by the generators and the weight pool.

Every random decision in :mod:`randgraph` goes through a
:class:`RandomSource`. Functions accept an ``rng`` argument that may be a
source, an integer seed, or ``None`` for the process-wide default, so a
generator program can be made reproducible either by seeding once with
:func:`seed` or by passing its own source around.
"""

from __future__ import annotations

import random
from typing import Any, MutableSequence, Optional, Protocol, Union


class RandomSource(Protocol):
    """Protocol for the uniform random primitives used by this package."""

    def next_int(self, lo: int, hi: int) -> int:
        """Return an integer drawn uniformly from ``[lo, hi]``."""
        ...

    def next_real(self, lo: float, hi: float) -> float:
        """Return a real drawn uniformly from ``[lo, hi]``."""
        ...

    def shuffle(self, seq: MutableSequence[Any]) -> None:
        """Permute ``seq`` in place uniformly at random."""
        ...


class PyRandom:
    """:class:`RandomSource` backed by :class:`random.Random`.

    Args:
        seed: Optional seed. ``None`` seeds from system entropy.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        self._rng = random.Random(seed)

    def seed(self, value: Optional[int]) -> None:
        """Reset the generator state from ``value``."""
        self._rng.seed(value)

    def next_int(self, lo: int, hi: int) -> int:
        """Return an integer drawn uniformly from ``[lo, hi]``."""
        if hi < lo:
            raise ValueError(f"empty range [{lo}, {hi}]")
        return self._rng.randint(lo, hi)

    def next_real(self, lo: float, hi: float) -> float:
        """Return a real drawn uniformly from ``[lo, hi]``."""
        if hi < lo:
            raise ValueError(f"empty range [{lo}, {hi}]")
        return self._rng.uniform(lo, hi)

    def shuffle(self, seq: MutableSequence[Any]) -> None:
        """Fisher-Yates shuffle of ``seq`` in place."""
        self._rng.shuffle(seq)


RngLike = Union[RandomSource, int, None]

_default: RandomSource = PyRandom()


def get_default() -> RandomSource:
    """Return the process-wide random source."""
    return _default


def set_default(source: RandomSource) -> None:
    """Replace the process-wide random source."""
    global _default
    _default = source


def seed(value: int) -> None:
    """Reseed the process-wide source with a fresh :class:`PyRandom`."""
    set_default(PyRandom(value))


def resolve_rng(rng: RngLike) -> RandomSource:
    """Turn an ``rng`` argument into a :class:`RandomSource`.

    Args:
        rng: A source, an integer seed, or ``None``.

    Returns:
        The given source, a new :class:`PyRandom` for an integer seed, or the
        process-wide default.
    """
    if rng is None:
        return _default
    if isinstance(rng, bool):
        raise TypeError("rng must be a RandomSource, an int seed or None")
    if isinstance(rng, int):
        return PyRandom(rng)
    return rng


__all__ = [
    "RandomSource",
    "PyRandom",
    "RngLike",
    "get_default",
    "set_default",
    "seed",
    "resolve_rng",
]
