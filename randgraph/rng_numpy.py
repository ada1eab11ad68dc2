"""NumPy-backed random source."""

from __future__ import annotations

from typing import Any, MutableSequence, Optional

import numpy as np


class NumpyRandom:
    """:class:`~randgraph.rng.RandomSource` using :func:`numpy.random.default_rng`.

    Useful when a generator program already seeds NumPy's PCG64 stream and
    wants graph generation to share it.
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        generator: Optional[np.random.Generator] = None,
    ) -> None:
        """Initialize from a seed or an existing :class:`numpy.random.Generator`."""
        self._gen = generator if generator is not None else np.random.default_rng(seed)

    @property
    def generator(self) -> np.random.Generator:
        """Return the wrapped NumPy generator."""
        return self._gen

    def next_int(self, lo: int, hi: int) -> int:
        """Return an integer drawn uniformly from ``[lo, hi]``."""
        if hi < lo:
            raise ValueError(f"empty range [{lo}, {hi}]")
        return int(self._gen.integers(lo, hi, endpoint=True))

    def next_real(self, lo: float, hi: float) -> float:
        """Return a real drawn uniformly from ``[lo, hi]``."""
        if hi < lo:
            raise ValueError(f"empty range [{lo}, {hi}]")
        return float(self._gen.uniform(lo, hi))

    def shuffle(self, seq: MutableSequence[Any]) -> None:
        """Apply a uniform random permutation to ``seq`` in place."""
        items = list(seq)
        for i, j in enumerate(self._gen.permutation(len(items))):
            seq[i] = items[int(j)]


__all__ = ["NumpyRandom"]
