"""Uniform random sources driving dataset generation.

Two interchangeable sources share the same small interface (``next()`` and
the iterator protocol):

- ``Mulberry32Source``: a seeded 32-bit generator whose output is
  bit-identical across platforms for a given seed. Not cryptographically
  secure; it exists for speed and reproducibility only.
- ``AmbientRandomSource``: numpy's unseeded ``default_rng()``, used when no
  seed is configured.

Use ``create_random_source(seed)`` to get the right one.
"""

from typing import Iterator, Optional

import numpy as np

_MASK32 = 0xFFFFFFFF
_INCREMENT = 0x6D2B79F5
_TWO_POW_32 = 4294967296.0


class RandomSource:
    """Infinite stream of floats in ``[0, 1)``."""

    def next(self) -> float:
        raise NotImplementedError

    def __iter__(self) -> Iterator[float]:
        return self

    def __next__(self) -> float:
        return self.next()


class Mulberry32Source(RandomSource):
    """Seeded mulberry32 generator.

    All arithmetic wraps at 32 bits: the state advances by a fixed odd
    increment, then goes through two xor/multiply mixing rounds before being
    scaled by ``2**-32``. ``state`` is the raw unsigned 32-bit state and can
    be inspected between draws.
    """

    def __init__(self, seed: int):
        self.seed = seed
        self.state = seed & _MASK32

    def reset(self) -> None:
        """Restart the sequence from the seed."""
        self.state = self.seed & _MASK32

    def next(self) -> float:
        self.state = (self.state + _INCREMENT) & _MASK32
        t = self.state
        t = ((t ^ (t >> 15)) * (t | 1)) & _MASK32
        t = ((t + (((t ^ (t >> 7)) * (t | 61)) & _MASK32)) & _MASK32) ^ t
        return ((t ^ (t >> 14)) & _MASK32) / _TWO_POW_32

    def __repr__(self) -> str:
        return f"Mulberry32Source(seed={self.seed}, state={self.state:#010x})"


class AmbientRandomSource(RandomSource):
    """Unseeded source backed by numpy's default generator."""

    def __init__(self):
        self._rng = np.random.default_rng()

    def next(self) -> float:
        return float(self._rng.random())


def create_random_source(seed: Optional[int] = None) -> RandomSource:
    """Return a reproducible source for ``seed``, or an ambient one for ``None``."""
    if seed is None:
        return AmbientRandomSource()
    return Mulberry32Source(seed)
