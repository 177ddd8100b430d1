"""Distribution samplers built on a ``RandomSource``.

Each sampler consumes draws in a fixed order so seeded generations replay
exactly.
"""

import math

from .random_source import RandomSource


def sample_uniform(source: RandomSource, low: float, high: float) -> float:
    """Draw from ``[low, high)``; always consumes one draw, even if ``low == high``."""
    return low + source.next() * (high - low)


def sample_gaussian(source: RandomSource, mean: float = 0.0, std: float = 1.0) -> float:
    """Draw one normal sample with the two-draw Box-Muller transform.

    ``u`` is redrawn while exactly zero, then ``v`` likewise, so ``log(u)``
    stays finite. The paired sine sample is discarded rather than cached.
    """
    u = 0.0
    v = 0.0
    while u == 0.0:
        u = source.next()
    while v == 0.0:
        v = source.next()
    z = math.sqrt(-2.0 * math.log(u)) * math.cos(2.0 * math.pi * v)
    return z * std + mean
