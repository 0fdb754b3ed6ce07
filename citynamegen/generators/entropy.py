#!/usr/bin/env python3
"""
Random Sources for Name Generation
==================================
Uniform random floats in [0, 1) for the name composer.

The generator only ever asks a source for ``random()``. Anything with that
method can stand in for the default, including ``random.Random(seed)`` or a
scripted fake in tests.

The default source is backed by ``secrets.SystemRandom`` (os.urandom), so a
single instance can be shared between threads.
"""

import secrets
from typing import Any, Protocol, Sequence


class RandomSource(Protocol):
    """Anything that yields uniform floats in [0.0, 1.0)."""

    def random(self) -> float:
        ...


# =============================================================================
# True Random Number Generator
# =============================================================================

class TrueRandom:
    """
    Cryptographically secure random source using system entropy.

    Not seedable. Tests that need fixed draws should inject their own
    ``RandomSource`` instead.
    """

    def __init__(self):
        self._rng = secrets.SystemRandom()

    def random(self) -> float:
        """Return random float in [0.0, 1.0)."""
        return self._rng.random()


# Global instance
_true_random = TrueRandom()


def get_rng() -> TrueRandom:
    """Get the global true random number generator."""
    return _true_random


def pick(seq: Sequence[Any], rng: RandomSource) -> Any:
    """
    Choose one element of ``seq`` uniformly, consuming exactly one draw.

    Raises IndexError on an empty sequence.
    """
    if not seq:
        raise IndexError("Cannot choose from empty sequence")
    index = int(rng.random() * len(seq))
    # float rounding can land on len(seq) for draws just below 1.0
    return seq[min(index, len(seq) - 1)]


__all__ = [
    "RandomSource",
    "TrueRandom",
    "get_rng",
    "pick",
]
