"""
Seeded random source for heightmap generation.

Uses Johannes Baagoe's Alea generator: small, fast, and reproducible
bit-for-bit from a seed on any platform, so a seed fully determines a
generated grid. Python's random and NumPy's random are not used here.
"""

from typing import Union

from .errors import InvalidParameter

Seed = Union[int, str]

_TWO_POW_MINUS_32 = 2.3283064365386963e-10  # 2^-32


def _uint32(n):
    """Convert to unsigned 32-bit integer."""
    return int(n) & 0xFFFFFFFF


class _Mash:
    """Alea's string hash, keeping its running state between calls."""

    def __init__(self):
        self.n = 0xEFC8249D

    def __call__(self, data) -> float:
        for char in str(data):
            self.n += ord(char)
            h = 0.02519603282416938 * self.n
            self.n = _uint32(h)
            h -= self.n
            h *= self.n
            self.n = _uint32(h)
            h -= self.n
            self.n += h * 0x100000000  # 2^32
        return _uint32(self.n) * _TWO_POW_MINUS_32


class AleaPRNG:
    """Alea generator producing floats in [0, 1)."""

    def __init__(self, seed: Seed):
        mash = _Mash()
        self.s0 = mash(" ")
        self.s1 = mash(" ")
        self.s2 = mash(" ")
        self.c = 1

        self.s0 -= mash(seed)
        if self.s0 < 0:
            self.s0 += 1
        self.s1 -= mash(seed)
        if self.s1 < 0:
            self.s1 += 1
        self.s2 -= mash(seed)
        if self.s2 < 0:
            self.s2 += 1

    def random(self) -> float:
        t = 2091639 * self.s0 + self.c * _TWO_POW_MINUS_32
        self.s0 = self.s1
        self.s1 = self.s2
        self.c = int(t)
        self.s2 = t - self.c
        return self.s2


class RandomSource:
    """
    Per-run uniform sampler over [-1, 1).

    Each generation run gets its own instance; nothing here is shared
    between runs.

    Args:
        seed: String or integer seed. Integers are hashed through their
            decimal representation, so ``42`` and ``"42"`` are equivalent.
    """

    def __init__(self, seed: Seed):
        if seed is None or seed == "":
            raise InvalidParameter("An explicit seed is required")
        self.seed = seed
        self._prng = AleaPRNG(seed)
        self.call_count = 0

    def random(self) -> float:
        """Next sample in [-1, 1)."""
        self.call_count += 1
        return self._prng.random() * 2.0 - 1.0

    def __repr__(self) -> str:
        return f"RandomSource(seed={self.seed!r}, calls={self.call_count})"
