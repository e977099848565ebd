"""core/rng.py — Injectable random source.

Every random draw in the simulation goes through the ``RNG`` stored on
the ``GameState``.  Tests pass a seeded instance (or a subclass that
returns scripted values) instead of patching the ``random`` module.
"""

from __future__ import annotations
import random


class RNG(random.Random):
    """Seedable RNG used by world generation, NPC brains and the spawner."""

    def chance(self, p: float) -> bool:
        """True with probability *p* (0 → never, 1 → always)."""
        return self.random() < p

    def pick(self, seq):
        """Uniformly choose one element of a non-empty sequence."""
        return seq[int(self.random() * len(seq))]

    def int_between(self, lo: int, hi: int) -> int:
        """Uniform integer in ``[lo, hi)``.  Mirrors floor(random * span) + lo."""
        return int(self.random() * (hi - lo)) + lo


def new_rng(seed: int | None = None) -> RNG:
    rng = RNG()
    rng.seed(seed)
    return rng
