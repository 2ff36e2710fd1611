"""Randomness sources for pair selection and tie-breaking.

The 16-bit Fibonacci LFSR is the canonical generator: every random quantity
the simulation consumes (cell x, cell y, neighbor direction, coin flip,
behavior draws) is one call to ``next_u16``. Reproducibility of a whole run
rests on that.

The LFSR has a fixed point at zero, so a zero seed is rejected. With taps at
bits 0, 2, 3 and 5 and any nonzero seed the state never reaches zero.
"""

from __future__ import annotations

import random
from typing import Protocol

from handlords.config.constants import LFSR_MASK, LFSR_SEED
from handlords.config.types import RngMode


class RandomSource(Protocol):
    mode: RngMode

    def next_u16(self) -> int: ...


class Lfsr16:
    """Deterministic 16-bit linear-feedback shift register."""

    mode = RngMode.LFSR

    def __init__(self, seed: int = LFSR_SEED) -> None:
        state = seed & LFSR_MASK
        if state == 0:
            raise ValueError("LFSR seed must be nonzero in its low 16 bits")
        self.state = state

    def next_u16(self) -> int:
        s = self.state
        bit = (s ^ (s >> 2) ^ (s >> 3) ^ (s >> 5)) & 1
        self.state = (s >> 1) | (bit << 15)
        return self.state


class SystemRng:
    """OS-seeded generator for debugging distribution artefacts of the LFSR.

    Runs using this source cannot be replayed from a seed.
    """

    mode = RngMode.SYSTEM

    def __init__(self) -> None:
        self._rng = random.Random()

    def next_u16(self) -> int:
        return self._rng.getrandbits(16)


def make_rng(mode: RngMode, seed: int = LFSR_SEED) -> RandomSource:
    if mode == RngMode.SYSTEM:
        return SystemRng()
    return Lfsr16(seed)
