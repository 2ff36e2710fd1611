"""Per-tick interaction statistics. Observability only; no logic reads them."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass


@dataclass(frozen=True)
class TickStats:
    attempts: int = 0
    battles: int = 0
    same_owner: int = 0
    wall_empty: int = 0

    @property
    def skipped(self) -> int:
        """Attempts whose neighbor fell outside the grid."""
        return self.attempts - self.battles - self.same_owner - self.wall_empty

    @property
    def efficiency(self) -> float:
        """Share of attempts that turned into a battle, in [0, 1]."""
        if self.attempts == 0:
            return 0.0
        return self.battles / self.attempts


class CombatRateWindow:
    """Rolling battle total over the last ``size`` ticks.

    With ``size`` equal to the tick rate this is combats per second.
    """

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("size must be >= 1")
        self._battles: deque[int] = deque(maxlen=size)

    @property
    def size(self) -> int:
        return self._battles.maxlen or 0

    def resize(self, size: int) -> None:
        if size < 1:
            raise ValueError("size must be >= 1")
        if size != self.size:
            self._battles = deque(self._battles, maxlen=size)

    def push(self, stats: TickStats) -> None:
        self._battles.append(stats.battles)

    def total(self) -> int:
        return sum(self._battles)
