"""Fixed-timestep accumulator between a frame loop and the simulation."""

from __future__ import annotations

from handlords.domain.state import GameState
from handlords.simulation.flow import advance_tick


class FixedStepClock:
    """Converts elapsed wall-clock seconds into whole ticks.

    The tick rate is read from the state's config on every call, so a tuning
    change applies from the next frame. Simulation results depend only on
    the number of ticks, never on how they were spread across frames.
    """

    def __init__(self) -> None:
        self.accumulator = 0.0

    def advance(self, state: GameState, elapsed: float) -> int:
        """Add ``elapsed`` seconds and run every tick that fits. Returns ticks stepped."""
        if elapsed < 0:
            raise ValueError("elapsed must be >= 0")
        fixed_dt = 1.0 / max(1, state.config.ticks_per_second)
        self.accumulator += elapsed
        steps = 0
        while self.accumulator >= fixed_dt:
            advance_tick(state)
            self.accumulator -= fixed_dt
            steps += 1
        return steps
