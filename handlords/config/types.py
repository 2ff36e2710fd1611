"""Configuration dataclasses for the arena simulation and headless runs.

``GameConfig`` is deliberately mutable: a tuning surface may change any
field between ticks and the core re-reads it every tick. ``RunConfig``
parameterises headless batch runs and is frozen like the other run-scoped
settings.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from handlords.config.constants import (
    ACCELERATING_DECREMENT,
    ACCELERATING_FLOOR,
    ACCELERATING_INITIAL_INTERVAL,
    FIXED_CADENCE_INTERVAL,
    LFSR_MASK,
    LFSR_SEED,
    LOSS_REACTIVE_MAX_PERMILLE,
    LOSS_REACTIVE_PER_LOSS_PERMILLE,
    MAX_MATCH_TICKS,
    PAIRS_PER_TICK,
    ROTATION_AVERAGE,
    ROTATION_HALF_INTERVAL,
    TICKS_PER_SECOND,
)

__all__ = [
    "AcceleratingConfig",
    "FixedCadenceConfig",
    "GameConfig",
    "HumanPolicy",
    "LossReactiveConfig",
    "PeriodicJitterConfig",
    "RngMode",
    "RunConfig",
]


class RngMode(Enum):
    """Randomness source used by pair selection and tie-breaking."""

    LFSR = "lfsr"
    SYSTEM = "system"
    """Debug only: OS-seeded generator. Breaks run reproducibility."""


class HumanPolicy(Enum):
    """Scripted stand-in for the human player during headless runs."""

    IDLE = "idle"
    COUNTER = "counter"
    PERIODIC = "periodic"


# ---------------------------------------------------------------------------
# Opponent tuning
# ---------------------------------------------------------------------------


@dataclass
class PeriodicJitterConfig:
    """Tuning for the periodic rotator with a uniformly jittered period."""

    rotation_average: int = ROTATION_AVERAGE
    rotation_half_interval: int = ROTATION_HALF_INTERVAL

    def __post_init__(self) -> None:
        if self.rotation_average < 1:
            raise ValueError("rotation_average must be >= 1")
        if self.rotation_half_interval < 0:
            raise ValueError("rotation_half_interval must be >= 0")

    def interval_bounds(self) -> tuple[int, int]:
        """Return the inclusive (min, max) period, both clamped to >= 1 tick."""
        low = max(1, self.rotation_average - self.rotation_half_interval)
        high = max(low, self.rotation_average + self.rotation_half_interval)
        return low, high


@dataclass
class FixedCadenceConfig:
    """Tuning for the rotator that turns every ``interval`` ticks."""

    interval: int = FIXED_CADENCE_INTERVAL

    def __post_init__(self) -> None:
        if self.interval < 1:
            raise ValueError("interval must be >= 1")


@dataclass
class LossReactiveConfig:
    """Tuning for the reverse rotator driven by cells lost this tick.

    Probabilities are integer per-mille so the decision only consumes LFSR
    output and stays reproducible.
    """

    per_loss_permille: int = LOSS_REACTIVE_PER_LOSS_PERMILLE
    max_permille: int = LOSS_REACTIVE_MAX_PERMILLE

    def __post_init__(self) -> None:
        if self.per_loss_permille < 0:
            raise ValueError("per_loss_permille must be >= 0")
        if not 0 <= self.max_permille <= 1000:
            raise ValueError("max_permille must be in [0, 1000]")


@dataclass
class AcceleratingConfig:
    """Tuning for the rotator whose period shrinks after every rotation."""

    initial_interval: int = ACCELERATING_INITIAL_INTERVAL
    decrement: int = ACCELERATING_DECREMENT
    floor: int = ACCELERATING_FLOOR

    def __post_init__(self) -> None:
        if self.floor < 1:
            raise ValueError("floor must be >= 1")
        if self.initial_interval < self.floor:
            raise ValueError("initial_interval must be >= floor")
        if self.decrement < 0:
            raise ValueError("decrement must be >= 0")


# ---------------------------------------------------------------------------
# Game config
# ---------------------------------------------------------------------------


@dataclass
class GameConfig:
    """Runtime-tunable simulation parameters, read fresh every tick."""

    pairs_per_tick: int = PAIRS_PER_TICK
    ticks_per_second: int = TICKS_PER_SECOND
    rng_mode: RngMode = RngMode.LFSR
    rng_seed: int = LFSR_SEED
    periodic: PeriodicJitterConfig = field(default_factory=PeriodicJitterConfig)
    fixed_cadence: FixedCadenceConfig = field(default_factory=FixedCadenceConfig)
    loss_reactive: LossReactiveConfig = field(default_factory=LossReactiveConfig)
    accelerating: AcceleratingConfig = field(default_factory=AcceleratingConfig)

    def __post_init__(self) -> None:
        if self.pairs_per_tick < 0:
            raise ValueError("pairs_per_tick must be >= 0")
        if self.ticks_per_second < 1:
            raise ValueError("ticks_per_second must be >= 1")
        if self.rng_seed & LFSR_MASK == 0:
            raise ValueError("rng_seed must have at least one of its low 16 bits set")


# ---------------------------------------------------------------------------
# Headless batch runs
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class RunConfig:
    """Settings for a batch of headless matches."""

    n_matches: int = 1
    max_ticks: int = MAX_MATCH_TICKS
    base_seed: int = LFSR_SEED
    pairs_per_tick: int = PAIRS_PER_TICK
    opponent_behavior: str = "periodic_jitter"
    human_policy: HumanPolicy = HumanPolicy.IDLE
    human_period: int = 30
    """Rotation interval used by ``HumanPolicy.PERIODIC``."""
    rng_mode: RngMode = RngMode.LFSR
    out_dir: Path = Path("data")

    def __post_init__(self) -> None:
        if self.n_matches < 1:
            raise ValueError("n_matches must be >= 1")
        if self.max_ticks < 1:
            raise ValueError("max_ticks must be >= 1")
        if not 0 < self.base_seed <= LFSR_MASK:
            raise ValueError("base_seed must be in 1..0xFFFF")
        if self.pairs_per_tick < 0:
            raise ValueError("pairs_per_tick must be >= 0")
        if self.human_period < 1:
            raise ValueError("human_period must be >= 1")
        from handlords.domain.behaviors import BEHAVIORS

        if self.opponent_behavior not in BEHAVIORS:
            valid = ", ".join(sorted(BEHAVIORS))
            raise ValueError(f"opponent_behavior must be one of {valid}")

    def game_config(self, seed: int) -> GameConfig:
        """Build the GameConfig for one match of the batch."""
        return GameConfig(
            pairs_per_tick=self.pairs_per_tick, rng_mode=self.rng_mode, rng_seed=seed
        )
