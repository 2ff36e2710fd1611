"""Configuration layer: constants, typed config dataclasses, and tuning."""

from handlords.config.constants import (
    ARENA_HEIGHT,
    ARENA_WIDTH,
    FLUSH_THRESHOLD,
    HUMAN_PLAYER,
    LFSR_SEED,
    PAIRS_PER_TICK,
    TICKS_PER_SECOND,
)
from handlords.config.types import (
    AcceleratingConfig,
    FixedCadenceConfig,
    GameConfig,
    HumanPolicy,
    LossReactiveConfig,
    PeriodicJitterConfig,
    RngMode,
    RunConfig,
)

__all__ = [
    "ARENA_HEIGHT",
    "ARENA_WIDTH",
    "AcceleratingConfig",
    "FLUSH_THRESHOLD",
    "FixedCadenceConfig",
    "GameConfig",
    "HUMAN_PLAYER",
    "HumanPolicy",
    "LFSR_SEED",
    "LossReactiveConfig",
    "PAIRS_PER_TICK",
    "PeriodicJitterConfig",
    "RngMode",
    "RunConfig",
    "TICKS_PER_SECOND",
]
