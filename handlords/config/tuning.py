"""Runtime tuning surface: clamped setters and default resets.

Presentation layers (sliders, debug panels) call into this module instead
of writing ``GameConfig`` fields directly, so out-of-range values never reach
the core.
"""

from __future__ import annotations

from handlords.config.constants import (
    PAIRS_PER_TICK,
    PAIRS_PER_TICK_RANGE,
    ROTATION_AVERAGE,
    ROTATION_AVERAGE_RANGE,
    ROTATION_HALF_INTERVAL,
    ROTATION_HALF_INTERVAL_RANGE,
    TICKS_PER_SECOND,
    TICKS_PER_SECOND_RANGE,
)
from handlords.config.types import GameConfig

TUNING_RANGES: dict[str, tuple[int, int]] = {
    "pairs_per_tick": PAIRS_PER_TICK_RANGE,
    "ticks_per_second": TICKS_PER_SECOND_RANGE,
    "rotation_average": ROTATION_AVERAGE_RANGE,
    "rotation_half_interval": ROTATION_HALF_INTERVAL_RANGE,
}


def clamp(value: int, bounds: tuple[int, int]) -> int:
    low, high = bounds
    return max(low, min(high, value))


def apply_tuning(config: GameConfig, key: str, value: int) -> int:
    """Clamp ``value`` into the knob's range, store it, and return what was stored."""
    if key not in TUNING_RANGES:
        valid = ", ".join(sorted(TUNING_RANGES))
        raise ValueError(f"unknown tuning key {key!r}; must be one of {valid}")
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{key} must be an integer value")
    stored = clamp(value, TUNING_RANGES[key])
    if key in ("rotation_average", "rotation_half_interval"):
        setattr(config.periodic, key, stored)
    else:
        setattr(config, key, stored)
    return stored


def reset_game_defaults(config: GameConfig) -> None:
    config.pairs_per_tick = PAIRS_PER_TICK
    config.ticks_per_second = TICKS_PER_SECOND


def reset_periodic_defaults(config: GameConfig) -> None:
    config.periodic.rotation_average = ROTATION_AVERAGE
    config.periodic.rotation_half_interval = ROTATION_HALF_INTERVAL
