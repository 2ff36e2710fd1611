"""Centralized domain constants for the arena simulation.

All magic numbers that appear across multiple modules are defined here.
Consuming modules should import from this module rather than defining
their own inline literals.
"""

from __future__ import annotations

ARENA_WIDTH = 40
"""Default arena width in cells."""

ARENA_HEIGHT = 24
"""Default arena height in cells."""

PAIRS_PER_TICK = 240
"""Default number of pair interactions attempted per tick."""

TICKS_PER_SECOND = 15
"""Default fixed-timestep rate."""

LFSR_SEED = 0xACE1
"""Default seed of the 16-bit LFSR. Must be nonzero."""

LFSR_MASK = 0xFFFF
"""Width mask of the LFSR state word."""

HUMAN_PLAYER = 0
"""Player index controlled by the human."""

NUM_PIECES = 3
"""Number of piece kinds in the rotation cycle."""

ROTATION_AVERAGE = 58
"""Default average rotation interval (ticks) of the periodic-jitter opponent."""

ROTATION_HALF_INTERVAL = 43
"""Default half-width of the periodic-jitter range (58 +/- 43 gives 15..101)."""

FIXED_CADENCE_INTERVAL = 40
"""Default rotation interval (ticks) of the fixed-cadence opponent."""

LOSS_REACTIVE_PER_LOSS_PERMILLE = 40
"""Reverse-rotation chance added per cell lost this tick, in per-mille."""

LOSS_REACTIVE_MAX_PERMILLE = 400
"""Cap on the loss-reactive reverse-rotation chance, in per-mille."""

ACCELERATING_INITIAL_INTERVAL = 100
"""First rotation period (ticks) of the accelerating opponent."""

ACCELERATING_DECREMENT = 10
"""Ticks removed from the accelerating opponent's period after each rotation."""

ACCELERATING_FLOOR = 15
"""Shortest period the accelerating opponent ever reaches."""

PAIRS_PER_TICK_RANGE = (50, 500)
"""Inclusive tuning range for pairs per tick."""

TICKS_PER_SECOND_RANGE = (5, 30)
"""Inclusive tuning range for the tick rate."""

ROTATION_AVERAGE_RANGE = (10, 200)
"""Inclusive tuning range for the periodic-jitter average."""

ROTATION_HALF_INTERVAL_RANGE = (5, 100)
"""Inclusive tuning range for the periodic-jitter half interval."""

FLUSH_THRESHOLD = 8_192
"""Flush tick log rows to Parquet once this in-memory row count is reached."""

MAX_MATCH_TICKS = 5_000
"""Default tick cap for one headless match."""

MAX_BATCH_WORK_UNITS = 50_000_000
"""Safety cap on total pair interactions across a headless batch."""
