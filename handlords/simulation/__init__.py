"""Simulation layer: phase flow, fixed-step clock, and headless match engine."""

from handlords.simulation.clock import FixedStepClock
from handlords.simulation.engine import MatchResult, run_matches
from handlords.simulation.flow import (
    acknowledge,
    advance_tick,
    begin,
    evaluate_outcome,
    force_rotation,
    reset_behavior_timer,
    rotate_human_forward,
    set_rng_mode,
)

__all__ = [
    "FixedStepClock",
    "MatchResult",
    "acknowledge",
    "advance_tick",
    "begin",
    "evaluate_outcome",
    "force_rotation",
    "reset_behavior_timer",
    "rotate_human_forward",
    "run_matches",
    "set_rng_mode",
]
