"""Opponent behaviors.

Every behavior has the same contract: it is called exactly once per
playing tick, after combat resolution, with the shared state and its own
player record. It may read anything but only mutates its own player (and,
through ``rotate``, that player's cells). Tuning is read from
``state.config`` on every call so runtime changes take effect immediately.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from handlords.domain.players import PlayerState, rotate

if TYPE_CHECKING:
    from handlords.domain.state import Behavior, GameState

logger = logging.getLogger(__name__)


def _elapsed(state: GameState, player: PlayerState) -> int:
    return state.tick - player.last_rotation_tick


def _sample_jitter_period(state: GameState) -> int:
    low, high = state.config.periodic.interval_bounds()
    return low + state.rng.next_u16() % (high - low + 1)


def periodic_jitter(state: GameState, player: PlayerState) -> None:
    """Rotate forward after a period drawn uniformly from avg +/- half."""
    if player.rotation_period == 0:
        player.rotation_period = _sample_jitter_period(state)
    if _elapsed(state, player) >= player.rotation_period:
        piece = rotate(state, player.player_id)
        player.rotation_period = _sample_jitter_period(state)
        logger.debug(
            "player %d rotated to %s at tick %d; next period %d",
            player.player_id,
            piece.name,
            state.tick,
            player.rotation_period,
        )


def fixed_cadence(state: GameState, player: PlayerState) -> None:
    """Rotate forward every ``fixed_cadence.interval`` ticks."""
    player.rotation_period = state.config.fixed_cadence.interval
    if _elapsed(state, player) >= player.rotation_period:
        rotate(state, player.player_id)


def loss_reactive_reverse(state: GameState, player: PlayerState) -> None:
    """Rotate backwards with a chance that grows with cells lost this tick."""
    if player.tick_losses == 0:
        return
    tuning = state.config.loss_reactive
    chance = min(tuning.max_permille, player.tick_losses * tuning.per_loss_permille)
    if chance == 0:
        return
    if state.rng.next_u16() % 1000 < chance:
        rotate(state, player.player_id, direction=-1)


def accelerating(state: GameState, player: PlayerState) -> None:
    """Rotate forward on a period that shrinks after each rotation, down to a floor."""
    tuning = state.config.accelerating
    if player.rotation_period == 0:
        player.rotation_period = max(
            tuning.floor, tuning.initial_interval - player.accel_counter * tuning.decrement
        )
    if _elapsed(state, player) >= player.rotation_period:
        rotate(state, player.player_id)
        player.accel_counter += 1
        player.rotation_period = max(
            tuning.floor, tuning.initial_interval - player.accel_counter * tuning.decrement
        )


BEHAVIORS: dict[str, Behavior] = {
    "periodic_jitter": periodic_jitter,
    "fixed_cadence": fixed_cadence,
    "loss_reactive_reverse": loss_reactive_reverse,
    "accelerating": accelerating,
}


def get_behavior(name: str) -> Behavior:
    try:
        return BEHAVIORS[name]
    except KeyError as exc:
        valid = ", ".join(sorted(BEHAVIORS))
        raise ValueError(f"unknown behavior {name!r}; must be one of {valid}") from exc


def run_behaviors(state: GameState) -> None:
    """Invoke each registered behavior once, in player-index order."""
    for index in sorted(state.behaviors):
        state.behaviors[index](state, state.players[index])
