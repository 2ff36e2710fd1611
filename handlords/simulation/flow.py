"""Phase state machine and the discrete intents the core accepts.

    READY --begin--> PLAYING --tick--> PLAYING
                        |--> LOST --acknowledge--> READY
                        '--> WON  --acknowledge--> READY

Intents issued in the wrong phase are ignored and return False.
"""

from __future__ import annotations

import logging

from handlords.config.constants import HUMAN_PLAYER
from handlords.config.types import RngMode
from handlords.domain.behaviors import run_behaviors
from handlords.domain.combat import resolve_pairs
from handlords.domain.levels import load_level
from handlords.domain.pieces import Piece
from handlords.domain.players import rotate
from handlords.domain.rng import make_rng
from handlords.domain.state import TERMINAL_PHASES, GameState, Phase

logger = logging.getLogger(__name__)


def _transition(state: GameState, phase: Phase) -> None:
    logger.info("phase %s -> %s at tick %d", state.phase.value, phase.value, state.tick)
    state.phase = phase


def begin(state: GameState) -> bool:
    if state.phase != Phase.READY:
        return False
    _transition(state, Phase.PLAYING)
    return True


def rotate_human_forward(state: GameState) -> bool:
    if state.phase != Phase.PLAYING:
        return False
    rotate(state, HUMAN_PLAYER)
    return True


def acknowledge(state: GameState) -> bool:
    """Leave a terminal phase and restart the current level from scratch."""
    if state.phase not in TERMINAL_PHASES:
        return False
    state.tick = 0
    for player in state.players:
        player.reset()
    load_level(state)
    _transition(state, Phase.READY)
    return True


def evaluate_outcome(territory: list[int]) -> Phase | None:
    """Return LOST or WON when the territory counts end the match, else None."""
    human = territory[HUMAN_PLAYER]
    opponents = territory[HUMAN_PLAYER + 1 :]
    if human == 0 and any(count > 0 for count in opponents):
        return Phase.LOST
    if human > 0 and all(count == 0 for count in opponents):
        return Phase.WON
    return None


def advance_tick(state: GameState) -> bool:
    """Run one fixed timestep. Only PLAYING does any work; returns whether it did."""
    if state.phase != Phase.PLAYING:
        return False
    _sync_rng(state)
    state.tick += 1
    for player in state.players:
        player.tick_losses = 0
    state.last_stats = resolve_pairs(state, state.config.pairs_per_tick)
    run_behaviors(state)
    outcome = evaluate_outcome(state.territory())
    if outcome is not None:
        _transition(state, outcome)
    return True


# ---------------------------------------------------------------------------
# Debug intents
# ---------------------------------------------------------------------------


def force_rotation(state: GameState, player_index: int) -> Piece:
    """Rotate an opponent now and make its behavior resample its period."""
    if player_index == HUMAN_PLAYER:
        raise ValueError("force_rotation is for computer-controlled players")
    piece = rotate(state, player_index)
    state.players[player_index].rotation_period = 0
    return piece


def reset_behavior_timer(state: GameState, player_index: int) -> None:
    state.players[player_index].rotation_period = 0


def set_rng_mode(state: GameState, mode: RngMode) -> None:
    """Swap the randomness source mid-session and record that it happened.

    Any switch leaves ``state.reproducible`` False: the tick at which the
    source changed is not part of a seed, so the run cannot be replayed.
    """
    if state.rng.mode == mode:
        return
    state.rng = make_rng(mode, state.config.rng_seed)
    state.config.rng_mode = mode
    state.rng_switches.append((state.tick, mode))
    state.reproducible = False
    logger.warning(
        "RNG switched to %s at tick %d; this run is no longer reproducible",
        mode.value,
        state.tick,
    )


def _sync_rng(state: GameState) -> None:
    if state.config.rng_mode != state.rng.mode:
        set_rng_mode(state, state.config.rng_mode)
