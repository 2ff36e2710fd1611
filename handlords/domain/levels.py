"""Level layouts, starting rosters, and the game factory."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass

from handlords.config.constants import ARENA_HEIGHT, ARENA_WIDTH, HUMAN_PLAYER
from handlords.config.types import GameConfig, RngMode
from handlords.domain.behaviors import get_behavior
from handlords.domain.grid import Cell, Grid
from handlords.domain.pieces import Piece
from handlords.domain.players import PlayerState
from handlords.domain.rng import make_rng
from handlords.domain.state import GameState

logger = logging.getLogger(__name__)

LayoutFn = Callable[[GameState], None]


@dataclass(frozen=True)
class LevelSpec:
    level_id: int
    starting_pieces: tuple[Piece, ...]
    """Starting piece per player index; index 0 is the human."""
    behaviors: tuple[tuple[int, str], ...]
    """(player index, behavior name) for every computer-controlled player."""
    layout: LayoutFn


def stamp_walled_halves(state: GameState) -> None:
    """Outer wall ring; left half of the interior to the human, right half to player 1."""
    grid = state.grid
    grid.clear()
    w, h = grid.width, grid.height
    for x in range(w):
        grid[x, 0] = Cell.wall()
        grid[x, h - 1] = Cell.wall()
    for y in range(h):
        grid[0, y] = Cell.wall()
        grid[w - 1, y] = Cell.wall()
    left = Cell.owned(HUMAN_PLAYER, state.players[HUMAN_PLAYER].current)
    right = Cell.owned(1, state.players[1].current)
    for y in range(1, h - 1):
        for x in range(1, w - 1):
            grid[x, y] = left if x < w // 2 else right


LEVELS: dict[int, LevelSpec] = {
    1: LevelSpec(
        level_id=1,
        starting_pieces=(Piece.ROCK, Piece.SCISSORS),
        behaviors=((1, "periodic_jitter"),),
        layout=stamp_walled_halves,
    ),
}


def get_level(level_id: int) -> LevelSpec:
    try:
        return LEVELS[level_id]
    except KeyError as exc:
        valid = ", ".join(str(k) for k in sorted(LEVELS))
        raise ValueError(f"unknown level {level_id}; must be one of {valid}") from exc


def load_level(state: GameState) -> None:
    """Stamp the active level's layout using each player's current piece."""
    get_level(state.level).layout(state)
    logger.debug("loaded level %d", state.level)


def new_game(
    config: GameConfig | None = None,
    level_id: int = 1,
    behaviors: Mapping[int, str] | None = None,
    width: int = ARENA_WIDTH,
    height: int = ARENA_HEIGHT,
) -> GameState:
    """Build a Ready-phase session with the level's roster and layout loaded.

    ``behaviors`` overrides the level's opponent assignment by player index.
    """
    config = config or GameConfig()
    spec = get_level(level_id)
    players = [PlayerState.create(i, piece) for i, piece in enumerate(spec.starting_pieces)]
    assignment = dict(spec.behaviors)
    if behaviors is not None:
        assignment.update(behaviors)
    for index in assignment:
        if index == HUMAN_PLAYER or not 0 <= index < len(players):
            raise ValueError(f"behavior assigned to invalid opponent index {index}")
    state = GameState(
        grid=Grid(width, height),
        config=config,
        rng=make_rng(config.rng_mode, config.rng_seed),
        players=players,
        behaviors={index: get_behavior(name) for index, name in assignment.items()},
        level=level_id,
        reproducible=config.rng_mode == RngMode.LFSR,
    )
    if config.rng_mode != RngMode.LFSR:
        logger.warning("session started with %s RNG; run is not reproducible", config.rng_mode.value)
    load_level(state)
    return state
