"""Aggregate simulation state and the read-only snapshot handed to presenters."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum

import numpy as np

from handlords.config.types import GameConfig, RngMode
from handlords.domain.grid import Grid
from handlords.domain.pieces import Piece
from handlords.domain.players import PlayerState
from handlords.domain.rng import RandomSource
from handlords.domain.stats import TickStats


class Phase(Enum):
    READY = "ready"
    PLAYING = "playing"
    LOST = "lost"
    WON = "won"
    GAME_WON = "game_won"
    """Campaign completion; unreachable while only one level exists."""


TERMINAL_PHASES = frozenset({Phase.LOST, Phase.WON, Phase.GAME_WON})

Behavior = Callable[["GameState", PlayerState], None]
"""Per-tick opponent decision function. May only mutate its own player."""


@dataclass
class GameState:
    """Everything one session owns. Passed explicitly through the tick pipeline."""

    grid: Grid
    config: GameConfig
    rng: RandomSource
    players: list[PlayerState]
    behaviors: dict[int, Behavior] = field(default_factory=dict)
    level: int = 1
    phase: Phase = Phase.READY
    tick: int = 0
    last_stats: TickStats = field(default_factory=TickStats)
    reproducible: bool = True
    """False once a non-deterministic source has been used in this session."""
    rng_switches: list[tuple[int, RngMode]] = field(default_factory=list)

    @property
    def rng_state(self) -> int | None:
        """Current LFSR word, or None under the system generator."""
        return getattr(self.rng, "state", None)

    def territory(self) -> list[int]:
        return self.grid.territory_counts(len(self.players))


@dataclass(frozen=True)
class PlayerView:
    player_id: int
    current: Piece
    last_rotation_tick: int
    tick_losses: int
    rotation_period: int
    ticks_until_rotation: int


@dataclass(frozen=True)
class GameSnapshot:
    """Immutable view sufficient to draw the arena and a debug panel."""

    tick: int
    phase: Phase
    level: int
    rng_state: int | None
    reproducible: bool
    players: tuple[PlayerView, ...]
    territory: tuple[int, ...]
    stats: TickStats
    kind: np.ndarray
    owner: np.ndarray
    piece: np.ndarray


def _frozen(plane: np.ndarray) -> np.ndarray:
    out = plane.copy()
    out.flags.writeable = False
    return out


def snapshot(state: GameState) -> GameSnapshot:
    players = tuple(
        PlayerView(
            player_id=p.player_id,
            current=p.current,
            last_rotation_tick=p.last_rotation_tick,
            tick_losses=p.tick_losses,
            rotation_period=p.rotation_period,
            ticks_until_rotation=p.ticks_until_rotation(state.tick),
        )
        for p in state.players
    )
    return GameSnapshot(
        tick=state.tick,
        phase=state.phase,
        level=state.level,
        rng_state=state.rng_state,
        reproducible=state.reproducible,
        players=players,
        territory=tuple(state.territory()),
        stats=state.last_stats,
        kind=_frozen(state.grid.kind),
        owner=_frozen(state.grid.owner),
        piece=_frozen(state.grid.piece),
    )
