"""Per-player symbol state and the rotation sweep."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from handlords.domain.pieces import Piece

if TYPE_CHECKING:
    from handlords.domain.state import GameState


@dataclass
class PlayerState:
    """Mutable per-player record. Index in ``GameState.players`` equals ``player_id``."""

    player_id: int
    current: Piece
    starting_piece: Piece
    last_rotation_tick: int = 0
    tick_losses: int = 0
    rotation_period: int = 0
    """Ticks until the next scheduled rotation; 0 means not yet sampled."""
    accel_counter: int = 0

    @classmethod
    def create(cls, player_id: int, piece: Piece) -> PlayerState:
        return cls(player_id=player_id, current=piece, starting_piece=piece)

    def reset(self) -> None:
        """Restore the starting piece and clear all scheduling state."""
        self.current = self.starting_piece
        self.last_rotation_tick = 0
        self.tick_losses = 0
        self.rotation_period = 0
        self.accel_counter = 0

    def ticks_until_rotation(self, tick: int) -> int:
        if self.rotation_period == 0:
            return 0
        return self.rotation_period - (tick - self.last_rotation_tick)


def rotate(state: GameState, player_index: int, direction: int = 1) -> Piece:
    """Turn a player's piece one step and restamp every cell it owns.

    ``direction`` is +1 (forward) or -1 (reverse). Returns the new piece.
    """
    if direction not in (1, -1):
        raise ValueError("direction must be +1 or -1")
    player = state.players[player_index]
    player.current = player.current.step(direction)
    player.last_rotation_tick = state.tick
    grid = state.grid
    grid.piece[grid.owned_mask(player.player_id)] = player.current
    return player.current
