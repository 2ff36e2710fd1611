"""Tests for handlords.domain.levels module."""

from __future__ import annotations

import pytest

from handlords.config.types import GameConfig, RngMode
from handlords.domain.behaviors import fixed_cadence, periodic_jitter
from handlords.domain.grid import Cell, CellKind
from handlords.domain.levels import get_level, load_level, new_game
from handlords.domain.pieces import Piece
from handlords.domain.state import Phase


class TestLevelOne:
    def test_starts_ready_at_tick_zero(self) -> None:
        state = new_game()
        assert state.phase == Phase.READY
        assert state.tick == 0
        assert state.level == 1
        assert state.reproducible

    def test_roster(self) -> None:
        state = new_game()
        assert [p.current for p in state.players] == [Piece.ROCK, Piece.SCISSORS]
        assert [p.player_id for p in state.players] == [0, 1]
        assert state.behaviors == {1: periodic_jitter}

    def test_wall_border(self) -> None:
        grid = new_game().grid
        for x in range(grid.width):
            assert grid[x, 0] == Cell.wall()
            assert grid[x, grid.height - 1] == Cell.wall()
        for y in range(grid.height):
            assert grid[0, y] == Cell.wall()
            assert grid[grid.width - 1, y] == Cell.wall()

    def test_interior_split_in_halves(self) -> None:
        grid = new_game().grid
        assert grid[1, 1] == Cell.owned(0, Piece.ROCK)
        assert grid[19, 22] == Cell.owned(0, Piece.ROCK)
        assert grid[20, 1] == Cell.owned(1, Piece.SCISSORS)
        assert grid[38, 22] == Cell.owned(1, Piece.SCISSORS)
        assert grid.territory_counts(2) == [19 * 22, 19 * 22]
        assert int((grid.kind == CellKind.EMPTY).sum()) == 0

    def test_layout_uses_current_pieces(self) -> None:
        state = new_game()
        state.players[0].current = Piece.PAPER
        load_level(state)
        assert state.grid[1, 1] == Cell.owned(0, Piece.PAPER)

    def test_small_arena(self) -> None:
        state = new_game(width=6, height=4)
        assert state.grid.territory_counts(2) == [4, 4]


class TestNewGame:
    def test_behavior_override(self) -> None:
        state = new_game(behaviors={1: "fixed_cadence"})
        assert state.behaviors == {1: fixed_cadence}

    @pytest.mark.parametrize("index", [0, 2, -1])
    def test_behavior_on_invalid_index_rejected(self, index: int) -> None:
        with pytest.raises(ValueError):
            new_game(behaviors={index: "fixed_cadence"})

    def test_unknown_level(self) -> None:
        with pytest.raises(ValueError, match="unknown level"):
            get_level(2)

    def test_seed_from_config(self) -> None:
        state = new_game(GameConfig(rng_seed=0x1234))
        assert state.rng_state == 0x1234

    def test_system_rng_marks_session_unreproducible(self) -> None:
        state = new_game(GameConfig(rng_mode=RngMode.SYSTEM))
        assert not state.reproducible
        assert state.rng_state is None
