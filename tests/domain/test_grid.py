"""Tests for handlords.domain.grid module."""

from __future__ import annotations

import numpy as np
import pytest

from handlords.domain.grid import Cell, CellKind, Grid
from handlords.domain.pieces import Piece


class TestGridAddressing:
    def test_default_dimensions(self) -> None:
        grid = Grid()
        assert (grid.width, grid.height) == (40, 24)
        assert grid.kind.shape == (24, 40)

    def test_new_grid_is_empty(self) -> None:
        grid = Grid(5, 3)
        assert all(grid.at(x, y) == Cell.empty() for x in range(5) for y in range(3))

    @pytest.mark.parametrize("xy", [(-1, 0), (0, -1), (5, 0), (0, 3), (7, 9)])
    def test_out_of_range_is_an_error(self, xy: tuple[int, int]) -> None:
        grid = Grid(5, 3)
        assert not grid.in_bounds(*xy)
        with pytest.raises(IndexError):
            grid.at(*xy)
        with pytest.raises(IndexError):
            grid[xy] = Cell.wall()

    def test_assignment_round_trips_per_kind(self) -> None:
        grid = Grid(3, 1)
        grid[0, 0] = Cell.wall()
        grid[1, 0] = Cell.owned(1, Piece.PAPER)
        assert grid[0, 0] == Cell.wall()
        assert grid[1, 0] == Cell(CellKind.OWNED, 1, Piece.PAPER)
        assert grid[2, 0] == Cell.empty()

    def test_row_major_layout(self) -> None:
        grid = Grid(4, 2)
        grid[3, 1] = Cell.wall()
        assert grid.kind[1, 3] == CellKind.WALL
        assert grid.kind[0, 3] == CellKind.EMPTY


class TestGridNormalization:
    def test_owner_and_piece_cleared_when_cell_stops_being_owned(self) -> None:
        grid = Grid(2, 1)
        grid[0, 0] = Cell.owned(3, Piece.SCISSORS)
        grid[0, 0] = Cell.empty()
        assert grid.owner[0, 0] == 0
        assert grid.piece[0, 0] == 0

    def test_non_owned_fields_ignored_on_write(self) -> None:
        grid = Grid(1, 1)
        grid[0, 0] = Cell(CellKind.WALL, owner=4, piece=Piece.PAPER)
        assert grid[0, 0] == Cell.wall()

    def test_clear_resets_everything(self) -> None:
        grid = Grid(3, 3)
        grid[1, 1] = Cell.owned(1, Piece.ROCK)
        grid[0, 0] = Cell.wall()
        grid.clear()
        assert grid == Grid(3, 3)


class TestGridQueries:
    def test_territory_counts(self) -> None:
        grid = Grid(4, 1)
        grid[0, 0] = Cell.owned(0, Piece.ROCK)
        grid[1, 0] = Cell.owned(1, Piece.PAPER)
        grid[2, 0] = Cell.owned(1, Piece.PAPER)
        grid[3, 0] = Cell.wall()
        assert grid.territory_counts(2) == [1, 2]
        assert grid.territory_counts(3) == [1, 2, 0]
        assert grid.owned_count() == 3

    def test_territory_counts_with_no_owned_cells(self) -> None:
        assert Grid(3, 3).territory_counts(2) == [0, 0]

    def test_owner_outside_player_list_trips_assertion(self) -> None:
        grid = Grid(2, 1)
        grid[0, 0] = Cell.owned(5, Piece.ROCK)
        with pytest.raises(AssertionError):
            grid.territory_counts(2)

    def test_owned_mask(self) -> None:
        grid = Grid(3, 1)
        grid[0, 0] = Cell.owned(1, Piece.ROCK)
        grid[2, 0] = Cell.owned(0, Piece.ROCK)
        np.testing.assert_array_equal(grid.owned_mask(1), [[True, False, False]])

    def test_empty_cells_never_count_as_owner_zero(self) -> None:
        grid = Grid(3, 1)
        assert not grid.owned_mask(0).any()

    def test_copy_is_independent(self) -> None:
        grid = Grid(2, 2)
        grid[0, 0] = Cell.wall()
        clone = grid.copy()
        assert clone == grid
        clone[1, 1] = Cell.owned(0, Piece.ROCK)
        assert clone != grid

    def test_cell_owned_rejects_negative_owner(self) -> None:
        with pytest.raises(ValueError):
            Cell.owned(-1, Piece.ROCK)
