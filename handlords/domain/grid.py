"""Fixed-size arena grid stored as three numpy planes.

Cells are addressed by ``(x, y)``; the planes are indexed ``[y, x]`` so the
layout is row-major. Owner and piece planes are kept at zero for Empty and
Wall cells, which makes plane-level equality equivalent to cell equality.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

import numpy as np

from handlords.config.constants import ARENA_HEIGHT, ARENA_WIDTH
from handlords.domain.pieces import Piece


class CellKind(IntEnum):
    EMPTY = 0
    WALL = 1
    OWNED = 2


@dataclass(frozen=True)
class Cell:
    """Tagged cell value. ``owner`` and ``piece`` only mean something when OWNED."""

    kind: CellKind = CellKind.EMPTY
    owner: int = 0
    piece: Piece = Piece.ROCK

    @classmethod
    def empty(cls) -> Cell:
        return cls()

    @classmethod
    def wall(cls) -> Cell:
        return cls(kind=CellKind.WALL)

    @classmethod
    def owned(cls, owner: int, piece: Piece) -> Cell:
        if owner < 0:
            raise ValueError("owner must be >= 0")
        return cls(kind=CellKind.OWNED, owner=owner, piece=Piece(piece))

    @property
    def is_owned(self) -> bool:
        return self.kind == CellKind.OWNED


_EMPTY = Cell.empty()
_WALL = Cell.wall()


class Grid:
    """W x H cell storage with explicit bounds checking."""

    def __init__(self, width: int = ARENA_WIDTH, height: int = ARENA_HEIGHT) -> None:
        if width < 1 or height < 1:
            raise ValueError("grid dimensions must be >= 1")
        self.width = width
        self.height = height
        self.kind = np.zeros((height, width), dtype=np.uint8)
        self.owner = np.zeros((height, width), dtype=np.uint8)
        self.piece = np.zeros((height, width), dtype=np.uint8)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _check(self, x: int, y: int) -> None:
        # numpy would silently wrap negative indices
        if not self.in_bounds(x, y):
            raise IndexError(f"cell ({x}, {y}) outside {self.width}x{self.height} grid")

    def at(self, x: int, y: int) -> Cell:
        self._check(x, y)
        kind = self.kind[y, x]
        if kind == CellKind.EMPTY:
            return _EMPTY
        if kind == CellKind.WALL:
            return _WALL
        return Cell(CellKind.OWNED, int(self.owner[y, x]), Piece(int(self.piece[y, x])))

    def set(self, x: int, y: int, cell: Cell) -> None:
        self._check(x, y)
        self.kind[y, x] = cell.kind
        if cell.kind == CellKind.OWNED:
            self.owner[y, x] = cell.owner
            self.piece[y, x] = cell.piece
        else:
            self.owner[y, x] = 0
            self.piece[y, x] = 0

    def __getitem__(self, xy: tuple[int, int]) -> Cell:
        return self.at(*xy)

    def __setitem__(self, xy: tuple[int, int], cell: Cell) -> None:
        self.set(xy[0], xy[1], cell)

    def clear(self) -> None:
        self.kind.fill(CellKind.EMPTY)
        self.owner.fill(0)
        self.piece.fill(0)

    def copy(self) -> Grid:
        clone = Grid(self.width, self.height)
        clone.kind[:] = self.kind
        clone.owner[:] = self.owner
        clone.piece[:] = self.piece
        return clone

    def owned_mask(self, owner: int) -> np.ndarray:
        """Boolean [y, x] mask of the cells owned by ``owner``."""
        return (self.kind == CellKind.OWNED) & (self.owner == owner)

    def owned_count(self) -> int:
        return int(np.count_nonzero(self.kind == CellKind.OWNED))

    def territory_counts(self, n_players: int) -> list[int]:
        """Owned-cell count per player index ``0..n_players-1``.

        Owner codes at or beyond ``n_players`` are a defect; they fail the
        assertion when assertions are enabled and are otherwise left out.
        """
        owners = self.owner[self.kind == CellKind.OWNED]
        counts = np.bincount(owners, minlength=n_players)
        assert len(counts) <= n_players, f"cell owner outside player list ({n_players} players)"
        return [int(c) for c in counts[:n_players]]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and np.array_equal(self.kind, other.kind)
            and np.array_equal(self.owner, other.owner)
            and np.array_equal(self.piece, other.piece)
        )

    __hash__ = None  # type: ignore[assignment]

