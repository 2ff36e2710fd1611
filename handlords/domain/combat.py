"""Pair selection and rock-paper-scissors combat resolution.

One interaction picks a random source cell and one of its four cardinal
neighbors, then applies the first matching rule:

1. either cell is a wall: nothing happens
2. both cells are empty: nothing happens
3. one empty, one owned: the empty cell becomes a copy of the owned one
4. both owned by the same player: nothing happens
5. different owners, same piece: coin flip (RNG low bit) picks the winner
6. different owners, different pieces: rock > scissors > paper > rock

In rules 5 and 6 the loser's cell becomes a copy of the winner's and the
losing player's tick-scoped loss counter goes up by one.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from handlords.domain.grid import Cell, CellKind
from handlords.domain.pieces import beats
from handlords.domain.stats import TickStats

if TYPE_CHECKING:
    from handlords.domain.state import GameState

# N, E, S, W; selected by the low two bits of one RNG draw
NEIGHBOR_OFFSETS: tuple[tuple[int, int], ...] = ((0, -1), (1, 0), (0, 1), (-1, 0))


class PairOutcome(Enum):
    OUT_OF_BOUNDS = "out_of_bounds"
    WALL = "wall"
    BOTH_EMPTY = "both_empty"
    FILL = "fill"
    SAME_OWNER = "same_owner"
    TIE_BREAK = "tie_break"
    RPS = "rps"


_WALL_EMPTY = frozenset({PairOutcome.WALL, PairOutcome.BOTH_EMPTY, PairOutcome.FILL})
_BATTLES = frozenset({PairOutcome.TIE_BREAK, PairOutcome.RPS})


def pick_neighbor(x: int, y: int, r: int) -> tuple[int, int]:
    dx, dy = NEIGHBOR_OFFSETS[r % 4]
    return x + dx, y + dy


def _record_loss(state: GameState, loser: int) -> None:
    assert loser < len(state.players), f"cell owner {loser} outside player list"
    if loser < len(state.players):
        state.players[loser].tick_losses += 1


def resolve_pair(state: GameState, x: int, y: int, nx: int, ny: int) -> PairOutcome:
    """Apply the rule table to the ordered pair (source, neighbor)."""
    grid = state.grid
    if not grid.in_bounds(nx, ny):
        return PairOutcome.OUT_OF_BOUNDS

    a = grid.at(x, y)
    b = grid.at(nx, ny)

    if a.kind == CellKind.WALL or b.kind == CellKind.WALL:
        return PairOutcome.WALL
    if a.kind == CellKind.EMPTY and b.kind == CellKind.EMPTY:
        return PairOutcome.BOTH_EMPTY
    if a.kind == CellKind.EMPTY:
        grid.set(x, y, b)
        return PairOutcome.FILL
    if b.kind == CellKind.EMPTY:
        grid.set(nx, ny, a)
        return PairOutcome.FILL

    if a.owner == b.owner:
        return PairOutcome.SAME_OWNER

    if a.piece == b.piece:
        a_wins = bool(state.rng.next_u16() & 1)
        outcome = PairOutcome.TIE_BREAK
    else:
        a_wins = beats(a.piece, b.piece)
        outcome = PairOutcome.RPS

    if a_wins:
        _conquer(state, winner=a, loser=b, lx=nx, ly=ny)
    else:
        _conquer(state, winner=b, loser=a, lx=x, ly=y)
    return outcome


def _conquer(state: GameState, winner: Cell, loser: Cell, lx: int, ly: int) -> None:
    state.grid.set(lx, ly, winner)
    _record_loss(state, loser.owner)


def resolve_pairs(state: GameState, count: int) -> TickStats:
    """Run ``count`` random interactions and return the tallies."""
    grid = state.grid
    rng = state.rng
    battles = same_owner = wall_empty = 0
    for _ in range(count):
        x = rng.next_u16() % grid.width
        y = rng.next_u16() % grid.height
        nx, ny = pick_neighbor(x, y, rng.next_u16())
        outcome = resolve_pair(state, x, y, nx, ny)
        if outcome in _BATTLES:
            battles += 1
        elif outcome == PairOutcome.SAME_OWNER:
            same_owner += 1
        elif outcome in _WALL_EMPTY:
            wall_empty += 1
    return TickStats(
        attempts=max(count, 0),
        battles=battles,
        same_owner=same_owner,
        wall_empty=wall_empty,
    )
