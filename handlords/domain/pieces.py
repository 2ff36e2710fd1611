"""Piece kinds and their cyclic rock-paper-scissors precedence."""

from __future__ import annotations

from enum import IntEnum

from handlords.config.constants import NUM_PIECES


class Piece(IntEnum):
    """Symbol a player stamps on its cells. Values double as grid codes."""

    ROCK = 0
    PAPER = 1
    SCISSORS = 2

    def next(self) -> Piece:
        return Piece((self + 1) % NUM_PIECES)

    def previous(self) -> Piece:
        return Piece((self - 1) % NUM_PIECES)

    def step(self, direction: int) -> Piece:
        """Move ``direction`` places around the cycle (negative goes backwards)."""
        return Piece((self + direction) % NUM_PIECES)

    @property
    def symbol(self) -> str:
        return self.name[0]


def beats(attacker: Piece, defender: Piece) -> bool:
    """Return True when ``attacker`` wins outright against ``defender``.

    Each kind beats the one preceding it in the cycle: Paper beats Rock,
    Scissors beats Paper, Rock beats Scissors.
    """
    return attacker == defender.next()


def counter_of(piece: Piece) -> Piece:
    """Return the kind that beats ``piece``."""
    return piece.next()
