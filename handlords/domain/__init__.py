"""Domain layer: grid, pieces, randomness, combat, players, behaviors, levels."""

from handlords.domain.behaviors import BEHAVIORS, get_behavior, run_behaviors
from handlords.domain.combat import PairOutcome, pick_neighbor, resolve_pair, resolve_pairs
from handlords.domain.grid import Cell, CellKind, Grid
from handlords.domain.levels import LEVELS, LevelSpec, load_level, new_game
from handlords.domain.pieces import Piece, beats, counter_of
from handlords.domain.players import PlayerState, rotate
from handlords.domain.rng import Lfsr16, SystemRng, make_rng
from handlords.domain.state import GameSnapshot, GameState, Phase, snapshot
from handlords.domain.stats import CombatRateWindow, TickStats

__all__ = [
    "BEHAVIORS",
    "Cell",
    "CellKind",
    "CombatRateWindow",
    "GameSnapshot",
    "GameState",
    "Grid",
    "LEVELS",
    "LevelSpec",
    "Lfsr16",
    "PairOutcome",
    "Phase",
    "Piece",
    "PlayerState",
    "SystemRng",
    "TickStats",
    "beats",
    "counter_of",
    "get_behavior",
    "load_level",
    "make_rng",
    "new_game",
    "pick_neighbor",
    "resolve_pair",
    "resolve_pairs",
    "rotate",
    "run_behaviors",
    "snapshot",
]
