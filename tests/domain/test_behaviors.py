"""Tests for handlords.domain.behaviors module."""

from __future__ import annotations

import numpy as np
import pytest

from handlords.config.types import GameConfig
from handlords.domain.behaviors import (
    BEHAVIORS,
    _sample_jitter_period,
    accelerating,
    fixed_cadence,
    get_behavior,
    loss_reactive_reverse,
    periodic_jitter,
    run_behaviors,
)
from handlords.domain.grid import Grid
from handlords.domain.levels import new_game
from handlords.domain.pieces import Piece
from handlords.domain.players import PlayerState
from handlords.domain.rng import Lfsr16
from handlords.domain.state import GameState


def _opponent_cells_match(state: GameState) -> bool:
    pieces = state.grid.piece[state.grid.owned_mask(1)]
    return bool(np.all(pieces == state.players[1].current))


class TestPeriodicJitter:
    def test_samples_then_rotates_when_period_elapses(self) -> None:
        config = GameConfig()
        config.periodic.rotation_average = 10
        config.periodic.rotation_half_interval = 0
        state = new_game(config)
        albert = state.players[1]

        state.tick = 5
        periodic_jitter(state, albert)
        assert albert.rotation_period == 10
        assert albert.current == Piece.SCISSORS

        state.tick = 10
        periodic_jitter(state, albert)
        assert albert.current == Piece.ROCK
        assert albert.last_rotation_tick == 10
        assert albert.rotation_period == 10
        assert _opponent_cells_match(state)

    def test_sampled_periods_stay_in_range(self) -> None:
        state = new_game()
        periods = {_sample_jitter_period(state) for _ in range(2000)}
        assert min(periods) >= 15
        assert max(periods) <= 101
        assert len(periods) > 50

    def test_clamped_lower_bound(self) -> None:
        config = GameConfig()
        config.periodic.rotation_average = 10
        config.periodic.rotation_half_interval = 50
        state = new_game(config)
        periods = [_sample_jitter_period(state) for _ in range(2000)]
        assert min(periods) >= 1
        assert max(periods) <= 60

    def test_resample_reads_updated_config(self) -> None:
        config = GameConfig()
        config.periodic.rotation_average = 10
        config.periodic.rotation_half_interval = 0
        state = new_game(config)
        albert = state.players[1]
        periodic_jitter(state, albert)
        config.periodic.rotation_average = 30
        state.tick = 10
        periodic_jitter(state, albert)
        assert albert.rotation_period == 30


class TestFixedCadence:
    def test_rotates_every_interval(self) -> None:
        config = GameConfig()
        config.fixed_cadence.interval = 5
        state = new_game(config, behaviors={1: "fixed_cadence"})
        rotations = []
        for tick in range(1, 16):
            state.tick = tick
            before = state.players[1].current
            fixed_cadence(state, state.players[1])
            if state.players[1].current != before:
                rotations.append(tick)
        assert rotations == [5, 10, 15]
        assert _opponent_cells_match(state)


class TestLossReactiveReverse:
    def test_no_losses_no_draw(self) -> None:
        state = new_game()
        rng_before = state.rng_state
        loss_reactive_reverse(state, state.players[1])
        assert state.players[1].current == Piece.SCISSORS
        assert state.rng_state == rng_before

    def test_certain_chance_rotates_backwards(self) -> None:
        config = GameConfig()
        config.loss_reactive.per_loss_permille = 1000
        config.loss_reactive.max_permille = 1000
        state = new_game(config)
        state.players[1].tick_losses = 1
        loss_reactive_reverse(state, state.players[1])
        assert state.players[1].current == Piece.PAPER
        assert _opponent_cells_match(state)

    def test_zero_cap_never_rotates(self) -> None:
        config = GameConfig()
        config.loss_reactive.max_permille = 0
        state = new_game(config)
        state.players[1].tick_losses = 50
        for _ in range(100):
            loss_reactive_reverse(state, state.players[1])
        assert state.players[1].current == Piece.SCISSORS

    def test_chance_rises_with_losses(self) -> None:
        def rotations(losses: int) -> int:
            state = new_game()
            count = 0
            for _ in range(2000):
                before = state.players[1].current
                state.players[1].tick_losses = losses
                loss_reactive_reverse(state, state.players[1])
                count += state.players[1].current != before
            return count

        assert 0 < rotations(1) < rotations(5) < rotations(50)


class TestAccelerating:
    def test_period_shrinks_to_floor(self) -> None:
        config = GameConfig()
        config.accelerating.initial_interval = 10
        config.accelerating.decrement = 4
        config.accelerating.floor = 3
        state = new_game(config, behaviors={1: "accelerating"})
        player = state.players[1]
        rotations = []
        for tick in range(0, 30):
            state.tick = tick
            before = player.current
            accelerating(state, player)
            if player.current != before:
                rotations.append((tick, player.rotation_period))
        assert rotations[:4] == [(10, 6), (16, 3), (19, 3), (22, 3)]
        assert player.accel_counter == len(rotations)


class TestRegistry:
    def test_all_behaviors_registered(self) -> None:
        assert set(BEHAVIORS) == {
            "periodic_jitter",
            "fixed_cadence",
            "loss_reactive_reverse",
            "accelerating",
        }

    def test_unknown_behavior(self) -> None:
        with pytest.raises(ValueError, match="unknown behavior"):
            get_behavior("telepathic")

    def test_run_behaviors_in_index_order(self) -> None:
        calls: list[int] = []

        def record(state: GameState, player: PlayerState) -> None:
            calls.append(player.player_id)

        state = GameState(
            grid=Grid(3, 3),
            config=GameConfig(),
            rng=Lfsr16(),
            players=[PlayerState.create(i, Piece.ROCK) for i in range(4)],
            behaviors={3: record, 1: record, 2: record},
        )
        run_behaviors(state)
        assert calls == [1, 2, 3]
