"""Tests for handlords.config.tuning."""

from __future__ import annotations

import pytest

from handlords.config.tuning import (
    apply_tuning,
    reset_game_defaults,
    reset_periodic_defaults,
)
from handlords.config.types import GameConfig


class TestApplyTuning:
    def test_in_range_value_stored_verbatim(self) -> None:
        config = GameConfig()
        assert apply_tuning(config, "pairs_per_tick", 300) == 300
        assert config.pairs_per_tick == 300

    def test_values_clamped_to_range(self) -> None:
        config = GameConfig()
        assert apply_tuning(config, "pairs_per_tick", 10_000) == 500
        assert apply_tuning(config, "ticks_per_second", 0) == 5
        assert config.pairs_per_tick == 500
        assert config.ticks_per_second == 5

    def test_periodic_keys_route_to_sub_config(self) -> None:
        config = GameConfig()
        apply_tuning(config, "rotation_average", 1)
        apply_tuning(config, "rotation_half_interval", 500)
        assert config.periodic.rotation_average == 10
        assert config.periodic.rotation_half_interval == 100
        assert config.periodic.interval_bounds() == (1, 110)

    def test_unknown_key_rejected(self) -> None:
        with pytest.raises(ValueError, match="unknown tuning key"):
            apply_tuning(GameConfig(), "gravity", 3)

    def test_bool_rejected(self) -> None:
        with pytest.raises(ValueError):
            apply_tuning(GameConfig(), "pairs_per_tick", True)


def test_reset_defaults_restores_values() -> None:
    config = GameConfig()
    apply_tuning(config, "pairs_per_tick", 60)
    apply_tuning(config, "ticks_per_second", 30)
    apply_tuning(config, "rotation_average", 150)
    apply_tuning(config, "rotation_half_interval", 5)
    reset_game_defaults(config)
    reset_periodic_defaults(config)
    assert config.pairs_per_tick == 240
    assert config.ticks_per_second == 15
    assert config.periodic.rotation_average == 58
    assert config.periodic.rotation_half_interval == 43
