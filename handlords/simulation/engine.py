"""Headless match engine: seeded batches with a scripted human player."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

from handlords.config.constants import (
    FLUSH_THRESHOLD,
    HUMAN_PLAYER,
    LFSR_MASK,
    MAX_BATCH_WORK_UNITS,
)
from handlords.config.types import HumanPolicy, RunConfig
from handlords.domain.levels import new_game
from handlords.domain.pieces import counter_of
from handlords.domain.state import GameState, Phase
from handlords.domain.stats import CombatRateWindow
from handlords.io.paths import logs_dir, match_summary_path, matches_dir, tick_log_path
from handlords.io.schemas import (
    MATCH_PAYLOAD_SCHEMA_VERSION,
    MATCH_SUMMARY_SCHEMA,
    MATCH_SUMMARY_SCHEMA_VERSION,
    TICK_LOG_SCHEMA,
)
from handlords.simulation.flow import advance_tick, begin, rotate_human_forward
from handlords.simulation.persistence import empty_tick_columns, flush_tick_columns

logger = logging.getLogger(__name__)

OPPONENT = HUMAN_PLAYER + 1


@dataclass(frozen=True)
class MatchResult:
    match_id: str
    seed: int
    outcome: Phase
    ticks: int
    human_cells: int
    opponent_cells: int


def match_seed(base_seed: int, index: int) -> int:
    """Map ``base_seed + index`` onto 1..0xFFFF so every match gets a valid LFSR seed."""
    return (base_seed + index - 1) % LFSR_MASK + 1


def _match_id(config: RunConfig, seed: int) -> str:
    return f"{config.opponent_behavior}_{config.human_policy.value}_s{seed}"


def apply_human_policy(state: GameState, policy: HumanPolicy, period: int) -> bool:
    """Issue the scripted human's intent for the coming tick. Returns True if it rotated."""
    if policy == HumanPolicy.COUNTER:
        wanted = counter_of(state.players[OPPONENT].current)
        if state.players[HUMAN_PLAYER].current != wanted:
            return rotate_human_forward(state)
    elif policy == HumanPolicy.PERIODIC:
        if state.tick > 0 and state.tick % period == 0:
            return rotate_human_forward(state)
    return False


def run_matches(config: RunConfig) -> list[MatchResult]:
    """Play ``config.n_matches`` seeded matches and persist JSON/Parquet outputs."""
    work_units = config.n_matches * config.max_ticks * config.pairs_per_tick
    if work_units > MAX_BATCH_WORK_UNITS:
        raise ValueError("batch workload exceeds safety threshold; reduce matches/ticks/pairs")

    out_dir = Path(config.out_dir)
    matches_dir(out_dir).mkdir(parents=True, exist_ok=True)
    logs_dir(out_dir).mkdir(parents=True, exist_ok=True)

    tick_columns = empty_tick_columns()
    writer: pq.ParquetWriter | None = None
    summary_rows: list[dict[str, int | float | str | bool]] = []
    results: list[MatchResult] = []

    try:
        for i in range(config.n_matches):
            seed = match_seed(config.base_seed, i)
            match_id = _match_id(config, seed)
            state = new_game(
                config=config.game_config(seed),
                behaviors={OPPONENT: config.opponent_behavior},
            )
            window = CombatRateWindow(state.config.ticks_per_second)
            total_battles = 0
            efficiency_sum = 0.0
            begin(state)

            while state.phase == Phase.PLAYING and state.tick < config.max_ticks:
                apply_human_policy(state, config.human_policy, config.human_period)
                advance_tick(state)
                stats = state.last_stats
                window.push(stats)
                total_battles += stats.battles
                efficiency_sum += stats.efficiency
                territory = state.territory()

                tick_columns["match_id"].append(match_id)
                tick_columns["tick"].append(state.tick)
                tick_columns["attempts"].append(stats.attempts)
                tick_columns["battles"].append(stats.battles)
                tick_columns["same_owner"].append(stats.same_owner)
                tick_columns["wall_empty"].append(stats.wall_empty)
                tick_columns["combats_per_second"].append(window.total())
                tick_columns["human_cells"].append(territory[HUMAN_PLAYER])
                tick_columns["opponent_cells"].append(territory[OPPONENT])
                tick_columns["human_piece"].append(state.players[HUMAN_PLAYER].current.name)
                tick_columns["opponent_piece"].append(state.players[OPPONENT].current.name)
                tick_columns["phase"].append(state.phase.value)
                if len(tick_columns["match_id"]) >= FLUSH_THRESHOLD:
                    writer = flush_tick_columns(tick_columns, tick_log_path(out_dir), writer)

            territory = state.territory()
            result = MatchResult(
                match_id=match_id,
                seed=seed,
                outcome=state.phase,
                ticks=state.tick,
                human_cells=territory[HUMAN_PLAYER],
                opponent_cells=territory[OPPONENT],
            )
            results.append(result)
            summary_rows.append(
                {
                    "schema_version": MATCH_SUMMARY_SCHEMA_VERSION,
                    "match_id": match_id,
                    "seed": seed,
                    "opponent_behavior": config.opponent_behavior,
                    "human_policy": config.human_policy.value,
                    "outcome": state.phase.value,
                    "ticks": state.tick,
                    "human_cells": result.human_cells,
                    "opponent_cells": result.opponent_cells,
                    "total_battles": total_battles,
                    "mean_efficiency": efficiency_sum / state.tick if state.tick else 0.0,
                    "reproducible": state.reproducible,
                }
            )
            payload = {
                "schema_version": MATCH_PAYLOAD_SCHEMA_VERSION,
                "match_id": match_id,
                "seed": seed,
                "level": state.level,
                "pairs_per_tick": state.config.pairs_per_tick,
                "ticks_per_second": state.config.ticks_per_second,
                "rng_mode": state.config.rng_mode.value,
                "opponent_behavior": config.opponent_behavior,
                "human_policy": config.human_policy.value,
                "human_period": config.human_period,
                "max_ticks": config.max_ticks,
                "outcome": state.phase.value,
                "ticks": state.tick,
            }
            (matches_dir(out_dir) / f"{match_id}.json").write_text(
                json.dumps(payload, ensure_ascii=False, indent=2)
            )
            logger.info(
                "match %d/%d %s finished: %s after %d ticks (%d vs %d cells)",
                i + 1,
                config.n_matches,
                match_id,
                state.phase.value,
                state.tick,
                result.human_cells,
                result.opponent_cells,
            )

        writer = flush_tick_columns(tick_columns, tick_log_path(out_dir), writer)
        if writer is None:
            pq.write_table(TICK_LOG_SCHEMA.empty_table(), tick_log_path(out_dir))
    finally:
        if writer is not None:
            writer.close()

    pq.write_table(
        pa.Table.from_pylist(summary_rows, schema=MATCH_SUMMARY_SCHEMA),
        match_summary_path(out_dir),
    )
    return results
