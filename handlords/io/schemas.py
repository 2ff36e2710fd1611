"""Parquet schema definitions for headless match artifacts.

Every module that writes or reads match logs works against these column
contracts.
"""

from __future__ import annotations

import pyarrow as pa

MATCH_SUMMARY_SCHEMA_VERSION = 1
MATCH_PAYLOAD_SCHEMA_VERSION = 1

TICK_LOG_SCHEMA = pa.schema(
    [
        ("match_id", pa.string()),
        ("tick", pa.int64()),
        ("attempts", pa.int64()),
        ("battles", pa.int64()),
        ("same_owner", pa.int64()),
        ("wall_empty", pa.int64()),
        ("combats_per_second", pa.int64()),
        ("human_cells", pa.int64()),
        ("opponent_cells", pa.int64()),
        ("human_piece", pa.string()),
        ("opponent_piece", pa.string()),
        ("phase", pa.string()),
    ]
)

MATCH_SUMMARY_SCHEMA = pa.schema(
    [
        ("schema_version", pa.int64()),
        ("match_id", pa.string()),
        ("seed", pa.int64()),
        ("opponent_behavior", pa.string()),
        ("human_policy", pa.string()),
        ("outcome", pa.string()),
        ("ticks", pa.int64()),
        ("human_cells", pa.int64()),
        ("opponent_cells", pa.int64()),
        ("total_battles", pa.int64()),
        ("mean_efficiency", pa.float64()),
        ("reproducible", pa.bool_()),
    ]
)
