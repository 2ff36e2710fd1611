"""Parquet persistence helper for the per-tick log stream."""

from __future__ import annotations

from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

from handlords.io.schemas import TICK_LOG_SCHEMA


def flush_tick_columns(
    tick_columns: dict[str, list[int | str]],
    tick_log_path: Path,
    writer: pq.ParquetWriter | None,
) -> pq.ParquetWriter | None:
    """Write accumulated tick rows to Parquet and clear in-memory buffers."""
    if not tick_columns["match_id"]:
        return writer
    table = pa.Table.from_pydict(tick_columns, schema=TICK_LOG_SCHEMA)
    if writer is None:
        writer = pq.ParquetWriter(tick_log_path, TICK_LOG_SCHEMA)
    writer.write_table(table)
    for values in tick_columns.values():
        values.clear()
    return writer


def empty_tick_columns() -> dict[str, list[int | str]]:
    return {name: [] for name in TICK_LOG_SCHEMA.names}
