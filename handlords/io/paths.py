"""Path helpers for headless run output directories."""

from __future__ import annotations

from pathlib import Path


def matches_dir(out_dir: Path) -> Path:
    """Return path to the per-match JSON payload directory."""
    return out_dir / "matches"


def logs_dir(out_dir: Path) -> Path:
    return out_dir / "logs"


def tick_log_path(out_dir: Path) -> Path:
    return logs_dir(out_dir) / "tick_log.parquet"


def match_summary_path(out_dir: Path) -> Path:
    return logs_dir(out_dir) / "match_summary.parquet"
