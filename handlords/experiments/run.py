"""CLI entrypoint for headless match batches.

Argument parsing and CLI > config file > default resolution live here; the
match loop itself is ``handlords.simulation.engine.run_matches``.
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from handlords.config.constants import LFSR_SEED, MAX_MATCH_TICKS, PAIRS_PER_TICK
from handlords.config.types import HumanPolicy, RngMode, RunConfig
from handlords.domain.behaviors import BEHAVIORS
from handlords.simulation.engine import run_matches

# ---------------------------------------------------------------------------
# CLI parsing helpers
# ---------------------------------------------------------------------------


def _parse_human_policy(raw: str) -> HumanPolicy:
    try:
        return HumanPolicy(raw)
    except ValueError as exc:
        valid = ", ".join(policy.value for policy in HumanPolicy)
        raise ValueError(f"human-policy must be one of {valid}") from exc


def _coerce_bool(raw: object, key: str) -> bool:
    """Coerce raw value to bool with strict string-check."""
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str):
        normalized = raw.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
    raise ValueError(f"{key} must be a boolean value")


def _coerce_int(raw: object, key: str) -> int:
    """Coerce raw value to int; accepts ``0x`` prefixed strings, rejects booleans."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be an integer value")
    if isinstance(raw, float):
        if raw != int(raw):
            raise ValueError(f"{key} must be an integer value, got {raw!r}")
        return int(raw)
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str):
        try:
            return int(raw.strip(), 0)
        except ValueError as exc:
            raise ValueError(f"{key} must be an integer value, got {raw!r}") from exc
    raise ValueError(f"{key} must be an integer value")


def _coerce_str(raw: object, key: str) -> str:
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be a string-coercible value")
    if isinstance(raw, (str, Path, int, float)):
        return str(raw)
    raise ValueError(f"{key} must be a string-coercible value")


def _get_val(cli_val: object, key: str, file_cfg: dict[str, object], default: object) -> object:
    """CLI > file > default resolution."""
    if cli_val is not None:
        return cli_val
    return file_cfg.get(key, default)


def _get_bool(cli_val: bool | None, key: str, file_cfg: dict[str, object], default: bool) -> bool:
    return _coerce_bool(_get_val(cli_val, key, file_cfg, default), key)


def _get_int(cli_val: object, key: str, file_cfg: dict[str, object], default: int) -> int:
    return _coerce_int(_get_val(cli_val, key, file_cfg, default), key)


def _get_str(cli_val: str | None, key: str, file_cfg: dict[str, object], default: str) -> str:
    return _coerce_str(_get_val(cli_val, key, file_cfg, default), key)


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(description="Run headless Handlords matches")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (CLI args override file values)",
    )
    parser.add_argument("--matches", type=int, default=None)
    parser.add_argument("--max-ticks", type=int, default=None)
    parser.add_argument(
        "--seed",
        type=str,
        default=None,
        help="Base LFSR seed; decimal or 0x-prefixed hex, nonzero",
    )
    parser.add_argument("--pairs-per-tick", type=int, default=None)
    parser.add_argument(
        "--opponent-behavior", type=str, choices=sorted(BEHAVIORS), default=None
    )
    parser.add_argument(
        "--human-policy",
        type=str,
        choices=[policy.value for policy in HumanPolicy],
        default=None,
    )
    parser.add_argument("--human-period", type=int, default=None)
    parser.add_argument(
        "--debug-system-rng",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Use the OS-seeded generator (debug only; breaks reproducibility)",
    )
    parser.add_argument("--out-dir", type=Path, default=None)
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


# ---------------------------------------------------------------------------
# Main CLI
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for headless match batches.

    Supports ``--config path/to/config.json``; CLI arguments override
    config-file values, which override built-in defaults.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    file_cfg: dict[str, object] = {}
    if args.config is not None:
        try:
            file_cfg = json.loads(Path(args.config).read_text())
        except FileNotFoundError:
            parser.error(f"Config file not found: {args.config}")
        except json.JSONDecodeError as exc:
            parser.error(f"Config file is not valid JSON: {args.config}: {exc}")

    try:
        debug_system_rng = _get_bool(
            args.debug_system_rng, "debug_system_rng", file_cfg, False
        )
        run_config = RunConfig(
            n_matches=_get_int(args.matches, "matches", file_cfg, 1),
            max_ticks=_get_int(args.max_ticks, "max_ticks", file_cfg, MAX_MATCH_TICKS),
            base_seed=_get_int(args.seed, "seed", file_cfg, LFSR_SEED),
            pairs_per_tick=_get_int(
                args.pairs_per_tick, "pairs_per_tick", file_cfg, PAIRS_PER_TICK
            ),
            opponent_behavior=_get_str(
                args.opponent_behavior, "opponent_behavior", file_cfg, "periodic_jitter"
            ),
            human_policy=_parse_human_policy(
                _get_str(args.human_policy, "human_policy", file_cfg, HumanPolicy.IDLE.value)
            ),
            human_period=_get_int(args.human_period, "human_period", file_cfg, 30),
            rng_mode=RngMode.SYSTEM if debug_system_rng else RngMode.LFSR,
            out_dir=Path(_get_str(args.out_dir, "out_dir", file_cfg, "data")),
        )
    except ValueError as exc:
        parser.error(str(exc))

    results = run_matches(run_config)
    outcomes: dict[str, int] = {}
    for result in results:
        outcomes[result.outcome.value] = outcomes.get(result.outcome.value, 0) + 1
    summary = {
        "matches": len(results),
        "opponent_behavior": run_config.opponent_behavior,
        "human_policy": run_config.human_policy.value,
        "outcomes": outcomes,
        "mean_ticks": sum(r.ticks for r in results) / len(results),
    }
    print(json.dumps(summary, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
