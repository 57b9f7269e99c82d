"""CLI entrypoint for batch Life runs.

This module owns CLI argument parsing only. Domain logic lives in:

- ``life_kernel.config``            – configuration dataclasses
- ``life_kernel.simulation.engine`` – ``run_batch`` engine
- ``life_kernel.io.schemas``        – Parquet schemas
"""

from __future__ import annotations

import argparse
import json
import logging
from collections.abc import Callable
from pathlib import Path
from typing import TypeVar

from life_kernel.config.constants import (
    GRID_HEIGHT,
    GRID_WIDTH,
    HALT_WINDOW,
    NUM_STEPS,
    SEED_PROBABILITY,
)
from life_kernel.config.types import BoardConfig, RunConfig, SeedMode
from life_kernel.domain.patterns import PATTERNS
from life_kernel.simulation.engine import run_batch

T = TypeVar("T")

# ---------------------------------------------------------------------------
# CLI parsing helpers
# ---------------------------------------------------------------------------


def _parse_seed_mode(raw_seed_mode: str) -> SeedMode:
    """Parse seed mode from CLI/config."""
    try:
        return SeedMode(raw_seed_mode)
    except ValueError as exc:
        valid = ", ".join(mode.value for mode in SeedMode)
        raise ValueError(f"seed-mode must be one of {valid}") from exc


def _parse_offset(raw_offset: str) -> tuple[int, int]:
    """Parse a pattern offset formatted as `X,Y`."""
    tokens = [token.strip() for token in raw_offset.split(",")]
    if len(tokens) != 2:
        raise ValueError("pattern-offset must use X,Y format")
    try:
        return int(tokens[0]), int(tokens[1])
    except ValueError as exc:
        raise ValueError("pattern-offset must use integer X,Y values") from exc


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
    """Coerce raw value to int; rejects booleans and non-integer floats."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be an integer value")
    if isinstance(raw, float):
        if raw != int(raw):
            raise ValueError(f"{key} must be an integer value, got {raw!r}")
        return int(raw)
    if isinstance(raw, (int, str)):
        try:
            return int(raw)
        except ValueError as exc:
            raise ValueError(f"{key} must be an integer value") from exc
    raise ValueError(f"{key} must be an integer value")


def _coerce_float(raw: object, key: str) -> float:
    """Coerce raw value to float; rejects booleans."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be a float value")
    if isinstance(raw, (int, float, str)):
        try:
            return float(raw)
        except ValueError as exc:
            raise ValueError(f"{key} must be a float value") from exc
    raise ValueError(f"{key} must be a float value")


def _coerce_str(raw: object, key: str) -> str:
    """Coerce raw value to str; rejects booleans."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be a string-coercible value")
    if isinstance(raw, (str, Path, int, float)):
        return str(raw)
    raise ValueError(f"{key} must be a string-coercible value")


def _resolve(
    cli_val: object,
    key: str,
    file_cfg: dict[str, object],
    default: T,
    coerce: Callable[[object, str], T],
) -> T:
    """Resolve ``key`` as CLI > config file > default, then coerce it.

    ``coerce`` also receives the key so its error message names the field.
    """
    raw = cli_val if cli_val is not None else file_cfg.get(key, default)
    return coerce(raw, key)


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(description="Run seeded Game of Life batches")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (CLI args override file values)",
    )
    parser.add_argument("--width", type=int, default=None)
    parser.add_argument("--height", type=int, default=None)
    parser.add_argument(
        "--seed-mode",
        type=str,
        choices=[mode.value for mode in SeedMode],
        default=None,
    )
    parser.add_argument("--probability", type=float, default=None)
    parser.add_argument("--pattern", type=str, choices=sorted(PATTERNS), default=None)
    parser.add_argument("--pattern-offset", type=str, default=None, help="X,Y")
    parser.add_argument("--steps", type=int, default=None)
    parser.add_argument("--halt-window", type=int, default=None)
    parser.add_argument("--n-runs", type=int, default=None)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--workers", type=int, default=None)
    parser.add_argument("--out-dir", type=Path, default=None)
    parser.add_argument(
        "--enable-termination-filters", action=argparse.BooleanOptionalAction, default=None
    )
    parser.add_argument(
        "--filter-short-period", action=argparse.BooleanOptionalAction, default=None
    )
    parser.add_argument("--short-period-max-period", type=int, default=None)
    parser.add_argument("--short-period-history-size", type=int, default=None)
    parser.add_argument("--recycle-boards", action=argparse.BooleanOptionalAction, default=None)
    parser.add_argument(
        "--fast-metrics",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Skip cluster metrics (connected-component analysis)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
    )
    return parser


# ---------------------------------------------------------------------------
# Main CLI
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for batch runs.

    Supports ``--config path/to/config.json`` for reproducibility. CLI
    arguments override config-file values; config-file values override
    built-in defaults.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    file_cfg: dict[str, object] = {}
    if args.config is not None:
        try:
            file_cfg = json.loads(Path(args.config).read_text())
        except FileNotFoundError:
            parser.error(f"Config file not found: {args.config}")
        except json.JSONDecodeError as exc:
            parser.error(f"Config file is not valid JSON: {args.config}: {exc}")
        if not isinstance(file_cfg, dict):
            parser.error(f"Config file must contain a JSON object: {args.config}")

    try:
        log_level = _resolve(args.log_level, "log_level", file_cfg, "WARNING", _coerce_str)
        logging.basicConfig(
            level=getattr(logging, log_level.upper(), logging.WARNING),
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

        pattern_raw = args.pattern if args.pattern is not None else file_cfg.get("pattern")
        pattern = None if pattern_raw is None else _coerce_str(pattern_raw, "pattern")
        board_config = BoardConfig(
            width=_resolve(args.width, "width", file_cfg, GRID_WIDTH, _coerce_int),
            height=_resolve(args.height, "height", file_cfg, GRID_HEIGHT, _coerce_int),
            seed_mode=_parse_seed_mode(
                _resolve(
                    args.seed_mode, "seed_mode", file_cfg, SeedMode.RANDOM.value, _coerce_str
                )
            ),
            probability=_resolve(
                args.probability, "probability", file_cfg, SEED_PROBABILITY, _coerce_float
            ),
            pattern=pattern,
            pattern_offset=_parse_offset(
                _resolve(args.pattern_offset, "pattern_offset", file_cfg, "0,0", _coerce_str)
            ),
        )
        run_config = RunConfig(
            steps=_resolve(args.steps, "steps", file_cfg, NUM_STEPS, _coerce_int),
            halt_window=_resolve(
                args.halt_window, "halt_window", file_cfg, HALT_WINDOW, _coerce_int
            ),
            enable_termination_filters=_resolve(
                args.enable_termination_filters,
                "enable_termination_filters",
                file_cfg,
                True,
                _coerce_bool,
            ),
            filter_short_period=_resolve(
                args.filter_short_period, "filter_short_period", file_cfg, False, _coerce_bool
            ),
            short_period_max_period=_resolve(
                args.short_period_max_period, "short_period_max_period", file_cfg, 2, _coerce_int
            ),
            short_period_history_size=_resolve(
                args.short_period_history_size,
                "short_period_history_size",
                file_cfg,
                8,
                _coerce_int,
            ),
            workers=_resolve(args.workers, "workers", file_cfg, 1, _coerce_int),
            recycle_boards=_resolve(
                args.recycle_boards, "recycle_boards", file_cfg, False, _coerce_bool
            ),
            skip_cluster_metrics=_resolve(
                args.fast_metrics, "fast_metrics", file_cfg, False, _coerce_bool
            ),
        )
        n_runs = _resolve(args.n_runs, "n_runs", file_cfg, 1, _coerce_int)
        seed = _resolve(args.seed, "seed", file_cfg, 0, _coerce_int)
        out_dir = Path(_resolve(args.out_dir, "out_dir", file_cfg, "data", _coerce_str))
    except ValueError as exc:
        parser.error(str(exc))

    try:
        results = run_batch(
            n_runs=n_runs,
            out_dir=out_dir,
            base_seed=seed,
            board_config=board_config,
            config=run_config,
        )
    except ValueError as exc:
        parser.error(str(exc))

    summary = {
        "seed_mode": board_config.seed_mode.value,
        "width": board_config.width,
        "height": board_config.height,
        "total_runs": len(results),
        "survived": sum(1 for r in results if r.survived),
        "terminated": sum(1 for r in results if not r.survived),
        "final_populations": [r.final_population for r in results],
    }
    print(json.dumps(summary, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
