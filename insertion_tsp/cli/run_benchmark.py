#!/usr/bin/env python3

"""CLI to measure path quality of the insertion heuristic on random segments."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from insertion_tsp.cli.solve_path import parse_point
from insertion_tsp.config import config_args_for
from insertion_tsp.experiment import run_experiments
from insertion_tsp.logging_config import level_from_name, setup_logging


def parse_sizes(text: str) -> list[int]:
    """Parse '5,10,50' into [5, 10, 50]."""
    try:
        sizes = [int(tok) for tok in str(text).split(",") if tok.strip()]
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected comma-separated integers, got {text!r}") from exc
    if not sizes or any(n < 0 for n in sizes):
        raise argparse.ArgumentTypeError(f"expected non-negative sizes, got {text!r}")
    return sizes


def main(argv: list[str] | None = None) -> int:
    """Run the experiments and print a JSON summary of mean cost ratios per size."""
    argv = list(sys.argv[1:] if argv is None else argv)

    config_path, config_args = config_args_for(argv, "run_benchmark.json", section_keys=("run_benchmark", "benchmark"))

    ap = argparse.ArgumentParser(description="Compare the insertion heuristic against curve orders and the optimum")
    ap.add_argument("--config", type=Path, default=config_path, help="JSON/YAML config with defaults for this tool")
    ap.add_argument("--no-config", action="store_true", help="Disable loading the default config (if any).")
    ap.add_argument("--sizes", type=parse_sizes, default=[5, 7, 20, 100], help="Comma-separated instance sizes")
    ap.add_argument("--trials", type=int, default=5, help="Random instances per size")
    ap.add_argument("--seed", type=int, default=42, help="Seed of the instance generator")
    ap.add_argument("--exact-max-n", type=int, default=7, help="Solve instances up to this size exactly")
    ap.add_argument("--max-length", type=float, default=0.1, help="Maximum segment length")
    ap.add_argument("--start", type=parse_point, default=None, help="Starting point 'x,y'")
    ap.add_argument("--folder", type=Path, default=None, help="Save one .npz per size in this folder")
    ap.add_argument("--pretty", action="store_true", help="Pretty-print JSON")
    ap.add_argument("--log-level", type=str, default="info", help="debug, info, warning, error")
    ap.add_argument("--log-file", type=str, default=None, help="Also write logs to this file")
    args = ap.parse_args(config_args + argv)

    if args.trials < 0:
        raise SystemExit("--trials must be >= 0")
    try:
        setup_logging(level_from_name(args.log_level), log_file=args.log_file, stream=sys.stderr)
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc

    summary = run_experiments(
        args.sizes,
        trials=int(args.trials),
        seed=args.seed,
        exact_max_n=int(args.exact_max_n),
        max_length=float(args.max_length),
        starting_point=args.start,
        folder=None if args.folder is None else str(args.folder),
    )

    data = {str(n): ratios for n, ratios in summary.items()}
    print(json.dumps(data, indent=2 if args.pretty else None))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
