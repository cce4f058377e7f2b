#!/usr/bin/env python3

"""CLI to order the elements of a JSON file into a short path.

Input file shape (exactly one element kind per file)::

    {"segments": [[[x0, y0], [x1, y1]], ...], "start": [x, y]}

Supported kinds are `points`, `segments`, `polylines` and `polygons`; `start`
is optional. The output is JSON with the element indices in path order, their
orientation indices and the travel length.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from insertion_tsp.config import config_args_for
from insertion_tsp.errors import InsertionTSPError
from insertion_tsp.geometry import (
    point_orientations,
    polygon_orientations,
    polyline_orientations,
    segment_orientations,
)
from insertion_tsp.heuristics import compute_path_cost
from insertion_tsp.logging_config import level_from_name, setup_logging
from insertion_tsp.path_builder import build
from insertion_tsp.waypoint import resolve_orientations

logger = logging.getLogger(__name__)

RESOLVERS = {
    "points": point_orientations,
    "segments": segment_orientations,
    "polylines": polyline_orientations,
    "polygons": polygon_orientations,
}


def parse_point(text: str) -> tuple[float, float]:
    """Parse 'x,y' into a point."""
    parts = [p.strip() for p in str(text).split(",")]
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f"expected 'x,y', got {text!r}")
    try:
        return float(parts[0]), float(parts[1])
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected 'x,y', got {text!r}") from exc


def load_instance(data: dict) -> tuple[str, list]:
    """Return (kind, elements) from a parsed input document."""
    if not isinstance(data, dict):
        raise ValueError(f"expected a JSON object at top-level, got {type(data).__name__}")
    kinds = [kind for kind in RESOLVERS if kind in data]
    if len(kinds) != 1:
        raise ValueError(f"expected exactly one of {sorted(RESOLVERS)}, got {kinds or 'none'}")
    kind = kinds[0]
    elements = data[kind]
    if not isinstance(elements, list):
        raise ValueError(f"'{kind}' must be a list, got {type(elements).__name__}")
    return kind, elements


def solve_document(data: dict, starting_point=None) -> tuple[dict, list]:
    """
    Order the elements of one input document. `starting_point` overrides the
    file's `start`. Returns (result, orientation candidates per element).
    """
    kind, elements = load_instance(data)
    if starting_point is None:
        starting_point = data.get("start")

    resolver = RESOLVERS[kind]
    indices = list(range(len(elements)))
    candidates = [resolve_orientations(resolver, element, i) for i, element in enumerate(elements)]
    order, orientations = build(indices, candidates.__getitem__, starting_point)

    length = compute_path_cost(candidates, order, orientations, starting_point)
    logger.info(f"Ordered {len(order)} {kind}; travel length {length:.6f}")
    result = {
        "kind": kind,
        "order": order,
        "orientations": orientations,
        "length": length,
        "start": None if starting_point is None else [float(c) for c in starting_point],
    }
    return result, candidates


def main(argv: list[str] | None = None) -> int:
    """Parse arguments, build the path and print JSON to stdout (or --out)."""
    argv = list(sys.argv[1:] if argv is None else argv)

    config_path, config_args = config_args_for(argv, "solve_path.json", section_keys=("solve_path", "solve"))
    ap = argparse.ArgumentParser(description="Order points/segments/polylines/polygons into a short path.")
    ap.add_argument("input", type=Path, help="Input JSON file ('-' reads stdin)")
    ap.add_argument("--config", type=Path, default=config_path, help="JSON/YAML config with defaults for this tool")
    ap.add_argument("--no-config", action="store_true", help="Disable loading the default config (if any).")
    ap.add_argument("--start", type=parse_point, default=None, help="Starting point 'x,y' (overrides the file)")
    ap.add_argument("--out", type=Path, default=None, help="Write the result JSON here instead of stdout")
    ap.add_argument("--plot", type=Path, default=None, help="Save a picture of the path (png, svg, pdf, ...)")
    ap.add_argument("--pretty", action="store_true", help="Pretty-print JSON")
    ap.add_argument("--log-level", type=str, default="warning", help="debug, info, warning, error")
    ap.add_argument("--log-file", type=str, default=None, help="Also write logs to this file")
    args = ap.parse_args(config_args + argv)

    try:
        setup_logging(level_from_name(args.log_level), log_file=args.log_file, stream=sys.stderr)
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc

    try:
        raw = sys.stdin.read() if str(args.input) == "-" else args.input.read_text(encoding="utf-8")
        result, candidates = solve_document(json.loads(raw), starting_point=args.start)
    except (OSError, json.JSONDecodeError, ValueError, InsertionTSPError) as exc:
        raise SystemExit(f"{args.input}: {exc}") from exc

    if args.plot is not None:
        from insertion_tsp.plotting import save_path_plot

        save_path_plot(args.plot, candidates, result["order"], result["orientations"],
                       starting_point=result["start"], title=f"{len(candidates)} {result['kind']}")
        logger.info(f"Plot saved: {args.plot}")

    text = json.dumps(result, indent=2 if args.pretty else None)
    if args.out is not None:
        args.out.write_text(text + "\n", encoding="utf-8")
    else:
        print(text)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
