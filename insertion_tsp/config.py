"""Config files for the command-line tools.

A tool looks for `configs/<tool>.json` at the repository root and turns it into
argv tokens placed before the real command line, so explicit flags win.

Accepted documents (JSON, or YAML with the `yaml` extra)::

    {"args": ["--trials", "3", "--pretty"]}
    {"run_benchmark": {"sizes": [5, 20], "exact": {"max_n": 7}}, "solve_path": {...}}
    {"trials": 3, "start": [0.5, 0.5]}

Nested keys are joined with '_' (`exact.max_n` -> `--exact-max-n`) and list
values such as sizes or points are joined with ',' (`[0.5, 0.5]` -> `0.5,0.5`).
"""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any, Iterable


def repo_root_from_cwd() -> Path:
    """Return the nearest directory holding a `pyproject.toml`, else the cwd."""
    cwd = Path.cwd().resolve()
    for cand in (cwd, *cwd.parents):
        if (cand / "pyproject.toml").is_file():
            return cand
    return cwd


def default_config_path(filename: str) -> Path | None:
    """Return `configs/<filename>` under the repo root if it exists."""
    path = (repo_root_from_cwd() / "configs" / filename).resolve()
    return path if path.is_file() else None


def load_config_file(path: Path) -> Any:
    raw = path.read_text(encoding="utf-8")
    if path.suffix.lower() not in {".yaml", ".yml"}:
        return json.loads(raw)
    try:
        import yaml  # type: ignore[import-not-found]
    except ImportError as exc:
        raise SystemExit(f"YAML config requires pyyaml (pip install insertion-tsp[yaml]): {exc}") from exc
    return yaml.safe_load(raw)


def flatten_mapping(mapping: dict[str, Any], prefix: str = "") -> dict[str, Any]:
    """Flatten nested dict keys by joining with '_' (e.g. exact.max_n -> exact_max_n)."""
    out: dict[str, Any] = {}
    for key, value in mapping.items():
        key_str = str(key).strip()
        if not key_str:
            continue
        name = f"{prefix}_{key_str}" if prefix else key_str
        if isinstance(value, dict):
            out.update(flatten_mapping(value, name))
        else:
            out[name] = value
    return out


def format_value(value: Any) -> str:
    """Render one config value the way the CLI parsers read it."""
    if isinstance(value, (list, tuple)):
        return ",".join(format_value(v) for v in value)
    return str(value)


def _pick_section(data: dict[str, Any], section_keys: Iterable[str]) -> dict[str, Any]:
    for key in section_keys:
        cand = data.get(key)
        if isinstance(cand, dict):
            return cand
    return data


def config_to_argv(config_path: Path, *, section_keys: Iterable[str] = ()) -> list[str]:
    """Convert a JSON/YAML config file into argv-like tokens."""
    data = load_config_file(config_path)

    if isinstance(data, dict) and "args" in data:
        args = data["args"]
        if not isinstance(args, list):
            raise TypeError(f"{config_path}: expected 'args' to be a list, got {type(args).__name__}")
        argv = [str(x) for x in args]
        if any(tok == "--config" or tok.startswith("--config=") for tok in argv):
            raise ValueError(f"{config_path}: 'args' must not include --config (avoid recursion)")
        return argv

    if not isinstance(data, dict):
        raise TypeError(f"{config_path}: expected a mapping at top-level, got {type(data).__name__}")

    argv: list[str] = []
    for key, value in flatten_mapping(_pick_section(data, section_keys)).items():
        if key in {"config", "args"} or value is None or value is False:
            continue
        flag = key if key.startswith("--") else "--" + key.replace("_", "-")
        argv.append(flag)
        if value is not True:
            argv.append(format_value(value))
    return argv


def config_args_for(argv: list[str], filename: str, section_keys: Iterable[str] = ()) -> tuple[Path | None, list[str]]:
    """
    Resolve `--config`/`--no-config` from a tool's argv.

    Returns (config path or None, argv tokens from that config). Without either
    flag `configs/<filename>` is used when present.
    """
    pre = argparse.ArgumentParser(add_help=False)
    pre.add_argument("--config", type=Path, default=None)
    pre.add_argument("--no-config", action="store_true")
    pre_args, _ = pre.parse_known_args(argv)
    if pre_args.no_config and pre_args.config is not None:
        raise SystemExit("Use either --config or --no-config, not both.")

    config_path = None if pre_args.no_config else (pre_args.config or default_config_path(filename))
    if config_path is None:
        return None, []
    return config_path, config_to_argv(config_path, section_keys=section_keys)
