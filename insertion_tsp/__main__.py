"""`python -m insertion_tsp`: order the elements of a JSON file into a short path."""

from __future__ import annotations

from insertion_tsp.cli.solve_path import main


if __name__ == "__main__":
    raise SystemExit(main())
