"""CLI driver: reads nine comma-separated lines (stdin or --input), gates on consistency, solves, and prints the board (csv, pretty) or a JSON report."""

# solve_cli.py
# Usage:
#   python -m apps.cli.solve_cli < puzzle.txt
#   python -m apps.cli.solve_cli --input puzzle.txt --format pretty --max_steps 200000
#   python -m apps.cli.solve_cli --config configs/solve.yaml --format json
import argparse
import json
import logging
import sys
from pathlib import Path

from apps.config import OUTPUT_FORMATS, load_config
from solver.grid_io import format_grid, parse_grid, to_rows
from solver.sudoku_tools import BUDGET_EXHAUSTED, INCONSISTENT, SOLVED, UNSATISFIABLE, solve

log = logging.getLogger(__name__)

EXIT_CODES = {
    SOLVED: 0,
    UNSATISFIABLE: 1,
    INCONSISTENT: 2,
    BUDGET_EXHAUSTED: 3,
}
EXIT_BAD_INPUT = 4

MESSAGES = {
    UNSATISFIABLE: "no solution",
    INCONSISTENT: "grid is inconsistent",
    BUDGET_EXHAUSTED: "search budget exhausted",
}


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Solve a 9x9 Sudoku given as nine comma-separated lines (0 = blank).")
    ap.add_argument("--input", type=str, default=None, help="puzzle file; stdin if omitted")
    ap.add_argument("--config", type=str, default=None, help="YAML config (see configs/solve.yaml)")
    ap.add_argument("--format", dest="output_format", type=str, default=None, choices=OUTPUT_FORMATS)
    ap.add_argument("--max_steps", type=int, default=None)
    ap.add_argument("--verbose", "-v", action="store_true")
    return ap


def read_puzzle(path):
    if path is None:
        return parse_grid(sys.stdin)
    with open(Path(path), encoding="utf-8") as f:
        return parse_grid(f)


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    try:
        cfg = load_config(
            args.config,
            output_format=args.output_format,
            max_steps=args.max_steps,
            log_level="DEBUG" if args.verbose else None,
        )
    except (OSError, ValueError) as e:
        print(f"bad config: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT
    logging.basicConfig(level=cfg.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        puzzle = read_puzzle(args.input)
    except (OSError, ValueError) as e:
        print(f"unreadable input: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT

    result = solve(puzzle, max_steps=cfg.max_steps)
    status = result["status"]
    log.info("Status %s, stats %s", status, result["stats"])

    if cfg.output_format == "json":
        payload = {
            "status": status,
            "puzzle": to_rows(puzzle),
            "solution": to_rows(result["solution"]) if result["solution"] else None,
            "issues": result["issues"],
            "stats": result["stats"],
        }
        print(json.dumps(payload, indent=2))
    elif status == SOLVED:
        print(format_grid(result["solution"], cfg.output_format))
    else:
        print(MESSAGES[status], file=sys.stderr)
        for issue in result["issues"]:
            print(f"  {issue['unit']}: digits {issue['digits']} at {', '.join(issue['cells'])}", file=sys.stderr)

    return EXIT_CODES[status]


if __name__ == "__main__":
    sys.exit(main())
