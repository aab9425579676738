"""CLI entrypoint: classify puzzle file(s) or generate unique puzzles, and report results."""

import argparse
import csv
from pathlib import Path
from typing import Any, Dict, List

from solver import generate_puzzle, solve_puzzle
from src.sudoku.codec import format_grid, to_strings
from src.sudoku.errors import SudokuError
from src.sudoku.generator import DEFAULT_MAX_ATTEMPTS, DEFAULT_MIN_CLUES
from src.sudoku.loader import load_puzzles
from src.sudoku.seeds import BY_NAME, get_seed
from src.sudoku.solver_core import SEARCH_LIMIT
from src.utils.trace import Tracer

PUZZLE_SUFFIXES = [".json", ".jsonl", ".parquet", ".csv", ".txt", ".sdk"]
CLASSIFY_FIELDS = ["id", "status", "count", "steps", "solution"]
GENERATE_FIELDS = ["id", "values", "mask", "clues"]


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Classify, solve, and generate 9x9 Sudoku puzzles")
    parser.add_argument("input", type=Path, nargs="?", default=None,
                        help="Path to a puzzle file or a directory of puzzle files")
    parser.add_argument("--seed-name", choices=sorted(BY_NAME), default=None,
                        help="Classify one of the built-in puzzles")
    parser.add_argument("--generate", type=int, default=0, metavar="N",
                        help="Generate N unique puzzles instead of classifying")
    parser.add_argument("--min-clues", type=int, default=DEFAULT_MIN_CLUES)
    parser.add_argument("--max-attempts", type=int, default=DEFAULT_MAX_ATTEMPTS)
    parser.add_argument("--rng-seed", type=int, default=None,
                        help="Seed for reproducible generation")
    parser.add_argument("--search-limit", type=int, default=SEARCH_LIMIT,
                        help="Recursive search steps allowed per solver call")
    parser.add_argument("--output", type=Path, default=None, help="Optional path to write results CSV")
    parser.add_argument("--trace", type=Path, default=None,
                        help="Optional path to write the last puzzle's search trace CSV")
    parser.add_argument("--show", action="store_true", help="Print each grid as an ASCII board")
    args = parser.parse_args(argv)
    if args.input is None and args.seed_name is None and args.generate <= 0:
        parser.error("provide INPUT, --seed-name, or --generate N")
    return args


def collect_puzzles(args) -> List[Dict[str, Any]]:
    puzzles: List[Dict[str, Any]] = []
    if args.seed_name:
        puzzles.append({"id": args.seed_name, "values": get_seed(args.seed_name)})
    if args.input is None:
        return puzzles

    if args.input.is_file():
        puzzles.extend(load_puzzles(str(args.input)))
    elif args.input.is_dir():
        for file_path in sorted(args.input.iterdir()):
            if file_path.suffix in PUZZLE_SUFFIXES:
                puzzles.extend(load_puzzles(str(file_path)))
    else:
        raise ValueError(f"Input path {args.input} is neither file nor directory")
    return puzzles


def classify_puzzles(puzzles, args) -> tuple:
    rows: List[Dict[str, Any]] = []
    tracer = None
    for puzzle in puzzles:
        puzzle_id = puzzle.get("id", "unknown")
        tracer = Tracer(enabled=args.trace is not None)
        try:
            result = solve_puzzle(puzzle, search_limit=args.search_limit, tracer=tracer)
        except (SudokuError, TypeError) as e:
            print(f"ERROR: Failed to classify puzzle {puzzle_id}: {e}")
            rows.append({"id": puzzle_id, "status": "error", "count": -1, "steps": -1, "solution": ""})
            continue

        solution = ""
        if result.solution is not None:
            solution = to_strings(result.solution)[0]
            expected = puzzle.get("solution")
            if expected and expected != solution:
                print(f"WARNING: {puzzle_id} solution differs from the expected one")
            if args.show:
                print(f"{puzzle_id}:")
                print(format_grid(result.solution))

        rows.append({
            "id": puzzle_id,
            "status": result.status.value,
            "count": result.count,
            "steps": result.steps,
            "solution": solution,
        })
    return rows, tracer


def generate_puzzles(args) -> tuple:
    rows: List[Dict[str, Any]] = []
    tracer = Tracer(enabled=args.trace is not None)
    for i in range(args.generate):
        seed = None if args.rng_seed is None else args.rng_seed + i
        try:
            grid = generate_puzzle(
                args.min_clues,
                args.max_attempts,
                seed=seed,
                search_limit=args.search_limit,
                tracer=tracer,
            )
        except SudokuError as e:
            print(f"ERROR: Generation {i} failed: {e}")
            continue
        values, mask = to_strings(grid)
        if args.show:
            print(f"generated-{i}:")
            print(format_grid(grid))
        rows.append({"id": f"generated-{i}", "values": values, "mask": mask, "clues": grid.given_count()})
    return rows, tracer


def write_results_csv(rows, fieldnames, output_path: Path):
    with open(output_path, "w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=fieldnames)
        writer.writeheader()
        for r in rows:
            writer.writerow(r)


def main(argv=None):
    args = parse_args(argv)

    if args.generate > 0:
        rows, tracer = generate_puzzles(args)
        fieldnames = GENERATE_FIELDS
    else:
        rows, tracer = classify_puzzles(collect_puzzles(args), args)
        fieldnames = CLASSIFY_FIELDS

    if args.trace and tracer is not None:
        tracer.to_csv(args.trace)

    if args.output:
        write_results_csv(rows, fieldnames, args.output)
    else:
        print(rows)
    return rows


if __name__ == "__main__":
    main()
