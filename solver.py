"""Top-level solve/generate interface.

Expose `solve_puzzle(puzzle)` that accepts a Grid, a values string, a
`(values, mask)` pair, or a puzzle record as produced by
`src.sudoku.loader.load_puzzles`, and `generate_puzzle(...)` for fresh puzzles.
"""

import random
from typing import Any, Optional

from src.sudoku import solver_core
from src.sudoku.codec import from_strings
from src.sudoku.generator import DEFAULT_MAX_ATTEMPTS, DEFAULT_MIN_CLUES, generate_unique
from src.sudoku.grid import Grid
from src.sudoku.solver_core import SEARCH_LIMIT, SolveResult
from src.utils.trace import Tracer


def _to_grid(puzzle: Any) -> Grid:
    if isinstance(puzzle, Grid):
        return puzzle
    if isinstance(puzzle, str):
        return from_strings(puzzle)
    if isinstance(puzzle, tuple) and len(puzzle) == 2:
        return from_strings(puzzle[0], puzzle[1])
    if isinstance(puzzle, dict):
        if "values" not in puzzle:
            raise TypeError("Puzzle record has no 'values' field")
        return from_strings(puzzle["values"], puzzle.get("mask"))
    raise TypeError("solve_puzzle expects a Grid, a values string, a (values, mask) pair, or a record dict")


def solve_puzzle(
    puzzle: Any,
    *,
    search_limit: int = SEARCH_LIMIT,
    tracer: Optional[Tracer] = None,
) -> SolveResult:
    """
    Classify a puzzle as unsatisfiable, unique, or multiple.
    The unique solution, when there is one, is carried on the result.
    """
    grid = _to_grid(puzzle)
    return solver_core.classify(grid, search_limit=search_limit, tracer=tracer)


def generate_puzzle(
    min_clues: int = DEFAULT_MIN_CLUES,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    *,
    seed: Optional[int] = None,
    search_limit: int = SEARCH_LIMIT,
    tracer: Optional[Tracer] = None,
) -> Grid:
    return generate_unique(
        min_clues,
        max_attempts,
        rng=random.Random(seed),
        search_limit=search_limit,
        tracer=tracer,
    )


__all__ = ["solve_puzzle", "generate_puzzle"]
