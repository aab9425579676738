"""Sudoku grid model, placement checks, backtracking solver, and puzzle generator."""

from .errors import (
    FormatError,
    GenerationExhausted,
    OutOfBounds,
    ShapeError,
    SolutionUnavailable,
    SudokuError,
)
from .grid import BOX, SIZE, Cell, Grid
from .validator import is_valid_placement
from .solver_core import SolveResult, SolveStatus, classify, count_solutions, solve
from .generator import generate_unique
from .codec import format_grid, from_strings, to_strings

__all__ = [
    "BOX",
    "SIZE",
    "Cell",
    "Grid",
    "is_valid_placement",
    "SolveResult",
    "SolveStatus",
    "classify",
    "count_solutions",
    "solve",
    "generate_unique",
    "format_grid",
    "from_strings",
    "to_strings",
    "SudokuError",
    "ShapeError",
    "OutOfBounds",
    "FormatError",
    "GenerationExhausted",
    "SolutionUnavailable",
]
