"""
Puzzle generation: a randomized full solution, then greedy clue removal that
keeps the puzzle uniquely solvable.
"""

import random
from typing import List, Optional

from .codec import CELLS, from_strings, to_strings
from .errors import GenerationExhausted
from .grid import SIZE, Grid
from .solver_core import SEARCH_LIMIT, SolveStatus, classify, solve
from src.utils.trace import Tracer

MIN_CLUES_FLOOR = 17
DEFAULT_MIN_CLUES = 30
DEFAULT_MAX_ATTEMPTS = 50


def generate_solved_grid(
    rng: Optional[random.Random] = None,
    *,
    search_limit: int = SEARCH_LIMIT,
    tracer: Optional[Tracer] = None,
) -> Optional[Grid]:
    """
    Fill an empty grid by backtracking with a freshly shuffled digit order at
    every cell. Every cell of the result is a given. Returns None only if the
    step budget runs out.
    """
    rng = rng or random.Random()

    def _shuffled(digits: List[int]) -> List[int]:
        order = list(digits)
        rng.shuffle(order)
        return order

    filled = solve(Grid.empty(), search_limit=search_limit, digit_order=_shuffled, tracer=tracer)
    if filled is None:
        return None
    return Grid(filled.values())


def _reduce(
    solved: Grid,
    min_clues: int,
    rng: random.Random,
    search_limit: int,
    tracer: Tracer,
) -> Grid:
    values, mask = (list(s) for s in to_strings(solved))
    order = list(range(CELLS))
    rng.shuffle(order)

    clues = CELLS
    for pos in order:
        if clues <= min_clues:
            break
        saved = values[pos]
        values[pos] = "0"
        mask[pos] = "0"

        result = classify(from_strings("".join(values), "".join(mask)), search_limit=search_limit)
        kept = result.status is SolveStatus.UNIQUE
        if kept:
            clues -= 1
        else:
            values[pos] = saved
            mask[pos] = "1"
        tracer.log_removal(pos // SIZE, pos % SIZE, int(saved), kept, clues)

    return from_strings("".join(values), "".join(mask))


def generate_unique(
    min_clues: int = DEFAULT_MIN_CLUES,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    *,
    rng: Optional[random.Random] = None,
    search_limit: int = SEARCH_LIMIT,
    tracer: Optional[Tracer] = None,
) -> Grid:
    """
    Generate a puzzle with exactly one completion.

    ``min_clues`` is clamped to [17, 81]; removal stops once that many givens
    remain. Each attempt synthesizes a new solution grid and strips clues in a
    random order, keeping a removal only while the puzzle stays unique. Raises
    GenerationExhausted when ``max_attempts`` attempts all fail.
    """
    rng = rng or random.Random()
    tracer = tracer or Tracer(enabled=False)
    min_clues = max(MIN_CLUES_FLOOR, min(CELLS, min_clues))

    for attempt in range(max_attempts):
        solved = generate_solved_grid(rng, search_limit=search_limit)
        if solved is None:
            tracer.log_attempt_failed(attempt, "Solution grid synthesis hit the search limit")
            continue

        puzzle = _reduce(solved, min_clues, rng, search_limit, tracer)
        if classify(puzzle, search_limit=search_limit).is_unique:
            return puzzle
        tracer.log_attempt_failed(attempt, "Final uniqueness check failed")

    raise GenerationExhausted(
        f"Could not generate a unique puzzle with {min_clues} clues in {max_attempts} attempts"
    )
