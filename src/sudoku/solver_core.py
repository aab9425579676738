"""Backtracking search: first completion, bounded solution counting, and classification."""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, List, Optional, Tuple

from .errors import SolutionUnavailable
from .grid import SIZE, Grid
from .validator import candidates, is_consistent
from src.utils.trace import Tracer

SEARCH_LIMIT = 1_000_000
SOLUTION_LIMIT = 2

DigitOrder = Callable[[List[int]], Iterable[int]]


class SolveStatus(Enum):
    UNSATISFIABLE = "unsatisfiable"
    UNIQUE = "unique"
    MULTIPLE = "multiple"
    BUDGET_EXCEEDED = "budget_exceeded"


@dataclass
class SolveResult:
    """
    Outcome of ``classify``. ``count`` is the number of completions found,
    capped at ``SOLUTION_LIMIT``; ``solution`` is only set for UNIQUE and is
    independent of the classified grid.
    """

    status: SolveStatus
    count: int
    solution: Optional[Grid] = None
    steps: int = 0

    @property
    def is_unique(self) -> bool:
        return self.status is SolveStatus.UNIQUE

    def solved_value_at(self, r: int, c: int) -> int:
        if self.solution is None:
            raise SolutionUnavailable(f"No unique solution cached (status: {self.status.value})")
        return self.solution.get(r, c)


class _Search:
    """Per-call step budget shared by every recursive call of one search."""

    def __init__(self, limit: int, tracer: Optional[Tracer] = None):
        self.limit = limit
        self.tracer = tracer or Tracer(enabled=False)
        self.steps = 0
        self.solutions = 0
        self.exceeded = False

    def tick(self) -> bool:
        self.steps += 1
        if self.steps > self.limit:
            if not self.exceeded:
                self.exceeded = True
                self.tracer.log_budget_exceeded(self.limit)
            return False
        return True


def find_first_empty(grid: Grid, start: int = 0) -> Optional[Tuple[int, int]]:
    """
    First empty cell in row-major order, scanning from linear index ``start``.
    The fixed order decides which completion ``solve`` returns.
    """
    for index in range(start, SIZE * SIZE):
        r, c = divmod(index, SIZE)
        if grid.get(r, c) == 0:
            return r, c
    return None


def _solve_rec(
    grid: Grid, start: int, search: _Search, digit_order: Optional[DigitOrder], depth: int
) -> bool:
    if not search.tick():
        return False
    pos = find_first_empty(grid, start)
    if pos is None:
        search.solutions += 1
        search.tracer.log_solution_found(search.solutions)
        return True

    r, c = pos
    digits = candidates(grid, r, c)
    if digit_order is not None:
        digits = list(digit_order(digits))
    for v in digits:
        grid._write(r, c, v)
        search.tracer.log_assign(r, c, v, depth + 1)
        if _solve_rec(grid, r * SIZE + c + 1, search, digit_order, depth + 1):
            return True
        grid._write(r, c, 0)
        if search.exceeded:
            return False

    search.tracer.log_backtrack(r, c)
    return False


def _count_rec(grid: Grid, start: int, limit: int, search: _Search, depth: int) -> int:
    if not search.tick():
        return 0
    pos = find_first_empty(grid, start)
    if pos is None:
        search.solutions += 1
        search.tracer.log_solution_found(search.solutions)
        return 1

    r, c = pos
    found = 0
    for v in candidates(grid, r, c):
        grid._write(r, c, v)
        search.tracer.log_assign(r, c, v, depth + 1)
        found += _count_rec(grid, r * SIZE + c + 1, limit - found, search, depth + 1)
        grid._write(r, c, 0)
        if found >= limit or search.exceeded:
            return found

    if not found:
        search.tracer.log_backtrack(r, c)
    return found


def _run_solve(grid: Grid, search: _Search, digit_order: Optional[DigitOrder] = None) -> Optional[Grid]:
    work = grid.copy()
    if not is_consistent(work):
        return None
    return work if _solve_rec(work, 0, search, digit_order, 0) else None


def _run_count(grid: Grid, limit: int, search: _Search) -> int:
    work = grid.copy()
    if not is_consistent(work):
        return 0
    return _count_rec(work, 0, max(1, limit), search, 0)


def solve(
    grid: Grid,
    *,
    search_limit: int = SEARCH_LIMIT,
    digit_order: Optional[DigitOrder] = None,
    tracer: Optional[Tracer] = None,
) -> Optional[Grid]:
    """
    Depth-first search for one completion of ``grid``.

    Empty cells are filled in row-major order, trying digits ascending unless
    ``digit_order`` reorders each cell's candidates. Returns a solved copy, or
    None when the grid is unsatisfiable or the step budget runs out. The
    caller's grid is never modified.
    """
    return _run_solve(grid, _Search(search_limit, tracer), digit_order)


def count_solutions(
    grid: Grid,
    limit: int = SOLUTION_LIMIT,
    *,
    search_limit: int = SEARCH_LIMIT,
    tracer: Optional[Tracer] = None,
) -> int:
    """Count completions, stopping once ``limit`` (at least 1) is reached."""
    return _run_count(grid, limit, _Search(search_limit, tracer))


def classify(
    grid: Grid,
    *,
    search_limit: int = SEARCH_LIMIT,
    tracer: Optional[Tracer] = None,
) -> SolveResult:
    """Decide whether ``grid`` has zero, one, or several completions."""
    search = _Search(search_limit, tracer)
    count = _run_count(grid, SOLUTION_LIMIT, search)
    if count >= SOLUTION_LIMIT:
        return SolveResult(SolveStatus.MULTIPLE, count, steps=search.steps)
    if search.exceeded:
        return SolveResult(SolveStatus.BUDGET_EXCEEDED, count, steps=search.steps)
    if count == 0:
        return SolveResult(SolveStatus.UNSATISFIABLE, 0, steps=search.steps)

    solve_search = _Search(search_limit, tracer)
    solution = _run_solve(grid, solve_search)
    steps = search.steps + solve_search.steps
    if solution is None:
        return SolveResult(SolveStatus.BUDGET_EXCEEDED, count, steps=steps)
    return SolveResult(SolveStatus.UNIQUE, count, solution=solution, steps=steps)
