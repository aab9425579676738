"""Row/column/box placement checks against the current state of a grid."""

from typing import TYPE_CHECKING, List, Tuple

if TYPE_CHECKING:
    from .grid import Grid


def is_valid_placement(grid: "Grid", r: int, c: int, v: int) -> bool:
    """
    Return True when digit ``v`` may sit at (r, c) without repeating in its
    row, column, or box. The cell's own current value is ignored.
    """
    if not grid.in_bounds(r, c):
        return False
    if isinstance(v, bool) or not isinstance(v, int) or v < 1 or v > grid.SIZE:
        return False
    return v not in grid.peer_values(r, c)


def candidates(grid: "Grid", r: int, c: int) -> List[int]:
    """Digits accepted by ``is_valid_placement`` at (r, c), ascending."""
    if not grid.in_bounds(r, c):
        return []
    used = grid.peer_values(r, c)
    return [d for d in range(1, grid.SIZE + 1) if d not in used]


def find_conflicts(grid: "Grid") -> List[Tuple[int, int]]:
    """Filled cells whose digit also appears among their peers."""
    conflicts: List[Tuple[int, int]] = []
    for r, c in grid.coords():
        v = grid.get(r, c)
        if v and v in grid.peer_values(r, c):
            conflicts.append((r, c))
    return conflicts


def is_consistent(grid: "Grid") -> bool:
    for r, c in grid.coords():
        v = grid.get(r, c)
        if v and v in grid.peer_values(r, c):
            return False
    return True
