"""Values/mask string codec and plain-text rendering for grids."""

from typing import List, Optional, Tuple

from .errors import FormatError, ShapeError
from .grid import BOX, SIZE, Grid

CELLS = SIZE * SIZE
EMPTY_CHARS = "0."


def to_strings(grid: Grid) -> Tuple[str, str]:
    """Row-major ``(values, mask)`` strings; mask '1' marks a given cell."""
    values: List[str] = []
    mask: List[str] = []
    for r, c in grid.coords():
        values.append(str(grid.get(r, c)))
        mask.append("1" if grid.is_given(r, c) else "0")
    return "".join(values), "".join(mask)


def from_strings(values: str, mask: Optional[str] = None) -> Grid:
    """
    Build a grid from an N*N values string ('0' or '.' = empty) and an optional
    N*N mask of '0'/'1'. Without a mask, every nonzero digit is a given.
    """
    if not isinstance(values, str):
        raise FormatError(f"Values must be a string, got {type(values).__name__}")
    if len(values) != CELLS:
        raise FormatError(f"Values string must have {CELLS} characters, got {len(values)}")

    matrix = [[0] * SIZE for _ in range(SIZE)]
    for i, ch in enumerate(values):
        if ch in EMPTY_CHARS:
            continue
        if not ch.isdigit() or not ch.isascii():
            raise FormatError(f"Invalid character {ch!r} at position {i}")
        matrix[i // SIZE][i % SIZE] = int(ch)

    givens = None
    if mask is not None:
        if not isinstance(mask, str):
            raise FormatError(f"Mask must be a string, got {type(mask).__name__}")
        if len(mask) != CELLS:
            raise FormatError(f"Mask string must have {CELLS} characters, got {len(mask)}")
        givens = [[False] * SIZE for _ in range(SIZE)]
        for i, ch in enumerate(mask):
            if ch not in "01":
                raise FormatError(f"Invalid mask character {ch!r} at position {i}")
            givens[i // SIZE][i % SIZE] = ch == "1"

    try:
        return Grid(matrix, givens)
    except ShapeError as e:
        raise FormatError(str(e)) from e


def format_grid(grid: Grid) -> str:
    """ASCII board with 1-based row/column labels and '.' for empty cells."""
    sep = " +" + "+".join(["-" * (2 * BOX + 1)] * BOX) + "+"
    header = "   " + "   ".join(
        " ".join(str(c + 1) for c in range(b * BOX, (b + 1) * BOX)) for b in range(BOX)
    )
    lines = [header]
    for r in range(SIZE):
        if r % BOX == 0:
            lines.append(sep)
        parts = [str(r + 1)]
        for c in range(SIZE):
            if c % BOX == 0:
                parts.append("| ")
            parts.append(f"{grid.cell(r, c)} ")
        parts.append("|")
        lines.append("".join(parts))
    lines.append(sep)
    return "\n".join(lines)
