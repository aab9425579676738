"""I/O helpers: save and load a single puzzle as a values line plus a mask line."""

from pathlib import Path

from src.sudoku.codec import from_strings, to_strings
from src.sudoku.errors import FormatError
from src.sudoku.grid import Grid


def save_puzzle(path: Path, grid: Grid) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    values, mask = to_strings(grid)
    path.write_text(f"{values}\n{mask}\n", encoding="utf-8")


def load_puzzle(path: Path) -> Grid:
    """Read a values line and an optional mask line."""
    lines = [line.strip() for line in Path(path).read_text(encoding="utf-8").splitlines()]
    lines = [line for line in lines if line]
    if not lines:
        raise FormatError(f"{path} is empty")
    if len(lines) > 2:
        raise FormatError(f"{path} must hold a values line and at most one mask line")
    mask = lines[1] if len(lines) == 2 else None
    return from_strings(lines[0], mask)
