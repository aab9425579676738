"""Grid data structures: cell values plus the immutable given-mask."""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Set, Tuple

from .errors import OutOfBounds, ShapeError
from .validator import is_valid_placement

BOX = 3
SIZE = BOX * BOX

Coord = Tuple[int, int]


def _build_peers() -> List[List[Tuple[Coord, ...]]]:
    """Coordinates sharing a row, column, or box with each cell (cell excluded)."""
    table: List[List[Tuple[Coord, ...]]] = []
    for r in range(SIZE):
        row: List[Tuple[Coord, ...]] = []
        for c in range(SIZE):
            ps: List[Coord] = [(r, j) for j in range(SIZE) if j != c]
            ps.extend((i, c) for i in range(SIZE) if i != r)
            br, bc = (r // BOX) * BOX, (c // BOX) * BOX
            for rr in range(br, br + BOX):
                for cc in range(bc, bc + BOX):
                    if rr != r and cc != c:
                        ps.append((rr, cc))
            row.append(tuple(ps))
        table.append(row)
    return table


PEERS = _build_peers()


@dataclass(frozen=True)
class Cell:
    """Snapshot of one cell. ``value`` 0 means empty."""

    value: int = 0
    given: bool = False

    def __str__(self) -> str:
        return "." if self.value == 0 else str(self.value)


class Grid:
    """
    Mutable SIZE x SIZE grid. Values live in 0..SIZE (0 = empty); the given
    flag of each cell is fixed at construction. Editable cells only change via
    ``try_set``/``try_clear``.
    """

    SIZE = SIZE
    BOX = BOX

    def __init__(
        self,
        values: Sequence[Sequence[int]],
        givens: Optional[Sequence[Sequence[bool]]] = None,
    ) -> None:
        self._values = _check_values(values)
        if givens is None:
            self._givens = [[v != 0 for v in row] for row in self._values]
        else:
            self._givens = _check_givens(givens, self._values)

    @classmethod
    def empty(cls) -> "Grid":
        return cls([[0] * SIZE for _ in range(SIZE)])

    # -----------------------------
    # Queries
    # -----------------------------

    @staticmethod
    def in_bounds(r: int, c: int) -> bool:
        return 0 <= r < SIZE and 0 <= c < SIZE

    def _require(self, r: int, c: int) -> None:
        if not self.in_bounds(r, c):
            raise OutOfBounds(f"Cell ({r},{c}) is outside the {SIZE}x{SIZE} grid")

    def get(self, r: int, c: int) -> int:
        self._require(r, c)
        return self._values[r][c]

    def is_given(self, r: int, c: int) -> bool:
        self._require(r, c)
        return self._givens[r][c]

    def cell(self, r: int, c: int) -> Cell:
        self._require(r, c)
        return Cell(self._values[r][c], self._givens[r][c])

    def peer_values(self, r: int, c: int) -> Set[int]:
        """Nonzero digits held by the row, column, and box peers of (r, c)."""
        values = self._values
        return {values[pr][pc] for pr, pc in PEERS[r][c]} - {0}

    def values(self) -> List[List[int]]:
        return [row[:] for row in self._values]

    def givens(self) -> List[List[bool]]:
        return [row[:] for row in self._givens]

    def given_count(self) -> int:
        return sum(sum(1 for g in row if g) for row in self._givens)

    def empty_count(self) -> int:
        return sum(row.count(0) for row in self._values)

    def coords(self) -> Iterable[Coord]:
        """All coordinates in row-major order."""
        for r in range(SIZE):
            for c in range(SIZE):
                yield r, c

    # -----------------------------
    # Mutation
    # -----------------------------

    def try_set(self, r: int, c: int, v: int) -> bool:
        """Place ``v`` at (r, c) if the cell is editable and the move is legal."""
        if not self.in_bounds(r, c) or self._givens[r][c]:
            return False
        if not is_valid_placement(self, r, c, v):
            return False
        self._values[r][c] = v
        return True

    def try_clear(self, r: int, c: int) -> bool:
        if not self.in_bounds(r, c) or self._givens[r][c]:
            return False
        self._values[r][c] = 0
        return True

    def _write(self, r: int, c: int, v: int) -> None:
        # Search-only: callers guarantee (r, c) is an editable empty cell.
        self._values[r][c] = v

    def is_solved(self) -> bool:
        """
        True when every cell is filled and every editable cell's digit is free
        of row/column/box conflicts. Filled-but-inconsistent grids are not solved.
        """
        for r, c in self.coords():
            v = self._values[r][c]
            if v == 0:
                return False
            if self._givens[r][c]:
                continue
            self._values[r][c] = 0
            ok = is_valid_placement(self, r, c, v)
            self._values[r][c] = v
            if not ok:
                return False
        return True

    def copy(self) -> "Grid":
        return Grid(self._values, self._givens)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._values == other._values and self._givens == other._givens

    def __str__(self) -> str:
        return "".join(str(v) for row in self._values for v in row)

    def __repr__(self) -> str:
        return f"Grid({str(self)!r}, givens={self.given_count()})"


def _is_rows(obj) -> bool:
    return isinstance(obj, Sequence) and not isinstance(obj, str)


def _check_values(values: Sequence[Sequence[int]]) -> List[List[int]]:
    if not _is_rows(values) or len(values) != SIZE:
        raise ShapeError(f"Grid must have {SIZE} rows")
    out: List[List[int]] = []
    for r, row in enumerate(values):
        if not _is_rows(row) or len(row) != SIZE:
            raise ShapeError(f"Row {r} must have {SIZE} columns")
        checked: List[int] = []
        for c, v in enumerate(row):
            if isinstance(v, bool) or not isinstance(v, int):
                raise ShapeError(f"Value at ({r},{c}) is not an integer: {v!r}")
            if v < 0 or v > SIZE:
                raise ShapeError(f"Value at ({r},{c}) is out of range 0..{SIZE}: {v}")
            checked.append(v)
        out.append(checked)
    return out


def _check_givens(givens: Sequence[Sequence[bool]], values: List[List[int]]) -> List[List[bool]]:
    if not _is_rows(givens) or len(givens) != SIZE:
        raise ShapeError(f"Given mask must have {SIZE} rows")
    out: List[List[bool]] = []
    for r, row in enumerate(givens):
        if not _is_rows(row) or len(row) != SIZE:
            raise ShapeError(f"Given mask row {r} must have {SIZE} columns")
        flags: List[bool] = []
        for c, flag in enumerate(row):
            if not isinstance(flag, bool):
                raise ShapeError(f"Given flag at ({r},{c}) is not a bool: {flag!r}")
            if flag and values[r][c] == 0:
                raise ShapeError(f"Cell ({r},{c}) is marked given but is empty")
            flags.append(flag)
        out.append(flags)
    return out
