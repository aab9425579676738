"""Exception taxonomy for grid construction, decoding, and generation."""


class SudokuError(Exception):
    """Base class for every error raised by the engine."""


class ShapeError(SudokuError, ValueError):
    """Grid data has the wrong dimensions or holds an out-of-range value."""


class OutOfBounds(SudokuError, IndexError):
    """A row/column coordinate lies outside the grid."""


class FormatError(SudokuError, ValueError):
    """A values/mask string or puzzle file is malformed."""


class GenerationExhausted(SudokuError, RuntimeError):
    """No uniquely solvable puzzle was produced within the attempt budget."""


class SolutionUnavailable(SudokuError, LookupError):
    """A solved value was requested from a result without a unique solution."""
