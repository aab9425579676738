"""Shared puzzle data and assertions for the test modules."""

EASY_SOLUTION = (
    "483921657"
    "967345821"
    "251876493"
    "548132976"
    "729564138"
    "136798245"
    "372689514"
    "814253769"
    "695417382"
)


def mask_of(values: str) -> str:
    return "".join("0" if ch in "0." else "1" for ch in values)


def assert_valid_solution(values):
    """Every row, column, and box holds each digit 1..9 exactly once."""
    digits = set(range(1, 10))
    for i in range(9):
        assert set(values[i]) == digits
        assert {values[r][i] for r in range(9)} == digits
    for br in range(0, 9, 3):
        for bc in range(0, 9, 3):
            box = {values[br + i][bc + j] for i in range(3) for j in range(3)}
            assert box == digits
