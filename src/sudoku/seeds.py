"""Built-in puzzle strings (81 characters, row-major, '0' = empty)."""

from typing import Dict

EASY = (
    "003020600"
    "900305001"
    "001806400"
    "008102900"
    "700000008"
    "006708200"
    "002609500"
    "800203009"
    "005010300"
)

MEDIUM = (
    "200080300"
    "060070084"
    "030500209"
    "000105408"
    "000000000"
    "402706000"
    "301007040"
    "720040060"
    "004010003"
)

HARD = (
    "000000907"
    "000420180"
    "000705026"
    "100904000"
    "050000040"
    "000507009"
    "920108000"
    "034059000"
    "507000000"
)

# A lone clue: far more than one completion.
MULTI = "1" + "0" * 80

# Two 5s side by side in the first row.
IMPOSSIBLE = "55" + "0" * 79

BY_NAME: Dict[str, str] = {
    "easy": EASY,
    "medium": MEDIUM,
    "hard": HARD,
    "multi": MULTI,
    "impossible": IMPOSSIBLE,
}


def get_seed(name: str) -> str:
    key = name.strip().lower()
    if key not in BY_NAME:
        raise KeyError(f"Unknown seed {name!r}; choose from: {', '.join(BY_NAME)}")
    return BY_NAME[key]
