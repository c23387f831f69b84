"""Game constants for Sanakisa (Finnish word-placement game)."""

from __future__ import annotations

BOARD_SIZE = 15
CENTER = 7  # 0-indexed center square
RACK_SIZE = 7

BINGO_BONUS = 40        # all seven rack tiles in one move
LONG_WORD_BONUS = 10    # per word of LONG_WORD_MIN_LENGTH letters or more
LONG_WORD_MIN_LENGTH = 7

BLANK = "?"

# Bonus square layout
# Key: . = normal, DL = double letter, TL = triple letter,
#      DW = double word, TW = triple word, * = center (no multiplier)
# fmt: off
BONUS_GRID: list[list[str]] = [
    ["DL", ".",  "TW", ".",  ".",  "DL", ".",  "DL", ".",  "DL", ".",  ".",  "TW", ".",  "DL"],
    [".",  "DL", "DL", ".",  "DW", ".",  "DL", "DL", "DL", ".",  "DW", ".",  "DL", "DL", "." ],
    ["TW", ".",  "DL", "DL", ".",  "TL", ".",  ".",  ".",  "TL", ".",  ".",  ".",  ".",  "TW"],
    [".",  ".",  ".",  "TL", ".",  ".",  ".",  ".",  ".",  ".",  ".",  "TL", ".",  ".",  "." ],
    [".",  "DW", ".",  ".",  ".",  ".",  "TL", ".",  "TL", ".",  ".",  ".",  ".",  "DW", "." ],
    [".",  ".",  ".",  ".",  "TL", ".",  ".",  ".",  ".",  ".",  "TL", ".",  ".",  ".",  "." ],
    [".",  ".",  ".",  ".",  ".",  ".",  ".",  ".",  ".",  ".",  ".",  ".",  ".",  ".",  "." ],
    [".",  ".",  ".",  ".",  ".",  ".",  ".",  "*",  ".",  ".",  ".",  ".",  ".",  ".",  "." ],
    [".",  ".",  ".",  ".",  ".",  ".",  ".",  ".",  ".",  ".",  ".",  ".",  ".",  ".",  "." ],
    [".",  ".",  ".",  ".",  "TL", ".",  ".",  ".",  ".",  ".",  "TL", ".",  ".",  ".",  "." ],
    [".",  "DW", ".",  ".",  ".",  ".",  "TL", ".",  "TL", ".",  ".",  ".",  ".",  "DW", "." ],
    [".",  ".",  ".",  "TL", ".",  ".",  ".",  ".",  ".",  ".",  ".",  "TL", ".",  ".",  "." ],
    ["TW", ".",  ".",  ".",  ".",  "TL", ".",  ".",  ".",  "TL", ".",  "DL", "DL", ".",  "TW"],
    [".",  "DL", "DL", ".",  "DW", ".",  "DL", "DL", "DL", ".",  "DW", ".",  "DL", "DL", "." ],
    ["DL", ".",  "TW", ".",  ".",  "DL", ".",  "DL", ".",  "DL", ".",  ".",  "TW", ".",  "DL"],
]
# fmt: on

LETTER_MULTIPLIERS: dict[str, int] = {"DL": 2, "TL": 3}
WORD_MULTIPLIERS: dict[str, int] = {"DW": 2, "TW": 3}

# Finnish tile distribution: letter -> (count, points). 102 tiles.
# fmt: off
TILE_BAG_DEFINITION: dict[str, tuple[int, int]] = {
    BLANK: (2, 0),
    "A": (7, 1),  "E": (9, 1),  "I": (10, 1), "N": (9, 1),  "S": (7, 1),
    "T": (9, 1),  "K": (6, 3),  "L": (6, 2),  "O": (5, 2),  "Ä": (5, 2),
    "M": (3, 3),  "U": (4, 3),  "H": (2, 4),  "J": (2, 4),  "P": (2, 4),
    "R": (2, 4),  "V": (2, 4),  "Y": (2, 4),  "D": (1, 7),  "Ö": (2, 7),
    "B": (1, 8),  "F": (1, 8),  "G": (1, 8),  "W": (1, 8),  "C": (1, 10),
}
# fmt: on

TILE_VALUES: dict[str, int] = {
    letter: points for letter, (_count, points) in TILE_BAG_DEFINITION.items()
}

# Letters a blank may stand for
ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZÄÖÅ"

# Ratings (Elo)
INITIAL_RATING = 1200
COMPUTER_RATING = 1100
K_FACTOR = 32
RATING_SCALE = 400
RATING_FLOOR = 800

MAX_CONSECUTIVE_PASSES = 4
