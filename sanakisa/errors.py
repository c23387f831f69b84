"""Exception hierarchy for Sanakisa.

Two families matter to callers:

* ``PlacementRejected`` and its subclasses are expected outcomes of trying a
  candidate placement.  The move engine catches them and moves on.
* ``InvariantViolation`` means the board or rack handed in is malformed.  It
  is never caught inside the package and must not be confused with "no legal
  move", which is a normal search outcome and not an exception at all.
"""

from __future__ import annotations


class SanakisaError(Exception):
    """Base class for all package errors."""


# ── Expected, per-candidate rejections ──────────────────────────────────


class PlacementRejected(SanakisaError):
    """A trial placement cannot be played."""


class LetterConflict(PlacementRejected):
    def __init__(self, row: int, col: int, expected: str, found: str):
        super().__init__(f"({row},{col}) holds {found}, word needs {expected}")
        self.row = row
        self.col = col
        self.expected = expected
        self.found = found


class InsufficientTiles(PlacementRejected):
    def __init__(self, letter: str):
        super().__init__(f"no rack tile or blank left for {letter}")
        self.letter = letter


class NoNewTiles(PlacementRejected):
    """The word is already on the board; nothing would be placed."""


class OutOfBounds(PlacementRejected):
    """The word would run off the board."""


class InvalidCrossWord(PlacementRejected):
    def __init__(self, word: str):
        super().__init__(f"cross word {word} is not in the dictionary")
        self.word = word


# ── Interactive (human) move problems ───────────────────────────────────


class InvalidPlacement(SanakisaError):
    """Pending tiles break a layout rule.  The message is user-facing."""


class InvalidWords(SanakisaError):
    def __init__(self, words: list[str]):
        super().__init__("invalid word: " + ", ".join(words))
        self.words = words


class GameStateError(SanakisaError):
    """The requested action is not allowed in the current game state."""


# ── Fatal programming errors ────────────────────────────────────────────


class InvariantViolation(SanakisaError):
    """Board or rack is malformed.  Never raised for valid inputs."""


class UnassignedBlank(InvariantViolation):
    def __init__(self, row: int | None = None, col: int | None = None):
        where = f" at ({row},{col})" if row is not None else ""
        super().__init__(f"blank tile{where} has no assigned letter")


class DuplicateTile(InvariantViolation):
    """The same physical tile is held in two places."""


class CellOccupied(InvariantViolation):
    def __init__(self, row: int, col: int):
        super().__init__(f"cell ({row},{col}) already holds a tile")
        self.row = row
        self.col = col


class RackOverflow(InvariantViolation):
    """Rack holds more tiles than RACK_SIZE."""


class DictionaryError(SanakisaError):
    """The word list could not be loaded."""
