"""Tiles: ordinary letter tiles and blanks.

Tiles compare by identity (``eq=False``) because a rack is a multiset of
physical tiles: two ``A`` tiles are different objects and one of them must
never end up in two places.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Union

from sanakisa.constants import BLANK, TILE_VALUES
from sanakisa.errors import UnassignedBlank


@dataclass(eq=False)
class LetterTile:
    letter: str
    points: int
    fixed: bool = False

    is_blank = False

    @property
    def face(self) -> str:
        """The letter this tile reads as on the board."""
        return self.letter

    def placed(self, letter: str | None = None) -> LetterTile:
        """A pending copy of this tile for putting on the board."""
        return LetterTile(self.letter, self.points)

    def __str__(self) -> str:
        return self.letter


@dataclass(eq=False)
class BlankTile:
    points: int = 0
    assigned: str | None = None
    fixed: bool = False

    is_blank = True
    letter = BLANK

    @property
    def face(self) -> str:
        if self.assigned is None:
            raise UnassignedBlank()
        return self.assigned

    def placed(self, letter: str | None = None) -> BlankTile:
        if letter is None:
            raise UnassignedBlank()
        return BlankTile(self.points, letter.upper())

    def __str__(self) -> str:
        return self.assigned.lower() if self.assigned else BLANK


Tile = Union[LetterTile, BlankTile]


def make_tile(letter: str, points: int | None = None) -> Tile:
    """Build a rack tile.  ``"?"`` (or a space) gives a blank."""
    if letter in (BLANK, " "):
        return BlankTile(0 if points is None else points)
    letter = letter.upper()
    return LetterTile(letter, TILE_VALUES.get(letter, 0) if points is None else points)


def make_rack(letters: Iterable[str]) -> list[Tile]:
    """Rack from a string such as ``"KISSA?"``."""
    return [make_tile(ch) for ch in letters]


def rack_value(rack: Iterable[Tile]) -> int:
    return sum(t.points for t in rack)
