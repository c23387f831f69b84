"""Move representation for Sanakisa."""

from __future__ import annotations

from typing import NamedTuple

from sanakisa.tile import Tile
from sanakisa.words import Word


class Placement(NamedTuple):
    """One tile going onto one cell.

    ``tile`` is the pending board copy (a blank carries its assigned letter);
    ``source`` is the rack tile it came from.
    """

    row: int
    col: int
    tile: Tile
    source: Tile


class Move:
    """A fully validated, fully scored move produced by the engine."""

    __slots__ = (
        "word", "row", "col", "direction", "score",
        "placements", "words", "cross_words", "is_bingo",
    )

    def __init__(
        self,
        word: str,
        row: int,
        col: int,
        direction: str,
        score: int,
        placements: list[Placement],
        words: list[Word] | None = None,
        cross_words: list[str] | None = None,
        is_bingo: bool = False,
    ):
        self.word = word
        self.row = row
        self.col = col
        self.direction = direction  # 'H' or 'V'
        self.score = score
        self.placements = placements
        self.words = words or []            # every Word that was scored
        self.cross_words = cross_words or []
        self.is_bingo = is_bingo

    @property
    def new_cells(self) -> list[tuple[int, int]]:
        return [(p.row, p.col) for p in self.placements]

    def __repr__(self) -> str:
        bingo = " +BINGO!" if self.is_bingo else ""
        arrow = "→" if self.direction == "H" else "↓"
        return f"{self.word} at ({self.row},{self.col}) {arrow} = {self.score} pts{bingo}"
