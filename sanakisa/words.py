"""Word extraction: the maximal run of tiles through a cell."""

from __future__ import annotations

from dataclasses import dataclass

from sanakisa.board import Board
from sanakisa.errors import UnassignedBlank

H = "H"
V = "V"


def step(direction: str) -> tuple[int, int]:
    """(dr, dc) for one cell along *direction*."""
    return (0, 1) if direction == H else (1, 0)


def perpendicular(direction: str) -> str:
    return V if direction == H else H


@dataclass(frozen=True)
class Word:
    """A contiguous run of two or more tiles along one axis."""

    text: str
    direction: str
    cells: tuple[tuple[int, int], ...]

    @property
    def key(self) -> tuple[str, int, int]:
        """Line identity: axis plus first cell.  Two extractions of the same
        run always produce the same key."""
        r, c = self.cells[0]
        return self.direction, r, c

    def __len__(self) -> int:
        return len(self.text)

    def __str__(self) -> str:
        return self.text


def word_through(board: Board, row: int, col: int, direction: str) -> Word | None:
    """Maximal run of occupied cells through (row, col) along *direction*.

    None if the run is shorter than two tiles.
    """
    if board.is_empty(row, col):
        return None
    dr, dc = step(direction)
    r, c = row, col
    while board.is_occupied(r - dr, c - dc):
        r -= dr
        c -= dc

    cells: list[tuple[int, int]] = []
    letters: list[str] = []
    while board.is_occupied(r, c):
        tile = board.cells[r][c]
        try:
            letters.append(tile.face)
        except UnassignedBlank:
            raise UnassignedBlank(r, c) from None
        cells.append((r, c))
        r += dr
        c += dc

    if len(cells) < 2:
        return None
    return Word("".join(letters).upper(), direction, tuple(cells))
