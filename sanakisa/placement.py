"""Laying a candidate word onto one board line."""

from __future__ import annotations

from typing import Iterable, Iterator, Sequence

from sanakisa.board import Board
from sanakisa.constants import BOARD_SIZE
from sanakisa.errors import InsufficientTiles, LetterConflict, NoNewTiles, OutOfBounds
from sanakisa.move import Placement
from sanakisa.tile import Tile
from sanakisa.words import H


def cell_at(line: int, offset: int, direction: str) -> tuple[int, int]:
    """Board cell for *offset* along a row (H) or column (V) *line*."""
    return (line, offset) if direction == H else (offset, line)


def window_is_open(board: Board, line: int, start: int, length: int, direction: str) -> bool:
    """True if the cells just before and just after the window are empty,
    so a word laid there cannot run into an existing one."""
    return (
        board.is_empty(*cell_at(line, start - 1, direction))
        and board.is_empty(*cell_at(line, start + length, direction))
    )


def legal_starts(
    board: Board,
    line: int,
    anchors: Iterable[int],
    length: int,
    direction: str,
) -> Iterator[int]:
    """Start offsets on *line* where a word of *length* covers an anchor and
    does not touch a tile beyond either end."""
    anchors = list(anchors)
    for start in range(BOARD_SIZE - length + 1):
        end = start + length - 1
        if not any(start <= a <= end for a in anchors):
            continue
        if not window_is_open(board, line, start, length, direction):
            continue
        yield start


def _take(available: list[Tile], letter: str) -> Tile:
    for i, tile in enumerate(available):
        if not tile.is_blank and tile.letter == letter:
            return available.pop(i)
    for i, tile in enumerate(available):
        if tile.is_blank:
            return available.pop(i)
    raise InsufficientTiles(letter)


def attempt_placement(
    board: Board,
    word: str,
    line: int,
    start: int,
    direction: str,
    rack: Sequence[Tile],
) -> list[Placement]:
    """Placements needed to spell *word* from *start* on *line*.

    Cells already holding a tile must carry the word's letter there and are
    reused.  Empty cells take a matching rack tile, else a blank assigned to
    that letter.  The rack itself is left untouched.
    """
    word = word.upper()
    available = list(rack)
    placements: list[Placement] = []
    for i, letter in enumerate(word):
        r, c = cell_at(line, start + i, direction)
        if not board.in_bounds(r, c):
            raise OutOfBounds(f"{word} does not fit at offset {start} of line {line}")
        existing = board.cells[r][c]
        if existing is not None:
            found = existing.face.upper()
            if found != letter:
                raise LetterConflict(r, c, letter, found)
            continue
        source = _take(available, letter)
        placements.append(Placement(r, c, source.placed(letter), source))

    if not placements:
        raise NoNewTiles(f"{word} is already on the board")
    return placements
