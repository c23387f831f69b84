"""Cheap pre-filter of the word list before placement search.

A word survives if the rack plus *every* letter on the board could supply
it, counting blanks as wildcards.  Board letters are pooled without regard
to where they are, so the filter never rejects a playable word but lets
through plenty that no line can hold.  Exact checks happen at placement.
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Sequence

from sanakisa.board import Board
from sanakisa.tile import Tile


def available_letters(board: Board, rack: Sequence[Tile]) -> tuple[Counter, int]:
    """(letter counts from rack and board, number of rack blanks)."""
    counts: Counter = Counter()
    blanks = 0
    for tile in rack:
        if tile.is_blank:
            blanks += 1
        else:
            counts[tile.letter] += 1
    for _r, _c, tile in board.tiles():
        counts[tile.face] += 1
    return counts, blanks


def letter_deficit(word: str, counts: Counter) -> int:
    """How many of *word*'s letters *counts* cannot cover."""
    need = Counter(word.upper())
    return sum(n - counts[letter] for letter, n in need.items() if n > counts[letter])


def filter_candidates(words: Iterable[str], board: Board, rack: Sequence[Tile]) -> list[str]:
    """Words from *words* (order kept) that the pooled letters might form."""
    counts, blanks = available_letters(board, rack)
    return [w for w in words if letter_deficit(w, counts) <= blanks]
