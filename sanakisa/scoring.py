"""Move scoring.

The one scoring routine used both by the move engine and by the live
preview of a human move.  Tiles being scored must already be on the board;
``new_cells`` says which of them were placed this turn.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from sanakisa.board import Board
from sanakisa.constants import (
    BINGO_BONUS,
    LETTER_MULTIPLIERS,
    LONG_WORD_BONUS,
    LONG_WORD_MIN_LENGTH,
    RACK_SIZE,
    WORD_MULTIPLIERS,
)
from sanakisa.words import H, V, Word, word_through


@dataclass
class WordScore:
    word: Word
    points: int

    def __str__(self) -> str:
        return f"{self.word.text} ({self.points}p)"


@dataclass
class ScoreBreakdown:
    words: list[WordScore] = field(default_factory=list)
    bingo: bool = False

    @property
    def total(self) -> int:
        return sum(ws.points for ws in self.words) + (BINGO_BONUS if self.bingo else 0)

    def summary(self) -> str:
        parts = [str(ws) for ws in self.words]
        if self.bingo:
            parts.append(f"+{BINGO_BONUS} bingo!")
        return "  ".join(parts)


def score_word(board: Board, word: Word, new_cells: set[tuple[int, int]]) -> int:
    letter_sum = 0
    word_mult = 1
    for r, c in word.cells:
        value = board.cells[r][c].points
        if (r, c) in new_cells:
            premium = board.premium_at(r, c)
            value *= LETTER_MULTIPLIERS.get(premium, 1)
            word_mult *= WORD_MULTIPLIERS.get(premium, 1)
        letter_sum += value
    points = letter_sum * word_mult
    if len(word.text) >= LONG_WORD_MIN_LENGTH:
        points += LONG_WORD_BONUS
    return points


def collect_words(board: Board, new_cells: Iterable[tuple[int, int]]) -> list[Word]:
    """Every distinct word through a new cell, on both axes."""
    seen: set[tuple[str, int, int]] = set()
    words: list[Word] = []
    for r, c in new_cells:
        for direction in (H, V):
            w = word_through(board, r, c, direction)
            if w is None or w.key in seen:
                continue
            seen.add(w.key)
            words.append(w)
    return words


def score_breakdown(board: Board, new_cells: Iterable[tuple[int, int]]) -> ScoreBreakdown:
    cells = list(new_cells)
    new_set = set(cells)
    result = ScoreBreakdown(bingo=len(new_set) >= RACK_SIZE)
    for w in collect_words(board, cells):
        result.words.append(WordScore(w, score_word(board, w, new_set)))
    return result


def score(board: Board, new_cells: Iterable[tuple[int, int]]) -> int:
    """Points for the tiles on *new_cells*."""
    return score_breakdown(board, new_cells).total
