"""Word and layout checks.

``validate_cross_words`` is used by the move engine on every trial
placement.  The rest checks a human player's pending tiles and builds the
live preview shown before submitting; it scores through the same
``scoring`` module the engine uses.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Sequence

from sanakisa.board import Board
from sanakisa.dictionary import Dictionary
from sanakisa.errors import InvalidCrossWord, InvalidPlacement
from sanakisa.scoring import ScoreBreakdown, collect_words, score_breakdown
from sanakisa.words import H, V, Word, perpendicular, step, word_through


def validate_cross_words(
    board: Board,
    new_cells: Iterable[tuple[int, int]],
    direction: str,
    dictionary: Dictionary,
) -> list[Word]:
    """Cross words formed by the new tiles; raise on the first invalid one.

    The tiles must already be on the board.
    """
    cross = perpendicular(direction)
    words: list[Word] = []
    for r, c in new_cells:
        w = word_through(board, r, c, cross)
        if w is None:
            continue
        if not dictionary.is_valid(w.text):
            raise InvalidCrossWord(w.text)
        words.append(w)
    return words


def placement_direction(pending: Sequence[tuple[int, int]]) -> str | None:
    """H or V for two or more tiles in one line, else None."""
    if len(pending) < 2:
        return None
    rows = {r for r, _ in pending}
    cols = {c for _, c in pending}
    if len(rows) == 1:
        return H
    if len(cols) == 1:
        return V
    return None


def validate_layout(board: Board, pending: Sequence[tuple[int, int]]) -> None:
    """Raise InvalidPlacement if the pending tiles cannot form a move."""
    if not pending:
        raise InvalidPlacement("Place some tiles on the board first.")

    rows = {r for r, _ in pending}
    cols = {c for _, c in pending}
    if len(rows) > 1 and len(cols) > 1:
        raise InvalidPlacement("Tiles must go in a single row or column.")

    direction = placement_direction(pending)
    if direction is not None:
        dr, dc = step(direction)
        first = min(pending)
        last = max(pending)
        r, c = first
        while (r, c) != last:
            r += dr
            c += dc
            if board.is_empty(r, c):
                raise InvalidPlacement("Tiles must form one unbroken line.")

    if not board.has_fixed_tiles():
        if not any(board.is_center(r, c) for r, c in pending):
            raise InvalidPlacement("The first word must cover the center square.")
        return

    connected = any(
        board.is_fixed(r + dr, c + dc)
        for r, c in pending
        for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1))
    )
    if not connected:
        raise InvalidPlacement("The word must connect to tiles already on the board.")


def extract_words(board: Board, pending: Sequence[tuple[int, int]]) -> list[Word]:
    """Every word the pending tiles form, the main word first."""
    words = collect_words(board, pending)
    direction = placement_direction(pending)
    if direction is not None:
        words.sort(key=lambda w: w.direction != direction)
    return words


@dataclass
class Preview:
    error: str | None = None
    words: list[Word] = field(default_factory=list)
    invalid: list[Word] = field(default_factory=list)
    breakdown: ScoreBreakdown | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and bool(self.words) and not self.invalid

    @property
    def score(self) -> int | None:
        return self.breakdown.total if self.breakdown is not None else None


def preview(board: Board, pending: Sequence[tuple[int, int]], dictionary: Dictionary) -> Preview:
    """Live check of pending tiles, with the score when every word is valid."""
    try:
        validate_layout(board, pending)
    except InvalidPlacement as exc:
        return Preview(error=str(exc))

    words = extract_words(board, pending)
    result = Preview(words=words, invalid=[w for w in words if not dictionary.is_valid(w.text)])
    if words and not result.invalid:
        result.breakdown = score_breakdown(board, pending)
    return result

