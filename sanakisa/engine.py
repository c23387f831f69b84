"""Move engine: time-boxed search for the computer player's move.

For each candidate word (ordered by the difficulty's length order) and
each board line holding an anchor, every start offset whose window covers
an anchor is tried: lay the word, check the main and cross words, score,
take the tiles back.  The board is borrowed for the call and is left
exactly as it was handed in.
"""

from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Sequence

from sanakisa.anchors import Anchors, find_anchors
from sanakisa.board import Board
from sanakisa.candidates import filter_candidates
from sanakisa.constants import BOARD_SIZE, RACK_SIZE
from sanakisa.dictionary import Dictionary
from sanakisa.difficulty import Difficulty, SearchProfile, resolve_profile
from sanakisa.errors import DuplicateTile, PlacementRejected, RackOverflow, UnassignedBlank
from sanakisa.move import Move
from sanakisa.placement import attempt_placement, cell_at, legal_starts
from sanakisa.scoring import score_breakdown
from sanakisa.tile import Tile
from sanakisa.validation import validate_cross_words
from sanakisa.words import H, V, word_through

log = logging.getLogger("sanakisa.engine")

Clock = Callable[[], float]


class SearchPhase(Enum):
    IDLE = "idle"
    ENUMERATING = "enumerating"
    DEADLINE_EXCEEDED = "deadline-exceeded"
    EXHAUSTED = "exhausted"
    SELECTING = "selecting"
    DONE = "done"


class Signal(Enum):
    CONTINUE = "continue"
    STOP = "stop"


class SearchOutcome(Enum):
    FOUND = "found"
    NO_LEGAL_MOVE = "no-legal-move"


class Deadline:
    """Wall-clock budget polled between candidate words."""

    def __init__(self, budget: float, clock: Clock = time.monotonic):
        self.clock = clock
        self.expires_at = clock() + budget

    def check(self) -> Signal:
        return Signal.STOP if self.clock() >= self.expires_at else Signal.CONTINUE


@dataclass
class SearchResult:
    move: Move | None = None
    timed_out: bool = False
    candidates: int = 0   # words left after the pre-filter
    words_tried: int = 0
    evaluated: int = 0    # (word, line, start) windows tried
    legal: int = 0        # placements that passed every check

    @property
    def outcome(self) -> SearchOutcome:
        return SearchOutcome.FOUND if self.move is not None else SearchOutcome.NO_LEGAL_MOVE


class MoveEngine:
    """Finds the computer player's move for a difficulty tier."""

    def __init__(
        self,
        dictionary: Dictionary,
        rng: random.Random | None = None,
        clock: Clock = time.monotonic,
    ):
        self.dict = dictionary
        self.rng = rng or random.Random()
        self.clock = clock
        self.phase = SearchPhase.IDLE

    # public API

    def find_best_move(
        self,
        board: Board,
        rack: Sequence[Tile],
        difficulty: Difficulty | SearchProfile | str = Difficulty.EASY,
    ) -> Move | None:
        """The chosen move, or None when nothing can be played."""
        return self.search(board, rack, difficulty).move

    def search(
        self,
        board: Board,
        rack: Sequence[Tile],
        difficulty: Difficulty | SearchProfile | str = Difficulty.EASY,
    ) -> SearchResult:
        profile = resolve_profile(difficulty)
        self._check_inputs(board, rack)
        result = SearchResult()
        self._enter(SearchPhase.IDLE)

        if not rack:
            for phase in (SearchPhase.EXHAUSTED, SearchPhase.SELECTING, SearchPhase.DONE):
                self._enter(phase)
            return result

        deadline = Deadline(profile.time_budget, self.clock)
        anchors = find_anchors(board)
        words = filter_candidates(self.dict.words_by_length(profile.ascending), board, rack)
        result.candidates = len(words)
        keep_all = profile.pick_from_top > 1

        self._enter(SearchPhase.ENUMERATING)
        found: list[Move] = []
        best: Move | None = None
        for word in words:
            if deadline.check() is Signal.STOP:
                result.timed_out = True
                break
            result.words_tried += 1
            for move in self._moves_for_word(board, rack, word, anchors, result):
                result.legal += 1
                if keep_all:
                    found.append(move)
                elif best is None or move.score > best.score:
                    best = move

        if result.timed_out:
            self._enter(SearchPhase.DEADLINE_EXCEEDED)
            log.info(
                "Search stopped at deadline after %d of %d words (%d legal moves).",
                result.words_tried, result.candidates, result.legal,
            )
        else:
            self._enter(SearchPhase.EXHAUSTED)

        self._enter(SearchPhase.SELECTING)
        if keep_all:
            result.move = self._pick_from_top(found, profile.pick_from_top)
        else:
            result.move = best
        self._enter(SearchPhase.DONE)

        log.debug(
            "Search done: %d candidates, %d windows, %d legal, chose %r",
            result.candidates, result.evaluated, result.legal, result.move,
        )
        return result

    # enumeration

    def _moves_for_word(
        self,
        board: Board,
        rack: Sequence[Tile],
        word: str,
        anchors: Anchors,
        result: SearchResult,
    ):
        if len(word) > BOARD_SIZE:
            return
        for direction, lines in ((H, anchors.by_row), (V, anchors.by_col)):
            for line in sorted(lines):
                for start in legal_starts(board, line, lines[line], len(word), direction):
                    result.evaluated += 1
                    move = self._evaluate(board, rack, word, line, start, direction)
                    if move is not None and move.score > 0:
                        yield move

    def _evaluate(
        self,
        board: Board,
        rack: Sequence[Tile],
        word: str,
        line: int,
        start: int,
        direction: str,
    ) -> Move | None:
        """Validated, scored move for one window, or None if it is illegal."""
        try:
            placements = attempt_placement(board, word, line, start, direction, rack)
            new_cells = [(p.row, p.col) for p in placements]
            with board.trial(placements):
                main = word_through(board, new_cells[0][0], new_cells[0][1], direction)
                if main is None or main.text != word or not self.dict.is_valid(main.text):
                    return None
                cross = validate_cross_words(board, new_cells, direction, self.dict)
                breakdown = score_breakdown(board, new_cells)
        except PlacementRejected:
            return None

        row, col = cell_at(line, start, direction)
        return Move(
            word=word,
            row=row,
            col=col,
            direction=direction,
            score=breakdown.total,
            placements=placements,
            words=[ws.word for ws in breakdown.words],
            cross_words=[w.text for w in cross],
            is_bingo=breakdown.bingo,
        )

    # selection

    def _pick_from_top(self, moves: list[Move], n: int) -> Move | None:
        if not moves:
            return None
        moves.sort(key=lambda m: m.score, reverse=True)
        return moves[self.rng.randrange(min(n, len(moves)))]

    # housekeeping

    def _enter(self, phase: SearchPhase) -> None:
        log.debug("search: %s -> %s", self.phase.value, phase.value)
        self.phase = phase

    @staticmethod
    def _check_inputs(board: Board, rack: Sequence[Tile]) -> None:
        if len(rack) > RACK_SIZE:
            raise RackOverflow(f"rack holds {len(rack)} tiles, at most {RACK_SIZE} allowed")
        seen: set[int] = set()
        for tile in rack:
            if id(tile) in seen:
                raise DuplicateTile(f"tile {tile} appears twice in the rack")
            seen.add(id(tile))
        board.check_integrity()
        for r, c, tile in board.tiles():
            if id(tile) in seen:
                raise DuplicateTile(f"rack tile {tile} is also on the board at ({r},{c})")
            if tile.is_blank and tile.assigned is None:
                raise UnassignedBlank(r, c)


def find_best_move(
    board: Board,
    rack: Sequence[Tile],
    difficulty: Difficulty | SearchProfile | str,
    dictionary: Dictionary,
    rng: random.Random | None = None,
) -> Move | None:
    """One-shot search with a throwaway engine."""
    return MoveEngine(dictionary, rng=rng).find_best_move(board, rack, difficulty)
