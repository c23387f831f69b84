"""Turn management: a two-player game of one human against the computer.

The game owns the board, bag and racks.  The move engine only borrows the
board and the computer's rack for the length of one search.
"""

from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass, field
from typing import Iterable

from sanakisa.bag import TileBag
from sanakisa.board import Board
from sanakisa.constants import ALPHABET, COMPUTER_RATING, INITIAL_RATING, MAX_CONSECUTIVE_PASSES
from sanakisa.dictionary import Dictionary
from sanakisa.difficulty import Difficulty, SearchProfile
from sanakisa.engine import MoveEngine
from sanakisa.errors import GameStateError, InvalidPlacement, InvalidWords, InvariantViolation
from sanakisa.move import Move, Placement
from sanakisa.placement import attempt_placement
from sanakisa.rating import update_ratings
from sanakisa.scoring import score_breakdown
from sanakisa.tile import Tile, rack_value
from sanakisa.validation import Preview, extract_words, preview, validate_layout
from sanakisa.words import H

log = logging.getLogger("sanakisa.game")


@dataclass
class Player:
    name: str
    rating: int = INITIAL_RATING
    is_human: bool = True
    score: int = 0
    rack: list[Tile] = field(default_factory=list)


@dataclass
class TurnResult:
    player: str
    kind: str               # "play", "pass" or "exchange"
    score: int = 0
    words: list[str] = field(default_factory=list)
    summary: str = ""
    exchanged: int = 0


def _take_from_rack(rack: list[Tile], tile: Tile) -> None:
    for i, held in enumerate(rack):
        if held is tile:
            del rack[i]
            return
    raise InvariantViolation(f"tile {tile} is not on the rack")


class Game:
    def __init__(
        self,
        dictionary: Dictionary,
        players: list[Player],
        bag: TileBag,
        board: Board | None = None,
        difficulty: Difficulty = Difficulty.EASY,
        profile: SearchProfile | None = None,
    ):
        self.dictionary = dictionary
        self.players = players
        self.bag = bag
        self.board = board or Board()
        self.difficulty = difficulty
        self.profile = profile  # overrides the difficulty's search settings
        self.current = 0
        self.consecutive_passes = 0
        self.over = False
        self.pending: list[Placement] = []

    @classmethod
    def new(
        cls,
        dictionary: Dictionary,
        difficulty: Difficulty = Difficulty.EASY,
        seed: int | None = None,
        human_name: str = "Player 1",
        profile: SearchProfile | None = None,
    ) -> Game:
        """Fresh game: empty board, shuffled bag, both racks dealt."""
        bag = TileBag(random.Random(seed))
        players = [
            Player(human_name),
            Player(f"Computer ({difficulty.value})", rating=COMPUTER_RATING, is_human=False),
        ]
        for p in players:
            bag.refill(p.rack)
        log.info("New game: %s vs %s", players[0].name, players[1].name)
        return cls(dictionary, players, bag, difficulty=difficulty, profile=profile)

    @property
    def player(self) -> Player:
        return self.players[self.current]

    @property
    def opponent(self) -> Player:
        return self.players[1 - self.current]

    @property
    def winner(self) -> Player | None:
        a, b = self.players
        if not self.over or a.score == b.score:
            return None
        return a if a.score > b.score else b

    # human turn

    def place(self, rack_index: int, row: int, col: int, letter: str | None = None) -> None:
        """Put a rack tile on the board as a pending tile.

        A blank needs the letter it stands for, one of ALPHABET.
        """
        self._require_active()
        if not self.player.is_human:
            raise GameStateError("It is not a human player's turn.")
        if not 0 <= rack_index < len(self.player.rack):
            raise InvalidPlacement("No such tile on the rack.")
        if not self.board.in_bounds(row, col):
            raise InvalidPlacement("That square is off the board.")
        if self.board.is_occupied(row, col):
            raise InvalidPlacement("That square is already taken.")
        source = self.player.rack[rack_index]
        if source.is_blank:
            if not letter:
                raise InvalidPlacement("Choose a letter for the blank tile.")
            if len(letter) != 1 or letter.upper() not in ALPHABET:
                raise InvalidPlacement(f"A blank cannot stand for {letter!r}.")
        tile = source.placed(letter)
        self.board.place(row, col, tile)
        del self.player.rack[rack_index]
        self.pending.append(Placement(row, col, tile, source))

    def recall(self) -> None:
        """Return every pending tile to the rack."""
        for p in reversed(self.pending):
            self.board.remove(p.row, p.col)
            self.player.rack.append(p.source)
        self.pending.clear()

    def preview(self) -> Preview:
        return preview(self.board, self._pending_cells(), self.dictionary)

    def submit(self) -> TurnResult:
        """Score and commit the pending tiles."""
        self._require_active()
        cells = self._pending_cells()
        validate_layout(self.board, cells)
        words = extract_words(self.board, cells)
        if not words:
            raise InvalidPlacement("No word was formed.")
        invalid = [w.text for w in words if not self.dictionary.is_valid(w.text)]
        if invalid:
            raise InvalidWords(invalid)

        breakdown = score_breakdown(self.board, cells)
        self.board.commit(cells)
        self.pending.clear()
        return self._finish_play(breakdown.total, [w.text for w in words], breakdown.summary())

    def play_word(self, word: str, row: int, col: int, direction: str) -> TurnResult:
        """Lay *word* from the current rack starting at (row, col), then submit.

        Blanks stand in for missing letters.  On any rejection the rack and
        board are restored and the error propagates.
        """
        self._require_active()
        if self.pending:
            raise GameStateError("Recall or submit the tiles already placed.")
        line, start = (row, col) if direction == H else (col, row)
        placements = attempt_placement(self.board, word, line, start, direction, self.player.rack)
        for p in placements:
            self.board.place(p.row, p.col, p.tile)
            _take_from_rack(self.player.rack, p.source)
            self.pending.append(p)
        try:
            return self.submit()
        except (InvalidPlacement, InvalidWords):
            self.recall()
            raise

    # other actions

    def pass_turn(self) -> TurnResult:
        self._require_active()
        if self.pending:
            raise GameStateError("Recall or submit the tiles already placed.")
        player = self.player
        self.consecutive_passes += 1
        log.info("%s passed (%d in a row).", player.name, self.consecutive_passes)
        result = TurnResult(player.name, "pass")
        if self.consecutive_passes >= MAX_CONSECUTIVE_PASSES:
            self._end_game()
        else:
            self._advance()
        return result

    def exchange(self, rack_indices: Iterable[int]) -> TurnResult:
        self._require_active()
        if self.pending:
            raise GameStateError("Recall the placed tiles first.")
        indices = sorted(set(rack_indices))
        if not indices:
            raise GameStateError("Select tiles to exchange.")
        return self._exchange([self.player.rack[i] for i in indices])

    def play_computer_turn(self, engine: MoveEngine) -> TurnResult:
        """Let the engine move for the current player.

        With no legal move the computer swaps the cheaper half of its rack,
        or passes when the bag is empty.
        """
        self._require_active()
        player = self.player
        move = engine.find_best_move(self.board, player.rack, self.profile or self.difficulty)
        if move is not None:
            return self.apply_move(move)

        if len(self.bag) == 0:
            return self.pass_turn()
        n = min(math.ceil(len(player.rack) / 2), len(self.bag))
        cheapest = sorted(player.rack, key=lambda t: t.points)[:n]
        return self._exchange(cheapest)

    def apply_move(self, move: Move) -> TurnResult:
        """Commit an engine move for the current player."""
        self._require_active()
        for p in move.placements:
            _take_from_rack(self.player.rack, p.source)
            self.board.place(p.row, p.col, p.tile)
        self.board.commit(move.new_cells)
        summary = f"{move.word} -- {move.score} p"
        return self._finish_play(move.score, [w.text for w in move.words], summary)

    # bookkeeping

    def _pending_cells(self) -> list[tuple[int, int]]:
        return [(p.row, p.col) for p in self.pending]

    def _require_active(self) -> None:
        if self.over:
            raise GameStateError("The game is over.")

    def _exchange(self, tiles: list[Tile]) -> TurnResult:
        player = self.player
        self.bag.exchange(player.rack, tiles)
        self.consecutive_passes = 0
        log.info("%s exchanged %d tiles.", player.name, len(tiles))
        self._advance()
        return TurnResult(player.name, "exchange", exchanged=len(tiles))

    def _finish_play(self, score: int, words: list[str], summary: str) -> TurnResult:
        player = self.player
        player.score += score
        self.consecutive_passes = 0
        self.bag.refill(player.rack)
        log.info("%s played %s for %d points.", player.name, ", ".join(words), score)
        result = TurnResult(player.name, "play", score=score, words=words, summary=summary)
        if not player.rack and len(self.bag) == 0:
            self._end_game()
        else:
            self._advance()
        return result

    def _advance(self) -> None:
        self.current = 1 - self.current

    def _end_game(self) -> None:
        self.over = True
        a, b = self.players
        left_a, left_b = rack_value(a.rack), rack_value(b.rack)
        if not a.rack:
            a.score += left_b
            b.score -= left_b
        elif not b.rack:
            b.score += left_a
            a.score -= left_a
        else:
            a.score -= left_a
            b.score -= left_b

        winner = self.winner
        if winner is not None:
            loser = b if winner is a else a
            winner.rating, loser.rating = update_ratings(winner.rating, loser.rating)
            log.info("Game over: %s wins %d-%d.", winner.name, a.score, b.score)
        else:
            log.info("Game over: draw %d-%d.", a.score, b.score)
