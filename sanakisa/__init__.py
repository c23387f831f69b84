"""Sanakisa -- Finnish word-placement game with a computer opponent."""

from sanakisa.constants import BINGO_BONUS, BOARD_SIZE, BONUS_GRID, CENTER, RACK_SIZE, TILE_VALUES
from sanakisa.tile import BlankTile, LetterTile, make_rack, make_tile
from sanakisa.board import Board
from sanakisa.dictionary import Dictionary
from sanakisa.words import Word, word_through
from sanakisa.move import Move, Placement
from sanakisa.scoring import score, score_breakdown
from sanakisa.difficulty import Difficulty, SearchProfile
from sanakisa.engine import MoveEngine, SearchOutcome, SearchResult, find_best_move
from sanakisa.bag import TileBag, TILE_BAG_DEFINITION
from sanakisa.game import Game, Player

__all__ = [
    "BINGO_BONUS",
    "BOARD_SIZE",
    "BONUS_GRID",
    "CENTER",
    "RACK_SIZE",
    "TILE_BAG_DEFINITION",
    "TILE_VALUES",
    "BlankTile",
    "Board",
    "Dictionary",
    "Difficulty",
    "Game",
    "LetterTile",
    "Move",
    "MoveEngine",
    "Placement",
    "Player",
    "SearchOutcome",
    "SearchProfile",
    "SearchResult",
    "TileBag",
    "Word",
    "find_best_move",
    "make_rack",
    "make_tile",
    "score",
    "score_breakdown",
    "word_through",
]
