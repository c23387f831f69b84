import pathlib
import sys

import pytest

ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from sanakisa.board import Board
from sanakisa.errors import CellOccupied, DuplicateTile
from sanakisa.move import Placement
from sanakisa.tile import BlankTile, LetterTile, make_tile


def board_with(word, row, col, direction="H"):
    rows = [["."] * 15 for _ in range(15)]
    for i, ch in enumerate(word):
        r, c = (row, col + i) if direction == "H" else (row + i, col)
        rows[r][c] = ch
    return Board.from_rows("".join(r) for r in rows)


def snapshot(board):
    return [[id(t) if t is not None else None for t in row] for row in board.cells]


def test_from_rows_parses_letters_and_blanks():
    board = board_with("KIsSA", 7, 3)
    k = board.get(7, 3)
    assert isinstance(k, LetterTile) and k.letter == "K" and k.points == 3 and k.fixed
    blank = board.get(7, 5)
    assert isinstance(blank, BlankTile)
    assert blank.face == "S" and blank.points == 0 and blank.fixed
    assert board.letter_at(7, 7) == "A"
    assert board.count_tiles() == 5
    assert board.has_fixed_tiles()


def test_from_rows_rejects_wrong_shape():
    with pytest.raises(ValueError):
        Board.from_rows(["." * 15] * 14)
    with pytest.raises(ValueError):
        Board.from_rows(["." * 14] * 15)


def test_premiums_and_center():
    assert Board.premium_at(7, 7) is None
    assert Board.is_center(7, 7)
    assert Board.premium_at(0, 2) == "TW"
    assert Board.premium_at(1, 4) == "DW"
    assert Board.premium_at(2, 5) == "TL"
    assert Board.premium_at(0, 0) == "DL"
    assert Board.premium_at(7, 3) is None


def test_off_board_reads_as_empty():
    board = Board()
    assert board.get(-1, 0) is None
    assert board.is_empty(15, 3)
    assert not board.is_fixed(0, 15)


def test_place_refuses_occupied_cell():
    board = Board()
    board.place(7, 7, make_tile("A"))
    with pytest.raises(CellOccupied):
        board.place(7, 7, make_tile("B"))


def test_trial_restores_board_after_block():
    board = board_with("KISSA", 7, 3)
    before = snapshot(board)
    t = make_tile("T")
    with board.trial([Placement(8, 3, t.placed(), t)]):
        assert board.letter_at(8, 3) == "T"
        assert not board.is_fixed(8, 3)
    assert snapshot(board) == before


def test_trial_restores_board_when_block_raises():
    board = Board()
    t = make_tile("T")
    with pytest.raises(RuntimeError):
        with board.trial([Placement(7, 7, t.placed(), t)]):
            raise RuntimeError("boom")
    assert board.count_tiles() == 0


def test_trial_restores_partial_placement():
    board = board_with("A", 7, 8)
    t, u = make_tile("T"), make_tile("U")
    placements = [Placement(7, 7, t.placed(), t), Placement(7, 8, u.placed(), u)]
    with pytest.raises(CellOccupied):
        with board.trial(placements):
            pass
    assert board.is_empty(7, 7)
    assert board.letter_at(7, 8) == "A"


def test_commit_fixes_pending_tiles():
    board = Board()
    board.place(7, 7, make_tile("A").placed())
    assert board.pending_cells() == [(7, 7)]
    board.commit([(7, 7)])
    assert board.pending_cells() == []
    assert board.is_fixed(7, 7)


def test_same_tile_twice_is_detected():
    board = Board()
    tile = make_tile("A")
    board.place(7, 7, tile)
    board.place(7, 8, tile)
    with pytest.raises(DuplicateTile):
        board.check_integrity()

