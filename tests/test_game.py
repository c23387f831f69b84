import pathlib
import random
import sys

import pytest

ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from sanakisa.bag import TileBag
from sanakisa.dictionary import Dictionary
from sanakisa.difficulty import Difficulty
from sanakisa.engine import MoveEngine
from sanakisa.errors import GameStateError, InvalidPlacement, InvalidWords
from sanakisa.game import Game, Player
from sanakisa.tile import make_rack

WORDS = ["KISSA", "SIKA", "EN", "NO"]


def make_game(human="KISSAEN", computer="TALOSSA", bag="TTTTTTTTTT", words=WORDS):
    players = [
        Player("Ann", rack=make_rack(human)),
        Player("Computer (easy)", rating=1100, is_human=False, rack=make_rack(computer)),
    ]
    return Game(Dictionary.from_words(words), players, TileBag(random.Random(1), make_rack(bag)))


def test_new_game_deals_both_racks():
    game = Game.new(Dictionary.from_words(WORDS), Difficulty.MEDIUM, seed=5)
    human, computer = game.players
    assert len(human.rack) == 7 and len(computer.rack) == 7
    assert len(game.bag) == 102 - 14
    assert computer.name == "Computer (medium)" and computer.rating == 1100
    assert human.rating == 1200 and human.is_human and not computer.is_human

    again = Game.new(Dictionary.from_words(WORDS), Difficulty.MEDIUM, seed=5)
    assert [t.letter for t in again.players[0].rack] == [t.letter for t in human.rack]


def test_play_word_scores_and_refills():
    game = make_game()
    result = game.play_word("KISSA", 7, 3, "H")
    assert result.kind == "play" and result.score == 7 and result.words == ["KISSA"]
    ann = game.players[0]
    assert ann.score == 7
    assert len(ann.rack) == 7 and len(game.bag) == 5
    assert all(game.board.is_fixed(7, c) for c in range(3, 8))
    assert game.current == 1


def test_rejected_word_restores_rack_and_board():
    game = make_game()
    rack_before = list(game.player.rack)
    with pytest.raises(InvalidWords) as info:
        game.play_word("SANK", 7, 5, "H")
    assert info.value.words == ["SANK"]
    assert game.board.count_tiles() == 0
    assert sorted(map(id, game.player.rack)) == sorted(map(id, rack_before))
    assert game.current == 0 and not game.pending


def test_opening_must_cover_center():
    game = make_game()
    with pytest.raises(InvalidPlacement):
        game.play_word("KISSA", 0, 0, "H")
    assert game.board.count_tiles() == 0
    assert len(game.player.rack) == 7


def test_second_word_must_connect():
    game = make_game(computer="SIKANTT")
    game.play_word("KISSA", 7, 3, "H")
    with pytest.raises(InvalidPlacement):
        game.play_word("SIKA", 0, 0, "H")
    result = game.play_word("SIKA", 7, 5, "V")
    assert result.score == 1 + 1 + 3 + 1


def test_place_preview_and_submit():
    game = make_game()
    game.place(5, 7, 7)          # E
    game.place(5, 7, 8)          # N
    p = game.preview()
    assert p.ok and p.score == 2
    assert [w.text for w in p.words] == ["EN"]
    result = game.submit()
    assert result.score == 2
    assert game.board.is_fixed(7, 8)


def test_preview_reports_layout_and_word_problems():
    game = make_game()
    game.place(5, 7, 7)
    game.place(5, 7, 9)
    assert "unbroken" in game.preview().error
    game.recall()
    assert game.board.count_tiles() == 0 and len(game.player.rack) == 7

    game.place(0, 7, 7)          # K
    game.place(0, 7, 8)          # I
    p = game.preview()
    assert not p.ok and [w.text for w in p.invalid] == ["KI"] and p.score is None
    with pytest.raises(InvalidWords):
        game.submit()


def test_blank_needs_a_letter():
    game = make_game(human="KISSA?N")
    with pytest.raises(InvalidPlacement):
        game.place(5, 7, 7)
    game.place(5, 7, 7, "e")
    game.place(5, 7, 8)
    assert game.preview().score == 0 + 1
    assert game.board.letter_at(7, 7) == "E"


@pytest.mark.parametrize("letter", ["7x", "xy", "7", "-"])
def test_blank_letter_must_be_one_alphabet_letter(letter):
    game = make_game(human="?A")
    with pytest.raises(InvalidPlacement):
        game.place(0, 7, 7, letter)
    assert game.board.count_tiles() == 0 and len(game.player.rack) == 2


def test_blank_accepts_finnish_letters():
    game = make_game(human="?A")
    game.place(0, 7, 7, "ö")
    game.place(0, 7, 8)
    assert [w.text for w in game.preview().words] == ["ÖA"]


def test_place_rejects_unknown_rack_index():
    game = make_game()
    with pytest.raises(InvalidPlacement):
        game.place(7, 7, 7)
    with pytest.raises(InvalidPlacement):
        game.place(-1, 7, 7)
    assert game.board.count_tiles() == 0


def test_place_only_on_human_turn():
    game = make_game()
    game.pass_turn()
    with pytest.raises(GameStateError):
        game.place(0, 7, 7)
    assert len(game.players[1].rack) == 7


def test_four_passes_end_the_game():
    game = make_game(computer="TA")
    for _ in range(4):
        game.pass_turn()
    assert game.over
    ann, computer = game.players
    assert ann.score == -9 and computer.score == -2
    assert game.winner is computer
    assert (computer.rating, ann.rating) == (1120, 1180)
    with pytest.raises(GameStateError):
        game.pass_turn()


def test_going_out_collects_opponent_rack():
    game = make_game(human="KISSA", computer="TT", bag="")
    game.play_word("KISSA", 7, 3, "H")
    assert game.over
    ann, computer = game.players
    assert ann.score == 7 + 2 and computer.score == -2
    assert (ann.rating, computer.rating) == (1212, 1088)


def test_exchange_keeps_counts_and_resets_passes():
    game = make_game()
    game.pass_turn()
    kept = game.player.rack[2:]
    result = game.exchange([0, 1])
    assert result.kind == "exchange" and result.exchanged == 2
    computer = game.players[1]
    assert len(computer.rack) == 7 and len(game.bag) == 10
    assert all(any(t is k for t in computer.rack) for k in kept)
    assert game.consecutive_passes == 0 and game.current == 0


def test_exchange_needs_tiles_in_bag():
    game = make_game(bag="")
    with pytest.raises(GameStateError):
        game.exchange([0])


def test_computer_plays_opening():
    game = make_game(computer="KISSATT")
    game.pass_turn()
    result = game.play_computer_turn(MoveEngine(game.dictionary, rng=random.Random(3)))
    assert result.kind == "play" and result.score == 7
    assert game.board.is_fixed(7, 7)
    computer = game.players[1]
    assert computer.score == 7 and len(computer.rack) == 7
    assert game.consecutive_passes == 0 and game.current == 0


def test_stuck_computer_swaps_cheapest_half():
    game = make_game(computer="CWDÖ")
    game.pass_turn()
    computer = game.players[1]
    c, w = computer.rack[0], computer.rack[1]
    result = game.play_computer_turn(MoveEngine(game.dictionary, rng=random.Random(3)))
    assert result.kind == "exchange" and result.exchanged == 2
    assert any(t is c for t in computer.rack) and any(t is w for t in computer.rack)
    assert len(computer.rack) == 7 and len(game.bag) == 7


def test_stuck_computer_passes_on_empty_bag():
    game = make_game(computer="CWDÖ", bag="")
    game.pass_turn()
    result = game.play_computer_turn(MoveEngine(game.dictionary))
    assert result.kind == "pass"
    assert game.consecutive_passes == 2
