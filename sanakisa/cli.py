"""Terminal game against the computer."""

from __future__ import annotations

import random
import time

from sanakisa.dictionary import Dictionary
from sanakisa.difficulty import Difficulty, SearchProfile
from sanakisa.engine import MoveEngine
from sanakisa.errors import GameStateError, InvalidPlacement, InvalidWords, PlacementRejected
from sanakisa.game import Game, TurnResult
from sanakisa.tile import Tile

HELP = """\
Commands:
  ROW COL WORD H|V      -- play a word       (e.g. 7 5 KISSA H)
  pass                  -- skip your turn
  swap LETTERS          -- exchange tiles    (e.g. swap KÖ?)
  hint                  -- ask the engine for a move
  show                  -- print the board
  quit                  -- leave the game
"""


def _rack_str(rack: list[Tile]) -> str:
    return " ".join(f"{t.letter}{t.points}" for t in rack)


def _print_status(game: Game) -> None:
    print()
    print(game.board)
    print()
    for p in game.players:
        marker = ">" if p is game.player and not game.over else " "
        print(f" {marker} {p.name:<22} {p.score:>4} p   (rating {p.rating})")
    print(f"   Tiles in bag: {len(game.bag)}   on board: {game.board.count_tiles()}")


def _print_turn(result: TurnResult) -> None:
    if result.kind == "play":
        print(f"  {result.player}: {result.summary} -- {result.score} p")
    elif result.kind == "exchange":
        print(f"  {result.player} exchanged {result.exchanged} tiles.")
    else:
        print(f"  {result.player} passed.")


def _letters_to_indices(rack: list[Tile], letters: str) -> list[int]:
    chosen: list[int] = []
    for ch in letters.upper():
        for i, tile in enumerate(rack):
            if i not in chosen and tile.letter == ch:
                chosen.append(i)
                break
        else:
            raise GameStateError(f"No {ch} on your rack.")
    return chosen


def _human_turn(game: Game, engine: MoveEngine) -> bool:
    """Read commands until the human has moved.  False means quit."""
    while True:
        print(f"\n  Your rack: {_rack_str(game.player.rack)}")
        try:
            inp = input("  move> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            return False

        cmd = inp.lower()
        parts = inp.split()
        try:
            if cmd in ("quit", "exit"):
                return False
            if cmd in ("help", "?"):
                print(HELP)
                continue
            if cmd == "show":
                _print_status(game)
                continue
            if cmd == "hint":
                move = engine.find_best_move(game.board, game.player.rack, Difficulty.HARD)
                print(f"  Try {move!r}" if move else "  No move found. Consider swapping.")
                continue
            if cmd == "pass":
                _print_turn(game.pass_turn())
                return True
            if parts and parts[0].lower() == "swap" and len(parts) == 2:
                indices = _letters_to_indices(game.player.rack, parts[1])
                _print_turn(game.exchange(indices))
                return True
            if len(parts) == 4:
                r, c = int(parts[0]), int(parts[1])
                word, d = parts[2].upper(), parts[3].upper()
                if d not in ("H", "V"):
                    print("  Direction must be H or V.")
                    continue
                _print_turn(game.play_word(word, r, c, d))
                return True
            print("  Unknown command. Type 'help' for the list.")
        except ValueError:
            print("  Invalid.  ROW COL WORD H|V")
        except InvalidWords as exc:
            print(f"  Not in the dictionary: {', '.join(exc.words)}")
        except (InvalidPlacement, PlacementRejected, GameStateError) as exc:
            print(f"  {exc}")


def run_cli(
    dictionary: Dictionary,
    difficulty: Difficulty = Difficulty.EASY,
    seed: int | None = None,
    profile: SearchProfile | None = None,
) -> Game:
    """Play one game in the terminal."""
    game = Game.new(dictionary, difficulty=difficulty, seed=seed, profile=profile)
    engine = MoveEngine(dictionary, rng=random.Random(seed))

    print("\n" + "=" * 60)
    print("  SANAKISA -- word game against the computer")
    print("=" * 60)
    print(HELP)
    _print_status(game)

    while not game.over:
        if game.player.is_human:
            if not _human_turn(game, engine):
                print("  Bye!")
                return game
        else:
            print("\n  Computer is thinking...")
            t0 = time.time()
            result = game.play_computer_turn(engine)
            elapsed = time.time() - t0
            _print_turn(result)
            print(f"  ({elapsed:.2f}s)")
        _print_status(game)

    winner = game.winner
    a, b = game.players
    print("\n" + "=" * 60)
    if winner is None:
        print(f"  Game over! Draw {a.score}-{b.score}.")
    else:
        print(f"  Game over! {winner.name} wins {a.score}-{b.score}.")
    print("=" * 60)
    return game
