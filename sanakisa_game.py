#!/usr/bin/env python3
"""
Sanakisa

A Finnish word-placement board game played in the terminal against a
computer opponent with three difficulty levels.

Needs a word list (one word per line, UTF-8), e.g. saved as words.txt.
Without one a tiny built-in list is used.
"""

from __future__ import annotations

import argparse
import logging

from sanakisa.cli import run_cli
from sanakisa.dictionary import Dictionary
from sanakisa.difficulty import Difficulty, SearchProfile, resolve_profile

# Logging setup

logging.basicConfig(
    level=logging.INFO,
    format="[%(levelname)s] %(message)s",
)
log = logging.getLogger("sanakisa")


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Sanakisa -- play a Finnish word game against the computer",
    )
    parser.add_argument("--dict", type=str, default=None,
                        help="Path to dictionary / word list file")
    parser.add_argument("--difficulty", choices=[d.value for d in Difficulty], default="easy",
                        help="Computer opponent strength")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for the tile bag and the computer's choices")
    parser.add_argument("--time-budget", type=float, default=None,
                        help="Override the computer's thinking time in seconds")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    args = parser.parse_args()

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    difficulty = Difficulty(args.difficulty)
    profile = None
    if args.time_budget is not None:
        base = resolve_profile(difficulty)
        profile = SearchProfile(args.time_budget, base.ascending, base.pick_from_top)
        log.info("Computer thinking time set to %.1fs", args.time_budget)

    dictionary = Dictionary(args.dict)
    run_cli(dictionary, difficulty=difficulty, seed=args.seed, profile=profile)


if __name__ == "__main__":
    main()
