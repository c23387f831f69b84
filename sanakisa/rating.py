"""Elo rating update at the end of a game."""

from __future__ import annotations

import math

from sanakisa.constants import K_FACTOR, RATING_FLOOR, RATING_SCALE


def expected_score(rating: float, opponent: float) -> float:
    return 1 / (1 + 10 ** ((opponent - rating) / RATING_SCALE))


def update_ratings(winner: int, loser: int) -> tuple[int, int]:
    """New (winner, loser) ratings.  Neither drops below RATING_FLOOR."""
    delta = math.floor(K_FACTOR * (1 - expected_score(winner, loser)) + 0.5)  # half rounds up
    return max(RATING_FLOOR, winner + delta), max(RATING_FLOOR, loser - delta)
