"""Computer opponent difficulty tiers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class SearchProfile:
    time_budget: float    # seconds of wall clock for enumeration
    ascending: bool       # try short words first
    pick_from_top: int = 1  # 1 = best move; n > 1 = random among the n best


class Difficulty(Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @property
    def profile(self) -> SearchProfile:
        return PROFILES[self]


PROFILES: dict[Difficulty, SearchProfile] = {
    Difficulty.EASY: SearchProfile(time_budget=0.8, ascending=True, pick_from_top=3),
    Difficulty.MEDIUM: SearchProfile(time_budget=2.0, ascending=False),
    Difficulty.HARD: SearchProfile(time_budget=4.0, ascending=False),
}


def resolve_profile(difficulty: Difficulty | SearchProfile | str) -> SearchProfile:
    if isinstance(difficulty, SearchProfile):
        return difficulty
    if isinstance(difficulty, str):
        difficulty = Difficulty(difficulty.lower())
    return difficulty.profile
