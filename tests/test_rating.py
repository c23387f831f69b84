import pathlib
import sys

import pytest

ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from sanakisa.difficulty import PROFILES, Difficulty, SearchProfile, resolve_profile
from sanakisa.rating import expected_score, update_ratings


def test_expected_score_is_symmetric():
    assert expected_score(1200, 1200) == pytest.approx(0.5)
    assert expected_score(1200, 1100) + expected_score(1100, 1200) == pytest.approx(1.0)


@pytest.mark.parametrize(
    "winner, loser, expected",
    [
        (1200, 1200, (1216, 1184)),
        (1200, 1100, (1212, 1088)),
        (1100, 1200, (1120, 1180)),
        (1000, 800, (1008, 800)),
    ],
)
def test_update_ratings(winner, loser, expected):
    assert update_ratings(winner, loser) == expected


def test_difficulty_profiles():
    assert PROFILES[Difficulty.EASY] == SearchProfile(0.8, ascending=True, pick_from_top=3)
    assert Difficulty.MEDIUM.profile.time_budget == 2.0
    assert Difficulty.HARD.profile.time_budget == 4.0
    assert not Difficulty.HARD.profile.ascending


def test_resolve_profile():
    custom = SearchProfile(0.1, ascending=False)
    assert resolve_profile(custom) is custom
    assert resolve_profile("Hard") is PROFILES[Difficulty.HARD]
    with pytest.raises(ValueError):
        resolve_profile("impossible")
