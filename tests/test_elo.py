import pytest

from swissleague.exceptions import InvalidProbabilityException
from swissleague.rating import (
    calculate_elo,
    get_expected_score,
    get_rating_difference_for_win_probability,
    round_rating_change,
)


def test_expected_score_equal_ratings():
    assert get_expected_score(1500, 1500) == pytest.approx(0.5)


def test_expected_scores_sum_to_one():
    assert get_expected_score(1620, 1480) + get_expected_score(1480, 1620) == pytest.approx(1.0)


def test_equal_ratings_win():
    result = calculate_elo(1500, 1500, "win")
    assert result.player_new_rating == 1516
    assert result.opponent_new_rating == 1484
    assert result.rating_change == 16
    assert result.opponent_rating_change == -16


def test_equal_ratings_draw_changes_nothing():
    result = calculate_elo(1500, 1500, "draw")
    assert result.rating_change == 0
    assert result.opponent_rating_change == 0
    assert result.player_new_rating == 1500


def test_favourite_wins():
    result = calculate_elo(1600, 1400, "win")
    assert result.rating_change == 8
    assert result.opponent_rating_change == -8


def test_underdog_wins():
    result = calculate_elo(1400, 1600, "win")
    assert result.rating_change == 24
    assert result.opponent_new_rating == 1576


def test_loss_mirrors_win():
    win = calculate_elo(1550, 1490, "win")
    loss = calculate_elo(1490, 1550, "loss")
    assert loss.rating_change == win.opponent_rating_change
    assert loss.opponent_rating_change == win.rating_change


def test_custom_k_factor():
    assert calculate_elo(1500, 1500, "win", k_factor=16).rating_change == 8


@pytest.mark.parametrize("player", [1200, 1387, 1500, 1513, 1777, 2100])
@pytest.mark.parametrize("opponent", [1250, 1499, 1500, 1650, 1900])
@pytest.mark.parametrize("outcome", ["win", "loss", "draw"])
def test_changes_are_zero_sum(player, opponent, outcome):
    result = calculate_elo(player, opponent, outcome)
    assert result.rating_change + result.opponent_rating_change == 0


def test_unknown_outcome_is_rejected():
    with pytest.raises(ValueError):
        calculate_elo(1500, 1500, "forfeit")


@pytest.mark.parametrize(
    "change, expected",
    [(0.5, 1), (-0.5, -1), (1.49, 1), (-1.49, -1), (7.69, 8), (0.0, 0), (-0.2, 0)],
)
def test_round_rating_change(change, expected):
    assert round_rating_change(change) == expected


def test_rating_difference_for_probability():
    assert get_rating_difference_for_win_probability(0.75) == pytest.approx(190.85, abs=0.01)
    assert get_rating_difference_for_win_probability(0.5) == pytest.approx(0.0)
    assert get_rating_difference_for_win_probability(0.25) == pytest.approx(-190.85, abs=0.01)


@pytest.mark.parametrize("probability", [0, 1, -0.1, 1.5])
def test_rating_difference_rejects_bad_probability(probability):
    with pytest.raises(InvalidProbabilityException):
        get_rating_difference_for_win_probability(probability)
