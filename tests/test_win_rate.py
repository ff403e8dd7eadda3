import pytest

from swissleague.utils.win_rate import (
    calculate_game_win_fraction,
    calculate_match_win_fraction,
    raw_win_fraction,
)


def test_all_draws_is_half():
    assert calculate_match_win_fraction(0, 0, 3) == 0.5


def test_empty_record_is_zero():
    assert calculate_match_win_fraction(0, 0, 0) == 0.0
    assert calculate_game_win_fraction(0, 0, 0) == 0.0


def test_draws_weighted_at_one_half():
    assert calculate_match_win_fraction(2, 1, 1) == pytest.approx(2.5 / 4)
    assert calculate_game_win_fraction(5, 3, 2) == pytest.approx(6 / 10)


def test_fraction_bounds_and_perfect_record():
    for wins in range(4):
        for losses in range(4):
            for draws in range(4):
                total = wins + losses + draws
                if total == 0:
                    continue
                value = calculate_match_win_fraction(wins, losses, draws)
                assert 0.0 <= value <= 1.0
                assert value == pytest.approx((wins + 0.5 * draws) / total)
                assert (value == 1.0) == (losses == 0 and draws == 0 and wins > 0)


def test_raw_fraction_ignores_draw_weighting():
    assert raw_win_fraction(1, 3) == pytest.approx(1 / 3)
    assert raw_win_fraction(0, 0) == 0.0
