"""Elo rating arithmetic.

Expected score follows the logistic curve

    E = 1 / (1 + 10 ** ((opponent - player) / 400))

and each side moves by ``K * (actual - expected)`` rounded to a whole
point.
"""

# Swiss League
# Copyright (C) 2025  Swiss League developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import math
from dataclasses import dataclass

from swissleague.constants import ACTUAL_SCORES, DEFAULT_K_FACTOR, ELO_SCALE
from swissleague.exceptions import InvalidProbabilityException
from swissleague.type_hints import MatchOutcome

# Rating changes are rounded to this many decimals before rounding to a
# whole point, so both sides of a match see the same magnitude.
_CHANGE_PRECISION = 9

_OPPOSITE_OUTCOME = {"win": "loss", "loss": "win", "draw": "draw"}


@dataclass(frozen=True)
class EloResult:
    """Outcome of one rating update, from the player's point of view."""

    player_rating: int
    opponent_rating: int
    player_new_rating: int
    opponent_new_rating: int
    rating_change: int
    opponent_rating_change: int
    expected_score: float
    expected_opponent_score: float


def get_expected_score(player_rating: float, opponent_rating: float) -> float:
    """Probability that the player beats the opponent.

    Example:
        >>> get_expected_score(1500, 1500)
        0.5
    """
    return 1 / (1 + 10 ** ((opponent_rating - player_rating) / ELO_SCALE))


def round_rating_change(change: float) -> int:
    """Round a rating change to a whole point, halves away from zero.

    ``round_rating_change(-x) == -round_rating_change(x)`` for every x, so
    two opposite changes always cancel.
    """
    magnitude = math.floor(abs(round(change, _CHANGE_PRECISION)) + 0.5)
    return int(math.copysign(magnitude, change)) if magnitude else 0


def calculate_elo(
    player_rating: int,
    opponent_rating: int,
    result: MatchOutcome,
    k_factor: float = DEFAULT_K_FACTOR,
) -> EloResult:
    """Update both ratings after one match.

    Each side uses its own expected and actual score. With the same
    ``k_factor`` for both, the two changes are exact negatives.

    Args:
        player_rating: Player's rating before the match
        opponent_rating: Opponent's rating before the match
        result: ``"win"``, ``"loss"`` or ``"draw"`` for the player
        k_factor: Maximum change per match

    Returns:
        EloResult with both new ratings

    Raises:
        ValueError: If ``result`` is not a known outcome
    """
    if result not in ACTUAL_SCORES:
        raise ValueError(f"Unknown match outcome: {result!r}")

    expected_player = get_expected_score(player_rating, opponent_rating)
    expected_opponent = get_expected_score(opponent_rating, player_rating)

    actual_player = ACTUAL_SCORES[result]
    actual_opponent = ACTUAL_SCORES[_OPPOSITE_OUTCOME[result]]

    player_change = round_rating_change(k_factor * (actual_player - expected_player))
    opponent_change = round_rating_change(
        k_factor * (actual_opponent - expected_opponent)
    )

    return EloResult(
        player_rating=player_rating,
        opponent_rating=opponent_rating,
        player_new_rating=player_rating + player_change,
        opponent_new_rating=opponent_rating + opponent_change,
        rating_change=player_change,
        opponent_rating_change=opponent_change,
        expected_score=expected_player,
        expected_opponent_score=expected_opponent,
    )


def get_rating_difference_for_win_probability(win_probability: float) -> float:
    """Rating gap that gives the stronger side ``win_probability``.

    Raises:
        InvalidProbabilityException: If the probability is not strictly
            between 0 and 1
    """
    if win_probability <= 0 or win_probability >= 1:
        raise InvalidProbabilityException(
            f"Win probability must be between 0 and 1 (exclusive), got {win_probability}"
        )
    return -ELO_SCALE * math.log10(1 / win_probability - 1)
