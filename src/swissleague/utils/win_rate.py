"""Win-rate arithmetic.

Match and game win fractions where a draw counts as half a win.
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

from swissleague.constants import DRAW_WEIGHT


def _weighted_fraction(wins: int, losses: int, draws: int) -> float:
    total = wins + losses + draws
    if total == 0:
        return 0.0
    return (wins + DRAW_WEIGHT * draws) / total


def calculate_match_win_fraction(wins: int, losses: int, draws: int) -> float:
    """Calculate match win percentage as a fraction.

    Formula: (wins + 0.5 * draws) / (wins + losses + draws)

    Args:
        wins: Matches won (byes included)
        losses: Matches lost
        draws: Matches drawn

    Returns:
        Value in [0, 1]; 0.0 when no matches were played
    """
    return _weighted_fraction(wins, losses, draws)


def calculate_game_win_fraction(wins: int, losses: int, draws: int) -> float:
    """Calculate game win percentage as a fraction.

    Same formula as :func:`calculate_match_win_fraction`, applied to games.
    """
    return _weighted_fraction(wins, losses, draws)


def raw_win_fraction(wins: int, total: int) -> float:
    """Plain wins / total without draw weighting, 0.0 for an empty total.

    Used for the opponent percentages inside the Swiss tiebreakers.
    """
    if total == 0:
        return 0.0
    return wins / total
