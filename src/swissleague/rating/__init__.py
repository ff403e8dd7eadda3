"""Elo ratings replayed over a whole series."""

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

from swissleague.rating.elo import (
    EloResult,
    calculate_elo,
    get_expected_score,
    get_rating_difference_for_win_probability,
    round_rating_change,
)
from swissleague.rating.leaderboard import LeaderboardRow, build_rating_leaderboard
from swissleague.rating.models import Rating, RatingHistoryEntry
from swissleague.rating.replay import (
    RatedMatch,
    RatingReplay,
    collect_rated_matches,
    determine_match_result,
    extract_participants,
    replay_ratings,
)

__all__ = [
    "EloResult",
    "LeaderboardRow",
    "RatedMatch",
    "Rating",
    "RatingHistoryEntry",
    "RatingReplay",
    "build_rating_leaderboard",
    "calculate_elo",
    "collect_rated_matches",
    "determine_match_result",
    "extract_participants",
    "get_expected_score",
    "get_rating_difference_for_win_probability",
    "replay_ratings",
    "round_rating_change",
]
