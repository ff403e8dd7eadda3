"""Rating leaderboard."""

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

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional

from swissleague.rating.models import Rating


@dataclass
class LeaderboardRow:
    rank: int
    rating: Rating

    @property
    def at_peak(self) -> bool:
        return self.rating.is_at_peak

    def to_dict(self) -> Dict[str, Any]:
        return {
            "rank": self.rank,
            "username": self.rating.username,
            "display_name": self.rating.display_name,
            "current_rating": self.rating.current_rating,
            "peak_rating": self.rating.peak_rating,
            "matches_played": self.rating.matches_played,
            "at_peak": self.at_peak,
        }


def build_rating_leaderboard(
    ratings: Mapping[str, Rating], top_n: Optional[int] = None
) -> List[LeaderboardRow]:
    """Participants by current rating, highest first, ties by username.

    Args:
        ratings: Output of :func:`swissleague.rating.replay.replay_ratings`
        top_n: Keep only the first ``top_n`` rows when given

    Returns:
        Ranked rows
    """
    ordered = sorted(ratings.values(), key=lambda r: (-r.current_rating, r.username))
    if top_n is not None:
        ordered = ordered[: max(top_n, 0)]
    return [LeaderboardRow(rank=i, rating=r) for i, r in enumerate(ordered, start=1)]
