"""Data models for replayed ratings."""

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

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from swissleague.constants import DEFAULT_STARTING_RATING
from swissleague.type_hints import ResultCode


@dataclass(frozen=True)
class RatingHistoryEntry:
    """One rated match from one participant's point of view.

    Attributes
    ----------
    event_id : str
        Event the match belongs to.
    event_date : str or None
        ISO date of the event, None when the event is undated.
    round_number : int
        Round within the event.
    opponent : str
        Opponent's username.
    result : str
        ``"W"``, ``"L"`` or ``"D"``.
    rating_before, rating_after : int
        Rating either side of the match.
    rating_change : int
        ``rating_after - rating_before``.
    """

    event_id: str
    event_date: Optional[str]
    round_number: int
    opponent: str
    result: ResultCode
    rating_before: int
    rating_after: int
    rating_change: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "event_id": self.event_id,
            "event_date": self.event_date,
            "round_number": self.round_number,
            "opponent": self.opponent,
            "result": self.result,
            "rating_before": self.rating_before,
            "rating_after": self.rating_after,
            "rating_change": self.rating_change,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RatingHistoryEntry":
        return cls(
            event_id=str(data["event_id"]),
            event_date=data.get("event_date"),
            round_number=int(data["round_number"]),
            opponent=data["opponent"],
            result=data["result"],
            rating_before=int(data["rating_before"]),
            rating_after=int(data["rating_after"]),
            rating_change=int(data["rating_change"]),
        )


@dataclass
class Rating:
    """A participant's replayed rating.

    ``history`` is a contiguous chain: each entry's ``rating_after`` is the
    next entry's ``rating_before``.
    """

    username: str
    display_name: str = ""
    starting_rating: int = DEFAULT_STARTING_RATING
    history: List[RatingHistoryEntry] = field(default_factory=list)

    @property
    def current_rating(self) -> int:
        if not self.history:
            return self.starting_rating
        return self.history[-1].rating_after

    @property
    def peak_rating(self) -> int:
        """Highest rating ever held, the starting rating included."""
        return max([self.starting_rating] + [e.rating_after for e in self.history])

    @property
    def matches_played(self) -> int:
        return len(self.history)

    @property
    def is_at_peak(self) -> bool:
        return self.current_rating == self.peak_rating

    def record(self, entry: RatingHistoryEntry) -> None:
        self.history.append(entry)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize rating to dictionary."""
        return {
            "username": self.username,
            "display_name": self.display_name,
            "starting_rating": self.starting_rating,
            "current_rating": self.current_rating,
            "peak_rating": self.peak_rating,
            "matches_played": self.matches_played,
            "history": [e.to_dict() for e in self.history],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Rating":
        return cls(
            username=data["username"],
            display_name=data.get("display_name", ""),
            starting_rating=int(data.get("starting_rating", DEFAULT_STARTING_RATING)),
            history=[RatingHistoryEntry.from_dict(e) for e in data.get("history", [])],
        )
