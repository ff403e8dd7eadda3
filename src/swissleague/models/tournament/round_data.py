"""Data model for tournament round."""

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
from typing import Any, Dict, List, Mapping, Optional, Sequence

from swissleague.exceptions import EmptyInputException, InvalidMatchException
from swissleague.models.tournament.match import Match, sort_matches


@dataclass
class Round:
    """All matches played in one round of one event.

    Attributes
    ----------
    number : int
        Round number (1-indexed).
    matches : list of Match
        Matches in display order (regular by table, byes last).
    """

    number: int
    matches: List[Match] = field(default_factory=list)

    @classmethod
    def from_records(
        cls, records: Sequence[Mapping[str, Any]], event_id: Optional[str] = None
    ) -> "Round":
        """Build a round from the platform's match records for that round.

        Raises
        ------
        EmptyInputException
            If ``records`` is empty.
        InvalidMatchException
            If the records span more than one round number.
        """
        if not records:
            raise EmptyInputException("Cannot create a round from an empty match list")

        matches = [Match.from_record(r, event_id=event_id) for r in records]
        return cls.from_matches(matches)

    @classmethod
    def from_matches(cls, matches: Sequence[Match]) -> "Round":
        if not matches:
            raise EmptyInputException("Cannot create a round from an empty match list")

        number = matches[0].round_number
        numbers = {m.round_number for m in matches}
        if len(numbers) > 1:
            raise InvalidMatchException(
                "All matches must be from the same round; found rounds "
                + ", ".join(str(n) for n in sorted(numbers))
            )
        return cls(number=number, matches=sort_matches(list(matches)))

    @property
    def regular_matches(self) -> List[Match]:
        return [m for m in self.matches if m.is_regular]

    @property
    def bye_matches(self) -> List[Match]:
        return [m for m in self.matches if m.is_bye]

    @property
    def match_count(self) -> int:
        return len(self.matches)

    @property
    def regular_match_count(self) -> int:
        return len(self.regular_matches)

    @property
    def bye_count(self) -> int:
        return len(self.bye_matches)

    @property
    def is_complete(self) -> bool:
        return all(m.is_complete for m in self.matches)

    @property
    def display_label(self) -> str:
        return f"Round {self.number}"

    def to_dict(self) -> Dict[str, Any]:
        """Serialize round data to dictionary."""
        return {
            "number": self.number,
            "label": self.display_label,
            "matches": [m.to_dict() for m in self.matches],
        }
