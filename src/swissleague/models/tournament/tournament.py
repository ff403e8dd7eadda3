"""Data model for one event of the series."""

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
from datetime import datetime, timezone
from typing import Any, Dict, Iterator, List, Mapping, Optional, Sequence

from swissleague.exceptions import InvalidMatchException
from swissleague.models.tournament.match import Match
from swissleague.models.tournament.round_data import Round
from swissleague.models.tournament.standing import (
    Standing,
    get_celebration_winners,
    get_trophy_winners,
)
from swissleague.utils.dates import format_long_date, parse_timestamp

# Undated events order after every dated one
UNDATED = datetime.max.replace(tzinfo=timezone.utc)


@dataclass
class Event:
    """A single event: its rounds, its date and its recorded final standings.

    An event is materialized once from raw records and rebuilt from scratch
    whenever its source data changes.

    Attributes
    ----------
    event_id : str
        Platform event id, always a string.
    name : str
        Display name.
    date : datetime or None
        Earliest match timestamp, or None when the event is undated.
    rounds : list of Round
        Rounds in ascending round-number order.
    final_standings : list of Standing
        Standings as published by the platform after the last round.
    """

    event_id: str
    name: str
    date: Optional[datetime] = None
    rounds: List[Round] = field(default_factory=list)
    final_standings: List[Standing] = field(default_factory=list)

    @classmethod
    def from_records(
        cls,
        event_id: Any,
        round_records: Sequence[Sequence[Mapping[str, Any]]],
        standing_records: Sequence[Mapping[str, Any]] = (),
        name: Optional[str] = None,
    ) -> "Event":
        """Build an event from per-round match records and final standings.

        Args:
            event_id: Platform event id (normalized to str)
            round_records: One list of match records per round; empty lists
                are ignored
            standing_records: The last published standings rows
            name: Display name; defaults to the standings' ``PhaseName``

        Raises:
            InvalidMatchException: If two record lists share a round number
        """
        event_id = str(event_id)
        rounds = [
            Round.from_records(records, event_id=event_id)
            for records in round_records
            if records
        ]
        rounds.sort(key=lambda r: r.number)
        numbers = [r.number for r in rounds]
        if len(set(numbers)) != len(numbers):
            raise InvalidMatchException(
                f"Event {event_id} has more than one match list for the same round"
            )

        standings = [Standing.from_record(r) for r in standing_records]

        date = _earliest_timestamp(m.timestamp for r in rounds for m in r.matches)
        if date is None and standing_records:
            date = parse_timestamp(standing_records[0].get("DateCreated"))

        if name is None and standing_records:
            name = standing_records[0].get("PhaseName")

        return cls(
            event_id=event_id,
            name=name or f"Tournament {event_id}",
            date=date,
            rounds=rounds,
            final_standings=standings,
        )

    @property
    def date_display(self) -> str:
        """Long-form date, e.g. ``"January 15, 2025"``."""
        return format_long_date(self.date.date() if self.date else None)

    @property
    def sort_date(self) -> datetime:
        """Date used for chronological ordering."""
        return self.date if self.date is not None else UNDATED

    @property
    def round_count(self) -> int:
        return len(self.rounds)

    def get_round(self, round_number: int) -> Optional[Round]:
        for round_ in self.rounds:
            if round_.number == round_number:
                return round_
        return None

    def iter_matches(self) -> Iterator[Match]:
        """All matches, round by round, in display order within a round."""
        for round_ in self.rounds:
            yield from round_.matches

    @property
    def players(self) -> List[str]:
        """Usernames of everyone who played, in order of first appearance."""
        seen: Dict[str, None] = {}
        for standing in self.final_standings:
            seen.setdefault(standing.identity, None)
        for match in self.iter_matches():
            for identity in match.identities:
                seen.setdefault(identity, None)
        return list(seen)

    def find_standing(self, username: str) -> Optional[Standing]:
        """Recorded standing for ``username`` (case-insensitive)."""
        for standing in self.final_standings:
            if standing.participant.matches(username):
                return standing
        return None

    @property
    def trophy_winners(self) -> List[Standing]:
        return get_trophy_winners(self.final_standings)

    @property
    def trophy_count(self) -> int:
        return len(self.trophy_winners)

    @property
    def has_trophy_winners(self) -> bool:
        return self.trophy_count > 0

    @property
    def celebration_winners(self) -> List[Standing]:
        return get_celebration_winners(self.final_standings)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize event summary to dictionary."""
        return {
            "event_id": self.event_id,
            "name": self.name,
            "date": self.date.isoformat() if self.date else None,
            "date_display": self.date_display,
            "round_count": self.round_count,
            "rounds": [r.to_dict() for r in self.rounds],
        }


def _earliest_timestamp(timestamps) -> Optional[datetime]:
    present = [t for t in timestamps if t is not None]
    return min(present) if present else None


def sort_events_by_date(events: Sequence[Event], newest_first: bool = False) -> List[Event]:
    """Order events by date, ties broken by event id.

    Undated events always come last.
    """
    dated = sorted((e for e in events if e.date is not None), key=lambda e: (e.date, e.event_id))
    undated = sorted((e for e in events if e.date is None), key=lambda e: e.event_id)
    if newest_first:
        dated.reverse()
        undated.reverse()
    return dated + undated
