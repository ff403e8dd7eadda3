"""Archetype rollups and per-event metagame breakdowns."""

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

from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional, Set

from swissleague.models.tournament import DeckAssignments, Standing
from swissleague.stats.league_totals import find_standing
from swissleague.stats.records import RecordTotals
from swissleague.utils.validation import is_known_archetype


@dataclass
class DeckStats:
    """Summed record of everything played with one archetype."""

    archetype: str
    totals: RecordTotals = field(default_factory=RecordTotals)
    event_ids: Set[str] = field(default_factory=set)
    trophies: int = 0

    @property
    def events(self) -> int:
        return len(self.event_ids)

    def add(self, event_id: str, standing: Standing) -> None:
        self.totals.add_standing(standing)
        self.event_ids.add(event_id)
        if standing.is_perfect_record:
            self.trophies += 1

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"archetype": self.archetype}
        data.update(self.totals.to_dict())
        data["events"] = self.events
        data["trophies"] = self.trophies
        return data


def _sorted_deck_stats(stats: Iterable[DeckStats]) -> List[DeckStats]:
    return sorted(
        stats,
        key=lambda s: (-s.events, -s.totals.match_win_percentage, s.archetype),
    )


def calculate_deck_stats(
    username: str,
    standings_by_event: Mapping[str, List[Standing]],
    decks: DeckAssignments,
) -> List[DeckStats]:
    """One participant's record per archetype played.

    Events without an assignment land in the ``"Unknown"`` bucket. Sorted by
    events played, then match-win percentage.
    """
    by_deck: Dict[str, DeckStats] = {}
    for event_id, standings in standings_by_event.items():
        standing = find_standing(standings, username)
        if standing is None:
            continue
        archetype = decks.archetype(event_id, standing.identity)
        by_deck.setdefault(archetype, DeckStats(archetype)).add(event_id, standing)
    return _sorted_deck_stats(by_deck.values())


def calculate_archetype_rollup(
    standings_by_event: Mapping[str, List[Standing]],
    decks: DeckAssignments,
    event_ids: Optional[Iterable[str]] = None,
) -> List[DeckStats]:
    """Record per archetype over every participant of the given events."""
    if event_ids is None:
        event_ids = list(standings_by_event)
    by_deck: Dict[str, DeckStats] = {}
    for event_id in event_ids:
        for standing in standings_by_event.get(str(event_id), []):
            archetype = decks.archetype(event_id, standing.identity)
            by_deck.setdefault(archetype, DeckStats(archetype)).add(str(event_id), standing)
    return _sorted_deck_stats(by_deck.values())


@dataclass
class MetagameEntry:
    archetype: str
    count: int
    percentage: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "archetype": self.archetype,
            "count": self.count,
            "percentage": self.percentage,
        }


def calculate_metagame_breakdown(assignments: Mapping[str, Any]) -> List[MetagameEntry]:
    """Share of each known archetype in one event's deck assignments.

    Percentages are out of every assigned participant, unknown labels
    included, so they may sum to less than 100.

    Args:
        assignments: ``{username: archetype}`` for one event

    Returns:
        Entries ordered by count, most played first
    """
    total = len(assignments)
    counts = Counter(
        str(label).strip() for label in assignments.values() if is_known_archetype(label)
    )
    return [
        MetagameEntry(archetype=archetype, count=count, percentage=count / total * 100)
        for archetype, count in counts.most_common()
    ]


def has_complete_deck_data(assignments: Optional[Mapping[str, Any]]) -> bool:
    """True when an event has assignments and none is a placeholder."""
    if not assignments:
        return False
    return all(is_known_archetype(label) for label in assignments.values())
