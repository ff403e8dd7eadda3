"""Per-event performance rows for participant profiles."""

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
from typing import Any, Dict, Iterable, List, Mapping, Optional

from swissleague.models.tournament import (
    DeckAssignments,
    Event,
    Standing,
    sort_events_by_date,
)
from swissleague.stats.league_totals import find_standing


@dataclass
class EventPerformance:
    """How one participant finished in one event."""

    event_id: str
    event_name: str
    date_display: str
    player_count: int
    trophy_count: int
    round_count: int
    rank: int
    points: int
    match_record: str
    match_win_percentage: float
    game_win_percentage: float
    deck: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "event_id": self.event_id,
            "event_name": self.event_name,
            "date_display": self.date_display,
            "player_count": self.player_count,
            "trophy_count": self.trophy_count,
            "round_count": self.round_count,
            "rank": self.rank,
            "points": self.points,
            "match_record": self.match_record,
            "match_win_percentage": self.match_win_percentage,
            "game_win_percentage": self.game_win_percentage,
            "deck": self.deck,
        }


def calculate_event_performances(
    username: str,
    events: Iterable[Event],
    standings_by_event: Mapping[str, List[Standing]],
    decks: Optional[DeckAssignments] = None,
) -> List[EventPerformance]:
    """Performance rows for ``username``, newest event first.

    Events the participant did not finish in are left out.
    """
    rows = []
    for event in sort_events_by_date(list(events), newest_first=True):
        standings = standings_by_event.get(event.event_id, [])
        standing = find_standing(standings, username)
        if standing is None:
            continue
        rows.append(
            EventPerformance(
                event_id=event.event_id,
                event_name=event.name,
                date_display=event.date_display,
                player_count=len(standings),
                trophy_count=sum(1 for s in standings if s.is_perfect_record),
                round_count=event.round_count,
                rank=standing.rank,
                points=standing.points,
                match_record=standing.match_record,
                match_win_percentage=standing.match_win_percentage,
                game_win_percentage=standing.game_win_percentage,
                deck=(
                    decks.archetype(event.event_id, standing.identity)
                    if decks is not None
                    else None
                ),
            )
        )
    return rows
