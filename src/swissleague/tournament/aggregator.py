"""Cross-event standings keyed by stable participant identity."""

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
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Sequence

from swissleague.models.tournament import Competitor, Event, League, Standing
from swissleague.tournament.standings_engine import calculate_standings_for_event
from swissleague.tournament.tiebreak_calculator import RoundLike, TiebreakCalculator
from swissleague.utils import setup_logger

logger = setup_logger(__name__)


def identity_key(competitor: Competitor) -> str:
    """Fold key across events: the username, never the per-event id."""
    return competitor.identity


def calculate_standings_by_identity(rounds: Iterable[RoundLike]) -> List[Standing]:
    """Compute merged standings over rounds drawn from any number of events.

    Records of one username merge into one row even though the platform
    gives that participant a different per-event id in every event. Each
    standing carries the participant as last seen (latest per-event id and
    display name).

    Args:
        rounds: Rounds from one or more events, in play order

    Returns:
        Standings ranked 1..N
    """
    return TiebreakCalculator(identity_key).calculate(rounds)


def calculate_standings_for_events(events: Sequence[Event]) -> List[Standing]:
    """Identity-keyed standings over every round of ``events``."""
    return calculate_standings_by_identity(
        round_ for event in events for round_ in event.rounds
    )


@dataclass
class LeagueStandingRow:
    """A league standing annotated with participation and trophy counts."""

    standing: Standing
    events_played: int = 0
    trophies: int = 0

    def to_dict(self) -> Dict[str, Any]:
        data = self.standing.to_dict()
        data["events_played"] = self.events_played
        data["trophies"] = self.trophies
        return data


def _final_standings(event: Event) -> List[Standing]:
    """Published final standings, or recomputed ones when none were published."""
    if event.final_standings:
        return event.final_standings
    return calculate_standings_for_event(event)


def aggregate_league_standings(
    events: Sequence[Event], league: Optional[League] = None
) -> List[LeagueStandingRow]:
    """League leaderboard over ``events``.

    When ``league`` is given, only its regular member events take part; the
    top-cut event is reported separately as belts.

    Args:
        events: Loaded events, in any order
        league: Optional league whose member events to keep

    Returns:
        One row per identity, in standings order
    """
    if league is not None:
        events = [e for e in events if league.contains(e.event_id)]

    events_played: Counter = Counter()
    trophies: Counter = Counter()
    for event in events:
        for identity in event.players:
            events_played[identity] += 1
        for standing in _final_standings(event):
            if standing.is_perfect_record:
                trophies[standing.identity] += 1

    standings = calculate_standings_for_events(events)
    logger.info(
        "League %s: %d participants over %d events",
        league.name if league else "(all events)",
        len(standings),
        len(events),
    )
    return [
        LeagueStandingRow(
            standing=standing,
            events_played=events_played[standing.identity],
            trophies=trophies[standing.identity],
        )
        for standing in standings
    ]
