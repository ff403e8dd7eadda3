"""League totals summed from per-event standings."""

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
from typing import Any, Dict, Iterable, List, Mapping, Optional

from swissleague.models.participant import Participant
from swissleague.models.tournament import SeriesConfig, Standing
from swissleague.stats.records import RecordTotals
from swissleague.utils import setup_logger

logger = setup_logger(__name__)


@dataclass
class LeagueTotal:
    """One identity's summed record over a league's events."""

    participant: Participant
    totals: RecordTotals = field(default_factory=RecordTotals)
    rank: int = 0

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "rank": self.rank,
            "username": self.participant.username,
            "display_name": self.participant.display_name,
        }
        data.update(self.totals.to_dict())
        return data


def find_standing(standings: Iterable[Standing], username: str) -> Optional[Standing]:
    """First standing for ``username`` (case-insensitive), or None."""
    for standing in standings:
        if standing.participant.matches(username):
            return standing
    return None


def calculate_league_totals(
    standings_by_event: Mapping[str, List[Standing]], event_ids: Iterable[str]
) -> List[LeagueTotal]:
    """Sum standings across ``event_ids`` keyed by identity.

    Events missing from ``standings_by_event`` are skipped. Rows are ordered
    by points, match wins and game-win percentage (descending), then by
    username, and ranked 1..N.
    """
    rows: Dict[str, LeagueTotal] = {}
    for event_id in event_ids:
        standings = standings_by_event.get(str(event_id))
        if standings is None:
            logger.debug("No standings for event %s; skipping", event_id)
            continue
        for standing in standings:
            row = rows.get(standing.identity)
            if row is None:
                row = LeagueTotal(participant=standing.participant)
                rows[standing.identity] = row
            else:
                row.participant = standing.participant
            row.totals.add_standing(standing)

    ordered = sorted(
        rows.values(),
        key=lambda r: (
            -r.totals.points,
            -r.totals.match_wins,
            -r.totals.game_win_percentage,
            r.participant.username,
        ),
    )
    for position, row in enumerate(ordered, start=1):
        row.rank = position
    return ordered


@dataclass
class ParticipantLeagueStats:
    """A participant's totals inside one league (or its top cut)."""

    league_name: str
    totals: RecordTotals = field(default_factory=RecordTotals)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"league_name": self.league_name}
        data.update(self.totals.to_dict())
        return data


def calculate_participant_league_stats(
    username: str,
    standings_by_event: Mapping[str, List[Standing]],
    config: SeriesConfig,
) -> List[ParticipantLeagueStats]:
    """Per-league totals for one participant, in configuration order.

    A league's top-cut event is reported under its own ``"<league> Top 8"``
    row.
    """
    by_league: Dict[str, ParticipantLeagueStats] = {}
    for event_id in config.all_event_ids():
        league_name = config.league_for_event(event_id)
        standing = find_standing(standings_by_event.get(event_id, []), username)
        if league_name is None or standing is None:
            continue
        stats = by_league.setdefault(league_name, ParticipantLeagueStats(league_name))
        stats.totals.add_standing(standing)
    return list(by_league.values())
