"""Participant profile bundle.

Collects everything the site shows on a participant page: overall and
per-league totals, head-to-head records, archetype rollups, event-by-event
performances and, when requested, the replayed rating.
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

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence

from swissleague.exceptions import UnknownParticipantException
from swissleague.models.tournament import (
    Event,
    SeriesConfig,
    Standing,
    sort_events_by_date,
)
from swissleague.rating.models import Rating
from swissleague.stats.decks import DeckStats, calculate_deck_stats
from swissleague.stats.head_to_head import HeadToHeadRecord, calculate_head_to_head
from swissleague.stats.league_totals import (
    ParticipantLeagueStats,
    calculate_participant_league_stats,
    find_standing,
)
from swissleague.stats.performance import EventPerformance, calculate_event_performances
from swissleague.stats.records import RecordTotals
from swissleague.stats.trophies import TrophyCount, count_trophies_and_belts
from swissleague.utils import setup_logger

logger = setup_logger(__name__)


@dataclass
class OverallStats:
    totals: RecordTotals = field(default_factory=RecordTotals)
    trophies: int = 0
    belts: int = 0

    def to_dict(self) -> Dict[str, Any]:
        data = self.totals.to_dict()
        data["trophies"] = self.trophies
        data["belts"] = self.belts
        return data


@dataclass
class PlayerProfile:
    username: str
    display_name: str
    overall: OverallStats
    league_stats: List[ParticipantLeagueStats] = field(default_factory=list)
    deck_stats: List[DeckStats] = field(default_factory=list)
    head_to_head: List[HeadToHeadRecord] = field(default_factory=list)
    performances: List[EventPerformance] = field(default_factory=list)
    rating: Optional[Rating] = None

    @property
    def profile_slug(self) -> str:
        return self.username.lower()

    def to_dict(self) -> Dict[str, Any]:
        """Serialize profile to dictionary."""
        data: Dict[str, Any] = {
            "username": self.username,
            "display_name": self.display_name,
            "profile_slug": self.profile_slug,
            "overall": self.overall.to_dict(),
            "leagues": [s.to_dict() for s in self.league_stats],
            "decks": [s.to_dict() for s in self.deck_stats],
            "head_to_head": [r.to_dict() for r in self.head_to_head],
            "events": [p.to_dict() for p in self.performances],
        }
        if self.rating is not None:
            data["rating"] = self.rating.to_dict()
        return data


def _lookup(mapping: Mapping[str, Any], username: str) -> Optional[Any]:
    wanted = username.lower()
    for key, value in mapping.items():
        if key.lower() == wanted:
            return value
    return None


def build_player_profile(
    username: str,
    events: Sequence[Event],
    standings_by_event: Mapping[str, List[Standing]],
    config: SeriesConfig,
    ratings: Optional[Mapping[str, Rating]] = None,
) -> PlayerProfile:
    """Assemble the profile of ``username`` (case-insensitive).

    Args:
        username: Participant to describe
        events: Loaded events of the series
        standings_by_event: Computed final standings per event id
        config: League and deck configuration
        ratings: Replayed ratings; the profile carries a rating only when
            this is given

    Raises:
        UnknownParticipantException: If ``username`` has no standing in any
            of ``events``
    """
    chronological = sort_events_by_date(list(events))

    latest: Optional[Standing] = None
    overall = OverallStats()
    for event in chronological:
        standing = find_standing(standings_by_event.get(event.event_id, []), username)
        if standing is None:
            continue
        overall.totals.add_standing(standing)
        latest = standing

    if latest is None:
        raise UnknownParticipantException(f"No results found for participant {username!r}")

    identity = latest.identity
    trophy_count = _lookup(count_trophies_and_belts(standings_by_event, config), identity)
    if trophy_count is None:
        trophy_count = TrophyCount()
    overall.trophies = trophy_count.trophies
    overall.belts = trophy_count.belts

    rating = _lookup(ratings, identity) if ratings is not None else None

    profile = PlayerProfile(
        username=identity,
        display_name=latest.participant.display_name,
        overall=overall,
        league_stats=calculate_participant_league_stats(identity, standings_by_event, config),
        deck_stats=calculate_deck_stats(identity, standings_by_event, config.decks),
        head_to_head=calculate_head_to_head(identity, chronological, config.decks),
        performances=calculate_event_performances(
            identity, events, standings_by_event, config.decks
        ),
        rating=rating,
    )
    logger.debug(
        "Profile for %s: %d events, %d opponents",
        identity,
        overall.totals.events,
        len(profile.head_to_head),
    )
    return profile
