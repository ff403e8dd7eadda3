"""Rollups over computed standings: leagues, head-to-head, decks and trophies."""

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

from swissleague.stats.decks import (
    DeckStats,
    MetagameEntry,
    calculate_archetype_rollup,
    calculate_deck_stats,
    calculate_metagame_breakdown,
    has_complete_deck_data,
)
from swissleague.stats.head_to_head import (
    HeadToHeadMatch,
    HeadToHeadRecord,
    calculate_head_to_head,
)
from swissleague.stats.league_totals import (
    LeagueTotal,
    ParticipantLeagueStats,
    calculate_league_totals,
    calculate_participant_league_stats,
    find_standing,
)
from swissleague.stats.performance import EventPerformance, calculate_event_performances
from swissleague.stats.profile import OverallStats, PlayerProfile, build_player_profile
from swissleague.stats.records import RecordTotals
from swissleague.stats.trophies import TrophyCount, count_trophies_and_belts

__all__ = [
    "DeckStats",
    "EventPerformance",
    "HeadToHeadMatch",
    "HeadToHeadRecord",
    "LeagueTotal",
    "MetagameEntry",
    "OverallStats",
    "ParticipantLeagueStats",
    "PlayerProfile",
    "RecordTotals",
    "TrophyCount",
    "build_player_profile",
    "calculate_archetype_rollup",
    "calculate_deck_stats",
    "calculate_event_performances",
    "calculate_head_to_head",
    "calculate_league_totals",
    "calculate_metagame_breakdown",
    "calculate_participant_league_stats",
    "count_trophies_and_belts",
    "find_standing",
    "has_complete_deck_data",
]
