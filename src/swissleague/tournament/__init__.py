"""Standings engines for single events and for whole leagues."""

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

from swissleague.tournament.aggregator import (
    LeagueStandingRow,
    aggregate_league_standings,
    calculate_standings_by_identity,
    calculate_standings_for_events,
    identity_key,
)
from swissleague.tournament.standings_engine import (
    calculate_event_standings,
    calculate_standings_by_event,
    calculate_standings_for_event,
    team_key,
)
from swissleague.tournament.tiebreak_calculator import (
    RecordTally,
    TiebreakCalculator,
    standing_sort_key,
)

__all__ = [
    "LeagueStandingRow",
    "RecordTally",
    "TiebreakCalculator",
    "aggregate_league_standings",
    "calculate_event_standings",
    "calculate_standings_by_event",
    "calculate_standings_by_identity",
    "calculate_standings_for_event",
    "calculate_standings_for_events",
    "identity_key",
    "standing_sort_key",
    "team_key",
]
