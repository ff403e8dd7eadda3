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

from swissleague.models.tournament.match import Competitor, Match, sort_matches
from swissleague.models.tournament.round_data import Round
from swissleague.models.tournament.series_config import (
    DeckAssignments,
    League,
    SeriesConfig,
    load_deck_assignments,
    load_series_config,
)
from swissleague.models.tournament.standing import (
    Standing,
    get_celebration_winners,
    get_top_finishers,
    get_trophy_winners,
)
from swissleague.models.tournament.tournament import UNDATED, Event, sort_events_by_date

__all__ = [
    "Competitor",
    "DeckAssignments",
    "Event",
    "League",
    "Match",
    "Round",
    "SeriesConfig",
    "Standing",
    "get_celebration_winners",
    "get_top_finishers",
    "get_trophy_winners",
    "load_deck_assignments",
    "load_series_config",
    "sort_events_by_date",
    "sort_matches",
    "UNDATED",
]
