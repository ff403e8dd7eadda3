"""Trophy and belt counting."""

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
from typing import Dict, List, Mapping

from swissleague.models.tournament import SeriesConfig, Standing


@dataclass
class TrophyCount:
    """Perfect finishes of one identity.

    A 3-0-0 finish in a regular event is a trophy; in a league's top-cut
    event it is a belt. The two never overlap.
    """

    trophies: int = 0
    belts: int = 0


def count_trophies_and_belts(
    standings_by_event: Mapping[str, List[Standing]], config: SeriesConfig
) -> Dict[str, TrophyCount]:
    """Trophies and belts per identity over every event given.

    Only identities with at least one perfect finish appear.
    """
    counts: Dict[str, TrophyCount] = {}
    for event_id, standings in standings_by_event.items():
        top_cut = config.is_top_cut(event_id)
        for standing in standings:
            if not standing.is_perfect_record:
                continue
            count = counts.setdefault(standing.identity, TrophyCount())
            if top_cut:
                count.belts += 1
            else:
                count.trophies += 1
    return counts
