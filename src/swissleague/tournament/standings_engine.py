"""Per-event standings keyed by the per-event participant id."""

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

from typing import Hashable, Iterable, List

from swissleague.models.tournament import Competitor, Event, Standing
from swissleague.tournament.tiebreak_calculator import RoundLike, TiebreakCalculator
from swissleague.type_hints import StandingsByEvent
from swissleague.utils import setup_logger

logger = setup_logger(__name__)


def team_key(competitor: Competitor) -> Hashable:
    """Fold key for a single event: the per-event id, else the username."""
    if competitor.team_id is not None:
        return ("team", competitor.team_id)
    return ("user", competitor.identity)


def calculate_event_standings(rounds: Iterable[RoundLike]) -> List[Standing]:
    """Compute one event's ranked standings from its rounds.

    The per-event id is only meaningful inside one event; pass rounds from
    a single event here and use
    :func:`swissleague.tournament.aggregator.calculate_standings_by_identity`
    for anything spanning several events.

    Args:
        rounds: The event's rounds, as Round models or lists of matches

    Returns:
        Standings with ranks 1..N
    """
    return TiebreakCalculator(team_key).calculate(rounds)


def calculate_standings_for_event(event: Event) -> List[Standing]:
    """Convenience wrapper over :func:`calculate_event_standings`."""
    standings = calculate_event_standings(event.rounds)
    logger.debug(
        "Event %s: %d standings over %d rounds",
        event.event_id,
        len(standings),
        event.round_count,
    )
    return standings


def calculate_standings_by_event(events: Iterable[Event]) -> StandingsByEvent:
    """Recomputed final standings for each event, keyed by event id."""
    return {event.event_id: calculate_standings_for_event(event) for event in events}
