"""Chronological rating replay across every event of a series.

Every regular match of every event is tagged with its event date and round
number, sorted on that key, and replayed through the Elo update one match
at a time. Byes carry no information about the opponent's strength and are
left out. Given the same events the replay reproduces the same ratings and
histories exactly.
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

from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Dict, Iterable, List, Optional, Tuple

from swissleague.constants import (
    DEFAULT_K_FACTOR,
    DEFAULT_STARTING_RATING,
    OUTCOME_DRAW,
    OUTCOME_LOSS,
    OUTCOME_TO_RESULT,
    OUTCOME_WIN,
)
from swissleague.exceptions import InvalidMatchException
from swissleague.models.tournament import UNDATED, Competitor, Event, Match
from swissleague.rating.elo import EloResult, calculate_elo
from swissleague.rating.models import Rating, RatingHistoryEntry
from swissleague.type_hints import MatchOutcome
from swissleague.utils import setup_logger

logger = setup_logger(__name__)


@dataclass(frozen=True)
class RatedMatch:
    """A regular match tagged with the key that orders the replay."""

    match: Match
    event_id: str
    event_date: Optional[datetime]
    round_number: int

    @property
    def event_day(self) -> date:
        """UTC calendar day of the event; the time of day is not trusted."""
        if self.event_date is None:
            return UNDATED.date()
        return self.event_date.astimezone(timezone.utc).date()

    @property
    def sort_key(self) -> Tuple[date, int]:
        return (self.event_day, self.round_number)

    @property
    def event_date_label(self) -> Optional[str]:
        return self.event_day.isoformat() if self.event_date is not None else None


def collect_rated_matches(events: Iterable[Event]) -> List[RatedMatch]:
    """Every regular match of ``events`` in replay order.

    The order is ``(event day, round number)`` ascending, where the event
    day is the UTC calendar date; events on the same day interleave round by
    round. Matches sharing a key keep the order they were collected in, which
    is the order of ``events`` and then the order within each round. Undated
    events sort after every dated one.
    """
    collected: List[RatedMatch] = []
    for event in events:
        if event.date is None:
            logger.warning(
                "Event %s has no date; its matches are rated after all dated events",
                event.event_id,
            )
        for round_ in event.rounds:
            for match in round_.matches:
                if match.is_bye:
                    continue
                collected.append(
                    RatedMatch(
                        match=match,
                        event_id=event.event_id,
                        event_date=event.date,
                        round_number=round_.number,
                    )
                )
    collected.sort(key=lambda m: m.sort_key)
    return collected


def extract_participants(match: Match) -> Tuple[Competitor, Competitor]:
    """Both sides of a rated match.

    Raises:
        InvalidMatchException: If the match does not have exactly two
            competitors
    """
    if len(match.competitors) != 2:
        raise InvalidMatchException(
            f"Expected 2 competitors in event {match.event_id} round "
            f"{match.round_number}, got {len(match.competitors)}"
        )
    first, second = match.competitors
    return first, second


def determine_match_result(match: Match, username: str) -> MatchOutcome:
    """``"win"``, ``"loss"`` or ``"draw"`` for ``username``.

    Equal game wins, 0-0 included, is a draw.
    """
    first, second = extract_participants(match)
    if first.identity == username:
        own, other = first, second
    elif second.identity == username:
        own, other = second, first
    else:
        raise InvalidMatchException(
            f"{username!r} did not play in this match of event {match.event_id}"
        )
    if own.game_wins > other.game_wins:
        return OUTCOME_WIN
    if own.game_wins < other.game_wins:
        return OUTCOME_LOSS
    return OUTCOME_DRAW


class RatingReplay:
    """Replays rated matches one at a time, keeping every rating history.

    Participants start at ``starting_rating`` the first time they appear.
    Ratings carry over between events; nothing resets per event.

    Example:
        >>> replay = RatingReplay()
        >>> for rated in collect_rated_matches(events):
        ...     replay.apply(rated)
        >>> ratings = replay.ratings()
    """

    def __init__(
        self,
        starting_rating: int = DEFAULT_STARTING_RATING,
        k_factor: float = DEFAULT_K_FACTOR,
    ):
        self.starting_rating = starting_rating
        self.k_factor = k_factor
        self._ratings: Dict[str, Rating] = {}

    def _rating_for(self, competitor: Competitor) -> Rating:
        rating = self._ratings.get(competitor.identity)
        if rating is None:
            rating = Rating(
                username=competitor.identity,
                display_name=competitor.participant.display_name,
                starting_rating=self.starting_rating,
            )
            self._ratings[competitor.identity] = rating
        else:
            rating.display_name = competitor.participant.display_name
        return rating

    def apply(self, rated: RatedMatch) -> EloResult:
        """Apply one match and append a history entry for both sides."""
        first, second = extract_participants(rated.match)
        first_rating = self._rating_for(first)
        second_rating = self._rating_for(second)

        outcome = determine_match_result(rated.match, first.identity)
        result = calculate_elo(
            first_rating.current_rating,
            second_rating.current_rating,
            outcome,
            self.k_factor,
        )

        second_outcome = {OUTCOME_WIN: OUTCOME_LOSS, OUTCOME_LOSS: OUTCOME_WIN}.get(
            outcome, OUTCOME_DRAW
        )
        for rating, opponent, code, before, after, change in (
            (
                first_rating,
                second.identity,
                OUTCOME_TO_RESULT[outcome],
                result.player_rating,
                result.player_new_rating,
                result.rating_change,
            ),
            (
                second_rating,
                first.identity,
                OUTCOME_TO_RESULT[second_outcome],
                result.opponent_rating,
                result.opponent_new_rating,
                result.opponent_rating_change,
            ),
        ):
            rating.record(
                RatingHistoryEntry(
                    event_id=rated.event_id,
                    event_date=rated.event_date_label,
                    round_number=rated.round_number,
                    opponent=opponent,
                    result=code,
                    rating_before=before,
                    rating_after=after,
                    rating_change=change,
                )
            )

        logger.debug(
            "%s %s %s: %+d / %+d",
            first.identity,
            outcome,
            second.identity,
            result.rating_change,
            result.opponent_rating_change,
        )
        return result

    @property
    def participant_count(self) -> int:
        return len(self._ratings)

    @property
    def total_rating(self) -> int:
        """Sum of every current rating; ``participant_count * starting_rating``."""
        return sum(r.current_rating for r in self._ratings.values())

    def ratings(self) -> Dict[str, Rating]:
        """Ratings keyed by username, in order of first appearance."""
        return dict(self._ratings)


def replay_ratings(
    events: Iterable[Event],
    starting_rating: int = DEFAULT_STARTING_RATING,
    k_factor: float = DEFAULT_K_FACTOR,
) -> Dict[str, Rating]:
    """Replay every regular match of ``events`` and return final ratings.

    Args:
        events: Events to rate, usually every event of the series
        starting_rating: Rating of a participant's first match
        k_factor: Maximum change per match

    Returns:
        Rating per username, with full history and peak

    Raises:
        InvalidMatchException: If a regular match is malformed
    """
    events = list(events)
    rated_matches = collect_rated_matches(events)
    logger.info(
        "Replaying %d matches across %d events", len(rated_matches), len(events)
    )

    replay = RatingReplay(starting_rating=starting_rating, k_factor=k_factor)
    for rated in rated_matches:
        replay.apply(rated)

    logger.info("Rated %d participants", replay.participant_count)
    return replay.ratings()
