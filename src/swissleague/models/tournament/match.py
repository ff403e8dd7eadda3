"""Data model for a single match and its competitors."""

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
from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional

from swissleague.constants import (
    BYE_RESULT_LABEL,
    GAMES_TO_WIN_MATCH,
    MAX_GAMES_PER_MATCH,
    PENDING_RESULT_LABEL,
    RESULT_DRAW,
    RESULT_LOSS,
    RESULT_WIN,
)
from swissleague.exceptions import InvalidMatchException
from swissleague.models.participant import (
    Participant,
    create_participant_from_competitor,
)
from swissleague.utils.dates import parse_timestamp
from swissleague.utils.validation import coerce_count


@dataclass(frozen=True)
class Competitor:
    """One side of a match.

    Attributes
    ----------
    participant : Participant
        Who played.
    game_wins : int
        Games won within this match.
    game_byes : int
        Games credited by a bye. Only meaningful on bye matches.
    """

    participant: Participant
    game_wins: int = 0
    game_byes: int = 0

    @property
    def identity(self) -> str:
        """Stable cross-event key of the competitor."""
        return self.participant.username

    @property
    def team_id(self) -> Optional[int]:
        return self.participant.team_id

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Competitor":
        """Build a competitor from a platform competitor record.

        Missing game counts are treated as 0.

        Raises:
            InvalidMatchException: If a game count is not a number
        """
        participant = create_participant_from_competitor(record)
        try:
            game_wins = coerce_count(record.get("GameWins"))
            game_byes = coerce_count(record.get("GameByes"))
        except ValueError as e:
            raise InvalidMatchException(
                f"Competitor {participant.username!r} has an invalid game count: {e}"
            ) from e
        return cls(participant=participant, game_wins=game_wins, game_byes=game_byes)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "participant": self.participant.to_dict(),
            "game_wins": self.game_wins,
            "game_byes": self.game_byes,
        }


@dataclass
class Match:
    """A single pairing: two competitors, or one for a bye.

    Attributes
    ----------
    event_id : str
        Owning event.
    round_number : int
        Round the match was played in (1-indexed).
    competitors : list of Competitor
        Exactly one (bye) or exactly two (regular match).
    game_draws : int
        Drawn games, counted for both sides of a regular match.
    bye_reason : int or None
        Platform bye marker; None for regular matches.
    table_number : int or None
        Table the match was played at, used for display ordering.
    timestamp : datetime or None
        When the platform recorded the match.
    """

    event_id: str
    round_number: int
    competitors: List[Competitor] = field(default_factory=list)
    game_draws: int = 0
    bye_reason: Optional[int] = None
    table_number: Optional[int] = None
    timestamp: Optional[datetime] = None

    def __post_init__(self):
        count = len(self.competitors)
        if count not in (1, 2):
            raise InvalidMatchException(
                f"Match in event {self.event_id} round {self.round_number} "
                f"has {count} competitors; expected 1 (bye) or 2"
            )
        if count == 2 and self.bye_reason is not None:
            raise InvalidMatchException(
                f"Match in event {self.event_id} round {self.round_number} "
                f"has a bye marker but two competitors"
            )

    @classmethod
    def from_record(
        cls, record: Mapping[str, Any], event_id: Optional[str] = None
    ) -> "Match":
        """Build a match from a platform match record.

        Args:
            record: Raw match record with ``Competitors``, ``RoundNumber`` and
                optional ``ByeReason``, ``GameDraws``, ``TableNumber``,
                ``DateCreated``, ``TournamentId``
            event_id: Owning event id; defaults to the record's ``TournamentId``

        Raises:
            InvalidMatchException: If the competitor count is wrong, a count
                is not numeric or the timestamp cannot be parsed
            InvalidParticipantDataException: If a competitor has no username
        """
        competitors = [Competitor.from_record(c) for c in record.get("Competitors") or []]

        if event_id is None:
            event_id = record.get("TournamentId")
        event_id = str(event_id) if event_id is not None else ""

        try:
            timestamp = parse_timestamp(record.get("DateCreated"))
        except ValueError as e:
            raise InvalidMatchException(
                f"Match in event {event_id} has an invalid DateCreated: "
                f"{record.get('DateCreated')!r}"
            ) from e

        try:
            round_number = coerce_count(record.get("RoundNumber"))
            game_draws = coerce_count(record.get("GameDraws"))
            table_number = record.get("TableNumber")
            if table_number is not None:
                table_number = coerce_count(table_number)
        except ValueError as e:
            raise InvalidMatchException(
                f"Match in event {event_id} has a non-numeric field: {e}"
            ) from e

        return cls(
            event_id=event_id,
            round_number=round_number,
            competitors=competitors,
            game_draws=game_draws,
            bye_reason=record.get("ByeReason"),
            table_number=table_number,
            timestamp=timestamp,
        )

    # --- Structure ---

    @property
    def is_bye(self) -> bool:
        return len(self.competitors) == 1

    @property
    def is_regular(self) -> bool:
        return not self.is_bye

    @property
    def identities(self) -> List[str]:
        return [c.identity for c in self.competitors]

    def competitor_for(self, username: str) -> Optional[Competitor]:
        """Find the competitor with ``username`` (case-insensitive)."""
        for competitor in self.competitors:
            if competitor.participant.matches(username):
                return competitor
        return None

    def opponent_of(self, username: str) -> Optional[Competitor]:
        """Return the other side of the match, or None for byes and strangers."""
        if self.is_bye or self.competitor_for(username) is None:
            return None
        first, second = self.competitors
        return second if first.participant.matches(username) else first

    # --- Result ---

    @property
    def is_draw(self) -> bool:
        """Equal game wins (including 0-0) on a regular match."""
        if self.is_bye:
            return False
        first, second = self.competitors
        return first.game_wins == second.game_wins

    @property
    def winner(self) -> Optional[Competitor]:
        """The side with strictly more game wins; the sole side of a bye."""
        if self.is_bye:
            return self.competitors[0]
        first, second = self.competitors
        if first.game_wins > second.game_wins:
            return first
        if second.game_wins > first.game_wins:
            return second
        return None

    @property
    def loser(self) -> Optional[Competitor]:
        if self.is_bye:
            return None
        first, second = self.competitors
        if first.game_wins > second.game_wins:
            return second
        if second.game_wins > first.game_wins:
            return first
        return None

    def result_for(self, username: str) -> Optional[str]:
        """Return ``"W"``, ``"L"`` or ``"D"`` from ``username``'s side.

        Returns None when ``username`` did not play in this match.
        """
        competitor = self.competitor_for(username)
        if competitor is None:
            return None
        if self.is_bye:
            return RESULT_WIN
        if self.is_draw:
            return RESULT_DRAW
        return RESULT_WIN if self.winner is competitor else RESULT_LOSS

    @property
    def total_games(self) -> int:
        return sum(c.game_wins for c in self.competitors) + self.game_draws

    @property
    def is_complete(self) -> bool:
        """Whether a best-of-three result has been recorded."""
        if self.is_bye:
            return True
        first, second = self.competitors
        total = self.total_games
        return total > 0 and (
            first.game_wins == GAMES_TO_WIN_MATCH
            or second.game_wins == GAMES_TO_WIN_MATCH
            or total == MAX_GAMES_PER_MATCH
        )

    @property
    def result_string(self) -> str:
        """Score line such as ``"2-1"``, ``"1-1-1"`` or ``"BYE"``."""
        if self.is_bye:
            return BYE_RESULT_LABEL
        if not self.is_complete:
            return PENDING_RESULT_LABEL
        first, second = self.competitors
        if self.game_draws > 0:
            return f"{first.game_wins}-{second.game_wins}-{self.game_draws}"
        return f"{first.game_wins}-{second.game_wins}"

    def to_dict(self) -> Dict[str, Any]:
        """Serialize match to dictionary."""
        return {
            "event_id": self.event_id,
            "round_number": self.round_number,
            "competitors": [c.to_dict() for c in self.competitors],
            "game_draws": self.game_draws,
            "bye_reason": self.bye_reason,
            "table_number": self.table_number,
            "timestamp": self.timestamp.isoformat() if self.timestamp else None,
            "result": self.result_string,
        }


def sort_matches(matches: List[Match]) -> List[Match]:
    """Order matches for display: regular matches by table number, byes last.

    Matches without a table number keep their relative order.
    """
    return sorted(
        matches,
        key=lambda m: (
            m.is_bye,
            m.table_number is None,
            m.table_number if m.table_number is not None else 0,
        ),
    )
