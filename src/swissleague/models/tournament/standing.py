"""Data model for a participant's final position in an event."""

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
from typing import Any, Dict, List, Mapping, Optional

from swissleague.constants import PERFECT_RECORD
from swissleague.exceptions import InvalidStandingException
from swissleague.models.participant import (
    Participant,
    create_participant_from_standing,
)
from swissleague.utils import format_record
from swissleague.utils.validation import coerce_count
from swissleague.utils.win_rate import (
    calculate_game_win_fraction,
    calculate_match_win_fraction,
)


@dataclass
class Standing:
    """One participant's ranked result in one event (or one league).

    Standings are derived data: the engines rebuild them from matches and
    never patch them in place.

    Attributes
    ----------
    participant : Participant
        Who finished here.
    rank : int
        1-based position after tiebreakers.
    match_wins, match_losses, match_draws : int
        Match record.
    game_wins, game_losses, game_draws : int
        Game record.
    points : int
        3 per match win, 1 per match draw.
    opponent_match_win_percentage : float
        OMW as a 0..1 fraction.
    game_win_percentage : float
        GW as a 0..1 fraction.
    opponent_game_win_percentage : float
        OGW as a 0..1 fraction.
    opponent_count : int
        Distinct opponents faced.
    """

    participant: Participant
    rank: int = 0
    match_wins: int = 0
    match_losses: int = 0
    match_draws: int = 0
    game_wins: int = 0
    game_losses: int = 0
    game_draws: int = 0
    points: int = 0
    opponent_match_win_percentage: float = 0.0
    game_win_percentage: float = 0.0
    opponent_game_win_percentage: float = 0.0
    opponent_count: int = 0

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Standing":
        """Build a standing from a platform-published standings row.

        Raises:
            InvalidStandingException: If a count or percentage is not numeric
        """
        participant = create_participant_from_standing(record)
        try:
            return cls(
                participant=participant,
                rank=coerce_count(record.get("Rank")),
                match_wins=coerce_count(record.get("MatchWins")),
                match_losses=coerce_count(record.get("MatchLosses")),
                match_draws=coerce_count(record.get("MatchDraws")),
                game_wins=coerce_count(record.get("GameWins")),
                game_losses=coerce_count(record.get("GameLosses")),
                game_draws=coerce_count(record.get("GameDraws")),
                points=coerce_count(record.get("Points")),
                opponent_match_win_percentage=float(
                    record.get("OpponentMatchWinPercentage") or 0
                ),
                game_win_percentage=float(record.get("TeamGameWinPercentage") or 0),
                opponent_game_win_percentage=float(
                    record.get("OpponentGameWinPercentage") or 0
                ),
                opponent_count=coerce_count(record.get("OpponentCount")),
            )
        except (TypeError, ValueError) as e:
            raise InvalidStandingException(
                f"Standing for {participant.username!r} has a non-numeric field: {e}"
            ) from e

    @property
    def identity(self) -> str:
        return self.participant.username

    @property
    def team_id(self) -> Optional[int]:
        return self.participant.team_id

    @property
    def match_record(self) -> str:
        return format_record(self.match_wins, self.match_losses, self.match_draws)

    @property
    def game_record(self) -> str:
        return format_record(self.game_wins, self.game_losses, self.game_draws)

    @property
    def total_matches(self) -> int:
        return self.match_wins + self.match_losses + self.match_draws

    @property
    def match_win_percentage(self) -> float:
        """Own match-win fraction, draws weighted at one half."""
        return calculate_match_win_fraction(
            self.match_wins, self.match_losses, self.match_draws
        )

    @property
    def weighted_game_win_percentage(self) -> float:
        """Own game-win fraction, draws weighted at one half."""
        return calculate_game_win_fraction(
            self.game_wins, self.game_losses, self.game_draws
        )

    @property
    def is_perfect_record(self) -> bool:
        """3-0-0 finish; a trophy, or a belt in a top-cut event."""
        return (self.match_wins, self.match_losses, self.match_draws) == PERFECT_RECORD

    def to_dict(self) -> Dict[str, Any]:
        """Serialize standing to dictionary."""
        return {
            "rank": self.rank,
            "username": self.participant.username,
            "display_name": self.participant.display_name,
            "team_id": self.participant.team_id,
            "match_wins": self.match_wins,
            "match_losses": self.match_losses,
            "match_draws": self.match_draws,
            "game_wins": self.game_wins,
            "game_losses": self.game_losses,
            "game_draws": self.game_draws,
            "points": self.points,
            "match_record": self.match_record,
            "game_record": self.game_record,
            "match_win_percentage": self.match_win_percentage,
            "opponent_match_win_percentage": self.opponent_match_win_percentage,
            "game_win_percentage": self.game_win_percentage,
            "opponent_game_win_percentage": self.opponent_game_win_percentage,
            "opponent_count": self.opponent_count,
        }


def get_trophy_winners(standings: List[Standing]) -> List[Standing]:
    """Standings with a perfect record."""
    return [s for s in standings if s.is_perfect_record]


def get_top_finishers(standings: List[Standing]) -> List[Standing]:
    """Everyone tied on the points of the first standing."""
    if not standings:
        return []
    top_points = standings[0].points
    return [s for s in standings if s.points == top_points]


def get_celebration_winners(standings: List[Standing]) -> List[Standing]:
    """Trophy winners if there are any, otherwise the top finishers."""
    return get_trophy_winners(standings) or get_top_finishers(standings)
