"""Summed match and game records shared by the rollups."""

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
from typing import Any, Dict

from swissleague.models.tournament import Standing
from swissleague.utils import format_record
from swissleague.utils.win_rate import (
    calculate_game_win_fraction,
    calculate_match_win_fraction,
)


@dataclass
class RecordTotals:
    """Match and game counts summed over several standings or matches.

    Percentages are recomputed from the summed counts, never averaged.
    """

    match_wins: int = 0
    match_losses: int = 0
    match_draws: int = 0
    game_wins: int = 0
    game_losses: int = 0
    game_draws: int = 0
    points: int = 0
    events: int = 0

    def add_standing(self, standing: Standing) -> None:
        """Add one event's standing to the totals."""
        self.match_wins += standing.match_wins
        self.match_losses += standing.match_losses
        self.match_draws += standing.match_draws
        self.game_wins += standing.game_wins
        self.game_losses += standing.game_losses
        self.game_draws += standing.game_draws
        self.points += standing.points
        self.events += 1

    @property
    def matches_played(self) -> int:
        return self.match_wins + self.match_losses + self.match_draws

    @property
    def match_record(self) -> str:
        return format_record(self.match_wins, self.match_losses, self.match_draws)

    @property
    def game_record(self) -> str:
        return format_record(self.game_wins, self.game_losses, self.game_draws)

    @property
    def match_win_percentage(self) -> float:
        return calculate_match_win_fraction(
            self.match_wins, self.match_losses, self.match_draws
        )

    @property
    def game_win_percentage(self) -> float:
        return calculate_game_win_fraction(
            self.game_wins, self.game_losses, self.game_draws
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "events": self.events,
            "points": self.points,
            "matches_played": self.matches_played,
            "match_wins": self.match_wins,
            "match_losses": self.match_losses,
            "match_draws": self.match_draws,
            "match_record": self.match_record,
            "match_win_percentage": self.match_win_percentage,
            "game_wins": self.game_wins,
            "game_losses": self.game_losses,
            "game_draws": self.game_draws,
            "game_record": self.game_record,
            "game_win_percentage": self.game_win_percentage,
        }
