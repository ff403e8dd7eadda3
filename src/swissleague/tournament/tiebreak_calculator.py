"""Swiss tiebreak calculation.

Folds matches into per-participant record tallies and turns the tallies
into ranked standings using points, OMW%, GW% and OGW%.
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
from typing import Callable, Dict, Hashable, Iterable, List, Sequence, Union

from swissleague.constants import (
    OPPONENT_PERCENTAGE_FLOOR,
    POINTS_PER_MATCH_DRAW,
    POINTS_PER_MATCH_WIN,
)
from swissleague.models.participant import Participant
from swissleague.models.tournament import Competitor, Match, Round, Standing
from swissleague.utils import setup_logger
from swissleague.utils.win_rate import raw_win_fraction

logger = setup_logger(__name__)

# A round given either as a Round model or as a plain list of matches
RoundLike = Union[Round, Sequence[Match]]
FoldKey = Callable[[Competitor], Hashable]


@dataclass
class RecordTally:
    """Running totals for one participant while folding matches.

    ``participant`` is replaced every time the participant is seen, so it
    holds the most recent per-event id and display name.
    """

    participant: Participant
    match_wins: int = 0
    match_losses: int = 0
    match_draws: int = 0
    game_wins: int = 0
    game_losses: int = 0
    game_draws: int = 0
    # Distinct opponents by fold key, in order of first meeting
    opponents: Dict[Hashable, None] = field(default_factory=dict)

    @property
    def points(self) -> int:
        return (
            POINTS_PER_MATCH_WIN * self.match_wins
            + POINTS_PER_MATCH_DRAW * self.match_draws
        )

    @property
    def total_matches(self) -> int:
        return self.match_wins + self.match_losses + self.match_draws

    @property
    def total_games(self) -> int:
        return self.game_wins + self.game_losses + self.game_draws

    @property
    def raw_match_win_fraction(self) -> float:
        """Match wins over matches played, draws not weighted."""
        return raw_win_fraction(self.match_wins, self.total_matches)

    @property
    def raw_game_win_fraction(self) -> float:
        """Game wins over games played, draws not weighted."""
        return raw_win_fraction(self.game_wins, self.total_games)


def round_matches(round_: RoundLike) -> Sequence[Match]:
    """Matches of a round given as a Round or as a list."""
    if isinstance(round_, Round):
        return round_.matches
    return round_


class TiebreakCalculator:
    """Calculates Swiss standings for an arbitrary fold key.

    The fold key decides whose records merge: the per-event id for a single
    event, or the stable username across events. Everything else (scoring,
    the opponent floor, the sort order) is the same for both.

    Sort order: points, OMW%, GW%, OGW% (all descending), then per-event
    id ascending, then username.

    Args:
        key: Maps a competitor to the key its results accumulate under
    """

    def __init__(self, key: FoldKey):
        self.key = key

    # --- Folding ---

    def tally(self, rounds: Iterable[RoundLike]) -> Dict[Hashable, RecordTally]:
        """Fold every match of every round into per-key record tallies.

        Args:
            rounds: Rounds in play order

        Returns:
            Tallies keyed by fold key, in order of first appearance
        """
        tallies: Dict[Hashable, RecordTally] = {}
        match_count = 0
        for round_ in rounds:
            for match in round_matches(round_):
                if match.is_bye:
                    self._record_bye(tallies, match)
                else:
                    self._record_pairing(tallies, match)
                match_count += 1
        logger.debug("Folded %d matches into %d records", match_count, len(tallies))
        return tallies

    def _tally_for(
        self, tallies: Dict[Hashable, RecordTally], competitor: Competitor
    ) -> RecordTally:
        key = self.key(competitor)
        tally = tallies.get(key)
        if tally is None:
            tally = RecordTally(participant=competitor.participant)
            tallies[key] = tally
        else:
            tally.participant = competitor.participant
        return tally

    def _record_bye(self, tallies: Dict[Hashable, RecordTally], match: Match) -> None:
        # A bye is a match win; its games come from the bye credit, not a score line
        competitor = match.competitors[0]
        tally = self._tally_for(tallies, competitor)
        tally.match_wins += 1
        tally.game_wins += competitor.game_byes

    def _record_pairing(self, tallies: Dict[Hashable, RecordTally], match: Match) -> None:
        first, second = match.competitors
        first_tally = self._tally_for(tallies, first)
        second_tally = self._tally_for(tallies, second)

        first_tally.opponents.setdefault(self.key(second), None)
        second_tally.opponents.setdefault(self.key(first), None)

        for own, other, tally in (
            (first, second, first_tally),
            (second, first, second_tally),
        ):
            tally.game_wins += own.game_wins
            tally.game_losses += other.game_wins
            tally.game_draws += match.game_draws

            if own.game_wins > other.game_wins:
                tally.match_wins += 1
            elif own.game_wins < other.game_wins:
                tally.match_losses += 1
            else:
                tally.match_draws += 1

    # --- Tiebreakers ---

    @staticmethod
    def _floored_opponent_average(
        tally: RecordTally,
        tallies: Dict[Hashable, RecordTally],
        fraction: Callable[[RecordTally], float],
    ) -> float:
        """Average of opponents' fractions, each floored at 33%.

        A participant with no opponents gets 0.
        """
        values = [
            max(OPPONENT_PERCENTAGE_FLOOR, fraction(tallies[opponent]))
            for opponent in tally.opponents
            if opponent in tallies
        ]
        if not values:
            return 0.0
        return sum(values) / len(values)

    def opponent_match_win_percentage(
        self, tally: RecordTally, tallies: Dict[Hashable, RecordTally]
    ) -> float:
        return self._floored_opponent_average(
            tally, tallies, lambda t: t.raw_match_win_fraction
        )

    def opponent_game_win_percentage(
        self, tally: RecordTally, tallies: Dict[Hashable, RecordTally]
    ) -> float:
        return self._floored_opponent_average(
            tally, tallies, lambda t: t.raw_game_win_fraction
        )

    # --- Standings ---

    def build_standings(self, tallies: Dict[Hashable, RecordTally]) -> List[Standing]:
        """Turn tallies into standings ranked 1..N."""
        standings = [
            Standing(
                participant=tally.participant,
                match_wins=tally.match_wins,
                match_losses=tally.match_losses,
                match_draws=tally.match_draws,
                game_wins=tally.game_wins,
                game_losses=tally.game_losses,
                game_draws=tally.game_draws,
                points=tally.points,
                opponent_match_win_percentage=self.opponent_match_win_percentage(
                    tally, tallies
                ),
                game_win_percentage=tally.raw_game_win_fraction,
                opponent_game_win_percentage=self.opponent_game_win_percentage(
                    tally, tallies
                ),
                opponent_count=len(tally.opponents),
            )
            for tally in tallies.values()
        ]

        standings.sort(key=standing_sort_key)
        for position, standing in enumerate(standings, start=1):
            standing.rank = position
        return standings

    def calculate(self, rounds: Iterable[RoundLike]) -> List[Standing]:
        """Fold ``rounds`` and return ranked standings."""
        return self.build_standings(self.tally(rounds))


def standing_sort_key(standing: Standing):
    """Sort key implementing the Swiss tiebreak order."""
    team_id = standing.participant.team_id
    return (
        -standing.points,
        -standing.opponent_match_win_percentage,
        -standing.game_win_percentage,
        -standing.opponent_game_win_percentage,
        team_id is None,
        team_id if team_id is not None else 0,
        standing.participant.username,
    )
