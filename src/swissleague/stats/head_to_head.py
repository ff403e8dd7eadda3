"""Head-to-head records of one participant against each opponent."""

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

from collections import deque
from dataclasses import dataclass, field
from typing import Any, Deque, Dict, Iterable, List, Optional

from swissleague.constants import (
    RECENT_RESULTS_LIMIT,
    RESULT_DRAW,
    RESULT_LOSS,
    RESULT_WIN,
)
from swissleague.models.participant import Participant
from swissleague.models.tournament import DeckAssignments, Event
from swissleague.stats.records import RecordTotals


@dataclass
class HeadToHeadMatch:
    """One meeting between the focal participant and an opponent."""

    event_id: str
    date_display: str
    round_number: int
    result: str
    player_game_wins: int
    opponent_game_wins: int
    game_draws: int
    player_deck: Optional[str] = None
    opponent_deck: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "event_id": self.event_id,
            "date_display": self.date_display,
            "round_number": self.round_number,
            "result": self.result,
            "player_game_wins": self.player_game_wins,
            "opponent_game_wins": self.opponent_game_wins,
            "game_draws": self.game_draws,
            "player_deck": self.player_deck,
            "opponent_deck": self.opponent_deck,
        }


@dataclass
class HeadToHeadRecord:
    """Summed record against one opponent.

    Attributes
    ----------
    opponent : Participant
        The opponent as last seen.
    totals : RecordTotals
        Match and game counts from the focal participant's side.
    recent_results : deque of str
        Last five results (``"W"``/``"L"``/``"D"``), oldest first.
    matches : list of HeadToHeadMatch
        Every meeting in source order.
    """

    opponent: Participant
    totals: RecordTotals = field(default_factory=RecordTotals)
    recent_results: Deque[str] = field(
        default_factory=lambda: deque(maxlen=RECENT_RESULTS_LIMIT)
    )
    matches: List[HeadToHeadMatch] = field(default_factory=list)

    @property
    def matches_played(self) -> int:
        return self.totals.matches_played

    def to_dict(self) -> Dict[str, Any]:
        return {
            "opponent_username": self.opponent.username,
            "opponent_display_name": self.opponent.display_name,
            "matches_played": self.matches_played,
            "match_wins": self.totals.match_wins,
            "match_losses": self.totals.match_losses,
            "match_draws": self.totals.match_draws,
            "match_win_percentage": self.totals.match_win_percentage,
            "game_wins": self.totals.game_wins,
            "game_losses": self.totals.game_losses,
            "game_draws": self.totals.game_draws,
            "game_win_percentage": self.totals.game_win_percentage,
            "last_five_results": list(self.recent_results),
            "matches": [m.to_dict() for m in self.matches],
        }


def calculate_head_to_head(
    username: str,
    events: Iterable[Event],
    decks: Optional[DeckAssignments] = None,
) -> List[HeadToHeadRecord]:
    """Head-to-head records for ``username`` against every opponent faced.

    Byes are skipped. Matches are visited event by event in the order given,
    rounds ascending, so the trailing window holds the most recent results
    when ``events`` is chronological.

    Args:
        username: Focal participant (case-insensitive)
        events: Events to scan
        decks: Optional archetype assignments for the match details

    Returns:
        One record per opponent, most-played opponents first
    """
    records: Dict[str, HeadToHeadRecord] = {}

    for event in events:
        for match in event.iter_matches():
            if match.is_bye:
                continue
            own = match.competitor_for(username)
            if own is None:
                continue
            other = match.opponent_of(username)

            record = records.get(other.identity)
            if record is None:
                record = HeadToHeadRecord(opponent=other.participant)
                records[other.identity] = record
            else:
                record.opponent = other.participant

            totals = record.totals
            if own.game_wins > other.game_wins:
                totals.match_wins += 1
                result = RESULT_WIN
            elif own.game_wins < other.game_wins:
                totals.match_losses += 1
                result = RESULT_LOSS
            else:
                totals.match_draws += 1
                result = RESULT_DRAW

            totals.game_wins += own.game_wins
            totals.game_losses += other.game_wins
            totals.game_draws += match.game_draws

            record.recent_results.append(result)
            record.matches.append(
                HeadToHeadMatch(
                    event_id=event.event_id,
                    date_display=event.date_display,
                    round_number=match.round_number,
                    result=result,
                    player_game_wins=own.game_wins,
                    opponent_game_wins=other.game_wins,
                    game_draws=match.game_draws,
                    player_deck=decks.archetype(event.event_id, own.identity) if decks else None,
                    opponent_deck=(
                        decks.archetype(event.event_id, other.identity) if decks else None
                    ),
                )
            )

    # Stable sort keeps first-meeting order among equally played opponents
    return sorted(records.values(), key=lambda r: -r.matches_played)
