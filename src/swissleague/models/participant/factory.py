"""Factory for creating Participant objects from platform records.

Every external record shape (raw player, match competitor, standing row)
has one constructor here. All of them fail the same way: an
``InvalidParticipantDataException`` naming what was missing.
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

from typing import Any, Mapping, Optional

from swissleague.exceptions import InvalidParticipantDataException
from swissleague.models.participant.base_participant import Participant
from swissleague.utils import setup_logger
from swissleague.utils.validation import clean_display_name, validate_username_strict

logger = setup_logger(__name__)


class ParticipantFactory:
    """Builds validated Participant instances from raw platform data.

    Example:
        >>> factory = ParticipantFactory()
        >>> factory.from_player_record({"Username": "alice", "DisplayName": "Alice"})
        Participant(username='alice', display_name='Alice', team_id=None)
    """

    def from_player_record(
        self, record: Optional[Mapping[str, Any]], team_id: Optional[int] = None
    ) -> Participant:
        """Create a Participant from a raw player record.

        Args:
            record: Mapping with ``Username`` and optionally ``DisplayName``
                and ``TeamId``
            team_id: Per-event id to use when the record does not carry one

        Returns:
            Participant instance

        Raises:
            InvalidParticipantDataException: If the username is missing or
                empty, or the per-event id is not an integer
        """
        if not isinstance(record, Mapping):
            raise InvalidParticipantDataException(
                f"Player record must be a mapping, got {type(record).__name__}"
            )

        username = validate_username_strict(record.get("Username"))

        display_name = clean_display_name(record.get("DisplayName")) or username

        record_team_id = record.get("TeamId")
        resolved_team_id = record_team_id if record_team_id is not None else team_id

        if resolved_team_id is not None:
            try:
                resolved_team_id = int(resolved_team_id)
            except (TypeError, ValueError) as e:
                raise InvalidParticipantDataException(
                    f"Participant {username!r} has a non-numeric TeamId: {resolved_team_id!r}"
                ) from e

        return Participant(
            username=username,
            display_name=display_name,
            team_id=resolved_team_id,
        )

    def from_competitor_record(self, competitor: Optional[Mapping[str, Any]]) -> Participant:
        """Create a Participant from a match competitor record.

        Raises:
            InvalidParticipantDataException: If the competitor has no player
        """
        player = self._first_team_player(competitor, "Competitor")
        return self.from_player_record(player, team_id=competitor.get("TeamId"))

    def from_standing_record(self, standing: Optional[Mapping[str, Any]]) -> Participant:
        """Create a Participant from a standings row.

        Raises:
            InvalidParticipantDataException: If the standing has no player
        """
        player = self._first_team_player(standing, "Standing")
        return self.from_player_record(player, team_id=standing.get("TeamId"))

    @staticmethod
    def _first_team_player(
        record: Optional[Mapping[str, Any]], kind: str
    ) -> Mapping[str, Any]:
        if not isinstance(record, Mapping):
            raise InvalidParticipantDataException(
                f"{kind} data is missing player information"
            )
        team = record.get("Team")
        players = team.get("Players") if isinstance(team, Mapping) else None
        if not players:
            raise InvalidParticipantDataException(
                f"{kind} data is missing player information"
            )
        return players[0]


# Module-level convenience functions
_default_factory = ParticipantFactory()


def create_participant(
    record: Optional[Mapping[str, Any]], team_id: Optional[int] = None
) -> Participant:
    """Create a Participant from a raw player record using the default factory."""
    return _default_factory.from_player_record(record, team_id=team_id)


def create_participant_from_competitor(
    competitor: Optional[Mapping[str, Any]],
) -> Participant:
    """Create a Participant from a match competitor using the default factory."""
    return _default_factory.from_competitor_record(competitor)


def create_participant_from_standing(
    standing: Optional[Mapping[str, Any]],
) -> Participant:
    """Create a Participant from a standings row using the default factory."""
    return _default_factory.from_standing_record(standing)
