"""A tournament participant identified by a stable platform username."""

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
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class Participant:
    """Represents one participant as seen in a single source record.

    ``username`` is the only key that may join records across events.
    ``team_id`` is reassigned by the platform every event and is kept as
    event-scoped display metadata only.

    Attributes:
        username: Stable platform username (case preserved)
        display_name: Cleaned display label
        team_id: Per-event numeric id, or None when unknown
    """

    username: str
    display_name: str
    team_id: Optional[int] = None

    @property
    def key(self) -> str:
        """Lowercased username used for case-insensitive lookups."""
        return self.username.lower()

    def matches(self, username: str) -> bool:
        """Check whether this participant has ``username`` (case-insensitive)."""
        return self.key == username.strip().lower()

    @property
    def profile_slug(self) -> str:
        """Path component for this participant's profile page."""
        return self.key

    def to_dict(self) -> Dict[str, Any]:
        """Serialize participant to dictionary."""
        return {
            "username": self.username,
            "display_name": self.display_name,
            "team_id": self.team_id,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Participant":
        """Deserialize participant from dictionary."""
        return cls(
            username=data["username"],
            display_name=data.get("display_name") or data["username"],
            team_id=data.get("team_id"),
        )

    def __str__(self) -> str:
        return self.display_name or self.username
