"""League and deck configuration for a series of events.

The caller loads a ``SeriesConfig`` once and passes it to whatever needs
league membership or archetype labels.
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
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

import yaml

from swissleague.constants import TOP_CUT_LEAGUE_SUFFIX, UNKNOWN_ARCHETYPE
from swissleague.exceptions import (
    InvalidConfigurationException,
    MissingConfigurationException,
)
from swissleague.utils import setup_logger
from swissleague.utils.validation import normalize_archetype

logger = setup_logger(__name__)


@dataclass
class League:
    """A named group of events.

    Attributes
    ----------
    name : str
        League name.
    event_ids : list of str
        Member events in configuration order.
    top_cut_event_id : str or None
        Single-elimination top-cut event; perfect records there are belts.
    """

    name: str
    event_ids: List[str] = field(default_factory=list)
    top_cut_event_id: Optional[str] = None

    @property
    def top_cut_name(self) -> str:
        return f"{self.name}{TOP_CUT_LEAGUE_SUFFIX}"

    def contains(self, event_id: Any) -> bool:
        """Whether ``event_id`` is a regular member event of this league."""
        return str(event_id) in self.event_ids

    def to_dict(self) -> Dict[str, Any]:
        """Serialize league to the ``leagues.yml`` entry shape."""
        data: Dict[str, Any] = {"name": self.name, "tournaments": list(self.event_ids)}
        if self.top_cut_event_id is not None:
            data["top8Tournament"] = self.top_cut_event_id
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "League":
        """Deserialize league from a ``leagues.yml`` entry."""
        if not isinstance(data, Mapping) or not data.get("name"):
            raise InvalidConfigurationException(
                f"League entry must be a mapping with a name: {data!r}"
            )
        tournaments = data.get("tournaments") or []
        if not isinstance(tournaments, list):
            raise InvalidConfigurationException(
                f"League {data['name']!r}: 'tournaments' must be a list"
            )
        top_cut = data.get("top8Tournament")
        return cls(
            name=str(data["name"]),
            event_ids=[str(t) for t in tournaments],
            top_cut_event_id=str(top_cut) if top_cut is not None else None,
        )


class DeckAssignments:
    """Self-reported archetype per (event id, username).

    Usernames are matched case-insensitively. Missing entries and the
    ``"_"`` placeholder both read back as ``"Unknown"``.
    """

    def __init__(self, assignments: Optional[Mapping[Any, Mapping[str, Any]]] = None):
        self._by_event: Dict[str, Dict[str, str]] = {}
        self._raw: Dict[str, Dict[str, Any]] = {}
        for event_id, players in (assignments or {}).items():
            if players is None:
                players = {}
            if not isinstance(players, Mapping):
                raise InvalidConfigurationException(
                    f"Deck entry for event {event_id} must be a mapping of username to archetype"
                )
            key = str(event_id)
            self._raw[key] = dict(players)
            self._by_event[key] = {
                str(username).lower(): normalize_archetype(label)
                for username, label in players.items()
            }

    def archetype(self, event_id: Any, username: str) -> str:
        """Archetype for ``username`` at ``event_id``, ``"Unknown"`` if absent."""
        players = self._by_event.get(str(event_id), {})
        return players.get(username.lower(), UNKNOWN_ARCHETYPE)

    def for_event(self, event_id: Any) -> Dict[str, Any]:
        """Raw assignments for one event as written in the config file."""
        return dict(self._raw.get(str(event_id), {}))

    def has_event(self, event_id: Any) -> bool:
        return str(event_id) in self._by_event

    def event_ids(self) -> List[str]:
        return list(self._by_event)

    def to_dict(self) -> Dict[str, Dict[str, Any]]:
        return {event_id: dict(players) for event_id, players in self._raw.items()}

    def __len__(self) -> int:
        return len(self._by_event)


@dataclass
class SeriesConfig:
    """Leagues and deck assignments for one series."""

    leagues: List[League] = field(default_factory=list)
    decks: DeckAssignments = field(default_factory=DeckAssignments)

    def league(self, name: str) -> Optional[League]:
        """League called ``name`` (case-insensitive)."""
        wanted = name.strip().lower()
        for league in self.leagues:
            if league.name.lower() == wanted:
                return league
        return None

    def league_for_event(self, event_id: Any) -> Optional[str]:
        """Name of the league an event belongs to.

        A league's top-cut event reports as ``"<league> Top 8"``.
        """
        event_id = str(event_id)
        for league in self.leagues:
            if league.contains(event_id):
                return league.name
            if league.top_cut_event_id == event_id:
                return league.top_cut_name
        return None

    def is_top_cut(self, event_id: Any) -> bool:
        event_id = str(event_id)
        return any(league.top_cut_event_id == event_id for league in self.leagues)

    def all_event_ids(self) -> List[str]:
        """Every configured event id, deduplicated, in configuration order."""
        seen: Dict[str, None] = {}
        for league in self.leagues:
            for event_id in league.event_ids:
                seen.setdefault(event_id, None)
            if league.top_cut_event_id is not None:
                seen.setdefault(league.top_cut_event_id, None)
        return list(seen)

    def to_dict(self) -> Dict[str, Any]:
        return {"leagues": [league.to_dict() for league in self.leagues]}

    @classmethod
    def from_dict(
        cls,
        data: Mapping[str, Any],
        decks: Optional[Mapping[Any, Mapping[str, Any]]] = None,
    ) -> "SeriesConfig":
        """Build a config from parsed ``leagues.yml`` and ``decks.yml`` data."""
        if not isinstance(data, Mapping):
            raise InvalidConfigurationException("League configuration must be a mapping")
        leagues = data.get("leagues") or []
        if not isinstance(leagues, list):
            raise InvalidConfigurationException("'leagues' must be a list")
        return cls(
            leagues=[League.from_dict(entry) for entry in leagues],
            decks=DeckAssignments(decks),
        )


def _read_yaml(path: Path) -> Any:
    try:
        with open(path, encoding="utf-8") as fh:
            return yaml.safe_load(fh)
    except yaml.YAMLError as e:
        raise InvalidConfigurationException(f"Invalid YAML in {path}: {e}") from e


def load_deck_assignments(decks_path: Optional[Union[str, Path]]) -> DeckAssignments:
    """Load ``decks.yml``; a missing file means no archetypes are known yet.

    Raises:
        InvalidConfigurationException: If the file is malformed
    """
    if decks_path is None:
        return DeckAssignments()
    decks_path = Path(decks_path)
    if not decks_path.is_file():
        logger.info("No deck configuration at %s; archetypes are unknown", decks_path)
        return DeckAssignments()

    decks = _read_yaml(decks_path) or {}
    if not isinstance(decks, Mapping):
        raise InvalidConfigurationException(
            f"Deck configuration {decks_path} must contain a mapping"
        )
    return DeckAssignments(decks)


def load_series_config(
    leagues_path: Union[str, Path],
    decks_path: Optional[Union[str, Path]] = None,
) -> SeriesConfig:
    """Load league and deck configuration from YAML files.

    Args:
        leagues_path: ``leagues.yml``; required
        decks_path: ``decks.yml``; optional

    Returns:
        SeriesConfig

    Raises:
        MissingConfigurationException: If the leagues file does not exist
        InvalidConfigurationException: If either file is malformed
    """
    leagues_path = Path(leagues_path)
    if not leagues_path.is_file():
        raise MissingConfigurationException(f"League configuration not found: {leagues_path}")

    config = SeriesConfig.from_dict(_read_yaml(leagues_path) or {})
    config.decks = load_deck_assignments(decks_path)
    logger.debug(
        "Loaded %d leagues and decks for %d events", len(config.leagues), len(config.decks)
    )
    return config
