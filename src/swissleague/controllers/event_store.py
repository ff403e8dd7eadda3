"""Loading events from the scraped on-disk corpus.

Layout written by the scraper::

    <data_dir>/tournament_<id>/Round_<n>_Matches.json
    <data_dir>/tournament_<id>/Round_<n>_Standings.json
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

import json
import re
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

from swissleague.constants import (
    DEFAULT_DATA_DIR,
    EVENT_DIR_PREFIX,
    MATCH_FILE_PATTERN,
    STANDINGS_FILE_PATTERN,
)
from swissleague.exceptions import FileLoadException, InvalidMatchException
from swissleague.models.tournament import Event
from swissleague.utils import setup_logger

logger = setup_logger(__name__)

_MATCH_FILE_RE = re.compile(MATCH_FILE_PATTERN)
_STANDINGS_FILE_RE = re.compile(STANDINGS_FILE_PATTERN)


class EventStore:
    """Reads events from a data directory.

    Args:
        data_dir: Directory holding one ``tournament_<id>`` folder per event
    """

    def __init__(self, data_dir: Union[str, Path] = DEFAULT_DATA_DIR):
        self.data_dir = Path(data_dir)

    def event_dir(self, event_id: Any) -> Path:
        return self.data_dir / f"{EVENT_DIR_PREFIX}{event_id}"

    @staticmethod
    def _numbered_files(directory: Path, pattern: re.Pattern) -> List[Path]:
        """Files matching ``pattern`` ordered by their round number."""
        numbered = []
        for path in directory.iterdir():
            match = pattern.match(path.name)
            if match:
                numbered.append((int(match.group(1)), path))
        numbered.sort(key=lambda item: item[0])
        return [path for _, path in numbered]

    @staticmethod
    def _read_records(path: Path) -> List[Dict[str, Any]]:
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise FileLoadException(f"Could not read {path}: {e}") from e
        if not isinstance(data, list):
            raise FileLoadException(f"{path} must contain a JSON list of records")
        return data

    def available_event_ids(self) -> List[str]:
        """Ids of every event folder in the data directory, sorted."""
        if not self.data_dir.is_dir():
            return []
        return sorted(
            path.name[len(EVENT_DIR_PREFIX):]
            for path in self.data_dir.iterdir()
            if path.is_dir() and path.name.startswith(EVENT_DIR_PREFIX)
        )

    def load_event(self, event_id: Any) -> Optional[Event]:
        """Load one event, or None when it has no match data on disk.

        Raises:
            FileLoadException: If a round file is unreadable or malformed
            InvalidMatchException: If a match record is malformed
            InvalidParticipantDataException: If a record lacks a username
        """
        event_id = str(event_id)
        directory = self.event_dir(event_id)
        if not directory.is_dir():
            logger.warning("Event %s not found in %s; skipping", event_id, self.data_dir)
            return None

        match_files = self._numbered_files(directory, _MATCH_FILE_RE)
        if not match_files:
            logger.warning("Event %s has no match files; skipping", event_id)
            return None

        round_records = [self._read_records(path) for path in match_files]

        standings_files = self._numbered_files(directory, _STANDINGS_FILE_RE)
        standing_records = self._read_records(standings_files[-1]) if standings_files else []

        try:
            event = Event.from_records(event_id, round_records, standing_records)
        except ValueError as e:
            raise InvalidMatchException(f"Event {event_id} has invalid data: {e}") from e

        if event.date is None:
            logger.warning("Event %s has no recorded date", event_id)
        logger.debug(
            "Loaded event %s: %d rounds, %d standings",
            event_id,
            event.round_count,
            len(event.final_standings),
        )
        return event

    def load_events(self, event_ids: Iterable[Any]) -> List[Event]:
        """Load events in request order, skipping ids with no data."""
        events = []
        requested = 0
        for event_id in event_ids:
            requested += 1
            event = self.load_event(event_id)
            if event is not None:
                events.append(event)
        if len(events) < requested:
            logger.warning("Loaded %d of %d requested events", len(events), requested)
        return events
