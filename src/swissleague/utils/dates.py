"""Timestamp helpers for platform records."""

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

from datetime import date, datetime, timezone
from typing import Any, Optional

from dateutil import parser as date_parser


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp from a platform record.

    Naive timestamps are taken to be UTC so that every parsed value can be
    compared with every other one.

    Args:
        value: ISO string, datetime, or None

    Returns:
        Timezone-aware datetime, or None when ``value`` is empty

    Raises:
        ValueError: If ``value`` is a non-empty string that is not ISO-8601
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        parsed = value
    else:
        parsed = date_parser.isoparse(str(value))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def format_long_date(value: Optional[date]) -> str:
    """Format a date as e.g. ``"January 15, 2025"``; empty when unknown."""
    if value is None:
        return ""
    return f"{value.strftime('%B')} {value.day}, {value.year}"
