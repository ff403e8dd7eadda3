"""Validation utilities for Swiss League.

This module provides reusable validation functions for raw platform records.
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

import re
from typing import Any, Optional

from swissleague.constants import MISSING_ARCHETYPE_VALUES, UNKNOWN_ARCHETYPE
from swissleague.exceptions import InvalidParticipantDataException

# Emoji and dingbat blocks stripped from display names
_EMOJI_PATTERN = re.compile("[\U0001F300-\U0001F9FF]|[\u2600-\u26FF]|[\u2700-\u27BF]")
_WHITESPACE_PATTERN = re.compile(r"\s+")


class ValidationResult:
    """Result of a validation operation.

    Attributes:
        is_valid: Whether the validation passed
        error_message: Human-readable error message if invalid
        sanitized_value: Cleaned/normalized value if valid
    """

    def __init__(
        self,
        is_valid: bool,
        error_message: Optional[str] = None,
        sanitized_value: Optional[str] = None,
    ):
        self.is_valid = is_valid
        self.error_message = error_message
        self.sanitized_value = sanitized_value

    def __bool__(self) -> bool:
        """Allow using result in boolean context: if result: ..."""
        return self.is_valid

    def __repr__(self) -> str:
        if self.is_valid:
            return f"ValidationResult(VALID, {self.sanitized_value!r})"
        return f"ValidationResult(INVALID, {self.error_message!r})"


# ========== Username Validation ==========


def validate_username(username: Any) -> ValidationResult:
    """Validate a platform username.

    Args:
        username: Raw value from the source record

    Returns:
        ValidationResult with the stripped username when valid

    Example:
        >>> validate_username("  alice ").sanitized_value
        'alice'
    """
    if username is None:
        return ValidationResult(is_valid=False, error_message="Username is missing")

    if not isinstance(username, str):
        return ValidationResult(
            is_valid=False,
            error_message=f"Username must be a string: {username!r}",
        )

    username = username.strip()
    if not username:
        return ValidationResult(is_valid=False, error_message="Username is empty")

    return ValidationResult(is_valid=True, sanitized_value=username)


def validate_username_strict(username: Any) -> str:
    """Validate a username and return it or raise.

    Raises:
        InvalidParticipantDataException: If the username is missing or empty
    """
    result = validate_username(username)
    if not result.is_valid:
        raise InvalidParticipantDataException(result.error_message)
    return result.sanitized_value or ""


# ========== Display Names ==========


def clean_display_name(display_name: Optional[str]) -> str:
    """Remove emojis and collapse whitespace in a display name."""
    if not display_name:
        return ""
    cleaned = _EMOJI_PATTERN.sub("", display_name)
    return _WHITESPACE_PATTERN.sub(" ", cleaned.strip())


# ========== Archetype Labels ==========


def normalize_archetype(label: Optional[str]) -> str:
    """Map missing or placeholder archetype labels to the Unknown bucket."""
    if label is None:
        return UNKNOWN_ARCHETYPE
    label = str(label).strip()
    if label in MISSING_ARCHETYPE_VALUES:
        return UNKNOWN_ARCHETYPE
    return label


def is_known_archetype(label: Optional[str]) -> bool:
    """Return True when ``label`` names a real archetype."""
    return normalize_archetype(label) != UNKNOWN_ARCHETYPE


# ========== Numeric Fields ==========


def coerce_count(value: Any) -> int:
    """Turn an optional numeric field into an int.

    Missing values (``None``) count as 0; anything else must be numeric.

    Raises:
        ValueError: If ``value`` is present but not a whole number
    """
    if value is None:
        return 0
    try:
        return int(value)
    except TypeError as e:
        raise ValueError(f"Expected a number, got {value!r}") from e
