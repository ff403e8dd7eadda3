"""Exceptions for use in Swiss League"""

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


# ========== Base Application Exception ==========


class SwissLeagueException(Exception):
    """Base exception for all Swiss League errors.

    All custom exceptions in the package inherit from this class.
    This enables catching all application-specific errors with a single except clause.
    """

    pass


# ========== Input Exceptions ==========


class InputException(SwissLeagueException):
    """Base exception for malformed source records."""

    pass


class InvalidParticipantDataException(InputException):
    """Raised when a record has no resolvable participant identity."""

    pass


class InvalidMatchException(InputException):
    """Raised when a match does not have the participants its kind requires."""

    pass


class InvalidStandingException(InputException):
    """Raised when a standings row carries a non-numeric count or percentage."""

    pass


class EmptyInputException(InputException):
    """Raised when a structure that needs at least one item is built from nothing."""

    pass


class UnknownParticipantException(InputException):
    """Raised when a username does not appear in any loaded event."""

    pass


# ========== Rating Exceptions ==========


class RatingException(SwissLeagueException):
    """Base exception for rating calculation errors."""

    pass


class InvalidProbabilityException(RatingException):
    """Raised when a probability lies outside the open interval (0, 1)."""

    pass


# ========== Configuration Exceptions ==========


class ConfigurationException(SwissLeagueException):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when configuration data is invalid."""

    pass


class MissingConfigurationException(ConfigurationException):
    """Raised when required configuration is missing."""

    pass


# ========== File/Resource Exceptions ==========


class ResourceException(SwissLeagueException):
    """Base exception for resource-related errors."""

    pass


class FileLoadException(ResourceException):
    """Raised when a file cannot be loaded."""

    pass


class FileSaveException(ResourceException):
    """Raised when a file cannot be saved."""

    pass
