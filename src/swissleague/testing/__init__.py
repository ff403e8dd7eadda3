"""Testing helpers for Swiss League.

Provides a seeded random event generator for property tests and for
building sample data directories.
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

from swissleague.testing.generator import (
    GeneratedEvent,
    GeneratorConfig,
    RandomEventGenerator,
    ResultPattern,
    StrengthDistribution,
    standing_to_record,
    write_event_files,
)

__all__ = [
    "GeneratedEvent",
    "GeneratorConfig",
    "RandomEventGenerator",
    "ResultPattern",
    "StrengthDistribution",
    "standing_to_record",
    "write_event_files",
]
