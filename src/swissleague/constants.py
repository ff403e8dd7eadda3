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

# --- Constants ---
PACKAGE_LOGGER_NAME = "swissleague"

# Swiss scoring
POINTS_PER_MATCH_WIN = 3
POINTS_PER_MATCH_DRAW = 1

# A drawn match or game counts as half a win in every win percentage
DRAW_WEIGHT = 0.5

# Opponent percentages below this value are raised to it before averaging
OPPONENT_PERCENTAGE_FLOOR = 0.33

# Rating replay
DEFAULT_STARTING_RATING = 1500
DEFAULT_K_FACTOR = 32
ELO_SCALE = 400

# Match outcomes (from one participant's perspective)
OUTCOME_WIN = "win"
OUTCOME_LOSS = "loss"
OUTCOME_DRAW = "draw"

# Single-letter result codes used in histories and head-to-head windows
RESULT_WIN = "W"
RESULT_LOSS = "L"
RESULT_DRAW = "D"

OUTCOME_TO_RESULT = {
    OUTCOME_WIN: RESULT_WIN,
    OUTCOME_LOSS: RESULT_LOSS,
    OUTCOME_DRAW: RESULT_DRAW,
}

ACTUAL_SCORES = {
    OUTCOME_WIN: 1.0,
    OUTCOME_LOSS: 0.0,
    OUTCOME_DRAW: 0.5,
}

# Head-to-head trailing window
RECENT_RESULTS_LIMIT = 5

# A 3-0-0 finish is a trophy (regular event) or a belt (top-cut event)
PERFECT_RECORD = (3, 0, 0)

# Archetype labels
UNKNOWN_ARCHETYPE_SENTINEL = "_"
UNKNOWN_ARCHETYPE = "Unknown"
MISSING_ARCHETYPE_VALUES = (UNKNOWN_ARCHETYPE_SENTINEL, "null", "")

TOP_CUT_LEAGUE_SUFFIX = " Top 8"

# On-disk corpus layout written by the scraper
EVENT_DIR_PREFIX = "tournament_"
MATCH_FILE_PATTERN = r"^Round_(\d+)_Matches\.json$"
STANDINGS_FILE_PATTERN = r"^Round_(\d+)_Standings\.json$"

DEFAULT_DATA_DIR = "output"
DEFAULT_LEAGUES_FILE = "leagues.yml"
DEFAULT_DECKS_FILE = "decks.yml"
DEFAULT_LEADERBOARD_SIZE = 16

# Best-of-three match format
GAMES_TO_WIN_MATCH = 2
MAX_GAMES_PER_MATCH = 3
BYE_RESULT_LABEL = "BYE"
PENDING_RESULT_LABEL = "-"
