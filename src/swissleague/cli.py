"""Command-line driver for computing series rankings.

Examples:
    swissleague standings 388334
    swissleague league "Fall League"
    swissleague leaderboard --top 10
    swissleague profile alice --with-rating --output alice.json
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

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from swissleague.constants import (
    DEFAULT_DATA_DIR,
    DEFAULT_DECKS_FILE,
    DEFAULT_LEADERBOARD_SIZE,
    DEFAULT_LEAGUES_FILE,
)
from swissleague.controllers import EventStore
from swissleague.exceptions import (
    FileLoadException,
    FileSaveException,
    MissingConfigurationException,
    SwissLeagueException,
)
from swissleague.models.tournament import (
    SeriesConfig,
    get_celebration_winners,
    load_deck_assignments,
    load_series_config,
)
from swissleague.rating import Rating, build_rating_leaderboard, replay_ratings
from swissleague.stats import (
    build_player_profile,
    calculate_league_totals,
    calculate_metagame_breakdown,
    has_complete_deck_data,
)
from swissleague.tournament import (
    aggregate_league_standings,
    calculate_standings_by_event,
    calculate_standings_for_event,
)
from swissleague.utils import set_log_level, setup_logger, write_text_atomic

logger = setup_logger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="swissleague",
        description="Compute Swiss standings, league tables and Elo ratings for an event series",
    )
    parser.add_argument(
        "--data-dir",
        default=DEFAULT_DATA_DIR,
        help=f"Directory with tournament_<id> folders (default: {DEFAULT_DATA_DIR})",
    )
    parser.add_argument(
        "--leagues",
        default=DEFAULT_LEAGUES_FILE,
        help=f"League configuration file (default: {DEFAULT_LEAGUES_FILE})",
    )
    parser.add_argument(
        "--decks",
        default=DEFAULT_DECKS_FILE,
        help=f"Deck assignment file (default: {DEFAULT_DECKS_FILE})",
    )
    parser.add_argument("--output", help="Write JSON here instead of standard output")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    standings = subparsers.add_parser("standings", help="Standings of one event")
    standings.add_argument("event_id", help="Event id")

    league = subparsers.add_parser("league", help="League standings")
    league.add_argument("name", nargs="?", help="League name (default: first configured)")

    subparsers.add_parser("ratings", help="Replayed Elo ratings with full history")

    leaderboard = subparsers.add_parser("leaderboard", help="Participants by current rating")
    leaderboard.add_argument(
        "--top",
        type=int,
        default=DEFAULT_LEADERBOARD_SIZE,
        help=f"Number of rows (default: {DEFAULT_LEADERBOARD_SIZE}; 0 for everyone)",
    )

    profile = subparsers.add_parser("profile", help="Profile of one participant")
    profile.add_argument("username", help="Participant username (case-insensitive)")
    profile.add_argument(
        "--with-rating", action="store_true", help="Include the replayed rating"
    )

    return parser


# --- Commands ---


def _load_config(args: argparse.Namespace) -> SeriesConfig:
    return load_series_config(args.leagues, args.decks)


def run_standings(args: argparse.Namespace) -> Any:
    store = EventStore(args.data_dir)
    event = store.load_event(args.event_id)
    if event is None:
        raise FileLoadException(f"No match data for event {args.event_id} in {args.data_dir}")

    decks = load_deck_assignments(args.decks)
    assignments = decks.for_event(event.event_id)
    standings = calculate_standings_for_event(event)
    return {
        "event_id": event.event_id,
        "name": event.name,
        "date": event.date.isoformat() if event.date else None,
        "date_display": event.date_display,
        "round_count": event.round_count,
        "standings": [s.to_dict() for s in standings],
        "celebration_winners": [
            s.participant.username for s in get_celebration_winners(standings)
        ],
        "metagame": [e.to_dict() for e in calculate_metagame_breakdown(assignments)],
        "has_complete_deck_data": has_complete_deck_data(assignments),
    }


def run_league(args: argparse.Namespace) -> Any:
    config = _load_config(args)
    if args.name:
        league = config.league(args.name)
        if league is None:
            raise MissingConfigurationException(f"No league named {args.name!r}")
    elif config.leagues:
        league = config.leagues[0]
    else:
        raise MissingConfigurationException(f"No leagues configured in {args.leagues}")

    events = EventStore(args.data_dir).load_events(league.event_ids)
    rows = aggregate_league_standings(events, league)
    totals = calculate_league_totals(calculate_standings_by_event(events), league.event_ids)
    return {
        "league": league.name,
        "event_ids": [e.event_id for e in events],
        "standings": [row.to_dict() for row in rows],
        "totals": [row.to_dict() for row in totals],
    }


def _replay_series(args: argparse.Namespace) -> Dict[str, Rating]:
    config = _load_config(args)
    events = EventStore(args.data_dir).load_events(config.all_event_ids())
    return replay_ratings(events)


def run_ratings(args: argparse.Namespace) -> Any:
    ratings = _replay_series(args)
    return {username: rating.to_dict() for username, rating in ratings.items()}


def run_leaderboard(args: argparse.Namespace) -> Any:
    ratings = _replay_series(args)
    top_n = args.top if args.top > 0 else None
    return [row.to_dict() for row in build_rating_leaderboard(ratings, top_n)]


def run_profile(args: argparse.Namespace) -> Any:
    config = _load_config(args)
    events = EventStore(args.data_dir).load_events(config.all_event_ids())
    ratings = replay_ratings(events) if args.with_rating else None
    profile = build_player_profile(
        args.username,
        events,
        calculate_standings_by_event(events),
        config,
        ratings=ratings,
    )
    return profile.to_dict()


COMMANDS = {
    "standings": run_standings,
    "league": run_league,
    "ratings": run_ratings,
    "leaderboard": run_leaderboard,
    "profile": run_profile,
}


def emit(payload: Any, output: Optional[str]) -> None:
    """Print ``payload`` as JSON, or write it atomically to ``output``."""
    text = json.dumps(payload, indent=2, ensure_ascii=False) + "\n"
    if output:
        try:
            write_text_atomic(Path(output), text)
        except OSError as e:
            raise FileSaveException(f"Could not write {output}: {e}") from e
        logger.info("Wrote %s", output)
    else:
        sys.stdout.write(text)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI.

    Returns:
        Exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        set_log_level(logging.DEBUG)

    try:
        emit(COMMANDS[args.command](args), args.output)
        return 0
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    except SwissLeagueException as e:
        logger.error("%s failed: %s", args.command, e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
