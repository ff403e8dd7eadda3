"""Builders for platform-shaped records used across the test modules."""

from swissleague.models.tournament import Event, Match, Round

DEFAULT_DATE = "2025-01-06T23:00:00Z"


def player_record(username, display_name=None):
    return {"Username": username, "DisplayName": display_name or username.title()}


def competitor_record(username, team_id, game_wins=0, game_byes=None, display_name=None):
    record = {
        "Team": {"Players": [player_record(username, display_name)]},
        "TeamId": team_id,
        "GameWins": game_wins,
    }
    if game_byes is not None:
        record["GameByes"] = game_byes
    return record


def match_record(event_id, round_number, first, second, draws=0, table=None, date=DEFAULT_DATE):
    """``first`` and ``second`` are ``(username, team_id, game_wins)`` tuples."""
    return {
        "Competitors": [competitor_record(*first), competitor_record(*second)],
        "ByeReason": None,
        "RoundNumber": round_number,
        "TableNumber": table,
        "GameDraws": draws,
        "DateCreated": date,
        "TournamentId": event_id,
    }


def bye_record(event_id, round_number, username, team_id, game_byes=0, date=DEFAULT_DATE):
    return {
        "Competitors": [competitor_record(username, team_id, 0, game_byes=game_byes)],
        "ByeReason": 1,
        "RoundNumber": round_number,
        "TableNumber": None,
        "GameDraws": 0,
        "DateCreated": date,
        "TournamentId": event_id,
    }


def standing_record(username, team_id, rank, match_record_, game_record, points=None, date=DEFAULT_DATE, phase_name="Weekly"):
    mw, ml, md = match_record_
    gw, gl, gd = game_record
    return {
        "Team": {"Players": [player_record(username)]},
        "TeamId": team_id,
        "Rank": rank,
        "MatchWins": mw,
        "MatchLosses": ml,
        "MatchDraws": md,
        "GameWins": gw,
        "GameLosses": gl,
        "GameDraws": gd,
        "Points": points if points is not None else 3 * mw + md,
        "DateCreated": date,
        "PhaseName": phase_name,
    }


def build_round(records, event_id="1"):
    return Round.from_records(records, event_id=event_id)


def build_match(record):
    return Match.from_record(record)


def build_event(event_id, rounds, standings=(), date=DEFAULT_DATE):
    """``rounds`` is a list of lists of ``(first, second, draws)`` or ``("bye", user, team, games)``."""
    round_records = []
    for number, pairings in enumerate(rounds, start=1):
        records = []
        for table, pairing in enumerate(pairings, start=1):
            if pairing[0] == "bye":
                _, username, team_id, games = pairing
                records.append(bye_record(event_id, number, username, team_id, games, date=date))
            else:
                first, second, draws = pairing
                records.append(
                    match_record(event_id, number, first, second, draws=draws, table=table, date=date)
                )
        round_records.append(records)
    return Event.from_records(event_id, round_records, list(standings))
