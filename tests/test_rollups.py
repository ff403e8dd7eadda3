import pytest

from swissleague.models.tournament import (
    DeckAssignments,
    League,
    SeriesConfig,
    Standing,
)
from swissleague.stats import (
    build_player_profile,
    calculate_archetype_rollup,
    calculate_deck_stats,
    calculate_event_performances,
    calculate_head_to_head,
    calculate_league_totals,
    calculate_metagame_breakdown,
    calculate_participant_league_stats,
    count_trophies_and_belts,
    has_complete_deck_data,
)
from swissleague.exceptions import UnknownParticipantException
from swissleague.tournament import calculate_standings_by_event

from record_builders import build_event, standing_record


def standing(username, team_id, rank, match_record, game_record):
    return Standing.from_record(standing_record(username, team_id, rank, match_record, game_record))


def standings_by_event():
    return {
        "900": [
            standing("alice", 1, 1, (3, 0, 0), (6, 1, 0)),
            standing("bob", 2, 2, (2, 1, 0), (4, 3, 0)),
            standing("carl", 3, 3, (0, 3, 0), (1, 6, 0)),
        ],
        "901": [
            standing("bob", 12, 1, (3, 0, 0), (6, 0, 0)),
            standing("alice", 11, 2, (1, 1, 1), (3, 3, 1)),
        ],
        "902": [
            standing("alice", 21, 1, (3, 0, 0), (6, 2, 0)),
            standing("bob", 22, 2, (1, 2, 0), (3, 4, 0)),
        ],
    }


def series_config(decks=None):
    return SeriesConfig(
        leagues=[League(name="Spring", event_ids=["900", "901"], top_cut_event_id="902")],
        decks=DeckAssignments(decks),
    )


# ========== League totals ==========


def test_league_totals_sum_and_rank():
    rows = calculate_league_totals(standings_by_event(), ["900", "901"])
    assert [r.participant.username for r in rows] == ["bob", "alice", "carl"]
    assert [r.rank for r in rows] == [1, 2, 3]

    bob = rows[0]
    assert bob.totals.points == 15
    assert bob.totals.events == 2
    assert bob.totals.match_record == "5-1-0"
    assert rows[1].totals.points == 13


def test_league_totals_skip_missing_events():
    rows = calculate_league_totals(standings_by_event(), ["900", "999"])
    assert [r.participant.username for r in rows] == ["alice", "bob", "carl"]
    assert rows[0].to_dict()["events"] == 1


def test_participant_league_stats_split_top_cut():
    stats = calculate_participant_league_stats("ALICE", standings_by_event(), series_config())
    assert [s.league_name for s in stats] == ["Spring", "Spring Top 8"]
    assert stats[0].totals.events == 2
    assert stats[0].totals.match_record == "4-1-1"
    assert stats[1].totals.events == 1


# ========== Trophies and belts ==========


def test_top_cut_perfect_record_is_a_belt():
    counts = count_trophies_and_belts(standings_by_event(), series_config())
    assert counts["alice"].trophies == 1
    assert counts["alice"].belts == 1
    assert counts["bob"].trophies == 1
    assert counts["bob"].belts == 0
    assert "carl" not in counts


# ========== Decks ==========


def test_deck_stats_per_archetype():
    decks = DeckAssignments({"900": {"alice": "Burn"}, "901": {"alice": "Burn"}, "902": {"Alice": "_"}})
    stats = calculate_deck_stats("alice", standings_by_event(), decks)
    assert [s.archetype for s in stats] == ["Burn", "Unknown"]
    assert stats[0].events == 2
    assert stats[0].trophies == 1
    assert stats[0].totals.match_record == "4-1-1"
    assert stats[1].trophies == 1


def test_archetype_rollup_over_everyone():
    decks = DeckAssignments({"900": {"alice": "Burn", "bob": "Control", "carl": "Burn"}})
    rollup = calculate_archetype_rollup(standings_by_event(), decks, event_ids=["900"])
    by_deck = {s.archetype: s for s in rollup}
    assert by_deck["Burn"].totals.match_record == "3-3-0"
    assert by_deck["Control"].totals.match_record == "2-1-0"
    # Both archetypes played in one event; Control has the better rate
    assert [s.archetype for s in rollup] == ["Control", "Burn"]


def test_metagame_breakdown():
    entries = calculate_metagame_breakdown(
        {"a": "Burn", "b": "Burn", "c": "Control", "d": "_"}
    )
    assert [(e.archetype, e.count) for e in entries] == [("Burn", 2), ("Control", 1)]
    assert entries[0].percentage == pytest.approx(50.0)
    assert entries[1].percentage == pytest.approx(25.0)


def test_metagame_breakdown_empty():
    assert calculate_metagame_breakdown({}) == []


def test_complete_deck_data():
    assert has_complete_deck_data({"a": "Burn"})
    assert not has_complete_deck_data({"a": "Burn", "b": "_"})
    assert not has_complete_deck_data({})
    assert not has_complete_deck_data(None)


# ========== Head to head ==========


def series_events():
    first = build_event(
        "910",
        [
            [(("alice", 1, 2), ("bob", 2, 1), 0), ("bye", "carl", 3, 2)],
            [(("carl", 3, 2), ("alice", 1, 0), 0), ("bye", "bob", 2, 2)],
        ],
        date="2025-02-03T23:00:00Z",
    )
    second = build_event(
        "911",
        [[(("bob", 5, 1), ("alice", 6, 1), 1)]],
        date="2025-02-10T23:00:00Z",
    )
    return [first, second]


def test_head_to_head_records():
    records = calculate_head_to_head("Alice", series_events())
    assert [r.opponent.username for r in records] == ["bob", "carl"]

    bob = records[0]
    assert bob.matches_played == 2
    assert bob.totals.match_record == "1-0-1"
    assert bob.totals.game_record == "3-2-1"
    assert list(bob.recent_results) == ["W", "D"]
    assert bob.opponent.team_id == 5

    carl = records[1]
    assert carl.totals.match_losses == 1
    assert carl.to_dict()["last_five_results"] == ["L"]


def test_head_to_head_keeps_last_five():
    rounds = [[(("alice", 1, 2), ("bob", 2, 0), 0)] for _ in range(4)]
    rounds += [[(("alice", 1, 0), ("bob", 2, 2), 0)] for _ in range(3)]
    (record,) = calculate_head_to_head("alice", [build_event("920", rounds)])
    assert record.matches_played == 7
    assert list(record.recent_results) == ["W", "W", "L", "L", "L"]
    assert len(record.matches) == 7


def test_head_to_head_match_decks():
    decks = DeckAssignments({"911": {"alice": "Burn"}})
    records = calculate_head_to_head("alice", series_events(), decks)
    latest = records[0].matches[-1]
    assert latest.player_deck == "Burn"
    assert latest.opponent_deck == "Unknown"


# ========== Performances and profiles ==========


def test_event_performances_newest_first():
    events = series_events()
    standings = calculate_standings_by_event(events)
    rows = calculate_event_performances("alice", events, standings)
    assert [r.event_id for r in rows] == ["911", "910"]
    assert rows[1].round_count == 2
    assert rows[1].player_count == 3
    assert rows[1].date_display == "February 3, 2025"
    assert rows[0].deck is None


def test_player_profile():
    events = series_events()
    config = SeriesConfig(
        leagues=[League(name="Winter", event_ids=["910", "911"])],
        decks=DeckAssignments({"910": {"alice": "Burn"}}),
    )
    profile = build_player_profile("ALICE", events, calculate_standings_by_event(events), config)

    assert profile.username == "alice"
    assert profile.profile_slug == "alice"
    assert profile.overall.totals.events == 2
    assert profile.overall.totals.match_record == "1-1-1"
    assert profile.overall.trophies == 0
    assert [s.league_name for s in profile.league_stats] == ["Winter"]
    assert {s.archetype for s in profile.deck_stats} == {"Burn", "Unknown"}
    assert [p.event_id for p in profile.performances] == ["911", "910"]

    data = profile.to_dict()
    assert "rating" not in data
    assert data["head_to_head"][0]["opponent_username"] == "bob"


def test_unknown_participant_has_no_profile():
    events = series_events()
    with pytest.raises(UnknownParticipantException):
        build_player_profile(
            "nobody", events, calculate_standings_by_event(events), SeriesConfig()
        )
