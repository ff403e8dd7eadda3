import logging

import pytest

from swissleague.exceptions import InvalidMatchException
from swissleague.rating import (
    Rating,
    RatingHistoryEntry,
    RatingReplay,
    build_rating_leaderboard,
    collect_rated_matches,
    determine_match_result,
    extract_participants,
    replay_ratings,
)
from swissleague.testing import GeneratorConfig, RandomEventGenerator

from record_builders import build_event, build_match, bye_record, match_record


def early_event():
    return build_event(
        "1000",
        [
            [(("alice", 1, 2), ("bob", 2, 0), 0), ("bye", "carl", 3, 2)],
            [(("carl", 3, 2), ("alice", 1, 1), 0), ("bye", "bob", 2, 2)],
        ],
        date="2025-01-06T23:00:00Z",
    )


def late_event():
    return build_event(
        "1001",
        [[(("bob", 7, 1), ("carl", 8, 1), 1)]],
        date="2025-01-13T23:00:00Z",
    )


def test_replay_is_chronological_regardless_of_input_order():
    ratings = replay_ratings([late_event(), early_event()])
    alice = ratings["alice"]
    assert [e.event_id for e in alice.history] == ["1000", "1000"]
    # First rated match is alice over bob, both unrated
    assert alice.history[0].rating_before == 1500
    assert alice.history[0].rating_after == 1516
    assert ratings["bob"].history[0].rating_after == 1484


def test_byes_are_not_rated():
    ratings = replay_ratings([early_event()])
    assert ratings["carl"].matches_played == 1
    assert ratings["bob"].matches_played == 1
    assert all(e.opponent != "" for r in ratings.values() for e in r.history)


def test_history_is_contiguous():
    ratings = replay_ratings([early_event(), late_event()])
    for rating in ratings.values():
        previous = rating.starting_rating
        for entry in rating.history:
            assert entry.rating_before == previous
            assert entry.rating_after == entry.rating_before + entry.rating_change
            previous = entry.rating_after
        assert rating.current_rating == previous


def test_history_entries_describe_the_match():
    ratings = replay_ratings([early_event(), late_event()])
    entry = ratings["carl"].history[-1]
    assert entry.event_id == "1001"
    assert entry.event_date == "2025-01-13"
    assert entry.round_number == 1
    assert entry.opponent == "bob"
    assert entry.result == "D"

    alice_loss = ratings["alice"].history[1]
    assert alice_loss.result == "L"
    assert alice_loss.opponent == "carl"
    assert alice_loss.round_number == 2


def test_peak_includes_starting_rating():
    ratings = replay_ratings([early_event()])
    assert ratings["bob"].peak_rating == 1500
    assert not ratings["bob"].is_at_peak
    assert ratings["alice"].peak_rating == 1516


def test_replay_is_deterministic():
    generator = RandomEventGenerator(GeneratorConfig(seed=42))
    events = [g.to_event() for g in generator.generate_series(4)]
    first = {u: r.to_dict() for u, r in replay_ratings(events).items()}
    second = {u: r.to_dict() for u, r in replay_ratings(list(reversed(events))).items()}
    assert first == second


def test_same_day_events_replay_identically():
    generator = RandomEventGenerator(GeneratorConfig(seed=17, days_between_events=0))
    events = [g.to_event() for g in generator.generate_series(3)]
    assert len({e.date for e in events}) == 1
    first = {u: r.to_dict() for u, r in replay_ratings(events).items()}
    second = {u: r.to_dict() for u, r in replay_ratings(events).items()}
    assert first == second
    order = [(m.event_id, m.round_number) for m in collect_rated_matches(events)]
    assert [number for _, number in order] == sorted(number for _, number in order)


def test_same_day_events_interleave_by_round():
    morning = build_event(
        "2000",
        [[(("alice", 1, 2), ("bob", 2, 0), 0)], [(("alice", 1, 2), ("carl", 3, 1), 0)]],
        date="2025-02-01T01:00:00Z",
    )
    evening = build_event(
        "2001", [[(("dave", 4, 2), ("erin", 5, 0), 0)]], date="2025-02-01T20:00:00Z"
    )
    rated = collect_rated_matches([morning, evening])
    assert [(m.event_id, m.round_number) for m in rated] == [
        ("2000", 1),
        ("2001", 1),
        ("2000", 2),
    ]
    # Within one day and round, the order the events were given decides
    swapped = collect_rated_matches([evening, morning])
    assert [(m.event_id, m.round_number) for m in swapped] == [
        ("2001", 1),
        ("2000", 1),
        ("2000", 2),
    ]


def test_event_day_is_the_utc_date():
    event = build_event(
        "2002", [[(("alice", 1, 2), ("bob", 2, 0), 0)]], date="2025-02-01T23:30:00-05:00"
    )
    (rated,) = collect_rated_matches([event])
    assert rated.event_date_label == "2025-02-02"
    ratings = replay_ratings([event])
    assert ratings["alice"].history[0].event_date == "2025-02-02"


def test_replay_is_zero_sum():
    generator = RandomEventGenerator(
        GeneratorConfig(seed=8, players_per_event=13, days_between_events=0)
    )
    events = [g.to_event() for g in generator.generate_series(5)]
    replay = RatingReplay()
    for rated in collect_rated_matches(events):
        replay.apply(rated)
        assert replay.total_rating == replay.participant_count * 1500


def test_ratings_follow_usernames_across_per_event_ids():
    ratings = replay_ratings([early_event(), late_event()])
    bob = ratings["bob"]
    assert bob.matches_played == 2
    assert bob.history[1].rating_before == bob.history[0].rating_after


def test_undated_events_are_rated_last(caplog):
    undated = build_event(
        "1002", [[(("alice", 1, 0), ("bob", 2, 2), 0)]], date=None
    )
    assert undated.date is None
    with caplog.at_level(logging.WARNING):
        ratings = replay_ratings([undated, early_event()])
    assert [e.event_id for e in ratings["alice"].history] == ["1000", "1000", "1002"]
    assert ratings["alice"].history[-1].event_date is None
    assert "1002" in caplog.text


def test_custom_starting_rating_and_k_factor():
    ratings = replay_ratings([late_event()], starting_rating=1200, k_factor=16)
    assert ratings["bob"].starting_rating == 1200
    assert ratings["bob"].current_rating == 1200


def test_determine_match_result():
    match = build_match(match_record("1", 1, ("alice", 1, 2), ("bob", 2, 1)))
    assert determine_match_result(match, "alice") == "win"
    assert determine_match_result(match, "bob") == "loss"
    draw = build_match(match_record("1", 1, ("alice", 1, 0), ("bob", 2, 0)))
    assert determine_match_result(draw, "bob") == "draw"
    with pytest.raises(InvalidMatchException):
        determine_match_result(match, "carl")


def test_extract_participants_rejects_byes():
    with pytest.raises(InvalidMatchException):
        extract_participants(build_match(bye_record("1", 1, "carl", 3)))


def test_leaderboard_orders_by_current_rating():
    ratings = replay_ratings([early_event(), late_event()])
    rows = build_rating_leaderboard(ratings)
    assert [row.rank for row in rows] == list(range(1, len(rows) + 1))
    values = [row.rating.current_rating for row in rows]
    assert values == sorted(values, reverse=True)
    assert len(build_rating_leaderboard(ratings, top_n=2)) == 2
    assert rows[0].to_dict()["username"] == rows[0].rating.username


def test_leaderboard_ties_break_on_username():
    ratings = {
        "zed": Rating(username="zed"),
        "amy": Rating(username="amy"),
    }
    assert [row.rating.username for row in build_rating_leaderboard(ratings)] == ["amy", "zed"]


def test_rating_round_trips_through_dict():
    entry = RatingHistoryEntry(
        event_id="1",
        event_date="2025-01-06",
        round_number=1,
        opponent="bob",
        result="W",
        rating_before=1500,
        rating_after=1516,
        rating_change=16,
    )
    rating = Rating(username="alice", display_name="Alice", history=[entry])
    restored = Rating.from_dict(rating.to_dict())
    assert restored == rating
    assert restored.to_dict()["current_rating"] == 1516
