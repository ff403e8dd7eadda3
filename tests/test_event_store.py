import json
import logging

import pytest

from swissleague.controllers import EventStore
from swissleague.exceptions import FileLoadException, InvalidMatchException
from swissleague.testing import GeneratorConfig, RandomEventGenerator, write_event_files

from record_builders import bye_record, match_record, standing_record


def write_json(path, data):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data), encoding="utf-8")


def test_load_event_from_round_files(tmp_path):
    directory = tmp_path / "tournament_388334"
    write_json(
        directory / "Round_1_Matches.json",
        [match_record("388334", 1, ("alice", 1, 2), ("bob", 2, 0), date="2025-01-06T23:05:00Z")],
    )
    write_json(
        directory / "Round_2_Matches.json",
        [match_record("388334", 2, ("bob", 2, 2), ("alice", 1, 1), date="2025-01-07T00:05:00Z")],
    )
    write_json(
        directory / "Round_2_Standings.json",
        [
            standing_record("alice", 1, 1, (1, 1, 0), (3, 2, 0), phase_name="Weekly Open"),
            standing_record("bob", 2, 2, (1, 1, 0), (2, 3, 0), phase_name="Weekly Open"),
        ],
    )

    event = EventStore(tmp_path).load_event(388334)
    assert event.event_id == "388334"
    assert event.name == "Weekly Open"
    assert event.round_count == 2
    assert event.date.isoformat() == "2025-01-06T23:05:00+00:00"
    assert event.date_display == "January 6, 2025"
    assert [s.participant.username for s in event.final_standings] == ["alice", "bob"]


def test_rounds_order_numerically(tmp_path):
    directory = tmp_path / "tournament_5"
    for number in (10, 2, 1):
        write_json(
            directory / f"Round_{number}_Matches.json",
            [match_record("5", number, ("a", 1, 2), ("b", 2, 0))],
        )
    event = EventStore(tmp_path).load_event("5")
    assert [r.number for r in event.rounds] == [1, 2, 10]


def test_last_standings_file_wins(tmp_path):
    directory = tmp_path / "tournament_6"
    write_json(directory / "Round_1_Matches.json", [match_record("6", 1, ("a", 1, 2), ("b", 2, 0))])
    write_json(directory / "Round_1_Standings.json", [standing_record("b", 2, 1, (0, 0, 0), (0, 0, 0))])
    write_json(directory / "Round_3_Standings.json", [standing_record("a", 1, 1, (1, 0, 0), (2, 0, 0))])
    event = EventStore(tmp_path).load_event("6")
    assert [s.participant.username for s in event.final_standings] == ["a"]


def test_missing_event_is_skipped(tmp_path, caplog):
    store = EventStore(tmp_path)
    with caplog.at_level(logging.WARNING):
        assert store.load_event("404") is None
    assert "404" in caplog.text


def test_event_without_match_files_is_skipped(tmp_path):
    (tmp_path / "tournament_7").mkdir()
    assert EventStore(tmp_path).load_event("7") is None


def test_malformed_json(tmp_path):
    directory = tmp_path / "tournament_8"
    directory.mkdir()
    (directory / "Round_1_Matches.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(FileLoadException):
        EventStore(tmp_path).load_event("8")


def test_json_must_be_a_list(tmp_path):
    write_json(tmp_path / "tournament_9" / "Round_1_Matches.json", {"Competitors": []})
    with pytest.raises(FileLoadException):
        EventStore(tmp_path).load_event("9")


def test_invalid_match_record(tmp_path):
    record = match_record("10", 1, ("a", 1, 2), ("b", 2, 0))
    record["ByeReason"] = 1
    write_json(tmp_path / "tournament_10" / "Round_1_Matches.json", [record])
    with pytest.raises(InvalidMatchException):
        EventStore(tmp_path).load_event("10")


def test_undated_event_loads_with_warning(tmp_path, caplog):
    write_json(
        tmp_path / "tournament_11" / "Round_1_Matches.json",
        [bye_record("11", 1, "a", 1, date=None)],
    )
    with caplog.at_level(logging.WARNING):
        event = EventStore(tmp_path).load_event("11")
    assert event.date is None
    assert event.date_display == ""
    assert "no recorded date" in caplog.text


def test_generated_series_round_trips_through_disk(tmp_path):
    generator = RandomEventGenerator(GeneratorConfig(seed=21, players_per_event=9))
    generated = generator.generate_series(3)
    for event in generated:
        write_event_files(tmp_path, event)

    store = EventStore(tmp_path)
    assert store.available_event_ids() == ["380000", "380001", "380002"]

    events = store.load_events(["380001", "missing", "380000"])
    assert [e.event_id for e in events] == ["380001", "380000"]
    assert events[0].round_count == 3
    assert len(events[0].final_standings) == 9
    assert events[1].date == generated[0].date


def test_available_event_ids_without_data_dir(tmp_path):
    assert EventStore(tmp_path / "absent").available_event_ids() == []
