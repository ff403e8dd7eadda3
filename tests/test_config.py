import pytest

from swissleague.exceptions import (
    InvalidConfigurationException,
    MissingConfigurationException,
)
from swissleague.models.tournament import (
    DeckAssignments,
    League,
    SeriesConfig,
    load_deck_assignments,
    load_series_config,
)

LEAGUES_YML = """\
leagues:
  - name: Winter League
    tournaments:
      - 388334
      - 380585b
    top8Tournament: 390001
  - name: Spring League
    tournaments: [390100, 388334]
"""

DECKS_YML = """\
388334:
  Alice: Burn
  bob: _
380585b:
  alice: Control
"""


def write_config(tmp_path, leagues=LEAGUES_YML, decks=DECKS_YML):
    leagues_path = tmp_path / "leagues.yml"
    leagues_path.write_text(leagues, encoding="utf-8")
    decks_path = tmp_path / "decks.yml"
    if decks is not None:
        decks_path.write_text(decks, encoding="utf-8")
    return leagues_path, decks_path


def test_load_series_config(tmp_path):
    config = load_series_config(*write_config(tmp_path))
    assert [league.name for league in config.leagues] == ["Winter League", "Spring League"]
    winter = config.leagues[0]
    assert winter.event_ids == ["388334", "380585b"]
    assert winter.top_cut_event_id == "390001"
    assert winter.top_cut_name == "Winter League Top 8"


def test_league_lookup_and_membership(tmp_path):
    config = load_series_config(*write_config(tmp_path))
    assert config.league("winter league") is config.leagues[0]
    assert config.league("Summer") is None
    assert config.league_for_event(388334) == "Winter League"
    assert config.league_for_event("390001") == "Winter League Top 8"
    assert config.league_for_event("390100") == "Spring League"
    assert config.league_for_event("1") is None
    assert config.is_top_cut("390001")
    assert not config.is_top_cut("388334")
    assert config.all_event_ids() == ["388334", "380585b", "390001", "390100"]


def test_deck_assignments_are_case_insensitive(tmp_path):
    config = load_series_config(*write_config(tmp_path))
    decks = config.decks
    assert len(decks) == 2
    assert decks.archetype("388334", "alice") == "Burn"
    assert decks.archetype(388334, "ALICE") == "Burn"
    assert decks.archetype("388334", "bob") == "Unknown"
    assert decks.archetype("388334", "carl") == "Unknown"
    assert decks.archetype("999", "alice") == "Unknown"
    assert decks.for_event("388334") == {"Alice": "Burn", "bob": "_"}
    assert decks.has_event("380585b")


def test_missing_decks_file_means_no_assignments(tmp_path):
    leagues_path, decks_path = write_config(tmp_path, decks=None)
    config = load_series_config(leagues_path, decks_path)
    assert len(config.decks) == 0
    assert len(load_deck_assignments(None)) == 0


def test_missing_leagues_file(tmp_path):
    with pytest.raises(MissingConfigurationException):
        load_series_config(tmp_path / "nope.yml")


def test_empty_leagues_file(tmp_path):
    leagues_path, _ = write_config(tmp_path, leagues="", decks=None)
    assert load_series_config(leagues_path).leagues == []


@pytest.mark.parametrize(
    "text",
    [
        "leagues: [unclosed",
        "leagues: not-a-list",
        "leagues:\n  - tournaments: [1]\n",
        "leagues:\n  - name: X\n    tournaments: 5\n",
        "- just\n- a list\n",
    ],
)
def test_malformed_leagues_file(tmp_path, text):
    leagues_path, _ = write_config(tmp_path, leagues=text, decks=None)
    with pytest.raises(InvalidConfigurationException):
        load_series_config(leagues_path)


def test_malformed_decks_file(tmp_path):
    _, decks_path = write_config(tmp_path, decks="- Burn\n- Control\n")
    with pytest.raises(InvalidConfigurationException):
        load_deck_assignments(decks_path)


def test_league_round_trips_through_dict():
    league = League(name="Winter", event_ids=["1", "2"], top_cut_event_id="3")
    assert League.from_dict(league.to_dict()) == league
    config = SeriesConfig.from_dict({"leagues": [league.to_dict()]})
    assert config.to_dict() == {"leagues": [league.to_dict()]}


def test_deck_assignment_entries_must_be_mappings():
    with pytest.raises(InvalidConfigurationException):
        DeckAssignments({"1": ["Burn"]})
