# tests/test_config.py

import os

import pytest

from core.config import RosterConfig, load_config, parse_bool, validate_log_level


def test_defaults():
    config = load_config({})

    assert config == RosterConfig()
    assert config.data_file == "students.csv"
    assert config.include_header
    assert config.log_level == "INFO"


def test_overrides():
    config = load_config(
        {
            "ROSTER_DATA_FILE": "data/roster.csv",
            "ROSTER_INCLUDE_HEADER": "no",
            "ROSTER_LOG_LEVEL": "warn",
        }
    )

    assert config.data_file == "data/roster.csv"
    assert not config.include_header
    assert config.log_level == "WARNING"


def test_blank_data_file_falls_back_to_default():
    assert load_config({"ROSTER_DATA_FILE": "   "}).data_file == "students.csv"


def test_data_file_expands_home(monkeypatch):
    monkeypatch.setenv("HOME", "/home/tester")
    monkeypatch.setenv("ROSTER_DATA_FILE", "~/students.csv")

    assert load_config().data_file == os.path.join("/home/tester", "students.csv")


def test_config_is_frozen():
    config = RosterConfig()

    with pytest.raises(AttributeError):
        config.data_file = "other.csv"


@pytest.mark.parametrize("value, expected", [("1", True), ("TRUE", True), (" off ", False), ("0", False)])
def test_parse_bool(value, expected):
    assert parse_bool(value) is expected


def test_parse_bool_rejects_unknown_value():
    with pytest.raises(ValueError):
        parse_bool("maybe")


def test_validate_log_level():
    assert validate_log_level("debug") == "DEBUG"

    with pytest.raises(ValueError):
        validate_log_level("LOUD")
