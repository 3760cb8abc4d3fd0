"""Tests for configuration loading."""

import logging

import pytest

from config import GAME_CONFIG, GameConfig, load_game_config, log_level


def test_defaults():
    assert GAME_CONFIG.accusation_threshold == 2
    assert GAME_CONFIG.bucket_count == 10
    assert GAME_CONFIG.stop_at_leaf is False
    assert load_game_config({}) == GameConfig()


def test_overrides():
    cfg = load_game_config({
        "MANOR_ACCUSATION_THRESHOLD": "3",
        "MANOR_BUCKET_COUNT": " 17 ",
        "MANOR_STOP_AT_LEAF": "yes",
    })
    assert cfg == GameConfig(accusation_threshold=3, bucket_count=17, stop_at_leaf=True)


@pytest.mark.parametrize("env,name", [
    ({"MANOR_BUCKET_COUNT": "0"}, "MANOR_BUCKET_COUNT"),
    ({"MANOR_BUCKET_COUNT": "ten"}, "MANOR_BUCKET_COUNT"),
    ({"MANOR_ACCUSATION_THRESHOLD": "-1"}, "MANOR_ACCUSATION_THRESHOLD"),
    ({"MANOR_STOP_AT_LEAF": "maybe"}, "MANOR_STOP_AT_LEAF"),
])
def test_invalid_values_name_the_variable(env, name):
    with pytest.raises(ValueError, match=name):
        load_game_config(env)


def test_log_level():
    assert log_level({}) == logging.WARNING
    assert log_level({"MANOR_LOG_LEVEL": " debug "}) == logging.DEBUG
    assert log_level({"MANOR_LOG_LEVEL": ""}) == logging.WARNING


@pytest.mark.parametrize("value", ["basic_format", "verbose", "10"])
def test_unknown_log_level_names_the_variable(value):
    with pytest.raises(ValueError, match="MANOR_LOG_LEVEL"):
        log_level({"MANOR_LOG_LEVEL": value})
