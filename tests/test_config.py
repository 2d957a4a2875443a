"""Tests for environment parsing in `web.config`."""

import pytest

from web import config
from web.config import ConfigError, parse_log_level, parse_origins, parse_port


def test_parse_origins_splits_and_trims():
    assert parse_origins(" http://a.test , http://b.test,, ") == ["http://a.test", "http://b.test"]


@pytest.mark.parametrize("value", ["", "  ", ",", None])
def test_parse_origins_empty_means_wildcard(value):
    assert parse_origins(value) == ["*"]


def test_parse_port_valid():
    assert parse_port("8080") == 8080


@pytest.mark.parametrize("value", ["abc", "", "0", "70000", "-1"])
def test_parse_port_invalid(value):
    with pytest.raises(ConfigError):
        parse_port(value)


def test_hello_message_falls_back_when_blank(monkeypatch):
    monkeypatch.setenv("HELLO_MESSAGE", "")
    assert config.hello_message() == config.DEFAULT_HELLO_MESSAGE


@pytest.mark.parametrize("value,expected", [("info", "INFO"), (" debug ", "DEBUG"), ("WARNING", "WARNING")])
def test_parse_log_level_valid(value, expected):
    assert parse_log_level(value) == expected


@pytest.mark.parametrize("value", ["verbose", "", "trace"])
def test_parse_log_level_invalid(value):
    with pytest.raises(ConfigError):
        parse_log_level(value)
