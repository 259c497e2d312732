"""Tests for configuration loading."""

from datetime import date
from pathlib import Path

import pytest

from reading_plan.config import Config, get_data_dir

ENV_VARS = (
    "LOG_LEVEL",
    "BIBLE_API_URL",
    "BIBLE_TRANSLATION",
    "REQUEST_TIMEOUT",
    "JOURNAL_PATH",
    "PLAN_YEAR",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    config = Config.from_env()
    assert config.log_level == "INFO"
    assert config.bible_api_url == "https://bible-api.com"
    assert config.bible_translation == "kjv"
    assert config.request_timeout == 10
    assert config.journal_path == get_data_dir() / "journal.json"
    assert config.plan_year == date.today().year


def test_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("BIBLE_API_URL", "https://example.org/api/")
    monkeypatch.setenv("BIBLE_TRANSLATION", "web")
    monkeypatch.setenv("REQUEST_TIMEOUT", "3")
    monkeypatch.setenv("JOURNAL_PATH", str(tmp_path / "j.json"))
    monkeypatch.setenv("PLAN_YEAR", "2025")
    config = Config.from_env()
    assert config.bible_api_url == "https://example.org/api"
    assert config.bible_translation == "web"
    assert config.request_timeout == 3
    assert config.journal_path == Path(tmp_path / "j.json")
    assert config.plan_year == 2025


@pytest.mark.parametrize("value", ["soon", "0", "-5"])
def test_invalid_timeout(monkeypatch, value):
    monkeypatch.setenv("REQUEST_TIMEOUT", value)
    with pytest.raises(ValueError, match="REQUEST_TIMEOUT"):
        Config.from_env()


def test_invalid_year(monkeypatch):
    monkeypatch.setenv("PLAN_YEAR", "next")
    with pytest.raises(ValueError, match="PLAN_YEAR"):
        Config.from_env()


def test_config_frozen():
    config = Config.from_env()
    with pytest.raises(AttributeError):
        config.log_level = "DEBUG"  # type: ignore[misc]
