from __future__ import annotations

import pytest
from pydantic import ValidationError

from wikisearch import config as config_module
from wikisearch.config import WikiSearchSettings


def test_defaults_point_at_terraria_wiki(settings):
    assert settings.search_endpoint() == "https://terraria.wiki.gg/api.php"
    assert settings.article_prefix() == "https://terraria.wiki.gg/wiki/"
    assert settings.request_timeout_seconds is None
    assert settings.icon_path == "Images/favicon.png"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("WIKISEARCH_API_URL", "https://calamitymod.wiki.gg/api.php")
    monkeypatch.setenv("WIKISEARCH_ARTICLE_BASE_URL", "https://calamitymod.wiki.gg/wiki")
    monkeypatch.setenv("WIKISEARCH_REQUEST_TIMEOUT_SECONDS", "2.5")

    settings = WikiSearchSettings(_env_file=None)

    assert settings.search_endpoint() == "https://calamitymod.wiki.gg/api.php"
    assert settings.article_prefix() == "https://calamitymod.wiki.gg/wiki/"
    assert settings.request_timeout_seconds == 2.5


def test_timeout_must_be_positive():
    with pytest.raises(ValidationError):
        WikiSearchSettings(_env_file=None, request_timeout_seconds=0)


def test_get_settings_is_cached(monkeypatch):
    config_module.get_settings.cache_clear()
    try:
        assert config_module.get_settings() is config_module.get_settings()
    finally:
        config_module.get_settings.cache_clear()


def test_log_level_from_environment(monkeypatch, settings):
    assert settings.log_level == "INFO"
    monkeypatch.setenv("WIKISEARCH_LOG_LEVEL", "WARNING")
    assert WikiSearchSettings(_env_file=None).log_level == "WARNING"


def test_unknown_log_level_rejected():
    with pytest.raises(ValidationError):
        WikiSearchSettings(_env_file=None, log_level="CHATTY")
