"""Tests for environment-driven configuration."""

import pytest

from webrelay.api.config import ServerConfig
from webrelay.jina.config import DEFAULT_READER_URL, DEFAULT_SEARCH_URL, JinaConfig, parse_timeout


@pytest.mark.parametrize("raw, expected", [(None, None), ("", None), ("  ", None), ("7.5", 7.5)])
def test_parse_timeout(raw, expected):
    assert parse_timeout(raw) == expected


@pytest.mark.parametrize("raw", ["0", "-1", "soon"])
def test_parse_timeout_rejects_bad_values(raw):
    with pytest.raises(ValueError):
        parse_timeout(raw)


def test_jina_config_from_env(monkeypatch):
    monkeypatch.setenv("JINA_AI_API_KEY", " abc ")
    monkeypatch.setenv("JINA_READER_URL", "http://reader.local/")
    monkeypatch.setenv("JINA_SEARCH_URL", "http://search.local/")
    monkeypatch.setenv("JINA_TIMEOUT_SECONDS", "3")

    config = JinaConfig.from_env()

    assert config == JinaConfig(
        api_key="abc",
        reader_url_prefix="http://reader.local/",
        search_url_prefix="http://search.local/",
        timeout_seconds=3.0,
    )


def test_jina_config_defaults(monkeypatch):
    for name in ("JINA_AI_API_KEY", "JINA_READER_URL", "JINA_SEARCH_URL", "JINA_TIMEOUT_SECONDS"):
        monkeypatch.delenv(name, raising=False)

    config = JinaConfig.from_env()

    assert config.api_key == ""
    assert config.reader_url_prefix == DEFAULT_READER_URL
    assert config.search_url_prefix == DEFAULT_SEARCH_URL
    assert config.timeout_seconds is None


def test_server_config_from_env(monkeypatch):
    monkeypatch.setenv("WEBRELAY_HOST", "0.0.0.0")
    monkeypatch.setenv("WEBRELAY_PORT", "9000")
    monkeypatch.setenv("WEBRELAY_LOG_LEVEL", "debug")
    monkeypatch.delenv("WEBRELAY_API_KEY", raising=False)

    config = ServerConfig.from_env()

    assert (config.host, config.port, config.log_level, config.api_key) == ("0.0.0.0", 9000, "DEBUG", "")


def test_inbound_key_read_from_current_environment(monkeypatch):
    from webrelay.api.auth import get_server_config

    monkeypatch.setenv("WEBRELAY_API_KEY", "fresh-key")
    get_server_config.cache_clear()
    try:
        assert get_server_config().api_key == "fresh-key"
    finally:
        get_server_config.cache_clear()
