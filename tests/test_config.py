"""Tests for settings defaults and their environment overrides."""

from __future__ import annotations

import pytest

from nodewatch.config import DEFAULT_SOURCE_URL, Settings

_ENV_VARS = [
    "NODEWATCH_SOURCE_URL",
    "NODEWATCH_THRESHOLD_MBPS",
    "NODEWATCH_POLL_INTERVAL",
    "REQUEST_TIMEOUT",
    "NODEWATCH_HOST",
    "NODEWATCH_PORT",
    "LOG_LEVEL",
]


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every variable Settings reads so defaults apply."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestDefaults:
    def test_source_and_threshold(self, clean_env) -> None:
        s = Settings()
        assert s.source_url == DEFAULT_SOURCE_URL == "https://api.uouin.com/cloudflare.html"
        assert s.threshold_mbps == 200.0

    def test_poll_every_thirty_minutes(self, clean_env) -> None:
        assert Settings().poll_interval == 30 * 60

    def test_transport_and_api(self, clean_env) -> None:
        s = Settings()
        assert s.request_timeout == 30.0
        assert s.api_host == "127.0.0.1"
        assert s.api_port == 8080
        assert s.log_level == "INFO"


class TestEnvOverrides:
    def test_every_field_reads_its_variable(self, clean_env) -> None:
        clean_env.setenv("NODEWATCH_SOURCE_URL", "https://mirror.example.com/list.txt")
        clean_env.setenv("NODEWATCH_THRESHOLD_MBPS", "512.5")
        clean_env.setenv("NODEWATCH_POLL_INTERVAL", "60")
        clean_env.setenv("REQUEST_TIMEOUT", "5")
        clean_env.setenv("NODEWATCH_HOST", "0.0.0.0")
        clean_env.setenv("NODEWATCH_PORT", "9000")
        clean_env.setenv("LOG_LEVEL", "DEBUG")

        s = Settings()
        assert s.source_url == "https://mirror.example.com/list.txt"
        assert s.threshold_mbps == 512.5
        assert s.poll_interval == 60.0
        assert s.request_timeout == 5.0
        assert s.api_host == "0.0.0.0"
        assert s.api_port == 9000
        assert s.log_level == "DEBUG"

    def test_non_numeric_threshold_is_rejected(self, clean_env) -> None:
        clean_env.setenv("NODEWATCH_THRESHOLD_MBPS", "fast")
        with pytest.raises(ValueError):
            Settings()
