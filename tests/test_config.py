"""Tests for settings and logging setup."""

import logging

import pytest

from domain_ids.bootstrap import LOG_FORMAT, configure_logging
from domain_ids.config import Settings


class TestSettings:
    def test_defaults(self) -> None:
        config = Settings()
        assert config.log_level == "INFO"
        assert config.accept_uppercase is True
        assert config.storage_column_length == 36

    def test_environment_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DOMAIN_IDS_ACCEPT_UPPERCASE", "false")
        monkeypatch.setenv("DOMAIN_IDS_LOG_LEVEL", "DEBUG")
        config = Settings()
        assert config.accept_uppercase is False
        assert config.log_level == "DEBUG"


class TestLogging:
    def test_configure_logging_uses_settings_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        calls: list[dict] = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
        configure_logging(Settings(log_level="WARNING"))
        assert calls == [{"level": "WARNING", "format": LOG_FORMAT}]
