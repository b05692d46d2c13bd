"""Unit tests for settings and logging setup."""

import logging

import logfire

from hrcore.config import ObservabilitySettings, Settings
from hrcore.util.observability import configure_logfire
from hrcore.util.logging import get_logger, setup_logging


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("EVENTS__PUBLISH_CONCURRENTLY", raising=False)

        settings = Settings(_env_file=None)

        assert settings.environment == "development"
        assert settings.events.publish_concurrently is True
        assert settings.observability.logfire_token is None

    def test_nested_settings_from_environment(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "test")
        monkeypatch.setenv("EVENTS__PUBLISH_CONCURRENTLY", "false")

        settings = Settings(_env_file=None)

        assert settings.environment == "test"
        assert settings.events.publish_concurrently is False


class TestLogging:
    def test_debug_sets_hrcore_level(self):
        setup_logging(Settings(_env_file=None, debug=True))

        assert logging.getLogger("hrcore").level == logging.DEBUG

        setup_logging(Settings(_env_file=None, debug=False))

        assert logging.getLogger("hrcore").level == logging.INFO

    def test_get_logger(self):
        assert get_logger("hrcore.test").name == "hrcore.test"


class TestObservability:
    def _configure(self, monkeypatch, **observability):
        captured = {}
        monkeypatch.setattr(logfire, "configure", lambda **kwargs: captured.update(kwargs))
        configure_logfire(
            Settings(_env_file=None, observability=ObservabilitySettings(**observability))
        )
        return captured

    def test_console_only_without_token(self, monkeypatch):
        kwargs = self._configure(monkeypatch)

        assert kwargs["service_name"] == "hrcore"
        assert kwargs["send_to_logfire"] is False
        assert "token" not in kwargs

    def test_token_enables_sending(self, monkeypatch):
        kwargs = self._configure(monkeypatch, logfire_token="secret")

        assert kwargs["send_to_logfire"] is True
        assert kwargs["token"] == "secret"

    def test_explicit_flag_wins(self, monkeypatch):
        kwargs = self._configure(monkeypatch, logfire_token="secret", send_to_logfire=False)

        assert kwargs["send_to_logfire"] is False
