"""Tests for fakeit.config."""

import pytest
import structlog

from fakeit.config import Settings, configure_logging, get_logger, get_settings
from fakeit.core.exceptions import ConfigurationError


@pytest.mark.unit
class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("FAKEIT_LOG_LEVEL", "FAKEIT_LOG_JSON", "FAKEIT_RECORD_CALLS"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings()

        assert settings.log_level == "WARNING"
        assert settings.log_json is False
        assert settings.record_calls is True

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("FAKEIT_LOG_LEVEL", "debug")
        monkeypatch.setenv("FAKEIT_LOG_JSON", "true")

        settings = Settings()

        assert settings.log_level == "debug"
        assert settings.log_json is True

    @pytest.mark.parametrize("name", ["log_level", "log_json", "record_calls"])
    def test_fields_are_described(self, name):
        assert Settings.model_fields[name].description

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()


@pytest.mark.unit
class TestLogging:
    @pytest.fixture(autouse=True)
    def _restore(self):
        yield
        configure_logging(Settings(log_level="DEBUG"))

    def test_unknown_level_is_rejected(self):
        with pytest.raises(ConfigurationError) as exc_info:
            configure_logging(Settings(log_level="chatty"))

        assert exc_info.value.details == {"log_level": "chatty"}

    def test_json_output(self, capsys):
        configure_logging(Settings(log_level="info", log_json=True))

        get_logger("tests").info("fake.created", fake_type="Thermostat")

        out = capsys.readouterr().out
        assert '"event": "fake.created"' in out
        assert '"fake_type": "Thermostat"' in out

    def test_level_filtering(self, capsys):
        configure_logging(Settings(log_level="WARNING"))

        get_logger("tests").info("hidden")
        get_logger("tests").warning("shown")

        out = capsys.readouterr().out
        assert "hidden" not in out
        assert "shown" in out

    def test_configure_uses_cached_settings_by_default(self, monkeypatch):
        monkeypatch.setenv("FAKEIT_LOG_LEVEL", "nonsense")

        with pytest.raises(ConfigurationError):
            configure_logging()

    def test_get_logger_returns_structlog_logger(self):
        logger = get_logger("tests")

        assert hasattr(logger, "bind")
        assert structlog.is_configured()

    def test_fake_calls_are_logged_at_debug(self, capsys, fake_thermostat):
        configure_logging(Settings(log_level="DEBUG"))

        fake_thermostat.read()

        out = capsys.readouterr().out
        assert "fake_manager.intercept" in out
        assert "member=read" in out

    def test_fake_calls_are_quiet_at_warning(self, capsys, fake_thermostat):
        configure_logging(Settings(log_level="WARNING"))

        fake_thermostat.read()

        assert "fake_manager.intercept" not in capsys.readouterr().out
