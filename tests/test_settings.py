"""Tests for environment-driven settings."""

from __future__ import annotations

import pytest

import diamond_estimator.settings as settings_module
from diamond_estimator.settings import AppSettings, get_settings, load_settings


class TestLoadSettings:
    def test_defaults(self) -> None:
        assert load_settings(load_env=False) == AppSettings(
            title="Diamond Price Estimator",
            log_level="INFO",
            currency_symbol="$",
            port=8501,
            server_address="localhost",
        )

    def test_environment_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DIAMOND_ESTIMATOR_TITLE", "Gem Desk")
        monkeypatch.setenv("DIAMOND_ESTIMATOR_LOG_LEVEL", "debug")
        monkeypatch.setenv("DIAMOND_ESTIMATOR_CURRENCY_SYMBOL", "£")
        monkeypatch.setenv("DIAMOND_ESTIMATOR_PORT", "9000")
        monkeypatch.setenv("DIAMOND_ESTIMATOR_ADDRESS", "0.0.0.0")

        settings = load_settings(load_env=False)

        assert settings.title == "Gem Desk"
        assert settings.log_level == "DEBUG"
        assert settings.currency_symbol == "£"
        assert settings.port == 9000
        assert settings.server_address == "0.0.0.0"

    def test_invalid_port(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DIAMOND_ESTIMATOR_PORT", "eighty")
        with pytest.raises(RuntimeError, match="DIAMOND_ESTIMATOR_PORT"):
            load_settings(load_env=False)

    def test_dotenv_loaded_before_reading(self, monkeypatch: pytest.MonkeyPatch) -> None:
        calls = []

        def fake_load_dotenv():
            calls.append(True)
            monkeypatch.setenv("DIAMOND_ESTIMATOR_TITLE", "From Dotenv")

        monkeypatch.setattr(settings_module, "load_dotenv", fake_load_dotenv)

        assert load_settings().title == "From Dotenv"
        assert calls == [True]

    def test_load_env_false_skips_dotenv(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(settings_module, "load_dotenv", lambda: pytest.fail("dotenv should not load"))
        assert load_settings(load_env=False).port == 8501

    def test_get_settings_is_cached(self) -> None:
        assert get_settings() is get_settings()
