"""Tests for configuration selection and validation."""
import logging

import pytest

from solid_principles.config.settings import (
    Config,
    DevelopmentConfig,
    ProductionConfig,
    TestingConfig,
    get_config,
)


@pytest.mark.parametrize("env,expected", [
    ("development", DevelopmentConfig),
    ("PRODUCTION", ProductionConfig),
    ("testing", TestingConfig),
    ("staging", ProductionConfig),
])
def test_get_config(monkeypatch, env, expected):
    monkeypatch.setenv("APP_ENV", env)

    assert get_config() is expected


def test_debug_forces_debug_level():
    assert DevelopmentConfig.get_log_level() == logging.DEBUG


def test_debug_env_forces_debug_level_with_default_env(monkeypatch):
    monkeypatch.setenv("DEBUG", "true")
    monkeypatch.delenv("APP_ENV", raising=False)

    config = get_config()

    assert config is ProductionConfig
    assert config.get_log_level() == logging.DEBUG


def test_log_level_from_setting(monkeypatch):
    monkeypatch.delenv("DEBUG", raising=False)
    monkeypatch.setattr(ProductionConfig, "DEBUG", False)
    monkeypatch.setattr(ProductionConfig, "LOG_LEVEL", "ERROR")

    assert ProductionConfig.get_log_level() == logging.ERROR


def test_validate_rejects_unknown_level(monkeypatch):
    monkeypatch.setattr(Config, "LOG_LEVEL", "CHATTY")

    with pytest.raises(ValueError, match="Invalid LOG_LEVEL"):
        Config.validate()


def test_testing_config_disables_side_channels():
    assert TestingConfig.ENABLE_METRICS is False
    assert TestingConfig.SENTRY_DSN is None
