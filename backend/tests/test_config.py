"""Tests for environment-driven settings."""
import pytest

from impactmap.core.config import Settings

pytestmark = pytest.mark.unit


def test_defaults():
    settings = Settings(_env_file=None)
    assert settings.app_name == "ImpactMap"
    assert settings.debug is False
    assert settings.seed_on_startup is True


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("SEED_ON_STARTUP", "false")
    monkeypatch.setenv("DEBUG", "true")

    settings = Settings(_env_file=None)

    assert settings.seed_on_startup is False
    assert settings.debug is True
