"""
Tests for environment-driven settings.
"""
from clinic.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("CLINIC_UPCOMING_WINDOW_DAYS", raising=False)
    settings = Settings(_env_file=None)
    assert settings.scheduled_status == "scheduled"
    assert settings.upcoming_window_days == 7
    assert settings.upcoming_only_scheduled is False
    assert settings.seed_sample_data is False


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("CLINIC_UPCOMING_WINDOW_DAYS", "14")
    monkeypatch.setenv("CLINIC_UPCOMING_ONLY_SCHEDULED", "true")
    monkeypatch.setenv("CLINIC_SCHEDULED_STATUS", "programada")

    settings = Settings(_env_file=None)
    assert settings.upcoming_window_days == 14
    assert settings.upcoming_only_scheduled is True
    assert settings.scheduled_status == "programada"
