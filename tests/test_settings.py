import pydantic
import pytest

from async_notes.settings import Settings, get_settings


def test_defaults():
    settings = Settings(_env_file=None)

    assert settings.weather is True
    assert settings.watering_delay_seconds == 3.0
    assert settings.log_level == "WARNING"


def test_reads_prefixed_environment(monkeypatch):
    monkeypatch.setenv("ASYNC_NOTES_WEATHER", "false")
    monkeypatch.setenv("ASYNC_NOTES_WATERING_DELAY_SECONDS", "0.5")

    settings = get_settings()

    assert settings.weather is False
    assert settings.watering_delay_seconds == 0.5


def test_rejects_negative_delay(monkeypatch):
    monkeypatch.setenv("ASYNC_NOTES_WATERING_DELAY_SECONDS", "-1")

    with pytest.raises(pydantic.ValidationError):
        Settings(_env_file=None)


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
