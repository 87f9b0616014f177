import importlib

import pytest

from async_notes.settings import get_settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    # exported variables would leak into the tests
    for name in ("ASYNC_NOTES_WEATHER", "ASYNC_NOTES_WATERING_DELAY_SECONDS", "ASYNC_NOTES_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def code_block():
    def load(number: int):
        return importlib.import_module(f"async_notes.code_blocks.{number}")

    return load
