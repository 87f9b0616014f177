from functools import lru_cache

import pydantic
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="ASYNC_NOTES_", env_file=".env", extra="ignore"
    )

    # Is the weather good enough to go on a date?
    weather: bool = True
    # How long the plant takes to water in the timer example
    watering_delay_seconds: pydantic.NonNegativeFloat = 3.0
    log_level: str = "WARNING"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
