"""Counter configuration loaded from environment variables."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from keycounter.records import INT32_MAX, INT32_MIN


class CounterSettings(BaseSettings):
    """Defaults applied to counters built from settings."""

    key_lower_bound: int = INT32_MIN
    key_upper_bound: int = INT32_MAX
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="KEYCOUNTER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> CounterSettings:
    """Return cached settings so env parsing only happens once."""

    return CounterSettings()
