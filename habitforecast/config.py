# habitforecast/config.py
# -----------------------------------------------------------------------------
# Centralized Configuration Management
# -----------------------------------------------------------------------------

# SECTION: IMPORTS
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")

# SECTION: CONFIGURATION MODELS


# KLASS: Settings
class Settings(BaseSettings):
    """Runtime settings, read from HABITFORECAST_* env vars or a .env file."""

    model_config = SettingsConfigDict(
        env_prefix="HABITFORECAST_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field("WARNING", description="Console log level.")
    log_dir: Path | None = Field(None, description="Directory for the rotating file log; disabled when unset.")
    content_path: Path | None = Field(None, description="Saved Habitica /content payload used to resolve gear and quests.")
    timezone: str | None = Field(None, description="IANA zone for 'due today'; system local zone when unset.")

    @field_validator("log_level", mode="before")
    @classmethod
    def normalise_level(cls, value: str) -> str:
        level = str(value).strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {value!r}")
        return level

    @field_validator("log_dir", "content_path", mode="before")
    @classmethod
    def empty_path_is_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


# SECTION: SINGLETON ACCESS


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Loads settings once per process."""
    return Settings()


__all__ = ["LOG_LEVELS", "Settings", "get_settings"]
