"""
Application settings.

Values come from environment variables prefixed ``WEATHER_ARCHIVE_`` (or a
``.env`` file), falling back to the New York City archive query.
"""

from __future__ import annotations

from datetime import date
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from weather_archive.datasources.weather.client import (
    DEFAULT_END_DATE,
    DEFAULT_LAT,
    DEFAULT_LON,
    DEFAULT_START_DATE,
    DEFAULT_TIMEZONE,
)


class Settings(BaseSettings):
    """Runtime configuration for the archive run."""

    model_config = SettingsConfigDict(
        env_prefix="WEATHER_ARCHIVE_",
        env_file=".env",
        extra="ignore",
    )

    app_name: str = "weather-archive"
    app_env: str = "development"
    debug: bool = False

    lat: float = Field(default=DEFAULT_LAT, ge=-90, le=90)
    lon: float = Field(default=DEFAULT_LON, ge=-180, le=180)
    start_date: date = DEFAULT_START_DATE
    end_date: date = DEFAULT_END_DATE
    timezone: str = DEFAULT_TIMEZONE
    temperature_unit: Literal["fahrenheit", "celsius"] = "fahrenheit"

    output_dir: Path = Path()
    plot_filename: str = "weather_plots.png"
    snapshot_filename: str = "historical_weather_data.parquet"

    request_timeout: float = Field(default=60.0, gt=0)

    @property
    def plot_path(self) -> Path:
        """Where the 2x2 overview image is written."""
        return self.output_dir / self.plot_filename

    @property
    def snapshot_path(self) -> Path:
        """Where the table snapshot is written."""
        return self.output_dir / self.snapshot_filename


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings (read once)."""
    return Settings()
