"""
Domain models for the weather archive.

Pydantic model for the outgoing archive query.
"""

from __future__ import annotations

from datetime import date
from typing import Literal, Self

from pydantic import BaseModel, Field, model_validator

from weather_archive.datasources.weather.client import (
    DEFAULT_END_DATE,
    DEFAULT_LAT,
    DEFAULT_LON,
    DEFAULT_START_DATE,
    DEFAULT_TIMEZONE,
    HOURLY_VARS,
)


class ArchiveQuery(BaseModel):
    """Query parameters for one Open-Meteo archive request.

    Frozen: built once, then only read.
    """

    model_config = {"frozen": True}

    latitude: float = Field(default=DEFAULT_LAT, ge=-90, le=90)
    longitude: float = Field(default=DEFAULT_LON, ge=-180, le=180)
    start_date: date = DEFAULT_START_DATE
    end_date: date = DEFAULT_END_DATE
    temperature_unit: Literal["fahrenheit", "celsius"] = "fahrenheit"
    hourly: tuple[str, ...] = HOURLY_VARS
    timezone: str = DEFAULT_TIMEZONE

    @model_validator(mode="after")
    def _check_date_range(self) -> Self:
        if self.end_date < self.start_date:
            msg = f"end_date {self.end_date} is before start_date {self.start_date}"
            raise ValueError(msg)
        return self

    def to_params(self) -> dict[str, str | float]:
        """Query-string mapping in the form the archive API expects."""
        return {
            "latitude": self.latitude,
            "longitude": self.longitude,
            "start_date": self.start_date.isoformat(),
            "end_date": self.end_date.isoformat(),
            "temperature_unit": self.temperature_unit,
            "hourly": ",".join(self.hourly),
            "timezone": self.timezone,
        }

