"""Open-Meteo historical weather data source.

Fetches hourly observations from the archive API (free, no API key).

Public API:
  - historical: build_query, fetch_hourly_archive, decode_response
  - client: API URL, hourly variables, default location
"""

from weather_archive.datasources.weather.client import HOURLY_VARS, OPEN_METEO_HISTORICAL
from weather_archive.datasources.weather.historical import (
    build_query,
    decode_response,
    fetch_hourly_archive,
    flatten_json,
    preview_payload,
)

__all__ = [
    "HOURLY_VARS",
    "OPEN_METEO_HISTORICAL",
    "build_query",
    "decode_response",
    "fetch_hourly_archive",
    "flatten_json",
    "preview_payload",
]
