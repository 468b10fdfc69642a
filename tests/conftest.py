"""Shared fixtures: archive payloads and canned HTTP responses."""

from __future__ import annotations

import json
from datetime import datetime, timedelta
from typing import Any

import pytest
import requests


def make_response(
    payload: Any = None,
    status_code: int = 200,
    body: bytes | None = None,
) -> requests.Response:
    """Build a ``requests.Response`` carrying ``payload`` as JSON, or a raw ``body``."""
    resp = requests.Response()
    resp.status_code = status_code
    resp._content = body if body is not None else json.dumps(payload).encode("utf-8")
    resp.encoding = "utf-8"
    return resp


def hourly_grid(start: str, hours: int) -> dict[str, list[Any]]:
    """Gap-free hourly block as the archive API formats it (one fixed offset)."""
    first = datetime.fromisoformat(start)
    times = [(first + timedelta(hours=i)).strftime("%Y-%m-%dT%H:%M") for i in range(hours)]
    return {
        "time": times,
        "temperature_2m": [30.0 + i * 0.1 for i in range(hours)],
        "precipitation": [0.0] * hours,
        "relative_humidity_2m": [70] * hours,
        "dew_point_2m": [20.0] * hours,
    }


@pytest.fixture
def hourly_block() -> dict[str, list[Any]]:
    """Three hourly rows as returned by the archive API."""
    return {
        "time": ["2014-01-02T00:00", "2014-01-02T01:00", "2014-01-02T02:00"],
        "temperature_2m": [29.8, 29.9, 29.9],
        "precipitation": [0, 0, 0],
        "relative_humidity_2m": [74, 74, 73],
        "dew_point_2m": [22.5, 22.7, 22.5],
    }


@pytest.fixture
def archive_payload(hourly_block: dict[str, list[Any]]) -> dict[str, Any]:
    """Full archive response body around ``hourly_block``."""
    return {
        "latitude": 40.710335,
        "longitude": -73.99307,
        "generationtime_ms": 1.2,
        "utc_offset_seconds": -18000,
        "timezone": "America/New_York",
        "timezone_abbreviation": "EST",
        "elevation": 32.0,
        "hourly_units": {
            "time": "iso8601",
            "temperature_2m": "°F",
            "precipitation": "mm",
            "relative_humidity_2m": "%",
            "dew_point_2m": "°F",
        },
        "hourly": hourly_block,
    }
