"""Hourly block → weather table.

The archive API returns parallel arrays keyed by variable name.  This module
copies them into a ``pandas.DataFrame`` with our own column names and parses
``time`` as local wall-clock hours in the requested timezone.

Source arrays and table columns are always looked up by exact name.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pandas as pd

from weather_archive.datasources.weather.client import DEFAULT_TIMEZONE
from weather_archive.errors import SchemaError, TableIntegrityError

if TYPE_CHECKING:
    from collections.abc import Iterable

TIME_FORMAT = "%Y-%m-%dT%H:%M"

# API variable → table column, in table column order (after ``time``)
COLUMN_SOURCES: dict[str, str] = {
    "temperature": "temperature_2m",  # °F
    "precipitation": "precipitation",  # mm
    "relative_humidity": "relative_humidity_2m",  # %
    "dew_point": "dew_point_2m",  # °F
}

COLUMNS = ("time", *COLUMN_SOURCES)


def build_weather_table(
    hourly: dict[str, Any],
    timezone: str = DEFAULT_TIMEZONE,
    utc_offset_seconds: float | None = None,
) -> pd.DataFrame:
    """
    Build the weather table from the ``hourly`` block.

    Args:
        hourly: Mapping of API variable name → array of values.
        timezone: IANA zone the ``time`` strings are expressed in.
        utc_offset_seconds: Fixed offset the API used to format ``time``
            (its top-level ``utc_offset_seconds``), if known.

    Returns:
        DataFrame with columns ``time, temperature, precipitation,
        relative_humidity, dew_point``.

    Raises:
        SchemaError: A required array is missing or ``time`` is unparseable.
        TableIntegrityError: Arrays differ in length, or time is not
            strictly increasing.
    """
    times = _require_array(hourly, "time")
    arrays = {column: _require_array(hourly, source) for column, source in COLUMN_SOURCES.items()}

    expected = len(times)
    for column, values in arrays.items():
        if len(values) != expected:
            msg = (
                f"Column {column!r} ({COLUMN_SOURCES[column]}) has {len(values)} values, "
                f"expected {expected} to match 'time'"
            )
            raise TableIntegrityError(msg)

    time = parse_local_times(times, timezone, utc_offset_seconds)
    table = pd.DataFrame({"time": time, **arrays})

    if not (table["time"].is_monotonic_increasing and table["time"].is_unique):
        msg = "Column 'time' is not strictly increasing"
        raise TableIntegrityError(msg)

    return table


def parse_local_times(
    times: list[str],
    timezone: str = DEFAULT_TIMEZONE,
    utc_offset_seconds: float | None = None,
) -> pd.DatetimeIndex:
    """Parse ``YYYY-MM-DDTHH:MM`` strings as civil times in ``timezone``.

    The archive API formats a whole response with one UTC offset, so its
    hourly grid has no gap or repeat at DST changes.  With that offset the
    strings are shifted to UTC and converted to ``timezone``.

    Without an offset they are read as wall-clock times: a repeated hour at
    fall-back is daylight time first, standard time second, and a missing
    hour at spring-forward shifts forward.
    """
    try:
        naive = pd.to_datetime(times, format=TIME_FORMAT)
    except (ValueError, TypeError) as exc:
        msg = f"Unexpected data format: cannot parse 'time' values ({exc})"
        raise SchemaError(msg) from exc

    if utc_offset_seconds is not None:
        if isinstance(utc_offset_seconds, bool) or not isinstance(utc_offset_seconds, int | float):
            msg = f"Unexpected data format: utc_offset_seconds is {utc_offset_seconds!r}"
            raise SchemaError(msg)
        utc = naive - pd.Timedelta(seconds=utc_offset_seconds)
        return utc.tz_localize("UTC").tz_convert(timezone)

    first_seen = ~naive.duplicated(keep="first")
    return naive.tz_localize(timezone, ambiguous=first_seen, nonexistent="shift_forward")


def require_columns(table: pd.DataFrame, columns: Iterable[str] = COLUMNS) -> None:
    """Raise SchemaError unless every column exists under its exact name."""
    missing = [c for c in columns if c not in table.columns]
    if missing:
        msg = f"Weather table is missing column(s): {', '.join(missing)}"
        raise SchemaError(msg)


def _require_array(hourly: dict[str, Any], key: str) -> list[Any]:
    if key not in hourly:
        msg = f"Unexpected data format: 'hourly.{key}' not found in the API response."
        raise SchemaError(msg)
    values = hourly[key]
    if not isinstance(values, list):
        msg = f"Unexpected data format: 'hourly.{key}' is not an array."
        raise SchemaError(msg)
    return values
