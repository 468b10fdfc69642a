"""Hourly weather from the Open-Meteo Archive API.

One request, no retries.  Failures are split into three kinds so the caller
can tell them apart:

- :class:`TransportError` when the request never got an answer
- :class:`ApiStatusError` when the answer is not HTTP 200
- :class:`SchemaError` when the body is not the JSON we expect
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import requests

from weather_archive.datasources.weather.client import OPEN_METEO_HISTORICAL
from weather_archive.errors import ApiStatusError, SchemaError, TransportError
from weather_archive.schemas import ArchiveQuery
from weather_archive.services.http import session

if TYPE_CHECKING:
    from weather_archive.config import Settings

PREVIEW_FIELDS = 5
PREVIEW_CHARS = 100


def build_query(settings: Settings | None = None) -> ArchiveQuery:
    """
    Build the archive query.

    Args:
        settings: Overrides for location, dates, unit and timezone.
            Without settings the New York City defaults are used.
    """
    if settings is None:
        return ArchiveQuery()
    return ArchiveQuery(
        latitude=settings.lat,
        longitude=settings.lon,
        start_date=settings.start_date,
        end_date=settings.end_date,
        temperature_unit=settings.temperature_unit,
        timezone=settings.timezone,
    )


def fetch_hourly_archive(
    query: ArchiveQuery,
    *,
    url: str = OPEN_METEO_HISTORICAL,
    timeout: float | None = None,
) -> requests.Response:
    """
    Perform the archive GET request.

    Args:
        query: Parameters appended as the query string.
        url: Endpoint (overridable for tests).
        timeout: Per-request timeout; the session default applies when None.

    Returns:
        The HTTP 200 response.

    Raises:
        TransportError: The request could not be sent.
        ApiStatusError: The server answered with a non-200 status.
    """
    kwargs: dict[str, Any] = {"params": query.to_params()}
    if timeout is not None:
        kwargs["timeout"] = timeout

    try:
        resp = session.get(url, **kwargs)
    except requests.RequestException as exc:
        raise TransportError(str(exc)) from exc

    if resp.status_code != 200:
        raise ApiStatusError(resp.status_code, _error_reason(resp))
    return resp


def _error_reason(resp: requests.Response) -> str | None:
    """Pull ``reason`` out of Open-Meteo's ``{"error": true, "reason": ...}`` body."""
    try:
        body = resp.json()
    except ValueError:
        return None
    if isinstance(body, dict) and body.get("error"):
        reason = body.get("reason")
        return str(reason) if reason is not None else None
    return None


def decode_response(resp: requests.Response, *, verbose: bool = False) -> dict[str, Any]:
    """
    Decode the body as UTF-8 JSON and check for the ``hourly`` block.

    Args:
        resp: Response returned by :func:`fetch_hourly_archive`.
        verbose: Print a short preview of the payload for inspection.

    Returns:
        The parsed payload; ``payload["hourly"]`` is guaranteed to be a dict.

    Raises:
        SchemaError: Body is not JSON, not an object, or has no ``hourly`` object.
    """
    try:
        text = resp.content.decode("utf-8")
        payload = json.loads(text)
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        msg = f"Unexpected data format: response body is not UTF-8 JSON ({exc})"
        raise SchemaError(msg) from exc

    if not isinstance(payload, dict):
        msg = f"Unexpected data format: expected a JSON object, got {type(payload).__name__}"
        raise SchemaError(msg)

    if verbose:
        preview_payload(payload, text)

    if "hourly" not in payload:
        msg = "Unexpected data format: 'hourly' field not found in the API response."
        raise SchemaError(msg)
    if not isinstance(payload["hourly"], dict):
        msg = "Unexpected data format: 'hourly' field is not an object."
        raise SchemaError(msg)

    return payload


def flatten_json(data: dict[str, Any], prefix: str = "", sep: str = ".") -> dict[str, Any]:
    """Flatten nested objects into dotted keys.

    Arrays are left as leaf values, so ``{"hourly": {"time": [...]}}``
    becomes ``{"hourly.time": [...]}``.
    """
    flat: dict[str, Any] = {}
    for key, value in data.items():
        name = f"{prefix}{sep}{key}" if prefix else key
        if isinstance(value, dict):
            flat.update(flatten_json(value, name, sep))
        else:
            flat[name] = value
    return flat


def preview_payload(payload: dict[str, Any], raw_text: str) -> None:
    """Print the first few flattened fields and the start of the raw body."""
    flat = flatten_json(payload)
    for key in list(flat)[:PREVIEW_FIELDS]:
        value = flat[key]
        if isinstance(value, list):
            value = f"[{len(value)} values]"
        print(f"  {key}: {value}")
    print(raw_text[:PREVIEW_CHARS])
