"""Fatal error kinds raised by the archive pipeline.

None of these are retried. Each one aborts the run at the point it is raised
and surfaces at the CLI as a non-zero exit.
"""

from __future__ import annotations


class WeatherArchiveError(Exception):
    """Base class for all pipeline failures."""


class TransportError(WeatherArchiveError):
    """The request could not be sent (bad URL, DNS, connection, timeout)."""

    def __init__(self, cause: str) -> None:
        self.cause = cause
        super().__init__(f"Invalid URL or network error: {cause}")


class ApiStatusError(WeatherArchiveError):
    """The API answered with a status other than 200."""

    def __init__(self, status_code: int, reason: str | None = None) -> None:
        self.status_code = status_code
        self.reason = reason
        msg = f"Failed to retrieve data. Status code: {status_code}"
        if reason:
            msg = f"{msg} ({reason})"
        super().__init__(msg)


class SchemaError(WeatherArchiveError):
    """The decoded payload does not have the expected shape or field names."""


class TableIntegrityError(WeatherArchiveError):
    """Hourly arrays disagree in length or time does not strictly increase."""
