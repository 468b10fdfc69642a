"""
Prefect flow for the historical weather archive.

Runs once, strictly in order: query → fetch → decode → table → plot →
snapshot → output check.  Any fetch/decode/table error stops the flow before
files are written.  No task retries: a failed request is final.

Run locally (exit code 0 success, 1 fatal, 2 missing outputs):
    python -m weather_archive run
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

from prefect import flow, task
from prefect.cache_policies import NO_CACHE

from weather_archive.checks import completion_message, find_missing_outputs
from weather_archive.config import get_settings
from weather_archive.datasources.weather import historical
from weather_archive.renderers.plots import render_weather_plots
from weather_archive.store import write_snapshot
from weather_archive.table import build_weather_table

if TYPE_CHECKING:
    import pandas as pd
    import requests

    from weather_archive.config import Settings
    from weather_archive.schemas import ArchiveQuery

SNAPSHOT_SOURCE = "open-meteo.com (archive)"


@task(name="build-query", cache_policy=NO_CACHE)
def build_query(settings: Settings) -> ArchiveQuery:
    """Assemble the archive query from settings."""
    return historical.build_query(settings)


@task(name="fetch-archive", cache_policy=NO_CACHE)
def fetch_archive(query: ArchiveQuery, timeout: float | None = None) -> requests.Response:
    """Send the single archive request."""
    return historical.fetch_hourly_archive(query, timeout=timeout)


@task(name="decode-archive", cache_policy=NO_CACHE)
def decode_archive(resp: requests.Response, verbose: bool = False) -> dict[str, Any]:
    """Parse the response body and check for the hourly block."""
    return historical.decode_response(resp, verbose=verbose)


@task(name="build-table", cache_policy=NO_CACHE)
def build_table(payload: dict[str, Any], timezone: str) -> pd.DataFrame:
    """Turn the hourly block into the weather table."""
    return build_weather_table(
        payload["hourly"], timezone, utc_offset_seconds=payload.get("utc_offset_seconds")
    )


@task(name="render-plots", cache_policy=NO_CACHE)
def render_plots(table: pd.DataFrame, path: Path) -> Path:
    """Write the 2x2 overview image."""
    return render_weather_plots(table, path)


@task(name="save-snapshot", cache_policy=NO_CACHE)
def save_snapshot(table: pd.DataFrame, path: Path, query: ArchiveQuery) -> Path:
    """Persist the table with query metadata."""
    return write_snapshot(table, path, source=SNAPSHOT_SOURCE, query=query.to_params())


@task(name="check-outputs", cache_policy=NO_CACHE)
def check_outputs(paths: list[Path]) -> tuple[list[Path], str]:
    """Report which output files are missing."""
    missing = find_missing_outputs(paths)
    return missing, completion_message(missing)


@flow(name="archive-weather", log_prints=True)
def archive_weather(output_dir: Path | None = None, verbose: bool | None = None) -> dict[str, Any]:
    """
    Fetch, tabulate, plot and snapshot the hourly weather archive.

    Args:
        output_dir: Directory for the image and snapshot (default from settings).
        verbose: Print a payload preview (default: settings.debug).

    Returns:
        Row count, output paths, missing file names and the completion message.
    """
    settings = get_settings()
    if output_dir is not None:
        settings = settings.model_copy(update={"output_dir": Path(output_dir)})
    if verbose is None:
        verbose = settings.debug

    query = build_query(settings)
    print(
        f"Fetching hourly weather for ({query.latitude}, {query.longitude}) "
        f"from {query.start_date} to {query.end_date}..."
    )
    resp = fetch_archive(query, timeout=settings.request_timeout)
    payload = decode_archive(resp, verbose=verbose)

    table = build_table(payload, query.timezone)
    print(f"Built weather table with {len(table)} hourly rows")

    plot_path = settings.plot_path
    snapshot_path = settings.snapshot_path
    settings.output_dir.mkdir(parents=True, exist_ok=True)
    try:
        print(f"Rendering plots to {plot_path}...")
        render_plots(table, plot_path)
        print(f"Saving snapshot to {snapshot_path}...")
        save_snapshot(table, snapshot_path, query)
    finally:
        missing, message = check_outputs([plot_path, snapshot_path])
        print(message)

    return {
        "rows": len(table),
        "plot": str(plot_path),
        "snapshot": str(snapshot_path),
        "missing": [p.name for p in missing],
        "message": message,
    }

