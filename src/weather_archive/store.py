"""Weather table snapshots.

The table is written as Apache Parquet, which keeps column order, dtypes and
the timezone of ``time``.  Freshness/provenance metadata lives in a sidecar
``.meta.json`` next to the data file, so the snapshot itself stays a plain
Parquet file any tool can open.
"""

from __future__ import annotations

import json
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

import pandas as pd

if TYPE_CHECKING:
    from pathlib import Path


def write_snapshot(
    table: pd.DataFrame,
    path: Path,
    source: str,
    **params: Any,
) -> Path:
    """Write the table to ``path`` with a sidecar metadata file.

    Args:
        table: Weather table to persist.
        path: Destination Parquet file.
        source: Data source identifier (e.g. ``"open-meteo.com (archive)"``).
        **params: Extra metadata fields (query params, location, etc.).

    Returns:
        Path of the written snapshot.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("wb") as f:
        table.to_parquet(f, index=False)

    meta: dict[str, Any] = {
        "source": source,
        "fetched_at": datetime.now(UTC).isoformat(),
        "rows": len(table),
        "columns": list(table.columns),
    }
    if params:
        meta.update(params)

    with meta_path(path).open("w") as f:
        json.dump({"meta": meta}, f, indent=2)

    return path


def read_snapshot(path: Path) -> pd.DataFrame:
    """Reload a table written by :func:`write_snapshot`."""
    with path.open("rb") as f:
        return pd.read_parquet(f)


def read_snapshot_meta(path: Path) -> dict[str, Any]:
    """Return sidecar metadata for a snapshot, or ``{}`` if there is none."""
    sidecar = meta_path(path)
    if not sidecar.exists():
        return {}
    with sidecar.open() as f:
        result: dict[str, Any] = json.load(f)
    return result.get("meta", {})


def meta_path(path: Path) -> Path:
    """Sidecar path for a snapshot (``x.parquet`` → ``x.parquet.meta.json``)."""
    return path.with_suffix(path.suffix + ".meta.json")
