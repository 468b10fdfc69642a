"""Tests for Parquet snapshots."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import pandas as pd

from weather_archive.store import meta_path, read_snapshot, read_snapshot_meta, write_snapshot
from weather_archive.table import build_weather_table

if TYPE_CHECKING:
    from pathlib import Path


class TestWriteSnapshot:
    """Test writing snapshots with sidecar metadata."""

    def test_creates_file(self, tmp_path: Path, hourly_block: dict[str, list[Any]]) -> None:
        table = build_weather_table(hourly_block)
        path = write_snapshot(table, tmp_path / "snap.parquet", source="test")
        assert path == tmp_path / "snap.parquet"
        assert path.exists()

    def test_creates_parent_dirs(self, tmp_path: Path, hourly_block: dict[str, list[Any]]) -> None:
        table = build_weather_table(hourly_block)
        path = write_snapshot(table, tmp_path / "deep" / "nested" / "snap.parquet", source="test")
        assert path.exists()

    def test_sidecar_metadata(self, tmp_path: Path, hourly_block: dict[str, list[Any]]) -> None:
        table = build_weather_table(hourly_block)
        path = write_snapshot(
            table,
            tmp_path / "snap.parquet",
            source="open-meteo.com (archive)",
            query={"latitude": 40.7128},
        )

        sidecar = tmp_path / "snap.parquet.meta.json"
        assert meta_path(path) == sidecar
        data = json.loads(sidecar.read_text())
        assert data["meta"]["source"] == "open-meteo.com (archive)"
        assert data["meta"]["rows"] == 3
        assert data["meta"]["columns"][0] == "time"
        assert data["meta"]["query"] == {"latitude": 40.7128}
        assert "fetched_at" in data["meta"]


class TestRoundTrip:
    """Reloading gives back the same table."""

    def test_round_trip_equal(self, tmp_path: Path, hourly_block: dict[str, list[Any]]) -> None:
        table = build_weather_table(hourly_block)
        path = write_snapshot(table, tmp_path / "snap.parquet", source="test")

        loaded = read_snapshot(path)

        pd.testing.assert_frame_equal(loaded, table)

    def test_round_trip_keeps_timezone(
        self, tmp_path: Path, hourly_block: dict[str, list[Any]]
    ) -> None:
        table = build_weather_table(hourly_block)
        loaded = read_snapshot(write_snapshot(table, tmp_path / "snap.parquet", source="test"))

        assert str(loaded["time"].dt.tz) == "America/New_York"
        assert loaded["time"].iloc[0] == pd.Timestamp("2014-01-02 00:00", tz="America/New_York")
        assert list(loaded.columns) == list(table.columns)
        assert len(loaded) == len(table)


class TestReadSnapshotMeta:
    """Test reading sidecar metadata."""

    def test_missing_sidecar(self, tmp_path: Path) -> None:
        assert read_snapshot_meta(tmp_path / "nothing.parquet") == {}

    def test_reads_meta(self, tmp_path: Path, hourly_block: dict[str, list[Any]]) -> None:
        table = build_weather_table(hourly_block)
        path = write_snapshot(table, tmp_path / "snap.parquet", source="test", note="x")
        meta = read_snapshot_meta(path)
        assert meta["source"] == "test"
        assert meta["note"] == "x"
