"""Tests for the 2x2 weather overview chart."""

from __future__ import annotations

import struct
from typing import TYPE_CHECKING, Any
from unittest.mock import patch

import matplotlib.pyplot as plt
import pytest

from weather_archive.errors import SchemaError
from weather_archive.renderers.plots import PANELS, render_weather_plots
from weather_archive.table import build_weather_table

if TYPE_CHECKING:
    from pathlib import Path

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


def png_size(path: Path) -> tuple[int, int]:
    """Width and height from the PNG IHDR chunk."""
    with path.open("rb") as f:
        header = f.read(24)
    assert header[:8] == PNG_SIGNATURE
    width, height = struct.unpack(">II", header[16:24])
    return width, height


class TestPanels:
    """Verify the data-to-panel mapping."""

    def test_one_panel_per_measurement(self) -> None:
        assert [column for column, _, _ in PANELS] == [
            "temperature",
            "precipitation",
            "relative_humidity",
            "dew_point",
        ]

    def test_axis_units(self) -> None:
        labels = {column: ylabel for column, _, ylabel in PANELS}
        assert labels["temperature"].endswith("(°F)")
        assert labels["precipitation"].endswith("(mm)")
        assert labels["relative_humidity"].endswith("(%)")
        assert labels["dew_point"].endswith("(°F)")


class TestRenderWeatherPlots:
    """Test writing the PNG."""

    def test_writes_png(self, tmp_path: Path, hourly_block: dict[str, list[Any]]) -> None:
        table = build_weather_table(hourly_block)
        path = render_weather_plots(table, tmp_path / "weather_plots.png")

        assert path == tmp_path / "weather_plots.png"
        width, height = png_size(path)
        assert width >= 1400
        assert height >= 1400

    def test_draws_each_column(self, tmp_path: Path, hourly_block: dict[str, list[Any]]) -> None:
        table = build_weather_table(hourly_block)

        with patch("weather_archive.renderers.plots.plt.close", wraps=plt.close) as mock_close:
            render_weather_plots(table, tmp_path / "weather_plots.png")
            fig = mock_close.call_args.args[0]

        assert fig.get_suptitle() == "Weather Data Overview"
        axes = fig.axes
        assert [ax.get_title() for ax in axes] == [title for _, title, _ in PANELS]
        for ax, (column, _, ylabel) in zip(axes, PANELS, strict=True):
            assert ax.get_xlabel() == "Time"
            assert ax.get_ylabel() == ylabel
            assert list(ax.lines[0].get_ydata()) == table[column].tolist()

    def test_caption_on_top_right_panel(
        self, tmp_path: Path, hourly_block: dict[str, list[Any]]
    ) -> None:
        table = build_weather_table(hourly_block)

        with patch("weather_archive.renderers.plots.plt.close", wraps=plt.close) as mock_close:
            render_weather_plots(table, tmp_path / "p.png", caption="Source: test")
            fig = mock_close.call_args.args[0]

        texts = [t.get_text() for t in fig.axes[1].texts]
        assert texts == ["Source: test"]
        assert fig.axes[1].texts[0].get_horizontalalignment() == "right"

    def test_figure_closed_on_error(
        self, tmp_path: Path, hourly_block: dict[str, list[Any]]
    ) -> None:
        table = build_weather_table(hourly_block)

        with (
            patch("weather_archive.renderers.plots.plt.close", wraps=plt.close) as mock_close,
            patch("matplotlib.figure.Figure.savefig", side_effect=OSError("disk full")),
            pytest.raises(OSError, match="disk full"),
        ):
            render_weather_plots(table, tmp_path / "p.png")

        mock_close.assert_called_once()

    def test_missing_column_is_schema_error(
        self, tmp_path: Path, hourly_block: dict[str, list[Any]]
    ) -> None:
        table = build_weather_table(hourly_block).drop(columns=["dew_point"])

        with pytest.raises(SchemaError, match="dew_point"):
            render_weather_plots(table, tmp_path / "p.png")

        assert not (tmp_path / "p.png").exists()
