"""2x2 weather overview chart.

One line chart per measured column against ``time``, written as a single
PNG.  Uses the non-interactive Agg backend so it runs headless.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import matplotlib as mpl

mpl.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import pandas as pd  # noqa: E402

from weather_archive.datasources.weather.client import SOURCE_CAPTION  # noqa: E402
from weather_archive.table import require_columns  # noqa: E402

if TYPE_CHECKING:
    from pathlib import Path

pd.plotting.register_matplotlib_converters()

OVERVIEW_TITLE = "Weather Data Overview"

# (column, panel title, y-axis label), laid out row-major on the 2x2 grid
PANELS: tuple[tuple[str, str, str], ...] = (
    ("temperature", "Temperature over Time", "Temperature (°F)"),
    ("precipitation", "Precipitation (rain + snow) over Time", "Precipitation (mm)"),
    ("relative_humidity", "Relative Humidity over Time", "Relative Humidity (%)"),
    ("dew_point", "Dew Point over Time", "Dew Point (°F)"),
)

FIGSIZE_IN = (14, 14)
DPI = 100  # 1400x1400 px
LINE_COLOR = "blue"


def render_weather_plots(
    table: pd.DataFrame,
    path: Path,
    *,
    caption: str = SOURCE_CAPTION,
) -> Path:
    """
    Draw the four time-series panels and save them as one PNG.

    Args:
        table: Weather table (see ``table.build_weather_table``).
        path: Output image path.
        caption: Attribution text placed above the top-right panel.

    Returns:
        The path written.
    """
    require_columns(table, ["time", *(column for column, _, _ in PANELS)])

    fig, axes = plt.subplots(2, 2, figsize=FIGSIZE_IN, dpi=DPI)
    try:
        for ax, (column, title, ylabel) in zip(axes.flat, PANELS, strict=True):
            ax.plot(table["time"], table[column], color=LINE_COLOR, linewidth=0.6)
            ax.set_title(title, fontsize=14)
            ax.set_xlabel("Time")
            ax.set_ylabel(ylabel)

        fig.suptitle(OVERVIEW_TITLE, fontsize=24, fontweight="bold")
        axes[0, 1].annotate(
            caption,
            xy=(1.0, 1.08),
            xycoords="axes fraction",
            ha="right",
            va="bottom",
            fontsize=9,
        )
        fig.tight_layout(rect=(0, 0, 1, 0.95))
        fig.savefig(path, dpi=DPI, format="png")
    finally:
        plt.close(fig)

    return path
