"""Rendering functions: weather table -> image files.

Public API:
  - plots: render_weather_plots, PANELS
"""

from weather_archive.renderers.plots import PANELS, render_weather_plots

__all__ = ["PANELS", "render_weather_plots"]
