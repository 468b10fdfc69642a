"""
Prefect flows for the archive pipeline.

Flows:
- archive: fetch hourly history, build the table, plot it, snapshot it

Usage (local):
    python -m weather_archive run

Usage (Prefect):
    prefect server start  # Optional, for dashboard
    weather-archive run
"""
