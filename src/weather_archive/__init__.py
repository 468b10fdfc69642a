"""Weather Archive - historical hourly weather for a fixed location.

Architecture::

    datasources/   Open-Meteo archive API (query, fetch, decode)
    table.py       Decoded hourly block → pandas DataFrame
    renderers/     DataFrame → 2x2 PNG overview (matplotlib)
    store.py       Parquet snapshot with sidecar metadata
    checks.py      Post-run output existence check
    flows/         Prefect orchestration (one linear run)
    services/      Shared utilities (HTTP session with default timeout)

Data flow: datasources → table → renderers + store → checks
"""

__version__ = "0.1.0"
__author__ = "Eric Parajon"

from weather_archive.config import Settings
from weather_archive.schemas import ArchiveQuery

__all__ = ["ArchiveQuery", "Settings", "__version__"]
