"""External data source integrations.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs, constants
    └── {feature}.py      # Fetch and decode functions (one per endpoint)

``weather/`` wraps the Open-Meteo archive endpoint. Fetch functions use the
shared session from ``services/http.py`` and raise the errors defined in
``errors.py`` instead of returning status flags.
"""
