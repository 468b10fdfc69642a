"""Open-Meteo archive API constants.

API docs:
  - Archive: https://open-meteo.com/en/docs/historical-weather-api
"""

from datetime import date

OPEN_METEO_HISTORICAL = "https://archive-api.open-meteo.com/v1/archive"

# Hourly variables we request, in the order they are joined into the query
HOURLY_VARS = (
    "temperature_2m",
    "precipitation",
    "relative_humidity_2m",
    "dew_point_2m",
)

# New York City, NY (City Hall Park)
DEFAULT_LAT = 40.7128
DEFAULT_LON = -74.0060
DEFAULT_TIMEZONE = "America/New_York"
DEFAULT_START_DATE = date(2014, 1, 2)
DEFAULT_END_DATE = date(2024, 12, 31)

SOURCE_CAPTION = (
    "Source: Open-Meteo Historical Weather API | "
    "Author: Eric Parajon (using code modified from John D. Martin III)"
)
