"""Allow ``python -m weather_archive``."""

import sys

from weather_archive.cli import main

sys.exit(main())
