"""Post-run output check.

Looks at the filesystem only: it does not care whether the earlier steps
reported success, and it never raises.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

SUCCESS_MESSAGE = "Data download, visualization, and saving complete."
MISSING_HEADER = "The required file(s) are missing:"


def find_missing_outputs(paths: Sequence[Path]) -> list[Path]:
    """Return the paths that do not exist, keeping the input order."""
    return [p for p in paths if not p.exists()]


def completion_message(missing: Sequence[Path]) -> str:
    """Success line, or the header followed by one missing file name per line."""
    if not missing:
        return SUCCESS_MESSAGE
    return "\n".join([MISSING_HEADER, *(p.name for p in missing)])
