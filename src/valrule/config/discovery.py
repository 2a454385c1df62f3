"""Locate ``valrule.toml``.

The file is looked up in the start directory and then in each parent,
the way git finds ``.git/``. ``VALRULE_CONFIG`` pins an exact file.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "valrule.toml"
CONFIG_ENV_VAR = "VALRULE_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest valrule.toml at or above *start* (default: cwd).

    When VALRULE_CONFIG is set, only that file is considered.
    """
    pinned = os.environ.get(CONFIG_ENV_VAR)
    if pinned:
        path = Path(pinned)
        return path if path.is_file() else None

    origin = (start or Path.cwd()).resolve()
    for directory in (origin, *origin.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
