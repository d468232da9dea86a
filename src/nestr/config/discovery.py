"""Locate the nestr.toml that applies to a directory.

An explicit ``NESTR_CONFIG`` path wins. Otherwise the nearest nestr.toml in
the start directory or one of its ancestors is used.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "nestr.toml"
CONFIG_ENV_VAR = "NESTR_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file for *start* (default: cwd), or None.

    A ``NESTR_CONFIG`` value that does not name a file disables discovery.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
