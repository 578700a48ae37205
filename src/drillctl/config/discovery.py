"""Locate drillctl.toml.

The file is found by walking up from the working directory, the way git
finds ``.git/``.  ``DRILLCTL_CONFIG`` pins an explicit file instead;
the ``--config`` flag is handled by :meth:`DrillSettings.from_cli`.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "drillctl.toml"
CONFIG_ENV_VAR = "DRILLCTL_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest drillctl.toml at or above *start* (default: cwd).

    When ``DRILLCTL_CONFIG`` is set, only that file is considered: its
    path is returned if it exists, otherwise None.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        pinned = Path(env_path)
        return pinned if pinned.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
