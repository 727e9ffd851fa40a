"""Locate ``playbill.toml``.

Lookup order: the ``PLAYBILL_CONFIG`` env var, then the start directory
and each of its parents.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "playbill.toml"
CONFIG_ENV_VAR = "PLAYBILL_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file that applies to *start* (default: cwd), if any.

    A ``PLAYBILL_CONFIG`` pointing at a missing file disables discovery
    rather than falling back to the walk-up.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        path = Path(env_path)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
