"""Config file discovery.

Walk-up finder locates timeman.toml the way git finds .git/.
The TIMEMAN_CONFIG env var and the --config CLI flag take precedence.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "timeman.toml"
CONFIG_ENV_VAR = "TIMEMAN_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for timeman.toml.

    Returns the path to the config file, or None if not found.
    A set TIMEMAN_CONFIG wins over the walk-up, even when it names a
    missing file (which yields None).
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
