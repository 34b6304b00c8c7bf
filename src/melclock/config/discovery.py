"""Locate melclock.toml.

``MELCLOCK_CONFIG`` names the file explicitly; a path that does not exist
means "no config" and the search stops there.  Otherwise the first
``melclock.toml`` found walking up from the start directory wins, so a
shift folder can carry its own fleet defaults.  ``--config`` bypasses
both; see ``MelSettings.from_cli``.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from pathlib import Path

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "melclock.toml"
CONFIG_ENV_VAR = "MELCLOCK_CONFIG"


def config_search_paths(start: Path | None = None) -> Iterator[Path]:
    """Yield candidate files from *start* (default: cwd) up to the filesystem root."""
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        yield directory / CONFIG_FILENAME


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file melclock should read, or None."""
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        explicit = Path(env_path).expanduser()
        if explicit.is_file():
            return explicit
        logger.warning("%s points at %s, which is not a file; using defaults", CONFIG_ENV_VAR, explicit)
        return None

    return next((p for p in config_search_paths(start) if p.is_file()), None)
