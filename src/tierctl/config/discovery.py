"""Workspace and config file discovery.

A workspace is the nearest directory, walking up from the current one like
git looks for ``.git/``, that holds either ``tierctl.toml`` or a ``.tierctl/``
storage directory.  ``TIERCTL_CONFIG`` and ``--config`` name a config file
directly and skip the walk.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

CONFIG_FILENAME = "tierctl.toml"
CONFIG_ENV_VAR = "TIERCTL_CONFIG"
STORAGE_MARKER = ".tierctl"


def _walk_up(start: Path | None) -> Iterator[Path]:
    current = (start or Path.cwd()).resolve()
    yield current
    yield from current.parents


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file in effect for *start* (default: cwd), or None.

    ``TIERCTL_CONFIG`` wins when set; a value naming a missing file means
    "no config" rather than falling back to the walk.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    for directory in _walk_up(start):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def find_workspace_root(start: Path | None = None) -> Path | None:
    """Nearest directory at or above *start* that holds a config or a saved board."""
    for directory in _walk_up(start):
        if (directory / CONFIG_FILENAME).is_file() or (directory / STORAGE_MARKER).is_dir():
            return directory
    return None
