"""Snapshot storage slot — one JSON document, written and read wholesale.

Writes go to a sibling temporary file which then replaces the slot, so a
reader never observes a partially written snapshot.  Every OS-level failure
surfaces as :class:`StorageUnavailableError`.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from tierctl.domain.errors import StorageUnavailableError

logger = logging.getLogger(__name__)


class SnapshotStorage:
    """A single persisted snapshot at a fixed path."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def exists(self) -> bool:
        return self.path.is_file()

    def read_text(self) -> str | None:
        """Return the stored document, or None when the slot is empty."""
        if not self.exists():
            return None
        try:
            return self.path.read_text(encoding="utf-8")
        except OSError as exc:
            raise StorageUnavailableError(f"Cannot read {self.path}: {exc}") from exc

    def write_text(self, content: str) -> Path:
        """Atomically replace the slot with *content*."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent
            )
            tmp_path = Path(tmp_name)
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as fh:
                    fh.write(content)
                os.replace(tmp_path, self.path)
            except BaseException:
                tmp_path.unlink(missing_ok=True)
                raise
        except OSError as exc:
            raise StorageUnavailableError(f"Cannot write {self.path}: {exc}") from exc
        logger.debug("Snapshot written: %s (%d bytes)", self.path, len(content))
        return self.path

    def clear(self) -> bool:
        """Remove the stored snapshot. Returns True if one existed."""
        try:
            existed = self.exists()
            self.path.unlink(missing_ok=True)
        except OSError as exc:
            raise StorageUnavailableError(f"Cannot remove {self.path}: {exc}") from exc
        return existed

    def quarantine(self, suffix: str) -> Path | None:
        """Move an unreadable snapshot aside as ``<name>.corrupt-<suffix>``."""
        if not self.exists():
            return None
        target = self.path.with_name(f"{self.path.name}.corrupt-{suffix}")
        try:
            self.path.replace(target)
        except OSError as exc:
            raise StorageUnavailableError(f"Cannot move {self.path} aside: {exc}") from exc
        logger.warning("Corrupt snapshot moved to %s", target)
        return target
