"""Workspace — the board plus the storage slot it is saved to.

The Workspace is the single dependency injected into every service.  The
board is loaded lazily from the snapshot slot on first access, so
``--help`` and ``--version`` never touch the disk.

:meth:`Workspace.transaction` applies a mutation as one step:

- **Board**: a copy is taken up front; if the block raises, the copy is
  reinstated and nothing is written.
- **Storage**: on success the whole board is re-encoded and written
  wholesale.  A failed write leaves the in-memory board authoritative and
  raises :class:`StorageUnavailableError`.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from tierctl.domain import snapshot
from tierctl.domain.board import Board
from tierctl.domain.errors import MalformedSnapshotError
from tierctl.infrastructure.storage import SnapshotStorage

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from tierctl.config.settings import TierSettings

logger = logging.getLogger(__name__)


class Workspace:
    """A tier-list board bound to its persisted snapshot."""

    def __init__(self, settings: TierSettings) -> None:
        self._settings = settings
        self._root = settings.workspace_root
        self._storage = SnapshotStorage(settings.snapshot_path)
        self._board: Board | None = None
        self._load_warnings: list[str] = []

    @property
    def root(self) -> Path:
        return self._root

    @property
    def settings(self) -> TierSettings:
        return self._settings

    @property
    def storage(self) -> SnapshotStorage:
        return self._storage

    @property
    def load_warnings(self) -> list[str]:
        """Repairs and fallbacks applied while loading the snapshot."""
        _ = self.board
        return list(self._load_warnings)

    @property
    def board(self) -> Board:
        """The live board (loaded on first access)."""
        if self._board is None:
            self._board = self._load()
        return self._board

    def default_board(self) -> Board:
        return Board.default(self._settings.board.default_tiers)

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def _load(self) -> Board:
        raw = self._storage.read_text()
        if raw is None:
            logger.debug("No snapshot at %s; starting from defaults", self._storage.path)
            return self.default_board()
        try:
            registry, store = snapshot.loads(raw, warnings=self._load_warnings)
        except MalformedSnapshotError as exc:
            stamp = datetime.now(UTC).strftime("%Y%m%dT%H%M%S")
            moved = self._storage.quarantine(stamp)
            self._load_warnings.append(f"Saved board unreadable ({exc}); moved to {moved}")
            return self.default_board()
        for warning in self._load_warnings:
            logger.warning("Snapshot repaired: %s", warning)
        return Board(registry, store)

    def save(self) -> Path:
        """Write the current board to the storage slot."""
        board = self.board
        return self._storage.write_text(snapshot.dumps(board.registry, board.store))

    def replace(self, board: Board) -> Path:
        """Swap in *board* wholesale and persist it."""
        self._board = board
        return self.save()

    def reset(self) -> Board:
        """Clear the storage slot and return to the default board."""
        self._storage.clear()
        self._board = self.default_board()
        self._load_warnings = []
        return self._board

    @contextmanager
    def transaction(self) -> Iterator[Board]:
        """Apply a board mutation atomically, then save.

        Usage::

            with workspace.transaction() as board:
                board.add_tier()
        """
        board = self.board
        backup = board.copy()
        try:
            yield board
        except BaseException:
            self._board = backup
            raise
        self.save()
