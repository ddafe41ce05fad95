"""BackupService — export the board to a JSON file and restore from one.

Exported files use the same schema as the storage slot, so a backup can be
restored on any workspace.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tierctl.domain import snapshot
from tierctl.domain.board import Board
from tierctl.domain.errors import MalformedSnapshotError, StorageUnavailableError, TierError
from tierctl.services._helpers import board_payload
from tierctl.services.base import BaseService
from tierctl.services.result import ServiceResult
from tierctl.services.telemetry import traced

if TYPE_CHECKING:
    from pathlib import Path


class BackupService(BaseService):
    """Download/upload of board snapshots."""

    @traced
    def export(self, output: Path | None = None) -> ServiceResult:
        """Write the board as indented JSON to *output* (default: workspace export name)."""
        op = "export"
        target = output or self._workspace.root / self._workspace.settings.storage.export_name
        try:
            board = self._workspace.board
            content = snapshot.dumps(board.registry, board.store)
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content + "\n", encoding="utf-8")
        except OSError as exc:
            return self._from_error(
                op, StorageUnavailableError(f"Cannot write backup {target}: {exc}")
            )
        except TierError as exc:
            return self._from_error(op, exc)

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "path": str(target),
                "tier_count": len(board.registry),
                "item_count": len(board.store),
            },
        )

    @traced
    def export_text(self) -> ServiceResult:
        """Return the board document as a string (for ``--stdout``)."""
        op = "export"
        try:
            board = self._workspace.board
        except TierError as exc:
            return self._from_error(op, exc)
        return ServiceResult(
            ok=True,
            op=op,
            data={"content": snapshot.dumps(board.registry, board.store)},
        )

    @traced
    def restore(self, source: Path) -> ServiceResult:
        """Replace the whole board with the document in *source*.

        Nothing changes unless the document decodes cleanly.
        """
        op = "restore"
        warnings: list[str] = []
        try:
            raw = source.read_bytes()
        except OSError as exc:
            return self._from_error(
                op, StorageUnavailableError(f"Cannot read backup {source}: {exc}")
            )

        try:
            registry, store = snapshot.loads(raw, warnings=warnings)
        except MalformedSnapshotError as exc:
            return self._from_error(
                op,
                MalformedSnapshotError(f"Failed to load backup {source.name}: {exc}"),
                detail={"path": str(source)},
            )

        board = Board(registry, store)
        try:
            self._workspace.replace(board)
        except TierError as exc:
            return self._from_error(op, exc, warnings=warnings)

        return ServiceResult(
            ok=True,
            op=op,
            data={"restored_from": str(source), **board_payload(board)},
            warnings=warnings,
        )
