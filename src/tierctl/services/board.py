"""BoardService — view, save, reset, and integrity check of the whole board."""

from __future__ import annotations

from typing import Any

from tierctl.domain.errors import TierError
from tierctl.services._helpers import board_payload
from tierctl.services.base import BaseService
from tierctl.services.result import ServiceResult
from tierctl.services.telemetry import trace_span, traced

CAT_SNAPSHOT = "snapshot_repair"


class BoardService(BaseService):
    """Whole-board operations."""

    @traced
    def show(self) -> ServiceResult:
        """Return every tier (in ranking order) and the unranked bank."""
        try:
            board = self._workspace.board
        except TierError as exc:
            return self._from_error("show", exc)
        return ServiceResult(
            ok=True,
            op="show",
            data=board_payload(board),
            warnings=self._workspace.load_warnings,
        )

    @traced
    def save(self) -> ServiceResult:
        """Write the current board to the storage slot."""
        op = "save"
        try:
            path = self._workspace.save()
        except TierError as exc:
            return self._from_error(op, exc)
        board = self._workspace.board
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "path": str(path),
                "tier_count": len(board.registry),
                "item_count": len(board.store),
            },
        )

    @traced
    def reset(self) -> ServiceResult:
        """Clear the saved board and return to the default tiers."""
        op = "reset"
        try:
            cleared = self._workspace.storage.path.is_file()
            board = self._workspace.reset()
        except TierError as exc:
            return self._from_error(op, exc)
        return ServiceResult(
            ok=True,
            op=op,
            data={"cleared": cleared, **board_payload(board)},
        )

    @traced
    def check(self) -> ServiceResult:
        """Report snapshot repairs and integrity issues without modifying anything."""
        issues: list[dict[str, Any]] = []
        try:
            with trace_span("snapshot_repairs"):
                for warning in self._workspace.load_warnings:
                    issues.append(
                        {
                            "category": CAT_SNAPSHOT,
                            "severity": "warning",
                            "message": warning,
                            "id": str(self._workspace.storage.path.name),
                        }
                    )
            with trace_span("board_integrity"):
                issues.extend(issue.to_dict() for issue in self._workspace.board.check_integrity())
        except TierError as exc:
            return self._from_error("check", exc)

        return ServiceResult(
            ok=True,
            op="check",
            data={"issues": issues, "count": len(issues)},
        )
