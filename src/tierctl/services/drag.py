"""DragService — apply one drag gesture to the saved board.

Gestures that resolve to nothing are not errors: the result is ``ok``
with ``action == "noop"`` and the snapshot is left untouched.
"""

from __future__ import annotations

from tierctl.domain.drag import DragEngine
from tierctl.domain.errors import TierError
from tierctl.domain.types import ItemKind
from tierctl.services.base import BaseService
from tierctl.services.result import ServiceResult
from tierctl.services.telemetry import traced


class DragService(BaseService):
    """Drag Transaction Engine entry point."""

    @traced
    def drag(self, active_id: str, over_id: str | None = None) -> ServiceResult:
        """Drag *active_id* and drop it on *over_id* (None: dropped outside)."""
        op = "drag"
        try:
            board = self._workspace.board
            outcome = DragEngine(board).perform(active_id, over_id)
            if outcome.changed:
                self._workspace.save()
        except TierError as exc:
            return self._from_error(op, exc)

        data = {**outcome.to_dict(), "changed": outcome.changed}
        if outcome.dest_container is not None:
            data["dest_items"] = board.store.item_ids(outcome.dest_container)
        if outcome.changed and outcome.kind == ItemKind.ROW:
            data["order"] = board.registry.ids()
        return ServiceResult(ok=True, op=op, data=data)
