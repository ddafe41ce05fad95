"""ImageService — import image files into the unranked bank."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from tierctl.domain.errors import TierError
from tierctl.domain.ids import UNRANKED_ID
from tierctl.infrastructure.images import ImageImportError, read_images
from tierctl.services.base import BaseService
from tierctl.services.result import ServiceResult
from tierctl.services.telemetry import trace_span, traced

if TYPE_CHECKING:
    from collections.abc import Sequence


class ImageService(BaseService):
    """Image import surface."""

    @traced
    def import_images(self, paths: Sequence[str | Path]) -> ServiceResult:
        """Append each file, in order, to the unranked bank as a new item.

        Every file is read before the board changes; one bad file aborts
        the whole import.
        """
        op = "import_images"
        if not paths:
            return self._failure(op, "INVALID_INPUT", "No image files given")

        max_bytes = self._workspace.settings.images.max_bytes
        try:
            with trace_span("read_files"):
                items = read_images([Path(p) for p in paths], max_bytes=max_bytes)
        except ImageImportError as exc:
            return self._failure(
                op,
                "IMPORT_FAILED",
                f"Cannot import {exc.path.name}: {exc.reason}",
                detail={"path": str(exc.path)},
            )

        try:
            with self._workspace.transaction() as board:
                count = board.import_items(items)
        except TierError as exc:
            return self._from_error(op, exc)

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "imported": [
                    {"id": item.id, "source": Path(p).name}
                    for item, p in zip(items, paths, strict=True)
                ],
                "count": count,
                "unranked_count": len(board.store.items(UNRANKED_ID)),
            },
        )
