"""TierService — add, edit, delete, and reorder tiers.

Each mutation runs inside a workspace transaction: a failure leaves the
board exactly as it was, and success is saved wholesale.
"""

from __future__ import annotations

from tierctl.domain.errors import TierError
from tierctl.domain.models import normalize_color
from tierctl.services._helpers import tier_payload
from tierctl.services.base import BaseService
from tierctl.services.result import ServiceResult
from tierctl.services.telemetry import get_current_span, traced


class TierService(BaseService):
    """Tier Registry operations."""

    @traced
    def add(self, *, label: str | None = None, color: str | None = None) -> ServiceResult:
        """Append a new tier with a fresh id and an empty container."""
        op = "add_tier"
        board_cfg = self._workspace.settings.board
        try:
            color = normalize_color(color if color is not None else board_cfg.new_tier_color)
        except ValueError as exc:
            return self._failure(op, "INVALID_INPUT", str(exc))

        try:
            with self._workspace.transaction() as board:
                tier = board.add_tier(
                    label=label if label is not None else board_cfg.new_tier_label,
                    color=color,
                )
                index = board.registry.index_of(tier.id)
        except TierError as exc:
            return self._from_error(op, exc)

        return ServiceResult(
            ok=True,
            op=op,
            data={**tier_payload(board, tier), "index": index},
        )

    @traced
    def update(
        self,
        tier_id: str,
        *,
        label: str | None = None,
        color: str | None = None,
    ) -> ServiceResult:
        """Change a tier's label and/or colour. Order is unchanged."""
        op = "update_tier"
        if label is None and color is None:
            return self._failure(op, "INVALID_INPUT", "Nothing to update: give a label or colour")
        if color is not None:
            try:
                color = normalize_color(color)
            except ValueError as exc:
                return self._failure(op, "INVALID_INPUT", str(exc))

        fields_changed = [
            name for name, value in (("label", label), ("color", color)) if value is not None
        ]
        try:
            with self._workspace.transaction() as board:
                tier = board.update_tier(tier_id, label=label, color=color)
        except TierError as exc:
            return self._from_error(op, exc)

        return ServiceResult(
            ok=True,
            op=op,
            data={**tier_payload(board, tier), "fields_changed": fields_changed},
        )

    @traced
    def delete(self, tier_id: str) -> ServiceResult:
        """Delete a tier; its items move to the end of the unranked bank."""
        op = "delete_tier"
        try:
            with self._workspace.transaction() as board:
                tier = board.registry.get(tier_id)
                moved = board.delete_tier(tier_id)
        except TierError as exc:
            return self._from_error(op, exc)

        span = get_current_span()
        if span is not None:
            span.annotate("items_moved", moved)
        return ServiceResult(
            ok=True,
            op=op,
            data={"id": tier.id, "label": tier.label, "items_moved": moved},
        )

    @traced
    def move(self, tier_id: str, index: int) -> ServiceResult:
        """Move a tier to *index* in the ranking order (clamped)."""
        op = "move_tier"
        try:
            with self._workspace.transaction() as board:
                from_index = board.registry.index_of(tier_id)
                to_index = board.reorder_tier(tier_id, index)
        except TierError as exc:
            return self._from_error(op, exc)

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "id": tier_id,
                "from_index": from_index,
                "to_index": to_index,
                "order": board.registry.ids(),
            },
        )

    def palette(self) -> ServiceResult:
        """List the configured colours and which tiers use each."""
        op = "palette"
        try:
            board = self._workspace.board
        except TierError as exc:
            return self._from_error(op, exc)
        used: dict[str, list[str]] = {}
        for tier in board.registry:
            used.setdefault(tier.color.lower(), []).append(tier.id)
        colors = [
            {"color": color, "tiers": used.get(color, [])}
            for color in self._workspace.settings.board.palette
        ]
        return ServiceResult(ok=True, op=op, data={"colors": colors, "count": len(colors)})
