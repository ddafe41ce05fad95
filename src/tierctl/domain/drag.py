"""Drag Transaction Engine — turn a drag gesture into one board mutation.

State machine::

    Idle --drag_start(active)--> Dragging(active)
    Dragging(active) --drag_end(over | None)--> Idle

Nothing changes until ``drag_end``.  The gesture is routed to exactly one
of three mutation primitives, or to a no-op:

1. tier over a different tier: reorder the registry, moving the active
   tier to the over tier's current index.
2. item over anything in the same container: reposition within it;
   item over another container or an item in it: move across, appending
   (container drop) or inserting before the over item.
3. anything else: ignored.

Drag failures are absorbed here; callers only ever see a ``noop`` outcome.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import TYPE_CHECKING, Any

from tierctl.domain.errors import NotFoundError
from tierctl.domain.types import DragAction, ItemKind, ItemTarget, TierTarget

if TYPE_CHECKING:
    from tierctl.domain.board import Board
    from tierctl.domain.models import ImageItem, Tier
    from tierctl.domain.types import Target

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DragOutcome:
    """What a completed gesture did to the board."""

    action: DragAction
    active_id: str | None = None
    over_id: str | None = None
    kind: ItemKind | None = None
    source_container: str | None = None
    dest_container: str | None = None
    from_index: int | None = None
    to_index: int | None = None

    @property
    def changed(self) -> bool:
        return self.action != DragAction.NOOP

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["action"] = str(self.action)
        data["kind"] = str(self.kind) if self.kind is not None else None
        return {key: value for key, value in data.items() if value is not None}


class DragEngine:
    """Gesture state for one board. Owns no UI state beyond the active id."""

    def __init__(self, board: Board) -> None:
        self._board = board
        self._active_id: str | None = None

    @property
    def active_id(self) -> str | None:
        return self._active_id

    @property
    def is_dragging(self) -> bool:
        return self._active_id is not None

    def drag_start(self, active_id: str) -> None:
        """Record the entity being dragged. No mutation."""
        self._active_id = active_id

    def active_entity(self) -> Tier | ImageItem | None:
        """The tier or item under the pointer, for drag-overlay rendering."""
        if self._active_id is None:
            return None
        tier = self._board.registry.find(self._active_id)
        if tier is not None:
            return tier
        return self._board.store.get_item(self._active_id)

    def drag_end(self, over_id: str | None = None) -> DragOutcome:
        """Finish the gesture and apply its mutation, if any.

        The active reference is always cleared, even for a no-op.
        """
        active_id = self._active_id
        self._active_id = None
        if active_id is None:
            return DragOutcome(DragAction.NOOP, over_id=over_id)
        if over_id is None:
            return DragOutcome(DragAction.NOOP, active_id=active_id)

        active = self._board.resolve(active_id)
        over = self._board.resolve(over_id)
        try:
            if isinstance(active, TierTarget) and isinstance(over, TierTarget):
                return self._reorder_tiers(active, over)
            if isinstance(active, ItemTarget):
                return self._move_item(active, over)
        except NotFoundError:
            logger.debug("Drag %s -> %s could not be applied", active_id, over_id, exc_info=True)
        return DragOutcome(DragAction.NOOP, active_id=active_id, over_id=over_id)

    def perform(self, active_id: str, over_id: str | None) -> DragOutcome:
        """Run a whole gesture: ``drag_start`` then ``drag_end``."""
        self.drag_start(active_id)
        return self.drag_end(over_id)

    # ------------------------------------------------------------------
    # Routing
    # ------------------------------------------------------------------

    def _reorder_tiers(self, active: TierTarget, over: TierTarget) -> DragOutcome:
        if active.tier_id == over.tier_id:
            return DragOutcome(
                DragAction.NOOP,
                active_id=active.tier_id,
                over_id=over.tier_id,
                kind=ItemKind.ROW,
            )
        registry = self._board.registry
        from_index = registry.index_of(active.tier_id)
        to_index = registry.index_of(over.tier_id)
        registry.reorder(active.tier_id, to_index)
        return DragOutcome(
            DragAction.REORDER_TIERS,
            active_id=active.tier_id,
            over_id=over.tier_id,
            kind=ItemKind.ROW,
            from_index=from_index,
            to_index=to_index,
        )

    def _move_item(self, active: ItemTarget, over: Target | None) -> DragOutcome:
        noop = DragOutcome(
            DragAction.NOOP,
            active_id=active.item_id,
            over_id=_target_id(over),
            kind=ItemKind.IMAGE,
        )
        if over is None:
            return noop

        store = self._board.store
        source = active.container_id
        dest = over.container_id
        from_index = store.index_of(source, active.item_id)

        if source == dest:
            if not isinstance(over, ItemTarget):
                return noop
            to_index = store.index_of(dest, over.item_id)
            if to_index == from_index:
                return noop
            store.move_within(source, from_index, to_index)
            return DragOutcome(
                DragAction.MOVE_WITHIN,
                active_id=active.item_id,
                over_id=over.item_id,
                kind=ItemKind.IMAGE,
                source_container=source,
                dest_container=dest,
                from_index=from_index,
                to_index=to_index,
            )

        dest_index = store.index_of(dest, over.item_id) if isinstance(over, ItemTarget) else None
        final_index = store.move_across(source, active.item_id, dest, dest_index)
        return DragOutcome(
            DragAction.MOVE_ACROSS,
            active_id=active.item_id,
            over_id=_target_id(over),
            kind=ItemKind.IMAGE,
            source_container=source,
            dest_container=dest,
            from_index=from_index,
            to_index=final_index,
        )


def _target_id(target: Target | None) -> str | None:
    if target is None:
        return None
    if isinstance(target, ItemTarget):
        return target.item_id
    return target.container_id
