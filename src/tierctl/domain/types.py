"""Entity kinds and drop-target variants.

A drag gesture names its participants by bare id.  The resolver turns an
id into one of three target variants, dispatching by which id domain the
value belongs to rather than by its string shape.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from tierctl.domain.ids import UNRANKED_ID


class ItemKind(StrEnum):
    """Kinds of entity a drag gesture can manipulate."""

    ROW = "row"
    IMAGE = "image"


class DragAction(StrEnum):
    """Mutation chosen for a completed drag gesture."""

    REORDER_TIERS = "reorder_tiers"
    MOVE_WITHIN = "move_within"
    MOVE_ACROSS = "move_across"
    NOOP = "noop"


@dataclass(frozen=True)
class TierTarget:
    """A tier row; also the container holding that tier's items."""

    tier_id: str

    @property
    def container_id(self) -> str:
        return self.tier_id

    @property
    def kind(self) -> ItemKind:
        return ItemKind.ROW


@dataclass(frozen=True)
class ContainerTarget:
    """The unranked image bank as a drop area."""

    container_id: str = UNRANKED_ID


@dataclass(frozen=True)
class ItemTarget:
    """An image item and the container currently holding it."""

    item_id: str
    container_id: str

    @property
    def kind(self) -> ItemKind:
        return ItemKind.IMAGE


Target = TierTarget | ContainerTarget | ItemTarget
