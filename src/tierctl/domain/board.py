"""Board — the Tier Registry and Partition Store kept in lockstep.

Operations that must touch both structures (adding and deleting tiers)
live here so neither structure is ever observed without the other.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from tierctl.domain.errors import NotFoundError
from tierctl.domain.ids import UNRANKED_ID, generate_tier_id
from tierctl.domain.models import Tier
from tierctl.domain.partition import PartitionStore
from tierctl.domain.registry import TierRegistry
from tierctl.domain.resolver import container_of, resolve

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from tierctl.domain.models import ImageItem
    from tierctl.domain.types import Target

DEFAULT_NEW_TIER_LABEL = "New Tier"
DEFAULT_NEW_TIER_COLOR = "#4a4a4a"

DEFAULT_TIERS: tuple[Tier, ...] = (
    Tier(id="S", label="S", color="#ff7f7f"),
    Tier(id="A", label="A", color="#ffbf7f"),
    Tier(id="B", label="B", color="#ffff7f"),
    Tier(id="C", label="C", color="#7fff7f"),
    Tier(id="D", label="D", color="#7fbfff"),
)

DEFAULT_PALETTE: tuple[str, ...] = (
    "#ff7f7f",
    "#ffbf7f",
    "#ffff7f",
    "#7fff7f",
    "#7fbfff",
    "#7f7fff",
    "#bf7fff",
    "#ff7fff",
    "#4a4a4a",
    "#ffffff",
)

SEVERITY_ERROR = "error"
SEVERITY_WARNING = "warning"

CAT_PAYLOAD = "payload"
CAT_REFERENCES = "referential_integrity"


@dataclass(frozen=True)
class Issue:
    """One integrity problem found by :meth:`Board.check_integrity`."""

    category: str
    severity: str
    message: str
    subject_id: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "category": self.category,
            "severity": self.severity,
            "message": self.message,
            "id": self.subject_id,
        }


class Board:
    """Aggregate root over a :class:`TierRegistry` and a :class:`PartitionStore`."""

    def __init__(
        self,
        registry: TierRegistry | None = None,
        store: PartitionStore | None = None,
    ) -> None:
        self.registry = registry if registry is not None else TierRegistry()
        self.store = store if store is not None else PartitionStore()

    @classmethod
    def default(cls, tiers: Sequence[Tier] = DEFAULT_TIERS) -> Board:
        """A fresh board: the given tiers, each with an empty container."""
        registry = TierRegistry(tiers)
        store = PartitionStore({tier.id: [] for tier in registry})
        return cls(registry, store)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.registry == other.registry and self.store == other.store

    def copy(self) -> Board:
        return Board(self.registry.copy(), self.store.copy())

    # ------------------------------------------------------------------
    # Tier operations
    # ------------------------------------------------------------------

    def add_tier(
        self,
        *,
        label: str = DEFAULT_NEW_TIER_LABEL,
        color: str = DEFAULT_NEW_TIER_COLOR,
    ) -> Tier:
        """Append a tier with a fresh id and create its empty container."""
        tier = Tier(id=generate_tier_id(), label=label, color=color)
        self.store.create_container(tier.id)
        self.registry.append(tier)
        return tier

    def update_tier(
        self,
        tier_id: str,
        *,
        label: str | None = None,
        color: str | None = None,
    ) -> Tier:
        return self.registry.update(tier_id, label=label, color=color)

    def delete_tier(self, tier_id: str) -> int:
        """Delete a tier, appending its items to the unranked bank.

        Returns the number of migrated items.  Raises NotFoundError for the
        bank id or an unknown tier, leaving the board unchanged.
        """
        if tier_id == UNRANKED_ID or tier_id not in self.registry:
            raise NotFoundError("tier", tier_id)
        moved = self.store.dissolve_container(tier_id, into=UNRANKED_ID)
        self.registry.remove(tier_id)
        return moved

    def reorder_tier(self, tier_id: str, new_index: int) -> int:
        return self.registry.reorder(tier_id, new_index)

    # ------------------------------------------------------------------
    # Items and lookup
    # ------------------------------------------------------------------

    def import_items(self, items: Iterable[ImageItem]) -> int:
        return self.store.import_items(items)

    def resolve(self, identifier: str) -> Target | None:
        return resolve(self.registry, self.store, identifier)

    def container_of(self, identifier: str) -> str | None:
        return container_of(self.registry, self.store, identifier)

    def container_order(self) -> list[str]:
        """Tier containers in ranking order, then the bank."""
        return [*self.registry.ids(), UNRANKED_ID]

    def check_integrity(self) -> list[Issue]:
        """Report partition and reference violations (read-only)."""
        issues: list[Issue] = []
        tier_ids = set(self.registry.ids())

        for tier_id in self.registry.ids():
            if tier_id not in self.store:
                issues.append(
                    Issue(CAT_REFERENCES, SEVERITY_ERROR, "Tier has no container", tier_id)
                )
        for container_id in self.store.container_ids():
            if container_id != UNRANKED_ID and container_id not in tier_ids:
                issues.append(
                    Issue(
                        CAT_REFERENCES,
                        SEVERITY_ERROR,
                        "Container does not belong to any tier",
                        container_id,
                    )
                )

        container_ids = tier_ids | {UNRANKED_ID}
        for _container_id, item in self.store.iter_items():
            if item.id in container_ids:
                issues.append(
                    Issue(
                        CAT_REFERENCES,
                        SEVERITY_ERROR,
                        "Item id is also a container id",
                        item.id,
                    )
                )
            if not item.src.startswith("data:"):
                issues.append(
                    Issue(
                        CAT_PAYLOAD,
                        SEVERITY_WARNING,
                        "Item payload is not a data URI",
                        item.id,
                    )
                )
        return issues
