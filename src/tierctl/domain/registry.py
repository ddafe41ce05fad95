"""Tier Registry — the ordered list of tier definitions.

Order is the ranking order, best first.  Ids are unique and never reused:
an id removed from the registry is retired and rejected if offered again.

Container bookkeeping lives in :mod:`tierctl.domain.partition`; the joint
add/delete operations that must touch both structures are exposed by
:class:`tierctl.domain.board.Board`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tierctl.domain.errors import NotFoundError
from tierctl.domain.ids import UNRANKED_ID
from tierctl.domain.models import Tier
from tierctl.domain.ordering import array_move, clamp_index

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


class TierRegistry:
    """Ordered, id-unique sequence of :class:`Tier`."""

    def __init__(self, tiers: Iterable[Tier] = ()) -> None:
        self._tiers: list[Tier] = []
        self._retired: set[str] = set()
        for tier in tiers:
            self.append(tier)

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._tiers)

    def __iter__(self) -> Iterator[Tier]:
        return iter(tuple(self._tiers))

    def __contains__(self, tier_id: object) -> bool:
        return any(tier.id == tier_id for tier in self._tiers)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TierRegistry):
            return NotImplemented
        return self._tiers == other._tiers

    def __repr__(self) -> str:
        return f"TierRegistry({[tier.id for tier in self._tiers]!r})"

    @property
    def tiers(self) -> tuple[Tier, ...]:
        return tuple(self._tiers)

    def ids(self) -> list[str]:
        return [tier.id for tier in self._tiers]

    def find(self, tier_id: str) -> Tier | None:
        """Return the tier with *tier_id*, or None."""
        for tier in self._tiers:
            if tier.id == tier_id:
                return tier
        return None

    def get(self, tier_id: str) -> Tier:
        """Return the tier with *tier_id*; raise NotFoundError if absent."""
        tier = self.find(tier_id)
        if tier is None:
            raise NotFoundError("tier", tier_id)
        return tier

    def index_of(self, tier_id: str) -> int:
        for index, tier in enumerate(self._tiers):
            if tier.id == tier_id:
                return index
        raise NotFoundError("tier", tier_id)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def append(self, tier: Tier) -> Tier:
        """Append *tier* to the end of the order.

        Raises ValueError if the id is reserved, already present, or retired.
        """
        if tier.id == UNRANKED_ID:
            msg = f"Tier id {UNRANKED_ID!r} is reserved for the image bank"
            raise ValueError(msg)
        if tier.id in self:
            msg = f"Duplicate tier id: {tier.id}"
            raise ValueError(msg)
        if tier.id in self._retired:
            msg = f"Tier id {tier.id} was deleted and cannot be reused"
            raise ValueError(msg)
        self._tiers.append(tier)
        return tier

    def update(
        self,
        tier_id: str,
        *,
        label: str | None = None,
        color: str | None = None,
    ) -> Tier:
        """Replace label and/or colour in place. Order is unchanged."""
        index = self.index_of(tier_id)
        current = self._tiers[index]
        changes: dict[str, str] = {}
        if label is not None:
            changes["label"] = label
        if color is not None:
            changes["color"] = color
        updated = current.model_copy(update=changes)
        self._tiers[index] = updated
        return updated

    def remove(self, tier_id: str) -> Tier:
        """Remove a tier from the order and retire its id."""
        index = self.index_of(tier_id)
        removed = self._tiers.pop(index)
        self._retired.add(removed.id)
        return removed

    def reorder(self, tier_id: str, new_index: int) -> int:
        """Move a tier to *new_index* (clamped). Returns the final index."""
        old_index = self.index_of(tier_id)
        target = clamp_index(new_index, len(self._tiers) - 1)
        if target != old_index:
            self._tiers = array_move(self._tiers, old_index, target)
        return target

    def copy(self) -> TierRegistry:
        clone = TierRegistry(self._tiers)
        clone._retired = set(self._retired)
        return clone
