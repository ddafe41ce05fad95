"""Container Resolver — map any id to the container that holds it.

Ids come from two disjoint domains (tier ids and item ids) plus the
reserved bank id.  Container ids resolve to themselves; item ids resolve
to the container whose sequence currently contains them.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tierctl.domain.ids import UNRANKED_ID
from tierctl.domain.types import ContainerTarget, ItemTarget, Target, TierTarget

if TYPE_CHECKING:
    from tierctl.domain.partition import PartitionStore
    from tierctl.domain.registry import TierRegistry

logger = logging.getLogger(__name__)


def resolve(registry: TierRegistry, store: PartitionStore, identifier: str) -> Target | None:
    """Classify *identifier* as a tier, the bank, or an item.

    Returns None when the id is unknown everywhere, which under the
    exhaustive-partition invariant means the caller holds a stale id.
    """
    if identifier == UNRANKED_ID:
        return ContainerTarget()
    if identifier in registry:
        return TierTarget(identifier)
    location = store.locate(identifier)
    if location is not None:
        return ItemTarget(item_id=identifier, container_id=location[0])
    logger.debug("Unresolvable id: %s", identifier)
    return None


def container_of(registry: TierRegistry, store: PartitionStore, identifier: str) -> str | None:
    """Return the container id for *identifier*, or None if unknown."""
    target = resolve(registry, store, identifier)
    if target is None:
        return None
    return target.container_id
