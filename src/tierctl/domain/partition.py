"""Partition Store — where every imported item currently lives.

Maps each container id (every tier id plus the reserved ``unranked`` bank)
to an ordered sequence of :class:`ImageItem`.

INVARIANT: every imported item appears in exactly one container, at exactly
one position.  There is no "set contents" operation; items only change
container through :meth:`PartitionStore.move_across`, and a container is
only dissolved by migrating its items into another one.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tierctl.domain.errors import NotFoundError
from tierctl.domain.ids import UNRANKED_ID
from tierctl.domain.ordering import array_move, clamp_index

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Mapping

    from tierctl.domain.models import ImageItem

logger = logging.getLogger(__name__)


class PartitionStore:
    """Container id → ordered items, always including ``unranked``."""

    def __init__(self, containers: Mapping[str, Iterable[ImageItem]] | None = None) -> None:
        self._containers: dict[str, list[ImageItem]] = {}
        seen: set[str] = set()
        for container_id, items in (containers or {}).items():
            bucket = list(items)
            for item in bucket:
                if item.id in seen:
                    msg = f"Item {item.id} appears in more than one position"
                    raise ValueError(msg)
                seen.add(item.id)
            self._containers[container_id] = bucket
        self._containers.setdefault(UNRANKED_ID, [])

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return sum(len(items) for items in self._containers.values())

    def __contains__(self, container_id: object) -> bool:
        return container_id in self._containers

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PartitionStore):
            return NotImplemented
        return self._containers == other._containers

    def __repr__(self) -> str:
        sizes = {cid: len(items) for cid, items in self._containers.items()}
        return f"PartitionStore({sizes!r})"

    def container_ids(self) -> list[str]:
        return list(self._containers)

    def items(self, container_id: str) -> tuple[ImageItem, ...]:
        """Items of one container, in order."""
        return tuple(self._bucket(container_id))

    def item_ids(self, container_id: str) -> list[str]:
        return [item.id for item in self._bucket(container_id)]

    def iter_items(self) -> Iterator[tuple[str, ImageItem]]:
        """Yield ``(container_id, item)`` for every stored item."""
        for container_id, items in self._containers.items():
            for item in items:
                yield container_id, item

    def locate(self, item_id: str) -> tuple[str, int] | None:
        """Return ``(container_id, index)`` of *item_id*, or None."""
        for container_id, items in self._containers.items():
            for index, item in enumerate(items):
                if item.id == item_id:
                    return container_id, index
        return None

    def get_item(self, item_id: str) -> ImageItem | None:
        location = self.locate(item_id)
        if location is None:
            return None
        container_id, index = location
        return self._containers[container_id][index]

    def index_of(self, container_id: str, item_id: str) -> int:
        """Position of *item_id* within *container_id*; NotFoundError if absent."""
        for index, item in enumerate(self._bucket(container_id)):
            if item.id == item_id:
                return index
        raise NotFoundError("item", item_id)

    # ------------------------------------------------------------------
    # Item moves
    # ------------------------------------------------------------------

    def move_within(self, container_id: str, from_index: int, to_index: int) -> int:
        """Reposition one item inside a container. Returns the final index.

        *to_index* is clamped to the shortened sequence.  No-op when the
        indices are equal.
        """
        bucket = self._bucket(container_id)
        if not 0 <= from_index < len(bucket):
            raise NotFoundError("position", f"{container_id}[{from_index}]")
        if from_index == to_index:
            return from_index
        self._containers[container_id] = array_move(bucket, from_index, to_index)
        return clamp_index(to_index, len(bucket) - 1)

    def move_across(
        self,
        source_id: str,
        item_id: str,
        dest_id: str,
        dest_index: int | None = None,
    ) -> int:
        """Move *item_id* from *source_id* into *dest_id*. Returns the final index.

        A missing or out-of-range *dest_index* appends to the destination.
        Raises NotFoundError before any change if either container or the
        item in the source is missing.
        """
        source = self._bucket(source_id)
        dest = self._bucket(dest_id)
        index = self.index_of(source_id, item_id)
        if source_id == dest_id:
            target = len(source) - 1 if dest_index is None else dest_index
            return self.move_within(source_id, index, target)

        item = source.pop(index)
        if dest_index is None or not 0 <= dest_index <= len(dest):
            dest.append(item)
            return len(dest) - 1
        dest.insert(dest_index, item)
        return dest_index

    def import_items(self, items: Iterable[ImageItem]) -> int:
        """Append *items*, in order, to the end of the unranked bank.

        Raises ValueError without changing anything if any id is already
        stored or repeated within *items*.
        """
        incoming = list(items)
        known = {item.id for _, item in self.iter_items()}
        for item in incoming:
            if item.id in known:
                msg = f"Item {item.id} is already on the board"
                raise ValueError(msg)
            known.add(item.id)
        self._containers[UNRANKED_ID].extend(incoming)
        return len(incoming)

    # ------------------------------------------------------------------
    # Container lifecycle (driven by tier add/delete)
    # ------------------------------------------------------------------

    def create_container(self, container_id: str) -> None:
        if container_id in self._containers:
            msg = f"Container already exists: {container_id}"
            raise ValueError(msg)
        self._containers[container_id] = []

    def dissolve_container(self, container_id: str, *, into: str = UNRANKED_ID) -> int:
        """Append a container's items to *into* and drop the container.

        Returns the number of migrated items.  The unranked bank itself can
        never be dissolved.
        """
        if container_id == UNRANKED_ID:
            raise NotFoundError("tier", container_id)
        items = self._bucket(container_id)
        self._bucket(into).extend(items)
        del self._containers[container_id]
        logger.debug("Dissolved container %s into %s (%d items)", container_id, into, len(items))
        return len(items)

    def copy(self) -> PartitionStore:
        return PartitionStore({cid: list(items) for cid, items in self._containers.items()})

    def _bucket(self, container_id: str) -> list[ImageItem]:
        try:
            return self._containers[container_id]
        except KeyError:
            raise NotFoundError("container", container_id) from None
