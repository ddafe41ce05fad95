"""Snapshot Codec — board to and from the persisted JSON document.

Schema (shared by the storage slot and exported backups)::

    {
      "savedRows":  [{"id": str, "label": str, "color": str}, ...],
      "savedItems": {containerId: [{"id": str, "src": str}, ...], ...}
    }

Decoding is structurally strict (pydantic validation) and referentially
lenient: inconsistencies between rows and containers are repaired and
reported as warnings instead of failing the load.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field, ValidationError

from tierctl.domain.errors import MalformedSnapshotError
from tierctl.domain.ids import UNRANKED_ID, generate_item_id
from tierctl.domain.models import ImageItem, Tier
from tierctl.domain.partition import PartitionStore
from tierctl.domain.registry import TierRegistry

if TYPE_CHECKING:
    from collections.abc import Mapping


class SnapshotDocument(BaseModel):
    """Validated shape of a persisted snapshot."""

    model_config = {"frozen": True, "populate_by_name": True}

    saved_rows: list[Tier] = Field(alias="savedRows")
    saved_items: dict[str, list[ImageItem]] = Field(alias="savedItems")


def encode(registry: TierRegistry, store: PartitionStore) -> dict[str, Any]:
    """Build the snapshot document. Containers follow tier order, bank last."""
    order = [*registry.ids(), UNRANKED_ID]
    order.extend(cid for cid in store.container_ids() if cid not in order)
    return {
        "savedRows": [tier.model_dump() for tier in registry],
        "savedItems": {
            cid: [item.model_dump() for item in store.items(cid)]
            for cid in order
            if cid in store
        },
    }


def dumps(registry: TierRegistry, store: PartitionStore, *, indent: int | None = 2) -> str:
    """Encode and render as JSON text."""
    return json.dumps(encode(registry, store), indent=indent, ensure_ascii=False)


def decode(
    document: Mapping[str, Any],
    *,
    warnings: list[str] | None = None,
) -> tuple[TierRegistry, PartitionStore]:
    """Validate *document* and rebuild the registry and store.

    Raises MalformedSnapshotError when a top-level field is missing, has the
    wrong shape, or rows repeat an id.  Referential repairs are appended to
    *warnings*:

    - a tier without a container gets an empty one;
    - a container naming no tier has its items appended to the bank;
    - a repeated item keeps only its first occurrence;
    - an item whose id names a container is given a fresh item id.
    """
    if warnings is None:
        warnings = []
    try:
        doc = SnapshotDocument.model_validate(document)
    except ValidationError as exc:
        msg = f"Snapshot failed validation: {exc.error_count()} error(s): {_first_error(exc)}"
        raise MalformedSnapshotError(msg) from exc

    try:
        registry = TierRegistry(doc.saved_rows)
    except ValueError as exc:
        raise MalformedSnapshotError(f"Invalid tier rows: {exc}") from exc

    tier_ids = registry.ids()
    containers: dict[str, list[ImageItem]] = {cid: [] for cid in tier_ids}
    containers[UNRANKED_ID] = []
    orphans: list[ImageItem] = []
    seen: set[str] = set()

    for container_id, items in doc.saved_items.items():
        known = container_id in containers
        if not known:
            warnings.append(
                f"Container {container_id!r} has no tier; {len(items)} item(s) moved to unranked"
            )
        for item in items:
            if item.id in containers:
                fresh = item.model_copy(update={"id": generate_item_id()})
                warnings.append(
                    f"Item id {item.id!r} in {container_id!r} clashes with a container;"
                    f" reassigned {fresh.id}"
                )
                item = fresh
            if item.id in seen:
                warnings.append(f"Duplicate item {item.id} in {container_id!r} dropped")
                continue
            seen.add(item.id)
            if known:
                containers[container_id].append(item)
            else:
                orphans.append(item)

    for container_id in containers:
        if container_id not in doc.saved_items:
            warnings.append(f"Missing container {container_id!r} treated as empty")

    containers[UNRANKED_ID].extend(orphans)
    return registry, PartitionStore(containers)


def loads(
    text: str | bytes,
    *,
    warnings: list[str] | None = None,
) -> tuple[TierRegistry, PartitionStore]:
    """Parse JSON text and :func:`decode` it."""
    try:
        document = json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise MalformedSnapshotError(f"Snapshot is not valid JSON: {exc}") from exc
    if not isinstance(document, dict):
        raise MalformedSnapshotError("Snapshot must be a JSON object")
    return decode(document, warnings=warnings)


def _first_error(exc: ValidationError) -> str:
    err = exc.errors()[0]
    location = ".".join(str(part) for part in err.get("loc", ()))
    return f"{location}: {err.get('msg', 'invalid')}" if location else str(err.get("msg"))
