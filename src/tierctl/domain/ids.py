"""Identifier spaces and generation.

Two disjoint id domains:
- Tier ids: ``new-row-<uuid4>`` for generated tiers (default tiers use
  their label, e.g. ``S``).
- Item ids: bare ``uuid4`` strings assigned at import time.

The reserved ``unranked`` id names the image bank container.

INVARIANT: IDs are permanent. Once generated, an ID is never reused.
"""

from __future__ import annotations

import re
import uuid

UNRANKED_ID = "unranked"

TIER_ID_PREFIX = "new-row-"

ID_PATTERNS: dict[str, re.Pattern[str]] = {
    "tier": re.compile(r"^new-row-[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$"),
    "item": re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$"),
}

HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}$")


def generate_tier_id() -> str:
    """Generate a fresh tier id (``new-row-<uuid4>``)."""
    return f"{TIER_ID_PREFIX}{uuid.uuid4()}"


def generate_item_id() -> str:
    """Generate a fresh image item id (bare uuid4)."""
    return str(uuid.uuid4())


def validate_id(value: str, kind: str) -> bool:
    """Check whether *value* matches the generated pattern for *kind*."""
    pattern = ID_PATTERNS.get(kind)
    if pattern is None:
        return False
    return pattern.match(value) is not None


def is_hex_color(value: str) -> bool:
    """Return True for ``#rrggbb`` colour strings."""
    return HEX_COLOR.match(value) is not None
