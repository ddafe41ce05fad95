"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, tierctl.toml only contains overrides.
A fresh workspace needs no config file at all.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from tierctl.domain.board import (
    DEFAULT_NEW_TIER_COLOR,
    DEFAULT_NEW_TIER_LABEL,
    DEFAULT_PALETTE,
    DEFAULT_TIERS,
)
from tierctl.domain.ids import UNRANKED_ID
from tierctl.domain.models import Tier, normalize_color

# --- tierctl.toml sections ---


class BoardConfig(BaseModel):
    """[board] section."""

    model_config = {"frozen": True}

    default_tiers: list[Tier] = Field(default_factory=lambda: list(DEFAULT_TIERS))
    new_tier_label: str = DEFAULT_NEW_TIER_LABEL
    new_tier_color: str = DEFAULT_NEW_TIER_COLOR
    palette: list[str] = Field(default_factory=lambda: list(DEFAULT_PALETTE))

    @field_validator("default_tiers")
    @classmethod
    def _check_default_tiers(cls, value: list[Tier]) -> list[Tier]:
        seen: set[str] = set()
        checked: list[Tier] = []
        for tier in value:
            if tier.id == UNRANKED_ID:
                msg = f"Tier id {UNRANKED_ID!r} is reserved for the image bank"
                raise ValueError(msg)
            if tier.id in seen:
                msg = f"Duplicate tier id: {tier.id}"
                raise ValueError(msg)
            seen.add(tier.id)
            checked.append(tier.model_copy(update={"color": normalize_color(tier.color)}))
        return checked

    @field_validator("new_tier_color")
    @classmethod
    def _check_color(cls, value: str) -> str:
        return normalize_color(value)

    @field_validator("palette")
    @classmethod
    def _check_palette(cls, value: list[str]) -> list[str]:
        return [normalize_color(color) for color in value]


class StorageConfig(BaseModel):
    """[storage] section."""

    model_config = {"frozen": True}

    directory: str = ".tierctl"
    snapshot_name: str = "board.json"
    export_name: str = "tier-list.json"


class ImagesConfig(BaseModel):
    """[images] section."""

    model_config = {"frozen": True}

    max_bytes: int = 10 * 1024 * 1024

