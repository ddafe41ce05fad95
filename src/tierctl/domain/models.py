"""Tier and image item models.

Both are frozen: a tier edit produces a replacement carrying the same id,
and an item's payload never changes after import.
"""

from __future__ import annotations

from pydantic import BaseModel, field_validator

from tierctl.domain.ids import is_hex_color


class Tier(BaseModel):
    """A labeled, coloured ranking row."""

    model_config = {"frozen": True}

    id: str
    label: str
    color: str

    @field_validator("id")
    @classmethod
    def _non_empty_id(cls, value: str) -> str:
        if not value:
            msg = "Tier id must not be empty"
            raise ValueError(msg)
        return value


class ImageItem(BaseModel):
    """An imported image. ``src`` is a self-contained data URI."""

    model_config = {"frozen": True}

    id: str
    src: str

    @field_validator("id")
    @classmethod
    def _non_empty_id(cls, value: str) -> str:
        if not value:
            msg = "Item id must not be empty"
            raise ValueError(msg)
        return value


def normalize_color(color: str) -> str:
    """Validate and lowercase a ``#rrggbb`` colour.

    Raises ValueError for anything else.
    """
    if not is_hex_color(color):
        msg = f"Invalid colour {color!r}: expected #rrggbb"
        raise ValueError(msg)
    return color.lower()
