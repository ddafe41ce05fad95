"""Shared service-layer helper functions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from tierctl.domain.ids import UNRANKED_ID

if TYPE_CHECKING:
    from tierctl.domain.board import Board
    from tierctl.domain.models import Tier


def tier_payload(board: Board, tier: Tier) -> dict[str, Any]:
    """A tier plus the ids of the items it holds."""
    items = board.store.item_ids(tier.id) if tier.id in board.store else []
    return {
        "id": tier.id,
        "label": tier.label,
        "color": tier.color,
        "items": items,
        "count": len(items),
    }


def board_payload(board: Board) -> dict[str, Any]:
    """Serializable view of the whole board, tiers in ranking order.

    Item payloads are omitted; only ids are listed.
    """
    unranked = board.store.item_ids(UNRANKED_ID)
    return {
        "tiers": [tier_payload(board, tier) for tier in board.registry],
        "unranked": unranked,
        "tier_count": len(board.registry),
        "item_count": len(board.store),
    }
