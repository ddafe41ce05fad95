"""List reposition helper shared by the registry and the partition store."""

from __future__ import annotations

from typing import TypeVar

_T = TypeVar("_T")


def clamp_index(index: int, length: int) -> int:
    """Clamp *index* into ``[0, length]`` (an insertion position)."""
    return max(0, min(index, length))


def array_move(values: list[_T], from_index: int, to_index: int) -> list[_T]:
    """Return a copy of *values* with the element at *from_index* moved to *to_index*.

    The element is removed first, then reinserted at *to_index* clamped to
    the shortened list, so moving an element onto its right-hand neighbour's
    position swaps the two.

    Examples:
        >>> array_move(["a", "b", "c", "d"], 1, 3)
        ['a', 'c', 'd', 'b']
        >>> array_move(["a", "b", "c"], 2, 0)
        ['c', 'a', 'b']
    """
    if not 0 <= from_index < len(values):
        msg = f"from_index {from_index} out of range for length {len(values)}"
        raise IndexError(msg)
    result = list(values)
    moved = result.pop(from_index)
    result.insert(clamp_index(to_index, len(result)), moved)
    return result
