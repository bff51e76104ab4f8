"""Highlight bookkeeping for the filtered result list."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Literal

Direction = Literal["next", "previous"]
NEXT: Direction = "next"
PREVIOUS: Direction = "previous"


def clamp_highlight(index: int, list_length: int) -> int:
    """Clamp ``index`` into ``[0, list_length - 1]``; ``0`` for empty lists."""
    if list_length <= 0:
        return 0
    return max(0, min(list_length - 1, index))


def move_highlight(current_index: int, list_length: int, direction: Direction) -> int:
    """Step the highlight one row, saturating at both ends (never wraps)."""
    if list_length <= 0:
        return 0
    if direction == NEXT:
        return min(current_index + 1, list_length - 1)
    if direction == PREVIOUS:
        return max(current_index - 1, 0)
    raise ValueError(f"unknown direction: {direction!r}")


def reconcile(old_filtered: Sequence[str], old_index: int, new_filtered: Sequence[str]) -> int:
    """Keep the highlight on the same item across a re-filter.

    The item highlighted in ``old_filtered`` is looked up by exact value in
    ``new_filtered`` (first occurrence wins). Falls back to ``0`` when the old
    index was out of bounds or the item no longer matches.
    """
    if not (0 <= old_index < len(old_filtered)):
        return 0
    highlighted = old_filtered[old_index]
    for idx, item in enumerate(new_filtered):
        if item == highlighted:
            return idx
    return 0
