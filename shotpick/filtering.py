"""Substring filter over candidate labels.

Matching is plain, case-sensitive containment: no folding, no fuzzy scoring
and no ranking. Survivors keep their candidate order.
"""

from __future__ import annotations

from collections.abc import Iterable


def substring_index(query: str, candidate: str) -> int | None:
    """Return the first offset of ``query`` in ``candidate`` or ``None``."""
    if not query:
        return 0
    idx = candidate.find(query)
    if idx < 0:
        return None
    return idx


def filter_candidates(query: str, candidates: Iterable[str]) -> list[str]:
    """Return candidates containing ``query``, in their original order.

    An empty query returns every candidate unchanged.
    """
    if not query:
        return list(candidates)
    return [candidate for candidate in candidates if query in candidate]
