"""
Ranking helpers shared by the collectors.

Count rankings are most-common-first. Ties keep first-encountered order,
since Counter preserves insertion order and most_common() sorts stably.
"""
from __future__ import annotations

from collections import Counter
from typing import Hashable, List, Optional, Tuple


def rank_by_count(counts: Counter, limit: Optional[int] = None) -> List[Tuple[Hashable, int]]:
    """
    Rank counted values by descending count.

    Args:
        counts: Counter built in encounter order.
        limit: Maximum number of entries to return (None for all).

    Returns:
        List of (value, count) pairs.
    """
    return counts.most_common(limit)


def top_item(counts: Counter) -> Optional[Tuple[Hashable, int]]:
    """Most common (value, count) pair, or None if nothing was counted."""
    ranked = counts.most_common(1)
    return ranked[0] if ranked else None


def rank_by_value(counts: Counter) -> List[Tuple[float, int]]:
    """Numeric values with their counts, in ascending value order."""
    return sorted(counts.items(), key=lambda item: item[0])
