"""
Category statistics collector.
"""
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
import logging
from typing import Iterable, Optional

from disc_bag.statistics.base import StatisticsCollector, register_collector
from disc_bag.statistics.model import Stats
from disc_bag.statistics.normalize import NormalizedDisc
from disc_bag.statistics.ranking import rank_by_count

logger = logging.getLogger(__name__)


@register_collector
@dataclass
class CategoriesCollector(StatisticsCollector):
    """
    Collects category statistics from the bag.

    Statistics collected:
        - Category distribution, most common first
        - Number of distinct categories covered
    """
    collector_id: str = "categories"

    def collect(self, discs: Iterable[NormalizedDisc], existing_stats: Stats, collector_num: Optional[int] = None, total_collectors: Optional[int] = None) -> Stats:
        """Collect category statistics."""
        stats = Stats()
        prefix = self._progress_prefix(collector_num, total_collectors)
        self._report_step(info=f"{prefix}Counting categories")

        category_counts = Counter(disc.category for disc in discs if disc.category is not None)

        stats.add_value('categories', 'distribution', rank_by_count(category_counts))
        stats.add_value('categories', 'unique_categories', len(category_counts))

        logger.info(f"Categories: {len(category_counts)} distinct categories")

        return stats
