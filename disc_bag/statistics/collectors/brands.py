"""
Brand (manufacturer) statistics collector.
"""
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
import logging
from typing import Iterable, Optional

from disc_bag.statistics.base import StatisticsCollector, register_collector
from disc_bag.statistics.model import Stats
from disc_bag.statistics.normalize import NormalizedDisc
from disc_bag.statistics.ranking import rank_by_count, top_item

logger = logging.getLogger(__name__)


@register_collector
@dataclass
class BrandsCollector(StatisticsCollector):
    """
    Collects manufacturer statistics from the bag.

    Statistics collected:
        - Disc count per manufacturer, most common first
        - Number of distinct manufacturers
        - Top brand (first encountered wins a tie)
    """
    collector_id: str = "brands"

    def collect(self, discs: Iterable[NormalizedDisc], existing_stats: Stats, collector_num: Optional[int] = None, total_collectors: Optional[int] = None) -> Stats:
        """Collect brand statistics."""
        stats = Stats()
        prefix = self._progress_prefix(collector_num, total_collectors)
        self._report_step(info=f"{prefix}Counting brands")

        brand_counts = Counter(disc.manufacturer for disc in discs if disc.manufacturer is not None)

        stats.add_value('brands', 'most_common', rank_by_count(brand_counts))
        stats.add_value('brands', 'unique_brands', len(brand_counts))

        top = top_item(brand_counts)
        if top:
            stats.add_value('brands', 'top_brand', top)

        logger.info(f"Brands: {sum(brand_counts.values())} discs across {len(brand_counts)} manufacturers")

        return stats
