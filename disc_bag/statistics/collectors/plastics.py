"""
Plastic statistics collector.
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

DEFAULT_TOP_PLASTICS_LIMIT = 3


@register_collector
@dataclass
class PlasticsCollector(StatisticsCollector):
    """
    Collects plastic statistics from the bag.

    Statistics collected:
        - Top plastics by disc count, truncated to top_plastics_limit
        - Number of distinct plastics

    Attributes:
        top_plastics_limit: Maximum number of plastics in the top list
    """
    collector_id: str = "plastics"
    top_plastics_limit: int = DEFAULT_TOP_PLASTICS_LIMIT

    def collect(self, discs: Iterable[NormalizedDisc], existing_stats: Stats, collector_num: Optional[int] = None, total_collectors: Optional[int] = None) -> Stats:
        """Collect plastic statistics."""
        stats = Stats()
        prefix = self._progress_prefix(collector_num, total_collectors)
        self._report_step(info=f"{prefix}Counting plastics")

        plastic_counts = Counter(disc.plastic for disc in discs if disc.plastic is not None)

        stats.add_value('plastics', 'top_plastics', rank_by_count(plastic_counts, self.top_plastics_limit))
        stats.add_value('plastics', 'unique_plastics', len(plastic_counts))

        logger.info(f"Plastics: {len(plastic_counts)} distinct plastics")

        return stats
