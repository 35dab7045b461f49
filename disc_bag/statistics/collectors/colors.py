"""
Colour statistics collector.
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
class ColorsCollector(StatisticsCollector):
    """Collects the colour distribution of the bag, most common colour first."""
    collector_id: str = "colors"

    def collect(self, discs: Iterable[NormalizedDisc], existing_stats: Stats, collector_num: Optional[int] = None, total_collectors: Optional[int] = None) -> Stats:
        """Collect colour statistics."""
        stats = Stats()
        prefix = self._progress_prefix(collector_num, total_collectors)
        self._report_step(info=f"{prefix}Counting colours")

        color_counts = Counter(disc.color for disc in discs if disc.color is not None)

        stats.add_value('colors', 'distribution', rank_by_count(color_counts))

        logger.info(f"Colors: {len(color_counts)} distinct colours")

        return stats
