"""
Speed statistics collector.
"""
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
import logging
from typing import Iterable, Optional

from disc_bag.statistics.base import StatisticsCollector, register_collector
from disc_bag.statistics.model import Stats
from disc_bag.statistics.normalize import NormalizedDisc
from disc_bag.statistics.ranking import rank_by_value

logger = logging.getLogger(__name__)


@register_collector
@dataclass
class SpeedsCollector(StatisticsCollector):
    """
    Collects speed statistics from the bag.

    Statistics collected:
        - Speed distribution, ordered by speed (not by count)
        - Slowest and fastest speed, when any disc has a speed
    """
    collector_id: str = "speeds"

    def collect(self, discs: Iterable[NormalizedDisc], existing_stats: Stats, collector_num: Optional[int] = None, total_collectors: Optional[int] = None) -> Stats:
        """Collect speed statistics."""
        stats = Stats()
        prefix = self._progress_prefix(collector_num, total_collectors)
        self._report_step(info=f"{prefix}Counting speeds")

        speeds = [disc.speed for disc in discs if disc.speed is not None]

        stats.add_value('speeds', 'distribution', rank_by_value(Counter(speeds)))

        if speeds:
            stats.add_value('speeds', 'min_speed', min(speeds))
            stats.add_value('speeds', 'max_speed', max(speeds))
            logger.info(f"Speeds: {len(speeds)} discs with speed {min(speeds)}-{max(speeds)}")
        else:
            logger.info("Speeds: no discs with a speed rating")

        return stats
