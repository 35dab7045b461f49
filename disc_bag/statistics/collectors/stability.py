"""
Stability statistics collector.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Dict, Iterable, Optional

from disc_bag.statistics.base import StatisticsCollector, register_collector
from disc_bag.statistics.model import Stats
from disc_bag.statistics.normalize import NormalizedDisc
from disc_bag.statistics.stability import classify_turn, empty_breakdown

logger = logging.getLogger(__name__)


@register_collector
@dataclass
class StabilityCollector(StatisticsCollector):
    """
    Collects stability statistics from the bag.

    Discs without a turn rating are left out of every breakdown. Every
    observed category gets a breakdown, even when none of its discs has a
    turn rating.

    Statistics collected:
        - Overall understable/stable/overstable counts
        - The same breakdown per category, largest classified category first
        - Number of discs without turn data
    """
    collector_id: str = "stability"

    def collect(self, discs: Iterable[NormalizedDisc], existing_stats: Stats, collector_num: Optional[int] = None, total_collectors: Optional[int] = None) -> Stats:
        """Collect stability statistics."""
        stats = Stats()
        prefix = self._progress_prefix(collector_num, total_collectors)
        self._report_step(info=f"{prefix}Classifying stability")

        overall = empty_breakdown()
        by_category: Dict[str, Dict[str, int]] = {}
        unclassified = 0

        for disc in discs:
            if disc.category is not None and disc.category not in by_category:
                by_category[disc.category] = empty_breakdown()

            stability = classify_turn(disc.turn)
            if stability is None:
                unclassified += 1
                continue

            overall[stability.value] += 1
            if disc.category is not None:
                by_category[disc.category][stability.value] += 1

        # sorted() is stable, so equal totals keep first-encountered order
        ranked_categories = sorted(by_category.items(), key=lambda item: -sum(item[1].values()))

        stats.add_value('stability', 'overall', overall)
        stats.add_value('stability', 'by_category', [
            {'category': category, **counts} for category, counts in ranked_categories
        ])
        stats.add_value('stability', 'unclassified', unclassified)

        logger.info(
            f"Stability: {overall['understable']} understable, {overall['stable']} stable, "
            f"{overall['overstable']} overstable, {unclassified} without turn"
        )

        return stats
