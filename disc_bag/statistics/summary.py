"""
Assembly of the BagStats summary from collected statistics.

Values a collector did not produce (disabled, failed, or nothing to count)
are reported as "no data": None for single values, empty tuples for lists.
"""
from __future__ import annotations

from disc_bag.catalog import TOTAL_CATEGORIES
from disc_bag.statistics.model import (
    BagStats,
    CategoryCount,
    CategoryStability,
    ColorCount,
    NamedCount,
    SpeedCount,
    SpeedRange,
    StabilityBreakdown,
    Stats,
)


def assemble_bag_stats(stats: Stats) -> BagStats:
    """
    Package collected statistics into one immutable BagStats value.

    Args:
        stats: Stats produced by a StatisticsPipeline run

    Returns:
        BagStats summary
    """
    min_speed = stats.get_value('speeds', 'min_speed')
    max_speed = stats.get_value('speeds', 'max_speed')
    speed_range = SpeedRange(min=min_speed, max=max_speed) if min_speed is not None and max_speed is not None else None

    top_brand = stats.get_value('brands', 'top_brand')

    overall = stats.get_value('stability', 'overall', {})

    return BagStats(
        total_discs=stats.get_value('bag', 'total_discs', 0),
        speed_range=speed_range,
        top_brand=NamedCount(*top_brand) if top_brand else None,
        categories_count=stats.get_value('categories', 'unique_categories', 0),
        total_categories=TOTAL_CATEGORIES,
        stability=StabilityBreakdown(**overall),
        stability_by_category=tuple(
            CategoryStability(**entry) for entry in stats.get_value('stability', 'by_category', [])
        ),
        category_distribution=tuple(
            CategoryCount(category, count) for category, count in stats.get_value('categories', 'distribution', [])
        ),
        speed_distribution=tuple(
            SpeedCount(speed, count) for speed, count in stats.get_value('speeds', 'distribution', [])
        ),
        top_plastics=tuple(
            NamedCount(name, count) for name, count in stats.get_value('plastics', 'top_plastics', [])
        ),
        color_distribution=tuple(
            ColorCount(color, count) for color, count in stats.get_value('colors', 'distribution', [])
        ),
    )
