"""disc_bag package: Disc records, domain catalog and bag statistics for a lost-disc recovery app."""

from disc_bag.catalog import DISC_CATEGORIES, DISC_COLORS, TOTAL_CATEGORIES, get_plastic_types
from disc_bag.disc import DiscRecord, FlightNumbers
from disc_bag.statistics import BagStatistics, BagStats, StatisticsConfig, calculate_bag_stats

__all__ = [
    "BagStatistics",
    "BagStats",
    "DISC_CATEGORIES",
    "DISC_COLORS",
    "DiscRecord",
    "FlightNumbers",
    "StatisticsConfig",
    "TOTAL_CATEGORIES",
    "calculate_bag_stats",
    "get_plastic_types",
]
