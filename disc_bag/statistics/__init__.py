"""
Statistics module for bag analysis.

This module derives aggregate analytics from a user's collection of discs:
brand, plastic, colour and category popularity, speed range and
distribution, and flight-stability breakdowns overall and per category.

Main components:
    - calculate_bag_stats: Pure function from discs to a BagStats summary
    - BagStatistics: Convenience wrapper keeping the last results
    - StatisticsCollector: Base class for creating custom statistics collectors
    - StatisticsPipeline: Orchestrates running multiple collectors
    - Built-in collectors: brands, plastics, colors, categories, speeds, stability
"""

from disc_bag.statistics.base import StatisticsCollector, register_collector, get_collector_registry
from disc_bag.statistics.pipeline import StatisticsPipeline, StatisticsConfig
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
    StatValue,
)
from disc_bag.statistics.normalize import NormalizedDisc, normalize_disc, normalize_discs
from disc_bag.statistics.stability import Stability, classify_turn
from disc_bag.statistics.summary import assemble_bag_stats
from disc_bag.statistics.bag_stats import BagStatistics, calculate_bag_stats

# Import collectors to ensure they're registered
from disc_bag.statistics import collectors

__all__ = [
    'StatisticsCollector',
    'register_collector',
    'get_collector_registry',
    'StatisticsPipeline',
    'StatisticsConfig',
    'BagStats',
    'CategoryCount',
    'CategoryStability',
    'ColorCount',
    'NamedCount',
    'SpeedCount',
    'SpeedRange',
    'StabilityBreakdown',
    'Stats',
    'StatValue',
    'NormalizedDisc',
    'normalize_disc',
    'normalize_discs',
    'Stability',
    'classify_turn',
    'assemble_bag_stats',
    'BagStatistics',
    'calculate_bag_stats',
    'collectors',
]
