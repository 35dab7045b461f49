"""
Built-in statistics collectors.

Import collectors here to automatically register them.
"""

from disc_bag.statistics.collectors.brands import BrandsCollector
from disc_bag.statistics.collectors.plastics import PlasticsCollector
from disc_bag.statistics.collectors.colors import ColorsCollector
from disc_bag.statistics.collectors.categories import CategoriesCollector
from disc_bag.statistics.collectors.speeds import SpeedsCollector
from disc_bag.statistics.collectors.stability import StabilityCollector

__all__ = [
    'BrandsCollector',
    'PlasticsCollector',
    'ColorsCollector',
    'CategoriesCollector',
    'SpeedsCollector',
    'StabilityCollector',
]
