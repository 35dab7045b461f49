"""
Example: Summarising a bag of discs.

This example shows how to:
1. Build disc records from backend payloads
2. Calculate the bag summary
3. Use the BagStatistics wrapper with a custom configuration
4. Export the renderer payload
"""

import json
import logging
from pathlib import Path

from disc_bag import BagStatistics, DiscRecord, calculate_bag_stats


PAYLOAD = [
    {'id': '1', 'mold': 'Destroyer', 'manufacturer': 'Innova', 'plastic': 'Star', 'color': 'Blue',
     'category': 'Distance Driver', 'flight_numbers': {'speed': 12, 'glide': 5, 'turn': -1, 'fade': 3}},
    {'id': '2', 'mold': 'Leopard', 'manufacturer': 'Innova', 'plastic': 'Champion', 'color': 'Red',
     'category': 'Fairway Driver', 'flight_numbers': {'speed': 6, 'glide': 5, 'turn': -2, 'fade': 1}},
    {'id': '3', 'mold': 'Buzzz', 'manufacturer': 'Discraft', 'plastic': 'ESP', 'color': 'Blue',
     'category': 'Midrange', 'flight_numbers': {'speed': 5, 'glide': 4, 'turn': -1, 'fade': 1}},
    {'id': '4', 'mold': 'Zone', 'manufacturer': 'Discraft', 'plastic': 'Jawbreaker', 'color': 'Yellow',
     'category': 'Putter', 'flight_numbers': {'speed': 4, 'glide': 3, 'turn': 0, 'fade': 3}},
    {'id': '5', 'mold': 'Envy', 'manufacturer': 'Axiom', 'color': 'Multi', 'category': 'Putter'},
]


def example_basic_usage():
    """Calculate a summary from disc records."""
    discs = [DiscRecord.from_dict(item) for item in PAYLOAD]

    summary = calculate_bag_stats(discs)

    print(f"Total discs: {summary.total_discs}")
    if summary.speed_range:
        print(f"Speed range: {summary.speed_range.min}-{summary.speed_range.max}")
    if summary.top_brand:
        print(f"Top brand: {summary.top_brand.name} ({summary.top_brand.count} discs)")
    print(f"Categories: {summary.categories_count} of {summary.total_categories}")
    print(f"Stability: {summary.stability.understable} understable, "
          f"{summary.stability.stable} stable, {summary.stability.overstable} overstable")

    for entry in summary.stability_by_category:
        print(f"  {entry.category}: {entry.understable}/{entry.stable}/{entry.overstable}")


def example_with_config():
    """Use the wrapper with a YAML configuration next to this file."""
    config_file = Path(__file__).parent / "bag_stats.yaml"

    bag = BagStatistics(discs=PAYLOAD, config_file=config_file)

    print(f"Top plastics: {[plastic.name for plastic in bag.results.top_plastics]}")
    print(f"Colour distribution (disabled in config): {bag.results.color_distribution}")
    print(json.dumps(bag.to_dict(), indent=2))


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)

    print("=== Example 1: Basic Usage ===\n")
    example_basic_usage()

    print("\n\n=== Example 2: With Custom Config ===\n")
    example_with_config()
