"""
Tests for statistics.model module.
"""
from __future__ import annotations

import dataclasses

import pytest

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


class TestStats:
    """Tests for Stats class."""

    def test_add_and_get_value(self):
        """Test adding and retrieving values."""
        stats = Stats()

        stats.add_value('brands', 'unique_brands', 4)

        assert stats.get_value('brands', 'unique_brands') == 4

    def test_get_nonexistent_value(self):
        """Test getting a nonexistent value returns None."""
        stats = Stats()

        assert stats.get_value('brands', 'unique_brands') is None

    def test_get_value_with_default(self):
        """Test getting value with default."""
        stats = Stats()

        assert stats.get_value('brands', 'unique_brands', 0) == 0

    def test_get_category(self):
        """Test getting all values in a category."""
        stats = Stats()

        stats.add_value('speeds', 'min_speed', 2)
        stats.add_value('speeds', 'max_speed', 13)

        category = stats.get_category('speeds')

        assert category == {'min_speed': 2, 'max_speed': 13}

    def test_merge(self):
        """Test merging two Stats objects."""
        stats1 = Stats()
        stats1.add_value('bag', 'total_discs', 12)
        stats1.add_value('brands', 'unique_brands', 3)

        stats2 = Stats()
        stats2.add_value('bag', 'note', 'merged')
        stats2.add_value('colors', 'distribution', [('Blue', 2)])

        stats1.merge(stats2)

        assert stats1.get_value('bag', 'total_discs') == 12
        assert stats1.get_value('bag', 'note') == 'merged'
        assert stats1.get_value('brands', 'unique_brands') == 3
        assert stats1.get_value('colors', 'distribution') == [('Blue', 2)]

    def test_to_dict_and_from_dict(self):
        """Test converting to and from a plain dictionary."""
        data = {'bag': {'total_discs': 5}, 'categories': {'unique_categories': 4}}

        stats = Stats.from_dict(data)

        assert stats.get_value('categories', 'unique_categories') == 4
        assert stats.to_dict() == data


class TestBagStats:
    """Tests for the BagStats summary value."""

    @pytest.fixture
    def summary(self):
        return BagStats(
            total_discs=3,
            speed_range=SpeedRange(min=2, max=12),
            top_brand=NamedCount('Innova', 2),
            categories_count=2,
            total_categories=7,
            stability=StabilityBreakdown(understable=1, stable=1, overstable=0),
            stability_by_category=(
                CategoryStability('Putter', stable=1),
                CategoryStability('Distance Driver', understable=1),
            ),
            category_distribution=(CategoryCount('Putter', 2), CategoryCount('Distance Driver', 1)),
            speed_distribution=(SpeedCount(2, 2), SpeedCount(12, 1)),
            top_plastics=(NamedCount('Star', 2),),
            color_distribution=(ColorCount('Orange', 3),),
        )

    def test_to_dict_uses_renderer_names(self, summary):
        """Test the renderer shape of a summary."""
        assert summary.to_dict() == {
            'totalDiscs': 3,
            'speedRange': {'min': 2, 'max': 12},
            'topBrand': {'name': 'Innova', 'count': 2},
            'categoriesCount': 2,
            'totalCategories': 7,
            'stability': {'understable': 1, 'stable': 1, 'overstable': 0},
            'stabilityByCategory': [
                {'category': 'Putter', 'understable': 0, 'stable': 1, 'overstable': 0},
                {'category': 'Distance Driver', 'understable': 1, 'stable': 0, 'overstable': 0},
            ],
            'categoryDistribution': [
                {'category': 'Putter', 'count': 2},
                {'category': 'Distance Driver', 'count': 1},
            ],
            'speedDistribution': [{'speed': 2, 'count': 2}, {'speed': 12, 'count': 1}],
            'topPlastics': [{'name': 'Star', 'count': 2}],
            'colorDistribution': [{'color': 'Orange', 'count': 3}],
        }

    def test_to_dict_nulls(self):
        summary = BagStats(
            total_discs=0,
            speed_range=None,
            top_brand=None,
            categories_count=0,
            total_categories=7,
            stability=StabilityBreakdown(),
        )

        data = summary.to_dict()

        assert data['speedRange'] is None
        assert data['topBrand'] is None
        assert data['topPlastics'] == []

    def test_frozen(self, summary):
        with pytest.raises(dataclasses.FrozenInstanceError):
            summary.total_discs = 4

    def test_breakdown_totals(self):
        assert StabilityBreakdown(1, 2, 3).total == 6
        assert CategoryStability('Midrange', 0, 4, 1).total == 5
