"""
Tests for ranking helpers.
"""
from collections import Counter

from disc_bag.statistics.ranking import rank_by_count, rank_by_value, top_item


def test_rank_by_count_keeps_encounter_order_for_ties():
    counts = Counter(['Red', 'Blue', 'Blue', 'Green', 'Red', 'Pink'])

    assert rank_by_count(counts) == [('Red', 2), ('Blue', 2), ('Green', 1), ('Pink', 1)]


def test_rank_by_count_limit():
    counts = Counter(['a', 'b', 'b', 'c', 'c', 'c', 'd'])

    assert rank_by_count(counts, 2) == [('c', 3), ('b', 2)]


def test_top_item():
    assert top_item(Counter(['MVP', 'Innova', 'Innova'])) == ('Innova', 2)
    assert top_item(Counter(['MVP', 'Innova'])) == ('MVP', 1)
    assert top_item(Counter()) is None


def test_rank_by_value():
    counts = Counter([12, 3, 7.5, 3])

    assert rank_by_value(counts) == [(3, 2), (7.5, 1), (12, 1)]
