"""
Tests for statistics.normalize module.
"""
from __future__ import annotations

from decimal import Decimal
import math

from disc_bag.disc import DiscRecord, FlightNumbers
from disc_bag.statistics.normalize import NormalizedDisc, normalize_disc, normalize_discs


class MockFlight:
    def __init__(self, speed=None, turn=None):
        self.speed = speed
        self.turn = turn


class MockDisc:
    """Mock disc exposing attributes only, no flight numbers."""
    def __init__(self, manufacturer=None, category=None):
        self.id = 'M1'
        self.manufacturer = manufacturer
        self.category = category


def test_disc_record():
    disc = DiscRecord(id='1', manufacturer='Innova', plastic='Star', color='Blue', category='Putter',
                      flight_numbers=FlightNumbers(speed=3, glide=3, turn=0, fade=1))

    assert normalize_disc(disc) == NormalizedDisc(
        id='1', manufacturer='Innova', plastic='Star', color='Blue', category='Putter',
        speed=3, glide=3, turn=0, fade=1,
    )


def test_empty_record():
    assert normalize_disc(DiscRecord()) == NormalizedDisc(id='')


def test_flight_fields_are_independent():
    disc = DiscRecord(flight_numbers=FlightNumbers(speed=10, turn=None))

    normalized = normalize_disc(disc)

    assert normalized.speed == 10
    assert normalized.turn is None
    assert normalized.glide is None


def test_mapping_record():
    normalized = normalize_disc({'id': '7', 'color': 'Red', 'flightNumbers': {'turn': -2}})

    assert normalized.id == '7'
    assert normalized.color == 'Red'
    assert normalized.turn == -2
    assert normalized.manufacturer is None


def test_snake_case_flight_numbers_win():
    normalized = normalize_disc({'flight_numbers': {'speed': 9}, 'flightNumbers': {'speed': 1}})

    assert normalized.speed == 9


def test_duck_typed_record():
    normalized = normalize_disc(MockDisc(manufacturer='Prodigy'))

    assert normalized.manufacturer == 'Prodigy'
    assert normalized.speed is None


def test_duck_typed_flight_numbers():
    record = MockDisc()
    record.flight_numbers = MockFlight(speed=5, turn=-1)

    normalized = normalize_disc(record)

    assert normalized.speed == 5
    assert normalized.turn == -1
    assert normalized.fade is None


def test_empty_string_is_kept():
    normalized = normalize_disc(DiscRecord(manufacturer='', category=' Putter '))

    assert normalized.manufacturer == ''
    assert normalized.category == ' Putter '


def test_non_numeric_flight_values_are_no_data():
    normalized = normalize_disc({'flight_numbers': {'speed': '12', 'turn': True, 'fade': math.nan, 'glide': 4.5}})

    assert normalized.speed is None
    assert normalized.turn is None
    assert normalized.fade is None
    assert normalized.glide == 4.5


def test_decimal_flight_values():
    normalized = normalize_disc({'flight_numbers': {'speed': Decimal('2'), 'turn': Decimal('-2.5'),
                                                    'fade': Decimal('NaN')}})

    assert normalized.speed == Decimal('2')
    assert normalized.turn == Decimal('-2.5')
    assert normalized.fade is None


def test_non_text_labels_are_no_data():
    normalized = normalize_disc({'manufacturer': 42, 'plastic': ['Star']})

    assert normalized.manufacturer is None
    assert normalized.plastic is None


def test_normalize_discs():
    assert normalize_discs(None) == []
    assert len(normalize_discs([DiscRecord(), {}, MockDisc()])) == 3
