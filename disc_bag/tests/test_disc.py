"""
Tests for disc.py DiscRecord and FlightNumbers.
"""
import dataclasses

import pytest

from disc_bag.disc import DiscRecord, FlightNumbers


class TestFlightNumbers:
    """Tests for FlightNumbers."""

    def test_defaults_are_none(self):
        flight = FlightNumbers()

        assert (flight.speed, flight.glide, flight.turn, flight.fade) == (None, None, None, None)

    def test_from_dict(self):
        flight = FlightNumbers.from_dict({'speed': 12, 'glide': 5, 'turn': -1, 'fade': 3})

        assert flight == FlightNumbers(speed=12, glide=5, turn=-1, fade=3)

    def test_from_dict_partial(self):
        flight = FlightNumbers.from_dict({'speed': 10, 'turn': None})

        assert flight.speed == 10
        assert flight.turn is None
        assert flight.fade is None

    def test_from_dict_rejects_non_mapping(self):
        with pytest.raises(TypeError):
            FlightNumbers.from_dict([12, 5, -1, 3])


class TestDiscRecord:
    """Tests for DiscRecord."""

    def test_from_dict_backend_payload(self):
        """Test building a record from a snake_case payload with extra keys."""
        disc = DiscRecord.from_dict({
            'id': 'abc',
            'mold': 'Destroyer',
            'manufacturer': 'Innova',
            'plastic': 'Star',
            'weight': 175,
            'color': 'Blue',
            'category': 'Distance Driver',
            'flight_numbers': {'speed': 12, 'glide': 5, 'turn': -1, 'fade': 3},
            'photos': [],
        })

        assert disc.id == 'abc'
        assert disc.manufacturer == 'Innova'
        assert disc.category == 'Distance Driver'
        assert disc.flight_numbers == FlightNumbers(12, 5, -1, 3)

    def test_from_dict_camel_case_flight_numbers(self):
        disc = DiscRecord.from_dict({'id': '1', 'flightNumbers': {'speed': 2, 'turn': 0}})

        assert disc.flight_numbers == FlightNumbers(speed=2, turn=0)

    def test_from_dict_without_flight_numbers(self):
        disc = DiscRecord.from_dict({'id': '1', 'color': ''})

        assert disc.flight_numbers is None
        assert disc.color == ''
        assert disc.plastic is None

    def test_from_dict_rejects_non_mapping(self):
        with pytest.raises(TypeError):
            DiscRecord.from_dict('not a disc')

    def test_from_dict_rejects_bad_flight_numbers(self):
        with pytest.raises(TypeError):
            DiscRecord.from_dict({'id': '1', 'flight_numbers': [12, 5, -1, 3]})

    def test_immutable(self):
        disc = DiscRecord(id='1', manufacturer='MVP')

        with pytest.raises(dataclasses.FrozenInstanceError):
            disc.manufacturer = 'Axiom'

    def test_repr(self):
        disc = DiscRecord(id='1', manufacturer='MVP', category='Putter')

        assert repr(disc) == "DiscRecord(id='1', manufacturer='MVP', category='Putter')"
