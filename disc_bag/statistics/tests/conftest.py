"""
Pytest fixtures for statistics tests.
"""
from __future__ import annotations

import pytest

from disc_bag.disc import DiscRecord, FlightNumbers


@pytest.fixture
def make_disc():
    """Factory for DiscRecord objects; flight numbers given as (speed, glide, turn, fade)."""
    def _create_disc(id: str = '1', manufacturer=None, plastic=None, color=None,
                     category=None, flight=None) -> DiscRecord:
        return DiscRecord(
            id=id,
            manufacturer=manufacturer,
            plastic=plastic,
            color=color,
            category=category,
            flight_numbers=FlightNumbers(*flight) if flight is not None else None,
        )

    return _create_disc


@pytest.fixture
def mixed_bag(make_disc):
    """Five discs spanning speeds 3-13 and turns -3 to 1."""
    return [
        make_disc('1', 'Innova', 'Star', 'Blue', 'Distance Driver', (12, 5, -3, 2)),
        make_disc('2', 'Innova', 'Champion', 'Red', 'Fairway Driver', (7, 5, 0, 2)),
        make_disc('3', 'Discraft', 'ESP', 'Blue', 'Midrange', (5, 4, -1, 1)),
        make_disc('4', 'Innova', 'Star', 'Yellow', 'Putter', (3, 3, 0, 2)),
        make_disc('5', 'MVP', 'Neutron', 'Green', 'Distance Driver', (13, 5, 1, 3)),
    ]
