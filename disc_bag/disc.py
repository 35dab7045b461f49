"""
disc.py - Disc records as supplied by a user's disc inventory.

This module provides the DiscRecord and FlightNumbers classes. Every attribute
is optional: a missing attribute means "no data", never a default value.
Records can be built directly or from backend payload mappings, which use
either snake_case (``flight_numbers``) or camelCase (``flightNumbers``) for
the flight numbers.

Module: disc_bag.disc
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

Number = float  # int values are accepted wherever a Number is expected


@dataclass(frozen=True)
class FlightNumbers:
    """
    The four standard flight ratings of a disc.

    Attributes:
        speed (Optional[Number]): Speed rating.
        glide (Optional[Number]): Glide rating.
        turn (Optional[Number]): Turn rating, used for stability classification.
        fade (Optional[Number]): Fade rating.
    """
    speed: Optional[Number] = None
    glide: Optional[Number] = None
    turn: Optional[Number] = None
    fade: Optional[Number] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> FlightNumbers:
        """
        Create flight numbers from a payload mapping.

        Args:
            data: Mapping with any of 'speed', 'glide', 'turn', 'fade'.

        Returns:
            FlightNumbers instance; missing keys stay None.

        Raises:
            TypeError: If data is not a mapping.
        """
        if not isinstance(data, Mapping):
            raise TypeError(f"FlightNumbers.from_dict expects a mapping, got {type(data).__name__}")
        return cls(
            speed=data.get('speed'),
            glide=data.get('glide'),
            turn=data.get('turn'),
            fade=data.get('fade'),
        )


@dataclass(frozen=True)
class DiscRecord:
    """
    One disc in a user's bag.

    Attributes:
        id (str): Opaque identifier, kept for traceability only.
        manufacturer (Optional[str]): Brand label.
        plastic (Optional[str]): Plastic label.
        color (Optional[str]): Colour label.
        category (Optional[str]): Category label, e.g. 'Putter'.
        flight_numbers (Optional[FlightNumbers]): Flight ratings.
    """
    id: str = ''
    manufacturer: Optional[str] = None
    plastic: Optional[str] = None
    color: Optional[str] = None
    category: Optional[str] = None
    flight_numbers: Optional[FlightNumbers] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> DiscRecord:
        """
        Create a disc record from a backend payload mapping.

        Unknown keys (mold, weight, photos, ...) are ignored.

        Args:
            data: Payload mapping for one disc.

        Returns:
            DiscRecord instance.

        Raises:
            TypeError: If data, or its flight numbers entry, is not a mapping.
        """
        if not isinstance(data, Mapping):
            raise TypeError(f"DiscRecord.from_dict expects a mapping, got {type(data).__name__}")

        flight_data = data.get('flight_numbers')
        if flight_data is None:
            flight_data = data.get('flightNumbers')

        return cls(
            id=data.get('id', ''),
            manufacturer=data.get('manufacturer'),
            plastic=data.get('plastic'),
            color=data.get('color'),
            category=data.get('category'),
            flight_numbers=FlightNumbers.from_dict(flight_data) if flight_data is not None else None,
        )

    def __repr__(self) -> str:
        return f"DiscRecord(id={self.id!r}, manufacturer={self.manufacturer!r}, category={self.category!r})"
