"""
Normalization of disc records ahead of statistics collection.

Records may be DiscRecord instances, any object exposing the same attribute
names, or plain payload mappings. Normalization reduces each one to the
attributes that are actually present: an attribute that is missing or None
is "no data". Empty strings are present values and are not trimmed.
"""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
import logging
import math
from numbers import Real
from typing import Any, Iterable, List, Mapping, Optional

logger = logging.getLogger(__name__)

TEXT_FIELDS = ('manufacturer', 'plastic', 'color', 'category')
FLIGHT_FIELDS = ('speed', 'glide', 'turn', 'fade')


@dataclass(frozen=True)
class NormalizedDisc:
    """Present attributes of one disc; None means the attribute carries no data."""
    id: Any = None
    manufacturer: Optional[str] = None
    plastic: Optional[str] = None
    color: Optional[str] = None
    category: Optional[str] = None
    speed: Optional[float] = None
    glide: Optional[float] = None
    turn: Optional[float] = None
    fade: Optional[float] = None


def _read(source: Any, name: str) -> Any:
    if source is None:
        return None
    if isinstance(source, Mapping):
        return source.get(name)
    return getattr(source, name, None)


def _as_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, str):
        return value
    logger.debug(f"Ignoring non-text label {value!r}")
    return None


def _as_number(value: Any) -> Optional[float]:
    # bool is a Real subclass but never a flight rating; Decimal is not a Real
    if value is None or isinstance(value, bool) or not isinstance(value, (Real, Decimal)):
        return None
    if isinstance(value, Decimal) and value.is_nan():
        return None
    if isinstance(value, float) and math.isnan(value):
        return None
    return value


def normalize_disc(record: Any) -> NormalizedDisc:
    """
    Reduce one disc record to its present attributes.

    Args:
        record: DiscRecord, duck-typed object or payload mapping.

    Returns:
        NormalizedDisc with None for every attribute that carries no data.
    """
    flight_numbers = _read(record, 'flight_numbers')
    if flight_numbers is None:
        flight_numbers = _read(record, 'flightNumbers')

    values = {name: _as_text(_read(record, name)) for name in TEXT_FIELDS}
    values.update({name: _as_number(_read(flight_numbers, name)) for name in FLIGHT_FIELDS})

    return NormalizedDisc(id=_read(record, 'id'), **values)


def normalize_discs(records: Optional[Iterable[Any]]) -> List[NormalizedDisc]:
    """Normalize a collection of disc records; None is treated as an empty bag."""
    if records is None:
        return []
    return [normalize_disc(record) for record in records]
