"""
Stability classification from a disc's turn rating.

    turn <= -2       understable
    -2 < turn <= 0   stable
    turn > 0         overstable
"""
from __future__ import annotations

from enum import Enum
from typing import Optional

UNDERSTABLE_MAX_TURN = -2
STABLE_MAX_TURN = 0


class Stability(str, Enum):
    UNDERSTABLE = 'understable'
    STABLE = 'stable'
    OVERSTABLE = 'overstable'


def classify_turn(turn: Optional[float]) -> Optional[Stability]:
    """
    Classify a disc by its turn rating.

    Args:
        turn: Turn rating, or None when the disc has no turn data.

    Returns:
        Stability class, or None if turn is None.
    """
    if turn is None:
        return None
    if turn <= UNDERSTABLE_MAX_TURN:
        return Stability.UNDERSTABLE
    if turn <= STABLE_MAX_TURN:
        return Stability.STABLE
    return Stability.OVERSTABLE


def empty_breakdown() -> dict:
    """Fresh zeroed counts keyed by stability class name."""
    return {stability.value: 0 for stability in Stability}
