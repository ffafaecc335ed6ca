"""Unit normalisation: bandwidth figures to megabits per second."""

from __future__ import annotations

import math
from typing import Optional

_MULTIPLIERS = {
    "m": 1.0,
    "g": 1024.0,
}


def to_mbps(number: str, unit: str) -> Optional[float]:
    """Convert ``number`` expressed in ``unit`` (``m`` or ``g``, any case) to Mbps.

    Returns ``None`` when *number* is not a non-negative real number or
    *unit* is not one of the two known letters.
    """
    multiplier = _MULTIPLIERS.get(unit.lower())
    if multiplier is None:
        return None
    try:
        value = float(number)
    except ValueError:
        return None
    if value < 0 or not math.isfinite(value):
        return None
    return value * multiplier
