"""
speechscore.utils - Shared utility functions.

Contains common numeric and formatting helpers used across modules.
"""

from __future__ import annotations

import math
from typing import Any


def round_half_up(value: float, digits: int = 0) -> float:
    """Round halves upward (2.5 -> 3, -2.5 -> -2).

    Python's built-in round() uses banker's rounding, which would shift
    scores sitting exactly on a .5 boundary.

    Args:
        value: Number to round
        digits: Decimal places to keep

    Returns:
        Rounded value as float
    """
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


def round_int(value: float) -> int:
    """Round half-up to the nearest integer."""
    return int(math.floor(value + 0.5))


def clamp(value: float, low: float, high: float) -> float:
    """Constrain value to the closed interval [low, high]."""
    return max(low, min(high, value))


def as_number(value: Any) -> float | None:
    """Return value as a finite float, or None if it is not a real number.

    Booleans are rejected even though bool subclasses int.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if not math.isfinite(value):
        return None
    return float(value)


def format_duration(seconds: float) -> str:
    """Format seconds as HH:MM:SS or MM:SS.

    Args:
        seconds: Duration in seconds

    Returns:
        Formatted string (HH:MM:SS if >= 1 hour, otherwise MM:SS)
    """
    hours = int(seconds // 3600)
    minutes = int((seconds % 3600) // 60)
    secs = int(seconds % 60)
    if hours > 0:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"


def get_score_style(score: float) -> str:
    """Get rich style name for a 0-100 score.

    Args:
        score: Score from 0 to 100

    Returns:
        "green" (high), "yellow" (medium), or "red" (low)
    """
    if score >= 70:
        return "green"
    elif score >= 40:
        return "yellow"
    return "red"
