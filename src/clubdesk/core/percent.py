"""Whole-number percentage helpers shared by the dashboard aggregators."""

from decimal import Decimal, ROUND_HALF_UP
from typing import Union

Number = Union[int, Decimal]


def round_percent(value: Decimal) -> int:
    """Round to the nearest whole percent, halves away from zero."""
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def change_percent(current: Number, previous: Number) -> int:
    """round((current - previous) / previous * 100); previous must be > 0."""
    current = Decimal(current)
    previous = Decimal(previous)
    return round_percent((current - previous) / previous * 100)


def share_percent(part: Number, whole: Number) -> int:
    """round(part / whole * 100), or 0 when whole is 0."""
    whole = Decimal(whole)
    if whole == 0:
        return 0
    return round_percent(Decimal(part) / whole * 100)
