from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Any


def _clamp_days(days_back: Any) -> int:
    try:
        days = int(days_back)
    except (TypeError, ValueError, OverflowError):
        return 1
    return max(0, days)


def _utc_anchor(year: int, month: int, day: int) -> datetime:
    """UTC midnight for the given parts, rolling out-of-range month/day over.

    `2025-02-30` lands on 2025-03-02 and `2024-13-01` on 2025-01-01.
    """

    carry_year, month_index = divmod(year * 12 + (month - 1), 12)
    first = datetime(carry_year, month_index + 1, 1, tzinfo=UTC)
    return first + timedelta(days=day - 1)


def previous_date(date_str: str, days_back: Any = 1) -> str:
    """Return the `YYYY-MM-DD` date `days_back` calendar days before `date_str`.

    The arithmetic is anchored to a UTC midnight so local DST transitions
    never shift the result. Input that does not split into three integer
    components is returned as-is, as is input whose result falls outside
    the representable calendar.
    """

    parts = str(date_str or "").split("-")
    if len(parts) != 3:
        return date_str

    try:
        year, month, day = (int(p) for p in parts)
    except ValueError:
        return date_str

    try:
        shifted = _utc_anchor(year, month, day) - timedelta(days=_clamp_days(days_back))
    except (ValueError, OverflowError):
        return date_str

    return f"{shifted.year:04d}-{shifted.month:02d}-{shifted.day:02d}"
