from __future__ import annotations

from collections.abc import Iterable
from datetime import UTC, datetime
from email.utils import parsedate_to_datetime


def parse_last_modified(value: str | None) -> datetime | None:
    """
    Best-effort parser for `Last-Modified` values.

    Accepts RFC 7231 HTTP-dates ("Wed, 21 Oct 2015 07:28:00 GMT") and falls back
    to ISO-8601. Returns None instead of raising on bad input.
    """
    if not isinstance(value, str) or not value.strip():
        return None

    v = value.strip()
    try:
        dt = parsedate_to_datetime(v)
    except (TypeError, ValueError, IndexError):
        try:
            dt = datetime.fromisoformat(v.replace("Z", "+00:00"))
        except ValueError:
            return None

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt


def select_latest_modified(values: Iterable[str | None]) -> str | None:
    """Return the original string of the most recent parseable timestamp.

    Missing or unparsable values are skipped, never treated as epoch zero.
    Ties keep the first value seen.
    """

    latest: tuple[datetime, str] | None = None
    for value in values:
        parsed = parse_last_modified(value)
        if parsed is None:
            continue
        if latest is None or parsed > latest[0]:
            latest = (parsed, value)  # type: ignore[assignment]
    return latest[1] if latest else None
