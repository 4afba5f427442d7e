from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from typing import Any

_non_alnum_re = re.compile(r"[^a-z0-9]")

# Keys tried, in order, when a scalar is wrapped in an object such as
# {"status": {"label": "Out"}}.
SCALAR_WRAPPER_KEYS = (
    "label",
    "name",
    "status",
    "code",
    "abbr",
    "abbreviation",
    "short",
    "description",
    "text",
    "value",
)


def normalize_key(value: Any) -> str:
    """Normalize a payload key for matching across producer spellings.

    `playerName`, `player_name` and `Player Name` all become `playername`.
    """

    return _non_alnum_re.sub("", str(value).lower())


def read_by_normalized_key(obj: Any, keys: Iterable[str]) -> Any:
    """Return the value of the first of `keys` present in `obj`, or None.

    Keys are compared after normalize_key(), so the lookup tolerates case,
    separators and punctuation differences. Falsy matches are returned as-is.
    """

    if not isinstance(obj, Mapping):
        return None

    normalized: dict[str, Any] = {}
    for key in obj:
        normalized[normalize_key(key)] = key

    for key in keys:
        match = normalized.get(normalize_key(key))
        if match is not None:
            return obj[match]
    return None


def to_string_value(value: Any) -> str:
    """Flatten a scalar, or a scalar wrapped in an object, into a trimmed string."""

    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str | int | float):
        return str(value).strip()
    if isinstance(value, Mapping):
        nested = read_by_normalized_key(value, SCALAR_WRAPPER_KEYS)
        if nested is not None:
            return to_string_value(nested)
    return ""
