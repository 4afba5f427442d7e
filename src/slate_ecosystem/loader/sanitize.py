from __future__ import annotations

import json
import re
from typing import Any

from .errors import DocumentParseError

_nan_re = re.compile(r"\bNaN\b")
_infinity_re = re.compile(r"-?\bInfinity\b")


def sanitize_json_text(text: str) -> str:
    """Replace bare NaN / Infinity / -Infinity tokens with `null`.

    Upstream producers serialize floats with Python's json module defaults,
    which emit these non-standard tokens. Word boundaries keep identifiers
    such as `NaNa` or `Infinityish` intact.
    """

    text = _nan_re.sub("null", text)
    return _infinity_re.sub("null", text)


def parse_document(text: str) -> Any:
    """Sanitize and parse a JSON document body.

    Raises DocumentParseError if the body is still not valid JSON.
    """

    try:
        return json.loads(sanitize_json_text(text))
    except ValueError as e:
        raise DocumentParseError(f"Invalid JSON: {e}") from e
