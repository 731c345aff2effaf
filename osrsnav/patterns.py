# osrsnav/patterns.py
"""Wire codec for compiled regular expressions.

Patterns travel as their source string; ``null`` stays ``None``. Any other
JSON token is rejected outright rather than coerced.
"""

from __future__ import annotations

import re
from typing import Annotated, Any

from pydantic import PlainSerializer, PlainValidator

from .errors import UnsupportedEncoding


def token_kind(token: Any) -> str:
    """Name the JSON token kind of an already-parsed value."""
    if token is None:
        return "NULL"
    if isinstance(token, bool):
        return "BOOLEAN"
    if isinstance(token, (int, float)):
        return "NUMBER"
    if isinstance(token, str):
        return "STRING"
    if isinstance(token, (list, tuple)):
        return "BEGIN_ARRAY"
    if isinstance(token, dict):
        return "BEGIN_OBJECT"
    return type(token).__name__


def encode_pattern(pattern: re.Pattern[str] | None) -> str | None:
    if pattern is None:
        return None
    return pattern.pattern


def decode_pattern(token: Any) -> re.Pattern[str] | None:
    if token is None:
        return None
    if isinstance(token, re.Pattern):
        return token
    if not isinstance(token, str):
        raise UnsupportedEncoding(f"Token is not a regex pattern: {token_kind(token)}")
    try:
        return re.compile(token)
    except re.error as e:
        raise UnsupportedEncoding(f"Invalid regex pattern {token!r}: {e}") from e


# Pydantic field type: validates through decode_pattern, dumps through encode_pattern.
PatternValue = Annotated[
    re.Pattern[str] | None,
    PlainValidator(decode_pattern),
    PlainSerializer(encode_pattern, return_type=str | None),
]
