"""Escaping rules for the three line protocol contexts.

Reference: https://docs.influxdata.com/influxdb/v2/reference/syntax/line-protocol/

Only the listed characters receive a backslash. Backslashes themselves are
never escaped, matching the behaviour of the reference line protocol parsers.
"""

from __future__ import annotations

_MEASUREMENT_CHARS = frozenset(", ")
_KEY_CHARS = frozenset(",= ")
_STRING_CHARS = frozenset('"')


def _table(chars: frozenset[str]) -> dict[int, str]:
    return str.maketrans({c: "\\" + c for c in chars})


_MEASUREMENT_TABLE = _table(_MEASUREMENT_CHARS)
_KEY_TABLE = _table(_KEY_CHARS)
_STRING_TABLE = _table(_STRING_CHARS)


def _escape(s: str, chars: frozenset[str], table: dict[int, str]) -> str:
    # Hand back the input untouched when nothing needs escaping.
    if chars.isdisjoint(s):
        return s
    return s.translate(table)


def escape_measurement(s: str) -> str:
    """Escape commas and spaces in a measurement name.

    Args:
        s: Raw measurement name.

    Returns:
        Protocol-safe measurement name.
    """
    return _escape(s, _MEASUREMENT_CHARS, _MEASUREMENT_TABLE)


def escape_key(s: str) -> str:
    """Escape commas, equals signs and spaces.

    Used for tag keys, tag values and field keys.

    Args:
        s: Raw key or tag value.

    Returns:
        Protocol-safe text.
    """
    return _escape(s, _KEY_CHARS, _KEY_TABLE)


def escape_string_value(s: str) -> str:
    """Escape double quotes inside a string field value.

    The result is *not* wrapped in quotes; the serializer adds them.

    Args:
        s: Raw string field payload.

    Returns:
        Payload safe to place between double quotes.
    """
    return _escape(s, _STRING_CHARS, _STRING_TABLE)
