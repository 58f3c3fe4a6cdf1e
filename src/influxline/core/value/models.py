"""Value models: typed field values and timestamps.

Field values are one of five immutable variants. The variant decides the
text encoding, including the suffix that tells integers, unsigned integers
and floats apart on the wire:

    String("hi").encode()   -> '"hi"'
    Integer(5).encode()     -> '5i'
    UInteger(5).encode()    -> '5u'
    Float(2.5).encode()     -> '2.5'
    Boolean(True).encode()  -> 'true'

Tag values have no variant; they are always plain text.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from influxline.core.escape import escape_string_value

I64_MIN = -(2**63)
I64_MAX = 2**63 - 1
U64_MAX = 2**64 - 1


def _check_int(value: Any, low: int, high: int, kind: str) -> None:
    # bool is an int subclass but never a valid integer payload
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{kind} requires an int, got {type(value).__name__}")
    if not low <= value <= high:
        raise ValueError(f"{kind} value {value} outside [{low}, {high}]")


@dataclass(slots=True, frozen=True)
class String:
    """String field value, quoted and escaped on the wire."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeError(f"String requires a str, got {type(self.value).__name__}")

    def encode(self) -> str:
        return f'"{escape_string_value(self.value)}"'


@dataclass(slots=True, frozen=True)
class Integer:
    """Signed 64-bit integer field value, encoded with an ``i`` suffix."""

    value: int

    def __post_init__(self) -> None:
        _check_int(self.value, I64_MIN, I64_MAX, "Integer")

    def encode(self) -> str:
        return f"{self.value}i"


@dataclass(slots=True, frozen=True)
class UInteger:
    """Unsigned 64-bit integer field value, encoded with a ``u`` suffix."""

    value: int

    def __post_init__(self) -> None:
        _check_int(self.value, 0, U64_MAX, "UInteger")

    def encode(self) -> str:
        return f"{self.value}u"


@dataclass(slots=True, frozen=True)
class Float:
    """64-bit float field value, encoded as the shortest round-trip text."""

    value: float

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, (int, float)):
            raise TypeError(f"Float requires a float, got {type(self.value).__name__}")
        try:
            converted = float(self.value)
        except OverflowError as e:
            raise ValueError(f"Float value {self.value} outside the 64-bit float range") from e
        object.__setattr__(self, "value", converted)

    def encode(self) -> str:
        return repr(self.value)


@dataclass(slots=True, frozen=True)
class Boolean:
    """Boolean field value, encoded as ``true`` or ``false``."""

    value: bool

    def __post_init__(self) -> None:
        if not isinstance(self.value, bool):
            raise TypeError(f"Boolean requires a bool, got {type(self.value).__name__}")

    def encode(self) -> str:
        return "true" if self.value else "false"


type Value = String | Integer | UInteger | Float | Boolean
"""A field value: exactly one of the five variants."""

VALUE_TYPES: tuple[type, ...] = (String, Integer, UInteger, Float, Boolean)

# Native types accepted wherever a Value is expected. Unsigned integers have
# no native counterpart and must be built explicitly with UInteger.
NATIVE_VALUE_TYPES: tuple[type, ...] = (str, bool, int, float)


def to_value(obj: Any) -> Value:
    """Coerce a native Python value into a field Value.

    Variants are returned unchanged. ``bool`` is checked before ``int``.

    Args:
        obj: A Value variant, str, bool, int or float.

    Returns:
        The matching Value variant.

    Raises:
        TypeError: If obj has no field value representation.
    """
    if isinstance(obj, VALUE_TYPES):
        return obj  # type: ignore[return-value]
    if isinstance(obj, str):
        return String(obj)
    if isinstance(obj, bool):
        return Boolean(obj)
    if isinstance(obj, int):
        return Integer(obj)
    if isinstance(obj, float):
        return Float(obj)
    raise TypeError(f"Cannot use {type(obj).__name__} as a field value")


@dataclass(slots=True, frozen=True)
class Timestamp:
    """Point timestamp: either pre-formatted text or an integer epoch count.

    The unit (ns/us/ms/s) is decided by the write precision, not here. The
    value is emitted exactly as given.
    """

    value: int | str

    def __post_init__(self) -> None:
        if isinstance(self.value, str):
            return
        _check_int(self.value, I64_MIN, I64_MAX, "Timestamp")

    @property
    def is_text(self) -> bool:
        """True if the timestamp was supplied as pre-formatted text."""
        return isinstance(self.value, str)

    def encode(self) -> str:
        return str(self.value)

    @classmethod
    def of(cls, obj: Timestamp | int | str) -> Timestamp:
        """Coerce an int or str into a Timestamp; Timestamps pass through."""
        if isinstance(obj, Timestamp):
            return obj
        return cls(obj)


ZERO_TIMESTAMP = Timestamp(0)
