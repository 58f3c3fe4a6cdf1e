"""Point models: the Point builder, the serialization protocol, timestamp options.

Usage:
    point = (
        Point("mem")
        .tag("host", "host1")
        .field("used_percent", 23.43234543)
        .timestamp(1556896326)
    )
    point.serialize_with_timestamp()  # 'mem,host=host1 used_percent=23.43234543 1556896326'
"""

from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Protocol, runtime_checkable

from influxline.core.value import Timestamp, Value, to_value


@runtime_checkable
class PointSerialize(Protocol):
    """Anything that can render itself as one line protocol line.

    Implemented by Point and by every class registered with @point.
    """

    def serialize(self) -> str:
        """Render the line without a timestamp."""
        ...

    def serialize_with_timestamp(self, timestamp: Timestamp | int | str | None = None) -> str:
        """Render the line followed by a timestamp.

        Args:
            timestamp: Override taking precedence over the stored timestamp.
        """
        ...


def _check_text(what: str, value: object) -> None:
    if not isinstance(value, str):
        raise TypeError(f"{what} must be a str, got {type(value).__name__}")


@dataclasses.dataclass(slots=True)
class Point:
    """One measurement observation.

    Tags and fields keep insertion order and are not de-duplicated: adding
    the same key twice emits it twice. The builder methods mutate the point
    and return it for chaining.

    Attributes:
        measurement: Measurement name.
        tags: Ordered (key, value) tag pairs; values are always text.
        fields: Ordered (key, Value) field pairs.
        time: Stored timestamp, if any.
    """

    measurement: str
    tags: list[tuple[str, str]] = dataclasses.field(default_factory=list)
    fields: list[tuple[str, Value]] = dataclasses.field(default_factory=list)
    time: Timestamp | None = None

    def __post_init__(self) -> None:
        _check_text("measurement", self.measurement)
        for key, value in self.tags:
            _check_text("tag key", key)
            _check_text("tag value", value)
        self.tags = list(self.tags)
        fields = []
        for key, value in self.fields:
            _check_text("field key", key)
            fields.append((key, to_value(value)))
        self.fields = fields
        if self.time is not None:
            self.time = Timestamp.of(self.time)

    def tag(self, key: str, value: str) -> Point:
        """Append a tag pair.

        Raises:
            TypeError: If key or value is not a str.
        """
        _check_text("tag key", key)
        _check_text("tag value", value)
        self.tags.append((key, value))
        return self

    def field(self, key: str, value: Value | str | bool | int | float) -> Point:
        """Append a field pair, coercing native values into a Value.

        Raises:
            TypeError: If value has no field value representation.
        """
        _check_text("field key", key)
        self.fields.append((key, to_value(value)))
        return self

    def timestamp(self, value: Timestamp | int | str) -> Point:
        """Set (or replace) the stored timestamp."""
        self.time = Timestamp.of(value)
        return self

    def serialize(self) -> str:
        from influxline.core.point import core

        return core.serialize(self)

    def serialize_with_timestamp(self, timestamp: Timestamp | int | str | None = None) -> str:
        from influxline.core.point import core

        return core.serialize_with_timestamp(self, timestamp)


class TimestampPolicy(Enum):
    """How a batch decides the trailing timestamp of each line."""

    NONE = "none"  # No timestamp column, server assigns write time
    USE = "use"  # One fixed timestamp for every line
    FROM_POINT = "from_point"  # Each point's own timestamp, 0 if unset


@dataclasses.dataclass(slots=True, frozen=True)
class TimestampOptions:
    """Timestamp policy applied uniformly to a batch of points."""

    policy: TimestampPolicy
    timestamp: Timestamp | None = None

    def __post_init__(self) -> None:
        if self.policy is TimestampPolicy.USE and self.timestamp is None:
            raise ValueError("TimestampPolicy.USE requires a timestamp")
        if self.policy is not TimestampPolicy.USE and self.timestamp is not None:
            raise ValueError(f"TimestampPolicy.{self.policy.name} does not take a timestamp")

    @classmethod
    def none(cls) -> TimestampOptions:
        return cls(TimestampPolicy.NONE)

    @classmethod
    def use(cls, timestamp: Timestamp | int | str) -> TimestampOptions:
        return cls(TimestampPolicy.USE, Timestamp.of(timestamp))

    @classmethod
    def from_point(cls) -> TimestampOptions:
        return cls(TimestampPolicy.FROM_POINT)
