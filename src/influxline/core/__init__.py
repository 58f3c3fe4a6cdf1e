"""Core line protocol codec: escaping, values, points and serialization."""

from influxline.core.errors import (
    ConfigurationError,
    LineProtocolError,
    PointValidationError,
)
from influxline.core.escape import escape_key, escape_measurement, escape_string_value
from influxline.core.point import (
    Point,
    PointSerialize,
    TimestampOptions,
    TimestampPolicy,
    serialize,
    serialize_lines,
    serialize_with_timestamp,
)
from influxline.core.value import (
    Boolean,
    Float,
    Integer,
    String,
    Timestamp,
    UInteger,
    Value,
    to_value,
)

__all__ = [
    # Errors
    "LineProtocolError",
    "ConfigurationError",
    "PointValidationError",
    # Escaping
    "escape_measurement",
    "escape_key",
    "escape_string_value",
    # Values
    "Value",
    "String",
    "Integer",
    "UInteger",
    "Float",
    "Boolean",
    "Timestamp",
    "to_value",
    # Points
    "Point",
    "PointSerialize",
    "TimestampOptions",
    "TimestampPolicy",
    "serialize",
    "serialize_with_timestamp",
    "serialize_lines",
]
