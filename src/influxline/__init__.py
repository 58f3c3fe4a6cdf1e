"""influxline: InfluxDB line protocol codec with schema-mapped records.

Usage:
    from dataclasses import dataclass
    from typing import Annotated

    from influxline import Field, Point, Tag, Timestamp, TimestampField, point

    Point("mem").tag("host", "host1").field("used_percent", 23.43234543).serialize()
    # 'mem,host=host1 used_percent=23.43234543'

    @point("mem")
    @dataclass
    class Memory:
        host: Annotated[str, Tag()]
        used_percent: Annotated[float, Field()]
        at: Annotated[Timestamp, TimestampField()]

    Memory("host1", 23.43234543, Timestamp(1556896326)).serialize_with_timestamp(420)
    # 'mem,host=host1 used_percent=23.43234543 420'
"""

import logging

__version__ = "0.1.0"

# Core codec
from influxline.core import (
    Boolean,
    ConfigurationError,
    Float,
    Integer,
    LineProtocolError,
    Point,
    PointSerialize,
    PointValidationError,
    String,
    Timestamp,
    TimestampOptions,
    TimestampPolicy,
    UInteger,
    Value,
    escape_key,
    escape_measurement,
    escape_string_value,
    serialize,
    serialize_lines,
    serialize_with_timestamp,
    to_value,
)

# Schema mapping
from influxline.schema import (
    Field,
    PointSchema,
    SchemaRegistry,
    Tag,
    TimestampField,
    get_registry,
    point,
)

# Writing
from influxline.writer import (
    InMemoryTransport,
    LineWriter,
    Precision,
    StdoutTransport,
    Transport,
    WriteBatch,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Version
    "__version__",
    # Errors
    "LineProtocolError",
    "ConfigurationError",
    "PointValidationError",
    # Values
    "Value",
    "String",
    "Integer",
    "UInteger",
    "Float",
    "Boolean",
    "Timestamp",
    "to_value",
    # Escaping
    "escape_measurement",
    "escape_key",
    "escape_string_value",
    # Points
    "Point",
    "PointSerialize",
    "TimestampOptions",
    "TimestampPolicy",
    "serialize",
    "serialize_with_timestamp",
    "serialize_lines",
    # Schema
    "point",
    "Tag",
    "Field",
    "TimestampField",
    "PointSchema",
    "SchemaRegistry",
    "get_registry",
    # Writer
    "LineWriter",
    "Precision",
    "WriteBatch",
    "Transport",
    "StdoutTransport",
    "InMemoryTransport",
]
