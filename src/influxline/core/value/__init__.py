"""Value model: field value variants and timestamps."""

from influxline.core.value.models import (
    NATIVE_VALUE_TYPES,
    VALUE_TYPES,
    ZERO_TIMESTAMP,
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
    "Value",
    "String",
    "Integer",
    "UInteger",
    "Float",
    "Boolean",
    "Timestamp",
    "to_value",
    "VALUE_TYPES",
    "NATIVE_VALUE_TYPES",
    "ZERO_TIMESTAMP",
]
