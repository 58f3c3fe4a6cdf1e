"""Schema mapping: derive line protocol serialization from annotated records."""

from influxline.schema.core import SchemaRegistry, build_schema, get_registry, point
from influxline.schema.models import (
    Field,
    PointSchema,
    Role,
    RoleMarker,
    SchemaEntry,
    Tag,
    TimestampField,
)

__all__ = [
    # Models
    "Role",
    "RoleMarker",
    "Tag",
    "Field",
    "TimestampField",
    "SchemaEntry",
    "PointSchema",
    # Core
    "point",
    "build_schema",
    "get_registry",
    "SchemaRegistry",
]
