"""Point functionality: models, serializer and batch rendering."""

from influxline.core.point.core import (
    render_line,
    resolve_timestamp,
    serialize,
    serialize_lines,
    serialize_one,
    serialize_with_timestamp,
    validate_point,
)
from influxline.core.point.models import (
    Point,
    PointSerialize,
    TimestampOptions,
    TimestampPolicy,
)

__all__ = [
    # Models
    "Point",
    "PointSerialize",
    "TimestampOptions",
    "TimestampPolicy",
    # Serializer
    "render_line",
    "resolve_timestamp",
    "serialize",
    "serialize_with_timestamp",
    "serialize_one",
    "serialize_lines",
    "validate_point",
]
