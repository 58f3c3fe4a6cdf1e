"""Line protocol serializer.

Pure functions over Point (or any PointSerialize). No state, no I/O; safe
to call from any number of threads at once.

Line shape:
    <measurement>[,<tag>=<value>...][ <field>=<value>...][ <timestamp>]
"""

from __future__ import annotations

from collections.abc import Iterable

from influxline.core.errors import PointValidationError
from influxline.core.escape import escape_key, escape_measurement
from influxline.core.point.models import (
    Point,
    PointSerialize,
    TimestampOptions,
    TimestampPolicy,
)
from influxline.core.value import ZERO_TIMESTAMP, Timestamp, Value


def render_line(
    measurement: str,
    tags: Iterable[tuple[str, str]],
    fields: Iterable[tuple[str, Value]],
) -> str:
    """Render measurement, tags and fields into a line without timestamp.

    Empty tag or field sections are left out entirely, separator included.

    Args:
        measurement: Unescaped measurement name.
        tags: Ordered unescaped (key, value) tag pairs.
        fields: Ordered (key, Value) field pairs.

    Returns:
        The escaped and encoded line.
    """
    line = escape_measurement(measurement)

    tag_text = ",".join(f"{escape_key(k)}={escape_key(v)}" for k, v in tags)
    if tag_text:
        line += "," + tag_text

    field_text = ",".join(f"{escape_key(k)}={v.encode()}" for k, v in fields)
    if field_text:
        line += " " + field_text

    return line


def serialize(point: Point) -> str:
    """Serialize a point without a timestamp.

    Args:
        point: Point to render.

    Returns:
        Line protocol text with no trailing timestamp.
    """
    return render_line(point.measurement, point.tags, point.fields)


def resolve_timestamp(
    override: Timestamp | int | str | None,
    stored: Timestamp | None,
) -> Timestamp:
    """Pick the timestamp for a line: override, then stored, then 0."""
    if override is not None:
        return Timestamp.of(override)
    if stored is not None:
        return stored
    return ZERO_TIMESTAMP


def serialize_with_timestamp(
    point: Point,
    timestamp: Timestamp | int | str | None = None,
) -> str:
    """Serialize a point followed by a space and a timestamp.

    Args:
        point: Point to render.
        timestamp: Per-call override. When None the point's own timestamp is
            used, and when the point has none the literal 0.

    Returns:
        Line protocol text ending with the chosen timestamp.
    """
    return f"{serialize(point)} {resolve_timestamp(timestamp, point.time).encode()}"


def validate_point(point: PointSerialize) -> None:
    """Strict-mode check that a point will produce a structurally valid line.

    Only Point instances can be empty; schema records always carry at least
    one field.

    Raises:
        PointValidationError: If the point has no fields.
    """
    if isinstance(point, Point) and not point.fields:
        raise PointValidationError(
            f"Point {point.measurement!r} has no fields; line protocol requires at least one"
        )


def serialize_one(point: PointSerialize, options: TimestampOptions) -> str:
    """Serialize a single point under a batch timestamp policy."""
    if options.policy is TimestampPolicy.NONE:
        return point.serialize()
    if options.policy is TimestampPolicy.USE:
        return point.serialize_with_timestamp(options.timestamp)
    return point.serialize_with_timestamp(None)


def serialize_lines(
    points: Iterable[PointSerialize],
    options: TimestampOptions | None = None,
    strict: bool = False,
) -> str:
    """Serialize points into a newline-joined batch payload.

    Output line order matches input order. An empty input yields "".

    Args:
        points: Points or registered records to render.
        options: Timestamp policy for every line. Defaults to FROM_POINT.
        strict: Reject field-less points instead of emitting them.

    Returns:
        The batch text, one line per point.

    Raises:
        PointValidationError: In strict mode, if a point has no fields.
    """
    if options is None:
        options = TimestampOptions.from_point()
    lines = []
    for p in points:
        if strict:
            validate_point(p)
        lines.append(serialize_one(p, options))
    return "\n".join(lines)
