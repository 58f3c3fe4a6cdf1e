"""Schema models: role markers and the immutable per-type schema.

Roles are attached with typing.Annotated:

    @point("trades")
    @dataclass
    class Trade:
        ticker: Annotated[str, Tag("symbol")]
        price: Annotated[float, Field()]
        at: Annotated[Timestamp, TimestampField()]
        note: str = ""  # no marker, never serialized
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, ClassVar

from influxline.core.point import render_line, resolve_timestamp
from influxline.core.value import Timestamp, Value


class Role(Enum):
    """Role a record member plays in the serialized line."""

    TAG = auto()
    FIELD = auto()
    TIMESTAMP = auto()


@dataclass(frozen=True)
class RoleMarker:
    """Base class for Annotated role markers.

    Attributes:
        name: Protocol key. Defaults to the member's own name.
    """

    role: ClassVar[Role]
    name: Any = None


@dataclass(frozen=True)
class Tag(RoleMarker):
    """Marks a str member as a tag."""

    role: ClassVar[Role] = Role.TAG


@dataclass(frozen=True)
class Field(RoleMarker):
    """Marks a member as a field."""

    role: ClassVar[Role] = Role.FIELD


@dataclass(frozen=True)
class TimestampField(RoleMarker):
    """Marks the Timestamp member that supplies the line's timestamp."""

    role: ClassVar[Role] = Role.TIMESTAMP


@dataclass(slots=True, frozen=True)
class SchemaEntry:
    """One record member mapped to the line.

    Attributes:
        attribute: Attribute name on the record.
        role: Tag, field or timestamp.
        protocol_name: Key written to the line.
        convert: Builds the field Value from the raw attribute (fields only).
    """

    attribute: str
    role: Role
    protocol_name: str
    convert: Callable[[Any], Value] | None = field(default=None, compare=False)


@dataclass(slots=True, frozen=True)
class PointSchema:
    """Validated, immutable serialization plan for a registered record type.

    Tags and fields are kept in declaration order; tags are always rendered
    before fields.
    """

    type_name: str
    measurement: str
    tags: tuple[SchemaEntry, ...]
    fields: tuple[SchemaEntry, ...]
    timestamp: SchemaEntry

    def tag_pairs(self, record: Any) -> list[tuple[str, str]]:
        pairs = []
        for entry in self.tags:
            raw = getattr(record, entry.attribute)
            if not isinstance(raw, str):
                raise TypeError(
                    f"{type(record).__name__}.{entry.attribute}: tag value must be a str, "
                    f"got {type(raw).__name__}"
                )
            pairs.append((entry.protocol_name, raw))
        return pairs

    def field_pairs(self, record: Any) -> list[tuple[str, Value]]:
        return [
            (entry.protocol_name, entry.convert(getattr(record, entry.attribute)))  # type: ignore[misc]
            for entry in self.fields
        ]

    def record_timestamp(self, record: Any) -> Timestamp:
        return Timestamp.of(getattr(record, self.timestamp.attribute))

    def serialize(self, record: Any) -> str:
        """Render a record without its timestamp."""
        return render_line(self.measurement, self.tag_pairs(record), self.field_pairs(record))

    def serialize_with_timestamp(
        self,
        record: Any,
        timestamp: Timestamp | int | str | None = None,
    ) -> str:
        """Render a record followed by the override or its own timestamp."""
        chosen = resolve_timestamp(timestamp, self.record_timestamp(record))
        return f"{self.serialize(record)} {chosen.encode()}"
