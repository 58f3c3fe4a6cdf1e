"""Schema registry and the @point decorator.

Usage:
    @point("mem")
    @dataclass
    class Memory:
        host: Annotated[str, Tag()]
        used_percent: Annotated[float, Field()]
        at: Annotated[Timestamp, TimestampField()]

    Memory("host1", 23.43234543, Timestamp(1556896326)).serialize_with_timestamp()
    # 'mem,host=host1 used_percent=23.43234543 1556896326'

Pydantic models work the same way; the decorator only needs the member
annotations.
"""

from __future__ import annotations

import dataclasses
import logging
import typing
from collections.abc import Callable, Iterator
from typing import Annotated, Any, overload

from influxline.core.errors import ConfigurationError
from influxline.core.point import Point
from influxline.core.value import (
    NATIVE_VALUE_TYPES,
    VALUE_TYPES,
    Boolean,
    Float,
    Integer,
    String,
    Timestamp,
    Value,
    to_value,
)
from influxline.schema.models import PointSchema, Role, RoleMarker, SchemaEntry

LOG = logging.getLogger(__name__)

# Declared member type -> builder of the field Value. NATIVE_VALUE_TYPES
# lists bool before int since bool subclasses int.
_NATIVE_CONVERTERS: tuple[tuple[type, Callable[[Any], Value]], ...] = tuple(
    zip(NATIVE_VALUE_TYPES, (String, Boolean, Integer, Float), strict=True)
)


def _is_pydantic(cls: type) -> bool:
    """Check if class is a Pydantic model without importing pydantic."""
    for base in cls.__mro__:
        if base.__module__.startswith("pydantic") and base.__name__ == "BaseModel":
            return True
    return False


def _split_annotated(hint: Any) -> tuple[Any, tuple[Any, ...]]:
    if typing.get_origin(hint) is Annotated:
        base, *metadata = typing.get_args(hint)
        return base, tuple(metadata)
    return hint, ()


def _iter_members(cls: type) -> Iterator[tuple[str, Any, tuple[Any, ...]]]:
    """Yield (name, declared type, annotation metadata) in declaration order."""
    if _is_pydantic(cls):
        for name, info in cls.model_fields.items():  # type: ignore[attr-defined]
            yield name, info.annotation, tuple(info.metadata)
        return

    try:
        hints = typing.get_type_hints(cls, include_extras=True)
    except (NameError, TypeError) as e:
        raise ConfigurationError(f"Cannot resolve annotations of {cls.__name__}: {e}") from e

    for f in dataclasses.fields(cls):
        base, metadata = _split_annotated(hints.get(f.name, f.type))
        yield f.name, base, metadata


def _field_converter(owner: str, attribute: str, declared: Any) -> Callable[[Any], Value]:
    if declared is Value:
        return to_value
    if isinstance(declared, type):
        if issubclass(declared, VALUE_TYPES):
            return to_value
        for native, convert in _NATIVE_CONVERTERS:
            if issubclass(declared, native):
                return convert
    raise ConfigurationError(
        f"{owner}.{attribute}: field type {declared!r} has no line protocol encoding; "
        f"use str, bool, int, float or a Value variant"
    )


def _protocol_name(owner: str, attribute: str, marker: RoleMarker) -> str:
    if marker.name is None:
        return attribute
    if not isinstance(marker.name, str):
        raise ConfigurationError(
            f"{owner}.{attribute}: {type(marker).__name__} name must be a string, "
            f"got {type(marker.name).__name__}"
        )
    return marker.name


def build_schema(cls: type, measurement: str) -> PointSchema:
    """Validate role annotations and build the serialization plan for a type.

    Args:
        cls: Dataclass or Pydantic model with Annotated role markers.
        measurement: Measurement name written for every record.

    Returns:
        Immutable schema for cls.

    Raises:
        ConfigurationError: If cls is not a dataclass or Pydantic model, the
            measurement is not text, a member has more than one role, a role
            name is not text, a tag is not str, a field type is not encodable,
            the timestamp member is not a Timestamp, or the timestamp or field
            role is missing.
    """
    owner = cls.__name__
    if not (dataclasses.is_dataclass(cls) or _is_pydantic(cls)):
        raise ConfigurationError(
            f"Point type {owner} must be a dataclass or Pydantic model. "
            f"Did you forget @dataclass decorator?"
        )
    if not isinstance(measurement, str):
        raise ConfigurationError(
            f"Measurement of {owner} must be a string, got {type(measurement).__name__}"
        )

    tags: list[SchemaEntry] = []
    fields: list[SchemaEntry] = []
    timestamps: list[SchemaEntry] = []

    for attribute, declared, metadata in _iter_members(cls):
        markers = [m for m in metadata if isinstance(m, RoleMarker)]
        if not markers:
            continue
        if len(markers) > 1:
            raise ConfigurationError(f"{owner}.{attribute} carries more than one role marker")
        marker = markers[0]
        name = _protocol_name(owner, attribute, marker)

        if marker.role is Role.TAG:
            if not (isinstance(declared, type) and issubclass(declared, str)):
                raise ConfigurationError(
                    f"{owner}.{attribute}: tag values are text, declare it as str"
                )
            tags.append(SchemaEntry(attribute, Role.TAG, name))
        elif marker.role is Role.FIELD:
            convert = _field_converter(owner, attribute, declared)
            fields.append(SchemaEntry(attribute, Role.FIELD, name, convert))
        else:
            if not (isinstance(declared, type) and issubclass(declared, Timestamp)):
                raise ConfigurationError(
                    f"{owner}.{attribute}: timestamp member must be declared as Timestamp, "
                    f"got {declared!r}"
                )
            timestamps.append(SchemaEntry(attribute, Role.TIMESTAMP, name))

    if not timestamps:
        raise ConfigurationError(f"{owner} has no member marked TimestampField()")
    if len(timestamps) > 1:
        names = ", ".join(e.attribute for e in timestamps)
        raise ConfigurationError(f"{owner} has more than one timestamp member: {names}")
    if not fields:
        raise ConfigurationError(f"{owner} has no member marked Field(); at least one is required")

    return PointSchema(
        type_name=f"{cls.__module__}.{cls.__qualname__}",
        measurement=measurement,
        tags=tuple(tags),
        fields=tuple(fields),
        timestamp=timestamps[0],
    )


class SchemaRegistry:
    """Process-local registry mapping record types to their point schemas.

    Schemas are built once and never change afterwards, so lookups need no
    locking.
    """

    def __init__(self) -> None:
        """Initialize empty schema registry."""
        self._by_type: dict[type, PointSchema] = {}

    def register(self, cls: type, measurement: str) -> PointSchema:
        """Build, validate and cache the schema for a record type.

        Registering the same type again with the same measurement returns
        the cached schema.

        Args:
            cls: Record type to register.
            measurement: Measurement name for its lines.

        Returns:
            The type's schema.

        Raises:
            ConfigurationError: If the type's annotations are invalid, or if
                it is already registered under another measurement.
        """
        existing = self._by_type.get(cls)
        if existing is not None:
            if existing.measurement != measurement:
                raise ConfigurationError(
                    f"{cls.__name__} already registered with measurement "
                    f"{existing.measurement!r}, not {measurement!r}"
                )
            return existing

        schema = build_schema(cls, measurement)
        self._by_type[cls] = schema
        LOG.debug(
            f"Registered point schema {schema.type_name} -> {measurement!r} "
            f"({len(schema.tags)} tags, {len(schema.fields)} fields)"
        )
        return schema

    def get_schema(self, cls: type) -> PointSchema | None:
        """Get the schema of a registered type, or None."""
        return self._by_type.get(cls)

    def is_registered(self, cls: type) -> bool:
        return cls in self._by_type

    def __len__(self) -> int:
        return len(self._by_type)


# Module-level registry instance
_registry = SchemaRegistry()


def get_registry() -> SchemaRegistry:
    """Access the global schema registry."""
    return _registry


def _serialize(self: Any) -> str:
    return type(self).__point_schema__.serialize(self)


def _serialize_with_timestamp(self: Any, timestamp: Timestamp | int | str | None = None) -> str:
    return type(self).__point_schema__.serialize_with_timestamp(self, timestamp)


def _to_point(self: Any) -> Point:
    schema: PointSchema = type(self).__point_schema__
    return Point(
        measurement=schema.measurement,
        tags=schema.tag_pairs(self),
        fields=schema.field_pairs(self),
        time=schema.record_timestamp(self),
    )


@overload
def point(measurement: str) -> Callable[[type], type]: ...


@overload
def point(*, measurement: str, registry: SchemaRegistry | None = None) -> Callable[[type], type]: ...


def point(
    measurement: str | None = None,
    *,
    registry: SchemaRegistry | None = None,
) -> Callable[[type], type]:
    """Register a dataclass or Pydantic model as a line protocol point type.

    The class gains serialize(), serialize_with_timestamp() and to_point(),
    making its instances PointSerialize.

    Args:
        measurement: Measurement name for every record of the type.
        registry: Registry to use instead of the global one.

    Returns:
        Class decorator.

    Raises:
        ConfigurationError: If the class annotations are invalid.

    Note:
        Apply @point AFTER @dataclass:

        >>> @point("cpu")
        ... @dataclass
        ... class Cpu:
        ...     usage: Annotated[float, Field()]
        ...     at: Annotated[Timestamp, TimestampField()]
    """
    if isinstance(measurement, type):
        raise ConfigurationError(
            f"@point on {measurement.__name__} needs a measurement name: @point(\"name\")"
        )
    target = registry if registry is not None else _registry

    def decorator(cls: type) -> type:
        schema = target.register(cls, measurement)  # type: ignore[arg-type]
        cls.__point_schema__ = schema  # type: ignore[attr-defined]
        cls.serialize = _serialize  # type: ignore[attr-defined]
        cls.serialize_with_timestamp = _serialize_with_timestamp  # type: ignore[attr-defined]
        cls.to_point = _to_point  # type: ignore[attr-defined]
        return cls

    return decorator
