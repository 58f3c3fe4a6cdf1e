"""Tests for schema-mapped point types."""

import logging
from dataclasses import dataclass
from typing import Annotated

import pytest
from pydantic import BaseModel, ConfigDict

from influxline import (
    ConfigurationError,
    Field,
    Point,
    PointSerialize,
    SchemaRegistry,
    Tag,
    Timestamp,
    TimestampField,
    TimestampOptions,
    UInteger,
    point,
    serialize_lines,
)
from influxline.schema import Role, build_schema


@pytest.fixture
def registry():
    """Create a SchemaRegistry for testing."""
    return SchemaRegistry()


@point("test")
@dataclass
class Trade:
    ticker: Annotated[str, Tag("notTicker")]
    ticker2: Annotated[str, Tag("notTicker2")]
    price: Annotated[float, Field("notPrice")]
    price2: Annotated[str, Field()]
    data: Annotated[Timestamp, TimestampField()]
    temp: str | None = None


def _trade() -> Trade:
    return Trade(
        ticker="GME",
        ticker2="!GME",
        price=0.32,
        price2="Hello world",
        data=Timestamp("321321321"),
    )


def test_serialize_record():
    expected = 'test,notTicker=GME,notTicker2=!GME notPrice=0.32,price2="Hello world"'
    assert _trade().serialize() == expected


def test_serialize_record_with_own_timestamp():
    expected = 'test,notTicker=GME,notTicker2=!GME notPrice=0.32,price2="Hello world" 321321321'
    assert _trade().serialize_with_timestamp(None) == expected


def test_override_wins_over_record_timestamp():
    expected = 'test,notTicker=GME,notTicker2=!GME notPrice=0.32,price2="Hello world" 420'
    assert _trade().serialize_with_timestamp(Timestamp(420)) == expected


def test_record_matches_equivalent_point():
    record = _trade()
    converted = record.to_point()

    assert isinstance(converted, Point)
    assert converted.tags == [("notTicker", "GME"), ("notTicker2", "!GME")]
    assert converted.time == Timestamp("321321321")
    assert converted.serialize_with_timestamp() == record.serialize_with_timestamp()


def test_record_is_point_serialize():
    assert isinstance(_trade(), PointSerialize)


def test_unmarked_members_are_ignored():
    record = _trade()
    record.temp = "ignored"
    assert "ignored" not in record.serialize_with_timestamp()


def test_record_without_tags_has_no_dangling_comma():
    @point("cpu")
    @dataclass
    class Cpu:
        load: Annotated[float, Field()]
        at: Annotated[Timestamp, TimestampField()]

    assert Cpu(0.5, Timestamp(1)).serialize() == "cpu load=0.5"
    assert Cpu(0.5, Timestamp(1)).serialize_with_timestamp() == "cpu load=0.5 1"


def test_tags_render_before_fields_in_declaration_order():
    @point("m")
    @dataclass
    class Mixed:
        f1: Annotated[int, Field()]
        t1: Annotated[str, Tag()]
        f2: Annotated[bool, Field()]
        at: Annotated[Timestamp, TimestampField()]
        t2: Annotated[str, Tag()]

    record = Mixed(f1=1, t1="a", f2=True, at=Timestamp(9), t2="b")
    assert record.serialize() == "m,t1=a,t2=b f1=1i,f2=true"


def test_field_values_follow_declared_type():
    @point("m")
    @dataclass
    class Typed:
        ratio: Annotated[float, Field()]
        count: Annotated[UInteger, Field()]
        at: Annotated[Timestamp, TimestampField()]

    # 3 is an int at runtime but declared float, so it keeps float encoding
    assert Typed(3, UInteger(4), Timestamp(1)).serialize() == "m ratio=3.0,count=4u"


def test_record_values_are_escaped():
    @point("my measurement")
    @dataclass
    class Escaped:
        host: Annotated[str, Tag("host name")]
        msg: Annotated[str, Field()]
        at: Annotated[Timestamp, TimestampField()]

    record = Escaped("a,b", 'say "hi"', Timestamp(1))
    assert record.serialize() == r'my\ measurement,host\ name=a\,b msg="say \"hi\""'


def test_records_in_batch():
    points = [_trade(), Point("cpu").field("load", 0.5)]
    body = serialize_lines(points, TimestampOptions.use(7))
    assert body.split("\n") == [
        'test,notTicker=GME,notTicker2=!GME notPrice=0.32,price2="Hello world" 7',
        "cpu load=0.5 7",
    ]


def test_pydantic_record():
    @point("sensor")
    class Reading(BaseModel):
        model_config = ConfigDict(arbitrary_types_allowed=True)

        room: Annotated[str, Tag()]
        celsius: Annotated[float, Field("temp")]
        at: Annotated[Timestamp, TimestampField()]

    reading = Reading(room="lab", celsius=21.5, at=Timestamp(1613925577))
    assert reading.serialize_with_timestamp() == "sensor,room=lab temp=21.5 1613925577"


def test_schema_entries(registry):
    schema = registry.register(Trade, "test")

    assert schema.measurement == "test"
    assert [(e.attribute, e.protocol_name) for e in schema.tags] == [
        ("ticker", "notTicker"),
        ("ticker2", "notTicker2"),
    ]
    assert [e.protocol_name for e in schema.fields] == ["notPrice", "price2"]
    assert schema.timestamp.role is Role.TIMESTAMP


def test_register_twice_returns_cached_schema(registry):
    first = registry.register(Trade, "test")
    assert registry.register(Trade, "test") is first
    assert registry.get_schema(Trade) is first
    assert len(registry) == 1


def test_register_under_other_measurement_fails(registry):
    registry.register(Trade, "test")
    with pytest.raises(ConfigurationError, match="already registered"):
        registry.register(Trade, "other")


def test_decorator_with_private_registry(registry):
    @point(measurement="private", registry=registry)
    @dataclass
    class Private:
        v: Annotated[int, Field()]
        at: Annotated[Timestamp, TimestampField()]

    assert registry.is_registered(Private)
    assert Private.__point_schema__ is registry.get_schema(Private)


def test_missing_timestamp_role():
    @dataclass
    class NoTime:
        v: Annotated[int, Field()]

    with pytest.raises(ConfigurationError, match="TimestampField"):
        build_schema(NoTime, "m")


def test_missing_field_role():
    @dataclass
    class NoFields:
        host: Annotated[str, Tag()]
        at: Annotated[Timestamp, TimestampField()]

    with pytest.raises(ConfigurationError, match="Field"):
        build_schema(NoFields, "m")


def test_timestamp_member_must_be_timestamp():
    @dataclass
    class IntTime:
        v: Annotated[int, Field()]
        at: Annotated[int, TimestampField()]

    with pytest.raises(ConfigurationError, match="must be declared as Timestamp"):
        build_schema(IntTime, "m")


def test_role_name_must_be_text():
    @dataclass
    class BadName:
        v: Annotated[int, Field(42)]
        at: Annotated[Timestamp, TimestampField()]

    with pytest.raises(ConfigurationError, match="name must be a string"):
        build_schema(BadName, "m")


def test_more_than_one_timestamp():
    @dataclass
    class TwoTimes:
        v: Annotated[int, Field()]
        a: Annotated[Timestamp, TimestampField()]
        b: Annotated[Timestamp, TimestampField()]

    with pytest.raises(ConfigurationError, match="more than one timestamp"):
        build_schema(TwoTimes, "m")


def test_more_than_one_role_on_a_member():
    @dataclass
    class Both:
        v: Annotated[str, Tag(), Field()]
        at: Annotated[Timestamp, TimestampField()]

    with pytest.raises(ConfigurationError, match="more than one role"):
        build_schema(Both, "m")


def test_tag_must_be_str():
    @dataclass
    class IntTag:
        host: Annotated[int, Tag()]
        v: Annotated[int, Field()]
        at: Annotated[Timestamp, TimestampField()]

    with pytest.raises(ConfigurationError, match="tag values are text"):
        build_schema(IntTag, "m")


def test_field_type_must_be_encodable():
    @dataclass
    class ListField:
        v: Annotated[list, Field()]
        at: Annotated[Timestamp, TimestampField()]

    with pytest.raises(ConfigurationError, match="no line protocol encoding"):
        build_schema(ListField, "m")


def test_measurement_must_be_text():
    @dataclass
    class Ok:
        v: Annotated[int, Field()]
        at: Annotated[Timestamp, TimestampField()]

    with pytest.raises(ConfigurationError, match="Measurement"):
        build_schema(Ok, 5)  # type: ignore[arg-type]


def test_requires_dataclass_or_pydantic():
    class Plain:
        v: Annotated[int, Field()]

    with pytest.raises(ConfigurationError, match="must be a dataclass"):
        point("m")(Plain)


def test_bare_decorator_is_rejected():
    with pytest.raises(ConfigurationError, match="needs a measurement name"):

        @point  # type: ignore[arg-type]
        @dataclass
        class Bare:
            v: Annotated[int, Field()]
            at: Annotated[Timestamp, TimestampField()]


def test_failed_registration_leaves_registry_untouched(registry):
    @dataclass
    class NoTime:
        v: Annotated[int, Field()]

    with pytest.raises(ConfigurationError):
        registry.register(NoTime, "m")
    assert not registry.is_registered(NoTime)


def test_non_text_tag_value_raises():
    record = _trade()
    record.ticker = None  # type: ignore[assignment]

    with pytest.raises(TypeError, match="Trade.ticker: tag value must be a str"):
        record.serialize()


def test_registration_is_logged(registry, caplog):
    with caplog.at_level(logging.DEBUG, logger="influxline.schema.core"):
        registry.register(Trade, "test")

    assert "Registered point schema" in caplog.text
    assert "'test' (2 tags, 2 fields)" in caplog.text
