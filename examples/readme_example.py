from dataclasses import dataclass
from enum import Enum
from typing import Annotated

from influxline import (
    Field,
    InMemoryTransport,
    LineWriter,
    Point,
    Precision,
    Tag,
    Timestamp,
    TimestampField,
    TimestampOptions,
    UInteger,
    point,
)


class Side(Enum):
    BUY = "buy"
    SELL = "sell"


@point("trades")
@dataclass
class Trade:
    """A fill reported by the exchange."""

    ticker: Annotated[str, Tag()]
    side: Annotated[str, Tag()]
    price: Annotated[float, Field()]
    quantity: Annotated[UInteger, Field("qty")]
    at: Annotated[Timestamp, TimestampField()]


def main() -> None:
    transport = InMemoryTransport()
    writer = LineWriter(transport, precision=Precision.S)

    trades = [
        Trade("GME", Side.BUY.value, 420.69, UInteger(10), Timestamp(1613925577)),
        Trade("GME", Side.SELL.value, 421.5, UInteger(4), Timestamp(1613925580)),
    ]
    heartbeat = Point("feed status").tag("venue", "NYSE Arca").field("up", True)

    # Records carry their own timestamps; the heartbeat falls back to 0
    writer.write([*trades, heartbeat])

    # Let the server assign write time instead
    writer.write([heartbeat], TimestampOptions.none())

    for batch in transport.batches:
        print(f"--- {batch.line_count} line(s), precision={batch.precision.value}")
        print(batch.body)


if __name__ == "__main__":
    main()
