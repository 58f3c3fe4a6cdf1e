"""Batch writer: serialize points and hand the payload to a transport.

Usage:
    transport = InMemoryTransport()
    writer = LineWriter(transport, precision=Precision.S)
    writer.write([Point("mem").field("used", 1.5).timestamp(1613925577)])
    transport.batches[0].body  # 'mem used=1.5 1613925577'
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from influxline.core.point import Point, PointSerialize, TimestampOptions, serialize_lines
from influxline.writer.local import StdoutTransport
from influxline.writer.models import Precision, WriteBatch
from influxline.writer.protocol import Transport

if TYPE_CHECKING:
    from influxline.config.settings import WriterSettings

LOG = logging.getLogger(__name__)


class LineWriter:
    """Serializes batches of points with a fixed precision and policy.

    Args:
        transport: Destination for each batch.
        precision: Timestamp unit declared with every batch.
        options: Default timestamp policy. Defaults to FROM_POINT.
        strict: Reject field-less points instead of emitting them.
    """

    def __init__(
        self,
        transport: Transport,
        precision: Precision = Precision.NS,
        options: TimestampOptions | None = None,
        strict: bool = False,
    ) -> None:
        self.transport = transport
        self.precision = precision
        self.options = options if options is not None else TimestampOptions.from_point()
        self.strict = strict

    @classmethod
    def from_settings(
        cls,
        settings: WriterSettings,
        transport: Transport | None = None,
    ) -> LineWriter:
        """Create a writer from settings.

        Falls back to StdoutTransport when insert_to_stdout is set or no
        transport is given.
        """
        if settings.insert_to_stdout or transport is None:
            transport = StdoutTransport()
        return cls(
            transport,
            precision=settings.precision,
            options=settings.timestamp_options(),
            strict=settings.strict,
        )

    def build(
        self,
        points: Iterable[PointSerialize],
        options: TimestampOptions | None = None,
    ) -> WriteBatch:
        """Serialize points into a batch without sending it.

        Args:
            points: Points or registered records, in output order.
            options: Per-call timestamp policy overriding the writer default.

        Returns:
            The batch payload.

        Raises:
            PointValidationError: In strict mode, if a point has no fields.
        """
        points = list(points)
        if not self.strict and any(isinstance(p, Point) and not p.fields for p in points):
            LOG.warning("Batch contains points without fields; the server will reject those lines")
        body = serialize_lines(points, options or self.options, strict=self.strict)
        return WriteBatch(body=body, precision=self.precision, line_count=len(points))

    def write(
        self,
        points: Iterable[PointSerialize],
        options: TimestampOptions | None = None,
    ) -> WriteBatch:
        """Serialize points and send the batch through the transport.

        Returns:
            The batch that was sent.
        """
        batch = self.build(points, options)
        LOG.debug(
            f"Writing {batch.line_count} lines ({len(batch.body.encode())} bytes, "
            f"precision={batch.precision.value})"
        )
        self.transport.send(batch)
        return batch
