"""Batch writing and the transport boundary."""

from influxline.writer.core import LineWriter
from influxline.writer.local import InMemoryTransport, StdoutTransport
from influxline.writer.models import Precision, WriteBatch
from influxline.writer.protocol import Transport

__all__ = [
    "LineWriter",
    "Precision",
    "WriteBatch",
    "Transport",
    "StdoutTransport",
    "InMemoryTransport",
]
