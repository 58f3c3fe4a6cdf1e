"""Writer models: write precision and the batch handed to a transport."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Precision(StrEnum):
    """Unit of integer timestamps, sent as the ``precision`` query parameter.

    Carried alongside the payload only; the codec never rescales timestamps.
    """

    NS = "ns"
    US = "us"
    MS = "ms"
    S = "s"


@dataclass(slots=True, frozen=True)
class WriteBatch:
    """One write request payload.

    Attributes:
        body: Newline-joined line protocol text.
        precision: Unit the transport must declare for integer timestamps.
        line_count: Number of points rendered into body.
    """

    body: str
    precision: Precision
    line_count: int

    def is_empty(self) -> bool:
        return self.line_count == 0
