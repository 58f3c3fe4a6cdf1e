"""Local transports that never leave the process."""

from __future__ import annotations

import sys
from typing import TextIO

from influxline.writer.models import WriteBatch


class StdoutTransport:
    """Print each batch body instead of sending it. Useful for debugging."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def send(self, batch: WriteBatch) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        print(batch.body, file=stream)


class InMemoryTransport:
    """Keep every batch in a list, in send order."""

    def __init__(self) -> None:
        self.batches: list[WriteBatch] = []

    def send(self, batch: WriteBatch) -> None:
        self.batches.append(batch)

    @property
    def lines(self) -> list[str]:
        """All non-empty lines sent so far, flattened."""
        return [line for b in self.batches if b.body for line in b.body.split("\n")]

    def clear(self) -> None:
        self.batches.clear()
