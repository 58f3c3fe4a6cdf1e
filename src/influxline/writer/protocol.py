"""Transport protocol: the boundary where batches leave the codec.

HTTP delivery (URL, auth header, bucket/org parameters, compression,
retries, status mapping) belongs to the transport implementation, not here.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from influxline.writer.models import WriteBatch


@runtime_checkable
class Transport(Protocol):
    """Protocol for delivering a serialized batch.

    Usage:
        class HttpTransport:
            def send(self, batch: WriteBatch) -> None:
                requests.post(url, params={"precision": batch.precision.value}, data=batch.body)

    Implementations raise their own errors; LineWriter does not catch them.
    """

    def send(self, batch: WriteBatch) -> None:
        """Deliver one batch.

        Args:
            batch: Payload and precision to write.
        """
        ...
