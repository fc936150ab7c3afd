"""Ring buffer telemetry sink.

Provides bounded in-memory recording that automatically evicts the oldest
payloads when the buffer is full. Useful for long-running processes that
keep the most recent events for inspection.
"""

from collections import deque
from collections.abc import Mapping

from perfevents.core.encoding.ndjson import encode_payloads
from perfevents.core.encoding.payload import decode_payload
from perfevents.core.models import PerformanceEvent


class RingBufferTelemetrySink:
    """Ring buffer implementation of TelemetrySinkPort.

    Stores payloads in a fixed-size circular buffer. When the buffer is
    full, the oldest payload is evicted to make room for the new one.

    Args:
        max_size: Maximum number of payloads to keep.
    """

    def __init__(self, max_size: int) -> None:
        if max_size < 1:
            raise ValueError(f"max_size must be at least 1, got {max_size}")
        self._buffer: deque[dict[str, str]] = deque(maxlen=max_size)

    def on_performance_event(self, payload: Mapping[str, str]) -> None:
        """Record a copy of the payload, evicting the oldest if full."""
        self._buffer.append(dict(payload))

    @property
    def payloads(self) -> list[dict[str, str]]:
        """Retained payloads, oldest first."""
        return list(self._buffer)

    def events(self) -> list[PerformanceEvent]:
        """Decode the retained payloads."""
        return [decode_payload(p) for p in self._buffer]

    def export(self) -> str:
        """Return the retained payloads as NDJSON."""
        return encode_payloads(self._buffer)

    def clear(self) -> None:
        self._buffer.clear()
