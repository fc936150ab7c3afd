"""In-memory telemetry sinks that record payloads."""

from collections.abc import Mapping

from perfevents.core.encoding.ndjson import encode_payloads
from perfevents.core.encoding.payload import decode_payload
from perfevents.core.models import PerformanceEvent


class InMemoryTelemetrySink:
    """In-memory implementation of TelemetrySinkPort.

    Stores every payload it receives in a list. Suitable for testing and
    for local inspection of what would have been sent.
    """

    def __init__(self) -> None:
        self._payloads: list[dict[str, str]] = []

    def on_performance_event(self, payload: Mapping[str, str]) -> None:
        """Record a copy of the payload."""
        self._payloads.append(dict(payload))

    @property
    def payloads(self) -> list[dict[str, str]]:
        """Recorded payloads, oldest first."""
        return list(self._payloads)

    def events(self) -> list[PerformanceEvent]:
        """Decode the recorded payloads."""
        return [decode_payload(p) for p in self._payloads]

    def export(self) -> str:
        """Return the recorded payloads as NDJSON."""
        return encode_payloads(self._payloads)

    def clear(self) -> None:
        self._payloads.clear()


class AsyncInMemoryTelemetrySink(InMemoryTelemetrySink):
    """Async variant of InMemoryTelemetrySink.

    on_performance_event is a coroutine, for clients whose delivery API
    is async.
    """

    async def on_performance_event(  # type: ignore[override]
        self, payload: Mapping[str, str]
    ) -> None:
        """Record a copy of the payload."""
        self._payloads.append(dict(payload))
