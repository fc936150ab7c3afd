"""Port interface for telemetry sinks.

The dispatcher depends only on this protocol. Any process-wide telemetry
client can be wrapped to satisfy it and then injected.
"""

from collections.abc import Awaitable, Mapping
from typing import Protocol, runtime_checkable


@runtime_checkable
class TelemetrySinkPort(Protocol):
    """Port for receiving encoded performance events.

    Adapters implementing this protocol accept the two-key payload.
    Examples: InMemoryTelemetrySink, RingBufferTelemetrySink,
    LoggingTelemetrySink.
    """

    def on_performance_event(
        self, payload: Mapping[str, str]
    ) -> None | Awaitable[None]:
        """Receive one performance event.

        Args:
            payload: Map with exactly the keys "attributes" and "counters",
                each holding a JSON-encoded attribute list.

        An implementation may be a coroutine function. Outcomes are not
        inspected by the caller.
        """
        ...
