"""Dispatcher that encodes performance events and hands them to a sink."""

import asyncio
import inspect
import logging
from collections.abc import Awaitable, Iterable
from typing import Any

from perfevents.core.encoding.payload import encode_payload
from perfevents.core.models import Attribute, Number, PerformanceEvent
from perfevents.core.ports import TelemetrySinkPort

_default_logger = logging.getLogger(__name__)


async def _wait_for(awaitable: Awaitable[Any]) -> None:
    await awaitable


class PerformanceEventDispatcher:
    """Forward performance events to an injected telemetry sink.

    Delivery is fire-and-forget. Invalid input raises before the sink is
    called; failures inside the sink are logged and dropped unless
    propagate_errors is enabled.

    Example:
        ```python
        from perfevents import (
            InMemoryTelemetrySink,
            PerformanceEventDispatcher,
            attribute,
            counter,
        )

        sink = InMemoryTelemetrySink()
        dispatcher = PerformanceEventDispatcher(sink)
        dispatcher.dispatch(
            attributes=[attribute("style_id", "mapbox://styles/mapbox/streets-v10")],
            counters=[counter("frames", 362)],
        )
        ```
    """

    def __init__(
        self,
        sink: TelemetrySinkPort,
        *,
        propagate_errors: bool = False,
        logger: logging.Logger | None = None,
    ) -> None:
        """Initialize the dispatcher with a sink.

        Args:
            sink: Adapter implementing TelemetrySinkPort.
            propagate_errors: Re-raise exceptions from a synchronous sink
                instead of logging them (default: False).
            logger: Logger for dispatch diagnostics (default: module logger).
        """
        self.sink = sink
        self.propagate_errors = propagate_errors
        self._logger = logger or _default_logger
        self._pending: set[asyncio.Future[None]] = set()

    def set_propagate_errors(self, enabled: bool) -> None:
        """Set whether sink failures are re-raised.

        Args:
            enabled: True to re-raise, False to log and drop. Failures of
                sinks scheduled on a running event loop are always logged.
        """
        self.propagate_errors = enabled

    def dispatch(
        self,
        attributes: Iterable[Attribute[str]] = (),
        counters: Iterable[Attribute[Number]] = (),
    ) -> None:
        """Validate, encode and send one performance event.

        Args:
            attributes: Attributes with string values.
            counters: Attributes with int or float values.

        Raises:
            AttributeValidationError: If either list is malformed.
        """
        event = PerformanceEvent(attributes=tuple(attributes), counters=tuple(counters))
        self.send(event)

    def send(self, event: PerformanceEvent) -> None:
        """Encode a prebuilt event and make exactly one call to the sink."""
        payload = encode_payload(event)
        self._logger.debug(
            "dispatching performance event",
            extra={
                "attribute_count": len(event.attributes),
                "counter_count": len(event.counters),
            },
        )
        try:
            result = self.sink.on_performance_event(payload)
            if inspect.isawaitable(result):
                self._complete(result)
        except Exception:
            if self.propagate_errors:
                raise
            self._logger.warning(
                "telemetry sink failed to accept performance event", exc_info=True
            )

    def _complete(self, awaitable: Awaitable[Any]) -> None:
        """Run an async sink's awaitable without blocking a running loop."""
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            asyncio.run(_wait_for(awaitable))
            return

        task = loop.create_task(_wait_for(awaitable))
        # hold a reference until done, the loop only keeps weak ones
        self._pending.add(task)
        task.add_done_callback(self._on_task_done)

    def _on_task_done(self, task: "asyncio.Future[None]") -> None:
        self._pending.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            self._logger.warning(
                "telemetry sink failed to accept performance event", exc_info=exc
            )

    @property
    def pending(self) -> int:
        """Number of async sink calls still running on the event loop."""
        return len(self._pending)
