"""Telemetry sink that writes performance events to Python logging.

This adapter bridges the sink port to the standard library logging
module, so events show up wherever the application's handlers send logs.
"""

import logging
from collections.abc import Mapping

from perfevents.core.models import ATTRIBUTES_KEY, COUNTERS_KEY

_DEFAULT_LOGGER_NAME = "perfevents.events"


class LoggingTelemetrySink:
    """Sink that emits one log record per performance event.

    The encoded lists are attached to the record as the extra fields
    ``perf_attributes`` and ``perf_counters``.

    Example:
        ```python
        import logging
        from perfevents import LoggingTelemetrySink, PerformanceEventDispatcher

        logging.basicConfig(level=logging.INFO)
        dispatcher = PerformanceEventDispatcher(LoggingTelemetrySink())
        ```
    """

    def __init__(
        self,
        logger: logging.Logger | None = None,
        level: int = logging.INFO,
    ) -> None:
        """Initialize the sink.

        Args:
            logger: Target logger. Defaults to the "perfevents.events" logger.
            level: Level for event records (default: logging.INFO).
        """
        self._logger = logger or logging.getLogger(_DEFAULT_LOGGER_NAME)
        self._level = level

    def on_performance_event(self, payload: Mapping[str, str]) -> None:
        """Log the payload.

        Args:
            payload: Map with the "attributes" and "counters" keys.
        """
        self._logger.log(
            self._level,
            "performance event attributes=%s counters=%s",
            payload[ATTRIBUTES_KEY],
            payload[COUNTERS_KEY],
            extra={
                "perf_attributes": payload[ATTRIBUTES_KEY],
                "perf_counters": payload[COUNTERS_KEY],
            },
        )
