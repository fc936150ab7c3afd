"""Telemetry sink adapters implementing the core port."""

from perfevents.adapters.sinks.in_memory import (
    AsyncInMemoryTelemetrySink,
    InMemoryTelemetrySink,
)
from perfevents.adapters.sinks.logging import LoggingTelemetrySink
from perfevents.adapters.sinks.ring_buffer import RingBufferTelemetrySink

__all__ = [
    "AsyncInMemoryTelemetrySink",
    "InMemoryTelemetrySink",
    "LoggingTelemetrySink",
    "RingBufferTelemetrySink",
]
