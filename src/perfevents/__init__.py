"""perfevents: encode and dispatch performance events to a telemetry sink."""

from perfevents.adapters.sinks import (
    AsyncInMemoryTelemetrySink,
    InMemoryTelemetrySink,
    LoggingTelemetrySink,
    RingBufferTelemetrySink,
)
from perfevents.core.attributes import FrameTimer, attribute, counter, timed_frames
from perfevents.core.dispatcher import PerformanceEventDispatcher
from perfevents.core.encoding import (
    decode_attributes,
    decode_payload,
    encode_attributes,
    encode_payload,
    encode_payloads,
)
from perfevents.core.exceptions import (
    AttributeValidationError,
    PayloadDecodeError,
    PerfEventsError,
)
from perfevents.core.models import (
    ATTRIBUTES_KEY,
    COUNTERS_KEY,
    Attribute,
    PerformanceEvent,
)
from perfevents.core.ports import TelemetrySinkPort

__all__ = [
    "ATTRIBUTES_KEY",
    "COUNTERS_KEY",
    "AsyncInMemoryTelemetrySink",
    "Attribute",
    "AttributeValidationError",
    "FrameTimer",
    "InMemoryTelemetrySink",
    "LoggingTelemetrySink",
    "PayloadDecodeError",
    "PerfEventsError",
    "PerformanceEvent",
    "PerformanceEventDispatcher",
    "RingBufferTelemetrySink",
    "TelemetrySinkPort",
    "attribute",
    "counter",
    "decode_attributes",
    "decode_payload",
    "encode_attributes",
    "encode_payload",
    "encode_payloads",
    "timed_frames",
]
