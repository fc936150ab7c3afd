"""Shared test fixtures for all test modules."""

import pytest

from perfevents.adapters.sinks.in_memory import InMemoryTelemetrySink
from perfevents.core.dispatcher import PerformanceEventDispatcher
from perfevents.core.models import Attribute

STYLE_ID = "mapbox://styles/mapbox/streets-v10"
FPS_AVERAGE = 90.7655486547093
FRAMES = 362


@pytest.fixture
def style_attributes() -> list[Attribute[str]]:
    """The single style_id attribute from a map rendering run."""
    return [Attribute("style_id", STYLE_ID)]


@pytest.fixture
def frame_counters() -> list[Attribute[int | float]]:
    """fps_average and frames counters from a map rendering run."""
    return [Attribute("fps_average", FPS_AVERAGE), Attribute("frames", FRAMES)]


@pytest.fixture
def sink() -> InMemoryTelemetrySink:
    """Fixture providing an empty recording sink."""
    return InMemoryTelemetrySink()


@pytest.fixture
def dispatcher(sink: InMemoryTelemetrySink) -> PerformanceEventDispatcher:
    """Dispatcher wired to the recording sink."""
    return PerformanceEventDispatcher(sink)


class RecordingSink:
    """Sink double that counts calls and keeps the exact payload objects."""

    def __init__(self) -> None:
        self.calls: list[object] = []

    def on_performance_event(self, payload: object) -> None:
        self.calls.append(payload)


class FailingSink:
    """Sink double whose delivery always fails."""

    def __init__(self, exc: Exception | None = None) -> None:
        self.exc = exc or RuntimeError("telemetry backend unavailable")
        self.calls = 0

    def on_performance_event(self, payload: object) -> None:
        self.calls += 1
        raise self.exc


@pytest.fixture
def recording_sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def failing_sink() -> FailingSink:
    return FailingSink()


class FakeClock:
    """Manually advanced clock for FrameTimer tests."""

    def __init__(self, start: float = 100.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()
