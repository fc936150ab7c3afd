"""Helper functions for creating attributes and frame-rate counters."""

import time
from collections.abc import Callable, Generator
from contextlib import contextmanager
from dataclasses import dataclass

from perfevents.core.models import (
    Attribute,
    Number,
    validate_attributes,
    validate_counters,
)


def attribute(name: str, value: str) -> Attribute[str]:
    """Create a text attribute.

    Args:
        name: Attribute name (e.g., "style_id")
        value: Text value

    Returns:
        Attribute with a string value

    Raises:
        AttributeValidationError: If the name is empty or value is not a str
    """
    (result,) = validate_attributes([Attribute(name, value)])
    return result


def counter(name: str, value: Number) -> Attribute[Number]:
    """Create a numeric counter.

    Args:
        name: Counter name (e.g., "fps_average")
        value: Finite int or float value

    Returns:
        Attribute with a numeric value

    Raises:
        AttributeValidationError: If the name is empty or value is not numeric
    """
    (result,) = validate_counters([Attribute(name, value)])
    return result


@dataclass
class FrameTimer:
    """Counts rendered frames over a timed run and reports fps counters.

    The run starts on start() or the first tick() and ends on stop().
    Until stopped, elapsed time is measured up to now.
    """

    clock: Callable[[], float] = time.perf_counter
    frames: int = 0
    started_at: float | None = None
    stopped_at: float | None = None

    def start(self) -> None:
        """Begin a new run, discarding any previous one."""
        self.frames = 0
        self.started_at = self.clock()
        self.stopped_at = None

    def tick(self) -> None:
        """Record that one frame was rendered."""
        if self.started_at is None:
            self.start()
        self.frames += 1

    def stop(self) -> None:
        """End the run; later reads use the stop time."""
        if self.started_at is not None and self.stopped_at is None:
            self.stopped_at = self.clock()

    @property
    def elapsed(self) -> float:
        if self.started_at is None:
            return 0.0
        end = self.stopped_at if self.stopped_at is not None else self.clock()
        return end - self.started_at

    @property
    def fps_average(self) -> float:
        """Frames per second over the run.

        0.0 with fewer than two frames or no elapsed time.
        """
        elapsed = self.elapsed
        if self.frames < 2 or elapsed <= 0:
            return 0.0
        return self.frames / elapsed

    def counters(self) -> list[Attribute[Number]]:
        """Return the fps_average and frames counters, in that order."""
        return [
            counter("fps_average", self.fps_average),
            counter("frames", self.frames),
        ]


@contextmanager
def timed_frames(
    clock: Callable[[], float] = time.perf_counter,
) -> Generator[FrameTimer, None, None]:
    """Context manager that times a rendering run.

    Args:
        clock: Monotonic clock in seconds (default: time.perf_counter)

    Yields:
        FrameTimer started on entry and stopped on exit; call tick() once
        per frame, then read counters() after the block
    """
    timer = FrameTimer(clock=clock)
    timer.start()
    try:
        yield timer
    finally:
        timer.stop()
