"""Example: time a simulated render loop and report it as a performance event.

Run with:
    python examples/render_run.py
"""

import logging
import time

from perfevents import (
    Attribute,
    LoggingTelemetrySink,
    PerformanceEventDispatcher,
    attribute,
    timed_frames,
)

STYLE_ID = "mapbox://styles/mapbox/streets-v10"


def render_frames(
    count: int, frame_seconds: float = 1 / 90
) -> list[Attribute[int | float]]:
    """Pretend to render `count` frames and return the fps counters."""
    with timed_frames() as timer:
        for _ in range(count):
            time.sleep(frame_seconds)
            timer.tick()
    return timer.counters()


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(name)s %(message)s")
    dispatcher = PerformanceEventDispatcher(LoggingTelemetrySink())

    counters = render_frames(90)
    dispatcher.dispatch(attributes=[attribute("style_id", STYLE_ID)], counters=counters)


if __name__ == "__main__":
    main()
