"""Annotation of workflow phases as coloured, named time ranges."""

from __future__ import annotations

import itertools
import threading
import time
from collections import deque
from dataclasses import dataclass

COLOURS = (0xFF00FF00, 0xFF0000FF, 0xFFFFFF00, 0xFFFF00FF, 0xFF00FFFF, 0xFFFF0000, 0xFFFFFFFF)
_HISTORY = 10

_colour_counter = itertools.count()
_colour_lock = threading.Lock()


@dataclass
class TraceRange:
    """A named, coloured time range; ``end`` is None while it is open."""

    name: str
    colour: int
    start: int
    end: int | None = None


class NVTXTracer:
    """Tracer that keeps one open range and switches it when the tag changes."""

    def __init__(self, name: str) -> None:
        self.name = ""
        self.ranges: list[TraceRange] = []
        self._occupancies: deque[int] = deque([0] * _HISTORY, maxlen=_HISTORY)
        self._open(name)

    def _open(self, name: str) -> None:
        self.name = name
        self.ranges.append(TraceRange(name, self.next_colour(), time.perf_counter_ns()))

    def _end_current(self) -> None:
        if self.ranges and self.ranges[-1].end is None:
            self.ranges[-1].end = time.perf_counter_ns()

    def set_tag(self, name: str) -> None:
        """Close the current range and open one named ``name``, unless unchanged."""
        if name == self.name:
            return
        self._end_current()
        self._open(name)

    def set_occupancy(self, occupancy: int) -> None:
        """Tag the current phase as rising, peak or falling occupancy."""
        exceeded = sum(1 for previous in self._occupancies if occupancy > previous + 1)
        if 2 * exceeded > len(self._occupancies):
            self.set_tag("occupancy rising")
        elif self.name == "occupancy rising":
            self.set_tag(f"peak occupancy ({occupancy} in-flight)")
        else:
            self.set_tag("occupancy falling")
        self._occupancies.append(occupancy)

    def close(self) -> None:
        """End the open range."""
        self._end_current()

    def __enter__(self) -> NVTXTracer:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    @staticmethod
    def next_colour() -> int:
        """Return the next colour in the shared cycle."""
        with _colour_lock:
            index = next(_colour_counter)
        return COLOURS[index % len(COLOURS)]