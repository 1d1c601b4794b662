"""Benchmarking utilities: timers, accumulators, CSV output and snapshots."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Hashable

_DEFAULT_NAME = "benchmark"


@dataclass
class TimeInfo:
    """Start of the current measurement, total time measured and running flag."""

    start: int = 0
    accumulated: int = 0
    counting: bool = False


class BenchmarkManager:
    """Named timers and accumulators that can be exported as CSV."""

    _write_lock = threading.Lock()

    def __init__(self) -> None:
        self.timers: dict[Hashable, TimeInfo] = {}
        self.accumulators: dict[Hashable, float] = {}
        self.output_directory = ""
        self.output_filename = ""

    def timer_start(self, tag) -> None:
        """Start (or restart) the timer of ``tag``."""
        timer = self.timers.setdefault(tag, TimeInfo())
        timer.counting = True
        timer.start = time.perf_counter_ns()

    def timer_stop(self, tag) -> None:
        """Stop the timer of ``tag`` and add the elapsed time to its total."""
        stop = time.perf_counter_ns()
        timer = self.timers.setdefault(tag, TimeInfo())
        if timer.counting:
            timer.counting = False
            timer.accumulated += stop - timer.start

    def get_duration_seconds(self, tag) -> float:
        """Total time measured for ``tag`` in seconds, to microsecond precision."""
        timer = self.timers.setdefault(tag, TimeInfo())
        return (timer.accumulated // 1000) / 1e6

    def set_accumulator(self, tag, value: float) -> None:
        self.accumulators[tag] = value

    def get_accumulator(self, tag) -> float:
        return self.accumulators.setdefault(tag, 0.0)

    def add_to_accumulator(self, tag, value: float) -> None:
        self.accumulators[tag] = self.accumulators.get(tag, 0.0) + value

    def reset(self) -> None:
        """Remove all timers and accumulators."""
        self.timers.clear()
        self.accumulators.clear()

    def remove_timer(self, tag) -> None:
        self.timers.pop(tag, None)

    def has_timer(self, tag) -> bool:
        return tag in self.timers

    def remove_accumulator(self, tag) -> None:
        self.accumulators.pop(tag, None)

    def has_accumulator(self, tag) -> bool:
        return tag in self.accumulators

    def export_csv(self, overwrite: bool = True) -> Path:
        """Write timer and accumulator values to ``<dir>/<name>.csv``.

        The header is written when the file is new or is overwritten; appended
        runs add only a line of values.
        """
        directory = Path(self.output_directory or _DEFAULT_NAME)
        name = self.output_filename or _DEFAULT_NAME
        path = directory / f"{name}.csv"

        directory.mkdir(exist_ok=True)
        first_write = not path.exists()

        timer_tags = sorted(self.timers)
        accumulator_tags = sorted(self.accumulators)

        with self._write_lock, path.open("w" if overwrite else "a") as output:
            if first_write or overwrite:
                header = [str(tag) for tag in timer_tags + accumulator_tags]
                output.write(", ".join(header) + "\n")
            values = [f"{self.get_duration_seconds(tag):.6f}" for tag in timer_tags]
            values += [f"{self.accumulators[tag]:.6f}" for tag in accumulator_tags]
            output.write(", ".join(values) + "\n")

        print(f"TEST: Results saved to: {path}")
        return path


class BenchmarkStore:
    """Process-wide store of snapshots taken from benchmark managers."""

    _instance: BenchmarkStore | None = None
    _init_lock = threading.Lock()

    def __init__(self) -> None:
        self._states: list[dict[Hashable, float]] = []
        self._access_lock = threading.Lock()

    @classmethod
    def get_instance(cls) -> BenchmarkStore:
        """Return the shared store, creating it on first use."""
        with cls._init_lock:
            if cls._instance is None:
                cls._instance = cls()
            return cls._instance

    @property
    def states(self) -> list[dict[Hashable, float]]:
        """Recorded snapshots, oldest first."""
        return self._states

    def record_state(self, manager: BenchmarkManager) -> None:
        """Save the current timer durations and accumulator values of ``manager``."""
        state = {tag: manager.get_duration_seconds(tag) for tag in list(manager.timers)}
        state.update(manager.accumulators)
        with self._access_lock:
            self._states.append(state)

    def reset(self) -> None:
        with self._access_lock:
            self._states.clear()