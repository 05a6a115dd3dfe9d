"""Wall-clock timer with weighted accumulation and printed reports."""

from __future__ import annotations

import sys
import time
from typing import Callable, TextIO


class Timer:
    """Accumulates elapsed wall time across start/stop intervals."""

    def __init__(
        self,
        clock: Callable[[], float] = time.time,
        stream: TextIO | None = None,
    ) -> None:
        self.total_time = 0.0
        self.last_time = 0.0
        self.total_weight = 0.0
        self.on = False
        self._clock = clock
        self._stream = stream

    @property
    def _out(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def get_time(self) -> float:
        return self._clock()

    def start(self) -> None:
        self.on = True
        self.last_time = self.get_time()

    def stop(self, weight: float | None = None) -> float:
        """Stop the timer and return the length of the last interval."""
        self.on = False
        elapsed = self.get_time() - self.last_time
        if weight is None:
            self.total_time += elapsed
        else:
            self.total_weight += weight
            self.total_time += weight * elapsed
        return elapsed

    def total(self) -> float:
        if self.on:
            return self.total_time + self.get_time() - self.last_time
        return self.total_time

    def next(self) -> float:
        """Return time since the last mark and start a new interval."""
        if not self.on:
            return 0.0
        now = self.get_time()
        elapsed = now - self.last_time
        self.total_time += elapsed
        self.last_time = now
        return elapsed

    def report_time(self, seconds: float) -> None:
        print(f"{seconds:.3g}", file=self._out)

    def report_stop(self, weight: float, label: str) -> None:
        print(f"{label} :{weight:g}: ", end="", file=self._out)
        self.report_time(self.stop(weight))

    def report_total(self, label: str | None = None) -> None:
        """Print the (weight-averaged) total and reset the accumulators."""
        if label is not None:
            print(f"{label} : ", end="", file=self._out)
        value = self.total() / self.total_weight if self.total_weight > 0.0 else self.total()
        self.report_time(value)
        self.total_time = 0.0
        self.total_weight = 0.0

    def report_next(self, label: str | None = None) -> None:
        if label is not None:
            print(f"{label} : ", end="", file=self._out)
        self.report_time(self.next())