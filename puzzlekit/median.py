"""Running median over a stream of numbers."""

from __future__ import annotations

import heapq
from collections.abc import Iterable


class RunningMedian:
    """Median of every value added so far, kept with two heaps."""

    def __init__(self) -> None:
        self._lower: list[float] = []  # max-heap of the smaller half, negated
        self._upper: list[float] = []  # min-heap of the larger half
        self._median = 0.0

    def add(self, value: float) -> float:
        """Add ``value`` and return the new median."""
        lower, upper = self._lower, self._upper
        if len(upper) < len(lower):
            if value < self._median:
                heapq.heappush(upper, -heapq.heapreplace(lower, -value))
            else:
                heapq.heappush(upper, value)
            self._median = (-lower[0] + upper[0]) / 2
        elif len(upper) > len(lower):
            if value > self._median:
                heapq.heappush(lower, -heapq.heapreplace(upper, value))
            else:
                heapq.heappush(lower, -value)
            self._median = (-lower[0] + upper[0]) / 2
        elif value < self._median:
            heapq.heappush(lower, -value)
            self._median = float(-lower[0])
        else:
            heapq.heappush(upper, value)
            self._median = float(upper[0])
        return self._median

    def __len__(self) -> int:
        return len(self._lower) + len(self._upper)


def running_medians(values: Iterable[float]) -> list[float]:
    """Median after each value of ``values`` in turn."""
    tracker = RunningMedian()
    return [tracker.add(value) for value in values]