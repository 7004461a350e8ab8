from collections import deque
from typing import Deque, List, Optional, Tuple

Point = Tuple[float, float]


class SlidingWindow:
    """
    Bounded, time-ordered buffer of the most recent power readings.

    Each point is a ``(relative_time, watts)`` pair. The newest point sits at
    relative time 0 and older points at -1, -2, ... one unit per iteration.
    """

    def __init__(self, capacity: int = 100):
        if capacity < 1:
            raise ValueError(f"Window capacity must be at least 1, got {capacity}")
        self.capacity = capacity
        self._points: Deque[Point] = deque()

    def __len__(self) -> int:
        return len(self._points)

    def shift(self) -> None:
        """
        Age every point by one unit and make room for the next one.

        The oldest point is evicted when the window is full, so the window
        never holds more than ``capacity`` points, not even transiently.
        """
        for i, (t, watts) in enumerate(self._points):
            self._points[i] = (t - 1.0, watts)
        if len(self._points) == self.capacity:
            self._points.popleft()

    def append(self, watts: float) -> None:
        if len(self._points) >= self.capacity:
            raise OverflowError("Window is full, call shift() before append()")
        self._points.append((0.0, float(watts)))

    def points(self) -> List[Point]:
        return list(self._points)

    @property
    def latest(self) -> Optional[float]:
        if not self._points:
            return None
        return self._points[-1][1]
