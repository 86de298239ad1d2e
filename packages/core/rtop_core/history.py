"""Bounded sample histories owned by the data side of the dashboard."""

from __future__ import annotations

from collections import deque
from typing import Iterable

DEFAULT_CAPACITY = 60


class SampleHistory:
    """Fixed-capacity window of the most recent samples, oldest first."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY, values: Iterable[float] = ()) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self._values: deque[float] = deque((float(v) for v in values), maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._values.maxlen or 0

    @property
    def latest(self) -> float | None:
        return self._values[-1] if self._values else None

    def push(self, value: float) -> None:
        self._values.append(float(value))

    def extend(self, values: Iterable[float]) -> None:
        self._values.extend(float(v) for v in values)

    def clear(self) -> None:
        self._values.clear()

    def values(self) -> tuple[float, ...]:
        return tuple(self._values)

    def resampled(self, count: int) -> list[float]:
        """Linear interpolation of the window onto exactly ``count`` points."""
        if count < 1:
            return []
        data = list(self._values)
        if not data:
            return [0.0] * count
        if len(data) == 1 or count == 1:
            return [data[-1]] * count

        scale = (len(data) - 1) / (count - 1)
        out: list[float] = []
        for i in range(count):
            pos = i * scale
            left = int(pos)
            right = min(left + 1, len(data) - 1)
            frac = pos - left
            out.append(data[left] + (data[right] - data[left]) * frac)
        return out

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self):
        return iter(self._values)
