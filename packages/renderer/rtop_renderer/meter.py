"""Horizontal percentage meters."""

from __future__ import annotations

import math

from .colors import Gradient
from .errors import InvalidDimensions
from .glyphs import METER_EMPTY, METER_FILLED
from .models import MeterCell


def clamp_percent(percent: float) -> float:
    value = float(percent)
    if not math.isfinite(value):
        return 0.0
    return max(0.0, min(100.0, value))


class MeterRenderer:
    def __init__(self, width: int, filled: str = METER_FILLED, empty: str = METER_EMPTY) -> None:
        if width < 0:
            raise InvalidDimensions(width, minimum="0")
        self.width = width
        self.filled = filled
        self.empty = empty

    def filled_cells(self, percent: float) -> int:
        return int(math.floor(self.width * clamp_percent(percent) / 100.0 + 0.5))

    def render(self, percent: float) -> str:
        filled = self.filled_cells(percent)
        return self.filled * filled + self.empty * (self.width - filled)

    def render_segmented(self, percent: float, gradient: Gradient | None = None) -> list[MeterCell]:
        """Per-cell glyphs with the gradient color at each cell's right edge."""
        filled = self.filled_cells(percent)
        cells: list[MeterCell] = []
        for i in range(self.width):
            color = gradient.at((i + 1) * 100.0 / self.width) if gradient is not None else None
            is_filled = i < filled
            cells.append(MeterCell(glyph=self.filled if is_filled else self.empty, color=color, filled=is_filled))
        return cells


def render_meter(percent: float, width: int) -> str:
    return MeterRenderer(width).render(percent)
