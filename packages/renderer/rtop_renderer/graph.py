"""Multi-row history graphs built from 5x5 glyph tables."""

from __future__ import annotations

import logging
import math
from typing import Iterable, Sequence

from .colors import Gradient
from .errors import InvalidDimensions, InvalidScale, UnknownGraphStyle
from .glyphs import BLANK_INDEX, FULL_INDEX, LEVELS, GraphStyle, glyph_table
from .models import Color, Span

logger = logging.getLogger("rtop.graph")

FALLBACK_STYLE = GraphStyle.BLOCK


def resolve_graph_style(name: str | GraphStyle, fallback: GraphStyle = FALLBACK_STYLE) -> GraphStyle:
    try:
        return GraphStyle.from_name(name)
    except UnknownGraphStyle:
        logger.warning(
            "unknown graph style %r, using %s",
            name,
            fallback.value,
            extra={"event": "graph_style_fallback", "style": name},
        )
        return fallback


class GraphRenderer:
    """Renders ``height`` rows of ``width`` glyphs, two samples per column."""

    def __init__(
        self,
        width: int,
        height: int,
        style: GraphStyle | str = GraphStyle.BRAILLE,
        inverted: bool = False,
        max_value: float = 100.0,
        no_zero: bool = True,
    ) -> None:
        if width < 1 or height < 1:
            raise InvalidDimensions(width, height, minimum="1x1")
        if not math.isfinite(max_value) or max_value <= 0:
            raise InvalidScale(max_value)
        self.width = width
        self.height = height
        self.style = GraphStyle.from_name(style)
        self.inverted = inverted
        self.max_value = float(max_value)
        self.no_zero = no_zero
        self._table = glyph_table(self.style, inverted)

    def render(self, samples: Iterable[float]) -> list[str]:
        pairs = self._pairs(samples)
        return ["".join(self._cell(a, b, band) for a, b in pairs) for band in self._bands()]

    def render_styled(
        self,
        samples: Iterable[float],
        gradient: Gradient | None = None,
        color: Color | None = None,
    ) -> list[Span]:
        """Rows as spans, colored by the gradient at each band's upper edge."""
        rows = self.render(samples)
        out: list[Span] = []
        for text, band in zip(rows, self._bands()):
            row_color = color
            if gradient is not None:
                row_color = gradient.at(100.0 * (band + 1) / self.height)
            out.append(Span(text, row_color))
        return out

    def _bands(self) -> list[int]:
        # Output is top to bottom; band 0 sits on the baseline.
        if self.inverted:
            return list(range(self.height))
        return list(range(self.height - 1, -1, -1))

    def _pairs(self, samples: Iterable[float]) -> list[tuple[float, float]]:
        # NaN and infinities plot as zero
        values = [v if math.isfinite(v) else 0.0 for v in map(float, samples)]
        if not values:
            values = [0.0]

        capacity = 2 * self.width
        if len(values) > capacity:
            values = values[-capacity:]
        if len(values) % 2:
            values.append(values[-1])
        missing = capacity - len(values)
        if missing:
            values = [values[0]] * missing + values

        return [(values[i], values[i + 1]) for i in range(0, capacity, 2)]

    def _cell(self, a: float, b: float, band: int) -> str:
        low = self.max_value * band / self.height
        high = self.max_value * (band + 1) / self.height
        a, b = abs(a), abs(b)

        if a >= high and b >= high:
            return self._table[FULL_INDEX]
        if a < low and b < low:
            return self._table[BLANK_INDEX]
        return self._table[self._level(a, low, high, band) * LEVELS + self._level(b, low, high, band)]

    def _level(self, value: float, low: float, high: float, band: int) -> int:
        if value >= high:
            level = LEVELS - 1
        elif value <= low:
            level = 0
        else:
            level = int(math.floor((value - low) / (high - low) * (LEVELS - 1) + 0.5))
            level = max(0, min(LEVELS - 1, level))
        if level == 0 and self.no_zero and band == 0 and value > 0:
            return 1
        return level


def render_graph(
    samples: Sequence[float],
    width: int,
    height: int,
    style: GraphStyle | str = GraphStyle.BRAILLE,
    inverted: bool = False,
    max_value: float = 100.0,
) -> list[str]:
    return GraphRenderer(width, height, style=style, inverted=inverted, max_value=max_value).render(samples)
