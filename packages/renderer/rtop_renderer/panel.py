"""Metric panel composer: a titled box holding a history graph and a meter row."""

from __future__ import annotations

from typing import Sequence

from .boxes import BoxDrawer
from .errors import InvalidDimensions
from .glyphs import V_LINE, CornerStyle, GraphStyle
from .graph import GraphRenderer
from .meter import MeterRenderer, clamp_percent
from .models import MetricKind, Span
from .themes import Theme

MIN_WIDTH = 10
MIN_HEIGHT = 4


class MetricPanel:
    """Draws one dashboard widget against an explicitly passed Theme."""

    def __init__(
        self,
        width: int,
        height: int,
        title: str,
        metric: MetricKind,
        graph_style: GraphStyle | str = GraphStyle.BRAILLE,
        corner_style: CornerStyle | str = CornerStyle.ROUNDED,
        gradients: bool = True,
        max_value: float = 100.0,
        inverted: bool = False,
    ) -> None:
        if width < MIN_WIDTH or height < MIN_HEIGHT:
            raise InvalidDimensions(width, height, minimum=f"{MIN_WIDTH}x{MIN_HEIGHT}")
        self.width = width
        self.height = height
        self.title = title
        self.metric = MetricKind(metric)
        self.gradients = gradients

        inner = width - 2
        self._box = BoxDrawer(corner_style)
        self._graph = GraphRenderer(inner, height - 3, style=graph_style, inverted=inverted, max_value=max_value)
        self._inner = inner

    def render(self, theme: Theme, samples: Sequence[float], percent: float) -> list[list[Span]]:
        border = theme.box_color(self.metric)
        gradient = theme.gradient_for(self.metric) if self.gradients else None
        frame = self._box.draw_box(self.width, self.height, self.title)

        lines: list[list[Span]] = [[Span(frame[0], border)]]
        for row in self._graph.render_styled(samples, gradient=gradient, color=theme.main_fg):
            lines.append(self._framed([row], border))
        lines.append(self._framed(self._meter_row(theme, percent, gradient), border))
        lines.append([Span(frame[-1], border)])
        return lines

    def _meter_row(self, theme: Theme, percent: float, gradient) -> list[Span]:
        shown = clamp_percent(percent)
        label = f"{shown:5.1f}% "
        meter = MeterRenderer(self._inner - len(label))
        spans = [Span(label, theme.main_fg)]
        for cell in meter.render_segmented(shown, gradient):
            if not cell.filled:
                color = theme.meter_bg
            elif cell.color is not None:
                color = cell.color
            else:
                color = theme.hi_fg
            spans.append(Span(cell.glyph, color))
        return spans

    @staticmethod
    def _framed(content: list[Span], border) -> list[Span]:
        return [Span(V_LINE, border), *content, Span(V_LINE, border)]
