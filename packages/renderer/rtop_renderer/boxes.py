"""Bordered boxes with optional centered titles."""

from __future__ import annotations

import logging

from .errors import InvalidDimensions, UnknownCornerStyle
from .glyphs import H_LINE, TITLE_LEFT, TITLE_RIGHT, V_LINE, CornerStyle, corner_glyphs
from .models import Color, Span

logger = logging.getLogger("rtop.boxes")


def resolve_corner_style(name: str | CornerStyle, fallback: CornerStyle = CornerStyle.ROUNDED) -> CornerStyle:
    try:
        return CornerStyle.from_name(name)
    except UnknownCornerStyle:
        logger.warning(
            "unknown corner style %r, using %s",
            name,
            fallback.value,
            extra={"event": "corner_style_fallback", "style": name},
        )
        return fallback


class BoxDrawer:
    def __init__(self, corners: CornerStyle | str = CornerStyle.ROUNDED) -> None:
        self.corners = CornerStyle.from_name(corners)

    def draw_box(self, width: int, height: int, title: str | None = None) -> list[str]:
        if width < 2 or height < 2:
            raise InvalidDimensions(width, height, minimum="2x2")
        lu, ru, ld, rd = corner_glyphs(self.corners)
        inner = width - 2

        lines = [lu + self._top_border(inner, title) + ru]
        lines.extend(V_LINE + " " * inner + V_LINE for _ in range(height - 2))
        lines.append(ld + H_LINE * inner + rd)
        return lines

    def draw_styled(
        self,
        width: int,
        height: int,
        title: str | None = None,
        color: Color | None = None,
    ) -> list[Span]:
        return [Span(line, color) for line in self.draw_box(width, height, title)]

    @staticmethod
    def _top_border(inner: int, title: str | None) -> str:
        # Titles that don't fit are dropped whole, never cut.
        if not title or len(title) + 2 > inner:
            return H_LINE * inner
        free = inner - len(title) - 2
        left = free // 2
        return H_LINE * left + TITLE_LEFT + title + TITLE_RIGHT + H_LINE * (free - left)


def draw_box(
    width: int,
    height: int,
    title: str | None = None,
    corners: CornerStyle | str = CornerStyle.ROUNDED,
) -> list[str]:
    return BoxDrawer(corners).draw_box(width, height, title)
