"""24-bit ANSI painting for spans and meter cells."""

from __future__ import annotations

import re
from typing import Iterable

from .models import Color, MeterCell, Span

CSI = "\033["
RESET = f"{CSI}0m"
ANSI_RE = re.compile(r"\x1b\[[0-9;?]*[A-Za-z]")


def fg(color: Color) -> str:
    return f"{CSI}38;2;{color.r};{color.g};{color.b}m"


def bg(color: Color) -> str:
    return f"{CSI}48;2;{color.r};{color.g};{color.b}m"


def paint(spans: Iterable[Span], enabled: bool = True) -> str:
    out: list[str] = []
    for span in spans:
        if enabled and span.color is not None:
            out.append(f"{fg(span.color)}{span.text}{RESET}")
        else:
            out.append(span.text)
    return "".join(out)


def paint_cells(cells: Iterable[MeterCell], empty_color: Color | None = None, enabled: bool = True) -> str:
    spans = [Span(c.glyph, c.color if c.filled or empty_color is None else empty_color) for c in cells]
    return paint(spans, enabled=enabled)


def strip_ansi(text: str) -> str:
    return ANSI_RE.sub("", text)


def visible_len(text: str) -> int:
    return len(strip_ansi(text))
