"""Hex color parsing and multi-anchor gradients."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Sequence

from .errors import InvalidColor, InvalidGradient
from .models import Color

DEFAULT_STEPS = 101

_HEX_RE = re.compile(r"^#([0-9a-fA-F]{2}|[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


def parse_color(text: str) -> Color:
    """Parse ``#RRGGBB``, ``#RGB`` or the gray shorthand ``#GG``."""
    if not isinstance(text, str):
        raise InvalidColor(text)
    match = _HEX_RE.match(text.strip())
    if match is None:
        raise InvalidColor(text)

    digits = match.group(1)
    if len(digits) == 2:
        gray = int(digits, 16)
        return Color(gray, gray, gray)
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return Color(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def parse_color_or(text: object, fallback: Color) -> Color:
    try:
        return parse_color(text)  # type: ignore[arg-type]
    except InvalidColor:
        return fallback


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _lerp(a: Color, b: Color, t: float) -> Color:
    return Color(
        _round_half_up(a.r + (b.r - a.r) * t),
        _round_half_up(a.g + (b.g - a.g) * t),
        _round_half_up(a.b + (b.b - a.b) * t),
    )


@dataclass(frozen=True)
class Gradient:
    """Anchors spread evenly over 0..100, each segment interpolated per channel."""

    anchors: tuple[Color, ...]
    steps: int
    colors: tuple[Color, ...]

    @classmethod
    def build(cls, anchors: Sequence[Color], steps: int = DEFAULT_STEPS) -> Gradient:
        anchors = tuple(anchors)
        if len(anchors) < 2:
            raise InvalidGradient(f"Gradient needs at least 2 anchors, got {len(anchors)}")
        if steps < 2:
            raise InvalidGradient(f"Gradient needs at least 2 steps, got {steps}")

        table = tuple(_interpolate(anchors, 100.0 * i / (steps - 1)) for i in range(steps))
        return cls(anchors=anchors, steps=steps, colors=table)

    def at(self, position: float) -> Color:
        return _interpolate(self.anchors, position)

    def step(self, index: int) -> Color:
        index = max(0, min(self.steps - 1, int(index)))
        return self.colors[index]

    def __len__(self) -> int:
        return self.steps


def _interpolate(anchors: tuple[Color, ...], position: float) -> Color:
    position = max(0.0, min(100.0, float(position)))
    segments = len(anchors) - 1
    span = 100.0 / segments
    # 100 itself belongs to the last segment
    segment = min(int(position // span), segments - 1)
    t = (position - segment * span) / span
    return _lerp(anchors[segment], anchors[segment + 1], t)
