"""Renderer package: text-mode graphs, meters, boxes and color themes."""

from .boxes import BoxDrawer, draw_box, resolve_corner_style
from .colors import Gradient, parse_color, parse_color_or
from .errors import (
    InvalidColor,
    InvalidDimensions,
    InvalidGradient,
    InvalidScale,
    RenderError,
    ThemeNotFound,
    ThemeParseError,
    UnknownCornerStyle,
    UnknownGraphStyle,
)
from .glyphs import CornerStyle, GraphStyle, glyph_table
from .graph import GraphRenderer, render_graph, resolve_graph_style
from .meter import MeterRenderer, render_meter
from .models import Color, MeterCell, MetricKind, Span
from .panel import MetricPanel
from .theme_manager import ThemeManager
from .themes import BUNDLED_THEME_DIR, DEFAULT_THEME_NAME, Theme

__all__ = [
    "BUNDLED_THEME_DIR",
    "BoxDrawer",
    "Color",
    "CornerStyle",
    "DEFAULT_THEME_NAME",
    "Gradient",
    "GraphRenderer",
    "GraphStyle",
    "InvalidColor",
    "InvalidDimensions",
    "InvalidGradient",
    "InvalidScale",
    "MeterCell",
    "MeterRenderer",
    "MetricKind",
    "MetricPanel",
    "RenderError",
    "Span",
    "Theme",
    "ThemeManager",
    "ThemeNotFound",
    "ThemeParseError",
    "UnknownCornerStyle",
    "UnknownGraphStyle",
    "draw_box",
    "glyph_table",
    "parse_color",
    "parse_color_or",
    "render_graph",
    "render_meter",
    "resolve_corner_style",
    "resolve_graph_style",
]
