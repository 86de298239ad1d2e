"""Box-drawing symbols and graph glyph tables.

Each graph table holds 25 glyphs indexed by ``level_a * 5 + level_b`` where
both levels are fill levels 0..4 of the two samples sharing one column.
"""

from __future__ import annotations

from enum import Enum

from .errors import UnknownCornerStyle, UnknownGraphStyle

H_LINE = "─"
V_LINE = "│"
LEFT_UP = "┌"
RIGHT_UP = "┐"
LEFT_DOWN = "└"
RIGHT_DOWN = "┘"
ROUND_LEFT_UP = "╭"
ROUND_RIGHT_UP = "╮"
ROUND_LEFT_DOWN = "╰"
ROUND_RIGHT_DOWN = "╯"
TITLE_LEFT = "┤"
TITLE_RIGHT = "├"

METER_FILLED = "■"
METER_EMPTY = "░"

LEVELS = 5
BLANK_INDEX = 0
FULL_INDEX = LEVELS * LEVELS - 1


class GraphStyle(str, Enum):
    BRAILLE = "braille"
    BLOCK = "block"
    TTY = "tty"

    @classmethod
    def from_name(cls, name: str | GraphStyle) -> GraphStyle:
        if isinstance(name, GraphStyle):
            return name
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            raise UnknownGraphStyle(str(name)) from None


class CornerStyle(str, Enum):
    ROUNDED = "rounded"
    SQUARE = "square"

    @classmethod
    def from_name(cls, name: str | CornerStyle) -> CornerStyle:
        if isinstance(name, CornerStyle):
            return name
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            raise UnknownCornerStyle(str(name)) from None


def _table(rows: str) -> tuple[str, ...]:
    glyphs = tuple(rows.replace("\n", ""))
    if len(glyphs) != LEVELS * LEVELS:
        raise ValueError(f"Glyph table needs {LEVELS * LEVELS} glyphs, got {len(glyphs)}")
    return glyphs


BRAILLE_UP = _table(
    " ⢀⢠⢰⢸\n"
    "⡀⣀⣠⣰⣸\n"
    "⡄⣄⣤⣴⣼\n"
    "⡆⣆⣦⣶⣾\n"
    "⡇⣇⣧⣷⣿"
)

BRAILLE_DOWN = _table(
    " ⠈⠘⠸⢸\n"
    "⠁⠉⠙⠹⢹\n"
    "⠃⠋⠛⠻⢻\n"
    "⠇⠏⠟⠿⢿\n"
    "⡇⡏⡟⡿⣿"
)

# Half-cell quadrants: levels 1-2 map to the lower quadrant, 3-4 to the full half.
BLOCK_UP = _table(
    " ▗▗▐▐\n"
    "▖▄▄▟▟\n"
    "▖▄▄▟▟\n"
    "▌▙▙██\n"
    "▌▙▙██"
)

BLOCK_DOWN = _table(
    " ▝▝▐▐\n"
    "▘▀▀▜▜\n"
    "▘▀▀▜▜\n"
    "▌▛▛██\n"
    "▌▛▛██"
)

# Shades by combined density (level_a + level_b): 0 blank, 1-2 light,
# 3-5 medium, 6-7 dark, 8 full. Symmetric, so it serves both orientations.
TTY_UP = _table(
    " ░░▒▒\n"
    "░░▒▒▒\n"
    "░▒▒▒▓\n"
    "▒▒▒▓▓\n"
    "▒▒▓▓█"
)

TTY_DOWN = TTY_UP

GLYPH_TABLES: dict[tuple[GraphStyle, bool], tuple[str, ...]] = {
    (GraphStyle.BRAILLE, False): BRAILLE_UP,
    (GraphStyle.BRAILLE, True): BRAILLE_DOWN,
    (GraphStyle.BLOCK, False): BLOCK_UP,
    (GraphStyle.BLOCK, True): BLOCK_DOWN,
    (GraphStyle.TTY, False): TTY_UP,
    (GraphStyle.TTY, True): TTY_DOWN,
}


def glyph_table(style: GraphStyle | str, inverted: bool = False) -> tuple[str, ...]:
    return GLYPH_TABLES[(GraphStyle.from_name(style), bool(inverted))]


def corner_glyphs(style: CornerStyle | str) -> tuple[str, str, str, str]:
    """Return (left-up, right-up, left-down, right-down) for ``style``."""
    if CornerStyle.from_name(style) is CornerStyle.ROUNDED:
        return (ROUND_LEFT_UP, ROUND_RIGHT_UP, ROUND_LEFT_DOWN, ROUND_RIGHT_DOWN)
    return (LEFT_UP, RIGHT_UP, LEFT_DOWN, RIGHT_DOWN)
