"""Renderer and theme error types."""

from __future__ import annotations


class RenderError(Exception):
    """Base class for every error raised by the rendering engine."""


class InvalidColor(RenderError, ValueError):
    def __init__(self, text: object) -> None:
        super().__init__(f"Invalid color: {text!r}")
        self.text = text


class InvalidGradient(RenderError, ValueError):
    pass


class UnknownGraphStyle(RenderError, LookupError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown graph style: {name!r}")
        self.name = name


class UnknownCornerStyle(RenderError, LookupError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown corner style: {name!r}")
        self.name = name


class ThemeNotFound(RenderError, LookupError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Theme not found: {name!r}")
        self.name = name


class ThemeParseError(RenderError, ValueError):
    pass


class InvalidScale(RenderError, ValueError):
    def __init__(self, max_value: float) -> None:
        super().__init__(f"Graph maximum must be a positive finite number, got {max_value!r}")
        self.max_value = max_value


class InvalidDimensions(RenderError, ValueError):
    def __init__(self, width: int, height: int | None = None, minimum: str = "") -> None:
        size = f"{width}" if height is None else f"{width}x{height}"
        message = f"Invalid dimensions: {size}"
        if minimum:
            message = f"{message} (minimum {minimum})"
        super().__init__(message)
        self.width = width
        self.height = height
