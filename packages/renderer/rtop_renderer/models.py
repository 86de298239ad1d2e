"""Typed renderer models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Color:
    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b):
            if not 0 <= channel <= 255:
                raise ValueError(f"Color channel out of range: {channel}")

    @property
    def hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def __str__(self) -> str:
        return self.hex


@dataclass(frozen=True)
class Span:
    text: str
    color: Color | None = None


@dataclass(frozen=True)
class MeterCell:
    glyph: str
    color: Color | None
    filled: bool


class MetricKind(str, Enum):
    CPU = "cpu"
    MEMORY = "mem"
    NETWORK = "net"
    DOWNLOAD = "download"
    UPLOAD = "upload"
    TEMPERATURE = "temp"
    PROCESS = "proc"
