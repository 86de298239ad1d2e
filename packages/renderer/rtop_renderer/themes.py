"""Color themes: built-in default plus TOML theme documents."""

from __future__ import annotations

import json
import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

from .colors import DEFAULT_STEPS, Gradient, parse_color
from .errors import InvalidColor, ThemeParseError
from .models import Color, MetricKind

logger = logging.getLogger("rtop.themes")

DEFAULT_THEME_NAME = "default"

BUNDLED_THEME_DIR = Path(__file__).resolve().parent / "theme_files"

# Compiled defaults, also the per-key fallback for every loaded theme.
DEFAULT_COLORS: dict[str, str] = {
    "main_fg": "#cc",
    "main_bg": "#00",
    "title": "#ee",
    "hi_fg": "#b54040",
    "selected_bg": "#7e2626",
    "selected_fg": "#ee",
    "inactive_fg": "#40",
    "div_line": "#30",
    "graph_text": "#60",
    "meter_bg": "#40",
    "proc_misc": "#0de756",
    "cpu_box": "#3d7b46",
    "mem_box": "#8a882e",
    "net_box": "#423ba5",
    "proc_box": "#923535",
    "gpu_box": "#35934d",
    "cpu_start": "#4897d8",
    "cpu_mid": "#7ce567",
    "cpu_end": "#eb7070",
    "mem_start": "#ffc345",
    "mem_mid": "#f3a32e",
    "mem_end": "#e05a5a",
    "net_start": "#90e0b5",
    "net_mid": "#50d097",
    "net_end": "#30b572",
    "download_start": "#80d0a3",
    "download_mid": "#26e85f",
    "download_end": "#0de756",
    "upload_start": "#d08090",
    "upload_mid": "#e82656",
    "upload_end": "#e70d56",
    "temp_start": "#4897d8",
    "temp_mid": "#f3a32e",
    "temp_end": "#eb7070",
    "proc_start": "#80d0a3",
    "proc_mid": "#26e85f",
    "proc_end": "#0de756",
}

_BOX_ROLES: dict[MetricKind, str] = {
    MetricKind.CPU: "cpu_box",
    MetricKind.MEMORY: "mem_box",
    MetricKind.NETWORK: "net_box",
    MetricKind.DOWNLOAD: "net_box",
    MetricKind.UPLOAD: "net_box",
    MetricKind.TEMPERATURE: "cpu_box",
    MetricKind.PROCESS: "proc_box",
}


@dataclass(frozen=True)
class Theme:
    name: str
    main_fg: Color
    main_bg: Color
    title: Color
    hi_fg: Color
    selected_bg: Color
    selected_fg: Color
    inactive_fg: Color
    div_line: Color
    graph_text: Color
    meter_bg: Color
    proc_misc: Color
    cpu_box: Color
    mem_box: Color
    net_box: Color
    proc_box: Color
    gpu_box: Color
    cpu_start: Color
    cpu_mid: Color | None
    cpu_end: Color
    mem_start: Color
    mem_mid: Color | None
    mem_end: Color
    net_start: Color
    net_mid: Color | None
    net_end: Color
    download_start: Color
    download_mid: Color | None
    download_end: Color
    upload_start: Color
    upload_mid: Color | None
    upload_end: Color
    temp_start: Color
    temp_mid: Color | None
    temp_end: Color
    proc_start: Color
    proc_mid: Color | None
    proc_end: Color
    warnings: tuple[str, ...] = field(default=(), compare=False)
    _gradients: dict[MetricKind, Gradient] = field(default_factory=dict, init=False, repr=False, compare=False)

    @classmethod
    def default(cls) -> Theme:
        return cls.from_mapping({}, name=DEFAULT_THEME_NAME)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], name: str | None = None) -> Theme:
        """Resolve every role, substituting the compiled default per bad key."""
        values: dict[str, Color | None] = {}
        warnings: list[str] = []
        theme_name = name or str(data.get("name") or DEFAULT_THEME_NAME)

        for key, default_hex in DEFAULT_COLORS.items():
            default = parse_color(default_hex)
            if key not in data:
                values[key] = default
                continue
            raw = data[key]
            if key.endswith("_mid") and raw == "":
                values[key] = None
                continue
            try:
                values[key] = parse_color(raw)
            except InvalidColor:
                warnings.append(key)
                values[key] = default
                logger.warning(
                    "theme %s: invalid color %r for %s, using default %s",
                    theme_name,
                    raw,
                    key,
                    default_hex,
                    extra={"event": "theme_color_fallback", "theme": theme_name},
                )

        for key in data:
            if key != "name" and key not in DEFAULT_COLORS:
                logger.debug("theme %s: ignoring unknown key %s", theme_name, key)

        return cls(name=theme_name, warnings=tuple(warnings), **values)  # type: ignore[arg-type]

    @classmethod
    def parse(cls, text: str, name: str | None = None) -> Theme:
        try:
            data = tomllib.loads(text)
        except tomllib.TOMLDecodeError as exc:
            raise ThemeParseError(f"Invalid theme document: {exc}") from exc
        return cls.from_mapping(data, name=name)

    @classmethod
    def load(cls, path: Path) -> Theme:
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ThemeParseError(f"Cannot read theme {path}: {exc}") from exc
        try:
            return cls.parse(text)
        except ThemeParseError as exc:
            raise ThemeParseError(f"{path}: {exc}") from exc

    def color(self, role: str) -> Color:
        if role in DEFAULT_COLORS:
            value = getattr(self, role)
            if value is not None:
                return value
        return self.main_fg

    def box_color(self, metric: MetricKind) -> Color:
        return self.color(_BOX_ROLES[metric])

    def anchors_for(self, metric: MetricKind) -> tuple[Color, ...]:
        prefix = MetricKind(metric).value
        mid = getattr(self, f"{prefix}_mid")
        start = getattr(self, f"{prefix}_start")
        end = getattr(self, f"{prefix}_end")
        if mid is None:
            return (start, end)
        return (start, mid, end)

    def gradient_for(self, metric: MetricKind) -> Gradient:
        metric = MetricKind(metric)
        gradient = self._gradients.get(metric)
        if gradient is None:
            gradient = Gradient.build(self.anchors_for(metric), DEFAULT_STEPS)
            self._gradients[metric] = gradient
        return gradient

    def to_dict(self) -> dict[str, str]:
        out = {"name": self.name}
        for key in DEFAULT_COLORS:
            value = getattr(self, key)
            out[key] = value.hex if value is not None else ""
        return out

    def to_toml(self) -> str:
        lines = [f"{key} = {json.dumps(value)}" for key, value in self.to_dict().items()]
        return "\n".join(lines) + "\n"

