"""Persistent render settings schema and load/save helpers."""

from __future__ import annotations

import json
import os
import platform
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

from rtop_renderer import BUNDLED_THEME_DIR

CONFIG_VERSION = 1


@dataclass
class GraphConfig:
    symbol: str = "braille"
    height: int = 4
    inverted: bool = False


@dataclass
class BoxConfig:
    corners: str = "rounded"


@dataclass
class ColorConfig:
    theme: str = "default"
    gradients: bool = True
    enabled: bool = True


@dataclass
class HistoryConfig:
    size: int = 60
    refresh_ms: int = 1000


@dataclass
class ThemesConfig:
    extra_dirs: list[str] = field(default_factory=list)


@dataclass
class DiagnosticsConfig:
    keep_log_files: int = 7


@dataclass
class AppConfig:
    config_version: int = CONFIG_VERSION
    graph: GraphConfig = field(default_factory=GraphConfig)
    boxes: BoxConfig = field(default_factory=BoxConfig)
    colors: ColorConfig = field(default_factory=ColorConfig)
    history: HistoryConfig = field(default_factory=HistoryConfig)
    themes: ThemesConfig = field(default_factory=ThemesConfig)
    diagnostics: DiagnosticsConfig = field(default_factory=DiagnosticsConfig)


def config_root() -> Path:
    system = platform.system()
    if system == "Windows":
        base = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        return base / "rtop"
    if system == "Darwin":
        return Path.home() / "Library" / "Application Support" / "rtop"
    return Path.home() / ".config" / "rtop"


def config_path() -> Path:
    return config_root() / "config.json"


def theme_dir() -> Path:
    return config_root() / "themes"


def theme_search_paths(cfg: AppConfig) -> list[Path]:
    """Bundled themes first, then the user's theme dir, then any extra dirs."""
    paths = [BUNDLED_THEME_DIR, theme_dir()]
    paths.extend(Path(p).expanduser() for p in cfg.themes.extra_dirs)
    return paths


def _merge(dataclass_type, raw: Any):
    defaults = dataclass_type()  # type: ignore[misc]
    if not isinstance(raw, dict):
        return defaults
    for k, v in raw.items():
        if hasattr(defaults, k):
            setattr(defaults, k, v)
    return defaults


def _clamp_int(value: Any, low: int, high: int, default: int) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    return max(low, min(high, number))


def _flag(value: Any, default: bool) -> bool:
    # JSON strings like "false" are not flags
    return value if isinstance(value, bool) else default


def _normalize_graph(cfg: AppConfig) -> None:
    cfg.graph.symbol = str(cfg.graph.symbol).strip().lower()
    cfg.graph.height = _clamp_int(cfg.graph.height, 1, 32, GraphConfig.height)
    cfg.graph.inverted = _flag(cfg.graph.inverted, GraphConfig.inverted)


def _normalize_boxes(cfg: AppConfig) -> None:
    cfg.boxes.corners = str(cfg.boxes.corners).strip().lower()


def _normalize_colors(cfg: AppConfig) -> None:
    cfg.colors.theme = str(cfg.colors.theme or "").strip()
    cfg.colors.gradients = _flag(cfg.colors.gradients, ColorConfig.gradients)
    cfg.colors.enabled = _flag(cfg.colors.enabled, ColorConfig.enabled)


def _normalize_history(cfg: AppConfig) -> None:
    cfg.history.size = _clamp_int(cfg.history.size, 2, 3600, HistoryConfig.size)
    cfg.history.refresh_ms = _clamp_int(cfg.history.refresh_ms, 100, 10000, HistoryConfig.refresh_ms)


def _normalize_themes(cfg: AppConfig) -> None:
    dirs = cfg.themes.extra_dirs
    if not isinstance(dirs, list):
        dirs = []
    cfg.themes.extra_dirs = [str(d) for d in dirs if d]
    if not cfg.colors.theme:
        cfg.colors.theme = "default"


def load_config(path: Path | None = None) -> AppConfig:
    path = path or config_path()
    if not path.exists():
        return AppConfig()

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return AppConfig()
    if not isinstance(raw, dict):
        return AppConfig()

    cfg = AppConfig(
        config_version=CONFIG_VERSION,
        graph=_merge(GraphConfig, raw.get("graph", {})),
        boxes=_merge(BoxConfig, raw.get("boxes", {})),
        colors=_merge(ColorConfig, raw.get("colors", {})),
        history=_merge(HistoryConfig, raw.get("history", {})),
        themes=_merge(ThemesConfig, raw.get("themes", {})),
        diagnostics=_merge(DiagnosticsConfig, raw.get("diagnostics", {})),
    )

    _normalize_graph(cfg)
    _normalize_boxes(cfg)
    _normalize_colors(cfg)
    _normalize_history(cfg)
    _normalize_themes(cfg)
    return cfg


def save_config(cfg: AppConfig, path: Path | None = None) -> Path:
    cfg.config_version = CONFIG_VERSION
    path = path or config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(config_to_dict(cfg), indent=2, sort_keys=True), encoding="utf-8")
    return path


def config_to_dict(cfg: AppConfig) -> dict[str, Any]:
    return asdict(cfg)
