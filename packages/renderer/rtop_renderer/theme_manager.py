"""Loaded theme set with an active selection and atomic reloads."""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Iterable

from .errors import ThemeNotFound, ThemeParseError
from .themes import DEFAULT_THEME_NAME, Theme

logger = logging.getLogger("rtop.themes")


class ThemeManager:
    """Owns the themes keyed by file stem; ``default`` is always present.

    One lock guards both the cache and the active name. Reloads build a new
    cache off to the side and publish it with a single assignment, so a reader
    holding a Theme from before the swap keeps a complete object.
    """

    def __init__(self, search_paths: Iterable[Path] | None = None) -> None:
        self._lock = threading.RLock()
        self._search_paths: list[Path] = [Path(p) for p in (search_paths or [])]
        self._themes: dict[str, Theme] = {DEFAULT_THEME_NAME: Theme.default()}
        self._active = DEFAULT_THEME_NAME

    @property
    def active_name(self) -> str:
        with self._lock:
            return self._active

    @property
    def search_paths(self) -> list[Path]:
        with self._lock:
            return list(self._search_paths)

    def current(self) -> Theme:
        with self._lock:
            return self._themes.get(self._active) or self._themes[DEFAULT_THEME_NAME]

    def get(self, name: str) -> Theme:
        with self._lock:
            try:
                return self._themes[name]
            except KeyError:
                raise ThemeNotFound(name) from None

    def names(self) -> list[str]:
        with self._lock:
            return sorted(self._themes)

    def set_active(self, name: str) -> Theme:
        with self._lock:
            theme = self._themes.get(name)
            if theme is None:
                raise ThemeNotFound(name)
            self._active = name
            logger.info("active theme %s", name, extra={"event": "theme_selected", "theme": name})
            return theme

    def add(self, theme: Theme, name: str | None = None) -> str:
        key = name or theme.name
        with self._lock:
            themes = dict(self._themes)
            themes[key] = theme
            self._themes = themes
        return key

    def load_all(self, search_paths: Iterable[Path] | None = None) -> list[str]:
        """Scan ``*.toml`` files; later directories override earlier ones."""
        if search_paths is not None:
            with self._lock:
                self._search_paths = [Path(p) for p in search_paths]
        discovered = self._discover(self.search_paths)

        with self._lock:
            themes = dict(self._themes)
            themes.update(discovered)
            self._themes = themes
        return sorted(discovered)

    def reload(self) -> list[str]:
        discovered = self._discover(self.search_paths)
        themes = {DEFAULT_THEME_NAME: Theme.default()}
        themes.update(discovered)

        with self._lock:
            self._themes = themes
            if self._active not in themes:
                logger.warning(
                    "active theme %s disappeared on reload, using %s",
                    self._active,
                    DEFAULT_THEME_NAME,
                    extra={"event": "theme_reload_fallback", "theme": self._active},
                )
                self._active = DEFAULT_THEME_NAME
        logger.info("reloaded %d themes", len(discovered), extra={"event": "themes_reloaded"})
        return sorted(discovered)

    @staticmethod
    def _discover(search_paths: list[Path]) -> dict[str, Theme]:
        found: dict[str, Theme] = {}
        for directory in search_paths:
            if not directory.is_dir():
                continue
            for path in sorted(directory.glob("*.toml")):
                key = path.stem
                if key == DEFAULT_THEME_NAME:
                    logger.warning(
                        "skipping %s: %r is reserved for the built-in theme",
                        path,
                        DEFAULT_THEME_NAME,
                        extra={"event": "theme_skipped", "path": path},
                    )
                    continue
                try:
                    theme = Theme.load(path)
                except ThemeParseError as exc:
                    logger.warning(
                        "skipping theme %s: %s",
                        path,
                        exc,
                        extra={"event": "theme_parse_failed", "path": path},
                    )
                    continue
                if theme.name != key:
                    logger.debug("theme file %s declares name %r, registered as %r", path, theme.name, key)
                found[key] = theme
        return found
