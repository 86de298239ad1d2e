import json
import sys
import tempfile
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "core"))
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from rtop_core.config import AppConfig, load_config, save_config, theme_dir, theme_search_paths
from rtop_renderer import BUNDLED_THEME_DIR


class ConfigTests(unittest.TestCase):
    def test_load_default_when_missing(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "missing.json"
            cfg = load_config(path)
            self.assertIsInstance(cfg, AppConfig)
            self.assertEqual(cfg.graph.symbol, "braille")
            self.assertEqual(cfg.boxes.corners, "rounded")
            self.assertEqual(cfg.colors.theme, "default")
            self.assertEqual(cfg.history.size, 60)

    def test_save_and_reload(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            cfg = load_config(path)
            cfg.graph.symbol = "tty"
            cfg.colors.theme = "nord"
            cfg.history.refresh_ms = 500
            save_config(cfg, path)
            reloaded = load_config(path)
            self.assertEqual(reloaded.graph.symbol, "tty")
            self.assertEqual(reloaded.colors.theme, "nord")
            self.assertEqual(reloaded.history.refresh_ms, 500)

    def test_partial_file_is_merged_and_normalized(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            old = {
                "graph": {"symbol": " Block ", "height": 99, "unknown": 1},
                "history": {"size": "abc", "refresh_ms": 5},
                "themes": {"extra_dirs": "not-a-list"},
                "colors": {"theme": ""},
            }
            path.write_text(json.dumps(old), encoding="utf-8")
            cfg = load_config(path)
            self.assertEqual(cfg.graph.symbol, "block")
            self.assertEqual(cfg.graph.height, 32)
            self.assertFalse(hasattr(cfg.graph, "unknown"))
            self.assertEqual(cfg.history.size, 60)
            self.assertEqual(cfg.history.refresh_ms, 100)
            self.assertEqual(cfg.themes.extra_dirs, [])
            self.assertEqual(cfg.colors.theme, "default")
            self.assertTrue(cfg.colors.gradients)

    def test_flags_accept_only_booleans(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            raw = {
                "graph": {"inverted": "false"},
                "colors": {"gradients": "no", "enabled": False},
            }
            path.write_text(json.dumps(raw), encoding="utf-8")
            cfg = load_config(path)
            self.assertIs(cfg.graph.inverted, False)
            self.assertIs(cfg.colors.gradients, True)
            self.assertIs(cfg.colors.enabled, False)

            path.write_text(json.dumps({"graph": {"inverted": True}}), encoding="utf-8")
            self.assertIs(load_config(path).graph.inverted, True)

    def test_corrupt_file_gives_defaults(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            path.write_text("{not json", encoding="utf-8")
            self.assertEqual(load_config(path), AppConfig())
            path.write_text("[1, 2]", encoding="utf-8")
            self.assertEqual(load_config(path), AppConfig())

    def test_theme_search_order(self):
        cfg = AppConfig()
        cfg.themes.extra_dirs = ["/opt/rtop-themes"]
        paths = theme_search_paths(cfg)
        self.assertEqual(paths[0], BUNDLED_THEME_DIR)
        self.assertEqual(paths[1], theme_dir())
        self.assertEqual(paths[2], Path("/opt/rtop-themes"))


if __name__ == "__main__":
    unittest.main()
