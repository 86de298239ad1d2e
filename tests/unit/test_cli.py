import io
import json
import sys
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path
from unittest import mock

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "apps" / "cli"))
sys.path.insert(0, str(ROOT / "packages" / "core"))
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from rtop_app.cli import build_parser, main


class CliParserTests(unittest.TestCase):
    def test_graph_command(self):
        parser = build_parser()
        args = parser.parse_args(["graph", "1", "2", "--style", "tty", "--inverted"])
        self.assertEqual(args.command, "graph")
        self.assertEqual(args.values, ["1", "2"])
        self.assertEqual(args.style, "tty")
        self.assertTrue(args.inverted)

    def test_themes_show_command(self):
        parser = build_parser()
        args = parser.parse_args(["themes", "show", "nord", "--format", "toml"])
        self.assertEqual(args.themes_cmd, "show")
        self.assertEqual(args.name, "nord")
        self.assertEqual(args.format, "toml")

    def test_meter_color_flag(self):
        parser = build_parser()
        self.assertFalse(parser.parse_args(["meter", "50", "--no-color"]).color)
        self.assertIsNone(parser.parse_args(["meter", "50"]).color)

    def test_config_init_command(self):
        parser = build_parser()
        args = parser.parse_args(["config", "init", "--force"])
        self.assertEqual(args.config_cmd, "init")
        self.assertTrue(args.force)


class CliRunTests(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.config = str(Path(self._tmp.name) / "config.json")
        patcher = mock.patch("rtop_app.cli.configure_logging")
        patcher.start()
        self.addCleanup(patcher.stop)

    def tearDown(self):
        self._tmp.cleanup()

    def run_cli(self, *argv):
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            rc = main(["--config", self.config, *argv])
        return rc, out.getvalue(), err.getvalue()

    def test_box(self):
        rc, out, _ = self.run_cli("box", "--width", "10", "--height", "3", "--title", "cpu")
        self.assertEqual(rc, 0)
        self.assertEqual(out.splitlines(), ["╭─┤cpu├──╮", "│        │", "╰────────╯"])

    def test_graph_plain(self):
        rc, out, _ = self.run_cli("graph", "0", "100", "--width", "1", "--height", "1", "--no-color")
        self.assertEqual(rc, 0)
        self.assertEqual(out, "⢸\n")

    def test_graph_bad_value(self):
        rc, _, err = self.run_cli("graph", "abc", "--no-color")
        self.assertEqual(rc, 2)
        self.assertIn("invalid sample value", err)

    def test_graph_nan_sample_plots_as_zero(self):
        rc, out, _ = self.run_cli("graph", "nan", "--width", "1", "--height", "1", "--no-color")
        self.assertEqual(rc, 0)
        self.assertEqual(out, " \n")

    def test_graph_invalid_maximum(self):
        rc, out, err = self.run_cli("graph", "1", "2", "--max", "0", "--no-color")
        self.assertEqual(rc, 2)
        self.assertEqual(out, "")
        self.assertIn("positive finite", err)

    def test_graph_colored(self):
        rc, out, _ = self.run_cli("graph", "50", "--width", "2", "--height", "1", "--color", "--theme", "nord")
        self.assertEqual(rc, 0)
        self.assertIn("\033[38;2;", out)

    def test_meter_plain(self):
        rc, out, _ = self.run_cli("meter", "50", "--width", "4", "--no-color")
        self.assertEqual(rc, 0)
        self.assertEqual(out, "■■░░\n")

    def test_themes_list(self):
        rc, out, _ = self.run_cli("themes", "list")
        self.assertEqual(rc, 0)
        payload = json.loads(out)
        self.assertEqual(payload["active"], "default")
        self.assertIn("dracula", payload["themes"])

    def test_themes_show_unknown(self):
        rc, _, err = self.run_cli("themes", "show", "nonexistent")
        self.assertEqual(rc, 2)
        self.assertIn("nonexistent", err)

    def test_themes_show_json(self):
        rc, out, _ = self.run_cli("themes", "show", "default")
        self.assertEqual(rc, 0)
        payload = json.loads(out)
        self.assertEqual(payload["main_fg"], "#cccccc")
        self.assertEqual(payload["warnings"], [])

    def test_preview_synthetic(self):
        rc, out, _ = self.run_cli("preview", "--width", "30", "--no-color")
        self.assertEqual(rc, 0)
        lines = out.splitlines()
        self.assertEqual(len(lines), 14)
        self.assertTrue(all(len(line) == 30 for line in lines))

    def test_config_init_refuses_overwrite(self):
        rc, out, _ = self.run_cli("config", "init")
        self.assertEqual(rc, 0)
        self.assertTrue(Path(self.config).exists())
        rc, _, err = self.run_cli("config", "init")
        self.assertEqual(rc, 1)
        self.assertIn("--force", err)

    def test_config_path(self):
        rc, out, _ = self.run_cli("config", "path")
        self.assertEqual(rc, 0)
        self.assertEqual(out.strip(), self.config)


if __name__ == "__main__":
    unittest.main()
