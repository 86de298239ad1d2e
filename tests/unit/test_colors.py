import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from rtop_renderer.colors import Gradient, parse_color, parse_color_or
from rtop_renderer.errors import InvalidColor, InvalidGradient
from rtop_renderer.models import Color

BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)


class ParseColorTests(unittest.TestCase):
    def test_supported_forms(self):
        self.assertEqual(parse_color("#FF0000"), Color(255, 0, 0))
        self.assertEqual(parse_color("#f00"), Color(255, 0, 0))
        self.assertEqual(parse_color("#80"), Color(128, 128, 128))
        self.assertEqual(parse_color("  #00ff7F "), Color(0, 255, 127))

    def test_rejects_other_input(self):
        for bad in ("", "red", "#12345", "#ggg", "123456", "#1234567", None, 12):
            with self.subTest(bad=bad):
                with self.assertRaises(InvalidColor):
                    parse_color(bad)  # type: ignore[arg-type]

    def test_invalid_color_is_value_error(self):
        with self.assertRaises(ValueError):
            parse_color("#xyz")

    def test_fallback(self):
        self.assertEqual(parse_color_or("nope", WHITE), WHITE)
        self.assertEqual(parse_color_or("#000", WHITE), BLACK)

    def test_hex_property(self):
        self.assertEqual(parse_color("#AbC").hex, "#aabbcc")


class GradientTests(unittest.TestCase):
    def test_endpoints(self):
        a, b = Color(10, 200, 30), Color(250, 20, 90)
        gradient = Gradient.build([a, b])
        self.assertEqual(gradient.at(0), a)
        self.assertEqual(gradient.at(100), b)
        self.assertEqual(len(gradient), 101)
        self.assertEqual(gradient.step(0), a)
        self.assertEqual(gradient.step(100), b)

    def test_channels_monotonic(self):
        a, b = Color(10, 200, 30), Color(250, 20, 90)
        gradient = Gradient.build([a, b])
        colors = [gradient.at(p) for p in range(101)]
        for prev, cur in zip(colors, colors[1:]):
            self.assertLessEqual(prev.r, cur.r)
            self.assertGreaterEqual(prev.g, cur.g)
            self.assertLessEqual(prev.b, cur.b)

    def test_midpoint_rounds_half_up(self):
        gradient = Gradient.build([BLACK, Color(255, 0, 100)])
        self.assertEqual(gradient.at(50), Color(128, 0, 50))

    def test_three_anchor_segments(self):
        red, green, blue = Color(255, 0, 0), Color(0, 255, 0), Color(0, 0, 255)
        gradient = Gradient.build([red, green, blue])
        self.assertEqual(gradient.at(0), red)
        self.assertEqual(gradient.at(50), green)
        self.assertEqual(gradient.at(100), blue)
        self.assertEqual(gradient.at(25), Color(128, 128, 0))
        self.assertEqual(gradient.at(75), Color(0, 128, 128))

    def test_position_is_clamped(self):
        gradient = Gradient.build([BLACK, WHITE])
        self.assertEqual(gradient.at(-20), BLACK)
        self.assertEqual(gradient.at(180), WHITE)

    def test_step_table_matches_positions(self):
        gradient = Gradient.build([BLACK, WHITE], steps=5)
        self.assertEqual(len(gradient.colors), 5)
        self.assertEqual(gradient.step(1), gradient.at(25))
        self.assertEqual(gradient.step(4), WHITE)
        self.assertEqual(gradient.step(99), WHITE)

    def test_invalid_configuration(self):
        with self.assertRaises(InvalidGradient):
            Gradient.build([BLACK])
        with self.assertRaises(InvalidGradient):
            Gradient.build([BLACK, WHITE], steps=1)


if __name__ == "__main__":
    unittest.main()
