from __future__ import annotations

from pathlib import Path
import tempfile
import unittest

from tickchart import chart_from_config, create_chart, load_chart_config


_CONFIG = """
[chart]
handle_scale = false

[chart.layout]
text_color = "#EEEEEE"

[series.price]
type = "Candlestick"
wick_color = "#737375"

[series.volume]
type = "Histogram"
price_scale_id = ""
"""


class ChartConfigTests(unittest.TestCase):
    def _write(self, tmp: str, text: str) -> Path:
        path = Path(tmp) / "chart.toml"
        path.write_text(text, encoding="utf-8")
        return path

    def test_load_chart_and_series_tables(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config = load_chart_config(self._write(tmp, _CONFIG))
        self.assertFalse(config.chart["handle_scale"])
        self.assertEqual([s.name for s in config.series], ["price", "volume"])
        self.assertEqual(config.series[0].series_type, "Candlestick")
        self.assertNotIn("type", config.series[0].options)

    def test_chart_from_config_builds_series(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            chart, handles = chart_from_config(self._write(tmp, _CONFIG), {"handle_scale": {"pinch": True}})
        options = chart.options()
        self.assertEqual(options["layout"]["text_color"], "#EEEEEE")
        self.assertTrue(options["handle_scale"]["pinch"])
        self.assertFalse(options["handle_scale"]["mouse_wheel"])
        self.assertEqual(handles["price"].series_type(), "Candlestick")
        self.assertEqual(handles["price"].options()["wick_down_color"], "#737375")
        self.assertEqual(handles["volume"].options()["price_scale_id"], "")

    def test_create_chart_with_config_path(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            chart = create_chart(config_path=self._write(tmp, _CONFIG))
        self.assertEqual(len(chart.series()), 2)

    def test_missing_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(FileNotFoundError):
                load_chart_config(Path(tmp) / "nope.toml")

    def test_bad_series_type(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(ValueError):
                load_chart_config(self._write(tmp, '[series.x]\ntype = "Renko"\n'))

    def test_chart_must_be_a_table(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(ValueError):
                load_chart_config(self._write(tmp, 'chart = 3\n'))


if __name__ == "__main__":
    unittest.main()
