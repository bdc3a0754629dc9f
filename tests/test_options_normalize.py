from __future__ import annotations

import unittest

from tickchart.options import (
    SERIES_OPTIONS_DEFAULTS,
    migrate_handle_scale_scroll,
    normalize,
    normalize_chart_options,
    normalize_series_options,
    patch_price_format,
    precision_by_min_move,
)


class PriceFormatTests(unittest.TestCase):
    def test_min_move_without_precision_derives_precision(self) -> None:
        price_format = {"min_move": 0.01}
        patch_price_format(price_format)
        self.assertEqual(price_format["precision"], 2)

    def test_custom_format_passes_through_untouched(self) -> None:
        price_format = {"min_move": 0.01, "type": "custom"}
        patch_price_format(price_format)
        self.assertEqual(price_format, {"min_move": 0.01, "type": "custom"})

    def test_explicit_precision_is_kept(self) -> None:
        price_format = {"min_move": 0.01, "precision": 5}
        patch_price_format(price_format)
        self.assertEqual(price_format["precision"], 5)

    def test_precision_by_min_move(self) -> None:
        self.assertEqual(precision_by_min_move(1), 0)
        self.assertEqual(precision_by_min_move(5), 0)
        self.assertEqual(precision_by_min_move(0.25), 2)
        self.assertEqual(precision_by_min_move(0.001), 3)
        self.assertEqual(precision_by_min_move(0.00001), 5)

    def test_series_normalization_applies_price_format_rule(self) -> None:
        options = normalize_series_options("Line", {"price_format": {"min_move": 0.001}})
        self.assertEqual(options["price_format"], {"type": "price", "precision": 3, "min_move": 0.001})


class LayeredMergeTests(unittest.TestCase):
    def test_priority_generic_then_style_then_partial(self) -> None:
        options = normalize(
            {"color": "red"},
            {"color": "blue", "line_width": 3},
            {"title": "", "color": "black", "visible": True},
        )
        self.assertEqual(options, {"title": "", "color": "red", "visible": True, "line_width": 3})

    def test_nested_groups_merge_key_by_key(self) -> None:
        options = normalize({"price_format": {"precision": 4}}, {}, SERIES_OPTIONS_DEFAULTS)
        self.assertEqual(options["price_format"], {"type": "price", "precision": 4, "min_move": 0.01})
        self.assertEqual(options["price_scale_id"], "right")

    def test_caller_partial_is_not_mutated(self) -> None:
        partial = {"price_format": {"min_move": 0.5}}
        normalize(partial, {}, SERIES_OPTIONS_DEFAULTS)
        self.assertEqual(partial, {"price_format": {"min_move": 0.5}})

    def test_candlestick_shared_colors_fill_up_and_down(self) -> None:
        options = normalize_series_options("Candlestick", {"wick_color": "#000000", "border_color": "#111111"})
        self.assertEqual(options["wick_up_color"], "#000000")
        self.assertEqual(options["wick_down_color"], "#000000")
        self.assertEqual(options["border_up_color"], "#111111")
        self.assertEqual(options["border_down_color"], "#111111")

    def test_unknown_series_type_rejected(self) -> None:
        with self.assertRaises(ValueError):
            normalize_series_options("Renko", {})


class LegacyScaleMigrationTests(unittest.TestCase):
    def test_handle_scale_true_expands_every_toggle(self) -> None:
        migrated = migrate_handle_scale_scroll({"handle_scale": True})
        self.assertEqual(
            migrated["handle_scale"],
            {
                "axis_double_click_reset": {"time": True, "price": True},
                "axis_pressed_mouse_move": {"time": True, "price": True},
                "mouse_wheel": True,
                "pinch": True,
            },
        )

    def test_handle_scroll_false_expands_every_toggle(self) -> None:
        options = normalize_chart_options({"handle_scroll": False})
        self.assertEqual(
            options["handle_scroll"],
            {"mouse_wheel": False, "pressed_mouse_move": False, "horz_touch_drag": False, "vert_touch_drag": False},
        )

    def test_nested_sub_toggles_expand_and_stay_overridable(self) -> None:
        options = normalize_chart_options(
            {
                "handle_scale": {
                    "axis_pressed_mouse_move": False,
                    "axis_double_click_reset": {"time": False},
                }
            }
        )
        handle_scale = options["handle_scale"]
        self.assertEqual(handle_scale["axis_pressed_mouse_move"], {"time": False, "price": False})
        self.assertEqual(handle_scale["axis_double_click_reset"], {"time": False, "price": True})
        self.assertTrue(handle_scale["mouse_wheel"])
        self.assertTrue(handle_scale["pinch"])

    def test_migration_is_idempotent(self) -> None:
        raw = {"handle_scale": False, "handle_scroll": True}
        once = migrate_handle_scale_scroll(raw)
        self.assertEqual(migrate_handle_scale_scroll(once), once)
        normalized = normalize_chart_options(raw)
        self.assertEqual(normalize_chart_options(normalized), normalized)

    def test_migration_does_not_mutate_input(self) -> None:
        raw = {"handle_scale": {"axis_pressed_mouse_move": True}}
        migrate_handle_scale_scroll(raw)
        self.assertEqual(raw, {"handle_scale": {"axis_pressed_mouse_move": True}})

    def test_malformed_shorthand_is_dropped_with_warning(self) -> None:
        with self.assertLogs("tickchart.options.normalize", level="WARNING") as logs:
            options = normalize_chart_options({"handle_scale": "yes", "handle_scroll": 1})
        self.assertEqual(len(logs.records), 2)
        self.assertTrue(options["handle_scale"]["pinch"])
        self.assertTrue(options["handle_scroll"]["mouse_wheel"])


if __name__ == "__main__":
    unittest.main()
