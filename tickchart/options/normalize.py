from __future__ import annotations

from collections.abc import Mapping
import copy
from dataclasses import is_dataclass
import logging
from typing import TYPE_CHECKING, Any

from .defaults import (
    CHART_OPTIONS_DEFAULTS,
    CUSTOM_STYLE_DEFAULTS,
    SERIES_OPTIONS_DEFAULTS,
    defaults_layer,
    style_defaults_for,
)

if TYPE_CHECKING:
    from tickchart.custom import CustomSeriesDefinition


LOGGER = logging.getLogger(__name__)

_AXIS_SUB_TOGGLES = ("axis_double_click_reset", "axis_pressed_mouse_move")


def deep_merge(dst: dict[str, Any], *sources: Mapping[str, Any] | None) -> dict[str, Any]:
    """Merge `sources` into `dst` left to right; later sources win.

    Nested mappings merge key by key. Any other value (scalars, lists, callables)
    replaces whatever `dst` holds. `dst` is modified in place and returned.
    """

    for src in sources:
        if not src:
            continue
        for key, value in src.items():
            current = dst.get(key)
            if isinstance(value, Mapping) and isinstance(current, dict):
                deep_merge(current, value)
            elif isinstance(value, Mapping):
                dst[key] = deep_merge({}, value)
            else:
                dst[key] = copy.deepcopy(value)
    return dst


def precision_by_min_move(min_move: float) -> int:
    if min_move >= 1:
        return 0
    value = float(min_move)
    digits = 0
    while digits < 8:
        if abs(round(value) - value) < 1e-8:
            return digits
        value *= 10
        digits += 1
    return digits


def patch_price_format(price_format: dict[str, Any] | None) -> None:
    if price_format is None or price_format.get("type") == "custom":
        return
    if price_format.get("min_move") is not None and price_format.get("precision") is None:
        price_format["precision"] = precision_by_min_move(price_format["min_move"])


def fill_up_down_candlestick_colors(options: dict[str, Any]) -> None:
    if options.get("border_color") is not None:
        options["border_up_color"] = options["border_color"]
        options["border_down_color"] = options["border_color"]
    if options.get("wick_color") is not None:
        options["wick_up_color"] = options["wick_color"]
        options["wick_down_color"] = options["wick_color"]


def migrate_handle_scale_scroll(options: Mapping[str, Any]) -> dict[str, Any]:
    """Expand the boolean shorthands of `handle_scale`/`handle_scroll` into structured form.

    Runs before merging so a caller can still override single expanded fields in
    the same partial. Already-structured values pass through unchanged.
    """

    out = copy.deepcopy(dict(options))

    if "handle_scale" in out:
        handle_scale = out["handle_scale"]
        if isinstance(handle_scale, bool):
            out["handle_scale"] = {
                "axis_double_click_reset": {"time": handle_scale, "price": handle_scale},
                "axis_pressed_mouse_move": {"time": handle_scale, "price": handle_scale},
                "mouse_wheel": handle_scale,
                "pinch": handle_scale,
            }
        elif isinstance(handle_scale, Mapping):
            scale = dict(handle_scale)
            for key in _AXIS_SUB_TOGGLES:
                if key not in scale:
                    continue
                toggle = scale[key]
                if isinstance(toggle, bool):
                    scale[key] = {"time": toggle, "price": toggle}
                elif not isinstance(toggle, Mapping):
                    LOGGER.warning("ignoring malformed handle_scale.%s shorthand: %r", key, toggle)
                    del scale[key]
            out["handle_scale"] = scale
        else:
            LOGGER.warning("ignoring malformed handle_scale shorthand: %r", handle_scale)
            del out["handle_scale"]

    if "handle_scroll" in out:
        handle_scroll = out["handle_scroll"]
        if isinstance(handle_scroll, bool):
            out["handle_scroll"] = {
                "horz_touch_drag": handle_scroll,
                "vert_touch_drag": handle_scroll,
                "mouse_wheel": handle_scroll,
                "pressed_mouse_move": handle_scroll,
            }
        elif not isinstance(handle_scroll, Mapping):
            LOGGER.warning("ignoring malformed handle_scroll shorthand: %r", handle_scroll)
            del out["handle_scroll"]

    return out


def normalize(
    raw_partial: Mapping[str, Any] | None,
    style_defaults: Mapping[str, Any] | Any,
    generic_defaults: Mapping[str, Any] | Any,
) -> dict[str, Any]:
    """Strict series options: generic defaults <- style defaults <- caller overrides."""

    partial = copy.deepcopy(dict(raw_partial or {}))
    price_format = partial.get("price_format")
    if isinstance(price_format, Mapping):
        price_format = dict(price_format)
        patch_price_format(price_format)
        partial["price_format"] = price_format
    return deep_merge(_as_layer(generic_defaults), _as_layer(style_defaults), partial)


def normalize_series_options(series_type: str, raw_partial: Mapping[str, Any] | None = None) -> dict[str, Any]:
    partial = copy.deepcopy(dict(raw_partial or {}))
    if series_type == "Candlestick":
        fill_up_down_candlestick_colors(partial)
    return normalize(partial, style_defaults_for(series_type), SERIES_OPTIONS_DEFAULTS)


def normalize_custom_series_options(
    definition: CustomSeriesDefinition,
    raw_partial: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Like `normalize_series_options`, with the definition's defaults layered over the custom style."""

    style = deep_merge(defaults_layer(CUSTOM_STYLE_DEFAULTS), definition.default_options())
    return normalize(raw_partial, style, SERIES_OPTIONS_DEFAULTS)


def normalize_chart_options(
    raw_partial: Mapping[str, Any] | None = None,
    defaults: Mapping[str, Any] | Any = CHART_OPTIONS_DEFAULTS,
) -> dict[str, Any]:
    return deep_merge(_as_layer(defaults), migrate_handle_scale_scroll(raw_partial or {}))


def merge_chart_options(current: Mapping[str, Any], raw_partial: Mapping[str, Any]) -> dict[str, Any]:
    return deep_merge(copy.deepcopy(dict(current)), migrate_handle_scale_scroll(raw_partial))


def _as_layer(value: Mapping[str, Any] | Any) -> dict[str, Any]:
    if is_dataclass(value) and not isinstance(value, type):
        return defaults_layer(value)
    return copy.deepcopy(dict(value))
