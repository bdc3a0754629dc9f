from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Literal


SeriesType = Literal["Line", "Area", "Baseline", "Bar", "Candlestick", "Histogram"]
SERIES_TYPES: tuple[SeriesType, ...] = ("Line", "Area", "Baseline", "Bar", "Candlestick", "Histogram")


@dataclass(frozen=True)
class AxisToggles:
    time: bool = True
    price: bool = True


@dataclass(frozen=True)
class HandleScaleOptions:
    axis_double_click_reset: AxisToggles = field(default_factory=AxisToggles)
    axis_pressed_mouse_move: AxisToggles = field(default_factory=AxisToggles)
    mouse_wheel: bool = True
    pinch: bool = True


@dataclass(frozen=True)
class HandleScrollOptions:
    mouse_wheel: bool = True
    pressed_mouse_move: bool = True
    horz_touch_drag: bool = True
    vert_touch_drag: bool = True


@dataclass(frozen=True)
class KineticScrollOptions:
    touch: bool = True
    mouse: bool = False


@dataclass(frozen=True)
class LayoutOptions:
    background_color: str = "#FFFFFF"
    text_color: str = "#191919"
    font_size: int = 12
    font_family: str = "-apple-system, BlinkMacSystemFont, 'Trebuchet MS', Roboto, Ubuntu, sans-serif"


@dataclass(frozen=True)
class CrosshairLineOptions:
    color: str = "#9598A1"
    width: int = 1
    style: int = 3
    visible: bool = True
    label_visible: bool = True
    label_background_color: str = "#131722"


@dataclass(frozen=True)
class CrosshairOptions:
    mode: Literal["normal", "magnet"] = "magnet"
    vert_line: CrosshairLineOptions = field(default_factory=CrosshairLineOptions)
    horz_line: CrosshairLineOptions = field(default_factory=CrosshairLineOptions)


@dataclass(frozen=True)
class GridLineOptions:
    color: str = "#D6DCDE"
    style: int = 0
    visible: bool = True


@dataclass(frozen=True)
class GridOptions:
    vert_lines: GridLineOptions = field(default_factory=GridLineOptions)
    horz_lines: GridLineOptions = field(default_factory=GridLineOptions)


@dataclass(frozen=True)
class PriceScaleOptions:
    visible: bool = True
    auto_scale: bool = True
    mode: Literal["normal", "logarithmic", "percentage", "indexed_to_100"] = "normal"
    invert_scale: bool = False
    align_labels: bool = True
    border_visible: bool = True
    border_color: str = "#2B2B43"
    entire_text_only: bool = False
    ticks_visible: bool = False
    scale_margin_top: float = 0.2
    scale_margin_bottom: float = 0.1


@dataclass(frozen=True)
class TimeScaleOptions:
    right_offset: int = 0
    bar_spacing: float = 6.0
    min_bar_spacing: float = 0.5
    fix_left_edge: bool = False
    fix_right_edge: bool = False
    lock_visible_time_range_on_resize: bool = False
    right_bar_stays_on_scroll: bool = False
    border_visible: bool = True
    border_color: str = "#2B2B43"
    visible: bool = True
    time_visible: bool = False
    seconds_visible: bool = True
    shift_visible_range_on_new_bar: bool = True


@dataclass(frozen=True)
class ChartOptionsDefaults:
    width: int = 0
    height: int = 0
    auto_size: bool = False
    layout: LayoutOptions = field(default_factory=LayoutOptions)
    crosshair: CrosshairOptions = field(default_factory=CrosshairOptions)
    grid: GridOptions = field(default_factory=GridOptions)
    left_price_scale: PriceScaleOptions = field(default_factory=lambda: PriceScaleOptions(visible=False))
    right_price_scale: PriceScaleOptions = field(default_factory=PriceScaleOptions)
    time_scale: TimeScaleOptions = field(default_factory=TimeScaleOptions)
    handle_scroll: HandleScrollOptions = field(default_factory=HandleScrollOptions)
    handle_scale: HandleScaleOptions = field(default_factory=HandleScaleOptions)
    kinetic_scroll: KineticScrollOptions = field(default_factory=KineticScrollOptions)


@dataclass(frozen=True)
class PriceFormatDefaults:
    type: Literal["price", "volume", "percent", "custom"] = "price"
    precision: int = 2
    min_move: float = 0.01


@dataclass(frozen=True)
class SeriesOptionsDefaults:
    title: str = ""
    visible: bool = True
    last_value_visible: bool = True
    price_line_visible: bool = True
    price_line_source: Literal["last_bar", "last_visible"] = "last_bar"
    price_line_width: int = 1
    price_line_color: str = ""
    price_line_style: int = 2
    base_line_visible: bool = True
    base_line_width: int = 1
    base_line_color: str = "#B2B5BE"
    base_line_style: int = 0
    price_format: PriceFormatDefaults = field(default_factory=PriceFormatDefaults)
    price_scale_id: str = "right"


@dataclass(frozen=True)
class LineStyleDefaults:
    color: str = "#2196f3"
    line_style: int = 0
    line_width: int = 3
    line_type: int = 0
    line_visible: bool = True
    point_markers_visible: bool = False
    crosshair_marker_visible: bool = True
    crosshair_marker_radius: int = 4
    crosshair_marker_border_color: str = ""
    crosshair_marker_background_color: str = ""
    last_price_animation: int = 0


@dataclass(frozen=True)
class AreaStyleDefaults:
    top_color: str = "rgba( 46, 220, 135, 0.4)"
    bottom_color: str = "rgba( 40, 221, 100, 0)"
    invert_filled_area: bool = False
    line_color: str = "#33D778"
    line_style: int = 0
    line_width: int = 3
    line_type: int = 0
    line_visible: bool = True
    point_markers_visible: bool = False
    crosshair_marker_visible: bool = True
    crosshair_marker_radius: int = 4
    last_price_animation: int = 0


@dataclass(frozen=True)
class BaselineStyleDefaults:
    base_value_price: float = 0.0
    top_fill_color1: str = "rgba(38, 166, 154, 0.28)"
    top_fill_color2: str = "rgba(38, 166, 154, 0.05)"
    top_line_color: str = "rgba(38, 166, 154, 1)"
    bottom_fill_color1: str = "rgba(239, 83, 80, 0.05)"
    bottom_fill_color2: str = "rgba(239, 83, 80, 0.28)"
    bottom_line_color: str = "rgba(239, 83, 80, 1)"
    line_width: int = 3
    line_style: int = 0
    line_type: int = 0
    line_visible: bool = True
    point_markers_visible: bool = False
    crosshair_marker_visible: bool = True
    crosshair_marker_radius: int = 4
    last_price_animation: int = 0


@dataclass(frozen=True)
class BarStyleDefaults:
    up_color: str = "#26a69a"
    down_color: str = "#ef5350"
    open_visible: bool = True
    thin_bars: bool = True


@dataclass(frozen=True)
class CandlestickStyleDefaults:
    up_color: str = "#26a69a"
    down_color: str = "#ef5350"
    wick_visible: bool = True
    border_visible: bool = True
    border_color: str = "#378658"
    border_up_color: str = "#26a69a"
    border_down_color: str = "#ef5350"
    wick_color: str = "#737375"
    wick_up_color: str = "#26a69a"
    wick_down_color: str = "#ef5350"


@dataclass(frozen=True)
class HistogramStyleDefaults:
    color: str = "#26a69a"
    base: float = 0.0


@dataclass(frozen=True)
class CustomStyleDefaults:
    color: str = "#2196f3"


CHART_OPTIONS_DEFAULTS = ChartOptionsDefaults()
SERIES_OPTIONS_DEFAULTS = SeriesOptionsDefaults()
CUSTOM_STYLE_DEFAULTS = CustomStyleDefaults()

STYLE_DEFAULTS: dict[str, Any] = {
    "Line": LineStyleDefaults(),
    "Area": AreaStyleDefaults(),
    "Baseline": BaselineStyleDefaults(),
    "Bar": BarStyleDefaults(),
    "Candlestick": CandlestickStyleDefaults(),
    "Histogram": HistogramStyleDefaults(),
}


def defaults_layer(defaults: Any) -> dict[str, Any]:
    """Plain nested-dict copy of a defaults dataclass, ready to merge into."""

    return asdict(defaults)


def style_defaults_for(series_type: str) -> dict[str, Any]:
    try:
        return defaults_layer(STYLE_DEFAULTS[series_type])
    except KeyError as exc:
        raise ValueError(f"unknown series type: {series_type}") from exc
