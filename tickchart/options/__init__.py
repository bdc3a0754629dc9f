from .defaults import (
    CHART_OPTIONS_DEFAULTS,
    CUSTOM_STYLE_DEFAULTS,
    SERIES_OPTIONS_DEFAULTS,
    SERIES_TYPES,
    STYLE_DEFAULTS,
    ChartOptionsDefaults,
    SeriesOptionsDefaults,
    SeriesType,
    style_defaults_for,
)
from .normalize import (
    deep_merge,
    fill_up_down_candlestick_colors,
    merge_chart_options,
    migrate_handle_scale_scroll,
    normalize,
    normalize_chart_options,
    normalize_custom_series_options,
    normalize_series_options,
    patch_price_format,
    precision_by_min_move,
)

__all__ = [
    "CHART_OPTIONS_DEFAULTS",
    "CUSTOM_STYLE_DEFAULTS",
    "ChartOptionsDefaults",
    "SERIES_OPTIONS_DEFAULTS",
    "SERIES_TYPES",
    "STYLE_DEFAULTS",
    "SeriesOptionsDefaults",
    "SeriesType",
    "deep_merge",
    "fill_up_down_candlestick_colors",
    "merge_chart_options",
    "migrate_handle_scale_scroll",
    "normalize",
    "normalize_chart_options",
    "normalize_custom_series_options",
    "normalize_series_options",
    "patch_price_format",
    "precision_by_min_move",
    "style_defaults_for",
]
