from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from tickchart.chart_api import ChartApi
from tickchart.config import load_chart_config
from tickchart.options import deep_merge, migrate_handle_scale_scroll
from tickchart.series_api import SeriesApi


def create_chart(
    options: Mapping[str, Any] | None = None,
    *,
    config_path: str | Path | None = None,
) -> ChartApi:
    if config_path is None:
        return ChartApi(options)
    chart, _ = chart_from_config(config_path, options)
    return chart


def chart_from_config(
    config_path: str | Path,
    options: Mapping[str, Any] | None = None,
) -> tuple[ChartApi, dict[str, SeriesApi]]:
    """Build a chart from a TOML config; explicit `options` win over the file's [chart] table."""

    config = load_chart_config(config_path)
    merged = deep_merge(migrate_handle_scale_scroll(config.chart), migrate_handle_scale_scroll(options or {}))
    chart = ChartApi(merged)
    handles = {entry.name: chart.add_series(entry.series_type, entry.options) for entry in config.series}
    return chart, handles
