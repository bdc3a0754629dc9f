from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
import tomllib
from typing import Any

from .options import SERIES_TYPES


@dataclass(frozen=True)
class SeriesConfig:
    name: str
    series_type: str
    options: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ChartConfig:
    chart: dict[str, Any] = field(default_factory=dict)
    series: tuple[SeriesConfig, ...] = ()


def load_chart_config(path: str | Path) -> ChartConfig:
    """Read chart and series options from a TOML file.

    Layout::

        [chart]
        handle_scale = false

        [series.price]
        type = "Candlestick"
        wick_color = "#737375"
    """

    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"chart config not found: {config_path}")
    with config_path.open("rb") as f:
        raw = tomllib.load(f)

    chart = _coerce_table(raw.get("chart", {}), "chart")
    series_tables = _coerce_table(raw.get("series", {}), "series")
    series: list[SeriesConfig] = []
    for name, table in series_tables.items():
        options = dict(_coerce_table(table, f"series.{name}"))
        series_type = options.pop("type", None)
        if series_type not in SERIES_TYPES:
            raise ValueError(f"series.{name}.type must be one of {', '.join(SERIES_TYPES)}")
        series.append(SeriesConfig(name=name, series_type=series_type, options=options))
    return ChartConfig(chart=chart, series=tuple(series))


def _coerce_table(value: object, field_name: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise ValueError(f"{field_name} must be a table")
    return value
