from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any

import pandas as pd

if TYPE_CHECKING:
    from .chart_api import ChartApi


class SeriesApi:
    """Public handle for one series.

    Holds no model state of its own; every call goes back through the chart,
    which resolves the handle in its registry.
    """

    def __init__(self, chart: "ChartApi", series_type: str) -> None:
        self._chart = chart
        self._series_type = series_type

    def __repr__(self) -> str:
        return f"SeriesApi(type={self._series_type!r}, id=0x{id(self):x})"

    def series_type(self) -> str:
        return self._series_type

    def set_data(self, data: Iterable[Any] | pd.DataFrame) -> None:
        self._chart.apply_new_data(self, data)

    def update(self, item: Mapping[str, Any] | Any) -> None:
        self._chart.update_data(self, item)

    def apply_options(self, options: Mapping[str, Any]) -> None:
        self._chart.apply_series_options(self, options)

    def options(self) -> dict[str, Any]:
        return self._chart.series_options(self)
