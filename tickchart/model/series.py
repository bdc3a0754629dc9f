from __future__ import annotations

from collections.abc import Mapping
import copy
from typing import TYPE_CHECKING, Any

import numpy as np

from tickchart.options import deep_merge

from .rows import SeriesPlotRow

if TYPE_CHECKING:
    from tickchart.custom import CustomSeriesDefinition
    from tickchart.data.data_layer import SeriesUpdateInfo


class Series:
    """Model-side series: type tag, merged options and plot rows.

    Hashes by identity; `series_id` is the model's arena index for it.
    """

    def __init__(
        self,
        series_id: int,
        series_type: str,
        options: Mapping[str, Any],
        definition: CustomSeriesDefinition | None = None,
    ) -> None:
        self.series_id = series_id
        self._series_type = series_type
        self._definition = definition
        self._options = copy.deepcopy(dict(options))
        self._rows: tuple[SeriesPlotRow, ...] = ()
        self._rows_by_index: dict[int, SeriesPlotRow] = {}
        self._last_update_info: SeriesUpdateInfo | None = None
        self._price_range: tuple[float, float] | None = None

    def __repr__(self) -> str:
        return f"Series(id={self.series_id}, type={self._series_type!r}, rows={len(self._rows)})"

    def series_type(self) -> str:
        return self._series_type

    def custom_definition(self) -> CustomSeriesDefinition | None:
        return self._definition

    def options(self) -> dict[str, Any]:
        return copy.deepcopy(self._options)

    def apply_options(self, partial: Mapping[str, Any]) -> None:
        self._options = deep_merge(copy.deepcopy(self._options), partial)

    def set_data(self, rows: tuple[SeriesPlotRow, ...], info: SeriesUpdateInfo | None = None) -> None:
        self._rows = tuple(rows)
        self._rows_by_index = {row.index: row for row in self._rows}
        self._last_update_info = info

    def rows(self) -> tuple[SeriesPlotRow, ...]:
        return self._rows

    def row_at(self, index: int) -> SeriesPlotRow | None:
        return self._rows_by_index.get(index)

    def last_update_info(self) -> SeriesUpdateInfo | None:
        return self._last_update_info

    def price_range(self) -> tuple[float, float] | None:
        return self._price_range

    def recalculate(self) -> None:
        values = np.asarray([row.value for row in self._rows if row.value is not None], dtype=np.float64)
        if values.size == 0:
            self._price_range = None
            return
        self._price_range = (float(np.min(values[:, 2])), float(np.max(values[:, 1])))
