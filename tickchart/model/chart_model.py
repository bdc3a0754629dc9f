from __future__ import annotations

from collections.abc import Mapping
import copy
import logging
from typing import TYPE_CHECKING, Any, Callable

from tickchart.delegate import Delegate
from tickchart.options import merge_chart_options

from .rows import TimePoint
from .series import Series
from .snapshot import MouseEventSnapshot
from .time_scale import TimeScale

if TYPE_CHECKING:
    from tickchart.custom import CustomSeriesDefinition


LOGGER = logging.getLogger(__name__)

SnapshotSupplier = Callable[[], MouseEventSnapshot]


class ChartModel:
    """In-memory chart model: owns the series collection and the shared time axis.

    Raw interactions are published on `clicked()` / `crosshair_moved()` as
    zero-argument suppliers so subscribers decide whether to build the snapshot.
    """

    def __init__(self, options: Mapping[str, Any]) -> None:
        self._options = copy.deepcopy(dict(options))
        self._series: list[Series] = []
        self._next_series_id = 1
        self._time_scale = TimeScale()
        self._clicked = Delegate()
        self._crosshair_moved = Delegate()
        self._recalculation_count = 0

    def options(self) -> dict[str, Any]:
        return copy.deepcopy(self._options)

    def apply_options(self, partial: Mapping[str, Any]) -> None:
        self._options = merge_chart_options(self._options, partial)

    def series(self) -> tuple[Series, ...]:
        return tuple(self._series)

    def time_scale(self) -> TimeScale:
        return self._time_scale

    @property
    def recalculation_count(self) -> int:
        return self._recalculation_count

    def create_series(
        self,
        series_type: str,
        options: Mapping[str, Any],
        definition: CustomSeriesDefinition | None = None,
    ) -> Series:
        series = Series(self._next_series_id, series_type, options, definition)
        self._next_series_id += 1
        self._series.append(series)
        return series

    def remove_series(self, series: Series) -> None:
        for i, owned in enumerate(self._series):
            if owned is series:
                del self._series[i]
                return
        raise ValueError(f"series is not owned by this model: {series!r}")

    def update_time_scale(
        self,
        base_index: int | None,
        points: tuple[TimePoint, ...],
        first_changed_index: int | None,
    ) -> None:
        self._time_scale.update(base_index, points, first_changed_index)

    def recalculate_all_panes(self) -> None:
        for series in self._series:
            series.recalculate()
        self._recalculation_count += 1

    def clicked(self) -> Delegate:
        return self._clicked

    def crosshair_moved(self) -> Delegate:
        return self._crosshair_moved

    def emit_click(
        self,
        index: int | None,
        point: tuple[float, float] | None = None,
        *,
        hovered_series: Series | None = None,
        hovered_object_id: object | None = None,
        source_event: object | None = None,
    ) -> None:
        self._clicked.fire(self._snapshot_supplier(index, point, hovered_series, hovered_object_id, source_event))

    def emit_crosshair_move(
        self,
        index: int | None,
        point: tuple[float, float] | None = None,
        *,
        hovered_series: Series | None = None,
        hovered_object_id: object | None = None,
        source_event: object | None = None,
    ) -> None:
        self._crosshair_moved.fire(
            self._snapshot_supplier(index, point, hovered_series, hovered_object_id, source_event)
        )

    def destroy(self) -> None:
        self._clicked.destroy()
        self._crosshair_moved.destroy()
        self._series.clear()
        LOGGER.debug("chart model destroyed")

    def _snapshot_supplier(
        self,
        index: int | None,
        point: tuple[float, float] | None,
        hovered_series: Series | None,
        hovered_object_id: object | None,
        source_event: object | None,
    ) -> SnapshotSupplier:
        def build() -> MouseEventSnapshot:
            time_point = None if index is None else self._time_scale.time_at(index)
            series_data = {}
            if time_point is not None:
                for series in self._series:
                    row = series.row_at(index)
                    if row is not None and not row.is_whitespace:
                        series_data[series] = row
            return MouseEventSnapshot(
                time=None if time_point is None else time_point.original_time,
                index=index,
                point=point,
                hovered_series=hovered_series,
                hovered_object_id=hovered_object_id,
                series_data=series_data,
                source_event=source_event,
            )

        return build
