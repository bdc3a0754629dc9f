from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
import logging
from typing import TYPE_CHECKING, Any

import numpy as np

from tickchart.errors import ChartDataError
from tickchart.model.rows import SeriesPlotRow, TimePoint

from .items import DataItem, parse_custom_item, parse_data_item

if TYPE_CHECKING:
    from tickchart.model.series import Series


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class TimeScaleUpdate:
    base_index: int | None
    points: tuple[TimePoint, ...]
    first_changed_point_index: int | None = None


@dataclass(frozen=True)
class SeriesUpdateInfo:
    last_bar_updated_only: bool = False


@dataclass(frozen=True)
class SeriesChanges:
    data: tuple[SeriesPlotRow, ...]
    info: SeriesUpdateInfo | None = None


@dataclass(frozen=True)
class DataUpdateResponse:
    time_scale: TimeScaleUpdate
    series: dict["Series", SeriesChanges] = field(default_factory=dict)


@dataclass
class _SeriesEntry:
    series: "Series"
    items: list[DataItem]

    def timestamps(self) -> np.ndarray:
        return np.fromiter((item.time.timestamp for item in self.items), dtype=np.int64, count=len(self.items))


class DataLayer:
    """Keeps every series' data on one shared time axis.

    The axis is the sorted union of all series' times. Each write returns the new
    axis plus full plot rows for every series whose rows were written or whose
    logical indices moved because the axis changed underneath them.
    """

    def __init__(self) -> None:
        self._entries: dict[int, _SeriesEntry] = {}
        self._points: tuple[TimePoint, ...] = ()
        self._timestamps = np.empty(0, dtype=np.int64)

    @property
    def points(self) -> tuple[TimePoint, ...]:
        return self._points

    def series_items(self, series: "Series") -> tuple[DataItem, ...]:
        entry = self._entries.get(series.series_id)
        return () if entry is None else tuple(entry.items)

    def set_series_data(self, series: "Series", data: Iterable[Any]) -> DataUpdateResponse:
        items = [_parse_item(series, raw) for raw in data]
        for index, (prev, cur) in enumerate(zip(items, items[1:]), start=1):
            if cur.time.timestamp <= prev.time.timestamp:
                raise ChartDataError(
                    f"data must be asc ordered by time, index={index}, "
                    f"time={cur.time.timestamp}, prev time={prev.time.timestamp}"
                )
        self._entries[series.series_id] = _SeriesEntry(series=series, items=items)
        return self._rebuild(written=series)

    def update_series_data(self, series: "Series", data: Any) -> DataUpdateResponse:
        item = _parse_item(series, data)
        entry = self._entries.setdefault(series.series_id, _SeriesEntry(series=series, items=[]))
        last_bar_updated_only = False
        if entry.items:
            last_time = entry.items[-1].time.timestamp
            if item.time.timestamp < last_time:
                raise ChartDataError(
                    f"cannot update oldest data, last time={last_time}, new time={item.time.timestamp}"
                )
            if item.time.timestamp == last_time:
                entry.items[-1] = item
                last_bar_updated_only = True
            else:
                entry.items.append(item)
        else:
            entry.items.append(item)
        return self._rebuild(
            written=series,
            info=SeriesUpdateInfo(last_bar_updated_only=last_bar_updated_only),
        )

    def remove_series(self, series: "Series") -> DataUpdateResponse:
        self._entries.pop(series.series_id, None)
        return self._rebuild(written=None)

    def destroy(self) -> None:
        self._entries.clear()
        self._points = ()
        self._timestamps = np.empty(0, dtype=np.int64)

    def _rebuild(self, *, written: "Series" | None, info: SeriesUpdateInfo | None = None) -> DataUpdateResponse:
        old_timestamps = self._timestamps
        by_timestamp: dict[int, TimePoint] = {point.timestamp: point for point in self._points}
        per_series: dict[int, np.ndarray] = {}
        for series_id, entry in self._entries.items():
            per_series[series_id] = entry.timestamps()
            for item in entry.items:
                by_timestamp.setdefault(item.time.timestamp, item.time)

        if per_series:
            new_timestamps = np.unique(np.concatenate(list(per_series.values())))
        else:
            new_timestamps = np.empty(0, dtype=np.int64)
        points = tuple(by_timestamp[int(ts)] for ts in new_timestamps)
        first_changed = _first_difference(old_timestamps, new_timestamps)

        changes: dict["Series", SeriesChanges] = {}
        base_index: int | None = None
        for series_id, entry in self._entries.items():
            indices = np.searchsorted(new_timestamps, per_series[series_id])
            real = [i for i, item in enumerate(entry.items) if not item.is_whitespace]
            if real:
                last_real = int(indices[real[-1]])
                base_index = last_real if base_index is None else max(base_index, last_real)

            is_written = written is not None and entry.series is written
            shifted = (
                first_changed is not None
                and first_changed < old_timestamps.size
                and bool(np.any(np.isin(per_series[series_id], old_timestamps[first_changed:])))
            )
            if not is_written and not shifted:
                continue
            rows = tuple(
                SeriesPlotRow(
                    index=int(indices[i]),
                    time=points[int(indices[i])],
                    value=entry.items[i].value,
                    style=dict(entry.items[i].style),
                    payload=entry.items[i].payload,
                )
                for i in real
            )
            changes[entry.series] = SeriesChanges(data=rows, info=info if is_written else None)

        self._points = points
        self._timestamps = new_timestamps
        LOGGER.debug(
            "data layer rebuilt: points=%d first_changed=%s base_index=%s changed_series=%d",
            len(points),
            first_changed,
            base_index,
            len(changes),
        )
        return DataUpdateResponse(
            time_scale=TimeScaleUpdate(
                base_index=base_index,
                points=points,
                first_changed_point_index=first_changed,
            ),
            series=changes,
        )


def _first_difference(old: np.ndarray, new: np.ndarray) -> int | None:
    n = min(old.size, new.size)
    mismatch = np.nonzero(old[:n] != new[:n])[0]
    if mismatch.size:
        return int(mismatch[0])
    if old.size != new.size:
        return n
    return None


def _parse_item(series: "Series", raw: Any) -> DataItem:
    definition = series.custom_definition()
    if definition is not None:
        return parse_custom_item(definition, raw)
    return parse_data_item(series.series_type(), raw)
