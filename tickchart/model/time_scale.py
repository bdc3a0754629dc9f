from __future__ import annotations

import logging

import numpy as np

from .rows import TimePoint


LOGGER = logging.getLogger(__name__)


class TimeScale:
    """Shared logical-index axis. Index `i` is `points[i]`."""

    def __init__(self) -> None:
        self._base_index: int | None = None
        self._points: tuple[TimePoint, ...] = ()
        self._timestamps = np.empty(0, dtype=np.int64)
        self._first_changed_index: int | None = None
        self._update_count = 0

    @property
    def base_index(self) -> int | None:
        return self._base_index

    @property
    def points(self) -> tuple[TimePoint, ...]:
        return self._points

    @property
    def first_changed_index(self) -> int | None:
        return self._first_changed_index

    @property
    def update_count(self) -> int:
        return self._update_count

    def update(self, base_index: int | None, points: tuple[TimePoint, ...], first_changed_index: int | None) -> None:
        LOGGER.debug(
            "time scale update: base_index=%s points=%d first_changed=%s", base_index, len(points), first_changed_index
        )
        self._base_index = base_index
        self._points = tuple(points)
        self._timestamps = np.fromiter((p.timestamp for p in self._points), dtype=np.int64, count=len(self._points))
        self._first_changed_index = first_changed_index
        self._update_count += 1

    def time_at(self, index: int) -> TimePoint | None:
        if 0 <= index < len(self._points):
            return self._points[index]
        return None

    def index_of(self, timestamp: int) -> int | None:
        pos = int(np.searchsorted(self._timestamps, timestamp))
        if pos < self._timestamps.size and int(self._timestamps[pos]) == timestamp:
            return pos
        return None
