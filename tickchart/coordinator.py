from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol

from .data.data_layer import DataUpdateResponse
from .errors import ReentrantUpdateError, ensure
from .registry import SeriesRegistry

if TYPE_CHECKING:
    from .model.rows import TimePoint


LOGGER = logging.getLogger(__name__)


class UpdateTarget(Protocol):
    def update_time_scale(
        self,
        base_index: int | None,
        points: tuple["TimePoint", ...],
        first_changed_index: int | None,
    ) -> None:
        ...

    def recalculate_all_panes(self) -> None:
        ...


class UpdateCoordinator:
    """Applies one data layer response to the model as a single batch.

    Order: time axis first (later writes are expressed in its index space), then
    every series write, then exactly one recalculation. A batch started from
    inside another batch (e.g. from a notification handler) is rejected.
    """

    def __init__(self, registry: SeriesRegistry, model: UpdateTarget) -> None:
        self._registry = registry
        self._model = model
        self._applying = False
        self._batches_applied = 0

    @property
    def applying(self) -> bool:
        return self._applying

    @property
    def batches_applied(self) -> int:
        return self._batches_applied

    def apply_update(self, update: DataUpdateResponse) -> None:
        if self._applying:
            raise ReentrantUpdateError("apply_update called while another update batch is being applied")
        for series in update.series:
            ensure(
                self._registry.contains_series(series),
                f"changeset references a series the registry does not track: {series!r}",
            )

        self._applying = True
        try:
            time_scale = update.time_scale
            self._model.update_time_scale(
                time_scale.base_index,
                time_scale.points,
                time_scale.first_changed_point_index,
            )
            for series, changes in update.series.items():
                series.set_data(changes.data, changes.info)
            self._model.recalculate_all_panes()
        finally:
            self._applying = False
        self._batches_applied += 1
        LOGGER.debug(
            "applied update batch #%d: series=%d points=%d",
            self._batches_applied,
            len(update.series),
            len(update.time_scale.points),
        )
