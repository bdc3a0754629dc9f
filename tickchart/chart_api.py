from __future__ import annotations

from collections.abc import Iterable, Mapping
import copy
import logging
from typing import Any, Callable

import pandas as pd

from .coordinator import UpdateCoordinator
from .custom import CUSTOM_SERIES_TYPE, CustomSeriesDefinition
from .data import DataLayer, DataUpdateResponse, items_from_frame
from .delegate import NotificationBus
from .errors import ChartDataError, ChartDestroyedError, ReentrantUpdateError
from .events import EventTranslator, MouseEventParams
from .model import ChartModel
from .model.chart_model import SnapshotSupplier
from .options import (
    SERIES_TYPES,
    fill_up_down_candlestick_colors,
    normalize_chart_options,
    normalize_custom_series_options,
    normalize_series_options,
    patch_price_format,
)
from .registry import SeriesRegistry
from .series_api import SeriesApi


LOGGER = logging.getLogger(__name__)

MouseEventHandler = Callable[[MouseEventParams[SeriesApi]], None]


class ChartApi:
    """Public chart surface.

    Wires the model, the data layer, the handle registry, the update
    coordinator, the event translator and the notification bus together. All
    calls are synchronous and complete within the call.
    """

    def __init__(self, options: Mapping[str, Any] | None = None) -> None:
        self._model = ChartModel(normalize_chart_options(options))
        self._data_layer = DataLayer()
        self._registry: SeriesRegistry[SeriesApi] = SeriesRegistry()
        self._coordinator = UpdateCoordinator(self._registry, self._model)
        self._translator: EventTranslator[SeriesApi] = EventTranslator(self._registry)
        self._bus: NotificationBus[MouseEventParams[SeriesApi]] = NotificationBus()
        self._destroyed = False

        self._model.clicked().subscribe(self._on_model_click, owner=self)
        self._model.crosshair_moved().subscribe(self._on_model_crosshair_move, owner=self)

    @property
    def destroyed(self) -> bool:
        return self._destroyed

    def model(self) -> ChartModel:
        self._ensure_alive()
        return self._model

    def series(self) -> tuple[SeriesApi, ...]:
        return tuple(self._registry)

    def add_series(self, series_type: str, options: Mapping[str, Any] | None = None) -> SeriesApi:
        self._ensure_alive()
        if series_type not in SERIES_TYPES:
            raise ChartDataError(f"unknown series type: {series_type}")
        strict_options = normalize_series_options(series_type, options)
        series = self._model.create_series(series_type, strict_options)
        handle = SeriesApi(self, series_type)
        self._registry.register(handle, series)
        LOGGER.debug("added %s series id=%d", series_type, series.series_id)
        return handle

    def add_line_series(self, options: Mapping[str, Any] | None = None) -> SeriesApi:
        return self.add_series("Line", options)

    def add_area_series(self, options: Mapping[str, Any] | None = None) -> SeriesApi:
        return self.add_series("Area", options)

    def add_baseline_series(self, options: Mapping[str, Any] | None = None) -> SeriesApi:
        return self.add_series("Baseline", options)

    def add_bar_series(self, options: Mapping[str, Any] | None = None) -> SeriesApi:
        return self.add_series("Bar", options)

    def add_candlestick_series(self, options: Mapping[str, Any] | None = None) -> SeriesApi:
        return self.add_series("Candlestick", options)

    def add_histogram_series(self, options: Mapping[str, Any] | None = None) -> SeriesApi:
        return self.add_series("Histogram", options)

    def add_custom_series(
        self,
        definition: CustomSeriesDefinition,
        options: Mapping[str, Any] | None = None,
    ) -> SeriesApi:
        self._ensure_alive()
        if definition is None:
            raise ChartDataError("custom series needs a definition")
        strict_options = normalize_custom_series_options(definition, options)
        series = self._model.create_series(CUSTOM_SERIES_TYPE, strict_options, definition)
        handle = SeriesApi(self, CUSTOM_SERIES_TYPE)
        self._registry.register(handle, series)
        LOGGER.debug("added custom series id=%d", series.series_id)
        return handle

    def remove_series(self, handle: SeriesApi) -> None:
        self._ensure_alive()
        series = self._registry.resolve(handle)
        self._ensure_not_updating()
        try:
            update = self._data_layer.remove_series(series)
            self._model.remove_series(series)
            self._coordinator.apply_update(update)
        finally:
            self._registry.unregister(handle)
        LOGGER.debug("removed series id=%d", series.series_id)

    def apply_new_data(self, handle: SeriesApi, data: Iterable[Any] | pd.DataFrame) -> None:
        self._ensure_alive()
        series = self._registry.resolve(handle)
        if isinstance(data, pd.DataFrame):
            data = items_from_frame(data)
        self._ensure_not_updating()
        self._send_update(self._data_layer.set_series_data(series, data))

    def update_data(self, handle: SeriesApi, item: Mapping[str, Any] | Any) -> None:
        self._ensure_alive()
        series = self._registry.resolve(handle)
        self._ensure_not_updating()
        self._send_update(self._data_layer.update_series_data(series, item))

    def series_options(self, handle: SeriesApi) -> dict[str, Any]:
        self._ensure_alive()
        return self._registry.resolve(handle).options()

    def apply_series_options(self, handle: SeriesApi, options: Mapping[str, Any]) -> None:
        self._ensure_alive()
        series = self._registry.resolve(handle)
        partial = copy.deepcopy(dict(options))
        if isinstance(partial.get("price_format"), Mapping):
            partial["price_format"] = dict(partial["price_format"])
            patch_price_format(partial["price_format"])
        if series.series_type() == "Candlestick":
            fill_up_down_candlestick_colors(partial)
        series.apply_options(partial)

    def subscribe_click(self, handler: MouseEventHandler, owner: object | None = None) -> None:
        self._ensure_alive()
        self._bus.subscribe_click(handler, owner)

    def unsubscribe_click(self, handler: MouseEventHandler) -> None:
        self._ensure_alive()
        self._bus.unsubscribe_click(handler)

    def subscribe_crosshair_move(self, handler: MouseEventHandler, owner: object | None = None) -> None:
        self._ensure_alive()
        self._bus.subscribe_crosshair_move(handler, owner)

    def unsubscribe_crosshair_move(self, handler: MouseEventHandler) -> None:
        self._ensure_alive()
        self._bus.unsubscribe_crosshair_move(handler)

    def unsubscribe_all(self, owner: object) -> None:
        """Drop every click and crosshair handler subscribed with `owner`."""

        self._ensure_alive()
        self._bus.unsubscribe_all(owner)

    def apply_options(self, options: Mapping[str, Any]) -> None:
        self._ensure_alive()
        self._model.apply_options(options)

    def options(self) -> dict[str, Any]:
        self._ensure_alive()
        return self._model.options()

    def remove(self) -> None:
        if self._destroyed:
            return
        self._model.clicked().unsubscribe_all(self)
        self._model.crosshair_moved().unsubscribe_all(self)

        for handle in self._registry:
            self._registry.unregister(handle, teardown=True)
        self._registry.clear()

        self._model.destroy()
        self._bus.destroy()
        self._data_layer.destroy()
        self._destroyed = True
        LOGGER.debug("chart removed")

    def _send_update(self, update: DataUpdateResponse) -> None:
        self._coordinator.apply_update(update)

    def _on_model_click(self, supplier: SnapshotSupplier) -> None:
        self._bus.publish_click(lambda: self._translator.translate(supplier()))

    def _on_model_crosshair_move(self, supplier: SnapshotSupplier) -> None:
        self._bus.publish_crosshair_move(lambda: self._translator.translate(supplier()))

    def _ensure_not_updating(self) -> None:
        if self._coordinator.applying:
            raise ReentrantUpdateError("data updates are not allowed while an update batch is being applied")

    def _ensure_alive(self) -> None:
        if self._destroyed:
            raise ChartDestroyedError("chart has been removed")
