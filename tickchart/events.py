from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from .data.items import SeriesData, create_series_data, is_fulfilled_data
from .errors import ensure
from .model.snapshot import MouseEventSnapshot
from .registry import SeriesRegistry


H = TypeVar("H")


@dataclass(frozen=True, eq=False)
class MouseEventParams(Generic[H]):
    """Public mouse event; compared and hashed by identity."""

    time: Any = None
    logical: int | None = None
    point: tuple[float, float] | None = None
    hovered_series: H | None = None
    hovered_object_id: object | None = None
    series_data: dict[H, SeriesData] = field(default_factory=dict)
    source_event: object | None = None


class EventTranslator(Generic[H]):
    """Turns a model snapshot into the public event by resolving series back to handles."""

    def __init__(self, registry: SeriesRegistry[H]) -> None:
        self._registry = registry

    def translate(self, snapshot: MouseEventSnapshot) -> MouseEventParams[H]:
        series_data: dict[H, SeriesData] = {}
        for series, row in snapshot.series_data.items():
            data = create_series_data(series.series_type(), row)
            ensure(is_fulfilled_data(data), f"placeholder point reached the event path: {series!r} at {row.index}")
            series_data[self._registry.resolve_reverse(series)] = data

        hovered = snapshot.hovered_series
        hovered_series = None if hovered is None else self._registry.resolve_reverse(hovered)

        return MouseEventParams(
            time=snapshot.time,
            logical=snapshot.index,
            point=snapshot.point,
            hovered_series=hovered_series,
            hovered_object_id=snapshot.hovered_object_id,
            series_data=series_data,
            source_event=snapshot.source_event,
        )
