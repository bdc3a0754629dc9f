from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from .rows import SeriesPlotRow

if TYPE_CHECKING:
    from .series import Series


@dataclass(frozen=True, eq=False)
class MouseEventSnapshot:
    """Raw interaction state as the model sees it, before handles are resolved. Compared by identity."""

    time: Any = None
    index: int | None = None
    point: tuple[float, float] | None = None
    hovered_series: "Series" | None = None
    hovered_object_id: object | None = None
    series_data: dict["Series", SeriesPlotRow] = field(default_factory=dict)
    source_event: object | None = None
