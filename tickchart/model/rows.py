from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class TimePoint:
    timestamp: int
    original_time: Any = field(default=None, hash=False)


@dataclass(frozen=True)
class SeriesPlotRow:
    """One point of a series as the model stores it.

    `value` holds (open, high, low, close); single-value series repeat the value
    four times. Custom series leave `value` empty and carry the caller's item
    in `payload`. A row with neither marks an axis slot with no real data.
    """

    index: int
    time: TimePoint
    value: tuple[float, float, float, float] | None
    style: dict[str, str] = field(default_factory=dict, hash=False)
    payload: Any = field(default=None, hash=False)

    @property
    def is_whitespace(self) -> bool:
        return self.value is None and self.payload is None
