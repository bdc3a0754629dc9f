from .chart_model import ChartModel
from .rows import SeriesPlotRow, TimePoint
from .series import Series
from .snapshot import MouseEventSnapshot
from .time_scale import TimeScale

__all__ = [
    "ChartModel",
    "MouseEventSnapshot",
    "Series",
    "SeriesPlotRow",
    "TimePoint",
    "TimeScale",
]
