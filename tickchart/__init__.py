from tickchart.api import chart_from_config, create_chart
from tickchart.chart_api import ChartApi
from tickchart.config import ChartConfig, SeriesConfig, load_chart_config
from tickchart.custom import CustomSeriesDefinition
from tickchart.data import (
    AreaData,
    BarData,
    BaselineData,
    CandlestickData,
    HistogramData,
    LineData,
    WhitespaceData,
)
from tickchart.errors import (
    ChartCoordinationError,
    ChartDataError,
    ChartDestroyedError,
    DuplicateHandleError,
    DuplicateSeriesError,
    InvariantViolationError,
    ReentrantUpdateError,
    UnknownHandleError,
    UnknownSeriesError,
)
from tickchart.events import EventTranslator, MouseEventParams
from tickchart.series_api import SeriesApi

__all__ = [
    "AreaData",
    "BarData",
    "BaselineData",
    "CandlestickData",
    "ChartApi",
    "ChartConfig",
    "ChartCoordinationError",
    "ChartDataError",
    "ChartDestroyedError",
    "CustomSeriesDefinition",
    "DuplicateHandleError",
    "DuplicateSeriesError",
    "EventTranslator",
    "HistogramData",
    "InvariantViolationError",
    "LineData",
    "MouseEventParams",
    "ReentrantUpdateError",
    "SeriesApi",
    "SeriesConfig",
    "UnknownHandleError",
    "UnknownSeriesError",
    "WhitespaceData",
    "chart_from_config",
    "create_chart",
    "load_chart_config",
]
