from .data_layer import DataLayer, DataUpdateResponse, SeriesChanges, SeriesUpdateInfo, TimeScaleUpdate
from .frames import items_from_frame
from .items import (
    AreaData,
    BarData,
    BaselineData,
    CandlestickData,
    DataItem,
    HistogramData,
    LineData,
    OhlcData,
    SeriesData,
    SingleValueData,
    WhitespaceData,
    create_series_data,
    is_fulfilled_data,
    parse_custom_item,
    parse_data_item,
)
from .time import convert_time

__all__ = [
    "AreaData",
    "BarData",
    "BaselineData",
    "CandlestickData",
    "DataItem",
    "DataLayer",
    "DataUpdateResponse",
    "HistogramData",
    "LineData",
    "OhlcData",
    "SeriesChanges",
    "SeriesData",
    "SeriesUpdateInfo",
    "SingleValueData",
    "TimeScaleUpdate",
    "WhitespaceData",
    "convert_time",
    "create_series_data",
    "is_fulfilled_data",
    "items_from_frame",
    "parse_custom_item",
    "parse_data_item",
]
