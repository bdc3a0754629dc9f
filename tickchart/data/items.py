from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass, field, is_dataclass
import math
from typing import TYPE_CHECKING, Any

from tickchart.errors import ChartDataError
from tickchart.model.rows import SeriesPlotRow, TimePoint

from .time import convert_time

if TYPE_CHECKING:
    from tickchart.custom import CustomSeriesDefinition


@dataclass(frozen=True)
class WhitespaceData:
    time: Any


@dataclass(frozen=True)
class SingleValueData:
    time: Any
    value: float


@dataclass(frozen=True)
class LineData(SingleValueData):
    color: str | None = None


@dataclass(frozen=True)
class HistogramData(SingleValueData):
    color: str | None = None


@dataclass(frozen=True)
class AreaData(SingleValueData):
    line_color: str | None = None
    top_color: str | None = None
    bottom_color: str | None = None


@dataclass(frozen=True)
class BaselineData(SingleValueData):
    top_line_color: str | None = None
    top_fill_color1: str | None = None
    top_fill_color2: str | None = None
    bottom_line_color: str | None = None
    bottom_fill_color1: str | None = None
    bottom_fill_color2: str | None = None


@dataclass(frozen=True)
class OhlcData:
    time: Any
    open: float
    high: float
    low: float
    close: float


@dataclass(frozen=True)
class BarData(OhlcData):
    color: str | None = None


@dataclass(frozen=True)
class CandlestickData(OhlcData):
    color: str | None = None
    border_color: str | None = None
    wick_color: str | None = None


SeriesData = WhitespaceData | LineData | HistogramData | AreaData | BaselineData | BarData | CandlestickData

_OHLC_TYPES = {"Bar", "Candlestick"}
_OHLC_KEYS = ("open", "high", "low", "close")

_RECORD_TYPES: dict[str, type] = {
    "Line": LineData,
    "Histogram": HistogramData,
    "Area": AreaData,
    "Baseline": BaselineData,
    "Bar": BarData,
    "Candlestick": CandlestickData,
}

_STYLE_KEYS: dict[str, tuple[str, ...]] = {
    "Line": ("color",),
    "Histogram": ("color",),
    "Area": ("line_color", "top_color", "bottom_color"),
    "Baseline": (
        "top_line_color",
        "top_fill_color1",
        "top_fill_color2",
        "bottom_line_color",
        "bottom_fill_color1",
        "bottom_fill_color2",
    ),
    "Bar": ("color",),
    "Candlestick": ("color", "border_color", "wick_color"),
}


@dataclass(frozen=True)
class DataItem:
    """A user data item after parsing, before it is placed on the time axis."""

    time: TimePoint
    value: tuple[float, float, float, float] | None
    style: dict[str, str] = field(default_factory=dict, hash=False)
    payload: Any = field(default=None, hash=False)

    @property
    def is_whitespace(self) -> bool:
        return self.value is None and self.payload is None


def parse_data_item(series_type: str, raw: Any) -> DataItem:
    fields = _as_mapping(raw)
    if "time" not in fields:
        raise ChartDataError(f"data item has no time: {raw!r}")
    time_point = convert_time(fields["time"])

    if series_type in _OHLC_TYPES:
        prices = [_real_or_none(fields.get(key)) for key in _OHLC_KEYS]
        value = None if any(p is None for p in prices) else (prices[0], prices[1], prices[2], prices[3])
    elif series_type in _RECORD_TYPES:
        single = _real_or_none(fields.get("value"))
        value = None if single is None else (single, single, single, single)
    else:
        raise ChartDataError(f"unknown series type: {series_type}")

    style = {}
    if value is not None:
        for key in _STYLE_KEYS[series_type]:
            if fields.get(key) is not None:
                style[key] = str(fields[key])
    return DataItem(time=time_point, value=value, style=style)


def parse_custom_item(definition: CustomSeriesDefinition, raw: Any) -> DataItem:
    """Custom items are kept as given; only `time` is read and the definition decides whitespace."""

    fields = _as_mapping(raw)
    if "time" not in fields:
        raise ChartDataError(f"data item has no time: {raw!r}")
    time_point = convert_time(fields["time"])
    payload = None if definition.is_whitespace(raw) else raw
    return DataItem(time=time_point, value=None, style={}, payload=payload)


def create_series_data(series_type: str, row: SeriesPlotRow) -> SeriesData | Any:
    """Public record for one plot row; placeholder rows come back as `WhitespaceData`.

    Custom rows hand back the item the caller supplied.
    """

    if row.is_whitespace:
        return WhitespaceData(time=row.time.original_time)
    if row.value is None:
        return row.payload
    record_type = _RECORD_TYPES[series_type]
    style = {key: row.style[key] for key in _STYLE_KEYS[series_type] if key in row.style}
    if series_type in _OHLC_TYPES:
        open_, high, low, close = row.value
        return record_type(time=row.time.original_time, open=open_, high=high, low=low, close=close, **style)
    return record_type(time=row.time.original_time, value=row.value[3], **style)


def is_fulfilled_data(data: SeriesData | Any) -> bool:
    return data is not None and not isinstance(data, WhitespaceData)


def _as_mapping(raw: Any) -> Mapping[str, Any]:
    if isinstance(raw, Mapping):
        return raw
    if is_dataclass(raw) and not isinstance(raw, type):
        return asdict(raw)
    raise ChartDataError(f"unsupported data item: {raw!r}")


def _real_or_none(value: Any) -> float | None:
    if value is None:
        return None
    out = float(value)
    if math.isnan(out):
        return None
    return out
