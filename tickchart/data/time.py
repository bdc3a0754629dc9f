from __future__ import annotations

import calendar
from collections.abc import Mapping
from datetime import date, datetime
import numbers
from typing import Any

import numpy as np
import pandas as pd

from tickchart.errors import ChartDataError
from tickchart.model.rows import TimePoint


def convert_time(value: Any) -> TimePoint:
    """Normalize any supported time representation to UTC seconds, keeping the original."""

    return TimePoint(timestamp=_to_timestamp(value), original_time=value)


def _to_timestamp(value: Any) -> int:
    if isinstance(value, bool) or value is None:
        raise ChartDataError(f"unsupported time value: {value!r}")
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, numbers.Real):
        as_float = float(value)
        if not as_float.is_integer():
            raise ChartDataError(f"time must be whole seconds, got {value!r}")
        return int(as_float)
    if isinstance(value, np.datetime64):
        value = pd.Timestamp(value)
    if isinstance(value, datetime):
        return calendar.timegm(value.utctimetuple())
    if isinstance(value, date):
        return calendar.timegm(value.timetuple())
    if isinstance(value, str):
        try:
            parsed = date.fromisoformat(value)
        except ValueError as exc:
            raise ChartDataError(f"time string must be YYYY-MM-DD, got {value!r}") from exc
        return calendar.timegm(parsed.timetuple())
    if isinstance(value, Mapping):
        try:
            day = date(int(value["year"]), int(value["month"]), int(value["day"]))
        except (KeyError, TypeError, ValueError) as exc:
            raise ChartDataError(f"business day needs year/month/day, got {value!r}") from exc
        return calendar.timegm(day.timetuple())
    raise ChartDataError(f"unsupported time value: {value!r}")
