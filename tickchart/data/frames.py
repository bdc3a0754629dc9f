from __future__ import annotations

from typing import Any

import pandas as pd

from tickchart.errors import ChartDataError


def items_from_frame(frame: pd.DataFrame) -> list[dict[str, Any]]:
    """One data item per row. Uses a `time` column, or the index when there is none.

    Missing values (NaN/NaT) are dropped from the item so the row reads as
    whitespace when its value columns are empty.
    """

    if "time" not in frame.columns:
        if frame.index.name != "time" and not isinstance(frame.index, pd.DatetimeIndex):
            raise ChartDataError("data frame needs a `time` column, a `time` index or a datetime index")
        frame = frame.rename_axis("time").reset_index()
    out: list[dict[str, Any]] = []
    for record in frame.to_dict("records"):
        out.append({key: value for key, value in record.items() if not _is_missing(value)})
    return out


def _is_missing(value: Any) -> bool:
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False
