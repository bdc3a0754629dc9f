from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol


CUSTOM_SERIES_TYPE = "Custom"


class CustomSeriesDefinition(Protocol):
    """User-defined series type.

    Items of a custom series keep whatever shape the caller gives them; the
    chart only reads their `time` and asks the definition whether an item
    carries data.
    """

    def default_options(self) -> Mapping[str, Any]:
        ...

    def is_whitespace(self, item: Any) -> bool:
        ...
