from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING, Generic, TypeVar

from .errors import DuplicateHandleError, DuplicateSeriesError, UnknownHandleError, UnknownSeriesError

if TYPE_CHECKING:
    from .model.series import Series


H = TypeVar("H")


class SeriesRegistry(Generic[H]):
    """Bijective mapping between public series handles and model series.

    Handles are keyed by identity. Model series are keyed by their `series_id`
    and identity-checked on lookup, so two series with equal content never
    alias. Both directions change together in every mutating call.
    """

    def __init__(self) -> None:
        self._series_by_handle: dict[H, Series] = {}
        self._handle_by_series_id: dict[int, H] = {}

    def __len__(self) -> int:
        return len(self._series_by_handle)

    def __iter__(self) -> Iterator[H]:
        return iter(tuple(self._series_by_handle))

    def __contains__(self, handle: object) -> bool:
        return handle in self._series_by_handle

    def items(self) -> tuple[tuple[H, Series], ...]:
        return tuple(self._series_by_handle.items())

    def register(self, handle: H, series: Series) -> None:
        if handle in self._series_by_handle:
            raise DuplicateHandleError(f"handle already registered: {handle!r}")
        if series.series_id in self._handle_by_series_id:
            raise DuplicateSeriesError(f"series already registered: {series!r}")
        self._series_by_handle[handle] = series
        self._handle_by_series_id[series.series_id] = handle

    def resolve(self, handle: H) -> Series:
        try:
            return self._series_by_handle[handle]
        except KeyError:
            raise UnknownHandleError(f"unknown series handle: {handle!r}") from None

    def resolve_reverse(self, series: Series) -> H:
        handle = self._handle_by_series_id.get(series.series_id)
        if handle is None or self._series_by_handle[handle] is not series:
            raise UnknownSeriesError(f"series has no registered handle: {series!r}")
        return handle

    def contains_series(self, series: Series) -> bool:
        handle = self._handle_by_series_id.get(series.series_id)
        return handle is not None and self._series_by_handle[handle] is series

    def unregister(self, handle: H, *, teardown: bool = False) -> Series | None:
        series = self._series_by_handle.pop(handle, None)
        if series is None:
            if teardown:
                return None
            raise UnknownHandleError(f"unknown series handle: {handle!r}")
        del self._handle_by_series_id[series.series_id]
        return series

    def clear(self) -> None:
        self._series_by_handle.clear()
        self._handle_by_series_id.clear()
