from __future__ import annotations


class ChartCoordinationError(RuntimeError):
    """Handle/series bookkeeping went out of sync. Never expected in a correctly wired chart."""


class UnknownHandleError(ChartCoordinationError):
    pass


class DuplicateHandleError(ChartCoordinationError):
    pass


class DuplicateSeriesError(ChartCoordinationError):
    pass


class UnknownSeriesError(ChartCoordinationError):
    pass


class ReentrantUpdateError(ChartCoordinationError):
    pass


class InvariantViolationError(AssertionError):
    pass


class ChartDataError(ValueError):
    pass


class ChartDestroyedError(RuntimeError):
    pass


def ensure(condition: object, message: str) -> None:
    if not condition:
        raise InvariantViolationError(message)
