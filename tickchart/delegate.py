from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar


T = TypeVar("T")
Handler = Callable[..., None]


@dataclass(frozen=True)
class _Subscription:
    handler: Handler
    owner: object | None
    single_shot: bool


class Delegate:
    """Synchronous subscriber list.

    `fire` iterates over a snapshot of the subscriptions, so handlers may
    subscribe or unsubscribe while being dispatched; such changes apply from the
    next `fire` on.
    """

    def __init__(self) -> None:
        self._subscriptions: list[_Subscription] = []

    def subscribe(self, handler: Handler, owner: object | None = None, single_shot: bool = False) -> None:
        self._subscriptions.append(_Subscription(handler=handler, owner=owner, single_shot=single_shot))

    def unsubscribe(self, handler: Handler) -> None:
        for i, sub in enumerate(self._subscriptions):
            if sub.handler == handler:
                del self._subscriptions[i]
                return

    def unsubscribe_all(self, owner: object) -> None:
        self._subscriptions = [sub for sub in self._subscriptions if sub.owner is not owner]

    def has_listeners(self) -> bool:
        return bool(self._subscriptions)

    def listener_count(self) -> int:
        return len(self._subscriptions)

    def fire(self, *args: Any) -> None:
        snapshot = list(self._subscriptions)
        if any(sub.single_shot for sub in snapshot):
            self._subscriptions = [sub for sub in self._subscriptions if not sub.single_shot]
        for sub in snapshot:
            sub.handler(*args)

    def destroy(self) -> None:
        self._subscriptions = []


class NotificationChannel(Generic[T]):
    """Typed public channel whose payload is only built when someone listens."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._delegate = Delegate()

    def subscribe(self, handler: Callable[[T], None], owner: object | None = None) -> None:
        self._delegate.subscribe(handler, owner)

    def unsubscribe(self, handler: Callable[[T], None]) -> None:
        self._delegate.unsubscribe(handler)

    def unsubscribe_all(self, owner: object) -> None:
        self._delegate.unsubscribe_all(owner)

    def has_listeners(self) -> bool:
        return self._delegate.has_listeners()

    def fire(self, supplier: Callable[[], T]) -> bool:
        if not self._delegate.has_listeners():
            return False
        self._delegate.fire(supplier())
        return True

    def destroy(self) -> None:
        self._delegate.destroy()


class NotificationBus(Generic[T]):
    def __init__(self) -> None:
        self.clicked: NotificationChannel[T] = NotificationChannel("click")
        self.crosshair_moved: NotificationChannel[T] = NotificationChannel("crosshair_move")

    def subscribe_click(self, handler: Callable[[T], None], owner: object | None = None) -> None:
        self.clicked.subscribe(handler, owner)

    def unsubscribe_click(self, handler: Callable[[T], None]) -> None:
        self.clicked.unsubscribe(handler)

    def subscribe_crosshair_move(self, handler: Callable[[T], None], owner: object | None = None) -> None:
        self.crosshair_moved.subscribe(handler, owner)

    def unsubscribe_crosshair_move(self, handler: Callable[[T], None]) -> None:
        self.crosshair_moved.unsubscribe(handler)

    def unsubscribe_all(self, owner: object) -> None:
        self.clicked.unsubscribe_all(owner)
        self.crosshair_moved.unsubscribe_all(owner)

    def publish_click(self, supplier: Callable[[], T]) -> bool:
        return self.clicked.fire(supplier)

    def publish_crosshair_move(self, supplier: Callable[[], T]) -> bool:
        return self.crosshair_moved.fire(supplier)

    def destroy(self) -> None:
        self.clicked.destroy()
        self.crosshair_moved.destroy()
