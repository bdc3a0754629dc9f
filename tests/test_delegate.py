from __future__ import annotations

import unittest
from unittest import mock

from tickchart.delegate import Delegate, NotificationBus


class DelegateTests(unittest.TestCase):
    def test_fire_calls_handlers_in_subscription_order(self) -> None:
        calls: list[tuple[str, int]] = []
        delegate = Delegate()
        delegate.subscribe(lambda v: calls.append(("a", v)))
        delegate.subscribe(lambda v: calls.append(("b", v)))
        delegate.fire(7)
        self.assertEqual(calls, [("a", 7), ("b", 7)])

    def test_unsubscribe_removes_one_handler(self) -> None:
        calls: list[str] = []

        def first(_: object) -> None:
            calls.append("first")

        def second(_: object) -> None:
            calls.append("second")

        delegate = Delegate()
        delegate.subscribe(first)
        delegate.subscribe(second)
        delegate.unsubscribe(first)
        delegate.fire(None)
        self.assertEqual(calls, ["second"])

    def test_unsubscribe_all_by_owner(self) -> None:
        owner = object()
        calls: list[str] = []
        delegate = Delegate()
        delegate.subscribe(lambda _: calls.append("owned-1"), owner=owner)
        delegate.subscribe(lambda _: calls.append("free"))
        delegate.subscribe(lambda _: calls.append("owned-2"), owner=owner)
        delegate.unsubscribe_all(owner)
        delegate.fire(None)
        self.assertEqual(calls, ["free"])

    def test_subscription_changes_during_fire_apply_next_time(self) -> None:
        calls: list[str] = []
        delegate = Delegate()

        def late(_: object) -> None:
            calls.append("late")

        def victim(_: object) -> None:
            calls.append("victim")

        def mutator(_: object) -> None:
            calls.append("mutator")
            delegate.subscribe(late)
            delegate.unsubscribe(victim)

        delegate.subscribe(mutator)
        delegate.subscribe(victim)

        delegate.fire(None)
        self.assertEqual(calls, ["mutator", "victim"])

        calls.clear()
        delegate.unsubscribe(mutator)
        delegate.fire(None)
        self.assertEqual(calls, ["late"])

    def test_single_shot_handler_runs_once(self) -> None:
        handler = mock.Mock()
        delegate = Delegate()
        delegate.subscribe(handler, single_shot=True)
        delegate.fire(1)
        delegate.fire(2)
        handler.assert_called_once_with(1)
        self.assertFalse(delegate.has_listeners())

    def test_handler_errors_propagate(self) -> None:
        delegate = Delegate()
        delegate.subscribe(mock.Mock(side_effect=RuntimeError("boom")))
        with self.assertRaises(RuntimeError):
            delegate.fire(None)


class NotificationBusTests(unittest.TestCase):
    def test_payload_not_built_without_listeners(self) -> None:
        bus: NotificationBus[str] = NotificationBus()
        supplier = mock.Mock(return_value="payload")
        self.assertFalse(bus.publish_click(supplier))
        self.assertFalse(bus.publish_crosshair_move(supplier))
        supplier.assert_not_called()

    def test_payload_built_once_for_all_listeners(self) -> None:
        bus: NotificationBus[str] = NotificationBus()
        supplier = mock.Mock(return_value="payload")
        first = mock.Mock()
        second = mock.Mock()
        bus.subscribe_click(first)
        bus.subscribe_click(second)
        self.assertTrue(bus.publish_click(supplier))
        supplier.assert_called_once_with()
        first.assert_called_once_with("payload")
        second.assert_called_once_with("payload")

    def test_channels_are_independent(self) -> None:
        bus: NotificationBus[str] = NotificationBus()
        click = mock.Mock()
        move = mock.Mock()
        bus.subscribe_click(click)
        bus.subscribe_crosshair_move(move)
        bus.publish_crosshair_move(lambda: "moved")
        click.assert_not_called()
        move.assert_called_once_with("moved")
        bus.unsubscribe_crosshair_move(move)
        self.assertFalse(bus.crosshair_moved.has_listeners())
        self.assertTrue(bus.clicked.has_listeners())

    def test_unsubscribe_all_clears_owner_on_both_channels(self) -> None:
        bus: NotificationBus[str] = NotificationBus()
        owner = object()
        bus.subscribe_click(mock.Mock(), owner=owner)
        bus.subscribe_crosshair_move(mock.Mock(), owner=owner)
        bus.unsubscribe_all(owner)
        self.assertFalse(bus.clicked.has_listeners())
        self.assertFalse(bus.crosshair_moved.has_listeners())


if __name__ == "__main__":
    unittest.main()
