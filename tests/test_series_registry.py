from __future__ import annotations

import random
import unittest

from tickchart.errors import DuplicateHandleError, DuplicateSeriesError, UnknownHandleError, UnknownSeriesError
from tickchart.model.series import Series
from tickchart.registry import SeriesRegistry


class _Handle:
    def __init__(self, name: str) -> None:
        self.name = name

    def __repr__(self) -> str:
        return f"_Handle({self.name})"


def _assert_bijection(test: unittest.TestCase, registry: SeriesRegistry) -> None:
    pairs = registry.items()
    test.assertEqual(len(pairs), len(registry))
    for handle, series in pairs:
        test.assertIs(registry.resolve(handle), series)
        test.assertIs(registry.resolve_reverse(series), handle)
    test.assertEqual(len({id(series) for _, series in pairs}), len(pairs))


class SeriesRegistryTests(unittest.TestCase):
    def test_register_and_resolve_both_directions(self) -> None:
        registry: SeriesRegistry[_Handle] = SeriesRegistry()
        handle = _Handle("a")
        series = Series(1, "Line", {})
        registry.register(handle, series)
        self.assertIs(registry.resolve(handle), series)
        self.assertIs(registry.resolve_reverse(series), handle)
        self.assertIn(handle, registry)
        self.assertTrue(registry.contains_series(series))
        self.assertEqual(list(registry), [handle])

    def test_duplicate_handle_rejected(self) -> None:
        registry: SeriesRegistry[_Handle] = SeriesRegistry()
        handle = _Handle("a")
        registry.register(handle, Series(1, "Line", {}))
        with self.assertRaises(DuplicateHandleError):
            registry.register(handle, Series(2, "Line", {}))
        self.assertEqual(len(registry), 1)

    def test_series_cannot_back_two_handles(self) -> None:
        registry: SeriesRegistry[_Handle] = SeriesRegistry()
        series = Series(1, "Line", {})
        registry.register(_Handle("a"), series)
        with self.assertRaises(DuplicateSeriesError):
            registry.register(_Handle("b"), series)
        _assert_bijection(self, registry)

    def test_unknown_handle_fails(self) -> None:
        registry: SeriesRegistry[_Handle] = SeriesRegistry()
        with self.assertRaises(UnknownHandleError):
            registry.resolve(_Handle("ghost"))
        with self.assertRaises(UnknownHandleError):
            registry.unregister(_Handle("ghost"))

    def test_unregister_tolerates_missing_entry_during_teardown(self) -> None:
        registry: SeriesRegistry[_Handle] = SeriesRegistry()
        self.assertIsNone(registry.unregister(_Handle("ghost"), teardown=True))

    def test_unknown_series_is_fatal(self) -> None:
        registry: SeriesRegistry[_Handle] = SeriesRegistry()
        with self.assertRaises(UnknownSeriesError):
            registry.resolve_reverse(Series(7, "Line", {}))

    def test_reverse_lookup_uses_identity_not_id_collision(self) -> None:
        registry: SeriesRegistry[_Handle] = SeriesRegistry()
        registry.register(_Handle("a"), Series(1, "Line", {}))
        impostor = Series(1, "Line", {})
        self.assertFalse(registry.contains_series(impostor))
        with self.assertRaises(UnknownSeriesError):
            registry.resolve_reverse(impostor)

    def test_unregister_removes_both_directions(self) -> None:
        registry: SeriesRegistry[_Handle] = SeriesRegistry()
        handle = _Handle("a")
        series = Series(1, "Line", {})
        registry.register(handle, series)
        self.assertIs(registry.unregister(handle), series)
        self.assertEqual(len(registry), 0)
        self.assertFalse(registry.contains_series(series))
        with self.assertRaises(UnknownSeriesError):
            registry.resolve_reverse(series)

    def test_maps_stay_inverse_under_random_add_remove(self) -> None:
        rng = random.Random(1234)
        registry: SeriesRegistry[_Handle] = SeriesRegistry()
        live: list[_Handle] = []
        next_id = 1
        for step in range(300):
            if live and rng.random() < 0.45:
                handle = live.pop(rng.randrange(len(live)))
                registry.unregister(handle)
            else:
                handle = _Handle(f"h{step}")
                registry.register(handle, Series(next_id, "Line", {}))
                next_id += 1
                live.append(handle)
            _assert_bijection(self, registry)
        self.assertEqual(len(registry), len(live))

    def test_clear_empties_both_maps(self) -> None:
        registry: SeriesRegistry[_Handle] = SeriesRegistry()
        series = Series(1, "Line", {})
        registry.register(_Handle("a"), series)
        registry.clear()
        self.assertEqual(len(registry), 0)
        self.assertFalse(registry.contains_series(series))


if __name__ == "__main__":
    unittest.main()
