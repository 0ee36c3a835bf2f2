import unittest

from window_switcher.engine.cache import WindowCache
from window_switcher.engine.models import WindowRecord


FIRST = [WindowRecord(id=1, app="A", title="one")]
SECOND = [WindowRecord(id=2, app="B", title="two"), WindowRecord(id=3, app="C", title="three")]


class WindowCacheTests(unittest.TestCase):
    def test_update_replaces_live_and_cached(self):
        cache = WindowCache()
        cache.update(FIRST)
        self.assertEqual(cache.live, FIRST)
        self.assertEqual(cache.cached, FIRST)

    def test_empty_update_clears_live_but_keeps_cached(self):
        cache = WindowCache()
        cache.update(FIRST)
        cache.update([])
        self.assertEqual(cache.live, [])
        self.assertEqual(cache.cached, FIRST)

    def test_cached_is_last_non_empty_update(self):
        cache = WindowCache()
        expected = []
        for windows in (FIRST, [], SECOND, [], [], FIRST, []):
            cache.update(windows)
            if windows:
                expected = windows
            self.assertEqual(cache.cached, expected)

    def test_display_without_filter_falls_back_to_cached(self):
        cache = WindowCache()
        cache.update(SECOND)
        cache.update([])
        self.assertEqual(cache.display(filter_active=False), SECOND)

    def test_display_with_filter_uses_live_even_when_empty(self):
        cache = WindowCache()
        cache.update(SECOND)
        cache.update([])
        self.assertEqual(cache.display(filter_active=True), [])

    def test_display_prefers_live_when_present(self):
        cache = WindowCache()
        cache.update(SECOND)
        cache.update(FIRST)
        self.assertEqual(cache.display(filter_active=False), FIRST)
        self.assertEqual(cache.display(filter_active=True), FIRST)

    def test_initial_windows_seed_the_cache(self):
        cache = WindowCache(SECOND)
        self.assertEqual(cache.live, [])
        self.assertEqual(cache.display(filter_active=False), SECOND)
        self.assertIsNotNone(cache.age())

    def test_age_is_none_before_first_snapshot(self):
        cache = WindowCache()
        self.assertIsNone(cache.age())
        cache.update([])
        self.assertIsNone(cache.age())
        cache.update(FIRST)
        self.assertGreaterEqual(cache.age(), 0.0)

    def test_returned_lists_are_copies(self):
        cache = WindowCache()
        cache.update(FIRST)
        cache.live.append(SECOND[0])
        cache.display(False).clear()
        self.assertEqual(cache.live, FIRST)


if __name__ == "__main__":
    unittest.main()
