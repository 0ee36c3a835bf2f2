import unittest

from window_switcher.utils.widget_pool import WidgetPool


class Row:
    pass


class WidgetPoolTests(unittest.TestCase):
    def test_released_widgets_are_reused(self):
        pool = WidgetPool(Row)
        first = pool.acquire()
        pool.release(first)

        self.assertIs(pool.acquire(), first)

    def test_acquire_creates_widgets_when_pool_is_empty(self):
        pool = WidgetPool(Row)
        rows = {pool.acquire() for _ in range(3)}

        self.assertEqual(len(rows), 3)
        self.assertEqual(pool.active_count, 3)

    def test_releasing_unknown_widget_is_ignored(self):
        pool = WidgetPool(Row)
        pool.release(Row())

        self.assertEqual(pool.active_count, 0)
        self.assertIsInstance(pool.acquire(), Row)

    def test_idle_pool_is_bounded(self):
        pool = WidgetPool(Row, size=2)
        rows = [pool.acquire() for _ in range(4)]
        for row in rows:
            pool.release(row)

        reused = [pool.acquire() for _ in range(4)]

        self.assertEqual(sum(1 for row in reused if row in rows), 2)


if __name__ == "__main__":
    unittest.main()
