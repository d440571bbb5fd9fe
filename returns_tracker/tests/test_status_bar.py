import unittest
from datetime import datetime
from unittest.mock import Mock

from returns_tracker.models.pagination import ErrorInfo, ListState, ListStatus, Query
from returns_tracker.ui.controllers.status_bar import StatusBarController
from returns_tracker.utils.formatters import clip, format_count, format_date


class TestStatusBarController(unittest.TestCase):
    def setUp(self):
        self.bar = Mock()
        self.controller = StatusBarController(self.bar)

    def test_ready_with_more(self):
        state = ListState(items=tuple(range(10)), page=1, has_more=True,
                          status=ListStatus.READY, total=25, query=Query("TRK"))
        text = self.controller.render(state).plain
        self.assertEqual(text, "Returns: 10 of 25 | Page: 1/3 | Search: 'TRK' | More available")

    def test_end_of_list(self):
        state = ListState(items=tuple(range(25)), page=3, status=ListStatus.READY, total=25)
        self.assertTrue(self.controller.render(state).plain.endswith("End of list"))

    def test_failed(self):
        state = ListState(status=ListStatus.FAILED, last_error=ErrorInfo("network", "offline"))
        self.assertEqual(self.controller.render(state).plain, "Returns: 0 | Page: 1/1 | Error")

    def test_update_writes_to_bar(self):
        self.controller.update(ListState(status=ListStatus.LOADING_INITIAL))
        rendered = self.bar.update.call_args.args[0]
        self.assertIn("Loading...", rendered.plain)


class TestFormatters(unittest.TestCase):
    def test_format_date(self):
        self.assertEqual(format_date(datetime(2024, 3, 1, 15, 4)), "Mar 01, 2024 03:04 PM")
        self.assertEqual(format_date(datetime(2024, 3, 1), "%Y-%m-%d"), "2024-03-01")
        self.assertEqual(format_date(None), "")

    def test_clip(self):
        self.assertEqual(clip("Downtown Outlet", 8), "Downtow…")
        self.assertEqual(clip("Main", 8), "Main")

    def test_format_count(self):
        self.assertEqual(format_count(0, 0), "0")
        self.assertEqual(format_count(10, 25), "10 of 25")


if __name__ == "__main__":
    unittest.main()
