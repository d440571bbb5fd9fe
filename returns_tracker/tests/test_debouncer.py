import asyncio
import unittest
from unittest.mock import Mock

from returns_tracker.controllers.debouncer import SearchDebouncer
from returns_tracker.tests.helpers import FakeLoop


class TestSearchDebouncer(unittest.TestCase):
    def setUp(self):
        self.loop = FakeLoop()
        self.on_commit = Mock()
        self.debouncer = SearchDebouncer(self.on_commit, quiet_ms=500, loop=self.loop)

    def type_text(self, text: str, gap: float = 0.1) -> None:
        for i in range(1, len(text) + 1):
            self.debouncer.on_text_changed(text[:i])
            self.loop.advance(gap)

    def test_burst_commits_once_with_last_value(self):
        self.type_text("ABCD", gap=0.1)
        self.on_commit.assert_not_called()

        self.loop.advance(0.5)
        self.on_commit.assert_called_once_with("ABCD")

    def test_nothing_commits_before_quiet_period(self):
        self.debouncer.on_text_changed("a")
        self.loop.advance(0.499)
        self.on_commit.assert_not_called()
        self.assertTrue(self.debouncer.pending)

        self.loop.advance(0.001)
        self.on_commit.assert_called_once_with("a")
        self.assertFalse(self.debouncer.pending)

    def test_slow_typing_commits_each_value(self):
        self.type_text("ab", gap=0.6)
        self.assertEqual([c.args[0] for c in self.on_commit.call_args_list], ["a", "ab"])

    def test_clearing_the_box_commits_empty_text(self):
        self.debouncer.on_text_changed("abc")
        self.loop.advance(0.6)
        self.debouncer.on_text_changed("")
        self.loop.advance(0.6)
        self.assertEqual(self.on_commit.call_args_list[-1].args, ("",))

    def test_seed_commits_immediately(self):
        self.debouncer.seed()
        self.on_commit.assert_called_once_with("")
        self.assertEqual(self.loop.handles, [])

    def test_seed_cancels_pending_keystrokes(self):
        self.debouncer.on_text_changed("abc")
        self.debouncer.seed("")
        self.loop.advance(1)
        self.on_commit.assert_called_once_with("")

    def test_flush_commits_pending_text_now(self):
        self.debouncer.on_text_changed("xyz")
        self.debouncer.flush()
        self.on_commit.assert_called_once_with("xyz")

        self.loop.advance(1)
        self.on_commit.assert_called_once()

    def test_flush_without_pending_text_does_nothing(self):
        self.debouncer.flush()
        self.on_commit.assert_not_called()

    def test_close_drops_pending_emission(self):
        self.debouncer.on_text_changed("abc")
        self.debouncer.close()
        self.loop.advance(1)

        self.on_commit.assert_not_called()
        self.assertTrue(self.debouncer.closed)

    def test_no_commits_after_close(self):
        self.debouncer.close()
        self.debouncer.on_text_changed("abc")
        self.debouncer.seed("abc")
        self.debouncer.flush()
        self.loop.advance(1)
        self.on_commit.assert_not_called()

    def test_negative_quiet_period_rejected(self):
        with self.assertRaises(ValueError):
            SearchDebouncer(Mock(), quiet_ms=-1)


class TestSearchDebouncerOnRealLoop(unittest.IsolatedAsyncioTestCase):
    async def test_burst_on_running_loop(self):
        committed = []
        debouncer = SearchDebouncer(committed.append, quiet_ms=20)

        for text in ("n", "no", "nor"):
            debouncer.on_text_changed(text)
            await asyncio.sleep(0.005)
        await asyncio.sleep(0.1)

        self.assertEqual(committed, ["nor"])
        debouncer.close()


if __name__ == "__main__":
    unittest.main()
