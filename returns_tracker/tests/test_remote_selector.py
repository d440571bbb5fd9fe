import asyncio
import unittest
from unittest.mock import AsyncMock, Mock

from returns_tracker.controllers.remote_selector import RemoteSelector, filter_items
from returns_tracker.errors import HttpStatusError, NetworkError
from returns_tracker.models.reference import SelectableItem, Store

STORES = [
    Store(id=1, code="S1", name="Main"),
    Store(id=2, code="N2", name="North"),
    Store(id=3, code="S3", name="South Outlet"),
]


class TestFilterItems(unittest.TestCase):
    def test_matches_name_case_insensitively(self):
        self.assertEqual([s.id for s in filter_items(STORES, "nor")], [2])

    def test_two_store_lookup(self):
        stores = [SelectableItem(1, "S1", "Main"), SelectableItem(2, "S2", "North")]
        self.assertEqual([s.id for s in filter_items(stores, "nor")], [2])

    def test_matches_code(self):
        self.assertEqual([s.id for s in filter_items(STORES, "s3")], [3])

    def test_empty_substring_returns_everything(self):
        self.assertEqual(filter_items(STORES, ""), STORES)

    def test_no_match(self):
        self.assertEqual(filter_items(STORES, "warehouse"), [])

    def test_plain_selectable_items(self):
        items = [SelectableItem(1, "WEB", "Website"), SelectableItem(2, "POS", "Point of sale")]
        self.assertEqual([i.code for i in filter_items(items, "site")], ["WEB"])


class TestRemoteSelector(unittest.IsolatedAsyncioTestCase):
    def setUp(self):
        self.fetch = AsyncMock(return_value=list(STORES))
        self.on_change = Mock()
        self.selector = RemoteSelector(self.fetch, label="Store", on_change=self.on_change)

    async def test_reload_fetches_once_and_filters_locally(self):
        await self.selector.reload()

        self.assertEqual(self.selector.all_items, tuple(STORES))
        self.assertTrue(self.selector.state.loaded)
        self.assertEqual([s.id for s in self.selector.filter("nor")], [2])
        self.assertEqual([s.id for s in self.selector.filter("s")], [1, 3])
        self.fetch.assert_awaited_once_with()

    async def test_set_query_drives_visible_items(self):
        await self.selector.reload()
        self.selector.set_query("NOR")
        self.assertEqual(self.selector.state.visible_items, [STORES[1]])

    async def test_select_commits_and_closes(self):
        await self.selector.reload()
        self.selector.open()
        self.selector.set_query("nor")

        self.selector.select(STORES[1])

        state = self.selector.state
        self.assertEqual(state.selected, STORES[1])
        self.assertFalse(state.is_open)
        self.assertEqual(state.query, "")
        self.on_change.assert_called_once_with(STORES[1])

    async def test_close_keeps_selection_and_clears_query(self):
        await self.selector.reload()
        self.selector.select(STORES[0])
        self.selector.open()
        self.selector.set_query("zz")

        self.selector.close()

        self.assertEqual(self.selector.selected, STORES[0])
        self.assertEqual(self.selector.state.query, "")
        self.assertFalse(self.selector.state.is_open)

    async def test_clear_removes_selection(self):
        self.selector.select(STORES[0])
        self.selector.clear()
        self.assertIsNone(self.selector.selected)
        self.on_change.assert_called_with(None)

    async def test_failed_load_leaves_selector_empty(self):
        self.fetch.side_effect = NetworkError("offline")
        await self.selector.reload()

        state = self.selector.state
        self.assertEqual(state.all_items, ())
        self.assertFalse(state.loaded)
        self.assertFalse(state.loading)
        self.assertEqual(state.last_error.kind, "network")
        self.assertEqual(self.selector.filter(""), [])

    async def test_reload_after_failure_recovers(self):
        self.fetch.side_effect = [HttpStatusError(503), list(STORES)]
        await self.selector.reload()
        await self.selector.reload()

        self.assertEqual(len(self.selector.all_items), 3)
        self.assertIsNone(self.selector.state.last_error)

    async def test_failed_reload_drops_previous_items(self):
        await self.selector.reload()
        self.fetch.side_effect = NetworkError("offline")
        await self.selector.reload()
        self.assertEqual(self.selector.all_items, ())

    async def test_stale_reload_is_ignored(self):
        loop = asyncio.get_running_loop()
        first_result, second_result = loop.create_future(), loop.create_future()
        pending = [first_result, second_result]

        async def fetch():
            return await pending.pop(0)

        selector = RemoteSelector(fetch, label="Store")
        first = asyncio.create_task(selector.reload())
        await asyncio.sleep(0)
        second = asyncio.create_task(selector.reload())
        await asyncio.sleep(0)

        second_result.set_result(STORES[:1])
        await second
        first_result.set_result(STORES)
        await first

        self.assertEqual(selector.all_items, tuple(STORES[:1]))

    async def test_loading_flag_published(self):
        seen = []
        self.selector.subscribe(lambda state: seen.append(state.loading))
        await self.selector.reload()
        self.assertEqual(seen, [True, False])


if __name__ == "__main__":
    unittest.main()
