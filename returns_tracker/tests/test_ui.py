import asyncio
import unittest
from unittest.mock import AsyncMock, Mock

from textual.widgets import OptionList

from returns_tracker.controllers.remote_selector import RemoteSelector
from returns_tracker.models.pagination import Page, Query
from returns_tracker.models.reference import Store
from returns_tracker.models.return_record import ReturnRecord
from returns_tracker.services.return_service import ReturnService
from returns_tracker.tests.helpers import return_doc
from returns_tracker.ui.app import ReturnsApp
from returns_tracker.ui.widgets.return_table import ReturnTable
from returns_tracker.ui.widgets.search_bar import SearchBar
from returns_tracker.ui.widgets.selector_modal import SelectorModal

STORES = [Store(id=1, code="S1", name="Main"), Store(id=2, code="S2", name="North")]


async def wait_until(pilot, predicate, timeout: float = 2.0) -> None:
    loop = asyncio.get_running_loop()
    deadline = loop.time() + timeout
    while not predicate():
        if loop.time() > deadline:
            raise AssertionError("condition not reached before timeout")
        await pilot.pause(0.02)


def make_app(debounce_ms: int):
    records = [ReturnRecord.from_api(return_doc(id=i, tracking=f"TRK{i}")) for i in (1, 2)]
    client = Mock()
    client.fetch_returns = AsyncMock(
        side_effect=lambda query: Page(items=records, total=2, page=query.page, limit=query.limit)
    )
    container = Mock()
    container.return_service = ReturnService(client, default_page_size=10)
    container.aclose = AsyncMock()
    config = {"api": {}, "ui": {"page_size": 10, "debounce_ms": debounce_ms}}
    return ReturnsApp(config, container=container), client


def fetched_texts(client):
    return [call.args[0].text for call in client.fetch_returns.await_args_list]


class TestReturnsScreenSearch(unittest.IsolatedAsyncioTestCase):
    async def test_mount_loads_first_page_without_waiting(self):
        # a quiet period far longer than the wait below
        app, client = make_app(debounce_ms=10_000)
        async with app.run_test() as pilot:
            await wait_until(pilot, lambda: client.fetch_returns.await_count == 1, timeout=1.0)
            client.fetch_returns.assert_awaited_once_with(Query("", 1, 10))

            table = app.screen.query_one(ReturnTable)
            await wait_until(pilot, lambda: table.row_count == 2)

    async def test_typing_burst_fetches_once_with_last_text(self):
        app, client = make_app(debounce_ms=300)
        async with app.run_test() as pilot:
            await wait_until(pilot, lambda: client.fetch_returns.await_count == 1)

            app.screen.query_one(SearchBar).focus_input()
            await pilot.pause()
            await pilot.press("a", "b", "c")

            await wait_until(pilot, lambda: "abc" in fetched_texts(client))
            await pilot.pause(0.5)

            texts = fetched_texts(client)
            self.assertEqual(texts[0], "")
            self.assertEqual(texts.count("abc"), 1)
            self.assertNotIn("a", texts)
            self.assertNotIn("ab", texts)
            last_query = client.fetch_returns.await_args_list[-1].args[0]
            self.assertEqual(last_query, Query("abc", 1, 10))


class TestSelectorModal(unittest.IsolatedAsyncioTestCase):
    async def test_loaded_items_are_listed_when_opened(self):
        selector = RemoteSelector(AsyncMock(return_value=list(STORES)), label="Store")
        await selector.reload()

        app, _ = make_app(debounce_ms=10_000)
        async with app.run_test() as pilot:
            await pilot.pause()
            app.push_screen(SelectorModal(selector))
            await pilot.pause()
            await pilot.pause()

            options = app.screen.query_one("#selector-options", OptionList)
            self.assertEqual(options.option_count, 2)

            await pilot.press("n", "o", "r")
            await wait_until(pilot, lambda: options.option_count == 1)

            await pilot.press("enter")
            await pilot.pause()

        self.assertEqual(selector.selected, STORES[1])
        self.assertFalse(selector.state.is_open)


if __name__ == "__main__":
    unittest.main()
