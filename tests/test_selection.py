"""
Tests for the SelectionHandler navigation paths.
"""

from unittest.mock import MagicMock

import pytest

from conftest import FakeChat
from sidebar_search.search.entries import ChatEntry, UserEntry
from sidebar_search.search.selection import SelectionHandler


@pytest.fixture
def on_close():
    return MagicMock()


@pytest.fixture
def handler(view, on_close):
    return SelectionHandler(view, on_close=on_close)


class TestChatActivation:

    @pytest.mark.asyncio
    async def test_selects_chat_and_marks_recent(self, handler, session, remote, view, on_close):
        await handler.activate(session, ChatEntry(101, FakeChat(101)))

        assert view.selected == [FakeChat(101)]
        assert remote.calls_to("add_recently_found") == [(101,)]
        on_close.assert_called_once()

    @pytest.mark.asyncio
    async def test_resolves_chat_without_handle(self, handler, session, view):
        await handler.activate(session, ChatEntry(3))
        assert view.selected == [FakeChat(3)]

    @pytest.mark.asyncio
    async def test_recent_failure_still_navigates_and_closes(self, handler, session, remote, view, on_close, remote_error, caplog):
        remote.errors["add_recently_found"] = remote_error("add_recently_found")

        await handler.activate(session, ChatEntry(101))

        assert view.selected == [FakeChat(101)]
        on_close.assert_called_once()
        assert "Failed to add recently found chat" in caplog.text


class TestUserActivation:

    @pytest.mark.asyncio
    async def test_existing_private_chat_is_reused(self, handler, session, remote, local, view, on_close):
        local.private_chats[205] = FakeChat(205)

        await handler.activate(session, UserEntry(205))

        assert view.selected == [FakeChat(205)]
        assert remote.calls_to("create_private_chat") == []
        assert remote.calls_to("add_recently_found") == [(205,)]
        on_close.assert_called_once()

    @pytest.mark.asyncio
    async def test_missing_private_chat_is_created(self, handler, session, remote, view):
        remote.created_chat_ids[205] = 205

        await handler.activate(session, UserEntry(205))

        assert remote.calls_to("create_private_chat") == [(205, True)]
        assert view.selected == [FakeChat(205)]
        assert remote.calls_to("add_recently_found") == [(205,)]

    @pytest.mark.asyncio
    async def test_create_failure_selects_nothing(self, handler, session, remote, view, on_close, remote_error, caplog):
        remote.errors["create_private_chat"] = remote_error("create_private_chat")

        await handler.activate(session, UserEntry(205))

        assert view.selected == []
        assert remote.calls_to("add_recently_found") == [(205,)]
        on_close.assert_called_once()
        assert "Failed to create private chat" in caplog.text


class TestUnexpectedEntry:

    @pytest.mark.asyncio
    async def test_unknown_entry_warns_and_closes(self, handler, session, remote, view, on_close, caplog):
        await handler.activate(session, "not-an-entry")

        assert view.selected == []
        assert remote.calls == []
        on_close.assert_called_once()
        assert "Unexpected item type" in caplog.text

    @pytest.mark.asyncio
    async def test_none_entry_closes(self, handler, session, on_close):
        await handler.activate(session, None)
        on_close.assert_called_once()

    @pytest.mark.asyncio
    async def test_close_fires_when_local_lookup_raises(self, handler, session, local, on_close):
        local.try_find_private_chat = MagicMock(side_effect=KeyError(1))

        with pytest.raises(KeyError):
            await handler.activate(session, UserEntry(1))

        on_close.assert_called_once()
