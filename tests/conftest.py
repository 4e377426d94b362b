"""
Shared test fixtures for the sidebar search test suite.

Provides in-memory stand-ins for the remote directory, local directory
and view, a session wiring them together, and a real settings TOML file.
"""

import asyncio
from dataclasses import dataclass

import pytest
import toml
from loguru import logger

from sidebar_search.services.directory import RemoteCallError, Session


@dataclass(frozen=True)
class FakeChat:
    id: int


@dataclass(frozen=True)
class FakeUser:
    id: int


class FakeRemote:
    """
    Scripted remote directory.

    Set chat_ids / contact_ids for results, put an exception in errors
    under the method name to fail a call, or an asyncio.Event in gates
    to hold a call until the event is set. Every call is recorded.
    """

    def __init__(self):
        self.chat_ids = []
        self.contact_ids = []
        self.created_chat_ids = {}
        self.errors = {}
        self.gates = {}
        self.calls = []

    async def _enter(self, method, *args):
        self.calls.append((method, *args))
        gate = self.gates.get(method)
        if gate is not None:
            await gate.wait()
        error = self.errors.get(method)
        if error is not None:
            raise error

    def calls_to(self, method):
        return [call[1:] for call in self.calls if call[0] == method]

    async def search_chats(self, query, limit):
        await self._enter("search_chats", query, limit)
        return list(self.chat_ids)

    async def search_contacts(self, query, limit):
        await self._enter("search_contacts", query, limit)
        return list(self.contact_ids)

    async def create_private_chat(self, user_id, force):
        await self._enter("create_private_chat", user_id, force)
        return self.created_chat_ids.get(user_id, user_id)

    async def add_recently_found(self, chat_id):
        await self._enter("add_recently_found", chat_id)


class FakeLocal:
    """Local directory backed by a dict of existing private chats."""

    def __init__(self):
        self.private_chats = {}

    def resolve_chat(self, chat_id):
        return FakeChat(chat_id)

    def resolve_user(self, user_id):
        return FakeUser(user_id)

    def try_find_private_chat(self, user_id):
        return self.private_chats.get(user_id)


class FakeView:
    """Records what the core asks of the widget layer."""

    def __init__(self, text=""):
        self.text = text
        self.bound = None
        self.pages = []
        self.selected = []
        self.focused = False

    @property
    def page(self):
        return self.pages[-1] if self.pages else None

    def bind_results(self, results):
        self.bound = results

    def show_page(self, name):
        self.pages.append(name)

    def select_chat(self, chat):
        self.selected.append(chat)

    def get_text(self):
        return self.text

    def set_text(self, text):
        self.text = text

    def focus_entry(self):
        self.focused = True


@pytest.fixture
def remote():
    return FakeRemote()


@pytest.fixture
def local():
    return FakeLocal()


@pytest.fixture
def view():
    return FakeView()


@pytest.fixture
def session(remote, local):
    return Session(remote=remote, local=local)


@pytest.fixture
def remote_error():
    """Factory for remote failures."""
    return lambda operation="rpc": RemoteCallError(operation, "backend error")


@pytest.fixture
def gate():
    return asyncio.Event()


@pytest.fixture
def caplog(caplog):
    """Route loguru records into pytest's caplog."""
    handler_id = logger.add(caplog.handler, format="{message}", level=0)
    yield caplog
    logger.remove(handler_id)


@pytest.fixture
def tmp_settings(tmp_path):
    """Create a real settings TOML file with all sections."""
    settings_path = tmp_path / "settings.toml"
    data = {
        "search": {"chat_limit": 20, "total_limit": 40},
        "remote": {"timeout_seconds": 2.5},
        "panel": {"compact": True},
        "logging": {"level": "DEBUG"},
    }
    settings_path.write_text(toml.dumps(data))
    return settings_path
