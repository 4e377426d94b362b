"""
Selection Handler - Turns an activated result into navigation.

  ChatEntry: open the chat, then mark it recently found
  UserEntry: open the user's private chat, creating it if needed, then
             mark the user recently found
  anything else: warn and do nothing

The close callback runs afterwards on every path, including remote
failures. Marking recently found never blocks or undoes navigation.
"""

from typing import Callable, Optional

from loguru import logger

from ..services.directory import DEFAULT_TIMEOUT, RemoteCallError, Session, call_remote
from .entries import ChatEntry, ResultEntry, UserEntry
from .view import SearchView


class SelectionHandler:
    """Resolve, maybe create, select, record, close: once per activation."""

    def __init__(
        self,
        view: SearchView,
        on_close: Callable[[], None],
        timeout: Optional[float] = DEFAULT_TIMEOUT,
    ):
        self.view = view
        self.on_close = on_close
        self.timeout = timeout

    async def activate(self, session: Session, entry: Optional[ResultEntry]) -> None:
        """Navigate to entry and record it as recently found."""
        try:
            if isinstance(entry, ChatEntry):
                chat = entry.handle if entry.handle is not None else session.local.resolve_chat(entry.id)
                self.view.select_chat(chat)
                await self._add_recently_found(session, entry.id)
            elif isinstance(entry, UserEntry):
                await self._open_private_chat(session, entry.id)
                await self._add_recently_found(session, entry.id)
            else:
                logger.warning(f"Unexpected item type: {entry!r}")
        finally:
            self.on_close()

    async def _open_private_chat(self, session: Session, user_id: int) -> None:
        chat = session.local.try_find_private_chat(user_id)
        if chat is not None:
            self.view.select_chat(chat)
            return

        try:
            chat_id = await call_remote(
                "create_private_chat",
                session.remote.create_private_chat(user_id, True),
                self.timeout,
            )
        except RemoteCallError as e:
            logger.warning(f"Failed to create private chat: {e}")
            return

        self.view.select_chat(session.local.resolve_chat(chat_id))

    async def _add_recently_found(self, session: Session, chat_id: int) -> None:
        try:
            await call_remote(
                "add_recently_found",
                session.remote.add_recently_found(chat_id),
                self.timeout,
            )
        except RemoteCallError as e:
            logger.warning(f"Failed to add recently found chat: {e}")
