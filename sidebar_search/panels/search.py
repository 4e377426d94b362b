"""
Search Panel - Sidebar panel with search entry and merged results.

Features:
- Re-searches on every entry text change (the view calls on_search_changed)
- Empty query lists the recently found chats
- Activating a row opens the chat, creating a private chat for contacts
- Reset refreshes recently found chats or clears the entry
- Back action and every activation emit close

Signals:
    close: The panel should be dismissed
    notify(name): The session or compact property changed
"""

from typing import Optional

from loguru import logger

from ..search.orchestrator import SearchOrchestrator
from ..search.results import ResultList
from ..search.router import QueryRouter
from ..search.selection import SelectionHandler
from ..search.view import SearchView
from ..services.directory import DEFAULT_TIMEOUT, Session
from ..utils.signals import SignalEmitter


class SearchPanel(SignalEmitter):
    """
    Sidebar search over chats and contacts.

    Properties:
        session: Active client session, required for searching
        compact: Layout hint for the view; not used by the search itself
    """

    __signals__ = ("close", "notify")

    def __init__(
        self,
        view: SearchView,
        session: Optional[Session] = None,
        compact: bool = False,
        router: Optional[QueryRouter] = None,
        timeout: Optional[float] = DEFAULT_TIMEOUT,
    ):
        super().__init__()
        self.view = view
        self._session = session
        self._compact = compact

        self.orchestrator = SearchOrchestrator(view, router=router, timeout=timeout)
        self.selection = SelectionHandler(view, on_close=lambda: self.emit("close"), timeout=timeout)

    @property
    def session(self) -> Optional[Session]:
        return self._session

    @session.setter
    def session(self, session: Optional[Session]) -> None:
        if self._session == session:
            return
        self._session = session
        self.emit("notify", "session")

    @property
    def compact(self) -> bool:
        return self._compact

    @compact.setter
    def compact(self, compact: bool) -> None:
        if self._compact == compact:
            return
        self._compact = compact
        self.emit("notify", "compact")

    @property
    def results(self) -> Optional[ResultList]:
        """Result list of the latest search."""
        return self.orchestrator.results

    async def search(self, query: Optional[str] = None) -> Optional[ResultList]:
        """
        Search for query, or for the entry's current text if query is None.

        Returns:
            The new generation's ResultList, or None without a session
        """
        if self._session is None:
            logger.warning("Search requested without a session")
            return None

        if query is None:
            query = self.view.get_text()
        return await self.orchestrator.search(self._session, query)

    async def on_search_changed(self) -> None:
        """Handle search entry text changes."""
        await self.search()

    async def reset(self) -> None:
        """
        Return the panel to its initial state.

        With an empty entry the recently found chats are fetched again,
        since they may have changed remotely. Otherwise the entry is
        cleared, and the view's text-change wiring starts the empty search.
        """
        if not self.view.get_text():
            await self.search("")
        else:
            self.view.set_text("")

    async def activate(self, position: int) -> None:
        """Open the result at position and close the panel."""
        entry = self.results.item(position) if self.results is not None else None

        if self._session is None:
            logger.warning("Activation requested without a session")
            self.emit("close")
            return

        await self.selection.activate(self._session, entry)

    def go_back(self) -> None:
        """Back action: dismiss the panel without selecting anything."""
        self.emit("close")

    def grab_focus(self) -> bool:
        """Move keyboard focus to the search entry."""
        self.view.focus_entry()
        return True
