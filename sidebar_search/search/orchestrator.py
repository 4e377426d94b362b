"""
Search Orchestrator - Runs one sidebar search per query change.

Every call to search() starts a new generation with a fresh ResultList
and found-id set. Steps run strictly in sequence:

  1. Bind the new list to the view and show the results page right away
  2. Chat search (recently found chats when the query is empty)
  3. Show the empty page if nothing was found so far
  4. Contact search with the remaining budget, non-empty queries only

Ids already found are skipped, so a contact whose private chat was
listed in step 2 appears once. After every remote call the generation is
compared with the current one; results of a superseded search are
dropped instead of merged.
"""

from typing import Optional

from loguru import logger

from ..services.directory import DEFAULT_TIMEOUT, RemoteCallError, Session, call_remote
from .handlers import ChatSearchHandler, ContactSearchHandler
from .results import ResultList
from .router import QueryRouter
from .view import EMPTY_PAGE, RESULTS_PAGE, SearchView


class SearchOrchestrator:
    """
    Owns the active search generation and its results.

    Attributes:
        generation: Token of the most recently started search
        results: ResultList of the current generation (None before first search)
        found_ids: Ids listed in the current generation, chats and users alike
    """

    def __init__(
        self,
        view: SearchView,
        router: Optional[QueryRouter] = None,
        timeout: Optional[float] = DEFAULT_TIMEOUT,
    ):
        self.view = view
        self.router = router or default_router()
        self.timeout = timeout

        self.generation = 0
        self.results: Optional[ResultList] = None
        self.found_ids: set[int] = set()

    async def search(self, session: Session, query: str) -> ResultList:
        """
        Run a search for query and return this generation's result list.

        Remote failures are logged and only reduce the results. If a newer
        search starts meanwhile, this one stops at its next step and the
        returned list is left as it was at that point.
        """
        self.generation += 1
        generation = self.generation
        logger.debug(f"Starting search generation {generation} for {query!r}")

        results = ResultList()
        found_ids: set[int] = set()
        self.results = results
        self.found_ids = found_ids

        self.view.bind_results(results)
        results.connect("items-changed", lambda size: self._on_items_changed(generation, size))

        # Show results page before any data arrives to avoid an empty-page flash
        self.view.show_page(RESULTS_PAGE)

        for handler in self.router.route(query):
            limit = handler.limit(len(found_ids))

            try:
                ids = await call_remote(
                    handler.name,
                    handler.fetch(session.remote, query, limit),
                    self.timeout,
                )
            except RemoteCallError as e:
                logger.warning(f"Error in {handler.name} for {query!r}: {e}")
                ids = []

            if generation != self.generation:
                logger.debug(f"Discarding {handler.name} results of stale generation {generation}")
                return results

            entries = []
            for entity_id in ids:
                if entity_id in found_ids:
                    continue
                found_ids.add(entity_id)
                entries.append(handler.resolve(session.local, entity_id))
            results.append(entries)

            # Flips back via items-changed if a later step finds something
            if results.size() == 0:
                self.view.show_page(EMPTY_PAGE)

        return results

    def _on_items_changed(self, generation: int, size: int) -> None:
        if generation != self.generation:
            return
        self.view.show_page(RESULTS_PAGE if size > 0 else EMPTY_PAGE)


def default_router(chat_limit: int = 30, total_limit: int = 50) -> QueryRouter:
    """Router with the chat step followed by the contact step."""
    router = QueryRouter()
    router.register(ChatSearchHandler(max_results=chat_limit))
    router.register(ContactSearchHandler(total_limit=total_limit))
    return router
