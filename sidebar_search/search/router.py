"""
Query Router - Orders the search steps a query runs through.

Each handler declares a priority (lower = runs earlier), whether it
applies to a query, and how many results it may request given how many
were already found. The orchestrator runs the matching handlers strictly
one after another, so a later handler's budget sees earlier results.
"""

from abc import ABC, abstractmethod
from typing import Iterator

from ..services.directory import LocalDirectory, RemoteDirectory
from .entries import ResultEntry


class SearchHandler(ABC):
    """Base class for one step of the sidebar search."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Handler identifier, also used as the remote operation name."""
        ...

    @property
    @abstractmethod
    def priority(self) -> int:
        """Lower number = runs first."""
        ...

    @abstractmethod
    def matches(self, query: str) -> bool:
        """Return True if this step should run for the query."""
        ...

    @abstractmethod
    def limit(self, found: int) -> int:
        """Result limit to request, given the number of ids already found."""
        ...

    @abstractmethod
    async def fetch(self, remote: RemoteDirectory, query: str, limit: int) -> list[int]:
        """Issue the remote search and return matching ids in relevance order."""
        ...

    @abstractmethod
    def resolve(self, local: LocalDirectory, entity_id: int) -> ResultEntry:
        """Turn a found id into a result entry with its display handle."""
        ...


class QueryRouter:
    """Keeps handlers in priority order and selects those matching a query."""

    def __init__(self):
        self._handlers: list[SearchHandler] = []

    def register(self, handler: SearchHandler) -> None:
        """Register a handler and re-sort by priority."""
        self._handlers.append(handler)
        self._handlers.sort(key=lambda h: h.priority)

    def route(self, query: str) -> Iterator[SearchHandler]:
        """
        Yield the handlers that apply to query, highest priority first.

        Matching is evaluated lazily, right before each handler runs.
        """
        for handler in self._handlers:
            if handler.matches(query):
                yield handler
