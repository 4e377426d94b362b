"""
Chat Search Handler - First step of every search.

With a query, the backend returns matching chats. With an empty query it
returns the recently found chats, which is all an empty search shows.
"""

from ..entries import ChatEntry
from ...services.directory import LocalDirectory, RemoteDirectory


class ChatSearchHandler:
    """Search chats by title, or list recently found chats."""

    name = "search_chats"
    priority = 100

    def __init__(self, max_results: int = 30):
        self.max_results = max_results

    def matches(self, query: str) -> bool:
        return True

    def limit(self, found: int) -> int:
        return self.max_results

    async def fetch(self, remote: RemoteDirectory, query: str, limit: int) -> list[int]:
        return await remote.search_chats(query, limit)

    def resolve(self, local: LocalDirectory, entity_id: int) -> ChatEntry:
        return ChatEntry(entity_id, local.resolve_chat(entity_id))
