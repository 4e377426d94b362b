"""
Contact Search Handler - Second step, for non-empty queries only.

Requests whatever is left of the combined budget after the chat step.
Users that already have a listed private chat are dropped by the
orchestrator's found-id check, since the ids coincide.
"""

from ..entries import UserEntry
from ...services.directory import LocalDirectory, RemoteDirectory


class ContactSearchHandler:
    """Search the user's contacts."""

    name = "search_contacts"
    priority = 200

    def __init__(self, total_limit: int = 50):
        self.total_limit = total_limit

    def matches(self, query: str) -> bool:
        return bool(query)

    def limit(self, found: int) -> int:
        return max(0, self.total_limit - found)

    async def fetch(self, remote: RemoteDirectory, query: str, limit: int) -> list[int]:
        return await remote.search_contacts(query, limit)

    def resolve(self, local: LocalDirectory, entity_id: int) -> UserEntry:
        return UserEntry(entity_id, local.resolve_user(entity_id))
