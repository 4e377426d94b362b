"""
Directory Service - Remote and local lookups used by the search panel.

RemoteDirectory calls are asynchronous RPCs against the messaging
backend. LocalDirectory lookups are synchronous reads of the client's
object caches.

Chat and user ids share one id space: a user's id equals the id of
their private chat once one exists.
"""

import asyncio
from dataclasses import dataclass
from typing import Any, Awaitable, Optional, Protocol, TypeVar

T = TypeVar("T")

DEFAULT_TIMEOUT = 10.0


class RemoteCallError(Exception):
    """A remote directory call failed or timed out."""

    def __init__(self, operation: str, reason: object = None):
        self.operation = operation
        self.reason = reason
        message = operation if reason is None else f"{operation}: {reason}"
        super().__init__(message)


class RemoteDirectory(Protocol):
    """Asynchronous RPCs offered by the messaging backend."""

    async def search_chats(self, query: str, limit: int) -> list[int]:
        """Return chat ids matching query, or recently found chats if empty."""
        ...

    async def search_contacts(self, query: str, limit: int) -> list[int]:
        """Return user ids of contacts matching query."""
        ...

    async def create_private_chat(self, user_id: int, force: bool) -> int:
        """Create (or return the existing) private chat, returning its id."""
        ...

    async def add_recently_found(self, chat_id: int) -> None:
        """Mark a chat as recently found."""
        ...


class LocalDirectory(Protocol):
    """Synchronous id -> handle resolution from the client's caches."""

    def resolve_chat(self, chat_id: int) -> Any:
        ...

    def resolve_user(self, user_id: int) -> Any:
        ...

    def try_find_private_chat(self, user_id: int) -> Optional[Any]:
        ...


@dataclass(frozen=True)
class Session:
    """Active client session: the handle every remote call goes through."""
    remote: RemoteDirectory
    local: LocalDirectory


async def call_remote(operation: str, call: Awaitable[T], timeout: Optional[float] = DEFAULT_TIMEOUT) -> T:
    """
    Await a remote call, normalizing every failure to RemoteCallError.

    Args:
        operation: Name used in the error (e.g., "search_chats")
        call: The pending remote coroutine
        timeout: Seconds before giving up. None waits indefinitely.

    Returns:
        The call's payload

    Raises:
        RemoteCallError: The call raised or timed out. Cancellation is not
            converted, so a cancelled caller still unwinds.
    """
    try:
        return await asyncio.wait_for(call, timeout)
    except RemoteCallError:
        raise
    except asyncio.TimeoutError as e:
        raise RemoteCallError(operation, f"timed out after {timeout}s") from e
    except Exception as e:
        raise RemoteCallError(operation, e) from e
