"""
Search package - Sidebar search over chats and contacts.

Queries run through priority-ordered handlers (chat search, then contact
search) into a single deduplicated ResultList; activating a result
navigates to the matching chat.
"""

from .entries import ChatEntry, ResultEntry, UserEntry
from .orchestrator import SearchOrchestrator, default_router
from .results import ResultList
from .router import QueryRouter, SearchHandler
from .selection import SelectionHandler
from .view import EMPTY_PAGE, RESULTS_PAGE, SearchView

__all__ = [
    "ChatEntry",
    "UserEntry",
    "ResultEntry",
    "ResultList",
    "QueryRouter",
    "SearchHandler",
    "SearchOrchestrator",
    "SelectionHandler",
    "SearchView",
    "EMPTY_PAGE",
    "RESULTS_PAGE",
    "default_router",
]
