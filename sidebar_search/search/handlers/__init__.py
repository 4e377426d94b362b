"""
Search handlers - The steps of a sidebar search.

Each handler queries one remote source and resolves its ids locally.
"""

from .chats import ChatSearchHandler
from .contacts import ContactSearchHandler

__all__ = [
    "ChatSearchHandler",
    "ContactSearchHandler",
]
