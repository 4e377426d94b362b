"""
Result Entries - Identity-only references to chats and users.

An entry is compared by kind and id alone. The resolved display handle
rides along for the view but never takes part in equality, so
ChatEntry(101) found in one generation equals ChatEntry(101) in another.
"""

from dataclasses import dataclass, field
from typing import Any, Union


@dataclass(frozen=True)
class ChatEntry:
    """A chat search hit."""
    id: int
    handle: Any = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class UserEntry:
    """A contact search hit. The id aliases the user's private chat id."""
    id: int
    handle: Any = field(default=None, compare=False, repr=False)


ResultEntry = Union[ChatEntry, UserEntry]
