"""
View Protocol - What the search core needs from the widget layer.

The view owns rendering, the search entry and the results/empty stack.
The core only binds the result list, flips pages, and asks for a chat to
be opened in the sidebar.
"""

from typing import Any, Protocol

from .results import ResultList

EMPTY_PAGE = "empty"
RESULTS_PAGE = "results"


class SearchView(Protocol):
    """Widget-side collaborator of the search panel."""

    def bind_results(self, results: ResultList) -> None:
        """Display results as the list model."""
        ...

    def show_page(self, name: str) -> None:
        """Show EMPTY_PAGE or RESULTS_PAGE."""
        ...

    def select_chat(self, chat: Any) -> None:
        """Open chat in the sidebar."""
        ...

    def get_text(self) -> str:
        """Current search entry text."""
        ...

    def set_text(self, text: str) -> None:
        """Replace the search entry text (fires the view's text-change wiring)."""
        ...

    def focus_entry(self) -> None:
        """Give keyboard focus to the search entry."""
        ...
