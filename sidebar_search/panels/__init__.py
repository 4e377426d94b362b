# Sidebar Search Panels Package
"""
Panel surface for the sidebar search.

SearchPanel is what the widget layer holds: it forwards text changes,
activations and resets into the search core and emits close.
"""

from .search import SearchPanel

__all__ = ["SearchPanel"]
