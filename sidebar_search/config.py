"""
Sidebar Search - Panel construction

Builds a SearchPanel from settings.toml for the widget layer to embed.

Usage:
    from sidebar_search.config import create_panel

    panel = create_panel(view, session)
    panel.connect("close", lambda: sidebar.hide_search())
"""

from pathlib import Path
from typing import Optional

from loguru import logger

from .panels.search import SearchPanel
from .search.orchestrator import default_router
from .search.view import SearchView
from .services.directory import Session
from .utils.helpers import load_settings, setup_logging


def create_panel(
    view: SearchView,
    session: Optional[Session] = None,
    settings_path: Optional[Path] = None,
    configure_logging: bool = True,
) -> SearchPanel:
    """
    Create a search panel configured from settings.

    Args:
        view: Widget-side collaborator
        session: Active client session (may be set later via panel.session)
        settings_path: Settings file; defaults to the packaged settings.toml
        configure_logging: Install the stderr log sink at the configured level

    Returns:
        SearchPanel ready for on_search_changed / activate / reset
    """
    settings = load_settings(settings_path)

    if configure_logging:
        setup_logging(settings["logging"]["level"])

    router = default_router(
        chat_limit=settings["search"]["chat_limit"],
        total_limit=settings["search"]["total_limit"],
    )

    panel = SearchPanel(
        view,
        session=session,
        compact=settings["panel"]["compact"],
        router=router,
        timeout=settings["remote"]["timeout_seconds"],
    )
    logger.debug("Sidebar search panel initialized")
    return panel
