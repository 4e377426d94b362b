# Sidebar Search Services Package
"""
Collaborator interfaces for the sidebar search panel.

The remote directory answers searches and records selections; the local
directory resolves ids to the handles the client already caches.
"""

from .directory import (
    DEFAULT_TIMEOUT,
    LocalDirectory,
    RemoteCallError,
    RemoteDirectory,
    Session,
    call_remote,
)

__all__ = [
    "LocalDirectory",
    "DEFAULT_TIMEOUT",
    "RemoteCallError",
    "RemoteDirectory",
    "Session",
    "call_remote",
]
