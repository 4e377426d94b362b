# Sidebar Search Utilities Package
"""
Shared utility functions and helpers for the sidebar search panel.
"""

from .helpers import load_settings, setup_logging
from .signals import SignalEmitter

__all__ = ["load_settings", "setup_logging", "SignalEmitter"]
