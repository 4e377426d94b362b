"""
Helper utilities for the sidebar search panel.

Provides:
- Settings loading (TOML merged over defaults)
- Logging setup
"""

import sys
from pathlib import Path
from typing import Any, Dict, Optional

import toml
from loguru import logger

DEFAULT_SETTINGS_PATH = Path(__file__).parent.parent / "data" / "settings.toml"


def load_settings(path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load panel settings from TOML file.

    Args:
        path: Settings file to read. Defaults to data/settings.toml
              inside the package.

    Returns:
        Dictionary containing settings with defaults applied

    Example settings structure:
        {
            "search": {
                "chat_limit": 30,
                "total_limit": 50
            },
            "remote": {
                "timeout_seconds": 10.0
            },
            "panel": {
                "compact": False
            },
            "logging": {
                "level": "INFO"
            }
        }
    """
    defaults = {
        "search": {
            "chat_limit": 30,
            "total_limit": 50,
        },
        "remote": {
            "timeout_seconds": 10.0,
        },
        "panel": {
            "compact": False,
        },
        "logging": {
            "level": "INFO",
        },
    }

    settings_path = Path(path) if path is not None else DEFAULT_SETTINGS_PATH

    if not settings_path.exists():
        logger.info(f"Settings file not found at {settings_path}, using defaults")
        return defaults

    try:
        loaded = toml.load(settings_path)
    except (OSError, toml.TomlDecodeError):
        logger.exception(f"Could not load settings from {settings_path}, using defaults")
        return defaults

    return _deep_merge(defaults, loaded)


def _deep_merge(base: Dict, override: Dict) -> Dict:
    """
    Deep merge two dictionaries.

    Args:
        base: Base dictionary with defaults
        override: Dictionary with overrides

    Returns:
        Merged dictionary (override takes precedence)
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def setup_logging(level: str = "INFO") -> int:
    """
    Replace loguru's default sink with a stderr sink at the given level.

    Returns:
        The loguru handler ID of the new sink
    """
    logger.remove()
    return logger.add(sys.stderr, level=level.upper())
