# src/assertkit/core/__init__.py
"""Core infrastructure: Configuration, Logging."""

from assertkit.core.config import AssertkitSettings, get_settings, load_settings
from assertkit.core.logging import configure_logging, get_logger

__all__ = [
    "AssertkitSettings",
    "configure_logging",
    "get_logger",
    "get_settings",
    "load_settings",
]
