"""Core functionality shared by the imgflip client."""

from .config import Settings, load_settings
from .log import get_logger, setup_logging, setup_test_logging

__all__ = [
    "Settings",
    "load_settings",
    "get_logger",
    "setup_logging",
    "setup_test_logging",
]
