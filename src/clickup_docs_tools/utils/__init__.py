"""
Utility functions for ClickUp Docs Tools.
"""

from .logging import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
]
