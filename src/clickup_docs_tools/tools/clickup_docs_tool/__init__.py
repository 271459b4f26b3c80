"""
ClickUp Docs Tool - Document, page, and sharing operations.

Provides ClickUp Docs MCP tools backed by an async ClickUp API client.
"""

from .client import ClickUpDocsClient, ClickUpDocsConfig
from .docs_tool import register_tools
from .errors import ClickUpDocsError, classify_status

__all__ = [
    "ClickUpDocsClient",
    "ClickUpDocsConfig",
    "ClickUpDocsError",
    "classify_status",
    "register_tools",
]
