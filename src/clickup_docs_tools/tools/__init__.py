"""
ClickUp Docs Tools - Tool implementations for FastMCP.

Usage:
    from fastmcp import FastMCP
    from clickup_docs_tools.tools import register_all_tools
    from clickup_docs_tools.credentials import CredentialManager

    mcp = FastMCP("my-server")
    credentials = CredentialManager()
    register_all_tools(mcp, credentials=credentials)
"""

from typing import TYPE_CHECKING, List, Optional

from fastmcp import FastMCP

from .clickup_docs_tool import register_tools as register_clickup_docs

if TYPE_CHECKING:
    from clickup_docs_tools.credentials import CredentialManager


def register_all_tools(
    mcp: FastMCP,
    credentials: Optional["CredentialManager"] = None,
) -> List[str]:
    """
    Register all tools with a FastMCP server.

    Args:
        mcp: FastMCP server instance
        credentials: Optional CredentialManager for centralized credential access.
                     If not provided, tools fall back to direct os.getenv() calls.

    Returns:
        List of registered tool names
    """
    return register_clickup_docs(mcp, credentials=credentials)


__all__ = ["register_all_tools"]
