"""
ClickUp Docs Tools - ClickUp Docs operations exposed as FastMCP tools.

Usage:
    from fastmcp import FastMCP
    from clickup_docs_tools import register_all_tools
    from clickup_docs_tools.credentials import CredentialManager

    mcp = FastMCP("clickup-docs")
    register_all_tools(mcp, credentials=CredentialManager())
"""

__version__ = "0.1.0"

from .tools import register_all_tools  # noqa: E402

__all__ = ["__version__", "register_all_tools"]
