#!/usr/bin/env python3
"""
ClickUp Docs MCP Server

Exposes the ClickUp Docs tools via Model Context Protocol using FastMCP.

Usage:
    # Run with HTTP transport (default)
    python -m clickup_docs_tools.mcp_server

    # Run with custom port
    python -m clickup_docs_tools.mcp_server --port 8001

    # Run with STDIO transport (for desktop agent hosts)
    python -m clickup_docs_tools.mcp_server --stdio

Environment Variables:
    MCP_PORT                - Server port (default: 4001)
    CLICKUP_API_TOKEN       - ClickUp personal API token (read once at startup)
    CLICKUP_DOCS_LOG_LEVEL  - Log level for the clickup_docs_tools loggers
"""

import argparse
import os

from fastmcp import FastMCP
from starlette.requests import Request
from starlette.responses import PlainTextResponse

from clickup_docs_tools.credentials import CredentialManager
from clickup_docs_tools.tools import register_all_tools
from clickup_docs_tools.utils.logging import get_logger

logger = get_logger(__name__)

# A missing token is reported per tool call, so the server still starts.
credentials = CredentialManager()

mcp = FastMCP("clickup-docs")

tools = register_all_tools(mcp, credentials=credentials)
logger.info("Registered %d tools: %s", len(tools), tools)


@mcp.custom_route("/health", methods=["GET"])
async def health_check(request: Request) -> PlainTextResponse:
    """Health check endpoint for container orchestration."""
    return PlainTextResponse("OK")


@mcp.custom_route("/", methods=["GET"])
async def index(request: Request) -> PlainTextResponse:
    """Landing page for browser visits."""
    return PlainTextResponse("ClickUp Docs MCP Server")


def main() -> None:
    """Entry point for the MCP server."""
    parser = argparse.ArgumentParser(description="ClickUp Docs MCP Server")
    parser.add_argument(
        "--port",
        type=int,
        default=int(os.getenv("MCP_PORT", "4001")),
        help="HTTP server port (default: 4001)",
    )
    parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="HTTP server host (default: 127.0.0.1)",
    )
    parser.add_argument(
        "--stdio",
        action="store_true",
        help="Use STDIO transport instead of HTTP",
    )
    args = parser.parse_args()

    if args.stdio:
        mcp.run(transport="stdio")
    else:
        logger.info("Starting HTTP server on %s:%s", args.host, args.port)
        mcp.run(transport="http", host=args.host, port=args.port)


if __name__ == "__main__":
    main()
