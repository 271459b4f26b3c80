"""
Integration tests for the ClickUp Docs MCP server.

Tests the server setup, tool registration, and HTTP routes.
"""

import pytest


class TestMCPServerSetup:
    """Tests for server initialization and configuration."""

    def test_package_importable(self):
        from clickup_docs_tools import __version__, register_all_tools

        assert __version__ is not None
        assert register_all_tools is not None

    def test_register_all_tools_returns_list(self, mcp, mock_credentials):
        from clickup_docs_tools.tools import register_all_tools

        tools = register_all_tools(mcp, credentials=mock_credentials)

        assert isinstance(tools, list)
        assert len(tools) == 16

    def test_registered_names_match_server(self, mcp, mock_credentials):
        from clickup_docs_tools.tools import register_all_tools

        tools = register_all_tools(mcp, credentials=mock_credentials)

        for name in tools:
            assert name in mcp._tool_manager._tools

    def test_server_module_builds_app(self, monkeypatch):
        monkeypatch.setenv("CLICKUP_API_TOKEN", "pk_test")
        from clickup_docs_tools import mcp_server

        assert mcp_server.mcp.name == "clickup-docs"
        assert "clickup_get_doc" in mcp_server.tools


class TestHTTPRoutes:
    @pytest.mark.asyncio
    async def test_health_route(self, monkeypatch):
        monkeypatch.setenv("CLICKUP_API_TOKEN", "pk_test")
        from clickup_docs_tools import mcp_server

        response = await mcp_server.health_check(None)

        assert response.status_code == 200
        assert response.body == b"OK"
