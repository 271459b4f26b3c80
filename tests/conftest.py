"""Shared test fixtures for ClickUp Docs Tools tests."""

from __future__ import annotations

from typing import Any

import httpx
import pytest
from fastmcp import FastMCP

from clickup_docs_tools.credentials import CredentialManager


@pytest.fixture
def mcp():
    """A fresh FastMCP server for each test."""
    return FastMCP("test-clickup-docs")


@pytest.fixture
def mock_credentials():
    """Credential manager with a fake ClickUp token."""
    return CredentialManager.for_testing("pk_test_token")


@pytest.fixture
def respond():
    """Build real httpx responses for mocked AsyncClient.request calls."""

    def _respond(status_code: int = 200, json: Any = None, text: str | None = None):
        request = httpx.Request("GET", "https://api.clickup.com/api")
        if json is not None:
            return httpx.Response(status_code, json=json, request=request)
        return httpx.Response(status_code, text=text or "", request=request)

    return _respond
