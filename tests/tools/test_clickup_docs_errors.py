"""Tests for ClickUp Docs error normalization."""

from __future__ import annotations

import httpx
import pytest

from clickup_docs_tools.tools.clickup_docs_tool.errors import (
    STATUS_CATEGORIES,
    ClickUpDocsError,
    classify_status,
    extract_error_message,
    from_response,
    from_transport,
)


class TestClassifyStatus:
    """The status to category mapping is total and deterministic."""

    @pytest.mark.parametrize(
        "status, expected",
        [
            (400, "Invalid request"),
            (401, "Authentication failed"),
            (403, "Permission denied"),
            (404, "Resource not found"),
            (413, "Content too large"),
            (429, "Rate limit exceeded"),
            (500, "Server error"),
        ],
    )
    def test_known_statuses(self, status, expected):
        assert classify_status(status, "ignored") == expected

    def test_unknown_status_uses_raw_message(self):
        assert classify_status(418, "I'm a teapot") == "I'm a teapot"

    def test_same_status_same_category(self):
        assert classify_status(429) == classify_status(429, "different body")

    def test_table_covers_documented_statuses(self):
        assert set(STATUS_CATEGORIES) == {400, 401, 403, 404, 413, 429, 500}


class TestFromResponse:
    def test_mapped_status_with_server_message(self, respond):
        response = respond(404, json={"err": "Doc not found", "ECODE": "DOC_001"})

        error = from_response("Failed to get document d1", response)

        assert isinstance(error, ClickUpDocsError)
        assert str(error) == "Failed to get document d1: Resource not found - Doc not found"
        assert error.status_code == 404
        assert error.category == "Resource not found"

    def test_mapped_status_without_body_uses_hint(self, respond):
        error = from_response("Failed to get docs from workspace", respond(401))

        assert str(error) == (
            "Failed to get docs from workspace: Authentication failed - check API token"
        )

    def test_unmapped_status_uses_raw_message(self, respond):
        error = from_response("Failed to search docs", respond(418, text="short and stout"))

        assert str(error) == "Failed to search docs: short and stout"
        assert error.category == "short and stout"

    def test_unmapped_status_without_body_uses_reason_phrase(self, respond):
        error = from_response("Failed to search docs", respond(418))

        assert str(error).lower() == "failed to search docs: i'm a teapot"

    def test_message_key_is_read(self, respond):
        assert extract_error_message(respond(400, json={"message": "bad limit"})) == "bad limit"


class TestFromTransport:
    def test_transport_message_is_kept(self):
        request = httpx.Request("GET", "https://api.clickup.com/api/v3/docs/d1/sharing")
        exc = httpx.ConnectError("Connection refused", request=request)

        error = from_transport("Failed to get sharing settings for document d1", exc)

        assert str(error) == "Failed to get sharing settings for document d1: Connection refused"
        assert error.status_code is None
