"""Tests for the shared ClickUp Docs tool pipeline."""

from __future__ import annotations

import json
from unittest.mock import AsyncMock, MagicMock

import pytest

from clickup_docs_tools.tools.clickup_docs_tool.errors import ClickUpDocsError
from clickup_docs_tools.tools.clickup_docs_tool.models import ListDocsParams, Page
from clickup_docs_tools.tools.clickup_docs_tool.operations import (
    NO_CONTENT,
    DocOperation,
    ToolReply,
    combine_page_content,
    require_anchor,
    require_any,
    run_operation,
)


def _pages(*items):
    return [Page.model_validate(item) for item in items]


class TestCombinePageContent:
    def test_pages_in_listing_order_with_headings(self):
        pages = _pages(
            {"id": "p1", "name": "Intro", "content": "Hello"},
            {"id": "p2", "name": "Details", "content": "More text"},
        )

        assert combine_page_content(pages) == "# Intro\n\nHello\n\n# Details\n\nMore text"

    def test_pages_without_content_are_skipped(self):
        pages = _pages(
            {"id": "p1", "name": "Empty", "content": ""},
            {"id": "p2", "name": "Full", "content": "Body"},
        )

        assert combine_page_content(pages) == "# Full\n\nBody"

    def test_nested_pages_follow_their_parent(self):
        pages = _pages(
            {
                "id": "p1",
                "name": "Parent",
                "content": "A",
                "pages": [{"id": "p1a", "name": "Child", "content": "B"}],
            },
            {"id": "p2", "name": "Sibling", "content": "C"},
        )

        assert combine_page_content(pages) == "# Parent\n\nA\n\n# Child\n\nB\n\n# Sibling\n\nC"

    def test_raw_page_dicts_are_combined(self):
        pages = [
            {"id": "p1", "name": "Intro", "content": "Hi", "pages": [{"name": "Sub", "content": "S"}]},
            {"id": "p2", "content": "Untitled body"},
        ]

        assert combine_page_content(pages) == "# Intro\n\nHi\n\n# Sub\n\nS\n\n# \n\nUntitled body"

    def test_no_pages_gives_placeholder(self):
        assert combine_page_content([]) == NO_CONTENT

    def test_all_empty_gives_placeholder(self):
        pages = _pages({"id": "p1", "name": "Blank"}, {"id": "p2", "name": "Also blank"})

        assert combine_page_content(pages) == "No content found in this doc."


class TestPrechecks:
    def test_anchor_required(self):
        assert require_anchor(None, None, None)() is not None
        assert require_anchor(None, "s1", None)() is None

    def test_any_field_required(self):
        assert require_any("nothing set", None, None)() == "nothing set"
        assert require_any("nothing set", None, False)() is None


class TestRunOperation:
    @pytest.mark.asyncio
    async def test_failed_precheck_makes_no_call(self):
        op = DocOperation("clickup_create_doc", "creating document")
        call = AsyncMock()

        reply = await run_operation(
            op, MagicMock(), call, precheck=require_anchor(None, None, None)
        )

        assert reply == ToolReply(
            "Error: Must specify workspace_id, space_id, or folder_id", is_error=True
        )
        call.assert_not_called()

    @pytest.mark.asyncio
    async def test_missing_client_reports_token_error(self):
        op = DocOperation("clickup_get_doc", "getting document")

        reply = await run_operation(op, None, AsyncMock())

        assert reply.is_error
        assert "not configured" in reply.text

    @pytest.mark.asyncio
    async def test_client_error_is_rendered_with_action(self):
        op = DocOperation("clickup_get_doc", "getting document")
        call = AsyncMock(
            side_effect=ClickUpDocsError("Failed to get document d1: Resource not found - gone")
        )

        reply = await run_operation(op, MagicMock(), call)

        assert reply.is_error
        assert reply.text == (
            "Error getting document: Failed to get document d1: Resource not found - gone"
        )

    @pytest.mark.asyncio
    async def test_local_validation_error_is_rendered(self):
        op = DocOperation("clickup_get_docs_from_workspace", "getting docs from workspace")

        async def call(client):
            return await client.list_docs("w1", ListDocsParams(limit=500))

        reply = await run_operation(op, MagicMock(), call)

        assert reply.is_error
        assert reply.text.startswith("Error getting docs from workspace: Invalid parameters - limit")

    @pytest.mark.asyncio
    async def test_success_with_heading(self):
        op = DocOperation("clickup_create_doc", "creating document", success="Document created successfully!")
        call = AsyncMock(return_value={"id": "d1", "name": "Doc1"})

        reply = await run_operation(op, MagicMock(), call)

        heading, body = reply.text.split("\n\n", 1)
        assert heading == "Document created successfully!"
        assert json.loads(body) == {"id": "d1", "name": "Doc1"}
        assert not reply.is_error

    @pytest.mark.asyncio
    async def test_delete_confirmation_uses_fields(self):
        op = DocOperation(
            "clickup_delete_doc",
            "deleting document",
            success="Document {doc_id} deleted successfully.",
            returns_body=False,
        )

        reply = await run_operation(op, MagicMock(), AsyncMock(return_value=None), doc_id="d9")

        assert reply == ToolReply("Document d9 deleted successfully.")

    @pytest.mark.asyncio
    async def test_models_dump_only_fields_sent(self):
        op = DocOperation("clickup_get_doc_page", "getting page")
        page = Page.model_validate({"id": "p1", "name": "Intro", "custom": 1})

        reply = await run_operation(op, MagicMock(), AsyncMock(return_value=page))

        assert json.loads(reply.text) == {"id": "p1", "name": "Intro", "custom": 1}
