"""
ClickUp Docs Tool - Document, page, and sharing operations via ClickUp API v3.

Supports:
- Doc discovery: workspace listing, search, metadata, combined content
- Doc create/update/delete, including creation from a template
- Page create/read/update/delete
- Public and team sharing settings

API Reference: https://developer.clickup.com/reference/createdoc
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Annotated, Any, Dict, List, Optional

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from pydantic import Field

from clickup_docs_tools.utils.logging import get_logger

from .client import ClickUpDocsClient, ClickUpDocsConfig
from .models import (
    ContentFormat,
    CreateDocParams,
    CreateFromTemplateParams,
    CreatePageParams,
    ListDocsParams,
    PageContentFormat,
    SearchDocsParams,
    SharingParams,
    UpdateDocParams,
    UpdatePageParams,
)
from .operations import (
    DocOperation,
    ToolReply,
    combine_page_content,
    require_anchor,
    require_any,
    run_operation,
)

if TYPE_CHECKING:
    from clickup_docs_tools.credentials import CredentialManager

logger = get_logger(__name__)

WorkspaceId = Annotated[str, Field(min_length=1, description="The ID of the workspace")]
DocId = Annotated[str, Field(min_length=1, description="The ID of the document")]
PageId = Annotated[str, Field(min_length=1, description="The ID of the page")]
DocName = Annotated[str, Field(min_length=1, max_length=255, description="Document name")]
Position = Annotated[int, Field(ge=0, description="Position among sibling pages")]


def _summarize_workspaces(data: Any) -> str:
    teams = data.get("teams", []) if isinstance(data, dict) else []
    lines = [f"Connected to ClickUp. {len(teams)} workspace(s) available:"]
    for team in teams:
        lines.append(f"- {team.get('name', '(unnamed)')} ({team.get('id')})")
    return "\n".join(lines)


GET_DOC_CONTENT = DocOperation(
    "clickup_get_doc_content", "getting doc content", render=combine_page_content
)
SEARCH_DOCS = DocOperation("clickup_search_docs", "searching docs")
LIST_DOCS = DocOperation("clickup_get_docs_from_workspace", "getting docs from workspace")
GET_DOC_PAGES = DocOperation("clickup_get_doc_pages", "getting doc pages")
GET_DOC_PAGE = DocOperation("clickup_get_doc_page", "getting page")
CREATE_DOC = DocOperation(
    "clickup_create_doc", "creating document", success="Document created successfully!"
)
UPDATE_DOC = DocOperation(
    "clickup_update_doc", "updating document", success="Document updated successfully!"
)
DELETE_DOC = DocOperation(
    "clickup_delete_doc",
    "deleting document",
    success="Document {doc_id} deleted successfully.",
    returns_body=False,
)
GET_DOC = DocOperation("clickup_get_doc", "getting document")
CREATE_PAGE = DocOperation(
    "clickup_create_doc_page", "creating page", success="Page created successfully!"
)
UPDATE_PAGE = DocOperation(
    "clickup_update_doc_page", "updating page", success="Page updated successfully!"
)
DELETE_PAGE = DocOperation(
    "clickup_delete_doc_page",
    "deleting page",
    success="Page {page_id} deleted successfully from document {doc_id}.",
    returns_body=False,
)
GET_SHARING = DocOperation("clickup_get_doc_sharing", "getting document sharing")
UPDATE_SHARING = DocOperation(
    "clickup_update_doc_sharing",
    "updating document sharing",
    success="Document sharing updated successfully!",
)
CREATE_FROM_TEMPLATE = DocOperation(
    "clickup_create_doc_from_template",
    "creating document from template",
    success="Document created from template successfully!",
)
TEST_CONNECTION = DocOperation(
    "clickup_docs_test_connection", "testing connection", render=_summarize_workspaces
)

OPERATIONS = [
    GET_DOC_CONTENT,
    SEARCH_DOCS,
    LIST_DOCS,
    GET_DOC_PAGES,
    GET_DOC_PAGE,
    CREATE_DOC,
    UPDATE_DOC,
    DELETE_DOC,
    GET_DOC,
    CREATE_PAGE,
    UPDATE_PAGE,
    DELETE_PAGE,
    GET_SHARING,
    UPDATE_SHARING,
    CREATE_FROM_TEMPLATE,
    TEST_CONNECTION,
]


def _reply(reply: ToolReply) -> str:
    """Return reply text, or raise so FastMCP marks the result as an error."""
    if reply.is_error:
        raise ToolError(reply.text)
    return reply.text


def register_tools(
    mcp: FastMCP,
    credentials: CredentialManager | None = None,
) -> list[str]:
    """Register ClickUp Docs tools with the MCP server."""

    def _get_api_token() -> str | None:
        """Get ClickUp token from credential manager or environment."""
        if credentials is not None:
            token = credentials.get("clickup")
            if token is not None and not isinstance(token, str):
                return None
            return token
        return os.getenv("CLICKUP_API_TOKEN")

    # Resolved once; the token is not re-read per call.
    token = _get_api_token()
    client = ClickUpDocsClient(ClickUpDocsConfig(api_token=token)) if token else None
    if client is None:
        logger.warning("CLICKUP_API_TOKEN not configured; ClickUp Docs tools will report errors")

    async def _run(op: DocOperation, call, **kwargs: Any) -> str:
        return _reply(await run_operation(op, client, call, **kwargs))

    # ----------------------------------------
    # Reads
    # ----------------------------------------

    @mcp.tool()
    async def clickup_get_doc_content(
        workspace_id: WorkspaceId,
        doc_id: DocId,
        content_format: ContentFormat = "text/md",
    ) -> str:
        """
        Get the content of a specific ClickUp doc.

        Returns combined content from all pages in the doc, each page under
        a heading with its name. Nested sub-pages are included, each one
        directly after its parent page.
        """
        return await _run(
            GET_DOC_CONTENT,
            lambda c: c.list_pages(workspace_id, doc_id, content_format),
        )

    @mcp.tool()
    async def clickup_search_docs(
        workspace_id: WorkspaceId,
        query: Annotated[
            str,
            Field(
                min_length=1,
                description="Doc name to search for, or 'space:<space_id>' to list a space's docs",
            ),
        ],
        cursor: Optional[str] = None,
    ) -> str:
        """Search for docs in a ClickUp workspace. Returns matching docs with their metadata."""
        return await _run(
            SEARCH_DOCS,
            lambda c: c.search_docs(
                workspace_id, SearchDocsParams(query=query, cursor=cursor)
            ),
        )

    @mcp.tool()
    async def clickup_get_docs_from_workspace(
        workspace_id: WorkspaceId,
        cursor: Optional[str] = None,
        deleted: bool = False,
        archived: bool = False,
        limit: Annotated[int, Field(ge=1, le=100)] = 25,
    ) -> str:
        """Get docs from a ClickUp workspace, with pagination and deleted/archived filters."""
        return await _run(
            LIST_DOCS,
            lambda c: c.list_docs(
                workspace_id,
                ListDocsParams(
                    cursor=cursor, deleted=deleted, archived=archived, limit=limit
                ),
            ),
        )

    @mcp.tool()
    async def clickup_get_doc_pages(
        workspace_id: WorkspaceId,
        doc_id: DocId,
        content_format: ContentFormat = "text/md",
    ) -> str:
        """Get all pages of a ClickUp doc, nested pages included, in the requested format."""
        return await _run(
            GET_DOC_PAGES,
            lambda c: c.list_pages(workspace_id, doc_id, content_format),
        )

    @mcp.tool()
    async def clickup_get_doc_page(
        doc_id: DocId,
        page_id: PageId,
        content_format: Optional[ContentFormat] = None,
    ) -> str:
        """Get a single page of a ClickUp doc."""
        return await _run(
            GET_DOC_PAGE,
            lambda c: c.get_page(doc_id, page_id, content_format),
        )

    @mcp.tool()
    async def clickup_get_doc(workspace_id: WorkspaceId, doc_id: DocId) -> str:
        """Get metadata and sharing settings for a specific ClickUp document."""
        return await _run(GET_DOC, lambda c: c.get_doc(workspace_id, doc_id))

    # ----------------------------------------
    # Document writes
    # ----------------------------------------

    @mcp.tool()
    async def clickup_create_doc(
        name: DocName,
        workspace_id: Optional[str] = None,
        space_id: Optional[str] = None,
        folder_id: Optional[str] = None,
        content: Optional[str] = None,
        public: bool = False,
        template_id: Optional[str] = None,
    ) -> str:
        """
        Create a new document in ClickUp.

        Set exactly one of workspace_id, space_id, or folder_id to choose
        where the document lives. Pass template_id to start from a template.
        """
        return await _run(
            CREATE_DOC,
            lambda c: c.create_doc(
                CreateDocParams(
                    workspace_id=workspace_id,
                    space_id=space_id,
                    folder_id=folder_id,
                    name=name,
                    content=content,
                    public=public,
                    template_id=template_id,
                )
            ),
            precheck=require_anchor(workspace_id, space_id, folder_id),
        )

    @mcp.tool()
    async def clickup_update_doc(
        workspace_id: WorkspaceId,
        doc_id: DocId,
        name: Optional[DocName] = None,
        content: Optional[str] = None,
        public: Optional[bool] = None,
    ) -> str:
        """Update the name, content, or public flag of a ClickUp document."""
        return await _run(
            UPDATE_DOC,
            lambda c: c.update_doc(
                workspace_id,
                doc_id,
                UpdateDocParams(name=name, content=content, public=public),
            ),
            precheck=require_any(
                "Must specify at least one field to update (name, content, or public)",
                name,
                content,
                public,
            ),
        )

    @mcp.tool()
    async def clickup_delete_doc(workspace_id: WorkspaceId, doc_id: DocId) -> str:
        """Delete a ClickUp document. This action cannot be undone."""
        return await _run(
            DELETE_DOC,
            lambda c: c.delete_doc(workspace_id, doc_id),
            doc_id=doc_id,
        )

    @mcp.tool()
    async def clickup_create_doc_from_template(
        template_id: Annotated[str, Field(min_length=1, description="The ID of the template")],
        name: DocName,
        workspace_id: Optional[str] = None,
        space_id: Optional[str] = None,
        folder_id: Optional[str] = None,
        template_variables: Optional[Dict[str, Any]] = None,
    ) -> str:
        """Create a new document from a ClickUp template in a workspace, space, or folder."""
        return await _run(
            CREATE_FROM_TEMPLATE,
            lambda c: c.create_doc_from_template(
                template_id,
                CreateFromTemplateParams(
                    workspace_id=workspace_id,
                    space_id=space_id,
                    folder_id=folder_id,
                    name=name,
                    template_variables=template_variables,
                ),
            ),
            precheck=require_anchor(workspace_id, space_id, folder_id),
        )

    # ----------------------------------------
    # Pages
    # ----------------------------------------

    @mcp.tool()
    async def clickup_create_doc_page(
        doc_id: DocId,
        name: Annotated[str, Field(min_length=1, max_length=255)],
        content: Annotated[str, Field(min_length=1)],
        content_format: PageContentFormat = "markdown",
        parent_page_id: Optional[str] = None,
        position: Optional[Position] = None,
    ) -> str:
        """Create a new page in a ClickUp document. Supports markdown and HTML content."""
        return await _run(
            CREATE_PAGE,
            lambda c: c.create_page(
                doc_id,
                CreatePageParams(
                    name=name,
                    content=content,
                    content_format=content_format,
                    parent_page_id=parent_page_id,
                    position=position,
                ),
            ),
        )

    @mcp.tool()
    async def clickup_update_doc_page(
        doc_id: DocId,
        page_id: PageId,
        name: Optional[Annotated[str, Field(min_length=1, max_length=255)]] = None,
        content: Optional[str] = None,
        content_format: Optional[PageContentFormat] = None,
        position: Optional[Position] = None,
    ) -> str:
        """Update the name, content, format, or position of a page in a ClickUp document."""
        return await _run(
            UPDATE_PAGE,
            lambda c: c.update_page(
                doc_id,
                page_id,
                UpdatePageParams(
                    name=name,
                    content=content,
                    content_format=content_format,
                    position=position,
                ),
            ),
            precheck=require_any(
                "Must specify at least one field to update "
                "(name, content, content_format, or position)",
                name,
                content,
                content_format,
                position,
            ),
        )

    @mcp.tool()
    async def clickup_delete_doc_page(doc_id: DocId, page_id: PageId) -> str:
        """Delete a page from a ClickUp document. This action cannot be undone."""
        return await _run(
            DELETE_PAGE,
            lambda c: c.delete_page(doc_id, page_id),
            doc_id=doc_id,
            page_id=page_id,
        )

    # ----------------------------------------
    # Sharing
    # ----------------------------------------

    @mcp.tool()
    async def clickup_get_doc_sharing(doc_id: DocId) -> str:
        """Get the sharing settings for a ClickUp document."""
        return await _run(GET_SHARING, lambda c: c.get_sharing(doc_id))

    @mcp.tool()
    async def clickup_update_doc_sharing(
        doc_id: DocId,
        public: Optional[bool] = None,
        public_share_expires_on: Optional[Annotated[int, Field(gt=0)]] = None,
        public_fields: Optional[List[str]] = None,
        team_sharing: Optional[bool] = None,
        guest_sharing: Optional[bool] = None,
    ) -> str:
        """Update public, team, and guest sharing settings for a ClickUp document."""
        return await _run(
            UPDATE_SHARING,
            lambda c: c.update_sharing(
                doc_id,
                SharingParams(
                    public=public,
                    public_share_expires_on=public_share_expires_on,
                    public_fields=public_fields,
                    team_sharing=team_sharing,
                    guest_sharing=guest_sharing,
                ),
            ),
            precheck=require_any(
                "Must specify at least one sharing setting to update",
                public,
                public_share_expires_on,
                public_fields,
                team_sharing,
                guest_sharing,
            ),
        )

    # ----------------------------------------
    # Connection
    # ----------------------------------------

    @mcp.tool()
    async def clickup_docs_test_connection() -> str:
        """Check the ClickUp API token and list the workspaces it can access."""
        return await _run(TEST_CONNECTION, lambda c: c.get_authorized_workspaces())

    return [op.name for op in OPERATIONS]
