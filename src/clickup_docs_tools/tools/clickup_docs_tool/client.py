"""
ClickUp Docs client - one authenticated HTTP request per operation.

Docs, pages, and sharing live on API v3; doc search and the authorized
workspace listing are only available on API v2.

API Reference: https://developer.clickup.com/reference/searchdocs
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

import httpx
from pydantic import TypeAdapter, ValidationError

from clickup_docs_tools.utils.logging import get_logger

from .errors import ClickUpDocsError, from_response, from_transport, invalid_request
from .models import (
    CONTENT_FORMATS,
    CreateDocParams,
    CreateFromTemplateParams,
    CreatePageParams,
    Doc,
    DocsResponse,
    ListDocsParams,
    Page,
    SearchDocsParams,
    SharingConfig,
    SharingParams,
    UpdateDocParams,
    UpdatePageParams,
)

logger = get_logger(__name__)

CLICKUP_API_ROOT = "https://api.clickup.com/api"
DEFAULT_TIMEOUT = 30.0
SPACE_QUERY_PREFIX = "space:"

ANCHOR_REQUIRED = "Must specify workspace_id, space_id, or folder_id"

_ANCHOR_PATHS = {
    "workspace_id": "/workspaces/{}/docs",
    "space_id": "/spaces/{}/docs",
    "folder_id": "/folders/{}/docs",
}

_pages_adapter = TypeAdapter(List[Page])


@dataclass(frozen=True)
class ClickUpDocsConfig:
    """Connection settings, fixed for the lifetime of a client."""

    api_token: str
    base_url: str = CLICKUP_API_ROOT
    timeout: float = DEFAULT_TIMEOUT


def search_query_params(params: SearchDocsParams) -> Dict[str, str]:
    """
    Translate a search query into v2 query parameters.

    ``space:<id>`` scopes the search to a space and drops the name filter;
    anything else is sent as ``doc_name``.
    """
    if params.query.startswith(SPACE_QUERY_PREFIX):
        query = {"space_id": params.query[len(SPACE_QUERY_PREFIX):]}
    else:
        query = {"doc_name": params.query}
    if params.cursor:
        query["cursor"] = params.cursor
    return query


def resolve_anchor_path(context: str, params: CreateDocParams) -> str:
    """
    Pick the create endpoint from the anchors the caller set.

    When several are set, workspace wins over space, and space over folder.
    """
    anchors = params.anchors()
    if not anchors:
        raise ClickUpDocsError(f"{context}: {ANCHOR_REQUIRED}")
    field = next(name for name in _ANCHOR_PATHS if name in anchors)
    return _ANCHOR_PATHS[field].format(anchors[field])


def _parse(validate: Callable[[Any], Any], data: Any, context: str) -> Any:
    """
    Validate a success body against its response model.

    The service owns these shapes, so a body the model does not accept is
    returned as sent rather than failing a request that already succeeded.
    """
    try:
        return validate(data)
    except ValidationError as e:
        logger.warning(
            "Unexpected response shape (%s): %d issue(s), using raw body",
            context,
            e.error_count(),
        )
        return data


class ClickUpDocsClient:
    """Async client for the ClickUp Docs API."""

    def __init__(self, config: ClickUpDocsConfig):
        self._config = config

    @property
    def config(self) -> ClickUpDocsConfig:
        return self._config

    @property
    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": self._config.api_token,
            "Accept": "application/json",
            "Content-Type": "application/json",
        }

    def _url(self, version: str, path: str) -> str:
        return f"{self._config.base_url.rstrip('/')}/{version}{path}"

    async def _request(
        self,
        method: str,
        path: str,
        context: str,
        *,
        version: str = "v3",
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Dict[str, Any]] = None,
        expect_body: bool = True,
    ) -> Any:
        url = self._url(version, path)
        logger.debug("%s %s", method, url)
        try:
            async with httpx.AsyncClient(timeout=self._config.timeout) as http:
                response = await http.request(
                    method,
                    url,
                    headers=self._headers,
                    params=params,
                    json=json,
                )
        except httpx.RequestError as e:
            logger.warning("%s %s failed: %s", method, url, e)
            raise from_transport(context, e) from e

        if not response.is_success:
            error = from_response(context, response)
            logger.warning("%s %s -> %s: %s", method, url, response.status_code, error)
            raise error

        if not expect_body:
            return None
        if not response.content:
            return {}
        return response.json()

    @staticmethod
    def _require_format(context: str, content_format: str) -> None:
        if content_format not in CONTENT_FORMATS:
            raise invalid_request(
                context,
                f"Unsupported content format '{content_format}'. "
                f"Use one of: {', '.join(CONTENT_FORMATS)}",
            )

    # ----------------------------------------
    # Docs
    # ----------------------------------------

    async def list_docs(
        self, workspace_id: str, params: Optional[ListDocsParams] = None
    ) -> DocsResponse:
        context = "Failed to get docs from workspace"
        params = params or ListDocsParams()
        query: Dict[str, Any] = {
            "deleted": str(params.deleted).lower(),
            "archived": str(params.archived).lower(),
            "limit": params.limit,
        }
        if params.cursor:
            query["cursor"] = params.cursor

        data = await self._request(
            "GET",
            f"/workspaces/{workspace_id}/docs",
            context,
            params=query,
        )
        return _parse(DocsResponse.model_validate, data, context)

    async def search_docs(self, workspace_id: str, params: SearchDocsParams) -> Any:
        return await self._request(
            "GET",
            f"/team/{workspace_id}/docs/search",
            "Failed to search docs",
            version="v2",
            params=search_query_params(params),
        )

    async def get_doc(self, workspace_id: str, doc_id: str) -> Doc:
        context = f"Failed to get document {doc_id}"
        data = await self._request(
            "GET",
            f"/workspaces/{workspace_id}/docs/{doc_id}",
            context,
        )
        return _parse(Doc.model_validate, data, context)

    async def create_doc(self, params: CreateDocParams) -> Doc:
        return await self._create_doc(params, "Failed to create document")

    async def _create_doc(self, params: CreateDocParams, context: str) -> Doc:
        path = resolve_anchor_path(context, params)

        body: Dict[str, Any] = {
            "name": params.name,
            "content": params.content or "",
            "public": params.public,
        }
        if params.template_id:
            body["template_id"] = params.template_id
        if params.template_variables:
            body["template_variables"] = params.template_variables

        data = await self._request("POST", path, context, json=body)
        return _parse(Doc.model_validate, data, context)

    async def update_doc(
        self, workspace_id: str, doc_id: str, params: UpdateDocParams
    ) -> Doc:
        context = f"Failed to update document {doc_id}"
        if params.is_empty():
            raise invalid_request(context, "no fields to update")

        data = await self._request(
            "PUT",
            f"/workspaces/{workspace_id}/docs/{doc_id}",
            context,
            json=params.changes(),
        )
        return _parse(Doc.model_validate, data, context)

    async def delete_doc(self, workspace_id: str, doc_id: str) -> None:
        await self._request(
            "DELETE",
            f"/workspaces/{workspace_id}/docs/{doc_id}",
            f"Failed to delete document {doc_id}",
            expect_body=False,
        )

    async def create_doc_from_template(
        self, template_id: str, params: CreateFromTemplateParams
    ) -> Doc:
        create_params = CreateDocParams(
            **params.model_dump(),
            template_id=template_id,
        )
        return await self._create_doc(
            create_params, f"Failed to create document from template {template_id}"
        )

    # ----------------------------------------
    # Pages
    # ----------------------------------------

    async def list_pages(
        self, workspace_id: str, doc_id: str, content_format: str = "text/md"
    ) -> List[Page]:
        context = "Failed to get doc pages"
        self._require_format(context, content_format)

        data = await self._request(
            "GET",
            f"/workspaces/{workspace_id}/docs/{doc_id}/pages",
            context,
            params={"max_page_depth": -1, "content_format": content_format},
        )
        if isinstance(data, dict):
            data = data.get("pages", [])
        return _parse(_pages_adapter.validate_python, data or [], context)

    async def get_page(
        self, doc_id: str, page_id: str, content_format: Optional[str] = None
    ) -> Page:
        context = f"Failed to get page {page_id} from document {doc_id}"
        params: Dict[str, Any] = {}
        if content_format is not None:
            self._require_format(context, content_format)
            params["content_format"] = content_format

        data = await self._request(
            "GET", f"/docs/{doc_id}/pages/{page_id}", context, params=params
        )
        return _parse(Page.model_validate, data, context)

    async def create_page(self, doc_id: str, params: CreatePageParams) -> Page:
        context = f"Failed to create page in document {doc_id}"
        body: Dict[str, Any] = {
            "name": params.name,
            "content": params.content,
            "content_format": params.content_format,
        }
        if params.parent_page_id:
            body["parent_page_id"] = params.parent_page_id
        if params.position is not None:
            body["position"] = params.position

        data = await self._request(
            "POST",
            f"/docs/{doc_id}/pages",
            context,
            json=body,
        )
        return _parse(Page.model_validate, data, context)

    async def update_page(
        self, doc_id: str, page_id: str, params: UpdatePageParams
    ) -> Page:
        context = f"Failed to update page {page_id} in document {doc_id}"
        if params.is_empty():
            raise invalid_request(context, "no fields to update")

        data = await self._request(
            "PUT",
            f"/docs/{doc_id}/pages/{page_id}",
            context,
            json=params.changes(),
        )
        return _parse(Page.model_validate, data, context)

    async def delete_page(self, doc_id: str, page_id: str) -> None:
        await self._request(
            "DELETE",
            f"/docs/{doc_id}/pages/{page_id}",
            f"Failed to delete page {page_id} from document {doc_id}",
            expect_body=False,
        )

    # ----------------------------------------
    # Sharing
    # ----------------------------------------

    async def get_sharing(self, doc_id: str) -> SharingConfig:
        context = f"Failed to get sharing settings for document {doc_id}"
        data = await self._request(
            "GET",
            f"/docs/{doc_id}/sharing",
            context,
        )
        return _parse(SharingConfig.model_validate, data, context)

    async def update_sharing(self, doc_id: str, params: SharingParams) -> SharingConfig:
        context = f"Failed to update sharing settings for document {doc_id}"
        if params.is_empty():
            raise invalid_request(context, "no sharing settings to update")

        data = await self._request(
            "PUT", f"/docs/{doc_id}/sharing", context, json=params.changes()
        )
        return _parse(SharingConfig.model_validate, data, context)

    # ----------------------------------------
    # Account
    # ----------------------------------------

    async def get_authorized_workspaces(self) -> Any:
        return await self._request(
            "GET", "/team", "Failed to reach ClickUp", version="v2"
        )
