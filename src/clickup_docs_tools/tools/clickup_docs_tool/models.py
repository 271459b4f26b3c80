"""
ClickUp Docs data shapes.

Response models mirror the ClickUp v3 Docs API and allow extra keys, since
the service owns those shapes. Parameter models carry the local bounds that
are checked before any request leaves the process.
"""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional, get_args

from pydantic import BaseModel, ConfigDict, Field

ContentFormat = Literal["markdown", "html", "text/md", "text/plain", "text/html"]
PageContentFormat = Literal["markdown", "html"]

CONTENT_FORMATS: tuple[str, ...] = get_args(ContentFormat)


# =========================================
# Response Shapes
# =========================================


class _Remote(BaseModel):
    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)


class DocParent(_Remote):
    id: Optional[str] = None
    type: Optional[int] = None


class SharingConfig(_Remote):
    public: Optional[bool] = None
    public_share_expires_on: Optional[int] = None
    public_fields: Optional[List[str]] = None
    team_sharing: Optional[bool] = None
    guest_sharing: Optional[bool] = None
    token: Optional[str] = None
    seo_optimized: Optional[bool] = None


class Doc(_Remote):
    id: Optional[str] = None
    name: Optional[str] = None
    date_created: Optional[int] = None
    date_updated: Optional[int] = None
    parent: Optional[DocParent] = None
    public: Optional[bool] = None
    workspace_id: Optional[int] = None
    creator: Optional[int] = None
    deleted: Optional[bool] = None
    type: Optional[int] = None
    content: Optional[str] = None
    url: Optional[str] = None
    sharing: Optional[SharingConfig] = None
    page_count: Optional[int] = None


class Page(_Remote):
    id: Optional[str] = None
    name: Optional[str] = None
    content: Optional[str] = None
    content_format: Optional[str] = None
    doc_id: Optional[str] = None
    parent_page_id: Optional[str] = None
    position: Optional[int] = None
    date_created: Optional[int] = None
    date_updated: Optional[int] = None
    creator: Optional[int] = None
    pages: Optional[List["Page"]] = None


class DocsResponse(_Remote):
    docs: Optional[List[Doc]] = None
    next_cursor: Optional[str] = None


# =========================================
# Request Parameters
# =========================================


class ListDocsParams(BaseModel):
    cursor: Optional[str] = None
    deleted: bool = False
    archived: bool = False
    limit: int = Field(25, ge=1, le=100)


class SearchDocsParams(BaseModel):
    query: str = Field(..., min_length=1)
    cursor: Optional[str] = None


class _Anchored(BaseModel):
    workspace_id: Optional[str] = None
    space_id: Optional[str] = None
    folder_id: Optional[str] = None

    def anchors(self) -> Dict[str, str]:
        """Return the anchor fields that were set, keyed by field name."""
        candidates = {
            "workspace_id": self.workspace_id,
            "space_id": self.space_id,
            "folder_id": self.folder_id,
        }
        return {key: value for key, value in candidates.items() if value}


class CreateDocParams(_Anchored):
    name: str = Field(..., min_length=1, max_length=255)
    content: Optional[str] = None
    public: bool = False
    template_id: Optional[str] = None
    template_variables: Optional[Dict[str, Any]] = None


class CreateFromTemplateParams(_Anchored):
    name: str = Field(..., min_length=1, max_length=255)
    template_variables: Optional[Dict[str, Any]] = None


class _PartialUpdate(BaseModel):
    def changes(self) -> Dict[str, Any]:
        """Fields the caller actually supplied, ready for a request body."""
        return self.model_dump(exclude_none=True)

    def is_empty(self) -> bool:
        return not self.changes()


class UpdateDocParams(_PartialUpdate):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    content: Optional[str] = None
    public: Optional[bool] = None


class CreatePageParams(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    content: str = Field(..., min_length=1)
    content_format: PageContentFormat = "markdown"
    parent_page_id: Optional[str] = None
    position: Optional[int] = Field(None, ge=0)


class UpdatePageParams(_PartialUpdate):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    content: Optional[str] = None
    content_format: Optional[PageContentFormat] = None
    position: Optional[int] = Field(None, ge=0)


class SharingParams(_PartialUpdate):
    public: Optional[bool] = None
    public_share_expires_on: Optional[int] = Field(None, gt=0)
    public_fields: Optional[List[str]] = None
    team_sharing: Optional[bool] = None
    guest_sharing: Optional[bool] = None


Page.model_rebuild()
