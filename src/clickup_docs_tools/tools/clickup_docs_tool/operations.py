"""
Shared check -> delegate -> render pipeline for the ClickUp Docs tools.

Every tool is described by a DocOperation and runs through run_operation,
which never raises: local precondition failures, API failures, and transport
failures all come back as a ToolReply flagged as an error.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Iterable, Iterator, List, Optional

from pydantic import BaseModel, ValidationError

from clickup_docs_tools.utils.logging import get_logger

from .client import ANCHOR_REQUIRED, ClickUpDocsClient
from .errors import ClickUpDocsError
from .models import Page

logger = get_logger(__name__)

NO_CONTENT = "No content found in this doc."
TOKEN_MISSING = (
    "ClickUp API token not configured. Set CLICKUP_API_TOKEN environment "
    "variable or configure via credential store"
)

Precheck = Callable[[], Optional[str]]
Delegate = Callable[[ClickUpDocsClient], Awaitable[Any]]


@dataclass(frozen=True)
class ToolReply:
    """Text payload plus error flag, the shape every tool answers with."""

    text: str
    is_error: bool = False


@dataclass(frozen=True)
class DocOperation:
    """
    Describes one tool.

    Attributes:
        name: Tool name as registered with MCP.
        action: Gerund phrase used in error replies ("creating document").
        success: Heading placed above the JSON dump, or the whole reply
            when the operation returns no body. May use ``str.format`` fields.
        returns_body: False for deletes, which reply with ``success`` only.
        render: Custom renderer that replaces the default JSON dump.
    """

    name: str
    action: str
    success: Optional[str] = None
    returns_body: bool = True
    render: Optional[Callable[[Any], str]] = None


def to_jsonable(result: Any) -> Any:
    """Convert client results to plain JSON, keeping only fields the API sent."""
    if isinstance(result, BaseModel):
        return result.model_dump(mode="json", exclude_unset=True)
    if isinstance(result, (list, tuple)):
        return [to_jsonable(item) for item in result]
    return result


def render_json(result: Any) -> str:
    return json.dumps(to_jsonable(result), indent=2, ensure_ascii=False)


def page_field(page: Any, key: str) -> Any:
    # Raw dicts show up when a listing did not match the Page model.
    if isinstance(page, dict):
        return page.get(key)
    return getattr(page, key, None)


def iter_pages(pages: Iterable[Any]) -> Iterator[Any]:
    """Walk a page tree depth-first, parents before their children."""
    for page in pages:
        yield page
        yield from iter_pages(page_field(page, "pages") or [])


def combine_page_content(pages: List[Page]) -> str:
    """Join page contents under ``# <name>`` headings, separated by blank lines."""
    blocks = []
    for page in iter_pages(pages if isinstance(pages, list) else []):
        content = page_field(page, "content")
        if content:
            blocks.append(f"# {page_field(page, 'name') or ''}\n\n{content}")
    if not blocks:
        return NO_CONTENT
    return "\n\n".join(blocks)


def require_anchor(
    workspace_id: Optional[str], space_id: Optional[str], folder_id: Optional[str]
) -> Precheck:
    def check() -> Optional[str]:
        if not (workspace_id or space_id or folder_id):
            return ANCHOR_REQUIRED
        return None

    return check


def require_any(message: str, *values: Any) -> Precheck:
    def check() -> Optional[str]:
        if all(value is None for value in values):
            return message
        return None

    return check


def _describe_validation(e: ValidationError) -> str:
    parts = []
    for err in e.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()))
        parts.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return "Invalid parameters - " + "; ".join(parts)


def render_success(op: DocOperation, result: Any, fields: dict[str, Any]) -> str:
    if op.render is not None:
        return op.render(result)
    if not op.returns_body:
        return (op.success or "Done.").format(**fields)
    body = render_json(result)
    if op.success:
        return f"{op.success.format(**fields)}\n\n{body}"
    return body


async def run_operation(
    op: DocOperation,
    client: Optional[ClickUpDocsClient],
    call: Delegate,
    *,
    precheck: Optional[Precheck] = None,
    **fields: Any,
) -> ToolReply:
    """
    Run one tool invocation.

    Args:
        op: The operation descriptor.
        client: Configured client, or None when no token is available.
        call: Coroutine factory issuing the single client call.
        precheck: Local validation returning a reason string on failure.
        **fields: Values for ``str.format`` fields in ``op.success``.
    """
    if precheck is not None:
        reason = precheck()
        if reason:
            logger.info("%s rejected: %s", op.name, reason)
            return ToolReply(f"Error: {reason}", is_error=True)

    if client is None:
        return ToolReply(f"Error: {TOKEN_MISSING}", is_error=True)

    try:
        result = await call(client)
    except ClickUpDocsError as e:
        logger.warning("Error %s: %s", op.action, e)
        return ToolReply(f"Error {op.action}: {e}", is_error=True)
    except ValidationError as e:
        logger.warning("Error %s: %s", op.action, e)
        return ToolReply(f"Error {op.action}: {_describe_validation(e)}", is_error=True)

    return ToolReply(render_success(op, result, fields))
