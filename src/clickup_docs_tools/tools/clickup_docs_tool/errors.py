"""
Error normalization for ClickUp Docs API calls.

Every failed exchange becomes a ClickUpDocsError whose message reads
``<context>: <category> - <detail>``. The status to category mapping is a
plain lookup so it can be checked without any HTTP traffic.
"""

from __future__ import annotations

from typing import Any, Optional

import httpx

STATUS_CATEGORIES: dict[int, str] = {
    400: "Invalid request",
    401: "Authentication failed",
    403: "Permission denied",
    404: "Resource not found",
    413: "Content too large",
    429: "Rate limit exceeded",
    500: "Server error",
}

# Used as the detail when the response body carries no message.
STATUS_HINTS: dict[int, str] = {
    400: "check the request parameters",
    401: "check API token",
    403: "insufficient access rights",
    404: "check the workspace, doc, or page ID",
    413: "reduce document size",
    429: "please retry later",
    500: "please try again",
}


class ClickUpDocsError(Exception):
    """A ClickUp Docs operation that did not complete."""

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        category: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.category = category

    def __str__(self) -> str:
        return self.message


def classify_status(status_code: int, raw_message: str = "") -> str:
    """Return the category for an HTTP status, or the raw server message if unmapped."""
    return STATUS_CATEGORIES.get(status_code, raw_message)


def extract_error_message(response: httpx.Response) -> str:
    """Extract a readable API error message."""
    try:
        payload: Any = response.json()
    except ValueError:
        return response.text
    if isinstance(payload, dict):
        for key in ("err", "message", "error", "error_description"):
            value = payload.get(key)
            if value:
                return str(value)
    return response.text


def from_response(context: str, response: httpx.Response) -> ClickUpDocsError:
    """Build the error for a non-success HTTP response."""
    status = response.status_code
    server_message = extract_error_message(response)
    raw = server_message or response.reason_phrase or f"HTTP {status}"
    category = classify_status(status, raw)

    if status in STATUS_CATEGORIES:
        detail = server_message or STATUS_HINTS[status]
        message = f"{context}: {category} - {detail}"
    else:
        message = f"{context}: {category}"

    return ClickUpDocsError(message, status_code=status, category=category)


def from_transport(context: str, exc: httpx.RequestError) -> ClickUpDocsError:
    """Build the error for a request that never got a response."""
    detail = str(exc) or type(exc).__name__
    return ClickUpDocsError(f"{context}: {detail}")


def invalid_request(context: str, detail: str) -> ClickUpDocsError:
    """Build a locally detected Invalid request error."""
    category = STATUS_CATEGORIES[400]
    return ClickUpDocsError(f"{context}: {category} - {detail}", category=category)
