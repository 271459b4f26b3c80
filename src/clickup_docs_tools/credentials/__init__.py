"""
Credential lookup for ClickUp Docs Tools.

Usage:
    from clickup_docs_tools.credentials import CredentialManager

    credentials = CredentialManager()
    token = credentials.get("clickup")
"""

from .base import CredentialError, CredentialManager, CredentialSpec
from .clickup import CLICKUP_TOKEN

__all__ = [
    "CLICKUP_TOKEN",
    "CredentialError",
    "CredentialManager",
    "CredentialSpec",
]
