"""
ClickUp API token lookup.

The token is resolved from an explicit override (used by tests), then the
process environment, then a ``.env`` file in the working directory.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from dotenv import dotenv_values


@dataclass(frozen=True)
class CredentialSpec:
    """Where a credential is read from and which tools need it."""

    name: str
    env_var: str
    tools: List[str] = field(default_factory=list)
    help_url: str = ""
    description: str = ""


class CredentialError(Exception):
    """Raised when tools are asked for but their credential is not set."""


class CredentialManager:
    """Resolves the ClickUp API token for the docs tools."""

    def __init__(
        self,
        spec: Optional[CredentialSpec] = None,
        token: Optional[str] = None,
        dotenv_path: Optional[Path] = None,
    ):
        """
        Args:
            spec: Credential description (defaults to the ClickUp token)
            token: Fixed value that bypasses the environment lookup
            dotenv_path: Optional path to .env file (defaults to cwd/.env)
        """
        if spec is None:
            from .clickup import CLICKUP_TOKEN

            spec = CLICKUP_TOKEN

        self._spec = spec
        self._override = token
        self._dotenv_path = dotenv_path

    @classmethod
    def for_testing(cls, token: str, dotenv_path: Optional[Path] = None) -> "CredentialManager":
        """Create a CredentialManager that always answers with ``token``."""
        return cls(token=token, dotenv_path=dotenv_path)

    @property
    def spec(self) -> CredentialSpec:
        return self._spec

    def get(self, name: str) -> Optional[str]:
        """Get the credential value, or None when it is not set anywhere."""
        if name != self._spec.name:
            raise KeyError(f"Unknown credential '{name}'. Available: ['{self._spec.name}']")

        if self._override is not None:
            return self._override or None

        env_value = os.environ.get(self._spec.env_var)
        if env_value:
            return env_value

        return self._read_from_dotenv()

    def _read_from_dotenv(self) -> Optional[str]:
        """Read the token from .env without mutating os.environ."""
        dotenv_path = self._dotenv_path or Path.cwd() / ".env"
        if not dotenv_path.exists():
            return None

        return dotenv_values(dotenv_path).get(self._spec.env_var) or None

    def is_available(self) -> bool:
        return self.get(self._spec.name) is not None

    def validate_for_tools(self, tool_names: List[str]) -> None:
        """Raise CredentialError if any of the given tools would run without a token."""
        affected = [t for t in tool_names if t in self._spec.tools]
        if not affected or self.is_available():
            return

        lines = [
            f"{', '.join(affected)} require {self._spec.env_var}, which is not set.",
        ]
        if self._spec.description:
            lines.append(f"  {self._spec.description}")
        if self._spec.help_url:
            lines.append(f"  Get a token at: {self._spec.help_url}")
        lines.append(f"  Set via: export {self._spec.env_var}=your_token")
        raise CredentialError("\n".join(lines))
