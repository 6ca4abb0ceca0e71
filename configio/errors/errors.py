"""
Exceptions raised by configio.

Exception hierarchy:
- ConfigioError (base, carries kind + details)
  - ConfigurationFileError: open/create/read/write/parse failures
  - VaultSecretError: vault loading and alias resolution failures

Every error carries the caller's context (copied, then extended) as `details`.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any, Mapping, Optional


@dataclass(frozen=True, slots=True)
class ErrorKind:
    name: str
    code: int
    description: str


INVALID_CONFIGURATION = ErrorKind(
    name="InvalidConfiguration",
    code=400,
    description="Invalid Configuration",
)


class ConfigioError(Exception):
    """Base exception for all configio errors."""

    kind: ErrorKind = INVALID_CONFIGURATION

    def __init__(
        self,
        message: str,
        *,
        details: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self.message = message
        self.details: dict[str, Any] = copy.deepcopy(dict(details or {}))
        super().__init__(message)

    def __str__(self) -> str:
        parts = [self.message]
        if self.details:
            parts.append(f"[details={self.details}]")
        return " ".join(parts)

    @property
    def code(self) -> int:
        return self.kind.code

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.kind.code,
            "kind": self.kind.description,
            "class": type(self).__name__,
            "message": self.message,
            "details": copy.deepcopy(self.details),
        }


class ConfigurationFileError(ConfigioError):
    """Raised when a configuration file or document cannot be opened, parsed or written."""


class VaultSecretError(ConfigioError):
    """Raised when vault data is missing or an alias cannot be resolved."""
