"""Data models for the vault root, search hits, resources and operation results."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional


@dataclass(frozen=True)
class VaultRoot:
    """Absolute, lexically normalized vault directory.

    Symlinks are not resolved; containment checks compare normalized path
    strings against ``path``.
    """

    path: Path

    @classmethod
    def from_string(cls, raw_path: str) -> VaultRoot:
        """Build a vault root from a user supplied path.

        Raises:
            ValueError: If ``raw_path`` is empty or whitespace.
        """
        if not raw_path or not raw_path.strip():
            raise ValueError("Vault path cannot be empty.")
        expanded = os.path.expanduser(raw_path.strip())
        return cls(path=Path(os.path.abspath(expanded)))


@dataclass(frozen=True)
class SearchResult:
    """A single search hit: the matched note and its context snippet."""

    path: str
    snippet: str

    def as_payload(self) -> dict[str, Any]:
        return {"path": self.path, "snippet": self.snippet}


@dataclass(frozen=True)
class ResourceEntry:
    """Read-only projection of a scanned note as an addressable resource."""

    uri: str
    name: str
    mime_type: str

    def as_payload(self) -> dict[str, Any]:
        return {"uri": self.uri, "name": self.name, "mimeType": self.mime_type}


@dataclass(frozen=True)
class OperationResult:
    """Outcome of a dispatched operation.

    Either a success carrying response text, or a failure whose text describes
    the error and whose ``error`` holds the originating exception.
    """

    text: str
    is_error: bool = False
    error: Optional[Exception] = None

    @classmethod
    def success(cls, text: str) -> OperationResult:
        return cls(text=text)

    @classmethod
    def failure(cls, error: Exception) -> OperationResult:
        return cls(text=f"Error: {error}", is_error=True, error=error)
