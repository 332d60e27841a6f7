"""Read-only resource view of vault notes (one ``obsidian:///`` URI per note)."""

from __future__ import annotations

from collections.abc import Iterable
from urllib.parse import quote, unquote, urlsplit

from obsidian_notes.constants import (
    DEFAULT_EXCLUDE_PATTERNS,
    MARKDOWN_MIME_TYPE,
    URI_SCHEME,
)
from obsidian_notes.core.note_operations import read_note
from obsidian_notes.core.scan_operations import list_markdown_files
from obsidian_notes.core.vault_operations import resolve_note_path
from obsidian_notes.data_models import ResourceEntry, VaultRoot
from obsidian_notes.exceptions import InvalidArgumentsError


def note_uri(relative_path: str) -> str:
    """Build the resource URI for a vault-relative note path."""
    return f"{URI_SCHEME}:///{quote(relative_path, safe='/')}"


def uri_to_relative_path(uri: str) -> str:
    """Extract the vault-relative path from a resource URI.

    Raises:
        InvalidArgumentsError: If the URI does not use the ``obsidian`` scheme.
    """
    parts = urlsplit(uri)
    if parts.scheme != URI_SCHEME:
        raise InvalidArgumentsError(
            f"Unsupported resource URI '{uri}': expected the '{URI_SCHEME}' scheme."
        )
    path = unquote(parts.path)
    return path[1:] if path.startswith("/") else path


class ResourceCatalog:
    """Lists and reads notes as resources, parallel to operation dispatch."""

    def __init__(
        self,
        vault: VaultRoot,
        exclude_patterns: Iterable[str] = DEFAULT_EXCLUDE_PATTERNS,
    ) -> None:
        self.vault = vault
        self.exclude_patterns = tuple(exclude_patterns)

    def list_resources(self) -> list[ResourceEntry]:
        return [
            ResourceEntry(uri=note_uri(relative), name=relative, mime_type=MARKDOWN_MIME_TYPE)
            for relative in list_markdown_files(self.vault, self.exclude_patterns)
        ]

    def read_resource(self, uri: str) -> str:
        """Return the text of the note addressed by ``uri``.

        Raises:
            InvalidArgumentsError: If the URI scheme is not ``obsidian``.
            AccessDeniedError: If the decoded path escapes the vault.
            NoteNotFoundError: If the note does not exist.
        """
        relative = uri_to_relative_path(uri)
        return read_note(self.vault, resolve_note_path(self.vault, relative))
