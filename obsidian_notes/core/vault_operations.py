"""Core vault operations and path containment."""

import os
from pathlib import Path

from obsidian_notes.data_models import VaultRoot
from obsidian_notes.exceptions import (
    AccessDeniedError,
    InvalidArgumentsError,
    VaultNotFoundError,
)


def ensure_vault_ready(vault: VaultRoot) -> None:
    """Ensure the vault directory is accessible before performing operations.

    Args:
        vault: The configured vault root.

    Raises:
        VaultNotFoundError: If the vault path does not exist or is not a directory.
    """
    if not vault.path.is_dir():
        raise VaultNotFoundError(f"Vault is not accessible at {vault.path}")


def is_within_vault(vault: VaultRoot, candidate: str) -> bool:
    """Return ``True`` if the normalized ``candidate`` lies at or below the vault root.

    The comparison is textual on normalized paths, so a symlink inside the
    vault pointing elsewhere is not detected. Sibling directories sharing the
    root as a string prefix (``/vault-other`` for ``/vault``) are rejected.
    """
    root = os.path.normpath(str(vault.path))
    if candidate == root:
        return True
    prefix = root if root.endswith(os.sep) else root + os.sep
    return candidate.startswith(prefix)


def resolve_note_path(vault: VaultRoot, relative_path: str) -> Path:
    """Resolve a caller supplied relative path to an absolute path inside the vault.

    Leading separators are stripped, so ``/Daily/today.md`` and
    ``Daily/today.md`` address the same note. ``.`` and ``..`` segments are
    collapsed before the containment check.

    Args:
        vault: The configured vault root.
        relative_path: Path relative to the vault root.

    Returns:
        The absolute, normalized :class:`Path` of the target.

    Raises:
        InvalidArgumentsError: If the path contains a NUL character.
        AccessDeniedError: If the normalized path escapes the vault root.
    """
    if "\x00" in relative_path:
        raise InvalidArgumentsError("Path must not contain NUL characters.")

    trimmed = relative_path.lstrip("/\\")
    candidate = os.path.normpath(os.path.join(str(vault.path), trimmed))
    if not is_within_vault(vault, candidate):
        raise AccessDeniedError(relative_path)
    return Path(candidate)


def relative_note_path(vault: VaultRoot, path: Path) -> str:
    """Convert an absolute path inside the vault into a forward-slash relative path."""
    return path.relative_to(vault.path).as_posix()
