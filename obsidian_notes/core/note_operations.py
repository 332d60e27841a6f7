"""Core business logic for note read/write/append/patch operations."""

from __future__ import annotations

import logging
from pathlib import Path

from obsidian_notes.core.vault_operations import ensure_vault_ready, relative_note_path
from obsidian_notes.data_models import VaultRoot
from obsidian_notes.exceptions import NoteNotFoundError, PatchTargetNotFoundError

logger = logging.getLogger(__name__)


# ==============================================================================
# HELPER FUNCTIONS
# ==============================================================================


def _require_file(vault: VaultRoot, target_path: Path) -> None:
    """Raise unless ``target_path`` is an existing regular file.

    Raises:
        NoteNotFoundError: If the path is missing or is not a regular file.
    """
    if not target_path.exists():
        raise NoteNotFoundError(
            f"Note '{relative_note_path(vault, target_path)}' not found in vault."
        )
    if not target_path.is_file():
        raise NoteNotFoundError(
            f"Path '{relative_note_path(vault, target_path)}' exists but is not a file."
        )


# ==============================================================================
# NOTE OPERATIONS
# ==============================================================================


def read_note(vault: VaultRoot, target_path: Path) -> str:
    """Return the raw text of a note.

    Args:
        vault: The configured vault root.
        target_path: Already resolved absolute path of the note.

    Returns:
        The file content decoded as UTF-8, line endings untouched.

    Raises:
        VaultNotFoundError: If the vault directory is missing.
        NoteNotFoundError: If the note is missing or is a directory.
    """
    ensure_vault_ready(vault)
    _require_file(vault, target_path)
    with target_path.open(encoding="utf-8", newline="") as handle:
        return handle.read()


def write_note(vault: VaultRoot, target_path: Path, content: str) -> None:
    """Create or fully overwrite a note, creating missing parent folders.

    Args:
        vault: The configured vault root.
        target_path: Already resolved absolute path of the note.
        content: Complete new content of the note.

    Raises:
        VaultNotFoundError: If the vault directory is missing.
    """
    ensure_vault_ready(vault)
    target_path.parent.mkdir(parents=True, exist_ok=True)
    target_path.write_text(content, encoding="utf-8", newline="")
    logger.info("Wrote note '%s'", relative_note_path(vault, target_path))


def append_to_note(vault: VaultRoot, target_path: Path, content: str) -> None:
    """Append a newline followed by ``content`` to an existing note.

    Unlike :func:`write_note` this never creates the file.

    Raises:
        VaultNotFoundError: If the vault directory is missing.
        NoteNotFoundError: If the note does not exist.
    """
    ensure_vault_ready(vault)
    _require_file(vault, target_path)
    with target_path.open("a", encoding="utf-8", newline="") as handle:
        handle.write("\n" + content)
    logger.info("Appended content to note '%s'", relative_note_path(vault, target_path))


def patch_note(vault: VaultRoot, target_path: Path, old_text: str, new_text: str) -> None:
    """Replace the first literal occurrence of ``old_text`` with ``new_text``.

    Args:
        vault: The configured vault root.
        target_path: Already resolved absolute path of the note.
        old_text: Text to find; matched literally and case-sensitively.
        new_text: Replacement text.

    Raises:
        VaultNotFoundError: If the vault directory is missing.
        NoteNotFoundError: If the note does not exist.
        PatchTargetNotFoundError: If ``old_text`` does not occur in the note. The
            file is left untouched.
    """
    content = read_note(vault, target_path)
    if old_text not in content:
        raise PatchTargetNotFoundError(relative_note_path(vault, target_path))

    target_path.write_text(
        content.replace(old_text, new_text, 1), encoding="utf-8", newline=""
    )
    logger.info("Patched note '%s'", relative_note_path(vault, target_path))
