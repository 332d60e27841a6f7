"""Enumeration of markdown notes under the vault root."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable

from wcmatch import glob

from obsidian_notes.constants import DEFAULT_EXCLUDE_PATTERNS, NOTE_SUFFIX
from obsidian_notes.core.vault_operations import ensure_vault_ready
from obsidian_notes.data_models import VaultRoot

logger = logging.getLogger(__name__)

GLOB_FLAGS = glob.GLOBSTAR | glob.CASE


def is_excluded(
    relative_path: str,
    exclude_patterns: Iterable[str],
    directory: bool = False,
) -> bool:
    """Return ``True`` if a forward-slash relative path matches any exclusion glob.

    Patterns use globstar semantics: ``**/drafts/**`` matches at any depth,
    including the top level. For directories, a pattern ending in ``/**`` also
    matches the directory itself, so ``node_modules/**`` prunes ``node_modules``.
    """
    patterns = list(exclude_patterns)
    if directory:
        patterns += [pattern[:-3] for pattern in patterns if pattern.endswith("/**")]
    if not patterns:
        return False
    return glob.globmatch(relative_path, patterns, flags=GLOB_FLAGS)


def list_markdown_files(
    vault: VaultRoot,
    exclude_patterns: Iterable[str] = DEFAULT_EXCLUDE_PATTERNS,
) -> list[str]:
    """List every ``.md`` file in the vault as a vault-relative path.

    Order is a top-down walk: within each directory entries are sorted by
    name, and a directory's own files come before its subdirectories. Hidden
    files and directories (leading ``.``) are skipped.

    Args:
        vault: The configured vault root.
        exclude_patterns: Glob patterns matched against forward-slash relative
            paths; matching files and directories are skipped.

    Returns:
        Relative paths using ``/`` as separator.

    Raises:
        VaultNotFoundError: If the vault directory is missing.
    """
    ensure_vault_ready(vault)
    patterns = tuple(exclude_patterns)
    notes: list[str] = []

    def _on_error(exc: OSError) -> None:
        logger.warning("Skipping unreadable directory '%s': %s", exc.filename, exc)

    for current, dirnames, filenames in os.walk(vault.path, onerror=_on_error):
        relative_dir = os.path.relpath(current, vault.path)
        prefix = "" if relative_dir == os.curdir else relative_dir.replace(os.sep, "/") + "/"

        dirnames[:] = sorted(
            name
            for name in dirnames
            if not name.startswith(".")
            and not is_excluded(f"{prefix}{name}", patterns, directory=True)
        )

        for name in sorted(filenames):
            if name.startswith(".") or not name.endswith(NOTE_SUFFIX):
                continue
            relative = f"{prefix}{name}"
            if is_excluded(relative, patterns):
                continue
            notes.append(relative)

    return notes
