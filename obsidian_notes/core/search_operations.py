"""Case-insensitive substring search over note content and paths."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from obsidian_notes.constants import (
    FILENAME_MATCH_MARKER,
    MAX_SEARCH_RESULTS,
    SNIPPET_CONTEXT_CHARS,
)
from obsidian_notes.core.vault_operations import resolve_note_path
from obsidian_notes.data_models import SearchResult, VaultRoot

logger = logging.getLogger(__name__)


def build_snippet(content: str, index: int, query_length: int) -> str:
    """Cut the context window around a match at ``index``.

    Takes up to ``SNIPPET_CONTEXT_CHARS`` characters on each side of the match,
    collapses newlines to spaces and wraps the excerpt in ``...`` markers.
    Returns an empty string when the window is empty.
    """
    start = max(0, index - SNIPPET_CONTEXT_CHARS)
    end = min(len(content), index + query_length + SNIPPET_CONTEXT_CHARS)
    excerpt = content[start:end].replace("\n", " ")
    return f"...{excerpt}..." if excerpt else ""


def search_notes(
    vault: VaultRoot,
    query: str,
    candidates: Iterable[str],
    limit: int = MAX_SEARCH_RESULTS,
) -> list[SearchResult]:
    """Search candidate notes for ``query`` in their content or relative path.

    Candidates are visited in the given order and scanning stops once ``limit``
    results are collected, so results are scan-order-first, not ranked.

    Args:
        vault: The configured vault root.
        query: Substring to look for; compared after lowercasing both sides.
        candidates: Vault-relative note paths, usually from the scanner.
        limit: Maximum number of results, never more than ``MAX_SEARCH_RESULTS``.

    Returns:
        One :class:`SearchResult` per matching note. Content matches carry a
        snippet around the first occurrence; path-only matches carry
        ``"Matched in filename"``.
    """
    limit = min(limit, MAX_SEARCH_RESULTS)
    query_lower = query.lower()
    results: list[SearchResult] = []

    if limit <= 0:
        return results

    for relative in candidates:
        note_path = resolve_note_path(vault, relative)
        try:
            content = note_path.read_text(encoding="utf-8", errors="ignore")
        except OSError as exc:
            logger.warning("Skipping note '%s' during search due to read error: %s", relative, exc)
            continue

        index = content.lower().find(query_lower)
        if index == -1 and query_lower not in relative.lower():
            continue

        snippet = build_snippet(content, index, len(query)) if index != -1 else ""
        results.append(SearchResult(path=relative, snippet=snippet or FILENAME_MATCH_MARKER))

        if len(results) >= limit:
            break

    return results
