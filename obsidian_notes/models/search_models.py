"""Pydantic input models for search and listing operations."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from obsidian_notes.constants import DEFAULT_LIST_LIMIT


class SearchNotesInput(BaseModel):
    """Input model for the search_notes tool.

    Matches are case-insensitive substrings of note content or path. At most
    20 results are returned, in scan order.
    """

    query: str = Field(
        description="The text to search for",
        examples=["meeting", "roadmap"],
    )


class ListNotesInput(BaseModel):
    """Input model for the list_notes tool.

    Examples:
        >>> ListNotesInput()
        >>> ListNotesInput(limit=10)
    """

    limit: int = Field(
        default=DEFAULT_LIST_LIMIT,
        ge=0,
        description=f"Maximum number of files to return (default {DEFAULT_LIST_LIMIT})",
    )

    model_config = ConfigDict(json_schema_extra={"examples": [{}, {"limit": 10}]})
