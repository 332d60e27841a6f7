"""Pydantic input models for note operations.

- Read a note
- Write (create or overwrite) a note
- Append to a note
- Patch a note
"""

from __future__ import annotations

from pydantic import ConfigDict, Field

from .base import BaseNoteInput


class ReadNoteInput(BaseNoteInput):
    """Input model for the read_note tool.

    Examples:
        >>> ReadNoteInput(path="Daily/2024-01-01.md")
    """

    model_config = ConfigDict(
        json_schema_extra={"examples": [{"path": "Daily/2024-01-01.md"}]}
    )


class WriteNoteInput(BaseNoteInput):
    """Input model for the write_note tool.

    Creates the note (and any missing folders) or overwrites it entirely.

    Examples:
        >>> WriteNoteInput(path="Projects/Roadmap.md", content="# Roadmap\\n")
    """

    content: str = Field(
        description="The content to write to the note. Can be empty to clear it."
    )

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"path": "Projects/Roadmap.md", "content": "# Roadmap\n\n- Ship v1"}
            ]
        }
    )


class AppendNoteInput(BaseNoteInput):
    """Input model for the append_to_note tool.

    The note must already exist; a newline is inserted before ``content``.
    """

    content: str = Field(description="The content to append")


class PatchNoteInput(BaseNoteInput):
    """Input model for the patch_note tool.

    Only the first occurrence of ``old_text`` is replaced. Include enough
    surrounding text to make the target unambiguous.

    Examples:
        >>> PatchNoteInput(path="Todo.md", old_text="- [ ] ship", new_text="- [x] ship")
    """

    old_text: str = Field(description="The text to be replaced (matched literally)")
    new_text: str = Field(description="The new text to insert")

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"path": "Todo.md", "old_text": "- [ ] ship", "new_text": "- [x] ship"}
            ]
        }
    )
