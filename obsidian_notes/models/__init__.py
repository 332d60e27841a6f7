"""Pydantic input models for MCP tool validation.

Each model is the input schema of one tool: its JSON schema is advertised to
clients and its validation errors become invalid-argument results.

Usage:
    from obsidian_notes.models import ReadNoteInput, SearchNotesInput
"""

from .base import BaseNoteInput
from .note_models import (
    ReadNoteInput,
    WriteNoteInput,
    AppendNoteInput,
    PatchNoteInput,
)
from .search_models import (
    SearchNotesInput,
    ListNotesInput,
)

__all__ = [
    # Base models
    "BaseNoteInput",
    # Note models
    "ReadNoteInput",
    "WriteNoteInput",
    "AppendNoteInput",
    "PatchNoteInput",
    # Search models
    "SearchNotesInput",
    "ListNotesInput",
]
