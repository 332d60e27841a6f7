"""Base Pydantic model for operations that target a single note.

Path safety is not validated here: containment is enforced by the path
resolver so that traversal attempts are reported as access denials.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class BaseNoteInput(BaseModel):
    """Base model for note operations: carries the vault-relative path."""

    path: str = Field(
        description=(
            "Relative path to the note inside the vault, including the .md "
            "extension. Examples: 'Daily/2024-01-01.md', 'Projects/Roadmap.md'. "
            "Forward slashes for folders, case-sensitive."
        ),
        examples=["Daily/2024-01-01.md", "Projects/Roadmap.md", "README.md"],
    )
