"""Operation dispatch: maps a tool name and argument mapping to vault operations.

Each operation is registered with the ``@operation`` decorator together with
its pydantic input model. :class:`OperationDispatcher` validates arguments,
resolves paths through the containment check, runs the handler and wraps the
outcome in an :class:`OperationResult`. Only unknown operation names escape
as exceptions.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ValidationError

from obsidian_notes.config import ServerSettings
from obsidian_notes.core.note_operations import (
    append_to_note,
    patch_note,
    read_note,
    write_note,
)
from obsidian_notes.core.scan_operations import list_markdown_files
from obsidian_notes.core.search_operations import search_notes
from obsidian_notes.core.vault_operations import resolve_note_path
from obsidian_notes.data_models import OperationResult
from obsidian_notes.exceptions import (
    InvalidArgumentsError,
    NoteVaultError,
    OperationNotFoundError,
)
from obsidian_notes.models import (
    AppendNoteInput,
    ListNotesInput,
    PatchNoteInput,
    ReadNoteInput,
    SearchNotesInput,
    WriteNoteInput,
)

logger = logging.getLogger(__name__)

Handler = Callable[[ServerSettings, Any], str]


@dataclass(frozen=True)
class Operation:
    """A registered operation: its public name, description, input model and handler."""

    name: str
    description: str
    input_model: type[BaseModel]
    handler: Handler

    def input_schema(self) -> dict[str, Any]:
        return self.input_model.model_json_schema()


OPERATIONS: dict[str, Operation] = {}


def operation(name: str, input_model: type[BaseModel], description: str) -> Callable[[Handler], Handler]:
    """Register ``handler`` under ``name`` in :data:`OPERATIONS`."""

    def decorator(handler: Handler) -> Handler:
        OPERATIONS[name] = Operation(
            name=name,
            description=description,
            input_model=input_model,
            handler=handler,
        )
        return handler

    return decorator


def _to_json(payload: Any) -> str:
    return json.dumps(payload, indent=2, ensure_ascii=False)


def _describe_validation_error(name: str, exc: ValidationError) -> str:
    problems: list[str] = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error["loc"]) or "arguments"
        if error["type"] == "missing":
            problems.append(f"missing required argument '{field}'")
        else:
            problems.append(f"'{field}': {error['msg']}")
    return f"Invalid arguments for '{name}': " + "; ".join(problems)


# ==============================================================================
# NOTE OPERATIONS
# ==============================================================================


@operation("read_note", ReadNoteInput, "Read the content of a note in the Obsidian vault")
def _read_note(settings: ServerSettings, params: ReadNoteInput) -> str:
    target = resolve_note_path(settings.vault, params.path)
    return read_note(settings.vault, target)


@operation("write_note", WriteNoteInput, "Create or overwrite a note in the Obsidian vault")
def _write_note(settings: ServerSettings, params: WriteNoteInput) -> str:
    target = resolve_note_path(settings.vault, params.path)
    write_note(settings.vault, target, params.content)
    return f"Successfully wrote to {params.path}"


@operation("append_to_note", AppendNoteInput, "Append text to the end of an existing note")
def _append_to_note(settings: ServerSettings, params: AppendNoteInput) -> str:
    target = resolve_note_path(settings.vault, params.path)
    append_to_note(settings.vault, target, params.content)
    return f"Successfully appended to {params.path}"


@operation("patch_note", PatchNoteInput, "Replace specific text in a note with new text")
def _patch_note(settings: ServerSettings, params: PatchNoteInput) -> str:
    target = resolve_note_path(settings.vault, params.path)
    patch_note(settings.vault, target, params.old_text, params.new_text)
    return f"Successfully patched {params.path}"


# ==============================================================================
# SEARCH AND LISTING
# ==============================================================================


@operation("search_notes", SearchNotesInput, "Search for notes containing a specific query string")
def _search_notes(settings: ServerSettings, params: SearchNotesInput) -> str:
    candidates = list_markdown_files(settings.vault, settings.exclude_patterns)
    results = search_notes(settings.vault, params.query, candidates)
    return _to_json([result.as_payload() for result in results])


@operation("list_notes", ListNotesInput, "List all markdown files in the vault")
def _list_notes(settings: ServerSettings, params: ListNotesInput) -> str:
    files = list_markdown_files(settings.vault, settings.exclude_patterns)
    return _to_json(files[: params.limit])


# ==============================================================================
# DISPATCHER
# ==============================================================================


class OperationDispatcher:
    """Stateless dispatcher bound to one vault's settings."""

    def __init__(self, settings: ServerSettings) -> None:
        self.settings = settings

    @property
    def operations(self) -> list[Operation]:
        return list(OPERATIONS.values())

    def get(self, name: str) -> Operation:
        """Look up a registered operation.

        Raises:
            OperationNotFoundError: If ``name`` is not registered.
        """
        try:
            return OPERATIONS[name]
        except KeyError as exc:
            raise OperationNotFoundError(name) from exc

    async def dispatch(self, name: str, arguments: Mapping[str, Any] | None) -> OperationResult:
        """Run operation ``name`` with ``arguments``.

        Returns:
            A success result with the response text, or a failure result for any
            vault or filesystem error.

        Raises:
            OperationNotFoundError: If ``name`` is not a registered operation.
        """
        op = self.get(name)
        logger.debug("Dispatching '%s'", name)

        try:
            try:
                params = op.input_model.model_validate(arguments if arguments is not None else {})
            except ValidationError as exc:
                raise InvalidArgumentsError(_describe_validation_error(name, exc)) from exc
            return OperationResult.success(op.handler(self.settings, params))
        except NoteVaultError as exc:
            logger.info("Operation '%s' failed: %s", name, exc)
            return OperationResult.failure(exc)
        except (OSError, ValueError) as exc:
            logger.exception("Operation '%s' failed with a filesystem error", name)
            return OperationResult.failure(exc)
