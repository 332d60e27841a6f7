"""Custom exceptions for vault note operations."""


class NoteVaultError(Exception):
    """Base exception for vault note errors."""

    pass


class AccessDeniedError(NoteVaultError):
    """Raised when a path resolves outside the vault root."""

    def __init__(self, relative_path: str) -> None:
        self.relative_path = relative_path
        super().__init__(f"Access denied: Path '{relative_path}' is outside the vault")


class NoteNotFoundError(NoteVaultError):
    """Raised when a note is missing or the target is not a regular file."""

    pass


class VaultNotFoundError(NoteNotFoundError):
    """Raised when the vault root is missing or is not a directory."""

    pass


class PatchTargetNotFoundError(NoteVaultError):
    """Raised when the text to replace does not occur in the note."""

    def __init__(self, relative_path: str) -> None:
        self.relative_path = relative_path
        super().__init__(f"Could not find old_text in '{relative_path}'")


class InvalidArgumentsError(NoteVaultError):
    """Raised when an operation is called with missing or malformed arguments."""

    pass


class OperationNotFoundError(NoteVaultError):
    """Raised when the requested operation name is not registered."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown tool: {name}")
