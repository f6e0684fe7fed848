"""Exception hierarchy for filesystem operations."""

from __future__ import annotations

from typing import Any


class FsOpsError(Exception):
    """Base error for failed filesystem operations.

    ``path`` names the node the operation failed on; ``details`` carries any
    extra context worth logging (destination, errno, ...).
    """

    def __init__(self, message: str, path: str | None = None, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.path = path
        self.details = details or {}


class SourceNotFoundError(FsOpsError):
    """Copy or move was asked to operate on a source that does not exist."""


class ListError(FsOpsError):
    """A directory listing could not be enumerated."""


class CopyError(FsOpsError):
    """A read, write, or delete failed while copying."""


class MoveError(FsOpsError):
    """A rename, copy fallback, or delete failed while moving."""
