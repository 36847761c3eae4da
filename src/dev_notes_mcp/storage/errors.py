from __future__ import annotations

from pathlib import Path


class StorageError(Exception):
    """Base class for note store failures."""


class StorageUnavailable(StorageError):
    def __init__(self, directory: Path, reason: str | None = None) -> None:
        message = f"Notes directory unavailable: {directory}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.directory = directory
        self.reason = reason


class NoteNotFound(StorageError):
    def __init__(self, filename: str) -> None:
        super().__init__(f"Note not found: {filename}")
        self.filename = filename
