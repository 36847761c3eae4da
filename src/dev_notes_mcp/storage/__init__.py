"""Filesystem storage for dev notes."""

from .errors import NoteNotFound, StorageError, StorageUnavailable
from .location import resolve_notes_dir
from .note_store import NoteStore

__all__ = [
    "NoteNotFound",
    "NoteStore",
    "StorageError",
    "StorageUnavailable",
    "resolve_notes_dir",
]
