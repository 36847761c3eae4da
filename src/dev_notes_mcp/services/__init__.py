"""Service layer for the dev notes server."""

from .notes import NoteService

__all__ = ["NoteService"]
