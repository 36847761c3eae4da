"""MCP tool adapters."""

from . import list_notes, read_note, save_note

__all__ = [
    "list_notes",
    "read_note",
    "save_note",
]
