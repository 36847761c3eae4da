from __future__ import annotations

from .tool_io import (
    ListNotesError,
    ListNotesRequest,
    ListNotesResponse,
    NoteSummary,
    ReadNoteError,
    ReadNoteRequest,
    ReadNoteResponse,
    SaveNoteError,
    SaveNoteRequest,
    SaveNoteResponse,
)

__all__ = [
    "ListNotesError",
    "ListNotesRequest",
    "ListNotesResponse",
    "NoteSummary",
    "ReadNoteError",
    "ReadNoteRequest",
    "ReadNoteResponse",
    "SaveNoteError",
    "SaveNoteRequest",
    "SaveNoteResponse",
]
