from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class SaveNoteRequest(BaseModel):
    """Payload schema for saving (creating or overwriting) a note."""

    model_config = ConfigDict(extra="forbid")

    title: str = Field(description="The title of the note")
    content: str = Field(description="The markdown content of the note")


class SaveNoteResponse(BaseModel):
    """Response schema returned after a note is written."""

    model_config = ConfigDict(extra="forbid")

    filename: str = Field(description="File the note was stored in, e.g. project-ideas.md")
    message: str


class SaveNoteError(BaseModel):
    model_config = ConfigDict(extra="forbid")

    code: Literal["VALIDATION_ERROR", "STORAGE_UNAVAILABLE"]
    message: str


class ListNotesRequest(BaseModel):
    """The list tool takes no parameters."""

    model_config = ConfigDict(extra="forbid")


class NoteSummary(BaseModel):
    model_config = ConfigDict(extra="forbid")

    slug: str
    filename: str
    title: str = Field(description="Display title rebuilt from the slug")
    modifiedAt: str = Field(description="ISO 8601 date-time")


class ListNotesResponse(BaseModel):
    """Response schema for listing notes; ``notes`` is empty when none exist."""

    model_config = ConfigDict(extra="forbid")

    notes: list[NoteSummary] = Field(default_factory=list)
    message: str = Field(description="Human-readable listing, one line per note")


class ListNotesError(BaseModel):
    model_config = ConfigDict(extra="forbid")

    code: Literal["VALIDATION_ERROR", "STORAGE_UNAVAILABLE"]
    message: str


class ReadNoteRequest(BaseModel):
    """Payload schema for reading a note by title."""

    model_config = ConfigDict(extra="forbid")

    title: str = Field(description="The title of the note to read")


class ReadNoteResponse(BaseModel):
    model_config = ConfigDict(extra="forbid")

    filename: str
    content: str = Field(description="Raw markdown content of the note")


class ReadNoteError(BaseModel):
    """Error schema for the read tool; NOT_FOUND names the computed filename."""

    model_config = ConfigDict(extra="forbid")

    code: Literal["VALIDATION_ERROR", "NOT_FOUND", "STORAGE_UNAVAILABLE"]
    message: str
