from __future__ import annotations

from typing import Any

from dev_notes_mcp.adapters.errors import NotFoundError, StorageFailure, ValidationError
from dev_notes_mcp.models import ReadNoteError, ReadNoteRequest, ReadNoteResponse
from dev_notes_mcp.services.notes import NoteService
from dev_notes_mcp.storage.errors import NoteNotFound, StorageUnavailable
from dev_notes_mcp.telemetry import get_logger
from pydantic import ValidationError as PydanticValidationError

LOGGER = get_logger(__name__)

TOOL_NAME = "read_note"
DESCRIPTION = "Read a saved note from the notes directory"

_REQUEST_SCHEMA = ReadNoteRequest.model_json_schema()
_REQUEST_SCHEMA["$schema"] = "https://json-schema.org/draft/2020-12/schema"
_REQUEST_SCHEMA["title"] = TOOL_NAME
REQUEST_SCHEMA: dict[str, Any] = _REQUEST_SCHEMA

_RESPONSE_SCHEMA = ReadNoteResponse.model_json_schema()
_RESPONSE_SCHEMA["$schema"] = "https://json-schema.org/draft/2020-12/schema"
_RESPONSE_SCHEMA["title"] = f"{TOOL_NAME}.response"
RESPONSE_SCHEMA: dict[str, Any] = _RESPONSE_SCHEMA

_ERROR_SCHEMA = ReadNoteError.model_json_schema()
_ERROR_SCHEMA["$schema"] = "https://json-schema.org/draft/2020-12/schema"
_ERROR_SCHEMA["title"] = f"{TOOL_NAME}.error"
ERROR_SCHEMA: dict[str, Any] = _ERROR_SCHEMA


async def execute(note_service: NoteService, request: dict[str, Any]) -> dict[str, Any]:
    try:
        payload = ReadNoteRequest.model_validate(request)
    except PydanticValidationError as exc:
        raise ValidationError(exc.errors()[0]["msg"] if exc.errors() else str(exc)) from exc

    try:
        return await note_service.read_note(payload.title)
    except NoteNotFound as exc:
        LOGGER.info("note.not_found", filename=exc.filename)
        raise NotFoundError(str(exc), filename=exc.filename) from exc
    except StorageUnavailable as exc:
        raise StorageFailure(str(exc)) from exc
    except Exception as exc:  # mapped to STORAGE_UNAVAILABLE
        LOGGER.exception("read_note.unexpected")
        raise StorageFailure("Failed to read note") from exc
