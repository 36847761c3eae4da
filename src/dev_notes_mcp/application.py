from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

from dev_notes_mcp.services.notes import NoteService
from dev_notes_mcp.storage.location import resolve_notes_dir
from dev_notes_mcp.storage.note_store import NoteStore
from dev_notes_mcp.telemetry import get_logger

LOGGER = get_logger(__name__)


@dataclass(slots=True)
class Application:
    note_service: NoteService
    note_store: NoteStore
    notes_dir: Path


def build_application(notes_dir: str | Path | None = None) -> Application:
    """Wire the store and service for one notes directory.

    The directory is not touched here; it is created on first use.
    """
    resolved_dir = resolve_notes_dir(notes_dir)
    store = NoteStore(resolved_dir)
    service = NoteService(store)
    LOGGER.debug("application.initialised", notes_dir=str(resolved_dir))
    return Application(note_service=service, note_store=store, notes_dir=resolved_dir)


@contextmanager
def application_context(notes_dir: str | Path | None = None) -> Iterator[Application]:
    app = build_application(notes_dir)
    try:
        yield app
    finally:
        LOGGER.debug("application.closed", notes_dir=str(app.notes_dir))
