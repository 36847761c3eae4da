from __future__ import annotations

from typing import Any

from dev_notes_mcp.storage.models.note_entry import NoteEntry
from dev_notes_mcp.storage.note_store import NoteStore
from dev_notes_mcp.telemetry import get_logger
from dev_notes_mcp.utils.slugs import note_filename, slugify
from dev_notes_mcp.utils.time import to_date_str, to_iso_str

LOGGER = get_logger(__name__)


class NoteService:
    """Translate title-keyed note operations into slug-keyed store calls."""

    def __init__(self, store: NoteStore) -> None:
        self._store = store

    @property
    def store(self) -> NoteStore:
        return self._store

    async def save_note(self, title: str, content: str) -> dict[str, Any]:
        slug = slugify(title)
        filename = await self._store.write(slug, content)
        LOGGER.info("note.saved", filename=filename)
        return {"filename": filename, "message": f"Note saved as {filename}"}

    async def list_notes(self) -> dict[str, Any]:
        entries = await self._store.list()
        if not entries:
            return {"notes": [], "message": f"No notes found in {self._store.directory}"}
        return {
            "notes": [self._serialize_entry(entry) for entry in entries],
            "message": "\n".join(self._format_line(entry) for entry in entries),
        }

    async def read_note(self, title: str) -> dict[str, Any]:
        slug = slugify(title)
        content = await self._store.read(slug)
        return {"filename": note_filename(slug), "content": content}

    def _serialize_entry(self, entry: NoteEntry) -> dict[str, Any]:
        return {
            "slug": entry.slug,
            "filename": entry.filename,
            "title": entry.title,
            "modifiedAt": to_iso_str(entry.modified_at),
        }

    @staticmethod
    def _format_line(entry: NoteEntry) -> str:
        return f"- {entry.title} ({entry.filename}) — modified {to_date_str(entry.modified_at)}"
