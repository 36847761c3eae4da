from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from dev_notes_mcp.utils.time import to_iso_str


@dataclass(slots=True)
class NoteEntry:
    slug: str
    filename: str
    title: str
    modified_at: datetime

    def to_dict(self) -> dict[str, object]:
        return {
            "slug": self.slug,
            "filename": self.filename,
            "title": self.title,
            "modified_at": to_iso_str(self.modified_at),
        }
