from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture(autouse=True)
def isolated_notes_env(tmp_path_factory, monkeypatch) -> Path:
    """Point DEV_NOTES_DIR at a throwaway directory so no test touches ~/dev-notes."""
    default_dir = tmp_path_factory.mktemp("default-notes")
    monkeypatch.setenv("DEV_NOTES_DIR", str(default_dir))
    return default_dir


@pytest.fixture
def notes_dir(tmp_path) -> Path:
    return tmp_path / "dev-notes"


@pytest.fixture
def note_store(notes_dir):
    from dev_notes_mcp.storage.note_store import NoteStore

    return NoteStore(notes_dir)


@pytest.fixture
def note_service(note_store):
    from dev_notes_mcp.services.notes import NoteService

    return NoteService(note_store)
