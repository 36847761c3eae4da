"""Unit tests for the title-keyed note service."""

import os

import pytest

from dev_notes_mcp.storage.errors import NoteNotFound


async def test_save_note_reports_slugified_filename(note_service, notes_dir):
    result = await note_service.save_note("Project Ideas", "# Ideas\n- Build an app")

    assert result == {"filename": "project-ideas.md", "message": "Note saved as project-ideas.md"}
    assert (notes_dir / "project-ideas.md").read_text(encoding="utf-8") == "# Ideas\n- Build an app"


async def test_save_note_with_empty_title_uses_empty_slug(note_service, notes_dir):
    result = await note_service.save_note("", "orphan")

    assert result["filename"] == ".md"
    assert (notes_dir / ".md").exists()


async def test_read_note_returns_filename_and_content(note_service):
    await note_service.save_note("Project Ideas", "body")

    result = await note_service.read_note("project ideas!")

    assert result == {"filename": "project-ideas.md", "content": "body"}


async def test_read_note_missing_raises_not_found(note_service):
    with pytest.raises(NoteNotFound) as exc_info:
        await note_service.read_note("Does Not Exist")

    assert exc_info.value.filename == "does-not-exist.md"


async def test_list_notes_empty_message(note_service, notes_dir):
    result = await note_service.list_notes()

    assert result["notes"] == []
    assert result["message"] == f"No notes found in {notes_dir}"


async def test_list_notes_formats_one_line_per_note(note_service, notes_dir):
    await note_service.save_note("Project Ideas", "# Ideas")
    await note_service.save_note("Standup", "notes")
    os.utime(notes_dir / "project-ideas.md", (1_700_000_000, 1_700_000_000))

    result = await note_service.list_notes()

    lines = result["message"].splitlines()
    assert len(lines) == 2
    assert "- project ideas (project-ideas.md) — modified 2023-11-14" in lines
    assert any(line.startswith("- standup (standup.md) — modified ") for line in lines)
    by_slug = {note["slug"]: note for note in result["notes"]}
    assert by_slug["project-ideas"] == {
        "slug": "project-ideas",
        "filename": "project-ideas.md",
        "title": "project ideas",
        "modifiedAt": "2023-11-14T22:13:20.000000Z",
    }
