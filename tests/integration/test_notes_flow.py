from __future__ import annotations

import pytest

from dev_notes_mcp.adapters.errors import NotFoundError
from dev_notes_mcp.adapters.tools import list_notes, read_note, save_note
from dev_notes_mcp.application import application_context, build_application


@pytest.mark.integration
async def test_save_read_list_project_ideas(notes_dir):
    """Saved notes are readable by title and show up in the listing."""
    app = build_application(notes_dir)

    saved = await save_note.execute(
        app.note_service, {"title": "Project Ideas", "content": "# Ideas\n- Build an app"}
    )
    assert saved["message"] == "Note saved as project-ideas.md"
    assert (notes_dir / "project-ideas.md").read_text(encoding="utf-8") == "# Ideas\n- Build an app"

    read = await read_note.execute(app.note_service, {"title": "Project Ideas"})
    assert read["content"] == "# Ideas\n- Build an app"

    listed = await list_notes.execute(app.note_service, {})
    assert "project ideas" in listed["message"]
    assert "project-ideas.md" in listed["message"]


@pytest.mark.integration
async def test_colliding_titles_overwrite(notes_dir):
    with application_context(notes_dir) as app:
        await save_note.execute(app.note_service, {"title": "Test!!", "content": "x"})
        await save_note.execute(app.note_service, {"title": "test", "content": "y"})

        read = await read_note.execute(app.note_service, {"title": "test"})
        listed = await list_notes.execute(app.note_service, {})

    assert read["content"] == "y"
    assert [note["filename"] for note in listed["notes"]] == ["test.md"]


@pytest.mark.integration
async def test_read_on_empty_store_is_not_found(notes_dir):
    app = build_application(notes_dir)

    with pytest.raises(NotFoundError) as exc_info:
        await read_note.execute(app.note_service, {"title": "nonexistent-slug"})

    assert exc_info.value.filename == "nonexistent-slug.md"
    assert "nonexistent-slug.md" in exc_info.value.message


@pytest.mark.integration
async def test_list_on_fresh_store_returns_empty_marker(notes_dir):
    app = build_application(notes_dir)

    listed = await list_notes.execute(app.note_service, {})

    assert listed["notes"] == []
    assert listed["message"].startswith("No notes found in")
    assert notes_dir.is_dir()


@pytest.mark.integration
async def test_build_application_defaults_to_env_directory(isolated_notes_env):
    app = build_application()

    assert app.notes_dir == isolated_notes_env.resolve()
    assert app.note_store.directory == app.notes_dir
