from pathlib import Path

from dev_notes_mcp.storage.location import DEFAULT_DIR, resolve_notes_dir


def test_explicit_path_wins(tmp_path, monkeypatch):
    monkeypatch.setenv("DEV_NOTES_DIR", str(tmp_path / "from-env"))
    assert resolve_notes_dir(tmp_path / "explicit") == (tmp_path / "explicit").resolve()


def test_env_var_used_when_no_explicit_path(tmp_path, monkeypatch):
    monkeypatch.setenv("DEV_NOTES_DIR", str(tmp_path / "from-env"))
    assert resolve_notes_dir() == (tmp_path / "from-env").resolve()


def test_default_directory_under_home(monkeypatch):
    monkeypatch.delenv("DEV_NOTES_DIR", raising=False)
    resolved = resolve_notes_dir()
    assert resolved == DEFAULT_DIR.resolve()
    assert resolved.name == "dev-notes"


def test_user_home_is_expanded(monkeypatch):
    monkeypatch.delenv("DEV_NOTES_DIR", raising=False)
    assert resolve_notes_dir("~/notes") == (Path.home() / "notes").resolve()
