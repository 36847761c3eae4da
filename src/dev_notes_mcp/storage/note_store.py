from __future__ import annotations

import asyncio
import os
import stat
import tempfile
from pathlib import Path
from typing import Optional

from dev_notes_mcp.storage.errors import NoteNotFound, StorageUnavailable
from dev_notes_mcp.storage.models.note_entry import NoteEntry
from dev_notes_mcp.telemetry import get_logger
from dev_notes_mcp.utils.slugs import NOTE_SUFFIX, note_filename, title_from_slug
from dev_notes_mcp.utils.time import from_timestamp

LOGGER = get_logger(__name__)


class NoteStore:
    """One markdown file per slug inside a single directory.

    ``ensure_ready`` is the precondition of every other operation; each
    public method re-establishes it, so callers never need to.
    """

    def __init__(self, directory: str | Path) -> None:
        self._directory = Path(directory)

    @property
    def directory(self) -> Path:
        return self._directory

    async def ensure_ready(self) -> Path:
        await asyncio.to_thread(self._make_directory)
        return self._directory

    async def write(self, slug: str, content: str) -> str:
        await self.ensure_ready()
        filename = note_filename(slug)
        try:
            await asyncio.to_thread(self._replace_file, self._directory / filename, content)
        except OSError as exc:
            raise StorageUnavailable(self._directory, exc.strerror or str(exc)) from exc
        LOGGER.debug("store.write", filename=filename, size=len(content))
        return filename

    async def read(self, slug: str) -> str:
        await self.ensure_ready()
        filename = note_filename(slug)
        try:
            return await asyncio.to_thread(self._read_file, self._directory / filename)
        except (FileNotFoundError, IsADirectoryError) as exc:
            raise NoteNotFound(filename) from exc

    async def list(self) -> list[NoteEntry]:
        await self.ensure_ready()
        try:
            filenames = await asyncio.to_thread(self._note_filenames)
        except OSError as exc:
            raise StorageUnavailable(self._directory, exc.strerror or str(exc)) from exc
        # stat calls are independent; completion order does not matter.
        entries = await asyncio.gather(*(self._entry_for(name) for name in filenames))
        return [entry for entry in entries if entry is not None]

    async def _entry_for(self, filename: str) -> Optional[NoteEntry]:
        try:
            stat_result = await asyncio.to_thread(os.stat, self._directory / filename)
        except FileNotFoundError:
            # removed between enumeration and stat
            return None
        slug = filename[: -len(NOTE_SUFFIX)]
        return NoteEntry(
            slug=slug,
            filename=filename,
            title=title_from_slug(slug),
            modified_at=from_timestamp(stat_result.st_mtime),
        )

    def _make_directory(self) -> None:
        try:
            self._directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StorageUnavailable(self._directory, exc.strerror or str(exc)) from exc

    def _note_filenames(self) -> list[str]:
        with os.scandir(self._directory) as entries:
            return [
                entry.name
                for entry in entries
                if entry.name.endswith(NOTE_SUFFIX) and entry.is_file()
            ]

    def _replace_file(self, path: Path, content: str) -> None:
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.stem}.", suffix=".tmp", dir=self._directory)
        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as handle:
                handle.write(content)
            os.chmod(tmp_name, _target_mode(path))
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    @staticmethod
    def _read_file(path: Path) -> str:
        with path.open("r", encoding="utf-8", errors="replace", newline="") as handle:
            return handle.read()


def _current_umask() -> int:
    umask = os.umask(0)
    os.umask(umask)
    return umask


def _target_mode(path: Path) -> int:
    """Mode for a replacement file: keep an existing note's, else 0666 minus umask."""
    try:
        return stat.S_IMODE(os.stat(path).st_mode)
    except FileNotFoundError:
        return 0o666 & ~_current_umask()
