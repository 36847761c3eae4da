from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

ENV_VAR = "DEV_NOTES_DIR"
DEFAULT_DIR = Path.home() / "dev-notes"


def resolve_notes_dir(explicit: Optional[str | Path] = None) -> Path:
    if explicit is not None:
        return Path(explicit).expanduser().resolve()
    env_path = os.getenv(ENV_VAR)
    if env_path:
        return Path(env_path).expanduser().resolve()
    return DEFAULT_DIR.expanduser().resolve()
