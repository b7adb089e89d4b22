from __future__ import annotations

import os
from pathlib import Path

_EXTENDED_PREFIX = "\\\\?\\"


def clean_path(path: str | Path) -> Path:
    """Collapse `.` and `..` segments lexically, without touching the filesystem."""
    return Path(os.path.normpath(str(path)))


def display_path(path: Path) -> str:
    # Scoop can't parse extended-length paths.
    text = str(path)
    if text.startswith(_EXTENDED_PREFIX):
        text = text[len(_EXTENDED_PREFIX):]
    return text
