from __future__ import annotations

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Optional

from scoopman.manifest.model import Manifest

logger = logging.getLogger(__name__)


class Action(str, Enum):
    CREATE = "create"
    UPDATE = "update"
    NOOP = "noop"
    CONFLICT = "conflict"

    @property
    def writes(self) -> bool:
        return self in (Action.CREATE, Action.UPDATE)


def read_existing(path: Path) -> Optional[Manifest]:
    """Load a persisted manifest, or None when it is absent or not a manifest."""
    if not path.is_file():
        return None
    try:
        text = path.read_text(encoding="utf-8")
        return Manifest.from_dict(json.loads(text))
    except (OSError, UnicodeDecodeError, ValueError) as exc:
        logger.debug("Ignoring unreadable manifest %s: %s", path, exc)
        return None


def decide(fresh: Manifest, existing: Optional[Manifest]) -> Action:
    """Compare a freshly built manifest with the persisted one.

    Build identity is the artifact digest alone: a matching hash is a no-op even if
    license, alias or bin shape changed. A changed hash requires a changed version.
    """
    if existing is None:
        return Action.CREATE
    if existing.hash == fresh.hash:
        return Action.NOOP
    if existing.version == fresh.version:
        return Action.CONFLICT
    return Action.UPDATE


def reconcile(fresh: Manifest, target: Path, debug: bool = False) -> Action:
    if debug:
        return Action.CREATE
    return decide(fresh, read_existing(target))
