from __future__ import annotations

import json
from pathlib import Path

from scoopman.errors import PersistenceError
from scoopman.manifest.model import Manifest


def dumps_manifest(manifest: Manifest, indent: int | None = 2) -> str:
    if indent is None:
        return json.dumps(manifest.to_dict(), ensure_ascii=False, separators=(",", ":"))
    return json.dumps(manifest.to_dict(), ensure_ascii=False, indent=indent)


class ManifestWriter:
    def __init__(self, output_root: str | Path) -> None:
        self.output_root = Path(output_root)

    def target_path(self, name: str) -> Path:
        return self.output_root / f"{name}.json"

    def write(self, name: str, manifest: Manifest, indent: int | None = 2) -> Path:
        path = self.target_path(name)
        try:
            self.output_root.mkdir(parents=True, exist_ok=True)
            with open(path, "w", encoding="utf-8") as f:
                f.write(dumps_manifest(manifest, indent=indent))
        except OSError as exc:
            raise PersistenceError(f"Could not write manifest {path}: {exc}") from exc
        return path
