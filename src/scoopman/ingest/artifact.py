from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from scoopman.errors import InputNotFoundError
from scoopman.io.hashing import sha256_file
from scoopman.utils.paths import display_path

Hasher = Callable[[Path], str]


@dataclass(frozen=True)
class BuildArtifact:
    path: Path
    digest: str

    @property
    def url(self) -> str:
        return display_path(self.path)

    @property
    def file_name(self) -> str:
        return self.path.name


def default_artifact_path(project_dir: Path, name: str, release_dir: str = "target/release", exe_suffix: str = ".exe") -> Path:
    return project_dir / release_dir / f"{name}{exe_suffix}"


def locate_artifact(
    project_dir: Path,
    name: str,
    explicit_path: Optional[str | Path] = None,
    release_dir: str = "target/release",
    exe_suffix: str = ".exe",
) -> Path:
    if explicit_path is not None:
        candidate = Path(explicit_path)
        if not candidate.is_absolute():
            candidate = project_dir / candidate
        hint = "Please check the path passed with --path."
    else:
        candidate = default_artifact_path(project_dir, name, release_dir, exe_suffix)
        hint = "Have you compiled release?"

    if not candidate.is_file():
        raise InputNotFoundError(f"Could not get {candidate}. {hint}")
    return candidate.resolve()


def load_artifact(path: Path, hasher: Hasher = sha256_file) -> BuildArtifact:
    try:
        digest = hasher(path)
    except OSError as exc:
        raise InputNotFoundError(f"Could not read {path}: {exc}") from exc
    return BuildArtifact(path=path, digest=digest)
