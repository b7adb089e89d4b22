import hashlib
from pathlib import Path

import pytest

from scoopman.errors import InputNotFoundError
from scoopman.ingest.artifact import default_artifact_path, load_artifact, locate_artifact
from scoopman.io.hashing import sha256_file
from scoopman.utils.paths import clean_path, display_path


def _make_exe(root: Path, name: str = "tool.exe", data: bytes = b"MZ binary") -> Path:
    release = root / "target" / "release"
    release.mkdir(parents=True, exist_ok=True)
    exe = release / name
    exe.write_bytes(data)
    return exe


def test_sha256_file_matches_hashlib(tmp_path: Path):
    exe = _make_exe(tmp_path, data=b"x" * 3_000_000)
    assert sha256_file(exe) == hashlib.sha256(b"x" * 3_000_000).hexdigest()


def test_default_location(tmp_path: Path):
    exe = _make_exe(tmp_path)
    assert default_artifact_path(tmp_path, "tool") == tmp_path / "target" / "release" / "tool.exe"
    assert locate_artifact(tmp_path, "tool") == exe.resolve()


def test_explicit_path_relative_to_project(tmp_path: Path):
    other = tmp_path / "dist"
    other.mkdir()
    (other / "renamed.exe").write_bytes(b"MZ")
    found = locate_artifact(tmp_path, "tool", explicit_path="dist/renamed.exe")
    assert found.name == "renamed.exe"


def test_missing_release_hints_compile(tmp_path: Path):
    with pytest.raises(InputNotFoundError, match="compiled release"):
        locate_artifact(tmp_path, "tool")


def test_load_artifact_uses_hasher(tmp_path: Path):
    exe = _make_exe(tmp_path)
    artifact = load_artifact(exe, hasher=lambda _p: "abc123")
    assert artifact.digest == "abc123"
    assert artifact.file_name == "tool.exe"


def test_paths_helpers():
    assert clean_path("a/b/../c/./d") == Path("a/c/d")
    assert display_path(Path("\\\\?\\C:\\tool\\tool.exe")) == "C:\\tool\\tool.exe"


def test_missing_explicit_path(tmp_path: Path):
    with pytest.raises(InputNotFoundError, match="--path"):
        locate_artifact(tmp_path, "tool", explicit_path="missing.exe")
