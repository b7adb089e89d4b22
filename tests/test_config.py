from pathlib import Path

import pytest

from scoopman.errors import ConfigError, EnvironmentResolutionError
from scoopman.utils.config import AppConfig, deep_merge


def test_deep_merge_nested():
    assert deep_merge({"a": {"b": 1, "c": 2}}, {"a": {"c": 3}}) == {"a": {"b": 1, "c": 3}}


def test_from_files_layers_over_defaults(tmp_path: Path):
    first = tmp_path / "a.yaml"
    second = tmp_path / "b.yaml"
    first.write_text("exe_suffix: ''\nindent: 4\n", encoding="utf-8")
    second.write_text("indent: 8\n", encoding="utf-8")
    cfg = AppConfig.from_files(first, second)
    assert cfg.raw["exe_suffix"] == ""
    assert cfg.indent == 8
    assert cfg.raw["descriptor"] == "Cargo.toml"


def test_empty_yaml_is_empty_mapping(tmp_path: Path):
    empty = tmp_path / "empty.yaml"
    empty.write_text("", encoding="utf-8")
    assert AppConfig.from_files(empty).raw == AppConfig().raw


def test_non_mapping_yaml_rejected(tmp_path: Path):
    bad = tmp_path / "bad.yaml"
    bad.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        AppConfig.from_files(bad)


def test_bucket_root_from_injected_home(tmp_path: Path):
    bucket = tmp_path / "scoop" / "buckets" / "local"
    bucket.mkdir(parents=True)
    assert AppConfig().bucket_root(home=tmp_path) == bucket.resolve()


def test_bucket_root_missing(tmp_path: Path):
    with pytest.raises(EnvironmentResolutionError, match="Could not find Scoop bucket"):
        AppConfig().bucket_root(home=tmp_path)


def test_bucket_root_without_home():
    with pytest.raises(EnvironmentResolutionError, match="home"):
        AppConfig().bucket_root(home=None)


def test_overrides_skip_none(tmp_path: Path):
    cfg = AppConfig().with_overrides(bucket_dir=str(tmp_path), debug_dir=None)
    assert cfg.bucket_root(home=None) == tmp_path.resolve()
    assert cfg.raw["debug_dir"] == "."


@pytest.mark.parametrize("value", ["wide", "true"])
def test_non_integer_indent_rejected(tmp_path: Path, value):
    path = tmp_path / "c.yaml"
    path.write_text(f"indent: {value}\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="indent must be an integer"):
        AppConfig.from_files(path)
