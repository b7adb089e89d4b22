from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from scoopman.errors import ConfigError, EnvironmentResolutionError

DEFAULTS: Dict[str, Any] = {
    "bucket_dir": "~/scoop/buckets/local",
    "descriptor": "Cargo.toml",
    "release_dir": "target/release",
    "exe_suffix": ".exe",
    "debug_dir": ".",
    "indent": 2,
}


def load_yaml(path: str | Path) -> Dict[str, Any]:
    """Load YAML config into a dict."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as exc:
        raise ConfigError(f"Could not read config {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Could not parse config {path}: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config {path} must be a mapping")
    return data


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged: Dict[str, Any] = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _check_indent(raw: Dict[str, Any]) -> None:
    value = raw.get("indent")
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"Config indent must be an integer, got {value!r}")


@dataclass
class AppConfig:
    raw: Dict[str, Any] = field(default_factory=lambda: dict(DEFAULTS))

    @classmethod
    def from_files(cls, *paths: str | Path) -> "AppConfig":
        merged: Dict[str, Any] = dict(DEFAULTS)
        for path in paths:
            merged = deep_merge(merged, load_yaml(path))
        _check_indent(merged)
        return cls(raw=merged)

    def with_overrides(self, **overrides: Any) -> "AppConfig":
        present = {k: v for k, v in overrides.items() if v is not None}
        return AppConfig(raw=deep_merge(self.raw, present))

    def bucket_root(self, home: Optional[Path]) -> Path:
        """Resolve the package-index directory; `~` expands against `home`."""
        raw = str(self.raw["bucket_dir"])
        if raw.startswith("~"):
            if home is None:
                raise EnvironmentResolutionError("Could not find home.")
            path = home / raw[1:].lstrip("/\\")
        else:
            path = Path(raw)
        if not path.is_dir():
            raise EnvironmentResolutionError(
                f"Could not find Scoop bucket. Please make sure dir '{path}' exists."
            )
        return path.resolve()

    def debug_root(self) -> Path:
        return Path(str(self.raw["debug_dir"])).resolve()

    @property
    def indent(self) -> int:
        return int(self.raw["indent"])
