from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

from scoopman.errors import DescriptorParseError, InputNotFoundError

logger = logging.getLogger(__name__)

UNKNOWN_LICENSE = "Unknown"


@dataclass(frozen=True)
class PackageMetadata:
    name: str
    version: str
    license: str = UNKNOWN_LICENSE


def read_descriptor(project_dir: Path, descriptor: str = "Cargo.toml") -> PackageMetadata:
    """Read `[package]` name, version and license from the project's Cargo.toml."""
    path = project_dir / descriptor
    if not path.is_file():
        raise InputNotFoundError(f"Could not find {descriptor} in {project_dir}")
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as exc:
        raise DescriptorParseError(f"Could not parse {path}: {exc}") from exc
    except OSError as exc:
        raise InputNotFoundError(f"Could not read {path}: {exc}") from exc
    return parse_descriptor(data)


def parse_descriptor(data: Dict[str, Any]) -> PackageMetadata:
    package = data.get("package")
    if not isinstance(package, dict):
        raise DescriptorParseError("Could not find [package] section. Please check if Cargo.toml is correct.")

    name = _require_str(package, "name")
    version = _require_str(package, "version")

    if "license" in package:
        license_ = _require_str(package, "license")
    else:
        logger.warning("Could not find license information. Using %s.", UNKNOWN_LICENSE)
        logger.warning("If you want to use license in your manifest please add license key to package section.")
        license_ = UNKNOWN_LICENSE

    return PackageMetadata(name=name, version=version, license=license_)


def _require_str(package: Dict[str, Any], key: str) -> str:
    value = package.get(key)
    if not isinstance(value, str):
        raise DescriptorParseError(f"Could not parse project {key}. Please check if Cargo.toml is correct.")
    return value
