from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

ARCH_64BIT = "64bit"


@dataclass(frozen=True)
class PresentationOptions:
    alias: str
    display_binary_name: Optional[str] = None
    is_gui_app: bool = False


@dataclass(frozen=True)
class Manifest:
    """Scoop-style manifest for a single locally built executable."""

    version: str
    url: str
    hash: str
    bin: Any
    license: str
    architecture: Dict[str, Any]
    shortcuts: List[Any] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "version": self.version,
            "url": self.url,
            "hash": self.hash,
            "bin": self.bin,
            "shortcuts": self.shortcuts,
            "license": self.license,
            "architecture": self.architecture,
        }

    @classmethod
    def from_dict(cls, obj: Any) -> "Manifest":
        if not isinstance(obj, dict):
            raise ValueError("manifest is not a JSON object")
        for key in ("version", "url", "hash", "license"):
            if not isinstance(obj.get(key), str):
                raise ValueError(f"manifest field '{key}' must be a string")
        for key in ("bin", "architecture"):
            if key not in obj:
                raise ValueError(f"manifest field '{key}' is missing")
        shortcuts = obj.get("shortcuts", [])
        if not isinstance(shortcuts, list):
            raise ValueError("manifest field 'shortcuts' must be an array")
        return cls(
            version=obj["version"],
            url=obj["url"],
            hash=obj["hash"],
            bin=obj["bin"],
            license=obj["license"],
            architecture=obj["architecture"],
            shortcuts=shortcuts,
        )
