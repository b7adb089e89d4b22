from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from scoopman.errors import InputNotFoundError, ReconciliationConflictError, ScoopmanError
from scoopman.ingest.artifact import load_artifact, locate_artifact
from scoopman.ingest.descriptor import read_descriptor
from scoopman.io.writer import ManifestWriter
from scoopman.manifest.builder import build_manifest
from scoopman.manifest.model import PresentationOptions
from scoopman.manifest.reconcile import Action, reconcile
from scoopman.utils.config import AppConfig
from scoopman.utils.paths import clean_path

logger = logging.getLogger(__name__)

CONFLICT_MESSAGE = (
    "Unable to update manifest. Hashes don't match, yet, app's version wasn't changed. "
    "Please, update your app's version."
)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Create a pseudo Scoop manifest for a locally built release executable")
    parser.add_argument("--cwd", required=True, help="Project directory containing Cargo.toml")
    parser.add_argument("--alias", required=True, help="Alias for the Scoop shim or shortcut")
    parser.add_argument("--path", required=False, help="Explicit path to the built executable")
    parser.add_argument("--bin", required=False, dest="bin_name", help="Binary name shown in the manifest")
    parser.add_argument("--gui", action="store_true", help="Register a start menu shortcut instead of a shim")
    parser.add_argument("--debug", action="store_true", help="Skip the bucket check and write into --debug-dir")
    parser.add_argument("--debug-dir", required=False, help="Output directory for --debug")
    parser.add_argument("--bucket", required=False, help="Override the Scoop bucket directory")
    parser.add_argument("--config", action="append", default=[], help="YAML config file (repeatable)")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


def _home() -> Optional[Path]:
    try:
        return Path.home()
    except RuntimeError:
        return None


def run(args: argparse.Namespace, home: Optional[Path] = None) -> Action:
    cfg = AppConfig.from_files(*args.config).with_overrides(bucket_dir=args.bucket, debug_dir=args.debug_dir)

    if args.debug:
        output_root = cfg.debug_root()
    else:
        output_root = cfg.bucket_root(home)

    cwd = clean_path(args.cwd)
    if not cwd.is_dir():
        raise InputNotFoundError(f"Could not find directory: {cwd}")

    metadata = read_descriptor(cwd, cfg.raw["descriptor"])
    artifact_path = locate_artifact(
        cwd,
        metadata.name,
        explicit_path=args.path,
        release_dir=cfg.raw["release_dir"],
        exe_suffix=cfg.raw["exe_suffix"],
    )
    artifact = load_artifact(artifact_path)
    logger.debug("Hashed %s: %s", artifact.path, artifact.digest)

    options = PresentationOptions(alias=args.alias, display_binary_name=args.bin_name, is_gui_app=args.gui)
    manifest = build_manifest(metadata, artifact, options)

    writer = ManifestWriter(output_root)
    target = writer.target_path(metadata.name)
    action = reconcile(manifest, target, debug=args.debug)

    if action is Action.CONFLICT:
        raise ReconciliationConflictError(CONFLICT_MESSAGE)
    if not action.writes:
        print("Already up to date.")
        return action

    written = writer.write(metadata.name, manifest, indent=None if args.debug else cfg.indent)
    verb = "updated" if action is Action.UPDATE else "created"
    print(f"Manifest file successfully {verb} At {written}")
    return action


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )
    try:
        run(args, home=_home())
    except ScoopmanError as exc:
        raise SystemExit(f"error: {exc}") from exc


if __name__ == "__main__":
    main()
