from __future__ import annotations

from scoopman.ingest.artifact import BuildArtifact
from scoopman.ingest.descriptor import PackageMetadata
from scoopman.manifest.model import ARCH_64BIT, Manifest, PresentationOptions


def build_manifest(metadata: PackageMetadata, artifact: BuildArtifact, options: PresentationOptions) -> Manifest:
    bin_name = options.display_binary_name or artifact.file_name
    entry = [bin_name, options.alias]

    if options.is_gui_app:
        bin_field = bin_name
        shortcuts = [entry]
    else:
        bin_field = [entry]
        shortcuts = []

    url = artifact.url
    return Manifest(
        version=metadata.version,
        url=url,
        hash=artifact.digest,
        bin=bin_field,
        license=metadata.license,
        # Only one build target is ever produced.
        architecture={ARCH_64BIT: {"url": url, "hash": artifact.digest}},
        shortcuts=shortcuts,
    )
