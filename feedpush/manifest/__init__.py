"""Build manifest models and parsing."""

from .models import ArtifactModel, BlobArtifact, BuildManifest, PackageArtifact
from .parser import discover_manifests, parse_manifest, parse_manifest_text


__all__ = [
    "ArtifactModel",
    "BlobArtifact",
    "BuildManifest",
    "PackageArtifact",
    "discover_manifests",
    "parse_manifest",
    "parse_manifest_text",
]
