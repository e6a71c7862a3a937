"""Build manifest domain models."""

from typing import Literal

from pydantic import Field

from feedpush.models.base import FeedPushBaseModel


CATEGORY_ATTRIBUTE = "Category"


class ArtifactModel(FeedPushBaseModel):
    """An artifact listed in a build manifest."""

    kind: Literal["package", "blob"]
    id: str = Field(min_length=1)
    attributes: dict[str, str] = Field(default_factory=dict)

    @property
    def category(self) -> str | None:
        """Raw ``Category`` attribute, a ``;`` separated list of names."""
        return self.attributes.get(CATEGORY_ATTRIBUTE)


class PackageArtifact(ArtifactModel):
    """Package produced by the build (e.g. a NuGet package)."""

    kind: Literal["package"] = "package"

    @property
    def version(self) -> str | None:
        return self.attributes.get("Version")


class BlobArtifact(ArtifactModel):
    """Arbitrary file produced by the build (installers, archives, checksums)."""

    kind: Literal["blob"] = "blob"


class BuildManifest(FeedPushBaseModel):
    """Packages and blobs produced by one build, in manifest order."""

    name: str | None = None
    build_id: str | None = None
    attributes: dict[str, str] = Field(default_factory=dict)
    packages: list[PackageArtifact] = Field(default_factory=list)
    blobs: list[BlobArtifact] = Field(default_factory=list)

    @property
    def artifact_count(self) -> int:
        return len(self.packages) + len(self.blobs)


__all__ = [
    "ArtifactModel",
    "BlobArtifact",
    "BuildManifest",
    "PackageArtifact",
]
