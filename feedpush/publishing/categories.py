"""Artifact category inference."""

from enum import Enum

from feedpush.manifest.models import ArtifactModel


CATEGORY_SEPARATOR = ";"


class ArtifactCategory(str, Enum):
    """Well-known feed categories."""

    NETCORE = "NetCore"
    OSX = "OSX"
    DEB = "DEB"
    RPM = "RPM"
    NODE = "NODE"
    BINARY_LAYOUT = "BinaryLayout"
    INSTALLER = "Installer"
    CHECKSUM = "Checksum"
    MAVEN = "Maven"
    VSIX = "VSIX"


# Checked in order; the first matching suffix wins
EXTENSION_CATEGORIES: tuple[tuple[str, ArtifactCategory], ...] = (
    (".NUPKG", ArtifactCategory.NETCORE),
    (".PKG", ArtifactCategory.OSX),
    (".DEB", ArtifactCategory.DEB),
    (".RPM", ArtifactCategory.RPM),
    (".NPM", ArtifactCategory.NODE),
    (".ZIP", ArtifactCategory.BINARY_LAYOUT),
    (".MSI", ArtifactCategory.INSTALLER),
    (".SHA", ArtifactCategory.CHECKSUM),
    (".POM", ArtifactCategory.MAVEN),
    (".VSIX", ArtifactCategory.VSIX),
)

DEFAULT_CATEGORY = ArtifactCategory.NETCORE


def infer_category(artifact_id: str) -> str:
    """Infer a category from the artifact's file extension.

    Matching is case-insensitive. Identifiers without a known extension
    fall back to ``NetCore``.
    """
    normalized = artifact_id.strip().upper()
    for suffix, category in EXTENSION_CATEGORIES:
        if normalized.endswith(suffix):
            return category.value
    return DEFAULT_CATEGORY.value


def split_categories(value: str | None) -> list[str]:
    """Split a ``;`` separated category attribute.

    Blank entries are dropped and repeated names (ignoring case) are kept once.
    """
    if not value:
        return []

    categories: list[str] = []
    seen: set[str] = set()
    for part in value.split(CATEGORY_SEPARATOR):
        name = part.strip()
        if name and name.upper() not in seen:
            seen.add(name.upper())
            categories.append(name)
    return categories


def categorize(artifact: ArtifactModel) -> list[str]:
    """Return every category an artifact belongs to; never empty."""
    return split_categories(artifact.category) or [infer_category(artifact.id)]


__all__ = [
    "ArtifactCategory",
    "DEFAULT_CATEGORY",
    "EXTENSION_CATEGORIES",
    "categorize",
    "infer_category",
    "split_categories",
]
