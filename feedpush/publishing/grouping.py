"""Grouping of manifest artifacts by category and routing groups to feeds."""

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from requests.structures import CaseInsensitiveDict

from feedpush.config.feeds import FeedConfigSet
from feedpush.config.models import FeedConfig, MissingFeedPolicy
from feedpush.core.structlog_logger import get_struct_logger
from feedpush.manifest.models import (
    ArtifactModel,
    BlobArtifact,
    BuildManifest,
    PackageArtifact,
)
from feedpush.publishing.categories import categorize


logger = get_struct_logger(__name__)

ArtifactT = TypeVar("ArtifactT", bound=ArtifactModel)


class CategoryGroups(Mapping[str, list[ArtifactT]], Generic[ArtifactT]):
    """Case-insensitive mapping of category name to artifacts.

    Categories keep the spelling and order in which they were first seen.
    Artifacts within a group keep the order in which they were added.
    """

    def __init__(self) -> None:
        self._groups: CaseInsensitiveDict[list[ArtifactT]] = CaseInsensitiveDict()

    def add(self, category: str, artifact: ArtifactT) -> None:
        if category in self._groups:
            self._groups[category].append(artifact)
        else:
            self._groups[category] = [artifact]

    def __getitem__(self, category: str) -> list[ArtifactT]:
        return self._groups[category]

    def __iter__(self) -> Iterator[str]:
        return iter(self._groups)

    def __len__(self) -> int:
        return len(self._groups)

    def __repr__(self) -> str:
        return f"CategoryGroups({dict(self._groups.items())!r})"

    def counts(self) -> dict[str, int]:
        return {category: len(artifacts) for category, artifacts in self.items()}


def group_artifacts(artifacts: Iterable[ArtifactT]) -> CategoryGroups[ArtifactT]:
    """Add every artifact to the group of each category it belongs to."""
    groups: CategoryGroups[ArtifactT] = CategoryGroups()
    for artifact in artifacts:
        for category in categorize(artifact):
            groups.add(category, artifact)
    return groups


@dataclass
class ArtifactGroups:
    """Package and blob groupings for one manifest."""

    packages_by_category: CategoryGroups[PackageArtifact] = field(
        default_factory=CategoryGroups
    )
    blobs_by_category: CategoryGroups[BlobArtifact] = field(
        default_factory=CategoryGroups
    )

    @classmethod
    def from_manifest(cls, manifest: BuildManifest) -> "ArtifactGroups":
        return cls(
            packages_by_category=group_artifacts(manifest.packages),
            blobs_by_category=group_artifacts(manifest.blobs),
        )

    def categories(self) -> list[str]:
        """Every category used by packages or blobs, without case duplicates."""
        seen: CaseInsensitiveDict[str] = CaseInsensitiveDict()
        for category in [*self.packages_by_category, *self.blobs_by_category]:
            if category not in seen:
                seen[category] = category
        return list(seen.values())

    def counts(self) -> dict[str, int]:
        totals: CaseInsensitiveDict[int] = CaseInsensitiveDict()
        for groups in (self.packages_by_category, self.blobs_by_category):
            for category, count in groups.counts().items():
                totals[category] = totals.get(category, 0) + count
        return dict(totals.items())

    def without(self, categories: Iterable[str]) -> "ArtifactGroups":
        """Return a copy that leaves out the given categories."""
        excluded = {category.upper() for category in categories}
        trimmed = ArtifactGroups()
        for category, packages in self.packages_by_category.items():
            if category.upper() not in excluded:
                for package in packages:
                    trimmed.packages_by_category.add(category, package)
        for category, blobs in self.blobs_by_category.items():
            if category.upper() not in excluded:
                for blob in blobs:
                    trimmed.blobs_by_category.add(category, blob)
        return trimmed


@dataclass
class RoutingResult:
    """Feed chosen for each category of a manifest."""

    feeds: dict[str, FeedConfig] = field(default_factory=dict)
    missing: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)


def route_groups(
    groups: ArtifactGroups,
    feeds: FeedConfigSet,
    policy: MissingFeedPolicy = MissingFeedPolicy.ERROR,
    source: str | None = None,
) -> RoutingResult:
    """Match each category group to its configured feed.

    Args:
        groups: Groupings computed for one manifest
        feeds: Validated feed configuration
        policy: Whether a category without feed is an error or skipped
        source: Manifest name used in messages

    Returns:
        RoutingResult; ``errors`` is only populated under the error policy
    """
    routing = RoutingResult()
    for category in groups.categories():
        if category in feeds:
            routing.feeds[category] = feeds[category]
            continue

        routing.missing.append(category)
        if MissingFeedPolicy(policy) is MissingFeedPolicy.ERROR:
            routing.errors.append(
                f"No feed configured for category '{category}'"
                + (f" used in {source}" if source else "")
            )
        else:
            logger.warning(
                "category_skipped_without_feed", category=category, manifest=source
            )
    return routing


__all__ = [
    "ArtifactGroups",
    "CategoryGroups",
    "RoutingResult",
    "group_artifacts",
    "route_groups",
]
