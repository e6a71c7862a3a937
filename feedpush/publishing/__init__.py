"""Artifact classification, routing and publishing."""

from .categories import ArtifactCategory, categorize, infer_category
from .grouping import ArtifactGroups, CategoryGroups, group_artifacts, route_groups
from .publishers import DryRunPublisher, PublishRequest, create_publisher
from .service import (
    PublishArtifactsService,
    PublishOptions,
    PublishResult,
    create_publish_service,
)


__all__ = [
    "ArtifactCategory",
    "ArtifactGroups",
    "CategoryGroups",
    "DryRunPublisher",
    "PublishArtifactsService",
    "PublishOptions",
    "PublishRequest",
    "PublishResult",
    "categorize",
    "create_publish_service",
    "create_publisher",
    "group_artifacts",
    "infer_category",
    "route_groups",
]
