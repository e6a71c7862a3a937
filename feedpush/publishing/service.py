"""Publish artifacts listed in build manifests to their category feeds."""

from pathlib import Path
from typing import Any

from pydantic import Field, SecretStr, field_validator
from requests.structures import CaseInsensitiveDict

from feedpush.config.feeds import (
    FeedConfigSet,
    load_feed_configs,
    validate_input_paths,
)
from feedpush.config.models import FeedDescriptor, MissingFeedPolicy
from feedpush.core.errors import FeedPushError
from feedpush.core.structlog_logger import get_struct_logger
from feedpush.manifest.models import BuildManifest
from feedpush.manifest.parser import discover_manifests, parse_manifest
from feedpush.models.base import FeedPushBaseModel
from feedpush.models.results import BaseResult
from feedpush.protocols.publisher_protocol import PublisherProtocol
from feedpush.publishing.grouping import ArtifactGroups, route_groups
from feedpush.publishing.publishers import PublishRequest, create_publisher


logger = get_struct_logger(__name__)


class PublishOptions(FeedPushBaseModel):
    """Inputs of a publish run as supplied by the invoking build tool."""

    manifest_path: Path | None
    blob_assets_path: Path | None
    package_assets_path: Path | None
    build_id: int = Field(ge=0)
    api_endpoint: str = ""
    api_token: SecretStr = SecretStr("")
    feeds: list[FeedDescriptor] = Field(default_factory=list)
    missing_feed_policy: MissingFeedPolicy = MissingFeedPolicy.ERROR
    manifest_glob: str = "*.xml"

    @field_validator(
        "manifest_path", "blob_assets_path", "package_assets_path", mode="before"
    )
    @classmethod
    def blank_path_to_none(cls, v: Any) -> Any:
        """Treat an empty path as missing instead of the current directory."""
        if isinstance(v, str) and not v.strip():
            return None
        return v


class PublishResult(BaseResult):
    """Result of publishing one or more manifests."""

    manifests_published: list[str] = Field(default_factory=list)
    categories: dict[str, int] = Field(default_factory=dict)
    skipped_categories: list[str] = Field(default_factory=list)


class PublishArtifactsService:
    """Validates inputs, classifies manifest artifacts and hands them to a publisher.

    Problems with inputs, manifests and feed configuration are collected so
    that one run reports all of them; nothing is published once any error
    has been recorded.
    """

    def __init__(self, publisher: PublisherProtocol):
        self._publisher = publisher

    def publish_manifests(self, opts: PublishOptions) -> PublishResult:
        """Run the publish operation.

        Args:
            opts: Paths, build identity and feed descriptors for this run

        Returns:
            PublishResult; never raises
        """
        result = PublishResult(success=True)
        logger.info(
            "publish_started",
            manifest_path=str(opts.manifest_path),
            build_id=opts.build_id,
            feed_count=len(opts.feeds),
        )

        try:
            self._publish(opts, result)
        except FeedPushError as e:
            result.add_error(str(e))
        except Exception as e:
            logger.exception(
                "publish_unexpected_error", error=str(e), error_type=type(e).__name__
            )
            result.add_error(
                f"Unexpected error while publishing: {type(e).__name__}: {e}"
            )

        if result.success:
            logger.info(
                "publish_completed",
                manifests=len(result.manifests_published),
                categories=result.categories,
            )
        return result

    def _publish(self, opts: PublishOptions, result: PublishResult) -> None:
        result.extend_errors(
            validate_input_paths(
                opts.manifest_path, opts.blob_assets_path, opts.package_assets_path
            )
        )
        if result.errors:
            return

        feeds, feed_errors = load_feed_configs(opts.feeds)
        result.extend_errors(feed_errors)
        if result.errors:
            return

        assert opts.manifest_path is not None
        manifests = self._load_manifests(opts.manifest_path, opts.manifest_glob, result)
        if result.errors:
            return

        publish_requests = self._plan_requests(opts, feeds, manifests, result)
        if result.errors:
            return

        for request in publish_requests:
            logger.info(
                "publishing_manifest",
                manifest=str(request.manifest_path),
                categories=list(request.feeds),
            )
            self._publisher.publish(request)
            result.manifests_published.append(str(request.manifest_path))

        result.add_message(
            f"Published {len(result.manifests_published)} manifest(s) "
            f"to {len(result.categories)} categories"
        )

    def _load_manifests(
        self, manifest_path: Path, pattern: str, result: PublishResult
    ) -> list[tuple[Path, BuildManifest]]:
        manifest_paths = discover_manifests(manifest_path, pattern)
        if not manifest_paths:
            result.add_error(
                f"No manifests matching '{pattern}' found in {manifest_path}"
            )
            return []

        manifests: list[tuple[Path, BuildManifest]] = []
        for path in manifest_paths:
            try:
                manifests.append((path, parse_manifest(path)))
            except FeedPushError as e:
                result.add_error(str(e))
        return manifests

    def _plan_requests(
        self,
        opts: PublishOptions,
        feeds: FeedConfigSet,
        manifests: list[tuple[Path, BuildManifest]],
        result: PublishResult,
    ) -> list[PublishRequest]:
        blob_assets_path = opts.blob_assets_path
        package_assets_path = opts.package_assets_path
        assert blob_assets_path is not None and package_assets_path is not None

        # Categories from different manifests are totalled ignoring case
        category_totals: CaseInsensitiveDict[int] = CaseInsensitiveDict()
        skipped: CaseInsensitiveDict[str] = CaseInsensitiveDict()
        publish_requests: list[PublishRequest] = []
        for path, manifest in manifests:
            groups = ArtifactGroups.from_manifest(manifest)
            routing = route_groups(
                groups, feeds, opts.missing_feed_policy, source=path.name
            )
            result.extend_errors(routing.errors)

            if routing.missing and not routing.errors:
                groups = groups.without(routing.missing)
                for category in routing.missing:
                    skipped.setdefault(category, category)

            for category, count in groups.counts().items():
                category_totals[category] = category_totals.get(category, 0) + count

            publish_requests.append(
                PublishRequest(
                    manifest_path=path,
                    manifest=manifest,
                    feeds=routing.feeds,
                    groups=groups,
                    build_id=opts.build_id,
                    api_endpoint=opts.api_endpoint,
                    api_token=opts.api_token,
                    blob_assets_path=blob_assets_path,
                    package_assets_path=package_assets_path,
                )
            )

        result.categories = dict(category_totals.items())
        result.skipped_categories = list(skipped.values())
        return publish_requests


def create_publish_service(
    publisher: PublisherProtocol | None = None,
) -> PublishArtifactsService:
    """Create a publish service, defaulting to the dry-run publisher."""
    return PublishArtifactsService(publisher or create_publisher())


__all__ = [
    "PublishArtifactsService",
    "PublishOptions",
    "PublishResult",
    "create_publish_service",
]
