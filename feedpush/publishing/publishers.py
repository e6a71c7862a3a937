"""Publisher implementations and factory."""

from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from pydantic import SecretStr

from feedpush.config.models import FeedConfig
from feedpush.core.errors import ConfigError
from feedpush.core.structlog_logger import get_struct_logger
from feedpush.manifest.models import BuildManifest
from feedpush.protocols.publisher_protocol import PublisherProtocol
from feedpush.publishing.grouping import ArtifactGroups


logger = get_struct_logger(__name__)


@dataclass
class PublishRequest:
    """Everything a publisher needs to push one manifest's artifacts."""

    manifest_path: Path
    manifest: BuildManifest
    feeds: dict[str, FeedConfig]
    groups: ArtifactGroups
    build_id: int
    api_endpoint: str
    api_token: SecretStr
    blob_assets_path: Path
    package_assets_path: Path


@dataclass
class DryRunPublisher:
    """Publisher that only logs what would be pushed.

    Requests are kept in ``published`` so callers can inspect them.
    """

    published: list[PublishRequest] = field(default_factory=list)

    def publish(self, request: PublishRequest) -> None:
        for category, feed in request.feeds.items():
            packages = request.groups.packages_by_category.get(category, [])
            blobs = request.groups.blobs_by_category.get(category, [])
            logger.info(
                "dry_run_publish",
                manifest=request.manifest_path.name,
                category=category,
                feed_type=feed.type,
                target_url=feed.target_url,
                packages=[package.id for package in packages],
                blobs=[blob.id for blob in blobs],
            )
        self.published.append(request)


PUBLISHERS: dict[str, Callable[[], PublisherProtocol]] = {
    "dry-run": DryRunPublisher,
}


def create_publisher(name: str = "dry-run") -> PublisherProtocol:
    """Create a publisher by name.

    Raises:
        ConfigError: If no publisher is registered under ``name``
    """
    try:
        factory = PUBLISHERS[name]
    except KeyError:
        raise ConfigError(
            f"Unknown publisher '{name}'. Available: {', '.join(sorted(PUBLISHERS))}"
        ) from None
    return factory()


__all__ = ["DryRunPublisher", "PUBLISHERS", "PublishRequest", "create_publisher"]
