"""Publish command for feedpush CLI."""

import logging
from pathlib import Path
from typing import Annotated

import typer
from pydantic import SecretStr

from feedpush.cli.app import AppContext
from feedpush.cli.decorators import handle_errors
from feedpush.cli.helpers import print_publish_result
from feedpush.config.models import FeedDescriptor, MissingFeedPolicy
from feedpush.config.settings import PublishSettings, load_feed_descriptors_file
from feedpush.core.errors import ConfigError
from feedpush.publishing.publishers import create_publisher
from feedpush.publishing.service import PublishOptions, create_publish_service


logger = logging.getLogger(__name__)


def _resolve_feeds(
    settings: PublishSettings,
    feeds_file: Path | None,
    feed_options: list[str] | None,
) -> list[FeedDescriptor]:
    """Feeds from the command line replace the configured ones."""
    if feeds_file or feed_options:
        descriptors = load_feed_descriptors_file(feeds_file) if feeds_file else []
        descriptors.extend(FeedDescriptor.from_option(value) for value in feed_options or [])
        return descriptors
    return list(settings.feeds)


@handle_errors
def publish_command(
    ctx: typer.Context,
    manifest_path: Annotated[
        str,
        typer.Argument(help="Build manifest file or directory of manifests"),
    ],
    blob_assets: Annotated[
        str,
        typer.Option("--blob-assets", help="Directory containing blob assets"),
    ],
    package_assets: Annotated[
        str,
        typer.Option("--package-assets", help="Directory containing package assets"),
    ],
    build_id: Annotated[
        int | None,
        typer.Option("--build-id", help="ID of the build that produced the artifacts"),
    ] = None,
    api_endpoint: Annotated[
        str | None,
        typer.Option("--api-endpoint", help="Build asset registry API endpoint"),
    ] = None,
    api_token: Annotated[
        str | None,
        typer.Option(
            "--api-token",
            envvar="FEEDPUSH_BUILD_ASSET_REGISTRY_TOKEN",
            help="Build asset registry access token",
        ),
    ] = None,
    feeds_file: Annotated[
        Path | None,
        typer.Option("--feeds-file", help="YAML file listing target feeds"),
    ] = None,
    feed: Annotated[
        list[str] | None,
        typer.Option(
            "--feed", help="Target feed as CATEGORY=URL,TYPE,TOKEN (repeatable)"
        ),
    ] = None,
    missing_feed: Annotated[
        MissingFeedPolicy | None,
        typer.Option(
            "--missing-feed",
            help="Fail or skip when a category has no configured feed",
        ),
    ] = None,
    publisher: Annotated[
        str, typer.Option("--publisher", help="Publisher implementation to use")
    ] = "dry-run",
) -> None:
    """Publish the artifacts of one or more build manifests to their feeds."""
    app_ctx: AppContext = ctx.obj
    settings = app_ctx.settings

    resolved_build_id = build_id if build_id is not None else settings.bar_build_id
    if resolved_build_id is None:
        raise ConfigError("A build id is required (--build-id or FEEDPUSH_BAR_BUILD_ID)")

    if api_token is not None:
        token = SecretStr(api_token)
    else:
        token = settings.build_asset_registry_token or SecretStr("")

    # Raw strings; PublishOptions reports empty paths as missing
    opts = PublishOptions(
        manifest_path=manifest_path,
        blob_assets_path=blob_assets,
        package_assets_path=package_assets,
        build_id=resolved_build_id,
        api_endpoint=api_endpoint or settings.maestro_api_endpoint or "",
        api_token=token,
        feeds=_resolve_feeds(settings, feeds_file, feed),
        missing_feed_policy=missing_feed or settings.missing_feed_policy,
        manifest_glob=settings.manifest_glob,
    )

    service = create_publish_service(create_publisher(publisher))
    result = service.publish_manifests(opts)

    print_publish_result(result, use_emoji=app_ctx.use_emoji)
    if not result.success:
        raise typer.Exit(1)


def register_commands(app: typer.Typer) -> None:
    """Register publish command with the main app.

    Args:
        app: The main Typer app
    """
    app.command(name="publish")(publish_command)
