"""Core test fixtures for the feedpush project."""

import os
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any
from unittest.mock import Mock

import pytest
import yaml
from typer.testing import CliRunner

from feedpush.config.models import FeedDescriptor
from feedpush.protocols import PublisherProtocol
from feedpush.publishing.service import PublishOptions


SAMPLE_MANIFEST = """<?xml version="1.0" encoding="utf-8"?>
<Build Name="runtime" BuildId="20190321.1" Branch="main" Commit="abc123">
  <Package Id="Microsoft.NETCore.App" Version="3.0.0" />
  <Package Id="Microsoft.NETCore.DotNetHost" Version="3.0.0" NonShipping="true" />
  <Blob Id="assets/dotnet-runtime-3.0.0-win-x64.zip" />
  <Blob Id="assets/dotnet-runtime-3.0.0-x64.deb" />
  <Blob Id="assets/dotnet-runtime-3.0.0-win-x64.zip.sha" />
  <Blob Id="assets/dotnet-runtime-3.0.0-osx-x64.pkg" Category="OSX;Installer" />
</Build>
"""


@pytest.fixture
def cli_runner() -> CliRunner:
    """Return a Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def clean_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Remove FEEDPUSH_ variables and point config lookups at a temp directory."""
    for key in list(os.environ):
        if key.startswith("FEEDPUSH_"):
            monkeypatch.delenv(key)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def write_manifest(tmp_path: Path) -> Callable[..., Path]:
    """Write manifest XML into a temporary manifests directory."""

    def _write(content: str = SAMPLE_MANIFEST, name: str = "manifest.xml") -> Path:
        manifests_dir = tmp_path / "manifests"
        manifests_dir.mkdir(exist_ok=True)
        path = manifests_dir / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def asset_dirs(tmp_path: Path) -> dict[str, Path]:
    """Create blob and package asset directories."""
    blobs = tmp_path / "blobs"
    packages = tmp_path / "packages"
    blobs.mkdir()
    packages.mkdir()
    return {"blobs": blobs, "packages": packages}


@pytest.fixture
def feed_descriptors() -> list[FeedDescriptor]:
    """Valid feeds covering every category used by SAMPLE_MANIFEST."""
    feeds: list[dict[str, Any]] = [
        {"category": "NetCore", "target_url": "https://pkgs.example.com/netcore", "type": "AzDoNugetFeed", "token": "nuget-token"},
        {"category": "BinaryLayout", "target_url": "https://blobs.example.com/layout", "type": "AzureStorageFeed", "token": "blob-token"},
        {"category": "DEB", "target_url": "https://blobs.example.com/deb", "type": "AzureStorageFeed", "token": "blob-token"},
        {"category": "Checksum", "target_url": "https://blobs.example.com/checksums", "type": "AzureStorageFeed", "token": "blob-token"},
        {"category": "OSX", "target_url": "https://blobs.example.com/osx", "type": "AzureStorageFeed", "token": "blob-token"},
        {"category": "Installer", "target_url": "https://blobs.example.com/installers", "type": "AzureStorageFeed", "token": "blob-token"},
    ]
    return [FeedDescriptor.model_validate(feed) for feed in feeds]


@pytest.fixture
def feeds_file(tmp_path: Path, feed_descriptors: list[FeedDescriptor]) -> Path:
    """YAML feeds file equivalent to feed_descriptors."""
    path = tmp_path / "feeds.yaml"
    data = {
        "feeds": [
            {
                "category": d.category,
                "target_url": d.target_url,
                "type": d.type,
                "token": d.token.get_secret_value(),
            }
            for d in feed_descriptors
        ]
    }
    with path.open("w") as f:
        yaml.dump(data, f)
    return path


@pytest.fixture
def mock_publisher() -> Mock:
    """Create a mock publisher for testing."""
    return Mock(spec=PublisherProtocol)


@pytest.fixture
def publish_options(
    write_manifest: Callable[..., Path],
    asset_dirs: dict[str, Path],
    feed_descriptors: list[FeedDescriptor],
) -> Generator[PublishOptions, None, None]:
    """Options for a run that should publish SAMPLE_MANIFEST successfully."""
    manifest = write_manifest()
    yield PublishOptions(
        manifest_path=manifest.parent,
        blob_assets_path=asset_dirs["blobs"],
        package_assets_path=asset_dirs["packages"],
        build_id=4242,
        api_endpoint="https://maestro.example.com",
        api_token="bar-token",
        feeds=feed_descriptors,
    )
