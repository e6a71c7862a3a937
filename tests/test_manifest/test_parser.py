"""Tests for build manifest parsing and discovery."""

from collections.abc import Callable
from pathlib import Path

import pytest

from feedpush.core.errors import ManifestError
from feedpush.manifest.models import BlobArtifact, PackageArtifact
from feedpush.manifest.parser import (
    discover_manifests,
    parse_manifest,
    parse_manifest_text,
)


class TestParseManifest:
    """Tests for reading manifest XML."""

    def test_sample_manifest(self, write_manifest: Callable[..., Path]):
        manifest = parse_manifest(write_manifest())

        assert manifest.name == "runtime"
        assert manifest.build_id == "20190321.1"
        assert manifest.attributes["Commit"] == "abc123"
        assert [p.id for p in manifest.packages] == [
            "Microsoft.NETCore.App",
            "Microsoft.NETCore.DotNetHost",
        ]
        assert len(manifest.blobs) == 4
        assert manifest.artifact_count == 6

    def test_artifact_attributes(self, write_manifest: Callable[..., Path]):
        manifest = parse_manifest(write_manifest())

        host = manifest.packages[1]
        assert isinstance(host, PackageArtifact)
        assert host.version == "3.0.0"
        assert host.attributes == {"Version": "3.0.0", "NonShipping": "true"}
        assert host.category is None

        pkg = manifest.blobs[3]
        assert isinstance(pkg, BlobArtifact)
        assert pkg.category == "OSX;Installer"

    def test_container_elements_flattened_in_order(self):
        manifest = parse_manifest_text(
            """<Build>
                 <Packages>
                   <Package Id="A" Version="1" />
                   <Package Id="B" Version="1" />
                 </Packages>
                 <Blobs><Blob Id="c.zip" /></Blobs>
                 <Package Id="D" Version="1" />
               </Build>"""
        )

        assert [p.id for p in manifest.packages] == ["A", "B", "D"]
        assert [b.id for b in manifest.blobs] == ["c.zip"]

    def test_unknown_elements_ignored(self):
        manifest = parse_manifest_text(
            '<Build><SigningInformation /><Blob Id="a.deb" /></Build>'
        )
        assert [b.id for b in manifest.blobs] == ["a.deb"]

    def test_empty_build(self):
        manifest = parse_manifest_text("<Build />")
        assert manifest.packages == []
        assert manifest.blobs == []

    def test_byte_order_mark(self, tmp_path: Path):
        path = tmp_path / "bom.xml"
        path.write_text('<Build><Blob Id="a.msi" /></Build>', encoding="utf-8-sig")

        assert parse_manifest(path).blobs[0].id == "a.msi"

    def test_encoding_from_xml_declaration(self, tmp_path: Path):
        path = tmp_path / "utf16.xml"
        path.write_text(
            '<?xml version="1.0" encoding="utf-16"?>'
            '<Build Name="runtime"><Blob Id="dotnet-sdk.pkg" /></Build>',
            encoding="utf-16",
        )

        manifest = parse_manifest(path)

        assert manifest.name == "runtime"
        assert manifest.blobs[0].id == "dotnet-sdk.pkg"

    def test_undecodable_bytes(self, tmp_path: Path):
        path = tmp_path / "latin1.xml"
        path.write_bytes(b'<Build><Blob Id="caf\xe9.zip" /></Build>')

        with pytest.raises(ManifestError, match="Malformed manifest"):
            parse_manifest(path)

    @pytest.mark.parametrize(
        ("content", "message"),
        [
            ("<Build><Blob></Build>", "Malformed manifest"),
            ("<Assets />", "expected <Build> root"),
            ('<Build><Package Version="1" /></Build>', "<Package> element without Id"),
            ('<Build><Blob Id="  " /></Build>', "<Blob> element without Id"),
            ("", "Malformed manifest"),
        ],
    )
    def test_malformed_manifest(self, content: str, message: str):
        with pytest.raises(ManifestError, match=message):
            parse_manifest_text(content, source="build.xml")

    def test_unreadable_file(self, tmp_path: Path):
        with pytest.raises(ManifestError, match="Cannot read manifest"):
            parse_manifest(tmp_path / "missing.xml")


class TestDiscoverManifests:
    """Tests for resolving the manifest path."""

    def test_file_returned_as_is(self, write_manifest: Callable[..., Path]):
        path = write_manifest()
        assert discover_manifests(path) == [path]

    def test_directory_sorted_and_filtered(self, write_manifest: Callable[..., Path]):
        second = write_manifest(name="b.xml")
        first = write_manifest(name="a.xml")
        write_manifest(name="readme.md")

        assert discover_manifests(first.parent) == [first, second]

    def test_custom_pattern(self, write_manifest: Callable[..., Path]):
        path = write_manifest(name="build.manifest")
        write_manifest(name="other.xml")

        assert discover_manifests(path.parent, "*.manifest") == [path]

    def test_empty_directory(self, tmp_path: Path):
        assert discover_manifests(tmp_path) == []

    def test_missing_path(self, tmp_path: Path):
        with pytest.raises(ManifestError):
            discover_manifests(tmp_path / "missing")
