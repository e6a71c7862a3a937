"""Build manifest loading.

Manifests are the XML documents written by the build's asset publishing step::

    <Build Name="runtime" BuildId="20190321.1">
      <Package Id="Microsoft.NETCore.App" Version="3.0.0" />
      <Blob Id="assets/dotnet-runtime-3.0.0-linux-x64.tar.gz" Category="BinaryLayout" />
    </Build>

``Package`` and ``Blob`` elements may also be grouped under ``Packages`` and
``Blobs`` container elements.
"""

import xml.etree.ElementTree as ET
from pathlib import Path

from pydantic import ValidationError

from feedpush.core.errors import ManifestError
from feedpush.core.structlog_logger import get_struct_logger
from feedpush.manifest.models import BlobArtifact, BuildManifest, PackageArtifact


logger = get_struct_logger(__name__)

ROOT_ELEMENT = "Build"
PACKAGE_ELEMENT = "Package"
BLOB_ELEMENT = "Blob"
CONTAINER_ELEMENTS = {"Packages", "Blobs"}


def _artifact_elements(root: ET.Element) -> list[ET.Element]:
    """Return artifact elements in document order, flattening containers."""
    elements: list[ET.Element] = []
    for child in root:
        if child.tag in CONTAINER_ELEMENTS:
            elements.extend(
                grandchild
                for grandchild in child
                if grandchild.tag in (PACKAGE_ELEMENT, BLOB_ELEMENT)
            )
        elif child.tag in (PACKAGE_ELEMENT, BLOB_ELEMENT):
            elements.append(child)
    return elements


def parse_manifest_text(text: str | bytes, source: str = "<string>") -> BuildManifest:
    """Parse manifest XML content.

    Bytes are decoded by the XML parser, honouring a byte order mark or the
    encoding named in the XML declaration.

    Raises:
        ManifestError: If the XML is malformed or an artifact has no Id
    """
    try:
        root = ET.fromstring(text)
    except (ET.ParseError, ValueError) as e:
        raise ManifestError(f"Malformed manifest {source}: {e}") from e

    if root.tag != ROOT_ELEMENT:
        raise ManifestError(
            f"Malformed manifest {source}: expected <{ROOT_ELEMENT}> root, "
            f"found <{root.tag}>"
        )

    manifest = BuildManifest(
        name=root.get("Name"),
        build_id=root.get("BuildId"),
        attributes=dict(root.attrib),
    )

    for element in _artifact_elements(root):
        attributes = dict(element.attrib)
        artifact_id = attributes.pop("Id", "").strip()
        if not artifact_id:
            raise ManifestError(
                f"Malformed manifest {source}: <{element.tag}> element without Id"
            )

        try:
            if element.tag == PACKAGE_ELEMENT:
                manifest.packages.append(
                    PackageArtifact(id=artifact_id, attributes=attributes)
                )
            else:
                manifest.blobs.append(BlobArtifact(id=artifact_id, attributes=attributes))
        except ValidationError as e:
            raise ManifestError(f"Malformed manifest {source}: {e}") from e

    logger.debug(
        "manifest_parsed",
        source=source,
        packages=len(manifest.packages),
        blobs=len(manifest.blobs),
    )
    return manifest


def parse_manifest(path: Path) -> BuildManifest:
    """Load a build manifest from disk.

    Args:
        path: Path to the manifest XML file

    Returns:
        BuildManifest with packages and blobs in manifest order

    Raises:
        ManifestError: If the file cannot be read or parsed
    """
    try:
        content = path.read_bytes()
    except OSError as e:
        raise ManifestError(f"Cannot read manifest {path}: {e}") from e

    return parse_manifest_text(content, source=str(path))


def discover_manifests(path: Path, pattern: str = "*.xml") -> list[Path]:
    """Resolve a manifest path into the list of manifests to publish.

    A file is returned as-is; a directory yields its files matching
    ``pattern`` in sorted order.

    Raises:
        ManifestError: If the path does not exist
    """
    if path.is_file():
        return [path]
    if path.is_dir():
        return sorted(p for p in path.glob(pattern) if p.is_file())
    raise ManifestError(f"Problem reading asset manifest path from {path}")


__all__ = ["discover_manifests", "parse_manifest", "parse_manifest_text"]
