"""Feed configuration loading and input validation.

Problems are collected rather than raised so that a single run reports every
invalid descriptor and missing path at once.
"""

from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path

from requests.structures import CaseInsensitiveDict

from feedpush.config.models import FeedConfig, FeedDescriptor
from feedpush.core.structlog_logger import get_struct_logger


logger = get_struct_logger(__name__)


class FeedConfigSet(Mapping[str, FeedConfig]):
    """Read-only, case-insensitive mapping of category name to feed config.

    Keys are compared after stripping surrounding whitespace, so ``netcore``,
    ``NetCore`` and `` NETCORE `` all address the same feed.
    """

    def __init__(self, configs: Iterable[FeedConfig] = ()) -> None:
        self._configs: CaseInsensitiveDict[FeedConfig] = CaseInsensitiveDict()
        for config in configs:
            key = config.category.strip()
            if key in self._configs:
                raise ValueError(f"Duplicate feed category '{key}'")
            self._configs[key] = config

    def __getitem__(self, category: str) -> FeedConfig:
        return self._configs[category.strip()]

    def __contains__(self, category: object) -> bool:
        return isinstance(category, str) and category.strip() in self._configs

    def __iter__(self) -> Iterator[str]:
        return iter(self._configs)

    def __len__(self) -> int:
        return len(self._configs)

    def __repr__(self) -> str:
        return f"FeedConfigSet({list(self._configs)!r})"


def _describe(descriptor: FeedDescriptor) -> str:
    return (
        f"TargetURL='{descriptor.target_url}' Type='{descriptor.type}' "
        f"Token='{descriptor.masked_token()}'"
    )


def load_feed_configs(
    descriptors: Iterable[FeedDescriptor],
) -> tuple[FeedConfigSet, list[str]]:
    """Validate feed descriptors and build the category lookup.

    Args:
        descriptors: Raw feed entries in the order they were supplied

    Returns:
        Tuple of the valid feed configs and one error message per invalid
        descriptor. Invalid descriptors are not stored.
    """
    configs: list[FeedConfig] = []
    seen: set[str] = set()
    errors: list[str] = []

    for descriptor in descriptors:
        category = descriptor.category.strip()
        if not category:
            errors.append(f"Invalid FeedConfig entry without category. {_describe(descriptor)}")
            continue

        if (
            not descriptor.target_url.strip()
            or not descriptor.type.strip()
            or not descriptor.token.get_secret_value().strip()
        ):
            errors.append(
                f"Invalid FeedConfig entry for category '{category}'. "
                f"{_describe(descriptor)}"
            )
            continue

        if category.upper() in seen:
            errors.append(
                f"Duplicate FeedConfig entry for category '{category}'. "
                "Categories are matched case-insensitively."
            )
            continue

        seen.add(category.upper())
        configs.append(
            FeedConfig(
                category=category,
                target_url=descriptor.target_url,
                type=descriptor.type,
                token=descriptor.token,
            )
        )
        logger.debug(
            "feed_config_loaded",
            category=category,
            target_url=descriptor.target_url,
            feed_type=descriptor.type,
        )

    return FeedConfigSet(configs), errors


def _as_path(value: str | Path | None) -> Path | None:
    """Convert to a Path, treating None and blank strings as missing."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    return Path(value)


def validate_input_paths(
    manifest_path: str | Path | None,
    blob_assets_path: str | Path | None,
    package_assets_path: str | Path | None,
) -> list[str]:
    """Check that every input location exists.

    The manifest path may point to a single manifest or a directory of them.
    Both asset paths must be directories. Empty strings are reported as
    missing rather than read as the current directory.
    """
    errors: list[str] = []

    manifest = _as_path(manifest_path)
    if manifest is None or not manifest.exists():
        errors.append(f"Problem reading asset manifest path from {manifest_path!s}")

    blobs = _as_path(blob_assets_path)
    if blobs is None or not blobs.is_dir():
        errors.append(f"Problem reading blob assets from {blob_assets_path!s}")

    packages = _as_path(package_assets_path)
    if packages is None or not packages.is_dir():
        errors.append(f"Problem reading package assets from {package_assets_path!s}")

    return errors


__all__ = ["FeedConfigSet", "load_feed_configs", "validate_input_paths"]
