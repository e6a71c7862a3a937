"""Helper functions for CLI output formatting with Rich integration."""

import json
from typing import Any

from rich.console import Console

from feedpush.cli.helpers.theme import create_basic_table, get_themed_console
from feedpush.publishing.grouping import ArtifactGroups
from feedpush.publishing.service import PublishResult


def print_publish_result(result: PublishResult, use_emoji: bool = True) -> None:
    """Print publish result with appropriate formatting."""
    console = get_themed_console(use_emoji=use_emoji)

    if not result.success:
        console.print_error("Publishing failed")
        for error in result.errors:
            console.print_list_item(error)
        return

    for message in result.messages:
        console.print_success(message)
    for manifest in result.manifests_published:
        console.print_list_item(f"manifest: {manifest}")
    for category, count in result.categories.items():
        console.print_list_item(f"{category}: {count} artifact(s)")
    for category in result.skipped_categories:
        console.print_warning(f"Skipped category without feed: {category}")


def groups_to_dict(groups: ArtifactGroups) -> dict[str, Any]:
    return {
        "packages": {
            category: [package.id for package in packages]
            for category, packages in groups.packages_by_category.items()
        },
        "blobs": {
            category: [blob.id for blob in blobs]
            for category, blobs in groups.blobs_by_category.items()
        },
    }


def print_groups(groups: ArtifactGroups, output_format: str = "table") -> None:
    """Print category groupings as a Rich table or JSON."""
    if output_format == "json":
        print(json.dumps(groups_to_dict(groups), indent=2))
        return

    table = create_basic_table("Artifacts by category", ["Category", "Kind", "Artifact"])
    for kind, by_category in (
        ("package", groups.packages_by_category),
        ("blob", groups.blobs_by_category),
    ):
        for category, artifacts in by_category.items():
            for artifact in artifacts:
                table.add_row(category, kind, artifact.id)

    Console().print(table)
