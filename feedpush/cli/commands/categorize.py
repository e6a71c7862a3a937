"""Categorization commands for feedpush CLI."""

from pathlib import Path
from typing import Annotated

import typer

from feedpush.cli.decorators import handle_errors
from feedpush.cli.helpers import print_groups
from feedpush.manifest.parser import parse_manifest
from feedpush.publishing.categories import infer_category
from feedpush.publishing.grouping import ArtifactGroups


@handle_errors
def categorize_command(
    manifest: Annotated[
        Path,
        typer.Argument(help="Build manifest to categorize", exists=True, dir_okay=False),
    ],
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: table or json"),
    ] = "table",
) -> None:
    """Show which category group each artifact of a manifest falls into."""
    groups = ArtifactGroups.from_manifest(parse_manifest(manifest))
    print_groups(groups, output_format=output_format)


def infer_command(
    names: Annotated[list[str], typer.Argument(help="Artifact file names")],
) -> None:
    """Show the category inferred from each artifact file name."""
    for name in names:
        typer.echo(f"{name}\t{infer_category(name)}")


def register_commands(app: typer.Typer) -> None:
    """Register categorization commands with the main app.

    Args:
        app: The main Typer app
    """
    app.command(name="categorize")(categorize_command)
    app.command(name="infer")(infer_command)
