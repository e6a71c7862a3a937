"""CLI command modules."""

import typer

from feedpush.cli.commands.categorize import (
    register_commands as register_categorize_commands,
)
from feedpush.cli.commands.publish import register_commands as register_publish_commands


def register_all_commands(app: typer.Typer) -> None:
    """Register all CLI commands with the main app.

    Args:
        app: The main Typer app
    """
    if app.registered_commands:
        return
    register_publish_commands(app)
    register_categorize_commands(app)
