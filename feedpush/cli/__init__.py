"""Command-line interface for feedpush."""

from feedpush.cli.app import app, main


__all__ = ["app", "main"]
