"""Decorators for CLI commands."""

from feedpush.cli.decorators.error_handling import handle_errors


__all__ = ["handle_errors"]
