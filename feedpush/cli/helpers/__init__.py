"""CLI helper functions."""

from feedpush.cli.helpers.output import print_groups, print_publish_result


__all__ = ["print_groups", "print_publish_result"]
