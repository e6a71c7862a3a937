"""Protocol definitions for feedpush collaborators."""

from .publisher_protocol import PublisherProtocol


__all__ = ["PublisherProtocol"]
