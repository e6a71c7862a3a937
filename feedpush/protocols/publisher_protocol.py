"""Protocol definitions for feed publishers."""

from typing import TYPE_CHECKING, Protocol, runtime_checkable


if TYPE_CHECKING:
    from feedpush.publishing.publishers import PublishRequest


@runtime_checkable
class PublisherProtocol(Protocol):
    """Pushes the grouped artifacts of one manifest to their feeds."""

    def publish(self, request: "PublishRequest") -> None:
        """Publish every category group in the request to its feed.

        Raises:
            PublishError: If any group cannot be published
        """
        ...
