"""Exception hierarchy for feedpush."""


class FeedPushError(Exception):
    """Base exception for all feedpush errors."""


class ConfigError(FeedPushError):
    """Raised when feed descriptors or settings are invalid."""


class ManifestError(FeedPushError):
    """Raised when a build manifest is missing or cannot be parsed."""


class PublishError(FeedPushError):
    """Raised when artifacts cannot be routed or handed to a publisher."""


__all__ = ["ConfigError", "FeedPushError", "ManifestError", "PublishError"]
