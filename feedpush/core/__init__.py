from .errors import ConfigError, FeedPushError, ManifestError, PublishError
from .logging import setup_logging


__all__ = [
    "setup_logging",
    "FeedPushError",
    "ConfigError",
    "ManifestError",
    "PublishError",
]
