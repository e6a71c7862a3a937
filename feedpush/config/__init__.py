"""Feed configuration and settings for feedpush."""

from .feeds import FeedConfigSet, load_feed_configs, validate_input_paths
from .models import FeedConfig, FeedDescriptor, MissingFeedPolicy
from .settings import PublishSettings, load_feed_descriptors_file, load_settings


__all__ = [
    "FeedConfig",
    "FeedConfigSet",
    "FeedDescriptor",
    "MissingFeedPolicy",
    "PublishSettings",
    "load_feed_configs",
    "load_feed_descriptors_file",
    "load_settings",
    "validate_input_paths",
]
