"""Shared models for feedpush."""

from .base import FeedPushBaseModel
from .results import BaseResult


__all__ = ["BaseResult", "FeedPushBaseModel"]
