"""feedpush - publish build manifest artifacts to category feeds."""

from importlib.metadata import distribution

from .publishing.service import PublishOptions, PublishResult


__version__ = distribution(__package__ or "feedpush").version

__all__ = [
    "PublishOptions",
    "PublishResult",
    "__version__",
]
