"""Base result model for feedpush operations."""

from datetime import datetime

from pydantic import Field, model_validator

from feedpush.core.structlog_logger import get_struct_logger
from feedpush.models.base import FeedPushBaseModel


logger = get_struct_logger(__name__)


class BaseResult(FeedPushBaseModel):
    """Base class for all operation results."""

    success: bool
    timestamp: datetime = Field(default_factory=datetime.now)
    messages: list[str] = Field(default_factory=list)
    errors: list[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_success_consistency(self) -> "BaseResult":
        """Ensure success flag is consistent with errors."""
        if self.errors and self.success:
            logger.warning("result_success_mismatch", error_count=len(self.errors))
            # Bypass validate_assignment to avoid re-entering this validator
            object.__setattr__(self, "success", False)
        return self

    def add_message(self, message: str) -> None:
        """Add an informational message."""
        self.messages.append(message)
        logger.info(message)

    def add_error(self, error: str) -> None:
        """Add an error message."""
        self.errors.append(error)
        logger.error(error)
        self.success = False

    def extend_errors(self, errors: list[str]) -> None:
        for error in errors:
            self.add_error(error)

    def is_success(self) -> bool:
        """Check if the operation was successful."""
        return self.success and not self.errors


__all__ = ["BaseResult"]
