"""Base model for all feedpush Pydantic models."""

from pydantic import BaseModel, ConfigDict


class FeedPushBaseModel(BaseModel):
    """Base model class for all feedpush Pydantic models.

    Surrounding whitespace is stripped from strings, enum fields hold their
    values, and assignments after construction are validated.
    """

    model_config = ConfigDict(
        str_strip_whitespace=True,
        use_enum_values=True,
        validate_assignment=True,
    )
