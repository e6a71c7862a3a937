"""Feed configuration models."""

from enum import Enum
from typing import Any

from pydantic import AliasChoices, ConfigDict, Field, SecretStr, field_validator

from feedpush.models.base import FeedPushBaseModel


class MissingFeedPolicy(str, Enum):
    """What to do with a category that has no configured feed."""

    ERROR = "error"
    SKIP = "skip"


class FeedDescriptor(FeedPushBaseModel):
    """Raw, unvalidated feed entry as supplied by the invoking build tool.

    Field names accept both the snake_case form and the MSBuild item metadata
    names (``TargetURL``, ``Type``, ``Token``).
    """

    model_config = ConfigDict(populate_by_name=True)

    category: str = Field(
        default="", validation_alias=AliasChoices("category", "Category", "ItemSpec")
    )
    target_url: str = Field(
        default="",
        validation_alias=AliasChoices("target_url", "TargetURL", "url"),
    )
    type: str = Field(default="", validation_alias=AliasChoices("type", "Type"))
    token: SecretStr = Field(
        default=SecretStr(""), validation_alias=AliasChoices("token", "Token")
    )

    @field_validator("category", "target_url", "type", mode="before")
    @classmethod
    def none_to_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("token", mode="before")
    @classmethod
    def token_none_to_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    @classmethod
    def from_option(cls, value: str) -> "FeedDescriptor":
        """Parse a ``CATEGORY=URL,TYPE,TOKEN`` command line value.

        Missing parts are left empty so that validation reports them.
        """
        category, _, rest = value.partition("=")
        parts = rest.split(",", 2) if rest else []
        parts += [""] * (3 - len(parts))
        return cls(category=category, target_url=parts[0], type=parts[1], token=parts[2])

    def masked_token(self) -> str:
        return "***" if self.token.get_secret_value() else ""


class FeedConfig(FeedPushBaseModel):
    """Validated target feed endpoint for one artifact category."""

    model_config = ConfigDict(frozen=True, validate_assignment=False)

    category: str = Field(min_length=1)
    target_url: str = Field(min_length=1)
    type: str = Field(min_length=1)
    token: SecretStr

    @field_validator("token")
    @classmethod
    def validate_token(cls, v: SecretStr) -> SecretStr:
        if not v.get_secret_value().strip():
            raise ValueError("Token must not be empty")
        return v


__all__ = ["FeedConfig", "FeedDescriptor", "MissingFeedPolicy"]
