"""
Settings management for feedpush.

Settings are loaded from multiple sources:
1. Environment variables (highest precedence)
2. Command-line provided config file
3. Config file in current directory
4. User's XDG config directory
5. Default values (lowest precedence)
"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, SecretStr, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from feedpush.config.models import FeedDescriptor, MissingFeedPolicy
from feedpush.core.errors import ConfigError
from feedpush.core.structlog_logger import get_struct_logger


logger = get_struct_logger(__name__)

ENV_PREFIX = "FEEDPUSH_"


class PublishSettings(BaseSettings):
    """Publishing settings with automatic environment variable support.

    Precedence order (highest to lowest):
    1. Environment variables
    2. Constructor arguments (file data)
    3. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: Any,
        env_settings: Any,
        dotenv_settings: Any,
        file_secret_settings: Any,
    ) -> tuple[Any, ...]:
        """Environment variables override values read from the config file."""
        return (env_settings, init_settings, dotenv_settings, file_secret_settings)

    log_level: str = "WARNING"

    missing_feed_policy: MissingFeedPolicy = Field(
        default=MissingFeedPolicy.ERROR,
        description="Fail the run or skip categories that have no configured feed",
    )

    manifest_glob: str = Field(
        default="*.xml",
        description="Pattern used to find manifests when given a directory",
    )

    maestro_api_endpoint: str | None = None
    build_asset_registry_token: SecretStr | None = None
    bar_build_id: int | None = Field(default=None, ge=0)

    feeds: list[FeedDescriptor] = Field(default_factory=list)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is recognized."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        upper_v = v.strip().upper()
        if upper_v not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}")
        return upper_v


def _config_search_paths(cli_config_path: str | Path | None) -> list[Path]:
    config_paths: list[Path] = []

    if cli_config_path:
        config_paths.append(Path(cli_config_path).expanduser().resolve())

    config_paths.extend([Path.cwd() / "feedpush.yaml", Path.cwd() / ".feedpush.yml"])

    xdg_config_home = os.environ.get("XDG_CONFIG_HOME")
    config_root = (
        Path(xdg_config_home) if xdg_config_home else Path.home() / ".config"
    )
    config_paths.append(config_root / "feedpush" / "config.yaml")

    return config_paths


def _read_yaml(path: Path) -> Any:
    try:
        with path.open(encoding="utf-8") as f:
            return yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e


def load_settings(cli_config_path: str | Path | None = None) -> PublishSettings:
    """Load settings from the first config file found plus the environment.

    Args:
        cli_config_path: Optional config file path provided via CLI. When given
            it must exist.

    Raises:
        ConfigError: If the config file is unreadable or fails validation
    """
    if cli_config_path and not Path(cli_config_path).expanduser().exists():
        raise ConfigError(f"Config file not found: {cli_config_path}")

    config_data: dict[str, Any] = {}
    for path in _config_search_paths(cli_config_path):
        if path.is_file():
            data = _read_yaml(path) or {}
            if not isinstance(data, dict):
                raise ConfigError(f"Config file {path} must contain a mapping")
            config_data = data
            logger.debug("settings_file_loaded", path=str(path))
            break
    else:
        logger.debug("settings_file_not_found", using="defaults and environment")

    try:
        return PublishSettings(**config_data)
    except ValidationError as e:
        raise ConfigError(f"Invalid settings: {e}") from e


def load_feed_descriptors_file(path: Path) -> list[FeedDescriptor]:
    """Read feed descriptors from a YAML file.

    The file holds either a list of descriptors or a mapping with a
    ``feeds`` key.
    """
    if not path.is_file():
        raise ConfigError(f"Feeds file not found: {path}")

    data = _read_yaml(path)
    if isinstance(data, dict):
        data = data.get("feeds")
    if data is None:
        return []
    if not isinstance(data, list):
        raise ConfigError(f"Feeds file {path} must contain a list of feeds")

    try:
        return [FeedDescriptor.model_validate(entry) for entry in data]
    except ValidationError as e:
        raise ConfigError(f"Invalid feed entry in {path}: {e}") from e


__all__ = ["PublishSettings", "load_feed_descriptors_file", "load_settings"]
