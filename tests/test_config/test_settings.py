"""Tests for settings loading from YAML files and the environment."""

from pathlib import Path

import pytest
import yaml

from feedpush.config.models import MissingFeedPolicy
from feedpush.config.settings import (
    PublishSettings,
    load_feed_descriptors_file,
    load_settings,
)
from feedpush.core.errors import ConfigError


class TestLoadSettings:
    """Tests for settings file discovery and precedence."""

    def test_defaults_without_files(self, clean_environment: Path):
        settings = load_settings()

        assert settings.log_level == "WARNING"
        assert settings.missing_feed_policy == MissingFeedPolicy.ERROR
        assert settings.manifest_glob == "*.xml"
        assert settings.feeds == []

    def test_cli_config_file(self, clean_environment: Path):
        config_file = clean_environment / "custom.yaml"
        config_file.write_text(
            yaml.dump(
                {
                    "log_level": "debug",
                    "missing_feed_policy": "skip",
                    "bar_build_id": 17,
                    "feeds": [
                        {
                            "category": "NetCore",
                            "target_url": "https://x",
                            "type": "AzDoNugetFeed",
                            "token": "t",
                        }
                    ],
                }
            )
        )

        settings = load_settings(config_file)

        assert settings.log_level == "DEBUG"
        assert settings.missing_feed_policy == MissingFeedPolicy.SKIP
        assert settings.bar_build_id == 17
        assert settings.feeds[0].category == "NetCore"

    def test_current_directory_config(self, clean_environment: Path):
        (clean_environment / "feedpush.yaml").write_text("manifest_glob: '*.manifest'\n")

        assert load_settings().manifest_glob == "*.manifest"

    def test_xdg_config(self, clean_environment: Path):
        xdg = clean_environment / "xdg" / "feedpush"
        xdg.mkdir(parents=True)
        (xdg / "config.yaml").write_text("log_level: INFO\n")

        assert load_settings().log_level == "INFO"

    def test_environment_overrides_file(
        self, clean_environment: Path, monkeypatch: pytest.MonkeyPatch
    ):
        (clean_environment / "feedpush.yaml").write_text("log_level: INFO\n")
        monkeypatch.setenv("FEEDPUSH_LOG_LEVEL", "ERROR")

        assert load_settings().log_level == "ERROR"

    def test_missing_cli_config_file(self, clean_environment: Path):
        with pytest.raises(ConfigError, match="Config file not found"):
            load_settings(clean_environment / "nope.yaml")

    def test_invalid_yaml(self, clean_environment: Path):
        config_file = clean_environment / "bad.yaml"
        config_file.write_text("feeds: [unclosed\n")

        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_settings(config_file)

    def test_invalid_value(self, clean_environment: Path):
        config_file = clean_environment / "bad.yaml"
        config_file.write_text("log_level: LOUD\n")

        with pytest.raises(ConfigError, match="Invalid settings"):
            load_settings(config_file)

    def test_non_mapping_file(self, clean_environment: Path):
        config_file = clean_environment / "list.yaml"
        config_file.write_text("- a\n- b\n")

        with pytest.raises(ConfigError, match="must contain a mapping"):
            load_settings(config_file)

    def test_build_id_must_not_be_negative(self, clean_environment: Path):
        with pytest.raises(ValueError):
            PublishSettings(bar_build_id=-1)


class TestLoadFeedDescriptorsFile:
    """Tests for reading feed descriptor files."""

    def test_mapping_with_feeds_key(self, feeds_file: Path):
        descriptors = load_feed_descriptors_file(feeds_file)

        assert [d.category for d in descriptors][:2] == ["NetCore", "BinaryLayout"]

    def test_plain_list(self, tmp_path: Path):
        path = tmp_path / "feeds.yaml"
        path.write_text(
            "- {TargetURL: 'https://x', Type: AzureStorageFeed, Token: t, Category: OSX}\n"
        )

        descriptors = load_feed_descriptors_file(path)

        assert descriptors[0].category == "OSX"
        assert descriptors[0].target_url == "https://x"

    def test_incomplete_entries_are_loaded_for_later_validation(self, tmp_path: Path):
        path = tmp_path / "feeds.yaml"
        path.write_text("feeds:\n  - category: OSX\n")

        descriptors = load_feed_descriptors_file(path)

        assert descriptors[0].target_url == ""

    def test_empty_file(self, tmp_path: Path):
        path = tmp_path / "feeds.yaml"
        path.write_text("")

        assert load_feed_descriptors_file(path) == []

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(ConfigError, match="Feeds file not found"):
            load_feed_descriptors_file(tmp_path / "feeds.yaml")

    def test_wrong_shape(self, tmp_path: Path):
        path = tmp_path / "feeds.yaml"
        path.write_text("feeds: just-a-string\n")

        with pytest.raises(ConfigError, match="must contain a list"):
            load_feed_descriptors_file(path)
