"""
Unit tests for configuration validation functionality.

Tests the conversion of raw TOML tables into MavenOptions and LoggingConfig,
including alias handling and shape errors.
"""

from pathlib import Path

import pytest

from mvnwrap.config.validators import (
    validate_app_config,
    validate_logging_config,
    validate_maven_options,
)
from mvnwrap.models import MavenOptions
from mvnwrap.validation import ValidationError


@pytest.mark.unit
class TestMavenOptionsValidation:
    """Test cases for the [maven] table."""

    def test_validate_sample_config(self, sample_maven_config):
        options = validate_maven_options(sample_maven_config)

        assert options.file == "pom.xml"
        assert options.settings == "settings.xml"
        assert options.profiles == ("ci", "release")
        assert options.quiet is True
        assert options.batch_mode is True
        assert options.threads == "1C"
        assert options.debug is False

    def test_empty_table_gives_defaults(self):
        assert validate_maven_options({}) == MavenOptions()

    @pytest.mark.parametrize(
        "key, field",
        [
            ("pomFile", "file"),
            ("pom_file", "file"),
            ("settingsFile", "settings"),
            ("executablePath", "cmd"),
            ("logFile", "log_file"),
        ],
    )
    def test_string_aliases(self, key, field):
        options = validate_maven_options({key: "value"})
        assert getattr(options, field) == "value"

    @pytest.mark.parametrize(
        "key, field",
        [
            ("updateSnapshots", "update_snapshots"),
            ("nonRecursive", "non_recursive"),
            ("noTransferProgress", "no_transfer_progress"),
            ("suppressTransferProgress", "no_transfer_progress"),
            ("batchMode", "batch_mode"),
            ("alsoMake", "also_make"),
        ],
    )
    def test_boolean_aliases(self, key, field):
        options = validate_maven_options({key: True})
        assert getattr(options, field) is True

    def test_relative_cwd_resolved_against_base_dir(self, temp_dir):
        options = validate_maven_options({"cwd": "project"}, base_dir=temp_dir)
        assert options.cwd == temp_dir / "project"

    def test_absolute_cwd_kept(self, temp_dir):
        options = validate_maven_options({"workingDirectory": str(temp_dir)}, base_dir=Path("/elsewhere"))
        assert options.cwd == temp_dir

    def test_single_profile_string(self):
        assert validate_maven_options({"profiles": "ci"}).profiles == ("ci",)

    def test_unknown_key(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_maven_options({"quite": True})

        assert exc_info.value.field_name == "maven.quite"

    def test_duplicate_spelling(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_maven_options({"batchMode": True, "batch_mode": False})

        assert "more than once" in str(exc_info.value)

    def test_boolean_shape(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_maven_options({"quiet": "yes"})

        assert "boolean" in str(exc_info.value)

    def test_profiles_shape(self):
        with pytest.raises(ValidationError):
            validate_maven_options({"profiles": ["ci", 3]})

    def test_threads_shape(self):
        with pytest.raises(ValidationError):
            validate_maven_options({"threads": True})

    def test_maven_not_a_table(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_maven_options("oops")

        assert exc_info.value.field_name == "maven"
        assert "must be a table" in str(exc_info.value)

    def test_threads_values_not_range_checked(self):
        assert validate_maven_options({"threads": -1}).threads == -1
        assert validate_maven_options({"threads": 2.5}).threads == 2.5


@pytest.mark.unit
class TestLoggingValidation:
    """Test cases for the [logging] table."""

    def test_default_level(self):
        assert validate_logging_config({}).level == "INFO"

    def test_level_case_insensitive(self):
        assert validate_logging_config({"level": "debug"}).level == "DEBUG"

    def test_invalid_level(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_logging_config({"level": "verbose"})

        assert "logging.level" in str(exc_info.value)

    def test_unknown_logging_key(self):
        with pytest.raises(ValidationError):
            validate_logging_config({"format": "%(message)s"})

    def test_logging_not_a_table(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_logging_config("x")

        assert exc_info.value.field_name == "logging"


@pytest.mark.unit
class TestAppConfigValidation:

    def test_full_config(self, sample_maven_config):
        config = validate_app_config({"maven": sample_maven_config, "logging": {"level": "WARNING"}})

        assert config.maven.quiet is True
        assert config.logging.level == "WARNING"

    def test_unknown_table(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_app_config({"gradle": {}})

        assert "gradle" in str(exc_info.value)

    def test_table_given_as_plain_value(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_app_config({"maven": "oops"})

        assert exc_info.value.field_name == "maven"
