"""
Configuration validation utilities.

Turns raw TOML tables into configuration models. Only the shape of the data
is checked; option values are forwarded to Maven as written.
"""

import logging
from pathlib import Path
from typing import Any, Callable, Dict, Optional

from ..models.config import AppConfig, LoggingConfig
from ..models.options import MavenOptions
from ..validation import (
    ValidationError,
    validate_bool,
    validate_enum_choice,
    validate_string,
    validate_string_list,
    validate_thread_count,
)

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

# Accepted spellings in the [maven] table, mapped to MavenOptions fields.
# camelCase spellings are accepted alongside snake_case.
OPTION_ALIASES: Dict[str, str] = {
    "cwd": "cwd",
    "working_directory": "cwd",
    "workingDirectory": "cwd",
    "cmd": "cmd",
    "executable_path": "cmd",
    "executablePath": "cmd",
    "file": "file",
    "pom_file": "file",
    "pomFile": "file",
    "settings": "settings",
    "settings_file": "settings",
    "settingsFile": "settings",
    "profiles": "profiles",
    "quiet": "quiet",
    "debug": "debug",
    "update_snapshots": "update_snapshots",
    "updateSnapshots": "update_snapshots",
    "offline": "offline",
    "non_recursive": "non_recursive",
    "nonRecursive": "non_recursive",
    "threads": "threads",
    "no_transfer_progress": "no_transfer_progress",
    "noTransferProgress": "no_transfer_progress",
    "suppress_transfer_progress": "no_transfer_progress",
    "suppressTransferProgress": "no_transfer_progress",
    "batch_mode": "batch_mode",
    "batchMode": "batch_mode",
    "log_file": "log_file",
    "logFile": "log_file",
    "also_make": "also_make",
    "alsoMake": "also_make",
}

_FIELD_VALIDATORS: Dict[str, Callable[[Any, str], Any]] = {
    "cmd": validate_string,
    "file": validate_string,
    "settings": validate_string,
    "profiles": validate_string_list,
    "quiet": validate_bool,
    "debug": validate_bool,
    "update_snapshots": validate_bool,
    "offline": validate_bool,
    "non_recursive": validate_bool,
    "threads": validate_thread_count,
    "no_transfer_progress": validate_bool,
    "batch_mode": validate_bool,
    "log_file": validate_string,
    "also_make": validate_bool,
}


def _require_table(data: Any, field_name: str) -> None:
    if not isinstance(data, dict):
        raise ValidationError(
            f"'{field_name}' must be a table, got {type(data).__name__}",
            field_name=field_name,
            value=data
        )


def validate_maven_options(maven_data: Dict[str, Any], base_dir: Optional[Path] = None) -> MavenOptions:
    """
    Validate and create MavenOptions from the raw [maven] table.

    Args:
        maven_data: Raw [maven] table from TOML
        base_dir: Directory a relative ``cwd`` is resolved against,
            normally the directory holding the config file

    Returns:
        Validated MavenOptions instance

    Raises:
        ValidationError: On unknown keys, duplicate spellings of one option,
            or values of the wrong type
    """
    _require_table(maven_data, "maven")
    fields: Dict[str, Any] = {}

    for key, value in maven_data.items():
        field_name = OPTION_ALIASES.get(key)
        if field_name is None:
            raise ValidationError(
                f"Unknown option 'maven.{key}'",
                field_name=f"maven.{key}",
                value=value
            )
        if field_name in fields:
            raise ValidationError(
                f"Option 'maven.{key}' is set more than once (as '{field_name}')",
                field_name=f"maven.{key}",
                value=value
            )

        if field_name == "cwd":
            cwd = Path(validate_string(value, f"maven.{key}")).expanduser()
            if base_dir is not None and not cwd.is_absolute():
                cwd = base_dir / cwd
            fields["cwd"] = cwd
        else:
            fields[field_name] = _FIELD_VALIDATORS[field_name](value, f"maven.{key}")

    return MavenOptions(**fields)


def validate_logging_config(logging_data: Dict[str, Any]) -> LoggingConfig:
    """
    Validate and create a LoggingConfig from the raw [logging] table.

    Raises:
        ValidationError: If the level is not a known log level name
    """
    _require_table(logging_data, "logging")
    unknown = set(logging_data) - {"level"}
    if unknown:
        raise ValidationError(
            f"Unknown logging option(s): {', '.join(sorted(unknown))}",
            field_name="logging"
        )
    level = validate_enum_choice(
        logging_data.get("level", "INFO"),
        valid_choices=LOG_LEVELS,
        field_name="logging.level",
        case_sensitive=False,
    )
    return LoggingConfig(level=level)


def validate_app_config(config_data: Dict[str, Any], base_dir: Optional[Path] = None) -> AppConfig:
    """
    Validate a whole configuration file.

    Raises:
        ValidationError: On unknown top-level tables or invalid contents
    """
    _require_table(config_data, "configuration")
    unknown = set(config_data) - {"maven", "logging"}
    if unknown:
        raise ValidationError(
            f"Unknown configuration table(s): {', '.join(sorted(unknown))}"
        )

    app_config = AppConfig(
        maven=validate_maven_options(config_data.get("maven", {}), base_dir),
        logging=validate_logging_config(config_data.get("logging", {})),
    )
    logger.debug(f"Validated configuration: {app_config}")
    return app_config
