"""
Configuration management for the mvnwrap package.

This module provides loading, validation and cached access to the
``mvnwrap.toml`` configuration file.
"""

# Main configuration interface
from .manager import (
    clear_config_cache,
    get_config,
    is_config_loaded,
    load_config,
    set_config_path,
)

# For advanced usage - direct access to loaders and validators
from .loader import DEFAULT_CONFIG_FILE_NAME, load_main_config, load_toml_file
from .validators import (
    OPTION_ALIASES,
    validate_app_config,
    validate_logging_config,
    validate_maven_options,
)

__all__ = [
    # Main interface
    "get_config",
    "load_config",
    "set_config_path",
    "clear_config_cache",
    "is_config_loaded",
    # Advanced interface
    "DEFAULT_CONFIG_FILE_NAME",
    "OPTION_ALIASES",
    "load_toml_file",
    "load_main_config",
    "validate_app_config",
    "validate_logging_config",
    "validate_maven_options",
]
