"""
Configuration management and singleton pattern.

This module provides the main configuration loading and management interface,
caching the loaded configuration so the file is read only once.
"""

import logging
from pathlib import Path
from typing import Optional

from ..models.config import AppConfig
from ..validation import handle_config_error, ErrorSeverity
from .loader import DEFAULT_CONFIG_FILE_NAME, load_main_config
from .validators import validate_app_config

logger = logging.getLogger(__name__)

# --- Global Singleton for Configuration ---

_CONFIG: Optional[AppConfig] = None

# None means "mvnwrap.toml in the current directory, if present".
_CONFIG_FILE_PATH: Optional[Path] = None


def set_config_path(config_path: Optional[Path]) -> None:
    """
    Set a custom configuration file path.

    An explicitly set file must exist when the configuration is loaded.
    Passing None restores the default lookup.

    Args:
        config_path: Path to a mvnwrap.toml file
    """
    global _CONFIG_FILE_PATH, _CONFIG
    _CONFIG_FILE_PATH = Path(config_path) if config_path is not None else None
    _CONFIG = None
    logger.info(f"Configuration path set to: {config_path}")


def clear_config_cache() -> None:
    """Clear the cached configuration, forcing a reload on next access."""
    global _CONFIG
    _CONFIG = None
    logger.debug("Configuration cache cleared")


def load_config(config_path: Path) -> AppConfig:
    """
    Load and validate a configuration file.

    Args:
        config_path: Path to the TOML file

    Returns:
        Validated AppConfig instance

    Raises:
        FileNotFoundError: If the file is missing
        ValidationError: If the file content has the wrong shape
        tomllib.TOMLDecodeError: If the file is malformed
    """
    try:
        config_data = load_main_config(config_path)
        app_config = validate_app_config(config_data, base_dir=config_path.parent.resolve())
        logger.info(f"Successfully loaded configuration from {config_path}")
        return app_config
    except FileNotFoundError as e:
        handle_config_error(
            error=e,
            context="loading configuration file",
            severity=ErrorSeverity.CRITICAL,
            reraise=True,
            logger=logger
        )
        raise
    except Exception as e:
        handle_config_error(
            error=e,
            context="processing configuration",
            severity=ErrorSeverity.CRITICAL,
            reraise=True,
            logger=logger
        )
        raise


def get_config() -> AppConfig:
    """
    Get the application configuration, loading it if necessary.

    Without an explicit path, ``mvnwrap.toml`` in the current directory is
    used when it exists and built-in defaults otherwise.

    Returns:
        The cached AppConfig instance
    """
    global _CONFIG
    if _CONFIG is None:
        if _CONFIG_FILE_PATH is not None:
            _CONFIG = load_config(_CONFIG_FILE_PATH)
        else:
            default_path = Path.cwd() / DEFAULT_CONFIG_FILE_NAME
            if default_path.is_file():
                _CONFIG = load_config(default_path)
            else:
                logger.debug(f"No {DEFAULT_CONFIG_FILE_NAME} found, using defaults")
                _CONFIG = AppConfig()
    return _CONFIG


def is_config_loaded() -> bool:
    """Check if configuration has been loaded and cached."""
    return _CONFIG is not None
