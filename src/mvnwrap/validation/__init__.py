"""
Validation and error handling for the mvnwrap package.

This module provides the exception taxonomy, logging-aware error handlers
and the shape validators used when reading configuration files.
"""

from .exceptions import (
    ErrorSeverity,
    MavenError,
    MavenExecutionError,
    ValidationError,
    handle_error,
    handle_config_error,
    handle_subprocess_error,
    handle_cli_error,
)

from .validators import (
    parse_comma_list,
    validate_bool,
    validate_define,
    validate_enum_choice,
    validate_string,
    validate_string_list,
    validate_thread_count,
)

__all__ = [
    # Exceptions
    "ErrorSeverity",
    "MavenError",
    "MavenExecutionError",
    "ValidationError",
    "handle_error",
    "handle_config_error",
    "handle_subprocess_error",
    "handle_cli_error",
    # Validators
    "parse_comma_list",
    "validate_bool",
    "validate_define",
    "validate_enum_choice",
    "validate_string",
    "validate_string_list",
    "validate_thread_count",
]
