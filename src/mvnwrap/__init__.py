"""
mvnwrap: run Maven from Python.

This package turns a set of Maven options into a Maven command line and runs
it as an asyncio subprocess with its output passed straight through.

The package is organized into specialized modules:
- models: Maven options, application configuration and build outcomes
- system: Maven argument construction and platform detection
- executor: Executable resolution and process lifecycle
- config: TOML configuration loading and validation
- validation: Exceptions, error handling and shape validators
- cli: Command-line interface

Usage:
    From command line:
        mvnwrap -q -P ci clean install

    Programmatically:
        from mvnwrap import Maven, MavenOptions
        maven = Maven.create(MavenOptions(quiet=True))
        await maven.execute(["clean", "install"], {"skipTests": "true"})
"""

# Main interfaces
from .maven import Maven
from .config import get_config, clear_config_cache, set_config_path
from .cli import main_cli

# Model classes for external use
from .models import (
    AppConfig,
    BuildFailure,
    BuildOutcome,
    BuildSuccess,
    LoggingConfig,
    MavenOptions,
)

# Errors
from .validation import MavenError, MavenExecutionError, ValidationError

# Lower level building blocks
from .executor import FileProbe, MavenProcessLauncher, resolve_executable
from .system import build_maven_arguments, is_windows

__version__ = "1.0.0"

__all__ = [
    # Main interfaces
    "Maven",
    "get_config",
    "clear_config_cache",
    "set_config_path",
    "main_cli",
    # Models
    "AppConfig",
    "BuildFailure",
    "BuildOutcome",
    "BuildSuccess",
    "LoggingConfig",
    "MavenOptions",
    # Errors
    "MavenError",
    "MavenExecutionError",
    "ValidationError",
    # Building blocks
    "FileProbe",
    "MavenProcessLauncher",
    "resolve_executable",
    "build_maven_arguments",
    "is_windows",
]
