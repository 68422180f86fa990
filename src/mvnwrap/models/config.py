"""
Application configuration data models.

The root configuration object loaded from ``mvnwrap.toml``.
"""

from dataclasses import dataclass, field

from .options import MavenOptions


@dataclass
class LoggingConfig:
    """
    Logging settings, loaded from the ``[logging]`` table.
    """

    # Name of the root log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    level: str = "INFO"


@dataclass
class AppConfig:
    """
    The root configuration object that aggregates all loaded settings.
    """

    # Options for the Maven wrapper, from the [maven] table.
    maven: MavenOptions = field(default_factory=MavenOptions)
    # Logging settings, from the [logging] table.
    logging: LoggingConfig = field(default_factory=LoggingConfig)
