"""
Data models for the Maven wrapper.

Configuration Models:
- Maven options held by a wrapper instance
- Application configuration loaded from TOML

Result Models:
- The tagged outcome of a single Maven invocation
"""

# Configuration models
from .config import AppConfig, LoggingConfig
from .options import MavenOptions

# Result models
from .results import BuildFailure, BuildOutcome, BuildSuccess

__all__ = [
    # Configuration
    "AppConfig",
    "LoggingConfig",
    "MavenOptions",
    # Results
    "BuildFailure",
    "BuildOutcome",
    "BuildSuccess",
]
