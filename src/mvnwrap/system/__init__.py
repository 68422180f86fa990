"""
Command line construction and host platform helpers.

- Ordered Maven argument vectors from wrapper options
- Windows detection and the command interpreter used to launch Maven there
"""

# Command line construction
from .commands import build_maven_arguments, format_define

# Platform detection
from .platform import (
    DEFAULT_COMMAND_PROCESSOR,
    get_command_processor,
    host_is_windows,
    is_windows,
)

__all__ = [
    # Commands
    "build_maven_arguments",
    "format_define",
    # Platform
    "DEFAULT_COMMAND_PROCESSOR",
    "get_command_processor",
    "host_is_windows",
    "is_windows",
]
