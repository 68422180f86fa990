"""
Host platform detection.

Windows cannot launch ``mvn``/``mvnw`` batch scripts directly, so the launcher
routes them through the command interpreter there. Detection is a pure
function of a platform identifier so other platforms can be simulated in
tests; ``host_is_windows`` caches the answer for the running interpreter.
"""

import functools
import os
import sys
from typing import Mapping, Optional

# Used when COMSPEC is not set.
DEFAULT_COMMAND_PROCESSOR = "cmd.exe"


def is_windows(platform_id: str) -> bool:
    """Return True for Windows platform identifiers such as ``win32``."""
    return platform_id.startswith("win")


@functools.lru_cache(maxsize=None)
def host_is_windows() -> bool:
    """Whether the running interpreter is on Windows."""
    return is_windows(sys.platform)


def get_command_processor(environ: Optional[Mapping[str, str]] = None) -> str:
    """Return the Windows command interpreter named by ``COMSPEC``."""
    if environ is None:
        environ = os.environ
    return environ.get("COMSPEC") or DEFAULT_COMMAND_PROCESSOR
