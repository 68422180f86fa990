"""
Maven option data model.

This module contains the configuration record held by a ``Maven`` wrapper
instance. Every field is optional; unset fields contribute nothing to the
Maven command line.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple, Union


@dataclass(frozen=True)
class MavenOptions:
    """
    Options for a Maven wrapper instance, immutable after construction.
    """

    # Working directory of the Maven process. Defaults to the caller's cwd.
    cwd: Optional[Path] = None
    # Explicit Maven executable, overriding mvnw discovery and the system mvn.
    cmd: Optional[str] = None
    # POM file (-f).
    file: Optional[str] = None
    # settings.xml (-s).
    settings: Optional[str] = None
    # Profiles to enable or disable (-P), in order.
    profiles: Tuple[str, ...] = ()
    # Only show errors (-q).
    quiet: bool = False
    # Debug output (-X).
    debug: bool = False
    # Force a check for updated snapshots (-U).
    update_snapshots: bool = False
    # Work offline (-o).
    offline: bool = False
    # Do not recurse into sub-projects (-N).
    non_recursive: bool = False
    # Thread count such as 4 or "2.0C" (-T).
    threads: Optional[Union[int, float, str]] = None
    # Suppress transfer progress (-ntp).
    no_transfer_progress: bool = False
    # Non-interactive batch mode (-B).
    batch_mode: bool = False
    # Log file for all build output (-l).
    log_file: Optional[str] = None
    # Also build the projects required by the selected ones (-am).
    also_make: bool = False

    def __post_init__(self):
        # Freeze sequences and normalize paths without giving up frozen=True.
        if isinstance(self.profiles, str):
            object.__setattr__(self, "profiles", (self.profiles,))
        elif not isinstance(self.profiles, tuple):
            object.__setattr__(self, "profiles", tuple(self.profiles or ()))
        if self.cwd is not None and not isinstance(self.cwd, Path):
            object.__setattr__(self, "cwd", Path(self.cwd))
