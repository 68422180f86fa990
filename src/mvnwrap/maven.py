"""
Maven wrapper entry point.

``Maven`` holds a set of options and turns each ``execute`` call into one
Maven process::

    maven = Maven.create(MavenOptions(quiet=True, profiles=("ci",)))
    await maven.execute(["clean", "install"], {"skipTests": "true"})

The returned task resolves to ``None`` when Maven exits with code 0 and
raises ``MavenExecutionError`` otherwise.
"""

import asyncio
import dataclasses
import logging
from pathlib import Path
from typing import Any, List, Mapping, Optional

from .executor.build_process import MavenProcessLauncher
from .models.options import MavenOptions
from .system.commands import Commands, Projects, build_maven_arguments

logger = logging.getLogger(__name__)


class Maven:
    """
    Maven wrapper.

    Options are fixed at construction. Concurrent ``execute`` calls are
    independent: each builds its own argument vector and starts its own
    process.
    """

    def __init__(
        self,
        options: Optional[MavenOptions] = None,
        launcher: Optional[MavenProcessLauncher] = None,
    ):
        """
        Create a new Maven wrapper instance.

        Args:
            options: Wrapper options; a missing ``cwd`` defaults to the
                current working directory at construction time
            launcher: Process launcher, mainly for tests
        """
        options = options or MavenOptions()
        if options.cwd is None:
            options = dataclasses.replace(options, cwd=Path.cwd())
        self._options = options
        self._launcher = launcher or MavenProcessLauncher()

    @classmethod
    def create(cls, options: Optional[MavenOptions] = None) -> "Maven":
        """Create a new Maven wrapper instance."""
        return cls(options)

    @property
    def options(self) -> MavenOptions:
        return self._options

    def arguments(
        self,
        commands: Commands,
        defines: Optional[Mapping[str, Any]] = None,
        projects: Optional[Projects] = None,
    ) -> List[str]:
        """Return the argument vector ``execute`` would pass to Maven."""
        return build_maven_arguments(self._options, commands, defines, projects)

    def command_line(
        self,
        commands: Commands,
        defines: Optional[Mapping[str, Any]] = None,
        projects: Optional[Projects] = None,
    ) -> List[str]:
        """Return the full command line, executable included, without running it."""
        executable = self._launcher.resolve_executable(self._options)
        return self._launcher.build_command_line(
            executable, self.arguments(commands, defines, projects)
        )

    def execute(
        self,
        commands: Commands,
        defines: Optional[Mapping[str, Any]] = None,
        projects: Optional[Projects] = None,
    ) -> "asyncio.Task[None]":
        """
        Execute one or more Maven goals.

        The argument vector is built immediately; the process is started as
        a task on the running event loop.

        Args:
            commands: A single goal or a list of goals
            defines: Properties passed to Maven as ``-Dkey=value``
            projects: Reactor projects to build (``-pl``)

        Returns:
            A task that resolves to ``None`` on success

        Raises:
            RuntimeError: If called without a running event loop
        """
        args = self.arguments(commands, defines, projects)
        loop = asyncio.get_running_loop()
        return loop.create_task(self._launcher.launch(self._options, args))

    def run(
        self,
        commands: Commands,
        defines: Optional[Mapping[str, Any]] = None,
        projects: Optional[Projects] = None,
    ) -> None:
        """Blocking variant of ``execute`` for synchronous callers."""
        args = self.arguments(commands, defines, projects)
        asyncio.run(self._launcher.launch(self._options, args))
