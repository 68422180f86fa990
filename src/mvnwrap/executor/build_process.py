"""
Asynchronous Maven process launcher.

This module resolves which Maven executable to run, launches it with the
caller's standard streams passed through, and reports the terminal outcome
of the process. There are no retries, timeouts or cancellation: a launched
process runs until it exits on its own.
"""

import asyncio
import logging
import os
import shlex
import signal
from pathlib import Path
from typing import List, Mapping, Optional, Protocol, Sequence

from ..models.options import MavenOptions
from ..models.results import BuildFailure, BuildOutcome, BuildSuccess
from ..system.platform import get_command_processor, host_is_windows, is_windows
from ..validation import handle_subprocess_error, ErrorSeverity

logger = logging.getLogger(__name__)

# Wrapper script looked up at the root of the working directory.
MAVEN_WRAPPER_NAME = "mvnw"
# Maven executable looked up on PATH when there is no wrapper script.
SYSTEM_MAVEN_NAME = "mvn"


class FileProbe(Protocol):
    """Filesystem capability used to look for the Maven wrapper script."""

    def exists(self, path: Path) -> bool:
        """Return True if ``path`` is an existing, readable file."""
        ...


class LocalFileProbe:
    """``FileProbe`` backed by the local filesystem."""

    def exists(self, path: Path) -> bool:
        return os.path.isfile(path) and os.access(path, os.R_OK)


DEFAULT_FILE_PROBE = LocalFileProbe()


def resolve_executable(options: MavenOptions, file_probe: FileProbe = DEFAULT_FILE_PROBE) -> str:
    """
    Pick the Maven executable for a set of options.

    Priority: the explicit ``cmd`` option, then ``mvnw`` at the root of the
    working directory, then ``mvn`` from PATH.

    Args:
        options: Wrapper options; ``cwd`` falls back to the current directory
        file_probe: Filesystem capability used to detect the wrapper script

    Returns:
        The executable name or path
    """
    if options.cmd:
        logger.debug(f"Using explicit Maven executable: {options.cmd}")
        return options.cmd

    cwd = Path(options.cwd) if options.cwd is not None else Path.cwd()
    wrapper = (cwd / MAVEN_WRAPPER_NAME).resolve()
    if file_probe.exists(wrapper):
        logger.debug(f"Using Maven wrapper script: {wrapper}")
        return str(wrapper)

    logger.debug(f"No Maven wrapper in {cwd}, using '{SYSTEM_MAVEN_NAME}'")
    return SYSTEM_MAVEN_NAME


def outcome_from_returncode(returncode: int) -> BuildOutcome:
    """
    Convert a process return code into a build outcome.

    asyncio reports death by signal N as return code -N on POSIX.
    """
    if returncode == 0:
        return BuildSuccess()
    if returncode < 0:
        try:
            signal_name = signal.Signals(-returncode).name
        except ValueError:
            signal_name = str(-returncode)
        return BuildFailure(exit_code=None, signal=signal_name)
    return BuildFailure(exit_code=returncode, signal=None)


class MavenProcessLauncher:
    """
    Launches Maven processes and reports their outcome.

    The launcher holds no per-run state, so one instance can serve any
    number of concurrent invocations.
    """

    def __init__(
        self,
        platform_id: Optional[str] = None,
        environ: Optional[Mapping[str, str]] = None,
        file_probe: FileProbe = DEFAULT_FILE_PROBE,
    ):
        """
        Initialize the launcher.

        Args:
            platform_id: Platform identifier such as ``win32``; the host
                platform is used when omitted
            environ: Environment used to look up ``COMSPEC`` on Windows,
                defaults to ``os.environ``
            file_probe: Filesystem capability used to detect ``mvnw``
        """
        self.platform_id = platform_id
        self.environ = environ if environ is not None else os.environ
        self.file_probe = file_probe

    @property
    def is_windows(self) -> bool:
        if self.platform_id is None:
            return host_is_windows()
        return is_windows(self.platform_id)

    def resolve_executable(self, options: MavenOptions) -> str:
        """Resolve the Maven executable for ``options``."""
        return resolve_executable(options, self.file_probe)

    def build_command_line(self, executable: str, args: Sequence[str]) -> List[str]:
        """
        Prefix the argument vector with the program to start.

        On Windows Maven is a batch script, so it is run as
        ``<COMSPEC> /s /c <executable> <args...>``. ``args`` is not modified.
        """
        if self.is_windows:
            return [get_command_processor(self.environ), "/s", "/c", executable, *args]
        return [executable, *args]

    async def run(
        self,
        executable: str,
        args: Sequence[str],
        cwd: Optional[Path] = None,
    ) -> BuildOutcome:
        """
        Run Maven to completion and return its outcome.

        Standard input, output and error are inherited from the calling
        process, so Maven output appears in real time and is not captured.

        Args:
            executable: Resolved Maven executable
            args: Maven argument vector
            cwd: Working directory of the process

        Returns:
            ``BuildSuccess`` for exit code 0, ``BuildFailure`` otherwise

        Raises:
            OSError: If the process cannot be started; propagated unmodified
        """
        command_line = self.build_command_line(executable, args)
        printable = shlex.join(command_line)
        logger.info(f"Starting Maven: {printable} (cwd: {cwd or Path.cwd()})")

        try:
            process = await asyncio.create_subprocess_exec(
                *command_line,
                cwd=cwd,
                stdin=None,
                stdout=None,
                stderr=None,
            )
        except OSError as e:
            handle_subprocess_error(
                error=e,
                command=printable,
                severity=ErrorSeverity.ERROR,
                reraise=True,
                logger=logger
            )
            raise

        logger.debug(f"Maven process started with PID {process.pid}")
        returncode = await process.wait()
        outcome = outcome_from_returncode(returncode)

        if outcome.succeeded:
            logger.info(f"Maven (PID {process.pid}) finished successfully")
        elif outcome.signal is not None:
            logger.error(f"Maven (PID {process.pid}) was terminated by signal {outcome.signal}")
        else:
            logger.error(f"Maven (PID {process.pid}) exited with code {outcome.exit_code}")
        return outcome

    async def launch(self, options: MavenOptions, args: Sequence[str]) -> None:
        """
        Resolve the executable, run Maven and raise on abnormal termination.

        Raises:
            MavenExecutionError: If Maven exits non-zero or is killed by a signal
            OSError: If the process cannot be started
        """
        executable = self.resolve_executable(options)
        outcome = await self.run(executable, args, cwd=options.cwd)
        outcome.raise_for_failure(command=self.build_command_line(executable, args))
