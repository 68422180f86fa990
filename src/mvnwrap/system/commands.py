"""
Maven command line construction.

This module turns a ``MavenOptions`` record plus the per-call goals, defines
and reactor projects into the ordered argument vector handed to Maven. It
performs no I/O and never fails: option values are passed through verbatim
and Maven is left to reject anything it does not understand.
"""

import logging
from typing import Any, List, Mapping, Optional, Sequence, Union

from ..models.options import MavenOptions

logger = logging.getLogger(__name__)

Commands = Union[str, Sequence[str]]
Projects = Union[str, Sequence[str]]


def format_define(key: str, value: Any) -> str:
    """Render one define as a single ``-Dkey=value`` token.

    Booleans use the JVM spelling (``true``/``false``) so that
    ``{"skipTests": True}`` yields ``-DskipTests=true``.
    """
    if isinstance(value, bool):
        value = "true" if value else "false"
    return f"-D{key}={value}"


def build_maven_arguments(
    options: MavenOptions,
    commands: Commands,
    defines: Optional[Mapping[str, Any]] = None,
    projects: Optional[Projects] = None,
) -> List[str]:
    """Build the Maven argument vector for one invocation.

    Maven is sensitive to flag order for some combinations, so the order is
    fixed: settings, POM file, the boolean switches, threads, the output
    related switches, defines, reactor projects, profiles and finally the
    goals/phases.

    Args:
        options: Wrapper options.
        commands: A single goal or an ordered sequence of goals.
        defines: System properties passed as ``-Dkey=value``, in insertion order.
        projects: Reactor projects for ``-pl``; a bare string is one project.

    Returns:
        A new list of argument tokens. Repeated calls with the same inputs
        return equal lists.
    """
    args: List[str] = []

    if options.settings:
        args.extend(["-s", options.settings])
    if options.file:
        args.extend(["-f", options.file])
    if options.quiet:
        args.append("-q")
    if options.debug:
        args.append("-X")
    if options.update_snapshots:
        args.append("-U")
    if options.offline:
        args.append("-o")
    if options.non_recursive:
        args.append("-N")
    if options.threads is not None:
        args.extend(["-T", str(options.threads)])
    if options.no_transfer_progress:
        args.append("-ntp")
    if options.batch_mode:
        args.append("-B")
    if options.log_file:
        args.extend(["-l", options.log_file])
    if options.also_make:
        args.append("-am")

    if defines:
        args.extend(format_define(key, value) for key, value in defines.items())

    if projects:
        if isinstance(projects, str):
            projects = [projects]
        args.extend(["-pl", ",".join(projects)])

    if options.profiles:
        args.append(f"-P{','.join(options.profiles)}")

    if isinstance(commands, str):
        args.append(commands)
    else:
        args.extend(commands)

    logger.debug(f"Built Maven arguments: {args}")
    return args
