"""
Command-line interface for the mvnwrap Maven wrapper.

Reads ``mvnwrap.toml`` (or the file given with ``--config``), applies the
command-line overrides and runs Maven with its output passed straight
through. The exit status mirrors Maven's.
"""

import argparse
import dataclasses
import logging
import shlex
import signal
import sys
import tomllib
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ..config import get_config, set_config_path
from ..config.validators import LOG_LEVELS
from ..maven import Maven
from ..models.options import MavenOptions
from ..validation import (
    MavenExecutionError,
    ValidationError,
    handle_cli_error,
    parse_comma_list,
    validate_define,
)

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)-5.5s] %(name)s:%(filename)s:%(lineno)d\t %(message)s"

# Shell conventions for "command not found" and "not executable".
EXIT_COMMAND_NOT_FOUND = 127
EXIT_NOT_EXECUTABLE = 126


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser. Maven-style short flags are kept."""
    parser = argparse.ArgumentParser(
        prog="mvnwrap",
        description="Run Maven goals with options from mvnwrap.toml and the command line.",
        allow_abbrev=False,
    )
    parser.add_argument("goals", nargs="+", help="Maven goals or phases, e.g. 'clean install'.")
    parser.add_argument("--config", type=Path, help="Configuration file (default: ./mvnwrap.toml if present).")
    parser.add_argument("-C", "--cwd", type=Path, help="Working directory of the Maven process.")
    parser.add_argument("--cmd", help="Maven executable, overriding mvnw and mvn discovery.")
    parser.add_argument("-f", "--file", help="POM file.")
    parser.add_argument("-s", "--settings", help="settings.xml to use.")
    parser.add_argument("-P", "--profiles", help="Comma separated profiles.")
    parser.add_argument("-q", "--quiet", action="store_const", const=True, help="Only show errors.")
    parser.add_argument("-X", "--debug", action="store_const", const=True, help="Debug output.")
    parser.add_argument("-U", "--update-snapshots", action="store_const", const=True,
                        help="Force a check for updated snapshots.")
    parser.add_argument("-o", "--offline", action="store_const", const=True, help="Work offline.")
    parser.add_argument("-N", "--non-recursive", action="store_const", const=True,
                        help="Do not recurse into sub-projects.")
    parser.add_argument("-T", "--threads", help="Thread count, e.g. 4 or 1C.")
    parser.add_argument("-ntp", "--no-transfer-progress", action="store_const", const=True,
                        help="Suppress transfer progress.")
    parser.add_argument("-B", "--batch-mode", action="store_const", const=True, help="Non-interactive mode.")
    parser.add_argument("-l", "--log-file", help="Log file for all build output.")
    parser.add_argument("-am", "--also-make", action="store_const", const=True,
                        help="Also build projects required by the selected ones.")
    parser.add_argument("-D", "--define", action="append", default=[], metavar="KEY=VALUE",
                        help="Define a system property; may be repeated.")
    parser.add_argument("-pl", "--projects", help="Comma separated reactor projects.")
    parser.add_argument("--dry-run", action="store_true", help="Print the Maven command line and exit.")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, help="Wrapper log level.")
    return parser


def apply_overrides(options: MavenOptions, args: argparse.Namespace) -> MavenOptions:
    """Return ``options`` with every option given on the command line replaced."""
    overrides: Dict[str, Any] = {}
    for name in ("cwd", "cmd", "file", "settings", "quiet", "debug", "update_snapshots",
                 "offline", "non_recursive", "threads", "no_transfer_progress",
                 "batch_mode", "log_file", "also_make"):
        value = getattr(args, name)
        if value is not None:
            overrides[name] = value
    if args.profiles is not None:
        overrides["profiles"] = parse_comma_list(args.profiles)
    return dataclasses.replace(options, **overrides)


def parse_defines(raw_defines: List[str]) -> Dict[str, str]:
    """Parse repeated ``-D key=value`` arguments, keeping their order."""
    defines: Dict[str, str] = {}
    for raw in raw_defines:
        key, value = validate_define(raw, field_name="-D")
        defines[key] = value
    return defines


def setup_logging(level: Union[int, str]) -> None:
    """Configure root logging on stderr. stdout is left to Maven and --dry-run."""
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def exit_code_for(error: MavenExecutionError) -> int:
    """Map an abnormal Maven termination to this process's exit status."""
    if error.signal is not None:
        try:
            return 128 + signal.Signals[error.signal].value
        except KeyError:
            return 1
    return error.exit_code if error.exit_code else 1


def main_cli(argv: Optional[List[str]] = None) -> None:
    """
    Main command-line interface.

    Raises:
        SystemExit: With Maven's exit status when the build fails, or 1 on
            configuration and argument errors.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.config is not None:
        set_config_path(args.config)

    try:
        app_config = get_config()
    except (FileNotFoundError, ValidationError, tomllib.TOMLDecodeError) as e:
        setup_logging(logging.INFO)
        handle_cli_error(error=e, context="configuration loading", exit_code=1, logger=logger)

    setup_logging(args.log_level or app_config.logging.level)

    try:
        defines = parse_defines(args.define)
    except ValidationError as e:
        handle_cli_error(error=e, context="define parsing", exit_code=1, logger=logger)

    options = apply_overrides(app_config.maven, args)
    projects = list(parse_comma_list(args.projects))
    maven = Maven(options)

    if args.dry_run:
        print(shlex.join(maven.command_line(args.goals, defines, projects)))
        return

    if options.cwd is not None and not Path(options.cwd).is_dir():
        handle_cli_error(
            error=NotADirectoryError(f"Working directory does not exist: {options.cwd}"),
            context="launching Maven",
            exit_code=1,
            logger=logger,
        )

    try:
        maven.run(args.goals, defines, projects)
    except MavenExecutionError as e:
        logger.error(f"Maven build failed: {e}")
        sys.exit(exit_code_for(e))
    except FileNotFoundError as e:
        handle_cli_error(error=e, context="launching Maven", exit_code=EXIT_COMMAND_NOT_FOUND, logger=logger)
    except PermissionError as e:
        handle_cli_error(error=e, context="launching Maven", exit_code=EXIT_NOT_EXECUTABLE, logger=logger)
    except OSError as e:
        handle_cli_error(error=e, context="launching Maven", exit_code=1, logger=logger)

    logger.info("Maven build succeeded")


if __name__ == "__main__":
    main_cli()
