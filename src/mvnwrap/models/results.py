"""
Invocation outcome models.

The terminal result of one Maven process is either a ``BuildSuccess`` or a
``BuildFailure`` carrying the exit code or the terminating signal. Callers
can branch on the type (or use ``match``) instead of inspecting loose fields.
"""

from dataclasses import dataclass
from typing import List, Optional, Union

from ..validation.exceptions import MavenExecutionError


@dataclass(frozen=True)
class BuildSuccess:
    """Maven exited with code 0."""

    @property
    def succeeded(self) -> bool:
        return True

    def raise_for_failure(self, command: Optional[List[str]] = None) -> None:
        return None


@dataclass(frozen=True)
class BuildFailure:
    """
    Maven terminated abnormally.

    Exactly one of the two fields is set: ``exit_code`` for a non-zero exit,
    ``signal`` (e.g. ``"SIGTERM"``) when the process was killed by a signal.
    """

    exit_code: Optional[int] = None
    signal: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return False

    def raise_for_failure(self, command: Optional[List[str]] = None) -> None:
        raise MavenExecutionError(self, command=command)


BuildOutcome = Union[BuildSuccess, BuildFailure]
