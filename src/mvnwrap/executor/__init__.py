"""
Maven process execution for the mvnwrap package.

This module provides executable resolution and AsyncIO-based process
lifecycle management for Maven invocations.
"""

from .build_process import (
    DEFAULT_FILE_PROBE,
    MAVEN_WRAPPER_NAME,
    SYSTEM_MAVEN_NAME,
    FileProbe,
    LocalFileProbe,
    MavenProcessLauncher,
    outcome_from_returncode,
    resolve_executable,
)

__all__ = [
    "DEFAULT_FILE_PROBE",
    "MAVEN_WRAPPER_NAME",
    "SYSTEM_MAVEN_NAME",
    "FileProbe",
    "LocalFileProbe",
    "MavenProcessLauncher",
    "outcome_from_returncode",
    "resolve_executable",
]
