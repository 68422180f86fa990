"""
Command-line interface for the mvnwrap package.

This module provides the ``mvnwrap`` console entry point.
"""

from .main import main_cli

__all__ = [
    "main_cli",
]
