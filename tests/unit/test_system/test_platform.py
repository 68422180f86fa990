"""
Unit tests for platform detection helpers.
"""

import sys

import pytest

from mvnwrap.system.platform import (
    DEFAULT_COMMAND_PROCESSOR,
    get_command_processor,
    host_is_windows,
    is_windows,
)


@pytest.mark.unit
@pytest.mark.parametrize(
    "platform_id, expected",
    [
        ("win32", True),
        ("win64", True),
        ("linux", False),
        ("darwin", False),
        ("cygwin", False),
    ],
)
def test_is_windows(platform_id, expected):
    assert is_windows(platform_id) is expected


@pytest.mark.unit
def test_host_is_windows_matches_sys_platform():
    assert host_is_windows() is sys.platform.startswith("win")


@pytest.mark.unit
class TestCommandProcessor:

    def test_uses_comspec(self):
        environ = {"COMSPEC": r"C:\Windows\System32\cmd.exe"}
        assert get_command_processor(environ) == r"C:\Windows\System32\cmd.exe"

    def test_falls_back_when_unset(self):
        assert get_command_processor({}) == DEFAULT_COMMAND_PROCESSOR == "cmd.exe"

    def test_falls_back_when_empty(self):
        assert get_command_processor({"COMSPEC": ""}) == "cmd.exe"
