"""
Pytest configuration and shared fixtures for the mvnwrap test suite.

This module provides common fixtures, fake collaborators and configuration
for all test modules.
"""

import shutil
import sys
import tempfile
from pathlib import Path
from unittest.mock import AsyncMock, Mock, patch

import pytest

# Add src to Python path for testing
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


# ============================================================================
# Test Configuration
# ============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "integration: mark test as an integration test that starts real processes")


# ============================================================================
# Core Fixtures
# ============================================================================


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    temp_path = tempfile.mkdtemp()
    yield Path(temp_path)
    shutil.rmtree(temp_path, ignore_errors=True)


class FakeFileProbe:
    """FileProbe that reports a fixed set of paths as present."""

    def __init__(self, *existing):
        self.existing = {Path(p) for p in existing}
        self.checked = []

    def exists(self, path):
        self.checked.append(Path(path))
        return Path(path) in self.existing


@pytest.fixture
def no_wrapper_probe():
    """A file probe that never finds mvnw."""
    return FakeFileProbe()


@pytest.fixture
def fake_file_probe():
    """Factory for file probes that find the given paths."""
    return FakeFileProbe


# ============================================================================
# Mock Fixtures
# ============================================================================


@pytest.fixture
def mock_subprocess_exec():
    """
    Patch asyncio.create_subprocess_exec as used by the launcher.

    The fake process exits with ``returncode`` (0 unless the test changes it).
    """
    process = Mock()
    process.pid = 4242
    process.wait = AsyncMock(return_value=0)

    with patch(
        "mvnwrap.executor.build_process.asyncio.create_subprocess_exec",
        new=AsyncMock(return_value=process),
    ) as mock_exec:
        yield {"exec": mock_exec, "process": process}


# ============================================================================
# Configuration Fixtures
# ============================================================================


@pytest.fixture
def sample_maven_config():
    """Sample [maven] table for testing."""
    return {
        "file": "pom.xml",
        "settings": "settings.xml",
        "profiles": ["ci", "release"],
        "quiet": True,
        "batchMode": True,
        "threads": "1C",
    }


@pytest.fixture
def config_file(temp_dir, sample_maven_config):
    """Create a temporary mvnwrap.toml for testing."""
    import toml

    config_path = temp_dir / "mvnwrap.toml"
    with open(config_path, "w") as f:
        toml.dump({"maven": sample_maven_config, "logging": {"level": "debug"}}, f)
    return config_path


@pytest.fixture(autouse=True)
def clear_config_after_test():
    """Automatically reset the cached configuration after each test."""
    yield

    from mvnwrap.config import clear_config_cache, set_config_path

    set_config_path(None)
    clear_config_cache()
