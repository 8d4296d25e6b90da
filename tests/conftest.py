"""
Pytest configuration and shared fixtures.
"""

import sys
from pathlib import Path
import pytest

# Allow running the tests without installing the package
sys.path.insert(0, str(Path(__file__).parent.parent))

from envconverter.core import EnvConverter
from envconverter.parser import EnvParser
from tests.fixtures import SAMPLE_APP_ENV, FOO_BAZ_PAIRS


# ============================================================================
# Pytest Hooks
# ============================================================================


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "integration: mark as integration test")


# ============================================================================
# Base Fixtures
# ============================================================================


@pytest.fixture
def parser():
    """Create an env parser instance."""
    return EnvParser()


@pytest.fixture
def converter(tmp_path):
    """Create a conversion engine rooted at a temporary directory."""
    return EnvConverter(base_path=tmp_path)


@pytest.fixture
def foo_baz_pairs():
    """The two-pair sequence FOO=bar, BAZ=qux."""
    return list(FOO_BAZ_PAIRS)


# ============================================================================
# Temporary File Fixtures
# ============================================================================


@pytest.fixture
def temp_env_file(tmp_path):
    """Create a temporary .env file."""
    file_path = tmp_path / ".env"
    file_path.write_text(SAMPLE_APP_ENV, encoding="utf-8")
    return file_path


@pytest.fixture
def in_tmp_path(tmp_path, monkeypatch):
    """Run the test with the temporary directory as working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
