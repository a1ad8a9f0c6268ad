"""
Pytest configuration and fixtures for fileshim unit tests.

Unit tests MUST NOT depend on the machine's temp directory configuration:
the override variable is cleared and the service singleton reset for
every test.
"""

import pytest

from fileshim.services.fs import service
from fileshim.settings import settings


@pytest.fixture(autouse=True)
def isolated_temp_env(monkeypatch):
    """Remove any temp dir override inherited from the environment."""
    monkeypatch.delenv(settings.temp.env_var, raising=False)
    yield


@pytest.fixture(autouse=True)
def fresh_fs_service(monkeypatch):
    """Reset the FileSystemService singleton."""
    monkeypatch.setattr(service, "_fs_service", None)
    yield


@pytest.fixture
def temp_override(monkeypatch, tmp_path):
    """Point the temp dir override at a fresh directory and return it."""
    temp_dir = tmp_path / "spool"
    temp_dir.mkdir()
    monkeypatch.setenv(settings.temp.env_var, str(temp_dir))
    return temp_dir


def pytest_collection_modifyitems(items):
    """Automatically add 'unit' marker to all tests in /unit/."""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
