"""Pytest configuration file for setting up test environment."""

import sys
from pathlib import Path

import pytest

# Add the project root to Python path so tests can import userrecord
project_dir = Path(__file__).parent.parent
sys.path.insert(0, str(project_dir))

from userrecord.common import User, UserRole  # noqa: E402

ENV_VARS = (
    "LOGGING_LEVEL",
    "USER_DISPLAY_NULL",
    "USER_DISPLAY_REDACT_PASSWORD",
)


@pytest.fixture
def alice() -> User:
    """A fully populated user."""
    return User("alice", 7, "hashed-secret", "g-123", UserRole.ADMIN)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove configuration variables from the environment."""
    for var in ENV_VARS:
        # setenv first so values loaded from .env files are undone too
        monkeypatch.setenv(var, "")
        monkeypatch.delenv(var)
    return monkeypatch
