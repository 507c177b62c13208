"""Shared pytest fixtures and configuration."""

import uuid

import pytest

from localauth.strategies.local_auth import LocalAuth


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the host's data path override out of tests."""
    monkeypatch.delenv("LOCALAUTH_DATA_PATH", raising=False)
    monkeypatch.setenv("LOG_LEVEL", "ERROR")  # Reduce noise in tests


@pytest.fixture
def unique_id():
    """Generate a unique client ID."""
    return f"test-{uuid.uuid4().hex[:12]}"


@pytest.fixture
def data_path(tmp_path):
    return tmp_path / "wwa"


@pytest.fixture
def auth(data_path):
    """A LocalAuth rooted in a temporary directory."""
    return LocalAuth(client_id="bot1", data_path=str(data_path))
