"""Root pytest configuration for all tests."""

import pytest


@pytest.fixture(autouse=True)
def no_api_key(monkeypatch):
    """Keep a developer's real credentials out of every test.

    Tests that need a key set it explicitly with monkeypatch.setenv.
    """
    monkeypatch.delenv("NUCLINO_API_KEY", raising=False)
    monkeypatch.delenv("NUCLINO_BASE_URL", raising=False)
