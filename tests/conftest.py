"""Pytest configuration and shared fixtures for pterodactyl-client tests."""

import pytest

from pterodactyl_client import Client, KeyType, with_transport
from pterodactyl_client.testing import MockPanel

BASE_URL = "https://panel.example.com"
APPLICATION_KEY = "ptla_test_application_key"
CLIENT_KEY = "ptlc_test_client_key"


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Auto-cleanup: Clear panel and test environment variables before each test.

    This prevents test pollution when testing credential resolution.
    """
    import os

    test_prefixes = ("TEST_", "PTERO_")

    for key in list(os.environ.keys()):
        if any(key.startswith(prefix) for prefix in test_prefixes):
            monkeypatch.delenv(key, raising=False)

    yield


@pytest.fixture
def panel():
    """A scripted panel with an empty response queue."""
    return MockPanel()


@pytest.fixture
async def app_client(panel):
    """Application API client wired to the ``panel`` fixture."""
    async with Client(BASE_URL, APPLICATION_KEY, KeyType.APPLICATION, with_transport(panel.transport)) as client:
        yield client


@pytest.fixture
async def user_client(panel):
    """Client API client wired to the ``panel`` fixture."""
    async with Client(BASE_URL, CLIENT_KEY, KeyType.CLIENT, with_transport(panel.transport)) as client:
        yield client
