"""Pytest fixtures for tests that drive code through a MockBackend.

Enable with ``pytest_plugins = ["transport.testing"]`` in a conftest.
"""

from collections.abc import Iterator
from contextlib import contextmanager

import pytest

from transport.client import HttpClient
from transport.mock import MockBackend
from transport.settings import MockBackendSettings


@contextmanager
def mocked_backend(settings: MockBackendSettings | None = None) -> Iterator[MockBackend]:
    """Yield a fresh MockBackend and verify it on a clean exit if configured to.

    Verification is skipped when the block raises, so the original failure
    is not masked by a pending-connections error.
    """
    backend = MockBackend(settings)
    yield backend
    if backend.settings.verify_on_teardown:
        backend.verify_no_pending_requests()


@pytest.fixture
def mock_backend_settings() -> MockBackendSettings:
    return MockBackendSettings()


@pytest.fixture
def mock_backend(mock_backend_settings):
    with mocked_backend(mock_backend_settings) as backend:
        yield backend


@pytest.fixture
def http_client(mock_backend):
    return HttpClient(mock_backend)
