# This project was developed with assistance from AI tools.
"""Shared fixtures.

The external services are never reached: every test that touches the app
installs a ``FakeBackend`` and gets a fresh session store.
"""

import pytest
from fastapi.testclient import TestClient

from loanpath.inference.backend import set_advisory_backend
from loanpath.main import app
from loanpath.services import session as session_mod

from .factories import FakeBackend


@pytest.fixture(autouse=True)
def _reset_state():
    """Fresh session store and default backend around each test."""
    session_mod._store = None
    yield
    session_mod._store = None
    set_advisory_backend(None)


@pytest.fixture
def fake_backend() -> FakeBackend:
    backend = FakeBackend()
    set_advisory_backend(backend)
    return backend


@pytest.fixture
def client(fake_backend) -> TestClient:
    return TestClient(app)
