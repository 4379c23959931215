"""Shared fixtures for the plugin test suite."""

import pytest
from fastapi.testclient import TestClient

from main import app
from tests.stubs import StubUpstream
from upstream.client import get_http_client


@pytest.fixture
def api_client():
    """
    Returns a factory building a TestClient wired to the given stub.
    Dependency overrides are cleared after the test.
    """
    def _make(stub: StubUpstream) -> TestClient:
        async def _override():
            async with stub.client() as client:
                yield client

        app.dependency_overrides[get_http_client] = _override
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()
