"""Tests for runtime settings and the upstream client lifecycle."""

import importlib

import httpx
import pytest
from fastapi.testclient import TestClient

import config.settings
import upstream.client
from main import app
from upstream.client import close_upstream_client, get_http_client, open_upstream_client


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------


@pytest.fixture
def reload_settings(monkeypatch):
    """Reloads config.settings under a patched environment, then restores it."""
    def _reload(**env):
        for name in ("PORT", "HOST"):
            monkeypatch.delenv(name, raising=False)
        for name, value in env.items():
            monkeypatch.setenv(name, value)
        return importlib.reload(config.settings)

    yield _reload
    monkeypatch.undo()
    importlib.reload(config.settings)


def test_port_and_host_defaults(reload_settings):
    settings = reload_settings()
    assert settings.PORT == 3000
    assert settings.HOST == "0.0.0.0"


def test_port_from_environment(reload_settings):
    assert reload_settings(PORT="8080").PORT == 8080


@pytest.mark.parametrize("value", ["", "eighty", "80.5"])
def test_bad_port_falls_back_to_default(reload_settings, value):
    assert reload_settings(PORT=value).PORT == 3000


def test_host_from_environment(reload_settings):
    assert reload_settings(HOST="127.0.0.1").HOST == "127.0.0.1"


# ---------------------------------------------------------------------------
# Upstream client
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_open_then_close_shared_client():
    await open_upstream_client()
    shared = upstream.client.client
    try:
        assert isinstance(shared, httpx.AsyncClient)

        # opening twice keeps the same client
        await open_upstream_client()
        assert upstream.client.client is shared

        dependency = get_http_client()
        assert await dependency.__anext__() is shared
        await dependency.aclose()
        assert not shared.is_closed
    finally:
        await close_upstream_client()

    assert upstream.client.client is None
    assert shared.is_closed


@pytest.mark.asyncio
async def test_short_lived_client_without_lifespan():
    assert upstream.client.client is None

    dependency = get_http_client()
    temp_client = await dependency.__anext__()
    assert isinstance(temp_client, httpx.AsyncClient)
    assert not temp_client.is_closed

    await dependency.aclose()
    assert temp_client.is_closed
    assert upstream.client.client is None


def test_lifespan_opens_and_closes_client():
    with TestClient(app) as client:
        shared = upstream.client.client
        assert isinstance(shared, httpx.AsyncClient)
        assert client.get("/").status_code == 200

    assert upstream.client.client is None
    assert shared.is_closed
