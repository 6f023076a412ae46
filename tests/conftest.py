"""
Shared test fixtures for the FameEX connector tests.

Provides reusable fixtures for:
- Connector settings with fake credentials
- Real httpx.Response objects for the classifier and client
- A mock httpx.AsyncClient context manager
"""

import json

import httpx
import pytest
from unittest.mock import AsyncMock, MagicMock

from fameex_connector.config import FameexSettings


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------


@pytest.fixture
def settings():
    """Settings with fake trading credentials."""
    return FameexSettings(
        _env_file=None,
        base_url="https://api.test.fameex.com",
        api_key="test-api-key",
        secret_key="test-secret-key",
        trade_pwd="test-trade-pwd",
    )


@pytest.fixture
def public_settings():
    """Settings in public-only mode; credentials are present but must be ignored."""
    return FameexSettings(
        _env_file=None,
        base_url="https://api.test.fameex.com",
        api_key="ignored-key",
        secret_key="ignored-secret",
        public_only=True,
    )


# ---------------------------------------------------------------------------
# HTTP helpers
# ---------------------------------------------------------------------------


@pytest.fixture
def make_response():
    """Build a real httpx.Response bound to a request."""

    def _make(status_code=200, body=None, text=None, method="GET", url="https://api.test.fameex.com/v1/x"):
        request = httpx.Request(method, url)
        if text is not None:
            return httpx.Response(status_code, text=text, request=request)
        return httpx.Response(status_code, content=json.dumps(body).encode("utf-8"), request=request)

    return _make


@pytest.fixture
def mock_http():
    """Mock httpx.AsyncClient usable as ``async with``; set .request.return_value / side_effect."""
    mock_client = AsyncMock()
    mock_client.__aenter__ = AsyncMock(return_value=mock_client)
    mock_client.__aexit__ = AsyncMock(return_value=False)
    return mock_client


@pytest.fixture
def mock_logger():
    """Logger stand-in recording info()/warning() calls."""
    return MagicMock()
