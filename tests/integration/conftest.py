"""Shared fixtures for integration tests.

These tests run the real aiohttp transport against a local stub Grafana.
"""

from __future__ import annotations

import socket

import pytest
import pytest_asyncio
from aiohttp.test_utils import TestServer

from tests.helpers.grafana_server import make_app


@pytest_asyncio.fixture
async def grafana_server():
    server = TestServer(make_app(), host="127.0.0.1")
    await server.start_server()
    try:
        yield server
    finally:
        await server.close()


@pytest.fixture
def refused_url() -> str:
    """Dashboard URL on a local port nothing listens on."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        port = sock.getsockname()[1]
    return f"http://127.0.0.1:{port}/org1/d/abc"
