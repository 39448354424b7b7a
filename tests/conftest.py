"""Pytest configuration and fixtures for gcd-server tests."""

from __future__ import annotations

from typing import Generator

import pytest
from mcp.server.fastmcp import FastMCP
from starlette.testclient import TestClient

from gcd_server.core.config import ServerConfig
from gcd_server.mcp.server import create_server


@pytest.fixture
def server_config() -> ServerConfig:
    """Create a config bound to an unprivileged test port."""
    return ServerConfig(host="127.0.0.1", port=3999, log_level="DEBUG")


@pytest.fixture
def server(server_config: ServerConfig) -> FastMCP:
    """Create a server with the GCD routes and tool registered."""
    return create_server(server_config)


@pytest.fixture
def client(server: FastMCP) -> Generator[TestClient, None, None]:
    """Create an HTTP client for the server's Starlette app."""
    client = TestClient(server.streamable_http_app())
    yield client
    client.close()
