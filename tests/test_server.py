"""Tests for server configuration and startup."""

from __future__ import annotations

import logging
from typing import Generator
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from gcd_server.core.config import DEFAULT_HOST, DEFAULT_PORT, ServerConfig
from gcd_server.mcp import server as server_module
from gcd_server.mcp.server import (
    build_config,
    configure_logging,
    create_parser,
    create_server,
    main,
)


class TestServerConfig:
    """Tests for ServerConfig."""

    def test_defaults(self) -> None:
        """Test the default bind address."""
        config = ServerConfig()
        assert config.host == DEFAULT_HOST == "127.0.0.1"
        assert config.port == DEFAULT_PORT == 3000
        assert config.log_level == "INFO"
        assert config.url == "http://127.0.0.1:3000"

    def test_from_env(self) -> None:
        """Test reading GCD_SERVER_* variables."""
        config = ServerConfig.from_env({
            "GCD_SERVER_HOST": "0.0.0.0",
            "GCD_SERVER_PORT": "8080",
            "GCD_SERVER_LOG_LEVEL": "debug",
        })
        assert config.host == "0.0.0.0"
        assert config.port == 8080
        assert config.log_level == "DEBUG"

    def test_from_env_ignores_empty(self) -> None:
        """Test that empty variables fall back to defaults."""
        config = ServerConfig.from_env({"GCD_SERVER_PORT": ""})
        assert config.port == DEFAULT_PORT

    @pytest.mark.parametrize("port", [0, 65536, -1])
    def test_invalid_port(self, port: int) -> None:
        """Test that out-of-range ports are rejected."""
        with pytest.raises(ValidationError):
            ServerConfig(port=port)

    def test_invalid_log_level(self) -> None:
        """Test that unknown log levels are rejected."""
        with pytest.raises(ValidationError):
            ServerConfig(log_level="chatty")


class TestBuildConfig:
    """Tests for merging environment and command-line settings."""

    def test_flags_override_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that command-line flags take precedence."""
        monkeypatch.setenv("GCD_SERVER_HOST", "0.0.0.0")
        monkeypatch.setenv("GCD_SERVER_PORT", "8080")
        parser = create_parser()
        args = parser.parse_args(["--port", "9000"])

        config = build_config(args, parser)
        assert config.host == "0.0.0.0"
        assert config.port == 9000

    def test_invalid_port_is_usage_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that a bad port exits through the parser."""
        monkeypatch.delenv("GCD_SERVER_PORT", raising=False)
        parser = create_parser()
        args = parser.parse_args(["--port", "70000"])

        with pytest.raises(SystemExit) as exc_info:
            build_config(args, parser)
        assert exc_info.value.code == 2


class TestStartup:
    """Tests for server creation and startup."""

    def test_create_server_uses_config(self, server_config: ServerConfig) -> None:
        """Test that the server settings carry the configured address."""
        mcp = create_server(server_config)
        assert mcp.settings.host == server_config.host
        assert mcp.settings.port == server_config.port

    def test_main_binds_configured_address(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that main passes the configured address to uvicorn."""
        for name in ("GCD_SERVER_HOST", "GCD_SERVER_PORT", "GCD_SERVER_LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)

        with patch.object(server_module.uvicorn, "run") as run, \
                patch.object(server_module, "configure_logging"):
            main(["--host", "0.0.0.0", "--port", "8123", "--log-level", "warning"])

        run.assert_called_once()
        _, kwargs = run.call_args
        assert kwargs["host"] == "0.0.0.0"
        assert kwargs["port"] == 8123
        assert kwargs["log_level"] == "warning"

    def test_main_quiet(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that --quiet turns uvicorn's own logging down to critical."""
        for name in ("GCD_SERVER_HOST", "GCD_SERVER_PORT", "GCD_SERVER_LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)

        with patch.object(server_module.uvicorn, "run") as run, \
                patch.object(server_module, "configure_logging") as configure:
            main(["--quiet"])

        configure.assert_called_once()
        assert configure.call_args.kwargs["quiet"] is True
        assert run.call_args.kwargs["log_level"] == "critical"


@pytest.fixture
def restore_logging() -> Generator[None, None, None]:
    """Put back the logging state that configure_logging changes."""
    levels = {name: logging.getLogger(name).level for name in ("mcp", "uvicorn")}
    yield
    logging.disable(logging.NOTSET)
    for name, level in levels.items():
        logging.getLogger(name).setLevel(level)


class TestConfigureLogging:
    """Tests for process logging setup."""

    def test_quiet(self, server_config: ServerConfig, restore_logging: None) -> None:
        """Test that quiet mode silences the server and library loggers."""
        root = logging.getLogger()
        with patch.object(root, "handlers", list(root.handlers)):
            configure_logging(server_config, quiet=True)
            assert root.handlers == []

        assert logging.getLogger("uvicorn").level == logging.CRITICAL
        assert logging.getLogger("mcp").level == logging.CRITICAL
        assert not logging.getLogger("gcd_server.mcp.routes").isEnabledFor(logging.ERROR)

    def test_level_from_config(self, restore_logging: None) -> None:
        """Test that the root logger is configured at the configured level."""
        config = ServerConfig(log_level="warning")

        with patch.object(server_module.logging, "basicConfig") as basic_config:
            configure_logging(config)

        basic_config.assert_called_once()
        assert basic_config.call_args.kwargs["level"] == "WARNING"
