"""HTTP server for gcd-server.

This module provides the main entry point for the server. One Starlette app
serves the GCD form routes and the MCP streamable-HTTP endpoint (/mcp).
"""

from __future__ import annotations

import argparse
import logging

import uvicorn
from mcp.server.fastmcp import FastMCP
from pydantic import ValidationError

from gcd_server.core.config import LOG_LEVELS, ServerConfig
from gcd_server.mcp.routes import register_routes
from gcd_server.mcp.tools import register_tools


logger = logging.getLogger(__name__)


def create_server(config: ServerConfig | None = None) -> FastMCP:
    """
    Create and configure a server with the GCD routes and tool.

    Routes:
    - GET /     : GCD form
    - POST /gcd : compute the GCD of the submitted numbers

    Tools:
    - gcd: compute the GCD of a list of numbers

    Args:
        config: Bind address and logging settings

    Returns:
        Configured FastMCP server instance
    """
    config = config or ServerConfig()

    mcp = FastMCP(
        name="gcd-server",
        host=config.host,
        port=config.port,
        log_level=config.log_level,
    )

    register_routes(mcp)
    register_tools(mcp)

    return mcp


def configure_logging(config: ServerConfig, quiet: bool = False) -> None:
    """Set up root logging for the server process."""
    if quiet:
        logging.disable(logging.CRITICAL)
        logging.getLogger().handlers = []
        logging.getLogger("mcp").setLevel(logging.CRITICAL)
        logging.getLogger("uvicorn").setLevel(logging.CRITICAL)
        return

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def run_server(config: ServerConfig, quiet: bool = False) -> None:
    """Serve the GCD app on the configured address until interrupted."""
    configure_logging(config, quiet=quiet)

    app = create_server(config).streamable_http_app()

    logger.info("Serving on %s...", config.url)
    uvicorn.run(
        app,
        host=config.host,
        port=config.port,
        log_level="critical" if quiet else config.log_level.lower(),
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the server CLI."""
    parser = argparse.ArgumentParser(
        prog="gcd-server",
        description="GCD Calculator HTTP server",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Start server on the default address (127.0.0.1:3000)
  gcd-server

  # Listen on all interfaces
  gcd-server --host 0.0.0.0 --port 8080

Environment Variables:
  GCD_SERVER_HOST: Address to bind (default: 127.0.0.1)
  GCD_SERVER_PORT: Port to listen on (default: 3000)
  GCD_SERVER_LOG_LEVEL: Logging level (default: INFO)
        """,
    )

    parser.add_argument(
        "--host",
        type=str,
        default=None,
        help="Address to bind",
    )

    parser.add_argument(
        "--port", "-p",
        type=int,
        default=None,
        help="Port to listen on",
    )

    parser.add_argument(
        "--log-level", "-l",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Logging level",
    )

    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Suppress all logging output",
    )

    return parser


def build_config(
    args: argparse.Namespace,
    parser: argparse.ArgumentParser,
) -> ServerConfig:
    """Merge environment defaults with command-line overrides."""
    overrides = {
        key: value
        for key, value in (
            ("host", args.host),
            ("port", args.port),
            ("log_level", args.log_level),
        )
        if value is not None
    }

    try:
        base = ServerConfig.from_env()
        return ServerConfig.model_validate({**base.model_dump(), **overrides})
    except ValidationError as e:
        parser.error(f"invalid configuration: {e}")


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the server CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    config = build_config(args, parser)
    run_server(config, quiet=args.quiet)


if __name__ == "__main__":
    main()
