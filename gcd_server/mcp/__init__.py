"""HTTP and MCP surface for gcd-server."""

from gcd_server.mcp.server import create_server, run_server

__all__ = ["create_server", "run_server"]
