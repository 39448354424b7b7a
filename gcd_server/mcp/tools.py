"""MCP tool definitions for gcd-server.

Exposes the GCD engine to MCP clients as a single tool, ``gcd``.
"""

# pyright: reportUnusedFunction=false

from __future__ import annotations

import logging
from typing import Any, Callable

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from gcd_server.core.engine import compute


logger = logging.getLogger(__name__)


def register_tools(mcp: FastMCP) -> dict[str, Callable[..., Any]]:
    """
    Register the gcd tool with an MCP server.

    Args:
        mcp: FastMCP server instance

    Returns:
        Dictionary of registered tool functions by name
    """

    @mcp.tool(name="gcd")
    def gcd_tool(
        numbers: list[int] = Field(
            description="Positive integers to compute the greatest common divisor of"
        ),
    ) -> str:
        """Compute the greatest common divisor of one or more positive integers.

        Operands are folded left to right with Euclid's algorithm.
        Zero is rejected.

        Examples:
        - gcd(numbers=[12, 18]) -> "The greatest common divisor of [12, 18] is 6"
        - gcd(numbers=[14, 15]) -> "The greatest common divisor of [14, 15] is 1"
        """
        result = compute(numbers)
        if not result.ok:
            logger.info("gcd tool rejected %s: %s", numbers, result.message)
            return f"Error: {result.message}"
        return result.message

    return {"gcd": gcd_tool}
