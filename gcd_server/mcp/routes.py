"""HTTP routes for the GCD form.

- GET /     -> static form with two inputs (n, m) posting to /gcd
- POST /gcd -> decodes the form, computes the GCD, renders the result

Routes are registered on the FastMCP server as custom routes, so they are
served by the same Starlette app as the MCP endpoint.
"""

# pyright: reportUnusedFunction=false

from __future__ import annotations

import logging

from mcp.server.fastmcp import FastMCP
from pydantic import ValidationError
from starlette.requests import Request
from starlette.responses import HTMLResponse

from gcd_server.core.engine import compute
from gcd_server.core.types import GcdParams
from gcd_server.mcp.pages import INDEX_PAGE, render_error, render_result


logger = logging.getLogger(__name__)


def describe_form_errors(exc: ValidationError) -> str:
    """Turn a form decoding failure into a short human readable message."""
    problems = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error["loc"]) or "form"
        problems.append(f"{field}: {error['msg']}")
    return "Invalid form submission (" + "; ".join(problems) + ")."


async def decode_form(request: Request) -> GcdParams:
    """
    Decode a submitted form into GcdParams.

    Raises:
        ValidationError: If a field is missing, non-numeric or out of range
    """
    form = await request.form()
    return GcdParams.model_validate(
        {key: form.get(key) for key in ("n", "m") if key in form}
    )


def register_routes(mcp: FastMCP) -> None:
    """
    Register the form routes with an MCP server.

    Args:
        mcp: FastMCP server instance
    """

    @mcp.custom_route("/", methods=["GET"])
    async def get_index(request: Request) -> HTMLResponse:
        return HTMLResponse(INDEX_PAGE)

    @mcp.custom_route("/gcd", methods=["POST"])
    async def post_gcd(request: Request) -> HTMLResponse:
        try:
            params = await decode_form(request)
        except ValidationError as e:
            message = describe_form_errors(e)
            logger.info("Rejected form submission: %s", message)
            return HTMLResponse(render_error(message), status_code=400)

        result = compute(params.operands)
        if not result.ok:
            logger.info("Rejected operands %s: %s", params.operands, result.message)
            return HTMLResponse(render_error(result.message), status_code=400)

        logger.debug("gcd(%d, %d) = %d", params.n, params.m, result.value)
        return HTMLResponse(render_result(params.n, params.m, result.value))
