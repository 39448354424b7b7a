"""HTML served by the GCD form routes."""

from __future__ import annotations

import html


INDEX_PAGE = """
<title>GCD Calculator</title>
<form action="/gcd" method="post">
<input type="text" name="n"/>
<input type="text" name="m"/>
<button type="submit">Compute GCD</button>
</form>
"""


def render_result(n: int, m: int, value: int) -> str:
    """Sentence reporting the GCD of the two submitted numbers."""
    return (
        f"The greatest common divisor of the numbers {n} and {m} "
        f"is <b>{value}</b>\n"
    )


def render_error(message: str) -> str:
    """Body for a rejected submission."""
    return html.escape(message)
