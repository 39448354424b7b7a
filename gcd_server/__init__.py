"""gcd-server - Greatest common divisor over the command line, HTTP and MCP."""

from gcd_server.core.engine import compute, gcd, gcd_all
from gcd_server.core.types import GcdParams, GcdResult, ResultStatus

__version__ = "0.1.0"

__all__ = [
    "GcdParams",
    "GcdResult",
    "ResultStatus",
    "compute",
    "gcd",
    "gcd_all",
]
