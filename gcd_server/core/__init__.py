"""Core modules for gcd-server.

Primary modules:
- engine: Euclid's algorithm and operand validation
- config: ServerConfig (bind address, logging)
- types: Type definitions (GcdResult, GcdParams, etc.)
"""

from gcd_server.core.config import ServerConfig
from gcd_server.core.engine import compute, gcd, gcd_all, validate_operands
from gcd_server.core.types import UINT64_MAX, GcdParams, GcdResult, ResultStatus

__all__ = [
    # Types
    "GcdParams",
    "GcdResult",
    "ResultStatus",
    "UINT64_MAX",
    # Config
    "ServerConfig",
    # Engine
    "compute",
    "gcd",
    "gcd_all",
    "validate_operands",
]
