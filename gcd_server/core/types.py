"""Core type definitions for gcd-server."""

from __future__ import annotations

import re
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator


# Operands are unsigned 64-bit integers
UINT64_MAX = 2**64 - 1

# Decimal ASCII digits with an optional leading plus sign
UINT_PATTERN = re.compile(r"\+?[0-9]+")


class ResultStatus(str, Enum):
    """Status of a GCD computation."""

    SUCCESS = "success"
    ERROR = "error"


class GcdResult(BaseModel):
    """Result of a GCD computation over an operand set."""

    status: ResultStatus = ResultStatus.SUCCESS
    message: str = ""
    operands: list[int] = Field(default_factory=list)
    value: int | None = None

    @property
    def ok(self) -> bool:
        """Whether the computation produced a value."""
        return self.status == ResultStatus.SUCCESS

    @classmethod
    def success(cls, operands: list[int], value: int) -> GcdResult:
        """Create a success result."""
        return cls(
            status=ResultStatus.SUCCESS,
            message=f"The greatest common divisor of {operands} is {value}",
            operands=operands,
            value=value,
        )

    @classmethod
    def error(cls, message: str, operands: list[int] | None = None) -> GcdResult:
        """Create an error result."""
        return cls(
            status=ResultStatus.ERROR,
            message=message,
            operands=operands or [],
        )

    def __str__(self) -> str:
        return self.message


class GcdParams(BaseModel):
    """Values submitted by the GCD form.

    Both fields must decode as unsigned 64-bit integers. Zero decodes
    fine here; rejecting it is the engine's validation step.
    """

    n: int = Field(ge=0, le=UINT64_MAX)
    m: int = Field(ge=0, le=UINT64_MAX)

    @field_validator("n", "m", mode="before")
    @classmethod
    def _check_digits(cls, value: Any) -> Any:
        if isinstance(value, str) and not UINT_PATTERN.fullmatch(value):
            raise ValueError("must be an unsigned decimal integer")
        return value

    @property
    def operands(self) -> list[int]:
        return [self.n, self.m]
