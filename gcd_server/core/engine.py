"""GCD engine.

Euclid's algorithm over unsigned integers, folded left to right when more
than two operands are given. ``gcd`` itself asserts its precondition;
user input goes through ``validate_operands`` first, which reports bad
operands as an error result instead of raising.
"""

from __future__ import annotations

from functools import reduce
from typing import Iterable, Sequence

from gcd_server.core.types import UINT64_MAX, GcdResult


ZERO_OPERAND_MESSAGE = "Computing the GCD with zero is boring."


def gcd(a: int, b: int) -> int:
    """Compute the greatest common divisor of two positive integers.

    Args:
        a: First operand, must be non-zero
        b: Second operand, must be non-zero

    Returns:
        The largest positive integer dividing both operands
    """
    assert a != 0 and b != 0, "gcd operands must be non-zero"

    while b != 0:
        if b < a:
            a, b = b, a
        b = b % a
    return a


def gcd_all(numbers: Iterable[int]) -> int:
    """Fold ``gcd`` over an operand set: gcd(gcd(gcd(x1, x2), x3), ...)."""
    numbers = list(numbers)
    if not numbers:
        raise ValueError("at least one operand is required")
    assert all(numbers), "gcd operands must be non-zero"
    return reduce(gcd, numbers[1:], numbers[0])


def validate_operands(numbers: Sequence[int]) -> GcdResult | None:
    """
    Check that an operand set can be handed to the engine.

    Args:
        numbers: Operands in submission order

    Returns:
        An error result describing the first problem found, or None if
        every operand is a non-zero unsigned 64-bit integer
    """
    operands = list(numbers)

    if not operands:
        return GcdResult.error("At least one number is required.")

    for value in operands:
        if value < 0 or value > UINT64_MAX:
            return GcdResult.error(
                f"{value} is not an unsigned 64-bit integer.",
                operands=operands,
            )
        if value == 0:
            return GcdResult.error(ZERO_OPERAND_MESSAGE, operands=operands)

    return None


def compute(numbers: Sequence[int]) -> GcdResult:
    """Validate an operand set and compute its greatest common divisor."""
    operands = list(numbers)

    problem = validate_operands(operands)
    if problem is not None:
        return problem

    return GcdResult.success(operands, gcd_all(operands))
