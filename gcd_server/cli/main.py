"""CLI entry point for gcd-server.

Computes the greatest common divisor of the numbers given on the command line.
"""

from __future__ import annotations

import argparse
import sys

from gcd_server import __version__
from gcd_server.core.engine import compute
from gcd_server.core.types import UINT64_MAX, UINT_PATTERN


USAGE = "Usage: gcd NUMBER ..."


def parse_operand(text: str) -> int:
    """Parse a command-line argument as an unsigned 64-bit integer."""
    if not UINT_PATTERN.fullmatch(text):
        raise argparse.ArgumentTypeError(f"error parsing argument: {text!r}")
    value = int(text)
    if value > UINT64_MAX:
        raise argparse.ArgumentTypeError(
            f"error parsing argument: {text!r} is not an unsigned 64-bit integer"
        )
    return value


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="gcd",
        description="Compute the greatest common divisor of one or more numbers.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Two numbers
  gcd 12 18

  # Any number of operands, folded left to right
  gcd 2310 4389 1155
        """,
    )

    parser.add_argument(
        "numbers",
        metavar="NUMBER",
        type=parse_operand,
        nargs="*",
        help="Positive integer operand",
    )

    parser.add_argument(
        "--version", "-v",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.numbers:
        print(USAGE, file=sys.stderr)
        return 1

    result = compute(args.numbers)

    if not result.ok:
        print(f"error: {result.message}", file=sys.stderr)
        return 1

    print(result.message)
    return 0


if __name__ == "__main__":
    sys.exit(main())
