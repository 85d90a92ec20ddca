"""Tiny greeting helpers and the command that uses them."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

__all__ = ["add", "greeting", "hello", "main"]


def add(first: int, second: int) -> int:
    """Return the sum of two numbers."""
    return first + second


def greeting(name: str, out: TextIO | None = None) -> None:
    """Write ``Hello, <name>!`` and a newline to ``out`` (standard output by default)."""
    (out if out is not None else sys.stdout).write(f"Hello, {name}!\n")


def hello(name: str, out: TextIO | None = None) -> None:
    """Write ``Hello, <name>! `` and a newline to ``out`` (standard output by default)."""
    (out if out is not None else sys.stdout).write(f"Hello, {name}! \n")


def main(argv: list[str] | None = None) -> int:
    """Greet a name on standard output."""
    parser = argparse.ArgumentParser(prog="fringetree-greet", description="Print a greeting.")
    parser.add_argument("name", nargs="?", default="Steve", help="who to greet")
    parser.add_argument(
        "--hello",
        action="store_true",
        help="use the trailing-space greeting form",
    )
    args = parser.parse_args(argv)

    add(2000, 20)
    if args.hello:
        hello(args.name)
    else:
        greeting(args.name)
    return 0


if __name__ == "__main__":
    sys.exit(main())