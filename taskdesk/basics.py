"""Small language-basics demonstrations: constants, functions and rebinding."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

MAX_POINTS = 100_000
PI = 3.1415926535
SECONDS_IN_MINUTE = 60


def add(a: int, b: int) -> int:
    """Return the sum of two integers."""
    return a + b


def multiply(x: int, y: int) -> int:
    """Return the product of two integers."""
    return x * y


def greet(name: str) -> str:
    """Return a greeting for ``name``."""
    return f"Hello, {name}!"


def shadowing_steps(start: int) -> tuple[int, int, int]:
    """Return the successive values of a name rebound as ``x + 1`` then ``x * 2``."""
    incremented = start + 1
    return start, incremented, incremented * 2


def _demo_lines() -> list[str]:
    outer = 8 + 2
    inner = outer * 3
    return [
        "Hello, world!",
        f"Max points: {MAX_POINTS}",
        f"PI = {PI}",
        f"Seconds in a minute: {SECONDS_IN_MINUTE}",
        f"x = {shadowing_steps(5)[-1]}",
        f"x after shadowing: {outer}",
        f"x in inner scope: {inner}",
        f"x after inner scope: {outer}",
        f"3 + 4 = {add(3, 4)}",
        greet("Rustacean"),
        f"6 * 7 = {multiply(6, 7)}",
    ]


def main(argv: Sequence[str] | None = None) -> int:
    """Print the demonstrations."""
    parser = argparse.ArgumentParser(description="Print the basics demonstrations.")
    parser.parse_args(argv)
    for line in _demo_lines():
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())