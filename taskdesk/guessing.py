"""Number guessing game."""

from __future__ import annotations

import argparse
import random
import re
import sys
from collections.abc import Iterable, Sequence
from enum import Enum
from typing import TextIO

_U32_MAX = 2**32 - 1
_UNSIGNED = re.compile(r"\+?[0-9]+")


class Verdict(Enum):
    """Outcome of comparing a guess with the secret number."""

    LESS = "Too small!"
    GREATER = "Too big!"
    EQUAL = "You win!"

    def __str__(self) -> str:
        return self.value


def parse_guess(text: str) -> int:
    """Parse a guess as an unsigned 32-bit integer, ignoring surrounding whitespace."""
    stripped = text.strip()
    if not _UNSIGNED.fullmatch(stripped):
        raise ValueError(f"not a valid guess: {text!r}")
    value = int(stripped)
    if value > _U32_MAX:
        raise ValueError(f"guess out of range: {text!r}")
    return value


def judge(guess: int, secret: int) -> Verdict:
    """Compare ``guess`` with ``secret``."""
    if guess < secret:
        return Verdict.LESS
    if guess > secret:
        return Verdict.GREATER
    return Verdict.EQUAL


def play(secret: int, lines: Iterable[str], out: TextIO) -> int:
    """Run the game against ``lines`` of input; return the number of valid guesses.

    Unparsable lines are skipped. Raises EOFError if input runs out first.
    """
    source = iter(lines)
    attempts = 0
    while True:
        print("Please input your guess.", file=out)
        try:
            line = next(source)
        except StopIteration:
            raise EOFError("input ended before the number was guessed") from None
        try:
            guess = parse_guess(line)
        except ValueError:
            continue
        attempts += 1
        print(f"You guessed: {guess}", file=out)
        verdict = judge(guess, secret)
        print(verdict, file=out)
        if verdict is Verdict.EQUAL:
            return attempts


def main(argv: Sequence[str] | None = None) -> int:
    """Play one game on standard input and output."""
    parser = argparse.ArgumentParser(description="Guess a number between 1 and 100.")
    parser.parse_args(argv)
    print("Guess the number!")
    secret = random.randint(1, 100)
    try:
        play(secret, sys.stdin, sys.stdout)
    except EOFError:
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())