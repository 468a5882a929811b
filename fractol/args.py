"""Command-line arguments: choosing the fractal and reading Julia constants."""

from __future__ import annotations

from typing import Sequence

from .chars import is_digit
from .fractal import FractalKind, FractalState

USAGE = "./fractol Mandelbrot\n./fractol Julia x.set y.set\n"
BONUS_USAGE = "./fracol Tricorn"


class UsageError(Exception):
    """The arguments do not name a fractal the program can draw."""

    def __init__(self, usage: str) -> None:
        super().__init__(usage)
        self.usage = usage


def is_decimal(text: str) -> bool:
    """True if ``text`` is made of digits, minus signs and dots between digits.

    A minus sign may stand before any character, and a dot needs a digit on
    each side. The empty string is accepted.
    """
    length = len(text)
    i = 0
    while i < length:
        if text[i] == "-":
            i += 1
            if i == length:
                return False
        ch = text[i]
        dot_between_digits = (
            ch == "."
            and i > 0
            and is_digit(text[i - 1])
            and i + 1 < length
            and is_digit(text[i + 1])
        )
        if is_digit(ch) or dot_between_digits:
            i += 1
        else:
            return False
    return True


def parse_decimal(text: str) -> float:
    """Read a leading decimal number such as ``-0.8``.

    Any run of leading signs is accepted, each minus flipping the sign;
    reading stops at the first character that does not fit.
    """
    length = len(text)
    i = 0
    sign = 1
    while i < length and text[i] in "+-":
        if text[i] == "-":
            sign = -sign
        i += 1
    whole = 0.0
    while i < length and is_digit(text[i]):
        whole = whole * 10 + int(text[i])
        i += 1
    fraction = 0.0
    place = 1.0
    if i < length and text[i] == ".":
        i += 1
        while i < length and is_digit(text[i]):
            fraction = fraction * 10 + int(text[i])
            place *= 10
            i += 1
    return sign * (whole + fraction / place)


def matches_name(arg: str, name: str) -> bool:
    """True if ``arg`` is ``name`` or a leading part of it."""
    return name.startswith(arg)


def parse_args(argv: Sequence[str]) -> FractalState:
    """Build the state for ``Mandelbrot`` or ``Julia x y``.

    ``argv`` holds the arguments after the program name.
    """
    if len(argv) == 1 and matches_name(argv[0], FractalKind.MANDELBROT.value):
        return FractalState(kind=FractalKind.MANDELBROT)
    if (
        len(argv) == 3
        and matches_name(argv[0], FractalKind.JULIA.value)
        and is_decimal(argv[1])
        and is_decimal(argv[2])
    ):
        return FractalState(
            kind=FractalKind.JULIA,
            julia=complex(parse_decimal(argv[1]), parse_decimal(argv[2])),
        )
    raise UsageError(USAGE)


def parse_bonus_args(argv: Sequence[str]) -> FractalState:
    """Build the state for ``Tricorn``; ``argv`` excludes the program name."""
    if len(argv) == 1 and matches_name(argv[0], FractalKind.TRICORN.value):
        return FractalState(kind=FractalKind.TRICORN)
    raise UsageError(BONUS_USAGE)