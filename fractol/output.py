"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

from typing import Optional, TextIO


def put_char(c: str, stream: TextIO) -> None:
    """Write a single character."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    stream.write(c)


def put_str(s: Optional[str], stream: TextIO) -> None:
    """Write a string; None writes nothing."""
    if s is not None:
        stream.write(s)


def put_endl(s: Optional[str], stream: TextIO) -> None:
    """Write a string followed by a newline."""
    put_str(s, stream)
    stream.write("\n")


def put_nbr(n: int, stream: TextIO) -> None:
    """Write the decimal text of an integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    stream.write(str(n))