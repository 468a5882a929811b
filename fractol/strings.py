"""Searching, comparing, slicing and building text."""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional, Tuple, Union

CharLike = Union[int, str]

_TERMINATOR = "\0"


def _char(c: CharLike) -> str:
    """Return the one-character string for a character or a byte value."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c % 256)


def _size(value: int, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{what} must be an int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{what} must not be negative, got {value}")
    return value


def strlen(s: str) -> int:
    """Return the number of characters in ``s``."""
    return len(s)


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first ``c`` in ``s``, ``len(s)`` for the terminator, else None."""
    ch = _char(c)
    if ch == _TERMINATOR:
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last ``c`` in ``s``, ``len(s)`` for the terminator, else None."""
    ch = _char(c)
    if ch == _TERMINATOR:
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns zero when they agree, otherwise the difference between the code
    points of the first differing characters, the end of a string counting
    as code point zero.
    """
    n = _size(n, "n")
    for a, b in zip(s1[:n], s2[:n]):
        if a != b:
            return ord(a) - ord(b)
    common = min(len(s1), len(s2), n)
    if common == n:
        return 0
    first = ord(s1[common]) if common < len(s1) else 0
    second = ord(s2[common]) if common < len(s2) else 0
    return first - second


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` wholly inside the first ``length`` characters, else None.

    An empty needle is found at index 0.
    """
    length = _size(length, "length")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strdup(s: str) -> str:
    """Return a copy of ``s``."""
    return "".join(s)


def substr(s: Optional[str], start: int, length: int) -> Optional[str]:
    """Return at most ``length`` characters of ``s`` from ``start``.

    A start past the end gives an empty string; None gives None.
    """
    start = _size(start, "start")
    length = _size(length, "length")
    if s is None:
        return None
    if start > len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: Optional[str], s2: Optional[str]) -> str:
    """Concatenate two strings; a missing string counts as empty."""
    return (s1 or "") + (s2 or "")


def strtrim(s: Optional[str], charset: Optional[str]) -> Optional[str]:
    """Strip characters of ``charset`` from both ends of ``s``.

    A remainder of one character or less is returned as an empty string.
    None for either argument gives None.
    """
    if s is None or charset is None:
        return None
    start = 0
    while start < len(s) and s[start] in charset:
        start += 1
    end = len(s) - 1
    while end >= start and s[end] in charset:
        end -= 1
    if start >= end:
        return ""
    return s[start:end + 1]


def split(s: Optional[str], sep: CharLike) -> Optional[list[str]]:
    """Split ``s`` on ``sep``, dropping empty words; None gives None."""
    ch = _char(sep)
    if s is None:
        return None
    return [word for word in s.split(ch) if word]


def strmapi(s: Optional[str], func: Optional[Callable[[int, str], str]]) -> Optional[str]:
    """Build a string from ``func(index, char)`` applied to every character."""
    if s is None or func is None:
        return None
    return "".join(func(index, ch) for index, ch in enumerate(s))


def striteri(
    s: Optional[MutableSequence[str]],
    func: Optional[Callable[[int, str], Optional[str]]],
) -> None:
    """Call ``func(index, char)`` for every character of a mutable sequence.

    A non-None result replaces the character in place.
    """
    if s is None or func is None:
        return
    for index, ch in enumerate(s):
        if ch == _TERMINATOR:
            break
        replacement = func(index, ch)
        if replacement is not None:
            s[index] = replacement


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters including the terminator.

    Returns the text that fits and the full length of ``src``.
    """
    size = _size(size, "size")
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the result tried to reach.
    """
    size = _size(size, "size")
    src_len = len(src)
    if size == 0:
        return dst, src_len
    dst_len = len(dst)
    if size <= dst_len:
        return dst, size + src_len
    if size <= dst_len + 1:
        return dst, dst_len + src_len
    return dst + src[:size - 1 - dst_len], dst_len + src_len