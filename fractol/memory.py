"""Filling, searching, comparing and copying byte buffers."""

from __future__ import annotations

from typing import Optional, Union

Bytes = Union[bytes, bytearray, memoryview]


def _size(value: int, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{what} must be an int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{what} must not be negative, got {value}")
    return value


def _check_span(buffer: Bytes, offset: int, length: int, what: str) -> None:
    if offset + length > len(buffer):
        raise ValueError(
            f"{what} of {len(buffer)} bytes cannot hold {length} bytes at offset {offset}"
        )


def memset(buffer: bytearray, value: int, length: int) -> bytearray:
    """Set the first ``length`` bytes of ``buffer`` to ``value`` (taken modulo 256)."""
    length = _size(length, "length")
    _check_span(buffer, 0, length, "buffer")
    buffer[:length] = bytes([value & 0xFF]) * length
    return buffer


def bzero(buffer: Optional[bytearray], length: int) -> None:
    """Zero the first ``length`` bytes of ``buffer``; None or zero length does nothing."""
    length = _size(length, "length")
    if buffer is None or length == 0:
        return
    memset(buffer, 0, length)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count`` elements of ``size`` bytes."""
    return bytearray(_size(count, "count") * _size(size, "size"))


def memchr(data: Bytes, value: int, length: int) -> Optional[int]:
    """Index of the first byte equal to ``value`` (modulo 256) in the first ``length`` bytes."""
    length = _size(length, "length")
    _check_span(data, 0, length, "data")
    index = bytes(data[:length]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(a: Bytes, b: Bytes, length: int) -> int:
    """Compare the first ``length`` bytes as unsigned values.

    Returns zero when they agree, otherwise the difference of the first
    differing bytes.
    """
    length = _size(length, "length")
    _check_span(a, 0, length, "first buffer")
    _check_span(b, 0, length, "second buffer")
    for x, y in zip(a[:length], b[:length]):
        if x != y:
            return x - y
    return 0


def memcpy(dst: Optional[bytearray], src: Optional[Bytes], length: int) -> Optional[bytearray]:
    """Copy the first ``length`` bytes of ``src`` into the start of ``dst``."""
    length = _size(length, "length")
    if (dst is None and src is None) or length == 0:
        return dst
    if dst is None or src is None:
        raise ValueError("memcpy needs both a destination and a source")
    _check_span(src, 0, length, "source")
    _check_span(dst, 0, length, "destination")
    dst[:length] = bytes(src[:length])
    return dst


def memmove(buffer: bytearray, dst_offset: int, src_offset: int, length: int) -> bytearray:
    """Copy ``length`` bytes within ``buffer``; the two ranges may overlap."""
    dst_offset = _size(dst_offset, "dst_offset")
    src_offset = _size(src_offset, "src_offset")
    length = _size(length, "length")
    if length == 0 or dst_offset == src_offset:
        return buffer
    _check_span(buffer, src_offset, length, "buffer")
    _check_span(buffer, dst_offset, length, "buffer")
    buffer[dst_offset:dst_offset + length] = bytes(buffer[src_offset:src_offset + length])
    return buffer