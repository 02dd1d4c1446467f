"""Byte-buffer operations on mutable buffers such as bytearray and memoryview."""

from __future__ import annotations

from typing import Optional


def _check_count(n: int, *buffers) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"byte count {n} exceeds buffer length {len(buf)}")


def memset(buf, c: int, n: int):
    """Fill the first ``n`` bytes of ``buf`` with ``c`` (truncated to a byte); return ``buf``."""
    _check_count(n, buf)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    memset(buf, 0, n)


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``nmemb * size`` bytes."""
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    return bytearray(nmemb * size)


def memchr(buf, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``c`` among the first ``n`` bytes, or None."""
    _check_count(n, buf)
    index = bytes(buf[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a, b, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference of the first unequal pair, else 0."""
    _check_count(n, a, b)
    return next((x - y for x, y in zip(bytes(a[:n]), bytes(b[:n])) if x != y), 0)


def memcpy(dest, src, n: int):
    """Copy ``n`` bytes from ``src`` to the start of ``dest``; return ``dest``.

    When both ``dest`` and ``src`` are None, None is returned.
    """
    if dest is None and src is None:
        return None
    _check_count(n, dest, src)
    dest[:n] = src[:n]
    return dest


def memmove(dest, src, n: int):
    """Copy ``n`` bytes from ``src`` to ``dest``, correct even when the regions overlap."""
    _check_count(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest