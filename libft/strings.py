"""Searching, comparing, measuring and bounded copying of NUL-terminated strings.

Text arguments may be ``str`` or bytes-like objects. As with C strings, only
the part before the first NUL character is taken into account.
"""

from __future__ import annotations

from typing import Optional, Union

Text = Union[str, bytes, bytearray, memoryview]
CharLike = Union[int, str]


def _terminated(s: Text) -> Union[str, bytes]:
    """Return the part of ``s`` that precedes its first NUL character."""
    if isinstance(s, str):
        return s.split("\0", 1)[0]
    return bytes(s).split(b"\0", 1)[0]


def _as_bytes(s: Text) -> bytes:
    """Return the terminated content of ``s`` as bytes, encoding ``str`` as UTF-8."""
    text = _terminated(s)
    return text.encode("utf-8") if isinstance(text, str) else text


def _code(c: CharLike) -> int:
    """Return the character code of ``c``; integers are truncated to one byte."""
    if isinstance(c, bool):
        raise TypeError("expected an int or a one-character string, got bool")
    if isinstance(c, int):
        return c & 0xFF
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    raise TypeError(f"expected an int or a one-character string, got {type(c).__name__}")


def _needle(text: Union[str, bytes], code: int) -> Union[str, bytes]:
    if isinstance(text, str):
        return chr(code)
    if code > 0xFF:
        raise ValueError(f"character code {code} does not fit in a byte")
    return bytes([code])


def _check_size(size: int, buf) -> None:
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size > len(buf):
        raise ValueError(f"size {size} exceeds buffer length {len(buf)}")


def strlen(s: Text) -> int:
    """Return the number of characters before the first NUL in ``s``."""
    return len(_terminated(s))


def strdup(s: Text) -> Union[str, bytes]:
    """Return a new copy of ``s`` up to its first NUL."""
    return _terminated(s)


def strchr(s: Text, c: CharLike) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``, or None if it does not occur.

    Searching for NUL yields the index of the terminator, i.e. the length of ``s``.
    """
    text = _terminated(s)
    code = _code(c)
    if code == 0:
        return len(text)
    index = text.find(_needle(text, code))
    return None if index < 0 else index


def strrchr(s: Text, c: CharLike) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``, or None if it does not occur.

    Searching for NUL yields the index of the terminator, i.e. the length of ``s``.
    """
    text = _terminated(s)
    code = _code(c)
    if code == 0:
        return len(text)
    index = text.rfind(_needle(text, code))
    return None if index < 0 else index


def strncmp(s1: Text, s2: Text, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns the difference of the first unequal character codes, the end of a
    string counting as code 0, or 0 when the compared parts are equal.
    """
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")
    a = _terminated(s1)
    b = _terminated(s2)
    codes_a = [ord(ch) for ch in a] if isinstance(a, str) else list(a)
    codes_b = [ord(ch) for ch in b] if isinstance(b, str) else list(b)
    limit = min(n, max(len(codes_a), len(codes_b)))
    for position in range(limit):
        x = codes_a[position] if position < len(codes_a) else 0
        y = codes_b[position] if position < len(codes_b) else 0
        if x != y:
            return x - y
    return 0


def strnstr(big: Text, little: Text, length: int) -> Optional[int]:
    """Find ``little`` wholly within the first ``length`` characters of ``big``.

    Returns the index of the first match, 0 when ``little`` is empty, or None.
    """
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    haystack = _terminated(big)
    needle = _terminated(little)
    if not needle:
        return 0
    index = haystack.find(needle, 0, min(length, len(haystack)))
    return None if index < 0 else index


def strlcpy(dst: bytearray, src: Text, size: int) -> int:
    """Copy ``src`` into ``dst`` so that at most ``size`` bytes, NUL included, are written.

    Returns the length of ``src``; a result of ``size`` or more means truncation.
    """
    _check_size(size, dst)
    data = _as_bytes(src)
    if size == 0:
        return len(data)
    chunk = data[: size - 1]
    dst[: len(chunk)] = chunk
    dst[len(chunk)] = 0
    return len(data)


def strlcat(dest: bytearray, src: Text, size: int) -> int:
    """Append ``src`` to the NUL-terminated string in ``dest`` within ``size`` bytes.

    Returns the length of the string it tried to create. When ``dest`` already
    fills ``size`` bytes, nothing is written and ``size + len(src)`` is returned.
    """
    _check_size(size, dest)
    data = _as_bytes(src)
    current = bytes(dest).find(0)
    if current < 0:
        current = len(dest)
    if current >= size:
        return size + len(data)
    chunk = data[: size - 1 - current]
    end = current + len(chunk)
    dest[current:end] = chunk
    dest[end] = 0
    return current + len(data)