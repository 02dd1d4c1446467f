"""Classification and case conversion of single ASCII characters."""

from __future__ import annotations

from typing import Union

CharLike = Union[int, str]


def _code(c: CharLike) -> int:
    """Return the integer code of ``c``, which is an int or a one-character str."""
    if isinstance(c, bool):
        raise TypeError("expected an int or a one-character string, got bool")
    if isinstance(c, int):
        return c
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    raise TypeError(f"expected an int or a one-character string, got {type(c).__name__}")


def _like(original: CharLike, code: int) -> CharLike:
    """Return ``code`` in the same form (int or str) as ``original``."""
    return chr(code) if isinstance(original, str) else code


def isalpha(c: CharLike) -> bool:
    """Return True if ``c`` is an ASCII letter."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def isdigit(c: CharLike) -> bool:
    """Return True if ``c`` is an ASCII decimal digit."""
    code = _code(c)
    return ord("0") <= code <= ord("9")


def isalnum(c: CharLike) -> bool:
    """Return True if ``c`` is an ASCII letter or digit."""
    return isalpha(c) or isdigit(c)


def isascii(c: CharLike) -> bool:
    """Return True if ``c`` lies in the 7-bit ASCII range 0..127."""
    return 0 <= _code(c) <= 127


def isprint(c: CharLike) -> bool:
    """Return True if ``c`` is a printable ASCII character (space through tilde)."""
    return 32 <= _code(c) < 127


def tolower(c: CharLike) -> CharLike:
    """Map an ASCII upper-case letter to lower case; anything else is returned unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        return _like(c, code + 32)
    return c


def toupper(c: CharLike) -> CharLike:
    """Map an ASCII lower-case letter to upper case; anything else is returned unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        return _like(c, code - 32)
    return c