"""Number conversion, splitting, joining, trimming and mapping of strings."""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional, Union

_WHITESPACE = frozenset("\t\n\v\f\r ")


def _separator(c: Union[int, str]) -> str:
    if isinstance(c, bool):
        raise TypeError("expected an int or a one-character string, got bool")
    if isinstance(c, int):
        return chr(c & 0xFF)
    if isinstance(c, str) and len(c) == 1:
        return c
    raise ValueError(f"expected a single character, got {c!r}")


def _require_text(value: Optional[str], name: str) -> str:
    if value is None:
        raise TypeError(f"{name} must be a string, not None")
    return value


def atoi(text: str) -> int:
    """Parse a leading decimal integer from ``text``.

    Leading whitespace is skipped and one optional sign is accepted; parsing
    stops at the first non-digit. Text with no digits yields 0.
    """
    position = 0
    while position < len(text) and text[position] in _WHITESPACE:
        position += 1
    sign = 1
    if position < len(text) and text[position] in "+-":
        if text[position] == "-":
            sign = -1
        position += 1
    number = 0
    for ch in text[position:]:
        if not "0" <= ch <= "9":
            break
        number = number * 10 + (ord(ch) - ord("0"))
    return sign * number


def itoa(n: int) -> str:
    """Return the decimal representation of the integer ``n``."""
    return str(int(n))


def split(s: str, c: Union[int, str]) -> List[str]:
    """Split ``s`` on the character ``c``, dropping empty pieces."""
    sep = _separator(c)
    return [word for word in _require_text(s, "s").split(sep) if word]


def striteri(chars: MutableSequence, f: Callable[[int, object], object]) -> None:
    """Replace each element of ``chars`` in place with ``f(index, element)``.

    Processing stops at the first NUL element (``"\\0"`` or ``0``).
    """
    for index, ch in enumerate(chars):
        if ch == "\0" or ch == 0:
            break
        chars[index] = f(index, ch)


def strjoin(s1: str, s2: str) -> str:
    """Return the concatenation of ``s1`` and ``s2``.

    Raises TypeError when either argument is None.
    """
    return _require_text(s1, "s1") + _require_text(s2, "s2")


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Return a new string made of ``f(index, ch)`` for every character of ``s``."""
    return "".join(f(index, ch) for index, ch in enumerate(_require_text(s, "s")))


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    return _require_text(s, "s").strip(_require_text(charset, "charset"))


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` beginning at ``start``.

    A ``start`` past the end of ``s`` yields the empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    text = _require_text(s, "s")
    if start > len(text):
        return ""
    return text[start:start + length]