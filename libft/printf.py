"""A small printf supporting the %c, %s, %p, %d, %i, %u, %x, %X and %% conversions."""

from __future__ import annotations

from typing import Callable, Dict, Iterator, Optional

from libft.output import putstr_fd
from libft.transform import itoa

HEX_SMALL = "0123456789abcdef"
HEX_LARGE = "0123456789ABCDEF"

_UINT_MASK = 0xFFFFFFFF
_POINTER_MASK = 0xFFFFFFFFFFFFFFFF
_STDOUT = 1


def _require_int(value, spec: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{spec} expects an int, got {type(value).__name__}")
    return value


def _to_int32(n: int) -> int:
    """Wrap ``n`` to a signed 32-bit integer."""
    return ((n + 0x80000000) & _UINT_MASK) - 0x80000000


def _hex_digits(value: int, digits: str) -> str:
    if value == 0:
        return digits[0]
    out = []
    while value:
        value, rem = divmod(value, 16)
        out.append(digits[rem])
    return "".join(reversed(out))


def itoa_unsigned(n: int) -> str:
    """Return the decimal form of ``n`` taken as an unsigned 32-bit integer."""
    return str(_require_int(n, "u") & _UINT_MASK)


def format_hex(n: int, spec: str) -> str:
    """Return ``n``, taken as an unsigned 32-bit integer, in hexadecimal.

    ``spec`` selects the case: ``"x"`` for lower case, ``"X"`` for upper case.
    No prefix and no leading zeros are written; zero gives ``"0"``.
    """
    if spec == "x":
        digits = HEX_SMALL
    elif spec == "X":
        digits = HEX_LARGE
    else:
        raise ValueError(f"hex conversion must be 'x' or 'X', got {spec!r}")
    return _hex_digits(_require_int(n, spec) & _UINT_MASK, digits)


def format_pointer(address: Optional[int]) -> str:
    """Return a 64-bit address as ``0x`` followed by lower-case hex, or ``(nil)`` for null."""
    if address is None:
        return "(nil)"
    value = _require_int(address, "p") & _POINTER_MASK
    if value == 0:
        return "(nil)"
    return "0x" + _hex_digits(value, HEX_SMALL)


def _format_char(value) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_require_int(value, "c") & 0xFF)


def _format_str(value) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s expects a str or None, got {type(value).__name__}")
    return value


def _format_int(value) -> str:
    return itoa(_to_int32(_require_int(value, "d")))


_CONVERSIONS: Dict[str, Callable[[object], str]] = {
    "c": _format_char,
    "s": _format_str,
    "p": format_pointer,
    "d": _format_int,
    "i": _format_int,
    "u": itoa_unsigned,
    "x": lambda value: format_hex(value, "x"),
    "X": lambda value: format_hex(value, "X"),
}


def _next_argument(arguments: Iterator, spec: str):
    try:
        return next(arguments)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None


def format_string(fmt: str, *args) -> str:
    """Expand the conversions in ``fmt`` with ``args`` and return the result.

    An unknown conversion character is dropped together with its ``%``, and a
    lone ``%`` at the end of ``fmt`` produces nothing. Surplus arguments are ignored.
    """
    arguments = iter(args)
    characters = iter(fmt)
    pieces = []
    for ch in characters:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(characters, None)
        if spec is None:
            break
        if spec == "%":
            pieces.append("%")
            continue
        convert = _CONVERSIONS.get(spec)
        if convert is not None:
            pieces.append(convert(_next_argument(arguments, spec)))
    return "".join(pieces)


def ft_printf(fmt: str, *args) -> int:
    """Format like :func:`format_string`, write the result to standard output and return its length."""
    text = format_string(fmt, *args)
    putstr_fd(text, _STDOUT)
    return len(text)