# libft

Small, dependency-free helpers with the semantics of familiar C library
routines: character classification, byte-buffer operations, bounded
NUL-terminated string routines, number conversion, splitting and trimming,
and a minimal `printf`.

Where a C routine would hand back a pointer, these functions return an index
(or `None` when nothing is found). Where C would read past a buffer or
accept a negative size, they raise `ValueError` instead.

## Installation

```
pip install .
```

Python 3.10 or newer; no runtime dependencies.

## Modules

| Module            | Contents |
|-------------------|----------|
| `libft.chars`     | `isalnum`, `isalpha`, `isascii`, `isdigit`, `isprint`, `tolower`, `toupper`. Each takes an int code or a one-character string; `tolower`/`toupper` return the same kind they were given. |
| `libft.memory`    | `bzero`, `calloc`, `memchr`, `memcmp`, `memcpy`, `memmove`, `memset` on mutable buffers such as `bytearray`. `calloc` returns a zero-filled `bytearray`; `memchr` returns an index or `None`. |
| `libft.output`    | `putchar_fd`, `putstr_fd`, `putendl_fd`, `putnbr_fd`: write text (UTF-8) or a decimal number to a file descriptor. |
| `libft.strings`   | `strchr`, `strrchr`, `strdup`, `strlen`, `strncmp`, `strnstr`, `strlcpy`, `strlcat`. Text may be `str` or bytes-like; only the part before the first NUL counts. `strlcpy` and `strlcat` write into a `bytearray` and return the length they tried to create. |
| `libft.transform` | `atoi`, `itoa`, `split`, `striteri`, `strjoin`, `strmapi`, `strtrim`, `substr`. |
| `libft.printf`    | `ft_printf`, `format_string`, `format_hex`, `format_pointer`, `itoa_unsigned`. |

## Examples

```python
from libft.transform import atoi, itoa, split, strtrim
from libft.strings import strchr, strlcpy
from libft.printf import format_string, ft_printf

atoi("   -42abc")          # -42
itoa(-2147483648)          # "-2147483648"
split("  a b  c ", " ")    # ["a", "b", "c"]
strtrim("xxhixx", "x")     # "hi"
strchr("hello", "l")       # 2

buf = bytearray(4)
strlcpy(buf, "hello", 4)   # 5; buf is now b"hel\x00"

format_string("%d%% of %s is %x", 50, "ff", 255)   # "50% of ff is ff"
count = ft_printf("%c|%u\n", "A", -1)              # prints "A|4294967295", returns 13
```

## printf conversions

`ft_printf` and `format_string` understand `%c`, `%s`, `%p`, `%d`, `%i`,
`%u`, `%x`, `%X` and `%%`.

- `%d` and `%i` wrap their argument to a signed 32-bit integer; `%u`, `%x`
  and `%X` take it as an unsigned 32-bit integer.
- `%s` with `None` gives `(null)`; `%p` with `None` or 0 gives `(nil)`,
  otherwise `0x` followed by lower-case hex.
- An unknown conversion character is dropped together with its `%`, and a
  lone `%` at the end of the format produces nothing. Too few arguments
  raise `TypeError`; surplus arguments are ignored.

`ft_printf` writes the result to standard output and returns its length;
`format_string` returns the text without printing it.

## What it does not do

The `printf` here has no flags, field widths, precisions or length
modifiers, and no floating-point conversions. There is no command-line
program; the package is a library only.

## Running the tests

```
pip install .[test]
pytest
```