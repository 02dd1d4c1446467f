import os

import pytest

from libft.output import putchar_fd, putendl_fd, putnbr_fd, putstr_fd


def _capture(action):
    read_end, write_end = os.pipe()
    try:
        action(write_end)
    finally:
        os.close(write_end)
    with os.fdopen(read_end, "rb") as reader:
        return reader.read()


def test_putchar_fd_writes_one_character():
    assert _capture(lambda fd: putchar_fd("z", fd)) == b"z"


def test_putchar_fd_rejects_longer_strings():
    read_end, write_end = os.pipe()
    try:
        with pytest.raises(ValueError):
            putchar_fd("ab", write_end)
    finally:
        os.close(read_end)
        os.close(write_end)


def test_putstr_fd_writes_string():
    text = "hello, world"
    assert _capture(lambda fd: putstr_fd(text, fd)) == text.encode()


def test_putstr_fd_empty_writes_nothing():
    assert _capture(lambda fd: putstr_fd("", fd)) == b""


def test_putendl_fd_appends_newline():
    text = "line"
    assert _capture(lambda fd: putendl_fd(text, fd)) == text.encode() + b"\n"


def test_putendl_fd_empty_is_just_newline():
    assert _capture(lambda fd: putendl_fd("", fd)) == b"\n"


@pytest.mark.parametrize("n", [0, 7, -7, 42, 2147483647, -2147483647, 1000000])
def test_putnbr_fd_round_trips(n):
    assert int(_capture(lambda fd: putnbr_fd(n, fd))) == n


def test_putnbr_fd_min_int():
    assert _capture(lambda fd: putnbr_fd(-2147483648, fd)) == b"-2147483648"


def test_putnbr_fd_zero_is_single_digit():
    assert _capture(lambda fd: putnbr_fd(0, fd)) == b"0"


def test_putnbr_fd_negative_has_leading_minus():
    out = _capture(lambda fd: putnbr_fd(-305, fd))
    assert out.startswith(b"-")
    assert out[1:].isdigit()


def test_writes_to_file(tmp_path):
    path = tmp_path / "out.txt"
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC)
    try:
        putstr_fd("ab", fd)
        putchar_fd("c", fd)
        putendl_fd("", fd)
        putnbr_fd(-12, fd)
    finally:
        os.close(fd)
    assert path.read_bytes() == b"abc\n-12"


def test_closed_descriptor_raises():
    read_end, write_end = os.pipe()
    os.close(read_end)
    os.close(write_end)
    with pytest.raises(OSError):
        putstr_fd("x", write_end)