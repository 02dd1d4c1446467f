import pytest

from libft.memory import bzero, calloc, memchr, memcmp, memcpy, memmove, memset


def test_memset_fills_prefix_and_returns_buffer():
    buf = bytearray(b"abcdef")
    result = memset(buf, ord("x"), 3)
    assert result is buf
    assert buf[:3] == b"xxx"
    assert buf[3:] == b"def"


def test_memset_truncates_value_to_byte():
    buf = bytearray(4)
    memset(buf, 0x141, 4)
    assert buf == bytes([0x41]) * 4


def test_memset_zero_count_changes_nothing():
    buf = bytearray(b"keep")
    memset(buf, 0, 0)
    assert buf == bytearray(b"keep")


def test_bzero_clears_prefix():
    buf = bytearray(b"hello")
    assert bzero(buf, 2) is None
    assert buf[:2] == bytes(2)
    assert buf[2:] == b"llo"


def test_calloc_returns_zeroed_buffer_of_product_size():
    buf = calloc(3, 4)
    assert isinstance(buf, bytearray)
    assert buf == bytes(12)


def test_calloc_zero_size():
    assert calloc(0, 8) == bytearray()


def test_calloc_rejects_negative():
    with pytest.raises(ValueError):
        calloc(-1, 4)


def test_memchr_finds_first_occurrence():
    data = b"abcabc"
    assert memchr(data, ord("c"), len(data)) == data.index(b"c")


def test_memchr_respects_count():
    data = b"abcabc"
    assert memchr(data, ord("c"), 2) is None


def test_memchr_truncates_search_value():
    data = bytes([1, 2, 3])
    assert memchr(data, 0x100 + 2, 3) == 1


def test_memchr_missing_returns_none():
    assert memchr(b"xyz", ord("a"), 3) is None


def test_memcmp_equal_prefix_is_zero():
    assert memcmp(b"abcX", b"abcY", 3) == 0


def test_memcmp_sign_reflects_order():
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abd", b"abc", 3) > 0


def test_memcmp_is_unsigned_byte_difference():
    a, b = bytes([0xFF]), bytes([0x01])
    assert memcmp(a, b, 1) == a[0] - b[0]
    assert memcmp(b, a, 1) == -(a[0] - b[0])


def test_memcmp_antisymmetric():
    a, b = b"hello", b"help!"
    assert memcmp(a, b, 5) == -memcmp(b, a, 5)


def test_memcpy_copies_and_returns_dest():
    dest = bytearray(6)
    result = memcpy(dest, b"abcdef", 4)
    assert result is dest
    assert dest[:4] == b"abcd"
    assert dest[4:] == bytes(2)


def test_memcpy_both_none_returns_none():
    assert memcpy(None, None, 5) is None


def test_memcpy_rejects_count_past_source():
    with pytest.raises(ValueError):
        memcpy(bytearray(10), b"ab", 5)


def test_memmove_overlapping_forward():
    buf = bytearray(b"abcdef")
    view = memoryview(buf)
    dest = view[2:]
    result = memmove(dest, view, 4)
    assert result is dest
    assert bytes(result) == b"abcd"
    assert buf == bytearray(b"ababcd")


def test_memmove_overlapping_backward():
    buf = bytearray(b"abcdef")
    view = memoryview(buf)
    result = memmove(view, view[2:], 4)
    assert result is view
    assert bytes(result) == b"cdefef"
    assert buf == bytearray(b"cdefef")


def test_memmove_returns_dest():
    dest = bytearray(3)
    assert memmove(dest, b"xyz", 3) is dest
    assert dest == bytearray(b"xyz")


def test_negative_count_rejected():
    with pytest.raises(ValueError):
        memset(bytearray(3), 0, -1)


def test_count_past_buffer_rejected():
    with pytest.raises(ValueError):
        bzero(bytearray(2), 3)