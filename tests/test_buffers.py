import pytest

from ftkit.buffers import memcpy, memmove, memset


def test_memcpy_copies_prefix_and_keeps_rest():
    dst = bytearray(b"xxxxx")
    result = memcpy(dst, b"abc", 3)
    assert result is dst
    assert dst[:3] == b"abc"
    assert dst[3:] == b"xx"


def test_memcpy_zero_bytes_leaves_buffer():
    dst = bytearray(b"keep")
    memcpy(dst, b"abcd", 0)
    assert dst == bytearray(b"keep")


def test_memcpy_same_buffer_is_unchanged():
    buf = bytearray(b"same")
    assert memcpy(buf, buf, 4) == bytearray(b"same")


def test_memcpy_rejects_count_past_end():
    with pytest.raises(ValueError):
        memcpy(bytearray(2), b"abc", 3)


def test_memcpy_rejects_negative_count():
    with pytest.raises(ValueError):
        memcpy(bytearray(2), b"ab", -1)


def test_memmove_overlap_forward():
    buf = bytearray(b"abcdef")
    original = bytes(buf)
    view = memoryview(buf)
    result = memmove(view[2:], view, 4)
    assert bytes(result[:4]) == original[0:4]
    assert bytes(buf[2:6]) == original[0:4]
    assert bytes(buf[:2]) == original[:2]


def test_memmove_overlap_backward():
    buf = bytearray(b"abcdef")
    original = bytes(buf)
    view = memoryview(buf)
    result = memmove(view, view[2:], 4)
    assert bytes(result[:4]) == original[2:6]
    assert bytes(buf[:4]) == original[2:6]
    assert bytes(buf[4:]) == original[4:]


def test_memmove_zero_count_returns_dst_untouched():
    dst = bytearray(b"xyz")
    assert memmove(dst, b"abc", 0) is dst
    assert dst == bytearray(b"xyz")


def test_memmove_rejects_count_past_end():
    with pytest.raises(ValueError):
        memmove(bytearray(4), b"ab", 3)


def test_memset_fills_prefix():
    buf = bytearray(5)
    result = memset(buf, ord("z"), 3)
    assert result is buf
    assert buf[:3] == bytes([ord("z")]) * 3
    assert buf[3:] == bytes(2)


def test_memset_truncates_value_to_byte():
    buf = bytearray(4)
    memset(buf, 256 + ord("A"), 4)
    assert buf.count(ord("A")) == 4


def test_memset_rejects_negative_count():
    with pytest.raises(ValueError):
        memset(bytearray(3), 0, -2)