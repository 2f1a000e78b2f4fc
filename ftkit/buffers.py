"""Byte-buffer helpers modelled on the classic memory routines.

The buffers are any writable objects supporting the buffer protocol
(``bytearray``, ``memoryview`` and the like). Overlapping regions are
expressed as memoryview slices of the same underlying buffer.
"""

from __future__ import annotations

__all__ = ["memcpy", "memmove", "memset"]


def _check_count(n: int, *buffers) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buffer in buffers:
        if n > len(buffer):
            raise ValueError(
                f"byte count {n} exceeds buffer length {len(buffer)}"
            )


def memcpy(dst, src, n: int):
    """Copy the first ``n`` bytes of ``src`` into ``dst`` and return ``dst``.

    Copying a buffer onto itself is a no-op.
    """
    _check_count(n, dst, src)
    if dst is src:
        return dst
    dst[:n] = src[:n]
    return dst


def memmove(dst, src, n: int):
    """Copy ``n`` bytes from ``src`` to ``dst``; the regions may overlap."""
    _check_count(n, dst, src)
    if n == 0 or dst is src:
        return dst
    # Taking a snapshot first keeps overlapping copies correct.
    dst[:n] = bytes(src[:n])
    return dst


def memset(buf, value: int, n: int):
    """Fill the first ``n`` bytes of ``buf`` with ``value`` as an unsigned byte."""
    _check_count(n, buf)
    buf[:n] = bytes([value & 0xFF]) * n
    return buf