"""Rendering of the decimal conversions and dispatch of any conversion.

The signed, unsigned and unsigned-long-long renderers take a parsed
FormatSpec and return the text the conversion produces.
``render_conversion`` picks the right renderer for a spec, narrowing the
argument to the width its length modifier implies.
"""

from __future__ import annotations

from .conversions import (
    NULL_STRING,
    render_hex,
    render_hex_long,
    render_hex_long_long,
    render_percent,
    render_pointer,
    render_string,
    render_wide_string,
)
from .radix import conversion_base, pad_spaces, pad_zeros, to_base
from .spec import FormatSpec

__all__ = [
    "render_signed",
    "render_unsigned",
    "render_unsigned_long",
    "render_conversion",
]

_INT_BITS = 32
_LONG_BITS = 64
_LONG_LONG_BITS = 64


def _wrap_signed(value: int, bits: int) -> int:
    mask = (1 << bits) - 1
    value &= mask
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _wrap_unsigned(value: int, bits: int) -> int:
    return value & ((1 << bits) - 1)


def _prepare(spec: FormatSpec) -> tuple[bool, int, int, bool]:
    """Alignment, width, precision and precision flag after normalising.

    A negative width means left alignment; a negative precision counts
    as no precision at all.
    """
    left = spec.left
    width = spec.width
    precision = spec.precision
    has_precision = spec.has_precision
    if width < 0:
        width = -width
        left = True
    if precision < 0:
        precision = 0
        has_precision = False
    return left, width, precision, has_precision


def _digits(spec: FormatSpec, value: int) -> str:
    return to_base(value, conversion_base(spec.conversion), lowercase=False)


def _pad_plain(left: bool, zero: bool, width: int, text: str) -> str:
    gap = width - len(text)
    if left:
        return text + pad_spaces(gap)
    if zero:
        return pad_zeros(gap) + text
    return pad_spaces(gap) + text


def _render_negative(spec: FormatSpec, value: int) -> str:
    left, width, precision, has_precision = _prepare(spec)
    digits = _digits(spec, value)
    length = len(digits)
    if spec.zero and not spec.dot:
        return "-" + pad_zeros(width - length - 1) + digits
    if has_precision:
        if length >= max(precision, width):
            return "-" + digits
        body = "-" + pad_zeros(precision - length) + digits
        if precision >= width:
            return body
        if left:
            return body + pad_spaces(width - precision - 1)
        return pad_spaces(width - max(precision, length) - 1) + body
    if left:
        return "-" + digits + pad_spaces(width - length - 1)
    if spec.zero:
        return "-" + pad_zeros(width - length - 1) + digits
    return pad_spaces(width - length - 1) + "-" + digits


def render_signed(spec: FormatSpec, value: int) -> str:
    """Render a signed integer in decimal."""
    if value < 0:
        return _render_negative(spec, value)
    left, width, precision, has_precision = _prepare(spec)
    if value == 0 and precision == 0 and spec.dot:
        return pad_spaces(width)
    digits = _digits(spec, value)
    length = len(digits)
    if spec.zero and precision == 0:
        return pad_zeros(width - length) + digits
    if has_precision:
        if value == 0 and precision == 0:
            return pad_spaces(width)
        if length >= max(precision, width):
            return digits
        body = pad_zeros(precision - length) + digits
        if precision >= width:
            return body
        padding = pad_spaces(width - max(precision, length))
        return body + padding if left else padding + body
    text = "" if value == 0 and spec.dot else digits
    return _pad_plain(left, spec.zero, width, text)


def _check_unsigned(value: int) -> None:
    if value < 0:
        raise ValueError(f"unsigned value must not be negative, got {value}")


def render_unsigned(spec: FormatSpec, value: int) -> str:
    """Render an unsigned int or unsigned long in decimal."""
    _check_unsigned(value)
    left, width, precision, has_precision = _prepare(spec)
    if value == 0 and precision == 0 and spec.dot:
        return pad_spaces(width)
    digits = _digits(spec, value)
    length = len(digits)
    if spec.zero and precision == 0:
        return pad_zeros(width - length) + digits
    if has_precision:
        if length >= max(precision, width):
            return digits
        if precision >= width:
            return pad_zeros(precision - length) + digits
        if precision > length:
            body = pad_zeros(precision - length) + digits
            padding = pad_spaces(width - precision)
        else:
            body = digits
            padding = pad_spaces(width - length)
        return body + padding if left else padding + body
    return _pad_plain(left, spec.zero, width, digits)


def render_unsigned_long(spec: FormatSpec, value: int) -> str:
    """Render an unsigned long long in decimal."""
    _check_unsigned(value)
    left, width, precision, has_precision = _prepare(spec)
    if value == 0 and precision == 0 and spec.dot:
        return pad_spaces(width)
    digits = _digits(spec, value)
    length = len(digits)
    if spec.zero and precision == 0:
        return pad_zeros(width - length) + digits
    if has_precision:
        if length >= max(precision, width):
            return digits
        body = pad_zeros(precision - length) + digits
        if precision >= width:
            return body
        # The padding is measured from the precision, even when the
        # digits are longer than it.
        padding = pad_spaces(width - precision)
        return body + padding if left else padding + body
    return _pad_plain(left, spec.zero, width, digits)


def _unsupported(spec: FormatSpec) -> ValueError:
    return ValueError(f"conversion {spec.conversion!r} is not supported")


def _render_long(spec: FormatSpec, value) -> str:
    conversion = spec.conversion
    if conversion in ("s", "S"):
        return render_wide_string(spec, value)
    if conversion == "c":
        raise _unsupported(spec)
    if conversion in ("x", "X"):
        return render_hex_long(spec, value)
    if conversion in ("d", "i"):
        return render_signed(spec, _wrap_signed(value, _LONG_BITS))
    if conversion == "u":
        return render_unsigned(spec, _wrap_unsigned(value, _LONG_BITS))
    return ""


def _render_long_long(spec: FormatSpec, value) -> str:
    conversion = spec.conversion
    if conversion in ("x", "X"):
        return render_hex_long_long(spec, value)
    if conversion in ("d", "i"):
        return render_signed(spec, _wrap_signed(value, _LONG_LONG_BITS))
    if conversion == "u":
        return render_unsigned_long(spec, _wrap_unsigned(value, _LONG_LONG_BITS))
    return ""


def _render_short(spec: FormatSpec, value) -> str:
    conversion = spec.conversion
    if conversion in ("x", "X"):
        return render_hex(spec, value)
    if conversion in ("d", "i"):
        return render_signed(spec, _wrap_signed(value, _INT_BITS))
    return render_unsigned(spec, _wrap_unsigned(value, _LONG_BITS))


def render_conversion(spec: FormatSpec, value=None) -> str:
    """Render ``value`` as the conversion ``spec`` describes.

    The ``n`` conversion and unknown combinations produce no text; the
    ``c`` conversion is not supported and raises ValueError.
    """
    conversion = spec.conversion
    if conversion == "%":
        return render_percent(spec)
    if spec.length == "l":
        return _render_long(spec, value)
    if spec.length == "ll":
        return _render_long_long(spec, value)
    if spec.length in ("h", "hh"):
        return _render_short(spec, value)
    if conversion in ("s", "S"):
        return render_string(spec, value)
    if conversion in ("x", "X"):
        return render_hex(spec, value)
    if conversion == "n":
        return ""
    if conversion == "p":
        return render_pointer(spec, value)
    if conversion in ("d", "i"):
        return render_signed(spec, _wrap_signed(value, _INT_BITS))
    if conversion == "u":
        return render_unsigned(spec, _wrap_unsigned(value, _INT_BITS))
    if conversion == "c":
        raise _unsupported(spec)
    return ""


# Re-exported for callers that compare against the null-string marker.
_ = NULL_STRING