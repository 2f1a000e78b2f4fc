"""Rendering of the percent, string, pointer and hexadecimal conversions.

Each function takes a parsed FormatSpec and the argument value and
returns the text the conversion produces. The spec itself is never
modified.
"""

from __future__ import annotations

from dataclasses import dataclass

from .radix import digit_case, pad_spaces, pad_zeros, to_base
from .spec import FormatSpec

__all__ = [
    "NULL_STRING",
    "render_percent",
    "render_string",
    "render_wide_string",
    "render_pointer",
    "render_hex",
    "render_hex_long",
    "render_hex_long_long",
]

NULL_STRING = "(null)"

_UINT_MASK = (1 << 32) - 1
_ULONG_MASK = (1 << 64) - 1
_ULONG_LONG_MASK = (1 << 64) - 1


@dataclass
class _Layout:
    """Working copy of the spec fields that rendering may adjust."""

    left: bool
    zero: bool
    width: int
    precision: int
    has_precision: bool
    dot: bool

    @classmethod
    def of(cls, spec: FormatSpec) -> "_Layout":
        layout = cls(
            left=spec.left,
            zero=spec.zero,
            width=spec.width,
            precision=spec.precision,
            has_precision=spec.has_precision,
            dot=spec.dot,
        )
        if layout.width < 0:
            # A negative width means left alignment with its magnitude.
            layout.width = -layout.width
            layout.left = True
        return layout


def render_percent(spec: FormatSpec) -> str:
    """Render a literal ``%`` padded to the spec's width."""
    layout = _Layout.of(spec)
    if layout.left:
        layout.zero = False
    width = layout.width
    if width <= 1:
        return "%"
    if layout.zero:
        return pad_zeros(width - 1) + "%"
    if layout.left:
        return "%" + pad_spaces(width - 1)
    return pad_spaces(width - 1) + "%"


def _text_without_precision(layout: _Layout, text: str) -> str:
    if layout.width > len(text):
        padding = pad_spaces(layout.width - len(text))
        return text + padding if layout.left else padding + text
    return text


def _text_with_precision(layout: _Layout, text: str) -> str:
    length = len(text)
    width = layout.width
    precision = layout.precision
    if not layout.has_precision and width == 0:
        return ""
    if width > length:
        if precision < length:
            cut = text[:max(precision, 0)]
            padding = pad_spaces(width - precision)
        else:
            cut = text
            padding = pad_spaces(width - length)
        return cut + padding if layout.left else padding + cut
    if precision > length:
        return text
    cut = text[:max(precision, 0)]
    padding = pad_spaces(width - precision)
    return cut + padding if layout.left else padding + cut


def _render_text(spec: FormatSpec, value: str | None) -> str:
    text = NULL_STRING if value is None else value
    layout = _Layout.of(spec)
    if layout.precision < 0:
        layout.has_precision = True
        layout.precision = len(text)
    if layout.dot:
        return _text_with_precision(layout, text)
    return _text_without_precision(layout, text)


def render_string(spec: FormatSpec, value: str | None) -> str:
    """Render a string argument; ``None`` prints as ``(null)``."""
    return _render_text(spec, value)


def render_wide_string(spec: FormatSpec, value: str | None) -> str:
    """Render a wide-character string argument; ``None`` prints as ``(null)``."""
    return _render_text(spec, value)


def render_pointer(spec: FormatSpec, address: int) -> str:
    """Render an address as ``0x`` followed by lower-case hex digits."""
    address &= _ULONG_MASK
    layout = _Layout.of(spec)
    if address == 0 and layout.precision == 0 and layout.dot:
        return pad_spaces(layout.width - 2) + "0x"
    body = "0x" + to_base(address, 16, True)
    padding = pad_spaces(layout.width - len(body))
    return body + padding if layout.left else padding + body


def _hex_with_precision(layout: _Layout, digits: str) -> str:
    length = len(digits)
    width = layout.width
    precision = layout.precision
    if length >= max(precision, width):
        return digits
    if precision > length:
        body = pad_zeros(precision - length) + digits
        padding = pad_spaces(width - precision)
    else:
        body = digits
        padding = pad_spaces(width - length)
    return body + padding if layout.left else padding + body


def _hex_without_precision(layout: _Layout, digits: str) -> str:
    gap = layout.width - len(digits)
    if layout.left:
        return digits + pad_spaces(gap)
    if layout.zero:
        return pad_zeros(gap) + digits
    return pad_spaces(gap) + digits


def _render_hex(spec: FormatSpec, value: int, mask: int) -> str:
    value &= mask
    layout = _Layout.of(spec)
    if layout.precision < 0:
        layout.has_precision = False
        layout.precision = 0
    if value == 0 and layout.precision == 0 and layout.dot:
        return pad_spaces(layout.width)
    digits = to_base(value, 16, digit_case(spec.conversion))
    if layout.zero and layout.precision == 0:
        return pad_zeros(layout.width - len(digits)) + digits
    if layout.has_precision:
        return _hex_with_precision(layout, digits)
    return _hex_without_precision(layout, digits)


def render_hex(spec: FormatSpec, value: int) -> str:
    """Render an unsigned int in hexadecimal (``X`` gives capitals)."""
    return _render_hex(spec, value, _UINT_MASK)


def render_hex_long(spec: FormatSpec, value: int) -> str:
    """Render an unsigned long in hexadecimal (``X`` gives capitals)."""
    return _render_hex(spec, value, _ULONG_MASK)


def render_hex_long_long(spec: FormatSpec, value: int) -> str:
    """Render an unsigned long long in hexadecimal (``X`` gives capitals)."""
    return _render_hex(spec, value, _ULONG_LONG_MASK)