"""Number-to-text conversion and padding helpers for formatted output."""

from __future__ import annotations

__all__ = [
    "to_base",
    "digit_case",
    "conversion_base",
    "pad_spaces",
    "pad_zeros",
]

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"

_HEX_CONVERSIONS = frozenset("xXp")


def to_base(value: int, base: int, lowercase: bool = True) -> str:
    """Digits of ``abs(value)`` in ``base``; letters follow ``lowercase``."""
    if not 2 <= base <= len(_DIGITS):
        raise ValueError(f"base must be between 2 and {len(_DIGITS)}, got {base}")
    magnitude = abs(value)
    if magnitude == 0:
        return "0"
    digits = []
    while magnitude:
        magnitude, digit = divmod(magnitude, base)
        digits.append(_DIGITS[digit])
    text = "".join(reversed(digits))
    return text if lowercase else text.upper()


def digit_case(conversion: str) -> bool:
    """Whether a conversion prints lower-case digits (only ``X`` does not)."""
    return conversion != "X"


def conversion_base(conversion: str) -> int:
    """The radix a conversion prints in: 16 for ``x``, ``X`` and ``p``, else 10."""
    if conversion in _HEX_CONVERSIONS:
        return 16
    return 10


def pad_spaces(count: int) -> str:
    """A run of ``count`` spaces; empty when ``count`` is not positive."""
    return " " * max(count, 0)


def pad_zeros(count: int) -> str:
    """A run of ``count`` zeros; empty when ``count`` is not positive."""
    return "0" * max(count, 0)