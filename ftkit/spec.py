"""The parsed form of one conversion in a format string."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["FormatSpec", "CONVERSIONS", "FLAG_CHARS", "LENGTHS", "is_conversion", "is_flag"]

CONVERSIONS = "cspdiuxXnl"
FLAG_CHARS = "0-.*123456789"
LENGTHS = ("", "hh", "h", "l", "ll")


def is_conversion(c: str) -> bool:
    """Whether ``c`` is a character that ends a conversion specification."""
    return isinstance(c, str) and len(c) == 1 and c in CONVERSIONS


def is_flag(c: str) -> bool:
    """Whether ``c`` may appear among the flags, width and precision."""
    return isinstance(c, str) and len(c) == 1 and c in FLAG_CHARS


@dataclass
class FormatSpec:
    """Flags, width, precision, length modifier and conversion of a spec.

    ``dot`` records that a ``.`` was seen; ``has_precision`` that a
    precision value was actually supplied.
    """

    left: bool = False
    zero: bool = False
    width: int = 0
    precision: int = 0
    has_precision: bool = False
    dot: bool = False
    conversion: str = ""
    length: str = ""

    def __post_init__(self) -> None:
        if self.length not in LENGTHS:
            raise ValueError(f"unknown length modifier {self.length!r}")
        if self.conversion not in ("", "%", "S") and not is_conversion(self.conversion):
            raise ValueError(f"unknown conversion {self.conversion!r}")