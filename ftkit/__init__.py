"""String, byte-buffer, line-reading and printf-style conversion helpers."""

__version__ = "0.1.0"
__all__ = ["buffers", "conversions", "fdio", "numbers", "radix", "spec", "strings"]