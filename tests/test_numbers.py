import pytest

from ftkit.conversions import NULL_STRING
from ftkit.numbers import (
    render_conversion,
    render_signed,
    render_unsigned,
    render_unsigned_long,
)
from ftkit.spec import FormatSpec


def _spec(conversion="d", **fields):
    if "precision" in fields:
        fields.setdefault("has_precision", True)
        fields.setdefault("dot", True)
    return FormatSpec(conversion=conversion, **fields)


STANDARD_CASES = [
    ({"width": 5}, "%5d", 42),
    ({"width": 5, "left": True}, "%-5d", 42),
    ({"width": 5, "zero": True}, "%05d", 42),
    ({"precision": 4}, "%.4d", 42),
    ({"width": 8, "precision": 4}, "%8.4d", 42),
    ({"width": 8, "precision": 4, "left": True}, "%-8.4d", 42),
    ({"width": 2}, "%2d", 12345),
    ({"width": 6}, "%6d", -42),
    ({"width": 6, "zero": True}, "%06d", -42),
    ({"width": 6, "left": True}, "%-6d", -42),
    ({"precision": 4}, "%.4d", -42),
    ({"width": 8, "precision": 4}, "%8.4d", -42),
    ({}, "%d", 0),
    ({}, "%d", -7),
]


@pytest.mark.parametrize("fields, fmt, value", STANDARD_CASES)
def test_signed_matches_printf(fields, fmt, value):
    assert render_signed(_spec(**fields), value) == fmt % value


@pytest.mark.parametrize(
    "fields, fmt, value",
    [
        ({"width": 5}, "%5d", 42),
        ({"width": 5, "left": True}, "%-5d", 42),
        ({"width": 5, "zero": True}, "%05d", 42),
        ({"precision": 4}, "%.4d", 42),
        ({"width": 8, "precision": 4}, "%8.4d", 42),
        ({"width": 8, "precision": 4, "left": True}, "%-8.4d", 42),
        ({"width": 8, "precision": 2}, "%8.2d", 12345),
    ],
)
def test_unsigned_matches_printf(fields, fmt, value):
    assert render_unsigned(_spec("u", **fields), value) == fmt % value


@pytest.mark.parametrize(
    "fields, fmt, value",
    [
        ({"width": 5}, "%5d", 42),
        ({"width": 5, "zero": True}, "%05d", 42),
        ({"precision": 4}, "%.4d", 42),
        ({"width": 8, "precision": 4}, "%8.4d", 42),
        ({"width": 8, "precision": 4, "left": True}, "%-8.4d", 42),
        ({}, "%d", 2**64 - 1),
    ],
)
def test_unsigned_long_matches_printf(fields, fmt, value):
    assert render_unsigned_long(_spec("u", length="ll", **fields), value) == fmt % value


def test_negative_width_means_left_alignment():
    assert render_signed(_spec(width=-5), 42) == render_signed(_spec(width=5, left=True), 42)


def test_negative_precision_is_ignored():
    spec = _spec(width=5, precision=-1)
    assert render_signed(spec, 42) == "%5d" % 42
    assert render_unsigned(_spec("u", width=5, precision=-1), 42) == "%5d" % 42


def test_zero_with_zero_precision_prints_only_padding():
    spec = _spec(width=3, precision=0)
    assert render_signed(spec, 0) == "   "
    assert render_unsigned(_spec("u", width=3, precision=0), 0) == "   "
    assert render_unsigned_long(_spec("u", precision=0), 0) == ""


@pytest.mark.parametrize("value", [-1000, -99, -1, 0, 1, 7, 512, 65535])
@pytest.mark.parametrize("width", [0, 3, 9])
def test_signed_round_trip(value, width):
    text = render_signed(_spec(width=width), value)
    assert int(text) == value
    assert len(text) == max(width, len(str(value)))


@pytest.mark.parametrize("value", [0, 1, 99, 4096])
def test_unsigned_zero_padding_round_trip(value):
    text = render_unsigned(_spec("u", width=10, zero=True), value)
    assert len(text) == 10
    assert int(text) == value


def test_unsigned_rejects_negative():
    with pytest.raises(ValueError):
        render_unsigned(_spec("u"), -1)
    with pytest.raises(ValueError):
        render_unsigned_long(_spec("u", length="ll"), -1)


def test_conversion_int_wraps_to_32_bits():
    assert render_conversion(_spec("d"), 2**31) == "%d" % -(2**31)
    assert render_conversion(_spec("u"), -1) == "%d" % (2**32 - 1)


def test_conversion_long_wraps_to_64_bits():
    assert render_conversion(_spec("d", length="l"), 2**63) == "%d" % -(2**63)
    assert render_conversion(_spec("u", length="ll"), -1) == "%d" % (2**64 - 1)
    assert render_conversion(_spec("i", length="ll"), -5) == "%d" % -5


def test_conversion_hex_variants():
    assert render_conversion(_spec("x"), 255) == "%x" % 255
    assert render_conversion(_spec("X", length="l"), 255) == "%X" % 255
    assert render_conversion(_spec("x", length="ll"), 2**40) == "%x" % 2**40
    assert render_conversion(_spec("x", length="h"), 255) == "%x" % 255


def test_conversion_strings_and_pointer():
    assert render_conversion(_spec("s"), None) == NULL_STRING
    assert render_conversion(_spec("s", width=6), "ab") == "%6s" % "ab"
    assert render_conversion(_spec("s", length="l"), "wide") == "wide"
    assert render_conversion(_spec("p"), 255) == "%#x" % 255


def test_conversion_percent():
    assert render_conversion(_spec("%", width=3)) == "%3s" % "%"


def test_conversion_count_prints_nothing():
    assert render_conversion(_spec("n"), 0) == ""


def test_conversion_char_is_rejected():
    with pytest.raises(ValueError):
        render_conversion(_spec("c"), 65)
    with pytest.raises(ValueError):
        render_conversion(_spec("c", length="l"), 65)