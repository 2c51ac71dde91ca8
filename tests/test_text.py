# Copyright (c) 2026 Huekit
# SPDX-License-Identifier: MIT

"""Tests for text parsing, formatting and lenient coercion."""

import logging

import pytest

from huekit import BLACK, Color
from huekit.text import (
    ColorFormat,
    ColorParseError,
    classify,
    format_hex,
    format_hsl,
    format_hsv,
    format_number,
    format_rgb,
    parse,
    parse_hex,
    parse_hsl_string,
    parse_hsv_string,
    parse_rgb_string,
    resolve_format,
)


class TestParseHex:

    def test_valid(self):
        assert parse_hex("#336699") == (51, 102, 153)

    @pytest.mark.parametrize("text", [
        "#FF0000",    # uppercase
        "#fff",       # shorthand
        "#ff0000ff",  # alpha suffix
        "ff0000",     # no hash
        "#gg0000",
        " #ff0000",
    ])
    def test_invalid(self, text):
        with pytest.raises(ColorParseError):
            parse_hex(text)


class TestParseRGB:

    def test_with_and_without_spaces(self):
        assert parse_rgb_string("rgb(1,2,3)") == (1, 2, 3)
        assert parse_rgb_string("rgb(1, 2,  3)") == (1, 2, 3)

    def test_out_of_range_preserved(self):
        assert parse_rgb_string("rgb(300, -4, 0)") == (300, -4, 0)

    @pytest.mark.parametrize("text", [
        "rgb(1.5, 2, 3)",
        "rgb(1, 2)",
        "rgb(1 ,2, 3)",
        "rgba(1, 2, 3, 1)",
        "rgb(1, 2, 3",
    ])
    def test_invalid(self, text):
        with pytest.raises(ColorParseError):
            parse_rgb_string(text)


class TestParseHSVHSL:

    def test_hsv(self):
        assert parse_hsv_string("hsv(210, 0.5, 0.6)") == (210.0, 0.5, 0.6)

    def test_hsl(self):
        assert parse_hsl_string("hsl(0,1,0.5)") == (0.0, 1.0, 0.5)

    def test_number_forms(self):
        assert parse_hsv_string("hsv(1e2, .5, 1.)") == (100.0, 0.5, 1.0)

    @pytest.mark.parametrize("text", [
        "hsv(210deg, 50%, 50%)",
        "hsv(210 0.5 0.5)",
        "hsl(210, 0.5, 0.5)",
    ])
    def test_invalid_hsv(self, text):
        with pytest.raises(ColorParseError):
            parse_hsv_string(text)


class TestClassify:

    @pytest.mark.parametrize("text, form", [
        ("#336699", ColorFormat.HEX),
        ("rgb(1, 2, 3)", ColorFormat.RGB),
        ("hsv(0, 0, 0)", ColorFormat.HSV),
        ("hsl(0, 0, 0)", ColorFormat.HSL),
        ("#nonsense", ColorFormat.HEX),
    ])
    def test_by_prefix(self, text, form):
        assert classify(text) is form

    def test_unknown(self):
        assert classify("red") is None

    def test_unknown_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="huekit.text.parser"):
            classify("red")
        assert "No color prefix" in caplog.text


class TestParse:

    def test_dispatch(self):
        assert parse("hsl(0, 1, 0.5)") == (ColorFormat.HSL, (0.0, 1.0, 0.5))
        assert parse("#010203") == (ColorFormat.HEX, (1, 2, 3))

    def test_unknown_prefix(self):
        with pytest.raises(ColorParseError) as exc_info:
            parse("cmyk(0, 0, 0, 1)")
        assert exc_info.value.form is None
        assert exc_info.value.text == "cmyk(0, 0, 0, 1)"

    def test_malformed_body(self):
        with pytest.raises(ColorParseError, match="Malformed rgb") as exc_info:
            parse("rgb(a, b, c)")
        assert exc_info.value.form is ColorFormat.RGB

    def test_non_string(self):
        with pytest.raises(ColorParseError):
            parse(42)

    def test_parse_error_is_value_error(self):
        assert issubclass(ColorParseError, ValueError)


class TestFormat:

    def test_format_number(self):
        assert format_number(1.0) == "1"
        assert format_number(210) == "210"
        assert format_number(0.5) == "0.5"

    def test_format_number_reparses_exactly(self):
        x = 0.1 + 0.2
        assert float(format_number(x)) == x

    def test_forms(self):
        assert format_rgb(255, 0, 0) == "rgb(255, 0, 0)"
        assert format_hex(255, 0, 0) == "#ff0000"
        assert format_hsv(0.0, 1.0, 1.0) == "hsv(0, 1, 1)"
        assert format_hsl(0.0, 1.0, 0.5) == "hsl(0, 1, 0.5)"

    def test_resolve_format(self):
        assert resolve_format("Hex") is ColorFormat.HEX
        assert resolve_format(ColorFormat.RGB) is ColorFormat.RGB

    def test_resolve_unknown(self):
        with pytest.raises(ValueError, match="rgb, hsv, hsl, hex"):
            resolve_format("lab")


class TestCoerce:

    def test_string(self):
        assert Color.coerce("#336699") == Color(51, 102, 153)

    @pytest.mark.parametrize("value, gray", [
        (100, 100),
        (127.5, 128),
        (300, 255),
        (-5, 0),
        (float("inf"), 255),
        (float("nan"), 0),
    ])
    def test_number_is_clamped_gray(self, value, gray):
        assert Color.coerce(value) == Color(gray)

    @pytest.mark.parametrize("value", [
        "red",
        "#FFFFFF",
        "rgb(300, 0, 0)",
        "hsv(360, 1, 1)",
        "",
        None,
        True,
        (255, 0, 0),
    ])
    def test_fallback_to_black(self, value):
        assert Color.coerce(value) == BLACK

    def test_fallback_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="huekit.schema.color"):
            Color.coerce("red")
        assert "Falling back to black" in caplog.text

    def test_strict_unknown_prefix(self):
        with pytest.raises(ColorParseError):
            Color.coerce("red", strict=True)

    def test_strict_out_of_range(self):
        with pytest.raises(ValueError, match="0-255"):
            Color.coerce("rgb(300, 0, 0)", strict=True)

    def test_strict_unsupported_type(self):
        with pytest.raises(TypeError):
            Color.coerce(None, strict=True)

    def test_strict_number_still_clamps(self):
        assert Color.coerce(999, strict=True) == Color(255)
