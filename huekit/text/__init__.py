# Copyright (c) 2026 Huekit
# SPDX-License-Identifier: MIT

"""
Textual color forms: ``rgb()``, ``hsv()``, ``hsl()`` and ``#rrggbb``.

Formatting and parsing are exact inverses: any string produced by the
formatter parses back to the same color.
"""

from huekit.text.base import ColorFormat, ColorParseError
from huekit.text.formatter import (
    format_hex,
    format_hsl,
    format_hsv,
    format_number,
    format_rgb,
    resolve_format,
)
from huekit.text.parser import (
    classify,
    parse,
    parse_hex,
    parse_hsl_string,
    parse_hsv_string,
    parse_rgb_string,
)

__all__ = [
    "ColorFormat",
    "ColorParseError",
    # Output
    "format_rgb",
    "format_hex",
    "format_hsv",
    "format_hsl",
    "format_number",
    "resolve_format",
    # Input
    "classify",
    "parse",
    "parse_hex",
    "parse_rgb_string",
    "parse_hsv_string",
    "parse_hsl_string",
]
