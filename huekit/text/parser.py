# Copyright (c) 2026 Huekit
# SPDX-License-Identifier: MIT

"""
Text input for colors.

Grammar (exact, no CSS4 extensions):

    #rrggbb            six lowercase hex digits, no shorthand, no alpha
    rgb(R, G, B)       base-10 integers
    hsv(H, S, V)       decimal numbers
    hsl(H, S, L)       decimal numbers

Whitespace after each comma is optional. The parsers only check shape;
range checks belong to the Color constructor and the HSV/HSL converters.
"""

from __future__ import annotations

import logging
import re
from typing import Optional

from huekit.text.base import ColorFormat, ColorParseError

logger = logging.getLogger(__name__)


_INT = r"([+-]?\d+)"
_NUM = r"([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)"
_SEP = r",\s*"

_HEX_RE = re.compile(r"#([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})")
_RGB_RE = re.compile(rf"rgb\({_INT}{_SEP}{_INT}{_SEP}{_INT}\)")
_HSV_RE = re.compile(rf"hsv\({_NUM}{_SEP}{_NUM}{_SEP}{_NUM}\)")
_HSL_RE = re.compile(rf"hsl\({_NUM}{_SEP}{_NUM}{_SEP}{_NUM}\)")

# Checked in order; "#" is a one-character prefix, the rest are four
_PREFIXES = (
    ("#", ColorFormat.HEX),
    ("rgb(", ColorFormat.RGB),
    ("hsv(", ColorFormat.HSV),
    ("hsl(", ColorFormat.HSL),
)


def _match(pattern: re.Pattern[str], text: object, form: ColorFormat) -> re.Match[str]:
    if not isinstance(text, str):
        raise ColorParseError(text, form)
    m = pattern.fullmatch(text)
    if m is None:
        raise ColorParseError(text, form)
    return m


def parse_hex(text: str) -> tuple[int, int, int]:
    """Parse ``#rrggbb`` into (r, g, b)."""
    m = _match(_HEX_RE, text, ColorFormat.HEX)
    r, g, b = (int(part, 16) for part in m.groups())
    return r, g, b


def parse_rgb_string(text: str) -> tuple[int, int, int]:
    """
    Parse ``rgb(r, g, b)`` into (r, g, b).

    Values are returned as written; ``rgb(300, 0, 0)`` parses to (300, 0, 0).
    """
    m = _match(_RGB_RE, text, ColorFormat.RGB)
    r, g, b = (int(part) for part in m.groups())
    return r, g, b


def parse_hsv_string(text: str) -> tuple[float, float, float]:
    """Parse ``hsv(h, s, v)`` into (h, s, v)."""
    m = _match(_HSV_RE, text, ColorFormat.HSV)
    h, s, v = (float(part) for part in m.groups())
    return h, s, v


def parse_hsl_string(text: str) -> tuple[float, float, float]:
    """Parse ``hsl(h, s, l)`` into (h, s, l)."""
    m = _match(_HSL_RE, text, ColorFormat.HSL)
    h, s, l = (float(part) for part in m.groups())
    return h, s, l


def classify(text: str) -> Optional[ColorFormat]:
    """
    Identify the textual form of a string by its prefix alone.

    Returns None when no known prefix matches. A matching prefix does not
    guarantee the rest of the string is well formed.
    """
    for prefix, form in _PREFIXES:
        if text.startswith(prefix):
            return form
    logger.debug("No color prefix matches %r", text)
    return None


_PARSERS = {
    ColorFormat.HEX: parse_hex,
    ColorFormat.RGB: parse_rgb_string,
    ColorFormat.HSV: parse_hsv_string,
    ColorFormat.HSL: parse_hsl_string,
}


def parse(text: str) -> tuple[ColorFormat, tuple[float, float, float]]:
    """
    Classify and parse a color string in one step.

    Returns:
        (form, components) where components are RGB integers for HEX/RGB
        and (hue, saturation, value-or-luminosity) for HSV/HSL

    Raises:
        ColorParseError: If the prefix is unknown or the body is malformed
    """
    if not isinstance(text, str):
        raise ColorParseError(text)
    form = classify(text)
    if form is None:
        raise ColorParseError(text)
    return form, _PARSERS[form](text)
