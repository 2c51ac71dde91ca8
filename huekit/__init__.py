# Copyright (c) 2026 Huekit
# SPDX-License-Identifier: MIT

"""
Huekit -- Immutable 24-bit colors with HSV/HSL derivations.

Builds colors from RGB, HSV, HSL or text, derives new colors from them
(complement, hue rotation, saturation, brightness, mixing) and measures
WCAG contrast.

Quick start::

    from huekit import Color

    c = Color.from_hex("#336699")
    c.rotate(90).to_string("hex")
    c.mix("rgb(255, 255, 255)", 0.25)
    c.contrast_ratio(Color(255))   # vs white
"""

from __future__ import annotations

__version__ = "1.0.0"

from huekit.schema import BLACK, WHITE, Color, ColorInput, ColorWithAlpha
from huekit.space import WCAGLevel, WCAGThresholds
from huekit.text import ColorFormat, ColorParseError

__all__ = [
    # Core API
    "Color",
    "ColorWithAlpha",
    "ColorInput",
    "BLACK",
    "WHITE",
    # Text
    "ColorFormat",
    "ColorParseError",
    # Contrast config
    "WCAGLevel",
    "WCAGThresholds",
    # Version
    "__version__",
]
