# Copyright (c) 2026 Huekit
# SPDX-License-Identifier: MIT

"""
Text output for colors.

Four forms are produced:

    rgb(255, 0, 0)
    hsv(0, 1, 1)
    hsl(0, 1, 0.5)
    #ff0000

Numbers print the way they reparse: integral values without a fraction,
everything else with Python's shortest round-trip repr. Output of any form
fed back to the parser yields the same color.
"""

from __future__ import annotations

from typing import Union

from huekit.text.base import ColorFormat


def format_number(x: float) -> str:
    """Render ``1.0`` as ``1`` and ``0.5`` as ``0.5``."""
    x = float(x)
    if x.is_integer():
        return str(int(x))
    return repr(x)


def format_rgb(r: int, g: int, b: int) -> str:
    """Format as ``rgb(r, g, b)``."""
    return f"rgb({r}, {g}, {b})"


def format_hex(r: int, g: int, b: int) -> str:
    """Format as ``#rrggbb`` (lowercase, zero padded)."""
    return f"#{r:02x}{g:02x}{b:02x}"


def format_hsv(h: float, s: float, v: float) -> str:
    """Format as ``hsv(h, s, v)``."""
    return f"hsv({format_number(h)}, {format_number(s)}, {format_number(v)})"


def format_hsl(h: float, s: float, l: float) -> str:
    """Format as ``hsl(h, s, l)``."""
    return f"hsl({format_number(h)}, {format_number(s)}, {format_number(l)})"


def resolve_format(space: Union[ColorFormat, str]) -> ColorFormat:
    """
    Accept a ColorFormat or its string value.

    Raises:
        ValueError: If the name is not one of rgb, hsv, hsl, hex
    """
    if isinstance(space, ColorFormat):
        return space
    try:
        return ColorFormat(str(space).lower())
    except ValueError:
        raise ValueError(
            f"Unknown color format {space!r}; expected one of "
            f"{', '.join(f.value for f in ColorFormat)}"
        ) from None
