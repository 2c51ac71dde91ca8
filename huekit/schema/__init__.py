# Copyright (c) 2026 Huekit
# SPDX-License-Identifier: MIT

"""
Color value types.

All types in this module are immutable (frozen dataclasses).
Every operation derives a new color; nothing is modified in place.
"""

from huekit.schema.color import (
    BLACK,
    WHITE,
    Color,
    ColorInput,
    ColorWithAlpha,
)

__all__ = [
    # Core types
    "Color",
    "ColorWithAlpha",
    "ColorInput",
    # Constants
    "BLACK",
    "WHITE",
]
