# Copyright (c) 2026 Huekit
# SPDX-License-Identifier: MIT

"""Base types for textual color forms."""

from enum import Enum


class ColorFormat(Enum):
    """Textual form of a color."""

    RGB = "rgb"  # rgb(r, g, b)
    HSV = "hsv"  # hsv(h, s, v)
    HSL = "hsl"  # hsl(h, s, l)
    HEX = "hex"  # #rrggbb


class ColorParseError(ValueError):
    """Raised when text does not match the grammar of a color form."""

    def __init__(self, text: object, form: ColorFormat | None = None) -> None:
        self.text = text
        self.form = form
        if form is None:
            message = f"Unrecognized color string {text!r}"
        else:
            message = f"Malformed {form.value} color string {text!r}"
        super().__init__(message)
