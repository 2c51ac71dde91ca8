# Copyright (c) 2026 Huekit
# SPDX-License-Identifier: MIT

"""
Color value types.

Design principles:
- Immutable: Color and ColorWithAlpha are frozen dataclasses
- RGB is canonical: HSV/HSL are derived once at construction and cached
- Pure: every operation returns a new color and leaves its receiver alone

RGB (device components):
- red, green, blue: integers 0-255

HSV / HSL (derived):
- Hue: 0-360 degrees, shared by both spaces (0=red, 120=green, 240=blue)
- HSV saturation/value: 0-1, value is the brightest channel
- HSL saturation/luminosity: 0-1, luminosity is the max/min midpoint

Alpha:
    ColorWithAlpha adds an opacity in [0, 1] that never enters color math.
    Every derivation inherited from Color carries the receiver's alpha
    through unchanged, so ``ColorWithAlpha(...).rotate(90)`` is still a
    ColorWithAlpha with the same alpha.
"""

from __future__ import annotations

import json
import logging
import numbers
from dataclasses import dataclass, field
from typing import Optional, Union

from huekit.space.colorspace import (
    MAX_CHANNEL,
    clamp01,
    clamp_channel,
    hsl_to_rgb,
    hsv_to_rgb,
    rgb_to_hsl,
    rgb_to_hsv,
    wrap_hue,
)
from huekit.space.contrast import (
    WCAGLevel,
    WCAGThresholds,
    contrast_ratio_from_luminance,
    meets_contrast,
    relative_luminance,
)
from huekit.text.base import ColorFormat
from huekit.text.formatter import (
    format_hex,
    format_hsl,
    format_hsv,
    format_rgb,
    resolve_format,
)
from huekit.text.parser import (
    parse,
    parse_hex,
    parse_hsl_string,
    parse_hsv_string,
    parse_rgb_string,
)

logger = logging.getLogger(__name__)


# Mix weights are snapped to this grid and mixed in integer arithmetic so that
# a.mix(b, w) and b.mix(a, 1 - w) produce identical channels.
_MIX_STEPS = 1 << 32


# =============================================================================
# Validation Helpers
# =============================================================================


def _channel(name: str, value: object) -> int:
    """Validate one RGB component and normalize it to int."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    if not isinstance(value, numbers.Integral):
        as_float = float(value)
        if not as_float.is_integer():
            raise ValueError(f"{name} must be an integer, got {value}")
        value = as_float
    as_int = int(value)
    if not 0 <= as_int <= MAX_CHANNEL:
        raise ValueError(f"{name} must be 0-255, got {value}")
    return as_int


def _gray_level(value: float) -> int:
    """Clamp an arbitrary number into a gray level 0-255."""
    return clamp_channel(min(max(0.0, float(value)), float(MAX_CHANNEL)))


def _mix_channel(a: int, b: int, steps: int) -> int:
    total = a * (_MIX_STEPS - steps) + b * steps
    return (2 * total + _MIX_STEPS) // (2 * _MIX_STEPS)


# =============================================================================
# Color
# =============================================================================


@dataclass(frozen=True, slots=True)
class Color:
    """
    An opaque 24-bit color.

    Construct with zero, one or three components::

        Color()              # black, #000000
        Color(128)           # gray (128, 128, 128)
        Color(51, 102, 153)  # #336699

    A missing green or blue falls back to red. Components must already be
    integers in [0, 255]; the ``from_*`` factories and ``coerce`` clamp
    or round their input before it gets here.

    Attributes:
        red, green, blue: Integer components 0-255
        hsv_hue, hsv_sat, hsv_val: Derived HSV (hue 0-360, others 0-1)
        hsl_hue, hsl_sat, hsl_lum: Derived HSL (hsl_hue == hsv_hue)
    """
    red: int = 0
    green: Optional[int] = None
    blue: Optional[int] = None
    hsv_hue: float = field(init=False, repr=False, compare=False)
    hsv_sat: float = field(init=False, repr=False, compare=False)
    hsv_val: float = field(init=False, repr=False, compare=False)
    hsl_hue: float = field(init=False, repr=False, compare=False)
    hsl_sat: float = field(init=False, repr=False, compare=False)
    hsl_lum: float = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Validate RGB, fill grayscale shorthand, derive HSV and HSL."""
        red = _channel("red", self.red)
        green = red if self.green is None else _channel("green", self.green)
        blue = red if self.blue is None else _channel("blue", self.blue)
        object.__setattr__(self, "red", red)
        object.__setattr__(self, "green", green)
        object.__setattr__(self, "blue", blue)

        hue, hsv_sat, hsv_val = rgb_to_hsv(red, green, blue)
        _, hsl_sat, hsl_lum = rgb_to_hsl(red, green, blue)
        object.__setattr__(self, "hsv_hue", hue)
        object.__setattr__(self, "hsv_sat", hsv_sat)
        object.__setattr__(self, "hsv_val", hsv_val)
        object.__setattr__(self, "hsl_hue", hue)
        object.__setattr__(self, "hsl_sat", hsl_sat)
        object.__setattr__(self, "hsl_lum", hsl_lum)

    def __str__(self) -> str:
        return self.to_string()

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def rgb(self) -> tuple[int, int, int]:
        """(red, green, blue)."""
        return self.red, self.green, self.blue

    @property
    def hsv(self) -> tuple[float, float, float]:
        """(hue, saturation, value)."""
        return self.hsv_hue, self.hsv_sat, self.hsv_val

    @property
    def hsl(self) -> tuple[float, float, float]:
        """(hue, saturation, luminosity)."""
        return self.hsl_hue, self.hsl_sat, self.hsl_lum

    @property
    def hex(self) -> str:
        """Hex string like ``#336699``."""
        return format_hex(*self.rgb)

    @property
    def relative_luminance(self) -> float:
        """WCAG relative luminance (not HSL luminosity)."""
        return relative_luminance(*self.rgb)

    # -------------------------------------------------------------------------
    # Derivations
    # -------------------------------------------------------------------------

    def _rebuild(self, red: int, green: int, blue: int) -> Color:
        """Build the result of a derivation; subclasses carry extra state."""
        return self.__class__(red, green, blue)

    def complement(self) -> Color:
        """The difference between this color and white."""
        return self._rebuild(
            MAX_CHANNEL - self.red,
            MAX_CHANNEL - self.green,
            MAX_CHANNEL - self.blue,
        )

    def rotate(self, degrees: float) -> Color:
        """
        Rotate the hue by ``degrees``, keeping HSV saturation and value.

        Any angle is accepted; the new hue wraps into [0, 360).
        """
        hue = wrap_hue(self.hsv_hue + degrees)
        return self._rebuild(*hsv_to_rgb(hue, self.hsv_sat, self.hsv_val))

    def invert(self) -> Color:
        """The hue rotated halfway around the wheel."""
        return self.rotate(180)

    def saturate(self, amount: float, relative: bool = False) -> Color:
        """
        Add HSL saturation.

        With ``relative=False``, ``amount`` is added directly: 1.0 gives full
        saturation. With ``relative=True`` it scales the current saturation:
        0.5 on a saturation of 0.4 adds 0.2. The result is clamped to [0, 1];
        a negative amount desaturates.
        """
        delta = self.hsl_sat * amount if relative else amount
        sat = clamp01(self.hsl_sat + delta)
        return self._rebuild(*hsl_to_rgb(self.hsl_hue, sat, self.hsl_lum))

    def desaturate(self, amount: float, relative: bool = False) -> Color:
        """Remove HSL saturation; 1.0 (absolute) gives a gray."""
        return self.saturate(-amount, relative)

    def brighten(self, amount: float, relative: bool = False) -> Color:
        """
        Add HSL luminosity.

        Absolute 1.0 gives white. With ``relative=True`` the amount scales
        the current luminosity, so 0.5 on a luminosity of 0.5 lands on 0.75.
        """
        delta = self.hsl_lum * amount if relative else amount
        lum = clamp01(self.hsl_lum + delta)
        return self._rebuild(*hsl_to_rgb(self.hsl_hue, self.hsl_sat, lum))

    def darken(self, amount: float, relative: bool = False) -> Color:
        """Remove HSL luminosity; 1.0 (absolute) gives black."""
        return self.brighten(-amount, relative)

    def mix(self, other: ColorInput, weight: float = 0.5) -> Color:
        """
        Weighted per-channel average with another color.

        Args:
            other: The second color (anything ``coerce`` accepts strictly)
            weight: 0.0 returns this color exactly, 1.0 returns ``other``
                exactly, 0.5 is an even mix

        ``a.mix(b, w)`` equals ``b.mix(a, 1 - w)`` channel for channel.
        """
        if not 0.0 <= weight <= 1.0:
            raise ValueError(f"Weight must be 0-1, got {weight}")
        other = Color.coerce(other, strict=True)
        steps = round(weight * _MIX_STEPS)
        return self._rebuild(
            _mix_channel(self.red, other.red, steps),
            _mix_channel(self.green, other.green, steps),
            _mix_channel(self.blue, other.blue, steps),
        )

    def with_alpha(self, alpha: float) -> ColorWithAlpha:
        """This color with the given opacity."""
        return ColorWithAlpha(self.red, self.green, self.blue, alpha)

    def opaque(self) -> Color:
        """This color without opacity information."""
        return self

    # -------------------------------------------------------------------------
    # Metrics
    # -------------------------------------------------------------------------

    def equals(self, other: ColorInput) -> bool:
        """
        True if both colors have the same RGB components.

        Unlike ``==``, alpha and class are ignored, so an opaque Color
        equals a ColorWithAlpha of any opacity with the same RGB.
        """
        return self.rgb == Color.coerce(other, strict=True).rgb

    def contrast_ratio(self, other: ColorInput) -> float:
        """WCAG contrast ratio with another color, in [1, 21]."""
        other = Color.coerce(other, strict=True)
        return contrast_ratio_from_luminance(
            self.relative_luminance, other.relative_luminance
        )

    def meets_contrast(
        self,
        other: ColorInput,
        level: WCAGLevel = WCAGLevel.AA,
        *,
        large_text: bool = False,
        thresholds: Optional[WCAGThresholds] = None,
    ) -> bool:
        """True if the contrast with ``other`` satisfies a WCAG level."""
        return meets_contrast(
            self.contrast_ratio(other),
            level,
            large_text=large_text,
            thresholds=thresholds,
        )

    def is_grayscale(self) -> bool:
        """True if red, green and blue are equal (zero saturation)."""
        return self.hsv_sat == 0

    # -------------------------------------------------------------------------
    # Text
    # -------------------------------------------------------------------------

    def to_string(self, space: Union[ColorFormat, str] = ColorFormat.RGB) -> str:
        """
        Format in one of four forms.

        - ``rgb`` (default): ``rgb(r, g, b)``
        - ``hsv``: ``hsv(h, s, v)``
        - ``hsl``: ``hsl(h, s, l)``
        - ``hex``: ``#rrggbb``
        """
        form = resolve_format(space)
        if form is ColorFormat.HEX:
            return self.hex
        if form is ColorFormat.HSV:
            return format_hsv(*self.hsv)
        if form is ColorFormat.HSL:
            return format_hsl(*self.hsl)
        return format_rgb(*self.rgb)

    # -------------------------------------------------------------------------
    # Factories
    # -------------------------------------------------------------------------

    @classmethod
    def from_hsv(cls, hue: float, sat: float, val: float) -> Color:
        """
        Build from HSV components.

        Args:
            hue: [0, 360)
            sat: [0, 1]
            val: [0, 1]

        Raises:
            ValueError: If a component is out of range
        """
        return cls(*hsv_to_rgb(hue, sat, val))

    @classmethod
    def from_hsl(cls, hue: float, sat: float, lum: float) -> Color:
        """
        Build from HSL components.

        Args:
            hue: [0, 360)
            sat: [0, 1]
            lum: [0, 1]

        Raises:
            ValueError: If a component is out of range
        """
        return cls(*hsl_to_rgb(hue, sat, lum))

    @classmethod
    def from_hex(cls, text: str) -> Color:
        """Parse ``#rrggbb`` (lowercase)."""
        return cls(*parse_hex(text))

    @classmethod
    def from_rgb_string(cls, text: str) -> Color:
        """Parse ``rgb(r, g, b)``; components outside 0-255 raise ValueError."""
        return cls(*parse_rgb_string(text))

    @classmethod
    def from_hsv_string(cls, text: str) -> Color:
        """Parse ``hsv(h, s, v)``."""
        return cls.from_hsv(*parse_hsv_string(text))

    @classmethod
    def from_hsl_string(cls, text: str) -> Color:
        """Parse ``hsl(h, s, l)``."""
        return cls.from_hsl(*parse_hsl_string(text))

    @classmethod
    def from_string(cls, text: str) -> Color:
        """
        Parse any of the four textual forms, chosen by prefix.

        Raises:
            ColorParseError: Unknown prefix or malformed body
            ValueError: Well-formed text with out-of-range components
        """
        form, components = parse(text)
        if form is ColorFormat.HSV:
            return cls.from_hsv(*components)
        if form is ColorFormat.HSL:
            return cls.from_hsl(*components)
        return cls(*components)

    @classmethod
    def coerce(cls, value: ColorInput, *, strict: bool = False) -> Color:
        """
        Interpret an arbitrary value as a color.

        - Color or ColorWithAlpha: returned unchanged
        - str: parsed by prefix (``#``, ``rgb(``, ``hsv(``, ``hsl(``)
        - int or float: clamped to [0, 255], rounded, used as a gray level
        - anything else: black

        By default this never raises: unknown prefixes, malformed text and
        out-of-range components all fall back to black. With ``strict=True``
        those cases raise instead (ColorParseError/ValueError for text,
        TypeError for unsupported types).
        """
        if isinstance(value, Color):
            return value
        try:
            if isinstance(value, str):
                return cls.from_string(value)
            if isinstance(value, numbers.Real) and not isinstance(value, bool):
                return cls(_gray_level(value))
            raise TypeError(f"Cannot interpret {type(value).__name__} as a color")
        except (ValueError, TypeError) as exc:
            if strict:
                raise
            logger.debug("Falling back to black for %r: %s", value, exc)
            return cls()

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"r": self.red, "g": self.green, "b": self.blue}

    def to_json(self, indent: Optional[int] = None) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: dict) -> Color:
        """Deserialize from dictionary."""
        return cls(data["r"], data["g"], data["b"])

    @classmethod
    def from_json(cls, json_str: str) -> Color:
        """Deserialize from JSON string."""
        return cls.from_dict(json.loads(json_str))


# =============================================================================
# ColorWithAlpha
# =============================================================================


@dataclass(frozen=True, slots=True)
class ColorWithAlpha(Color):
    """
    A color with an independent opacity channel.

    ``ColorWithAlpha()`` is opaque black. Alpha defaults to 1.0 and is never
    derived from, nor folded into, the RGB/HSV/HSL values.

    Attributes:
        alpha: Opacity in [0, 1] (0 = transparent, 1 = opaque)
    """
    alpha: float = 1.0

    def __post_init__(self) -> None:
        """Validate alpha after the RGB components."""
        Color.__post_init__(self)
        if isinstance(self.alpha, bool) or not isinstance(self.alpha, numbers.Real):
            raise TypeError(f"Alpha must be a number, got {type(self.alpha).__name__}")
        if not 0.0 <= self.alpha <= 1.0:
            raise ValueError(f"Alpha must be 0-1, got {self.alpha}")
        object.__setattr__(self, "alpha", float(self.alpha))

    @property
    def rgba(self) -> tuple[int, int, int, float]:
        """(red, green, blue, alpha)."""
        return self.red, self.green, self.blue, self.alpha

    def _rebuild(self, red: int, green: int, blue: int) -> ColorWithAlpha:
        return self.__class__(red, green, blue, self.alpha)

    def negative(self) -> ColorWithAlpha:
        """Same color with the complemented alpha (0.7 becomes 0.3)."""
        return self.__class__(self.red, self.green, self.blue, 1.0 - self.alpha)

    def with_alpha(self, alpha: float) -> ColorWithAlpha:
        """Same color with a different opacity."""
        return self.__class__(self.red, self.green, self.blue, alpha)

    def opaque(self) -> Color:
        """Drop the alpha channel."""
        return Color(self.red, self.green, self.blue)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"r": self.red, "g": self.green, "b": self.blue, "alpha": self.alpha}

    @classmethod
    def from_dict(cls, data: dict) -> ColorWithAlpha:
        """Deserialize from dictionary; missing alpha means opaque."""
        return cls(data["r"], data["g"], data["b"], data.get("alpha", 1.0))


ColorInput = Union[Color, str, int, float]

BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)
