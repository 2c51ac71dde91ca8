# Copyright (c) 2026 Huekit
# SPDX-License-Identifier: MIT

"""
Color space conversions.

Conversion chain: 8-bit RGB ↔ HSV, 8-bit RGB ↔ HSL

RGB is the canonical representation. HSV and HSL share a single hue angle
and are always derived from RGB, never the other way around, except when a
caller explicitly builds a color from HSV/HSL components.

Every scalar function has a NumPy ``*_batch`` twin that applies the same
arithmetic element-wise to arrays of shape (..., 3). The two families agree
exactly: same hue tie-break, same rounding.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray


MAX_CHANNEL = 255
HUE_RANGE = 360.0


# =============================================================================
# Helpers
# =============================================================================


def clamp01(x: float) -> float:
    """Clamp a number into [0, 1]."""
    return min(max(0.0, x), 1.0)


def clamp_channel(x: float) -> int:
    """Round half-up to an integer and clamp into [0, 255]."""
    return min(max(0, math.floor(x + 0.5)), MAX_CHANNEL)


def wrap_hue(hue: float) -> float:
    """
    Normalize any angle into [0, 360).

    Negative angles wrap around (``-90`` → ``270``). A tiny negative input
    can round to exactly 360.0 under modulo; that case maps to 0.
    """
    hue = hue % HUE_RANGE
    if hue >= HUE_RANGE:
        return 0.0
    return hue


# =============================================================================
# RGB → HSV / HSL
# =============================================================================


def _extrema(r: int, g: int, b: int) -> tuple[float, float, float]:
    """Return normalized (max, min, chroma) for an 8-bit triple."""
    mx = max(r, g, b) / MAX_CHANNEL
    mn = min(r, g, b) / MAX_CHANNEL
    return mx, mn, mx - mn


def hue_of(r: int, g: int, b: int) -> float:
    """
    Hue angle in degrees [0, 360) of an 8-bit RGB triple.

    The branch is chosen by which channel holds the maximum. When two
    channels tie for the maximum, red wins over green and green over blue,
    so pure yellow (255, 255, 0) takes the red branch.
    """
    _, _, chroma = _extrema(r, g, b)
    if chroma == 0:
        return 0.0

    rn, gn, bn = r / MAX_CHANNEL, g / MAX_CHANNEL, b / MAX_CHANNEL
    top = max(r, g, b)
    if r == top:
        hue = ((gn - bn) / chroma % 6) * 60
    elif g == top:
        hue = ((bn - rn) / chroma + 2) * 60
    else:
        hue = ((rn - gn) / chroma + 4) * 60
    return wrap_hue(hue)


def rgb_to_hsv(r: int, g: int, b: int) -> tuple[float, float, float]:
    """
    Convert 8-bit RGB to HSV.

    Args:
        r, g, b: Integer channels in [0, 255]

    Returns:
        (hue, saturation, value) with hue in [0, 360) and the rest in [0, 1]
    """
    mx, _, chroma = _extrema(r, g, b)
    sat = 0.0 if mx == 0 else min(chroma / mx, 1.0)
    return hue_of(r, g, b), sat, mx


def rgb_to_hsl(r: int, g: int, b: int) -> tuple[float, float, float]:
    """
    Convert 8-bit RGB to HSL.

    Saturation is ``chroma / (1 - |2L - 1|)``, written piecewise as
    ``chroma / 2L`` for L <= 0.5 and ``chroma / (2 - 2L)`` above. Gray
    input (chroma 0) short-circuits to 0, which also covers L of 0 and 1.

    Args:
        r, g, b: Integer channels in [0, 255]

    Returns:
        (hue, saturation, luminosity) with hue in [0, 360) and the rest in [0, 1]
    """
    mx, mn, chroma = _extrema(r, g, b)
    lum = 0.5 * (mx + mn)
    if chroma == 0:
        sat = 0.0
    else:
        denom = 2 * lum if lum <= 0.5 else 2 - 2 * lum
        sat = min(chroma / denom, 1.0)
    return hue_of(r, g, b), sat, lum


# =============================================================================
# HSV / HSL → RGB
# =============================================================================


def _check_hue_and_unit(hue: float, a: float, b: float, names: tuple[str, str]) -> None:
    if not 0.0 <= hue < HUE_RANGE:
        raise ValueError(f"Hue must be in [0, 360), got {hue}")
    for name, value in zip(names, (a, b)):
        if not 0.0 <= value <= 1.0:
            raise ValueError(f"{name} must be 0-1, got {value}")


def _sextant_to_rgb(hue: float, c: float, m: float) -> tuple[int, int, int]:
    """Place chroma on the channel picked by the hue's 60° sextant."""
    x = c * (1 - abs((hue / 60) % 2 - 1))
    sextant = min(int(hue // 60), 5)
    unscaled = (
        (c, x, 0.0),
        (x, c, 0.0),
        (0.0, c, x),
        (0.0, x, c),
        (x, 0.0, c),
        (c, 0.0, x),
    )[sextant]
    r, g, b = (clamp_channel((el + m) * MAX_CHANNEL) for el in unscaled)
    return r, g, b


def hsv_to_rgb(hue: float, sat: float, val: float) -> tuple[int, int, int]:
    """
    Convert HSV to 8-bit RGB.

    Args:
        hue: Hue in degrees, [0, 360)
        sat: Saturation [0, 1]
        val: Value (brightness) [0, 1]

    Returns:
        (r, g, b) integers in [0, 255], each rounded half-up

    Raises:
        ValueError: If any component is out of range
    """
    _check_hue_and_unit(hue, sat, val, ("Saturation", "Value"))
    c = sat * val
    return _sextant_to_rgb(hue, c, val - c)


def hsl_to_rgb(hue: float, sat: float, lum: float) -> tuple[int, int, int]:
    """
    Convert HSL to 8-bit RGB.

    Args:
        hue: Hue in degrees, [0, 360)
        sat: Saturation [0, 1]
        lum: Luminosity [0, 1]

    Returns:
        (r, g, b) integers in [0, 255], each rounded half-up

    Raises:
        ValueError: If any component is out of range
    """
    _check_hue_and_unit(hue, sat, lum, ("Saturation", "Luminosity"))
    c = sat * (1 - abs(2 * lum - 1))
    return _sextant_to_rgb(hue, c, lum - c / 2)


# =============================================================================
# Batch (vectorized) conversions
# =============================================================================


def _hue_batch(rgb: NDArray[np.int64]) -> tuple[NDArray[np.float64], ...]:
    """Vectorized hue plus normalized (max, min, chroma)."""
    channels = rgb.astype(np.float64) / MAX_CHANNEL
    r, g, b = channels[..., 0], channels[..., 1], channels[..., 2]

    top = rgb.max(axis=-1)
    mx = top / MAX_CHANNEL
    mn = rgb.min(axis=-1) / MAX_CHANNEL
    chroma = mx - mn

    # Avoid division by zero; gray pixels are overwritten below
    safe = np.where(chroma == 0, 1.0, chroma)
    hue = np.where(
        rgb[..., 0] == top,
        ((g - b) / safe % 6) * 60,
        np.where(
            rgb[..., 1] == top,
            ((b - r) / safe + 2) * 60,
            ((r - g) / safe + 4) * 60,
        ),
    )
    hue = np.where(chroma == 0, 0.0, hue % HUE_RANGE)
    hue = np.where(hue >= HUE_RANGE, 0.0, hue)
    return hue, mx, mn, chroma


def rgb_to_hsv_batch(pixels: NDArray) -> NDArray[np.float64]:
    """
    Convert an array of 8-bit RGB triples to HSV.

    Args:
        pixels: Array of shape (..., 3) with integer values [0, 255]

    Returns:
        Array of shape (..., 3) with (hue, saturation, value)
    """
    rgb = np.asarray(pixels, dtype=np.int64)
    hue, mx, _, chroma = _hue_batch(rgb)
    sat = np.where(mx == 0, 0.0, chroma / np.where(mx == 0, 1.0, mx))
    return np.stack([hue, np.minimum(sat, 1.0), mx], axis=-1)


def rgb_to_hsl_batch(pixels: NDArray) -> NDArray[np.float64]:
    """
    Convert an array of 8-bit RGB triples to HSL.

    Args:
        pixels: Array of shape (..., 3) with integer values [0, 255]

    Returns:
        Array of shape (..., 3) with (hue, saturation, luminosity)
    """
    rgb = np.asarray(pixels, dtype=np.int64)
    hue, mx, mn, chroma = _hue_batch(rgb)
    lum = 0.5 * (mx + mn)
    denom = np.where(lum <= 0.5, 2 * lum, 2 - 2 * lum)
    sat = np.where(chroma == 0, 0.0, chroma / np.where(chroma == 0, 1.0, denom))
    return np.stack([hue, np.minimum(sat, 1.0), lum], axis=-1)


def _sextant_to_rgb_batch(
    hue: NDArray[np.float64],
    c: NDArray[np.float64],
    m: NDArray[np.float64],
) -> NDArray[np.int64]:
    x = c * (1 - np.abs((hue / 60) % 2 - 1))
    zero = np.zeros_like(c)
    sextant = np.clip(np.floor_divide(hue, 60), 0, 5).astype(np.int64)
    conds = [sextant == i for i in range(6)]

    r = np.select(conds, [c, x, zero, zero, x, c])
    g = np.select(conds, [x, c, c, x, zero, zero])
    b = np.select(conds, [zero, zero, x, c, c, x])

    unscaled = np.stack([r, g, b], axis=-1)
    scaled = np.floor((unscaled + m[..., None]) * MAX_CHANNEL + 0.5)
    return np.clip(scaled, 0, MAX_CHANNEL).astype(np.int64)


def hsv_to_rgb_batch(hsv: NDArray) -> NDArray[np.int64]:
    """
    Convert an array of HSV triples to 8-bit RGB.

    Components are not range-checked; hue must already be in [0, 360).

    Args:
        hsv: Array of shape (..., 3) with (hue, saturation, value)

    Returns:
        Array of shape (..., 3) with integer RGB values [0, 255]
    """
    hsv = np.asarray(hsv, dtype=np.float64)
    hue, sat, val = hsv[..., 0], hsv[..., 1], hsv[..., 2]
    c = sat * val
    return _sextant_to_rgb_batch(hue, c, val - c)


def hsl_to_rgb_batch(hsl: NDArray) -> NDArray[np.int64]:
    """
    Convert an array of HSL triples to 8-bit RGB.

    Components are not range-checked; hue must already be in [0, 360).

    Args:
        hsl: Array of shape (..., 3) with (hue, saturation, luminosity)

    Returns:
        Array of shape (..., 3) with integer RGB values [0, 255]
    """
    hsl = np.asarray(hsl, dtype=np.float64)
    hue, sat, lum = hsl[..., 0], hsl[..., 1], hsl[..., 2]
    c = sat * (1 - np.abs(2 * lum - 1))
    return _sextant_to_rgb_batch(hue, c, lum - c / 2)
