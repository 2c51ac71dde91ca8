# Copyright (c) 2026 Huekit
# SPDX-License-Identifier: MIT

"""
WCAG relative luminance and contrast ratio.

References:
- https://www.w3.org/TR/WCAG/#dfn-relative-luminance
- https://www.w3.org/TR/WCAG/#dfn-contrast-ratio

Luminance here is the WCAG perceptual brightness measure. It is unrelated
to HSL luminosity, which is just the midpoint of the max and min channels.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

import numpy as np
from numpy.typing import NDArray

from huekit.space.colorspace import MAX_CHANNEL


# WCAG 2.x linearization threshold (IEC 61966-2-1 uses 0.04045; the difference
# never changes an 8-bit result)
_LINEAR_THRESHOLD = 0.03928

# Rec. 709 luma coefficients
_COEFFICIENTS = (0.2126, 0.7152, 0.0722)


# =============================================================================
# Relative Luminance
# =============================================================================


def srgb_to_linear(c: float) -> float:
    """
    Linearize one normalized sRGB channel [0, 1].

    - For values <= 0.03928: c/12.92
    - Otherwise: ((c + 0.055) / 1.055) ^ 2.4
    """
    if c <= _LINEAR_THRESHOLD:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(r: int, g: int, b: int) -> float:
    """
    WCAG relative luminance of an 8-bit RGB triple.

    Returns:
        Luminance in [0, 1]; 0 for black, 1 for white
    """
    kr, kg, kb = _COEFFICIENTS
    return (
        kr * srgb_to_linear(r / MAX_CHANNEL)
        + kg * srgb_to_linear(g / MAX_CHANNEL)
        + kb * srgb_to_linear(b / MAX_CHANNEL)
    )


def relative_luminance_batch(pixels: NDArray) -> NDArray[np.float64]:
    """
    Vectorized relative luminance.

    Args:
        pixels: Array of shape (..., 3) with integer RGB values [0, 255]

    Returns:
        Array of shape (...,) with luminance values
    """
    c = np.asarray(pixels, dtype=np.float64) / MAX_CHANNEL
    linear = np.where(
        c <= _LINEAR_THRESHOLD,
        c / 12.92,
        np.power((c + 0.055) / 1.055, 2.4),
    )
    kr, kg, kb = _COEFFICIENTS
    return kr * linear[..., 0] + kg * linear[..., 1] + kb * linear[..., 2]


# =============================================================================
# Contrast Ratio
# =============================================================================


def contrast_ratio_from_luminance(l1: float, l2: float) -> float:
    """
    Contrast ratio between two relative luminances.

    The lighter luminance always goes on top, so the result is symmetric
    and bounded by [1, 21].
    """
    lighter = max(l1, l2)
    darker = min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


def contrast_ratio(
    rgb1: tuple[int, int, int],
    rgb2: tuple[int, int, int],
) -> float:
    """
    WCAG contrast ratio between two 8-bit RGB triples.

    Args:
        rgb1: First color (r, g, b)
        rgb2: Second color (r, g, b)

    Returns:
        Ratio in [1, 21]; black on white is 21
    """
    return contrast_ratio_from_luminance(
        relative_luminance(*rgb1),
        relative_luminance(*rgb2),
    )


def contrast_ratio_batch(
    pixels1: NDArray,
    pixels2: NDArray,
) -> NDArray[np.float64]:
    """
    Vectorized contrast ratio for pairs of colors.

    Args:
        pixels1: Array of shape (N, 3) with integer RGB values
        pixels2: Array of shape (N, 3) with integer RGB values

    Returns:
        Array of shape (N,) with contrast ratios
    """
    l1 = relative_luminance_batch(pixels1)
    l2 = relative_luminance_batch(pixels2)
    return (np.maximum(l1, l2) + 0.05) / (np.minimum(l1, l2) + 0.05)


# =============================================================================
# Conformance
# =============================================================================


class WCAGLevel(Enum):
    """WCAG success-criterion level for text contrast."""

    AA = "AA"    # 1.4.3 Contrast (Minimum)
    AAA = "AAA"  # 1.4.6 Contrast (Enhanced)


@dataclass(frozen=True)
class WCAGThresholds:
    """Minimum contrast ratios per level and text size."""

    aa: float = 4.5
    aa_large: float = 3.0  # 18pt+, or 14pt+ bold
    aaa: float = 7.0
    aaa_large: float = 4.5


def required_ratio(
    level: WCAGLevel = WCAGLevel.AA,
    *,
    large_text: bool = False,
    thresholds: Optional[WCAGThresholds] = None,
) -> float:
    """Minimum ratio required by a WCAG level."""
    cfg = thresholds or WCAGThresholds()
    level = WCAGLevel(level)
    if level is WCAGLevel.AAA:
        return cfg.aaa_large if large_text else cfg.aaa
    return cfg.aa_large if large_text else cfg.aa


def meets_contrast(
    ratio: float,
    level: WCAGLevel = WCAGLevel.AA,
    *,
    large_text: bool = False,
    thresholds: Optional[WCAGThresholds] = None,
) -> bool:
    """
    Check a contrast ratio against a WCAG level.

    Args:
        ratio: Contrast ratio, e.g. from ``contrast_ratio``
        level: AA (default) or AAA
        large_text: Use the relaxed large-text threshold
        thresholds: Override the standard thresholds (uses defaults if None)
    """
    return ratio >= required_ratio(level, large_text=large_text, thresholds=thresholds)
