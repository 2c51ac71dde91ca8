# Copyright (c) 2026 Huekit
# SPDX-License-Identifier: MIT

"""
Color space math for Huekit.

Pure functions only: RGB ↔ HSV/HSL conversion and WCAG contrast.
Scalar functions back the Color type; ``*_batch`` twins work on NumPy arrays.
"""

from huekit.space.colorspace import (
    HUE_RANGE,
    MAX_CHANNEL,
    clamp01,
    clamp_channel,
    hsl_to_rgb,
    hsl_to_rgb_batch,
    hsv_to_rgb,
    hsv_to_rgb_batch,
    hue_of,
    rgb_to_hsl,
    rgb_to_hsl_batch,
    rgb_to_hsv,
    rgb_to_hsv_batch,
    wrap_hue,
)
from huekit.space.contrast import (
    WCAGLevel,
    WCAGThresholds,
    contrast_ratio,
    contrast_ratio_batch,
    meets_contrast,
    relative_luminance,
    relative_luminance_batch,
    required_ratio,
)

__all__ = [
    # Constants
    "MAX_CHANNEL",
    "HUE_RANGE",
    # Helpers
    "clamp01",
    "clamp_channel",
    "wrap_hue",
    "hue_of",
    # Scalar conversions
    "rgb_to_hsv",
    "rgb_to_hsl",
    "hsv_to_rgb",
    "hsl_to_rgb",
    # Batch conversions
    "rgb_to_hsv_batch",
    "rgb_to_hsl_batch",
    "hsv_to_rgb_batch",
    "hsl_to_rgb_batch",
    # Contrast
    "relative_luminance",
    "relative_luminance_batch",
    "contrast_ratio",
    "contrast_ratio_batch",
    "WCAGLevel",
    "WCAGThresholds",
    "required_ratio",
    "meets_contrast",
]
