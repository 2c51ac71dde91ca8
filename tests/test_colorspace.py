# Copyright (c) 2026 Huekit
# SPDX-License-Identifier: MIT

"""Tests for color space conversions (RGB ↔ HSV, RGB ↔ HSL)."""

import numpy as np
import pytest

from huekit.space.colorspace import (
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


def _random_pixels(n=500):
    return np.random.RandomState(42).randint(0, 256, size=(n, 3))


class TestHelpers:

    def test_clamp01(self):
        assert clamp01(-0.5) == 0.0
        assert clamp01(0.25) == 0.25
        assert clamp01(1.5) == 1.0

    def test_clamp_channel_rounds_half_up(self):
        assert clamp_channel(127.5) == 128
        assert clamp_channel(0.49) == 0
        assert clamp_channel(254.5) == 255

    def test_clamp_channel_bounds(self):
        assert clamp_channel(-3) == 0
        assert clamp_channel(300) == 255

    def test_wrap_hue(self):
        assert wrap_hue(-90) == 270
        assert wrap_hue(720) == 0
        assert wrap_hue(359.5) == 359.5

    def test_wrap_hue_tiny_negative(self):
        """-1e-20 % 360 rounds to 360.0; must still land in [0, 360)."""
        assert wrap_hue(-1e-20) == 0.0


class TestHue:

    @pytest.mark.parametrize("rgb, hue", [
        ((255, 0, 0), 0.0),
        ((0, 255, 0), 120.0),
        ((0, 0, 255), 240.0),
        ((0, 255, 255), 180.0),
        ((255, 0, 255), 300.0),
    ])
    def test_primary_and_secondary(self, rgb, hue):
        assert hue_of(*rgb) == pytest.approx(hue)

    def test_gray_has_zero_hue(self):
        assert hue_of(128, 128, 128) == 0.0

    def test_yellow_takes_red_branch(self):
        """Red and green tie for max; red wins."""
        assert hue_of(255, 255, 0) == pytest.approx(60.0)

    def test_hue_in_range(self):
        for r, g, b in _random_pixels():
            assert 0.0 <= hue_of(int(r), int(g), int(b)) < 360.0


class TestRGBToHSV:

    def test_red(self):
        assert rgb_to_hsv(255, 0, 0) == (0.0, 1.0, 1.0)

    def test_black(self):
        assert rgb_to_hsv(0, 0, 0) == (0.0, 0.0, 0.0)

    def test_white(self):
        assert rgb_to_hsv(255, 255, 255) == (0.0, 0.0, 1.0)


class TestRGBToHSL:

    def test_red(self):
        assert rgb_to_hsl(255, 0, 0) == (0.0, 1.0, 0.5)

    def test_white_has_zero_saturation(self):
        _, sat, lum = rgb_to_hsl(255, 255, 255)
        assert sat == 0.0
        assert lum == 1.0

    def test_components_in_unit_range(self):
        for r, g, b in _random_pixels():
            _, sat, lum = rgb_to_hsl(int(r), int(g), int(b))
            assert 0.0 <= sat <= 1.0
            assert 0.0 <= lum <= 1.0


class TestToRGB:

    def test_hsv_red(self):
        assert hsv_to_rgb(0, 1, 1) == (255, 0, 0)

    def test_hsv_blue(self):
        assert hsv_to_rgb(240, 1, 1) == (0, 0, 255)

    def test_hsl_half_up_rounding(self):
        """(0.25, 0.5, 0.75) * 255 = (63.75, 127.5, 191.25)."""
        assert hsl_to_rgb(210, 0.5, 0.5) == (64, 128, 191)

    def test_hsl_white_and_black(self):
        assert hsl_to_rgb(0, 0, 1) == (255, 255, 255)
        assert hsl_to_rgb(0, 0, 0) == (0, 0, 0)

    @pytest.mark.parametrize("hue", [-1, 360, 400])
    def test_hue_out_of_range(self, hue):
        with pytest.raises(ValueError, match="Hue"):
            hsv_to_rgb(hue, 0.5, 0.5)

    def test_saturation_out_of_range(self):
        with pytest.raises(ValueError, match="Saturation"):
            hsl_to_rgb(0, 1.5, 0.5)

    def test_value_out_of_range(self):
        with pytest.raises(ValueError, match="Value"):
            hsv_to_rgb(0, 0.5, -0.1)

    def test_luminosity_out_of_range(self):
        with pytest.raises(ValueError, match="Luminosity"):
            hsl_to_rgb(0, 0.5, 2)


class TestRoundtrip:
    """RGB → HSV/HSL → RGB recovers every channel within ±1."""

    def test_hsv_roundtrip(self):
        for r, g, b in _random_pixels():
            rgb = (int(r), int(g), int(b))
            recovered = hsv_to_rgb(*rgb_to_hsv(*rgb))
            assert all(abs(x - y) <= 1 for x, y in zip(recovered, rgb))

    def test_hsl_roundtrip(self):
        for r, g, b in _random_pixels():
            rgb = (int(r), int(g), int(b))
            recovered = hsl_to_rgb(*rgb_to_hsl(*rgb))
            assert all(abs(x - y) <= 1 for x, y in zip(recovered, rgb))


class TestBatch:
    """Batch functions agree with their scalar counterparts."""

    def test_rgb_to_hsv_batch(self):
        pixels = _random_pixels()
        expected = np.array([rgb_to_hsv(*map(int, p)) for p in pixels])
        np.testing.assert_allclose(rgb_to_hsv_batch(pixels), expected, atol=1e-9)

    def test_rgb_to_hsl_batch(self):
        pixels = _random_pixels()
        expected = np.array([rgb_to_hsl(*map(int, p)) for p in pixels])
        np.testing.assert_allclose(rgb_to_hsl_batch(pixels), expected, atol=1e-9)

    def test_hsv_to_rgb_batch(self):
        hsv = rgb_to_hsv_batch(_random_pixels())
        expected = np.array([hsv_to_rgb(*map(float, t)) for t in hsv])
        np.testing.assert_array_equal(hsv_to_rgb_batch(hsv), expected)

    def test_hsl_to_rgb_batch(self):
        hsl = rgb_to_hsl_batch(_random_pixels())
        expected = np.array([hsl_to_rgb(*map(float, t)) for t in hsl])
        np.testing.assert_array_equal(hsl_to_rgb_batch(hsl), expected)

    def test_gray_pixels(self):
        hsv = rgb_to_hsv_batch(np.array([[0, 0, 0], [200, 200, 200]]))
        np.testing.assert_array_equal(hsv[:, 0], [0.0, 0.0])
        np.testing.assert_array_equal(hsv[:, 1], [0.0, 0.0])

    def test_shape_preserved(self):
        pixels = np.zeros((4, 5, 3), dtype=np.uint8)
        assert rgb_to_hsv_batch(pixels).shape == (4, 5, 3)
        assert hsl_to_rgb_batch(rgb_to_hsl_batch(pixels)).shape == (4, 5, 3)
