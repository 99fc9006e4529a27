"""
Tests for the sRGB-derived models: HSL, HSV, HWB and CMYK.
"""

import math

import numpy as np
import pytest

from colorcore.models.cmyk import CMYK
from colorcore.models.hsl import HSL
from colorcore.models.hsv import HSV
from colorcore.models.hwb import HWB
from colorcore.models.rgb import BT2020, SRGB

CHROMATIC = [
    (1.0, 0.0, 0.0),
    (0.2, 0.4, 0.6),
    (0.9, 0.1, 0.3),
    (0.05, 0.8, 0.02),
    (1.0, 0.0, 1.0),
    (0.6, 0.55, 0.1),
]

GREYS = [
    (0.0, 0.0, 0.0),
    (0.5, 0.5, 0.5),
    (1.0, 1.0, 1.0),
]


class TestHue:
    """Hue extraction shared by HSL, HSV and HWB."""

    @pytest.mark.parametrize("rgb,hue", [
        ((1.0, 0.0, 0.0), 0.0),
        ((1.0, 1.0, 0.0), 60.0),
        ((0.0, 1.0, 0.0), 120.0),
        ((0.0, 0.0, 1.0), 240.0),
        ((1.0, 0.0, 1.0), 300.0),
        ((0.2, 0.4, 0.6), 210.0),
    ])
    def test_six_regions(self, rgb, hue):
        assert SRGB(*rgb).to_hsv().h == pytest.approx(hue)

    @pytest.mark.parametrize("rgb", CHROMATIC)
    def test_range(self, rgb):
        c = SRGB(*rgb)
        for h in (c.to_hsl().h, c.to_hsv().h, c.to_hwb().h):
            assert 0.0 <= h < 360.0

    @pytest.mark.parametrize("rgb", GREYS)
    def test_achromatic_is_nan(self, rgb):
        c = SRGB(*rgb)
        assert math.isnan(c.to_hsl().h)
        assert math.isnan(c.to_hsv().h)
        assert math.isnan(c.to_hwb().h)

    def test_converted_to_srgb_first(self):
        """Values in other spaces are measured in sRGB."""
        c = SRGB(0.2, 0.4, 0.6)
        hsv = c.convert_to(BT2020).to_hsv()
        assert hsv.h == pytest.approx(210.0, abs=1e-6)
        assert hsv.v == pytest.approx(0.6, abs=1e-6)


class TestHSL:
    """RGB <-> HSL."""

    def test_red(self):
        hsl = SRGB(1.0, 0.0, 0.0).to_hsl()
        assert (hsl.h, hsl.s, hsl.l) == pytest.approx((0.0, 1.0, 0.5))

    def test_light_branch(self):
        """Lightness above one half uses chroma / (2 - max - min)."""
        hsl = SRGB(0.9, 0.7, 0.7).to_hsl()
        assert hsl.l == pytest.approx(0.8)
        assert hsl.s == pytest.approx(0.2 / 0.4)

    def test_dark_branch(self):
        hsl = SRGB(0.2, 0.4, 0.6).to_hsl()
        assert hsl.l == pytest.approx(0.4)
        assert hsl.s == pytest.approx(0.5)

    def test_grey_saturation_zero(self):
        hsl = SRGB(0.5, 0.5, 0.5, 0.3).to_hsl()
        assert hsl.s == 0.0
        assert hsl.l == pytest.approx(0.5)
        assert hsl.alpha == 0.3

    @pytest.mark.parametrize("rgb", CHROMATIC + GREYS)
    def test_roundtrip(self, rgb):
        c = SRGB(*rgb)
        back = c.to_hsl().to_rgb()
        np.testing.assert_allclose(back.components(), c.components(), atol=1e-9)


class TestHSV:
    """RGB <-> HSV."""

    def test_blue(self):
        hsv = SRGB(0.0, 0.5, 1.0).to_hsv()
        assert (hsv.h, hsv.s, hsv.v) == pytest.approx((210.0, 1.0, 1.0))

    def test_black(self):
        hsv = SRGB(0.0, 0.0, 0.0).to_hsv()
        assert hsv.s == 0.0
        assert hsv.v == 0.0

    @pytest.mark.parametrize("rgb", CHROMATIC + GREYS)
    def test_roundtrip(self, rgb):
        c = SRGB(*rgb)
        back = c.to_hsv().to_rgb()
        np.testing.assert_allclose(back.components(), c.components(), atol=1e-9)

    def test_hue_out_of_range_wraps(self):
        assert HSV(-120.0, 1.0, 1.0).to_rgb() == HSV(240.0, 1.0, 1.0).to_rgb()

    def test_hsb_to_hsl(self):
        """Conversions between the cylindrical models go through RGB."""
        hsl = HSV(210.0, 1.0, 1.0).to_hsl()
        assert (hsl.h, hsl.s, hsl.l) == pytest.approx((210.0, 1.0, 0.5))


class TestHWB:
    """RGB <-> HWB."""

    def test_values(self):
        hwb = SRGB(0.2, 0.4, 0.6).to_hwb()
        assert (hwb.h, hwb.w, hwb.b) == pytest.approx((210.0, 0.2, 0.4))

    @pytest.mark.parametrize("rgb", CHROMATIC + GREYS)
    def test_roundtrip(self, rgb):
        c = SRGB(*rgb)
        back = c.to_hwb().to_rgb()
        np.testing.assert_allclose(back.components(), c.components(), atol=1e-9)

    def test_whiteness_plus_blackness_over_one(self):
        """w + b >= 1 yields the normalized grey."""
        rgb = HWB(90.0, 0.7, 0.6).to_rgb()
        grey = 0.7 / 1.3
        assert rgb.components() == pytest.approx([grey, grey, grey, 1.0])

    def test_pure_black(self):
        assert HWB(math.nan, 0.0, 1.0).to_rgb() == SRGB(0.0, 0.0, 0.0)

    def test_negative_whiteness_full_blackness(self):
        """b == 1 with w < 0 is black rather than a division by zero."""
        assert HWB(120.0, -0.2, 1.0, 0.4).to_rgb() == SRGB(0.0, 0.0, 0.0, 0.4)


class TestCMYK:
    """RGB <-> CMYK."""

    def test_black(self):
        """k == 1 short-circuits without dividing by zero."""
        assert SRGB(0.0, 0.0, 0.0).to_cmyk() == CMYK(0.0, 0.0, 0.0, 1.0)

    def test_orange(self):
        cmyk = SRGB(1.0, 0.5, 0.0).to_cmyk()
        assert cmyk.components() == pytest.approx([0.0, 0.5, 1.0, 0.0, 1.0])

    def test_key(self):
        cmyk = SRGB(0.5, 0.25, 0.0).to_cmyk()
        assert cmyk.k == pytest.approx(0.5)
        assert cmyk.c == pytest.approx(0.0)
        assert cmyk.m == pytest.approx(0.5)
        assert cmyk.y == pytest.approx(1.0)

    def test_white(self):
        assert SRGB(1.0, 1.0, 1.0).to_cmyk() == CMYK(0.0, 0.0, 0.0, 0.0)

    @pytest.mark.parametrize("rgb", CHROMATIC + GREYS)
    def test_roundtrip(self, rgb):
        c = SRGB(*rgb, 0.5)
        back = c.to_cmyk().to_rgb()
        np.testing.assert_allclose(back.components(), c.components(), atol=1e-9)
