"""
CIE 1931 XYZ, the connection space for cross-model conversion.

XYZ values are tagged with the reference white they are relative to. That
white is carried into LAB and LUV when converting onward.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from colorcore.core import illuminant
from colorcore.core.color import Color
from colorcore.core.constants import CIE_E, CIE_K
from colorcore.core.illuminant import Illuminant
from colorcore.core.numeric import cbrt
from colorcore.models.rgb import BT2020, RGB, SRGB, RGBColorSpace

if TYPE_CHECKING:
    from colorcore.models.ictcp import ICtCp
    from colorcore.models.lab import LAB
    from colorcore.models.luv import LUV
    from colorcore.models.oklab import Oklab

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class XYZColorSpace:
    """XYZ relative to a given reference white."""

    white_point: Illuminant = illuminant.D65

    @property
    def name(self) -> str:
        return "XYZ"

    def __call__(self, x: float, y: float, z: float, alpha: float = 1.0) -> XYZ:
        return XYZ(float(x), float(y), float(z), float(alpha), self)


XYZ65 = XYZColorSpace(illuminant.D65)
XYZ50 = XYZColorSpace(illuminant.D50)


def _lab_f(t: float) -> float:
    if t > CIE_E:
        return cbrt(t)
    return (CIE_K * t + 16) / 116


@dataclass(frozen=True)
class XYZ(Color):
    """
    CIE XYZ tristimulus values.

    | Component | Range (sRGB, D65) |
    | --------- | ----------------- |
    | x         | [0, 0.9505]       |
    | y         | [0, 1]            |
    | z         | [0, 1.089]        |
    """

    component_names = ("x", "y", "z")

    x: float
    y: float
    z: float
    alpha: float
    space: XYZColorSpace

    def to_xyz(self) -> XYZ:
        return self

    def to_rgb(self, space: RGBColorSpace = SRGB) -> RGB:
        """
        Convert into an RGB space.

        The matrix of the target space is applied directly; values relative
        to a different white point are not chromatically adapted.
        """
        if space.white_point != self.space.white_point:
            logger.debug(
                "Converting XYZ relative to %r into %s (white point %r) without adaptation",
                self.space.white_point,
                space.name,
                space.white_point,
            )
        f = space.transfer_functions
        r, g, b = space.matrix_from_xyz.dot(self.x, self.y, self.z)
        return space(f.oetf(r), f.oetf(g), f.oetf(b), self.alpha)

    def to_lab(self) -> LAB:
        # http://www.brucelindbloom.com/Eqn_XYZ_to_Lab.html
        from colorcore.models.lab import LABColorSpace

        wp = self.space.white_point
        fx = _lab_f(self.x / wp.x)
        fy = _lab_f(self.y / wp.y)
        fz = _lab_f(self.z / wp.z)

        l = 116 * fy - 16
        a = 500 * (fx - fy)
        b = 200 * (fy - fz)
        return LABColorSpace(wp)(l, a, b, self.alpha)

    def to_luv(self) -> LUV:
        # http://www.brucelindbloom.com/Eqn_XYZ_to_Luv.html
        from colorcore.models.luv import LUVColorSpace, white_point_uv

        wp = self.space.white_point
        denominator = self.x + 15 * self.y + 3 * self.z
        u_prime = 0.0 if denominator == 0 else 4 * self.x / denominator
        v_prime = 0.0 if denominator == 0 else 9 * self.y / denominator
        ur, vr = white_point_uv(wp)

        yr = self.y / wp.y
        l = 116 * cbrt(yr) - 16 if yr > CIE_E else CIE_K * yr
        u = 13 * l * (u_prime - ur)
        v = 13 * l * (v_prime - vr)
        return LUVColorSpace(wp)(l, u, v, self.alpha)

    def to_oklab(self) -> Oklab:
        from colorcore.models.oklab import xyz_to_oklab

        return xyz_to_oklab(self.x, self.y, self.z, self.alpha)

    def to_ictcp(self) -> ICtCp:
        from colorcore.models.ictcp import bt2020_to_ictcp

        return bt2020_to_ictcp(self.to_rgb(BT2020))
