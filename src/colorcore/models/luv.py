"""CIE 1976 L*u*v*."""

from __future__ import annotations

from dataclasses import dataclass

from colorcore.core import illuminant
from colorcore.core.color import Color
from colorcore.core.constants import CIE_E_TIMES_K, CIE_K
from colorcore.core.illuminant import Illuminant
from colorcore.models.rgb import RGB
from colorcore.models.xyz import XYZ, XYZColorSpace


def white_point_uv(wp: Illuminant) -> tuple[float, float]:
    """u'v' chromaticity of a reference white."""
    denominator = wp.x + 15 * wp.y + 3 * wp.z
    return 4 * wp.x / denominator, 9 * wp.y / denominator


@dataclass(frozen=True)
class LUVColorSpace:
    """LUV relative to a given reference white."""

    white_point: Illuminant = illuminant.D65

    @property
    def name(self) -> str:
        return "LUV"

    def __call__(self, l: float, u: float, v: float, alpha: float = 1.0) -> LUV:
        return LUV(float(l), float(u), float(v), float(alpha), self)


LUV65 = LUVColorSpace(illuminant.D65)
LUV50 = LUVColorSpace(illuminant.D50)


@dataclass(frozen=True)
class LUV(Color):
    """
    | Component | Description | sRGB D65 range     |
    | --------- | ----------- | ------------------ |
    | l         | lightness   | [0, 100]           |
    | u         |             | [-83.08, 175.02]   |
    | v         |             | [-134.1, 107.4]    |
    """

    component_names = ("l", "u", "v")

    l: float
    u: float
    v: float
    alpha: float
    space: LUVColorSpace

    def to_rgb(self) -> RGB:
        return self.to_xyz().to_rgb()

    def to_xyz(self) -> XYZ:
        # http://www.brucelindbloom.com/Eqn_Luv_to_XYZ.html
        wp = self.space.white_point
        xyz_space = XYZColorSpace(wp)
        if self.l == 0:
            return xyz_space(0.0, 0.0, 0.0, self.alpha)

        u0, v0 = white_point_uv(wp)
        u_denominator = self.u + 13 * self.l * u0
        v_denominator = self.v + 13 * self.l * v0
        if u_denominator == 0 or v_denominator == 0:
            return xyz_space(0.0, 0.0, 0.0, self.alpha)

        y = ((self.l + 16) / 116) ** 3 if self.l > CIE_E_TIMES_K else self.l / CIE_K
        y *= wp.y

        a = (52 * self.l / u_denominator - 1) / 3
        b = -5 * y
        c = -1.0 / 3
        d = y * (39 * self.l / v_denominator - 5)

        x = (d - b) / (a - c)
        z = x * a + b
        return xyz_space(x, y, z, self.alpha)

    def to_luv(self) -> LUV:
        return self
