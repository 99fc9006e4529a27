"""
CIE 1976 L*a*b*.

LAB is calculated relative to a reference white (D65 by default). Its
cylindrical form is LCH.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from colorcore.core import illuminant
from colorcore.core.color import Color
from colorcore.core.constants import CIE_E, CIE_E_TIMES_K, CIE_K
from colorcore.core.illuminant import Illuminant
from colorcore.core.numeric import to_polar
from colorcore.models.rgb import RGB, SRGB
from colorcore.models.xyz import XYZ, XYZColorSpace

if TYPE_CHECKING:
    from colorcore.models.lch import LCH


@dataclass(frozen=True)
class LABColorSpace:
    """LAB relative to a given reference white."""

    white_point: Illuminant = illuminant.D65

    @property
    def name(self) -> str:
        return "LAB"

    def __call__(self, l: float, a: float, b: float, alpha: float = 1.0) -> LAB:
        return LAB(float(l), float(a), float(b), float(alpha), self)


LAB65 = LABColorSpace(illuminant.D65)
LAB50 = LABColorSpace(illuminant.D50)


@dataclass(frozen=True)
class LAB(Color):
    """
    CIE LAB.

    | Component | Description | sRGB D65 range     |
    | --------- | ----------- | ------------------ |
    | l         | lightness   | [0, 100]           |
    | a         | green/red   | [-86.1, 98.23]     |
    | b         | blue/yellow | [-107.86, 94.48]   |
    """

    component_names = ("l", "a", "b")

    l: float
    a: float
    b: float
    alpha: float
    space: LABColorSpace

    def to_rgb(self) -> RGB:
        if self.l == 0:
            return SRGB(0.0, 0.0, 0.0, self.alpha)
        return self.to_xyz().to_rgb()

    def to_xyz(self) -> XYZ:
        # http://www.brucelindbloom.com/Eqn_Lab_to_XYZ.html
        wp = self.space.white_point
        xyz_space = XYZColorSpace(wp)
        if self.l == 0:
            return xyz_space(0.0, 0.0, 0.0, self.alpha)

        fy = (self.l + 16) / 116
        fz = fy - self.b / 200
        fx = self.a / 500 + fy

        yr = fy ** 3 if self.l > CIE_E_TIMES_K else self.l / CIE_K
        zr = fz ** 3
        if zr <= CIE_E:
            zr = (116 * fz - 16) / CIE_K
        xr = fx ** 3
        if xr <= CIE_E:
            xr = (116 * fx - 16) / CIE_K

        return xyz_space(xr * wp.x, yr * wp.y, zr * wp.z, self.alpha)

    def to_lab(self) -> LAB:
        return self

    def to_lch(self) -> LCH:
        from colorcore.models.lch import LCHColorSpace

        c, h = to_polar(self.a, self.b)
        return LCHColorSpace(self.space.white_point)(self.l, c, h, self.alpha)
