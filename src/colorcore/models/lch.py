"""CIE LCh(ab): the cylindrical form of LAB."""

from __future__ import annotations

from dataclasses import dataclass

from colorcore.core import illuminant
from colorcore.core.color import Color
from colorcore.core.illuminant import Illuminant
from colorcore.core.numeric import from_polar
from colorcore.models.lab import LAB, LABColorSpace
from colorcore.models.rgb import RGB
from colorcore.models.xyz import XYZ


@dataclass(frozen=True)
class LCHColorSpace:
    """LCH relative to a given reference white."""

    white_point: Illuminant = illuminant.D65

    @property
    def name(self) -> str:
        return "LCH"

    def __call__(self, l: float, c: float, h: float, alpha: float = 1.0) -> LCH:
        return LCH(float(l), float(c), float(h), float(alpha), self)


LCH65 = LCHColorSpace(illuminant.D65)
LCH50 = LCHColorSpace(illuminant.D50)


@dataclass(frozen=True)
class LCH(Color):
    """
    | Component | Description          | sRGB D65 range |
    | --------- | -------------------- | -------------- |
    | l         | lightness            | [0, 100]       |
    | c         | chroma               | [0, 131.207]   |
    | h         | hue, degrees         | [0, 360)       |
    """

    component_names = ("l", "c", "h")
    polar_components = frozenset({"h"})

    l: float
    c: float
    h: float
    alpha: float
    space: LCHColorSpace

    def to_lab(self) -> LAB:
        a, b = from_polar(self.c, self.h)
        return LABColorSpace(self.space.white_point)(self.l, a, b, self.alpha)

    def to_lch(self) -> LCH:
        return self

    def to_xyz(self) -> XYZ:
        return self.to_lab().to_xyz()

    def to_rgb(self) -> RGB:
        return self.to_lab().to_rgb()
