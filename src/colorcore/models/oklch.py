"""Oklch: the cylindrical form of Oklab."""

from __future__ import annotations

from dataclasses import dataclass

from colorcore.core.color import Color
from colorcore.core.numeric import from_polar
from colorcore.models.oklab import Oklab
from colorcore.models.rgb import RGB
from colorcore.models.xyz import XYZ


@dataclass(frozen=True)
class Oklch(Color):
    """Lightness, chroma and hue (degrees) of an Oklab color."""

    component_names = ("l", "c", "h")
    polar_components = frozenset({"h"})

    l: float
    c: float
    h: float
    alpha: float = 1.0

    def to_oklab(self) -> Oklab:
        a, b = from_polar(self.c, self.h)
        return Oklab(self.l, a, b, self.alpha)

    def to_oklch(self) -> Oklch:
        return self

    def to_rgb(self) -> RGB:
        return self.to_oklab().to_rgb()

    def to_xyz(self) -> XYZ:
        return self.to_oklab().to_xyz()
