"""HWB: hue, whiteness, blackness relative to sRGB."""

from __future__ import annotations

from dataclasses import dataclass

from colorcore.core.color import Color
from colorcore.models.hsv import HSV
from colorcore.models.rgb import RGB, SRGB


@dataclass(frozen=True)
class HWB(Color):
    """
    | Component | Description  | Range      |
    | --------- | ------------ | ---------- |
    | h         | hue, degrees | [0, 360)   |
    | w         | whiteness    | [0, 1]     |
    | b         | blackness    | [0, 1]     |
    """

    component_names = ("h", "w", "b")
    polar_components = frozenset({"h"})

    h: float
    w: float
    b: float
    alpha: float = 1.0

    def to_rgb(self) -> RGB:
        # https://www.w3.org/TR/css-color-4/#hwb-to-rgb
        if self.w + self.b >= 1:
            grey = self.w / (self.w + self.b)
            return SRGB(grey, grey, grey, self.alpha)

        v = 1 - self.b
        if v == 0:
            return SRGB(0.0, 0.0, 0.0, self.alpha)
        return HSV(self.h, 1 - self.w / v, v, self.alpha).to_rgb()

    def to_hwb(self) -> HWB:
        return self
