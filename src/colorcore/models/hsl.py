"""HSL: hue, saturation, lightness relative to sRGB."""

from __future__ import annotations

import math
from dataclasses import dataclass

from colorcore.core.color import Color
from colorcore.core.numeric import HUE_EPSILON, normalize_deg
from colorcore.models.rgb import RGB, SRGB


@dataclass(frozen=True)
class HSL(Color):
    """
    | Component | Description  | Range      |
    | --------- | ------------ | ---------- |
    | h         | hue, degrees | [0, 360)   |
    | s         | saturation   | [0, 1]     |
    | l         | lightness    | [0, 1]     |

    The hue is NaN for achromatic colors.
    """

    component_names = ("h", "s", "l")
    polar_components = frozenset({"h"})

    h: float
    s: float
    l: float
    alpha: float = 1.0

    def to_rgb(self) -> RGB:
        # https://www.w3.org/TR/css-color-4/#hsl-to-rgb
        if self.s < HUE_EPSILON:
            return SRGB(self.l, self.l, self.l, self.alpha)

        h = 0.0 if math.isnan(self.h) else normalize_deg(self.h) / 30
        a = self.s * min(self.l, 1 - self.l)

        def channel(n: int) -> float:
            k = (n + h) % 12
            return self.l - a * max(-1.0, min(k - 3, 9 - k, 1.0))

        return SRGB(channel(0), channel(8), channel(4), self.alpha)

    def to_hsl(self) -> HSL:
        return self
