"""HSV: hue, saturation, value relative to sRGB."""

from __future__ import annotations

import math
from dataclasses import dataclass

from colorcore.core.color import Color
from colorcore.core.numeric import HUE_EPSILON, normalize_deg
from colorcore.models.rgb import RGB, SRGB


@dataclass(frozen=True)
class HSV(Color):
    """
    | Component | Description  | Range      |
    | --------- | ------------ | ---------- |
    | h         | hue, degrees | [0, 360)   |
    | s         | saturation   | [0, 1]     |
    | v         | value        | [0, 1]     |

    The hue is NaN for achromatic colors.
    """

    component_names = ("h", "s", "v")
    polar_components = frozenset({"h"})

    h: float
    s: float
    v: float
    alpha: float = 1.0

    def to_rgb(self) -> RGB:
        if self.s < HUE_EPSILON:
            return SRGB(self.v, self.v, self.v, self.alpha)

        h = 0.0 if math.isnan(self.h) else normalize_deg(self.h) / 60

        def channel(n: int) -> float:
            k = (n + h) % 6
            return self.v - self.v * self.s * max(0.0, min(k, 4 - k, 1.0))

        return SRGB(channel(5), channel(3), channel(1), self.alpha)

    def to_hsv(self) -> HSV:
        return self
