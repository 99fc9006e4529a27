"""CMYK: naive device-independent subtractive model derived from sRGB."""

from __future__ import annotations

from dataclasses import dataclass

from colorcore.core.color import Color
from colorcore.models.rgb import RGB, SRGB


@dataclass(frozen=True)
class CMYK(Color):
    """Cyan, magenta, yellow and key (black), each in [0, 1]."""

    component_names = ("c", "m", "y", "k")

    c: float
    m: float
    y: float
    k: float
    alpha: float = 1.0

    def to_rgb(self) -> RGB:
        return SRGB(
            (1 - self.c) * (1 - self.k),
            (1 - self.m) * (1 - self.k),
            (1 - self.y) * (1 - self.k),
            self.alpha,
        )

    def to_cmyk(self) -> CMYK:
        return self
