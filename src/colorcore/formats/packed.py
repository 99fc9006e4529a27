"""Packed 32-bit ARGB integer representation of sRGB colors."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from colorcore.core.numeric import round_half_up
from colorcore.formats.hex import RenderCondition, format_hex

if TYPE_CHECKING:
    from colorcore.models.rgb import RGB


def _to_byte(x: float) -> int:
    return min(max(round_half_up(x * 255), 0), 255)


@dataclass(frozen=True)
class RGBInt:
    """
    An sRGB color packed as ``0xAARRGGBB``.

    Attributes:
        argb: Unsigned 32-bit packed value
    """

    argb: int

    def __post_init__(self) -> None:
        if not 0 <= self.argb <= 0xFFFFFFFF:
            raise ValueError(f"Packed ARGB value out of range: {self.argb}")

    @classmethod
    def from_rgba(cls, r: int, g: int, b: int, alpha: int = 255) -> RGBInt:
        """Pack four channels in [0, 255]."""
        for name, v in (("r", r), ("g", g), ("b", b), ("alpha", alpha)):
            if not 0 <= v <= 255:
                raise ValueError(f"Channel {name} must be in [0, 255], got {v}")
        return cls((alpha << 24) | (r << 16) | (g << 8) | b)

    @classmethod
    def from_rgb(cls, rgb: RGB) -> RGBInt:
        """Pack any RGB value after converting it to sRGB and clamping."""
        c = rgb.to_srgb()
        alpha = 1.0 if math.isnan(c.alpha) else c.alpha
        return cls.from_rgba(_to_byte(c.r), _to_byte(c.g), _to_byte(c.b), _to_byte(alpha))

    @property
    def a(self) -> int:
        return (self.argb >> 24) & 0xFF

    @property
    def r(self) -> int:
        return (self.argb >> 16) & 0xFF

    @property
    def g(self) -> int:
        return (self.argb >> 8) & 0xFF

    @property
    def b(self) -> int:
        return self.argb & 0xFF

    def to_rgba(self) -> int:
        """Repack as ``0xRRGGBBAA``."""
        return (self.r << 24) | (self.g << 16) | (self.b << 8) | self.a

    def to_rgb(self) -> RGB:
        from colorcore.models.rgb import SRGB

        return SRGB.from255(self.r, self.g, self.b, self.a)

    def to_hex(self, with_number_sign: bool = True, render_alpha: RenderCondition = RenderCondition.AUTO) -> str:
        return format_hex(self.r, self.g, self.b, self.a, with_number_sign, render_alpha)
