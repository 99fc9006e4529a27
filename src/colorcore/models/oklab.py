"""
Oklab perceptual color space.

Reference: https://bottosson.github.io/posts/oklab/

sRGB input takes the published linear sRGB -> LMS fast path; every other
space goes through XYZ (D65) with the XYZ -> LMS matrix.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from colorcore.core.color import Color
from colorcore.core.numeric import Matrix, cbrt, to_polar
from colorcore.models.rgb import LINEAR_SRGB, RGB, SRGB
from colorcore.models.xyz import XYZ, XYZ65

if TYPE_CHECKING:
    from colorcore.models.oklch import Oklch

# === Oklab matrices (Ottosson's reference implementation) ===

# Linear sRGB -> LMS
_LINEAR_SRGB_TO_LMS = Matrix((
    (0.4122214708, 0.5363325363, 0.0514459929),
    (0.2119034982, 0.6806995451, 0.1073969566),
    (0.0883024619, 0.2817188376, 0.6299787005),
))

# XYZ (D65) -> LMS
_XYZ_TO_LMS = Matrix((
    (0.8189330101, 0.3618667424, -0.1288597137),
    (0.0329845436, 0.9293118715, 0.0361456387),
    (0.0482003018, 0.2643662691, 0.6338517070),
))

# LMS cube root -> Oklab
_LMS_TO_OKLAB = Matrix((
    (0.2104542553, 0.7936177850, -0.0040720468),
    (1.9779984951, -2.4285922050, 0.4505937099),
    (0.0259040371, 0.7827717662, -0.8086757660),
))

# Oklab -> LMS cube root
_OKLAB_TO_LMS = Matrix((
    (1.0, 0.3963377774, 0.2158037573),
    (1.0, -0.1055613458, -0.0638541728),
    (1.0, -0.0894841775, -1.2914855480),
))

# LMS -> linear sRGB
_LMS_TO_LINEAR_SRGB = Matrix((
    (+4.0767416621, -3.3077115913, +0.2309699292),
    (-1.2684380046, +2.6097574011, -0.3413193965),
    (-0.0041960863, -0.7034186147, +1.7076147010),
))

_LMS_TO_XYZ = _XYZ_TO_LMS.inverse()


def _lms_to_oklab(l: float, m: float, s: float, alpha: float) -> Oklab:
    lab_l, lab_a, lab_b = _LMS_TO_OKLAB.dot(cbrt(l), cbrt(m), cbrt(s))
    return Oklab(lab_l, lab_a, lab_b, alpha)


def linear_srgb_to_oklab(r: float, g: float, b: float, alpha: float = 1.0) -> Oklab:
    """Linear sRGB components -> Oklab."""
    return _lms_to_oklab(*_LINEAR_SRGB_TO_LMS.dot(r, g, b), alpha)


def xyz_to_oklab(x: float, y: float, z: float, alpha: float = 1.0) -> Oklab:
    """XYZ (relative to D65) -> Oklab."""
    return _lms_to_oklab(*_XYZ_TO_LMS.dot(x, y, z), alpha)


@dataclass(frozen=True)
class Oklab(Color):
    """
    | Component | Description | sRGB range |
    | --------- | ----------- | ---------- |
    | l         | lightness   | [0, 1]     |
    | a         | green/red   | [-0.24, 0.28] |
    | b         | blue/yellow | [-0.32, 0.2]  |
    """

    component_names = ("l", "a", "b")

    l: float
    a: float
    b: float
    alpha: float = 1.0

    def _lms(self) -> tuple[float, float, float]:
        l_, m_, s_ = _OKLAB_TO_LMS.dot(self.l, self.a, self.b)
        return l_ ** 3, m_ ** 3, s_ ** 3

    def to_rgb(self) -> RGB:
        r, g, b = _LMS_TO_LINEAR_SRGB.dot(*self._lms())
        return LINEAR_SRGB(r, g, b, self.alpha).convert_to(SRGB)

    def to_xyz(self) -> XYZ:
        x, y, z = _LMS_TO_XYZ.dot(*self._lms())
        return XYZ65(x, y, z, self.alpha)

    def to_oklab(self) -> Oklab:
        return self

    def to_oklch(self) -> Oklch:
        from colorcore.models.oklch import Oklch

        c, h = to_polar(self.a, self.b)
        return Oklch(self.l, c, h, self.alpha)
