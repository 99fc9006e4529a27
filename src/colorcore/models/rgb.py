"""
RGB color spaces and the RGB color model.

An RGBColorSpace is parameterized by a reference white, a transfer-function
pair and the 3x3 matrix taking linear-light RGB to CIE XYZ. The space is a
factory for RGB values and every RGB value carries the space it belongs to,
so conversions into and out of the space stay consistent.

Standard spaces (SRGB, LINEAR_SRGB, BT2020, ...) are module constants and
are also reachable by name through RGB_COLOR_SPACES.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from colorcore.core import illuminant
from colorcore.core.color import Color
from colorcore.core.illuminant import Illuminant
from colorcore.core.numeric import HUE_EPSILON, Matrix, normalize_deg, round_half_up
from colorcore.core.transfer import (
    BT709TransferFunctions,
    GammaTransferFunctions,
    LinearTransferFunctions,
    SRGBTransferFunctions,
    TransferFunctions,
)
from colorcore.formats.hex import RenderCondition, parse_hex

if TYPE_CHECKING:
    from colorcore.formats.packed import RGBInt
    from colorcore.models.ansi import Ansi16, Ansi256
    from colorcore.models.cmyk import CMYK
    from colorcore.models.hsl import HSL
    from colorcore.models.hsv import HSV
    from colorcore.models.hwb import HWB
    from colorcore.models.ictcp import ICtCp
    from colorcore.models.oklab import Oklab
    from colorcore.models.xyz import XYZ

logger = logging.getLogger(__name__)

Chromaticity = tuple[float, float]


def primaries_to_xyz_matrix(
    white_point: Illuminant,
    r: Chromaticity,
    g: Chromaticity,
    b: Chromaticity,
) -> Matrix:
    """
    Derive the linear RGB -> XYZ matrix from primary chromaticities.

    Each primary is scaled so that RGB (1, 1, 1) maps onto the white point.
    See http://www.brucelindbloom.com/Eqn_RGB_XYZ_Matrix.html
    """
    primaries = Matrix((
        (r[0] / r[1], g[0] / g[1], b[0] / b[1]),
        (1.0, 1.0, 1.0),
        ((1 - r[0] - r[1]) / r[1], (1 - g[0] - g[1]) / g[1], (1 - b[0] - b[1]) / b[1]),
    ))
    scale = primaries.inverse().dot(white_point.x, white_point.y, white_point.z)
    return primaries.scale_columns(scale)


@dataclass(frozen=True, repr=False)
class RGBColorSpace:
    """
    An RGB working space.

    Attributes:
        name: Display name, also the registry key
        white_point: Reference white the space is defined against
        transfer_functions: Component encode/decode pair
        matrix_to_xyz: Linear RGB -> XYZ
        matrix_from_xyz: XYZ -> linear RGB, derived as the inverse of
            matrix_to_xyz
    """

    name: str
    white_point: Illuminant
    transfer_functions: TransferFunctions
    matrix_to_xyz: Matrix
    matrix_from_xyz: Matrix = field(init=False, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.matrix_to_xyz, Matrix):
            object.__setattr__(self, "matrix_to_xyz", Matrix(self.matrix_to_xyz))
        object.__setattr__(self, "matrix_from_xyz", self.matrix_to_xyz.inverse())

    @classmethod
    def from_primaries(
        cls,
        name: str,
        white_point: Illuminant,
        transfer_functions: TransferFunctions,
        r: Chromaticity,
        g: Chromaticity,
        b: Chromaticity,
    ) -> RGBColorSpace:
        """Create a space from the xy chromaticities of its red, green and blue primaries."""
        return cls(name, white_point, transfer_functions, primaries_to_xyz_matrix(white_point, r, g, b))

    def __call__(self, r: float, g: float, b: float, alpha: float = 1.0) -> RGB:
        return RGB(float(r), float(g), float(b), float(alpha), self)

    def from255(self, r: int, g: int, b: int, alpha: int = 255) -> RGB:
        """Construct from integer channels in [0, 255]."""
        return self(r / 255.0, g / 255.0, b / 255.0, alpha / 255.0)

    def grey(self, amount: float, alpha: float = 1.0) -> RGB:
        """A neutral color at ``amount`` of white."""
        return self(amount, amount, amount, alpha)

    def from_hex(self, text: str) -> RGB:
        """Parse ``#rgb``, ``#rgba``, ``#rrggbb`` or ``#rrggbbaa`` (``#`` optional)."""
        return self.from255(*parse_hex(text))

    def __repr__(self) -> str:
        return f"RGBColorSpace({self.name!r})"


@dataclass(frozen=True)
class RGB(Color):
    """
    A color in an RGB space.

    Components are nominally in [0, 1] but may fall outside that range for
    wide-gamut or HDR intermediate results. Construct values through a
    space, e.g. ``SRGB(0.2, 0.4, 0.6)`` or ``SRGB.from255(51, 102, 153)``.
    """

    component_names = ("r", "g", "b")

    r: float
    g: float
    b: float
    alpha: float
    space: RGBColorSpace

    # -------------------------------------------------------------------------
    # Integer projections
    # -------------------------------------------------------------------------

    @property
    def red_int(self) -> int:
        return round_half_up(self.r * 255)

    @property
    def green_int(self) -> int:
        return round_half_up(self.g * 255)

    @property
    def blue_int(self) -> int:
        return round_half_up(self.b * 255)

    @property
    def alpha_int(self) -> int:
        """Alpha in [0, 255]; an undefined (NaN) alpha counts as opaque."""
        alpha = 1.0 if math.isnan(self.alpha) else self.alpha
        return round_half_up(alpha * 255)

    def to_rgb_int(self) -> RGBInt:
        """Pack into an ARGB integer. Components are clamped to [0, 255]."""
        from colorcore.formats.packed import RGBInt

        return RGBInt.from_rgb(self)

    def to_hex(self, with_number_sign: bool = True, render_alpha: RenderCondition = RenderCondition.AUTO) -> str:
        """Render as ``#rrggbb`` (or ``#rrggbbaa`` depending on ``render_alpha``)."""
        return self.to_rgb_int().to_hex(with_number_sign, render_alpha)

    # -------------------------------------------------------------------------
    # RGB family
    # -------------------------------------------------------------------------

    def to_rgb(self) -> RGB:
        return self

    def to_srgb(self) -> RGB:
        return self.convert_to(SRGB)

    def to_linear_srgb(self) -> RGB:
        return self.convert_to(LINEAR_SRGB)

    def convert_to(self, space: RGBColorSpace) -> RGB:
        """
        Convert to another RGB space using XYZ as the connection space.

        No chromatic adaptation is applied when the white points differ.
        """
        if self.space == space:
            return self
        f = SRGB.transfer_functions
        if self.space == SRGB and space == LINEAR_SRGB:
            return space(f.eotf(self.r), f.eotf(self.g), f.eotf(self.b), self.alpha)
        if self.space == LINEAR_SRGB and space == SRGB:
            return space(f.oetf(self.r), f.oetf(self.g), f.oetf(self.b), self.alpha)
        return self.to_xyz().to_rgb(space)

    def clamp(self) -> RGB:
        """
        Copy with every component cut into [0, 1].

        No gamut mapping is performed: out-of-gamut values are truncated.
        """
        return RGB(
            min(max(self.r, 0.0), 1.0),
            min(max(self.g, 0.0), 1.0),
            min(max(self.b, 0.0), 1.0),
            min(max(self.alpha, 0.0), 1.0),
            self.space,
        )

    # -------------------------------------------------------------------------
    # Conversions
    # -------------------------------------------------------------------------

    def to_xyz(self) -> XYZ:
        from colorcore.models.xyz import XYZColorSpace

        f = self.space.transfer_functions
        x, y, z = self.space.matrix_to_xyz.dot(f.eotf(self.r), f.eotf(self.g), f.eotf(self.b))
        return XYZColorSpace(self.space.white_point)(x, y, z, self.alpha)

    def _srgb_hue_min_max_chroma(self) -> tuple[float, float, float, float]:
        """Hue (degrees, NaN when achromatic), min, max and chroma of the sRGB channels."""
        c = self.to_srgb()
        r, g, b = c.r, c.g, c.b
        lo = min(r, g, b)
        hi = max(r, g, b)
        chroma = hi - lo

        if chroma < HUE_EPSILON:
            h = math.nan
        elif r == hi:
            h = (g - b) / chroma
        elif g == hi:
            h = 2 + (b - r) / chroma
        else:
            h = 4 + (r - g) / chroma

        return normalize_deg(h * 60), lo, hi, chroma

    def to_hsl(self) -> HSL:
        from colorcore.models.hsl import HSL

        h, lo, hi, chroma = self._srgb_hue_min_max_chroma()
        l = (lo + hi) / 2
        if hi == lo:
            s = 0.0
        elif l <= 0.5:
            s = chroma / (hi + lo)
        else:
            s = chroma / (2 - hi - lo)
        return HSL(h, s, l, self.alpha)

    def to_hsv(self) -> HSV:
        from colorcore.models.hsv import HSV

        h, _, hi, chroma = self._srgb_hue_min_max_chroma()
        s = 0.0 if hi == 0 else chroma / hi
        return HSV(h, s, hi, self.alpha)

    def to_hwb(self) -> HWB:
        # https://www.w3.org/TR/css-color-4/#rgb-to-hwb
        from colorcore.models.hwb import HWB

        h, lo, hi, _ = self._srgb_hue_min_max_chroma()
        return HWB(h, lo, 1.0 - hi, self.alpha)

    def to_cmyk(self) -> CMYK:
        from colorcore.models.cmyk import CMYK

        c = self.to_srgb()
        k = 1.0 - max(c.r, c.g, c.b)
        if k == 1.0:
            return CMYK(0.0, 0.0, 0.0, k, self.alpha)
        return CMYK(
            (1 - c.r - k) / (1 - k),
            (1 - c.g - k) / (1 - k),
            (1 - c.b - k) / (1 - k),
            k,
            self.alpha,
        )

    def to_oklab(self) -> Oklab:
        from colorcore.models.oklab import linear_srgb_to_oklab

        if self.space != SRGB:
            return self.to_xyz().to_oklab()
        f = self.space.transfer_functions
        return linear_srgb_to_oklab(f.eotf(self.r), f.eotf(self.g), f.eotf(self.b), self.alpha)

    def to_ictcp(self) -> ICtCp:
        from colorcore.models.ictcp import bt2020_to_ictcp

        if self.space == BT2020:
            return bt2020_to_ictcp(self)
        return self.to_xyz().to_ictcp()

    def to_ansi16(self) -> Ansi16:
        from colorcore.models.ansi import Ansi16

        c = self.to_srgb().clamp()
        value = round_half_up(c.to_hsv().v * 100)
        if value == 30:
            return Ansi16(30)
        v = value // 50

        ansi = 30 + ((round_half_up(c.b) * 4) | (round_half_up(c.g) * 2) | round_half_up(c.r))
        return Ansi16(ansi + 60 if v == 2 else ansi)

    def to_ansi256(self) -> Ansi256:
        from colorcore.models.ansi import Ansi256

        c = self.to_srgb().clamp()
        ri, gi, bi = c.red_int, c.green_int, c.blue_int
        if ri == gi == bi:
            if ri < 8:
                code = 16
            elif ri > 248:
                code = 231
            else:
                code = round_half_up((ri - 8) / 247 * 24) + 232
        else:
            code = (
                16
                + 36 * round_half_up(c.r * 5)
                + 6 * round_half_up(c.g * 5)
                + round_half_up(c.b * 5)
            )
        return Ansi256(code)


# =============================================================================
# Standard spaces
# =============================================================================

_SRGB_PRIMARIES = ((0.640, 0.330), (0.300, 0.600), (0.150, 0.060))
_P3_PRIMARIES = ((0.680, 0.320), (0.265, 0.690), (0.150, 0.060))

SRGB = RGBColorSpace.from_primaries("sRGB", illuminant.D65, SRGBTransferFunctions(), *_SRGB_PRIMARIES)

LINEAR_SRGB = RGBColorSpace.from_primaries(
    "Linear sRGB", illuminant.D65, LinearTransferFunctions(), *_SRGB_PRIMARIES
)

BT709 = RGBColorSpace.from_primaries("BT.709", illuminant.D65, BT709TransferFunctions(), *_SRGB_PRIMARIES)

BT2020 = RGBColorSpace.from_primaries(
    "BT.2020",
    illuminant.D65,
    BT709TransferFunctions(),
    (0.708, 0.292),
    (0.170, 0.797),
    (0.131, 0.046),
)

DISPLAY_P3 = RGBColorSpace.from_primaries("Display P3", illuminant.D65, SRGBTransferFunctions(), *_P3_PRIMARIES)

DCI_P3 = RGBColorSpace.from_primaries("DCI P3", illuminant.DCI_P3, GammaTransferFunctions(2.6), *_P3_PRIMARIES)

ADOBE_RGB = RGBColorSpace.from_primaries(
    "Adobe RGB",
    illuminant.D65,
    GammaTransferFunctions(563.0 / 256.0),
    (0.64, 0.33),
    (0.21, 0.71),
    (0.15, 0.06),
)

# ACES AP0 primaries
ACES = RGBColorSpace.from_primaries(
    "ACES2065-1",
    illuminant.ACES,
    LinearTransferFunctions(),
    (0.7347, 0.2653),
    (0.0, 1.0),
    (0.0001, -0.0770),
)

# ACES AP1 primaries
ACES_CG = RGBColorSpace.from_primaries(
    "ACEScg",
    illuminant.ACES,
    LinearTransferFunctions(),
    (0.713, 0.293),
    (0.165, 0.830),
    (0.128, 0.044),
)


RGB_COLOR_SPACES: dict[str, RGBColorSpace] = {
    space.name: space
    for space in (SRGB, LINEAR_SRGB, BT709, BT2020, DISPLAY_P3, DCI_P3, ADOBE_RGB, ACES, ACES_CG)
}


def register_rgb_color_space(space: RGBColorSpace) -> RGBColorSpace:
    """
    Make a custom space reachable through get_rgb_color_space.

    Re-registering a name replaces the previous entry.
    """
    logger.debug("Registering RGB color space %r (white point %r)", space.name, space.white_point)
    RGB_COLOR_SPACES[space.name] = space
    return space


def get_rgb_color_space(name: str) -> RGBColorSpace:
    """Look up a registered space by name (case-insensitive)."""
    for key, space in RGB_COLOR_SPACES.items():
        if key.lower() == name.lower():
            return space
    raise KeyError(f"Unknown RGB color space: {name}. Known: {sorted(RGB_COLOR_SPACES)}")


def list_rgb_color_spaces() -> list[str]:
    """Names of every registered RGB space."""
    return sorted(RGB_COLOR_SPACES)
